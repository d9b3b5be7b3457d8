"""
Data models for the ranking engine.
"""
from .ranked_item import (
    RankingCategory, RankedItem, ScoredItem, Category,
    MIN_RANK_POSITION, MAX_RANK_POSITION,
)
from .scoring_context import ScoringContext, ScoringResult

__all__ = [
    # Item models
    'RankingCategory',
    'RankedItem',
    'ScoredItem',
    'Category',
    'MIN_RANK_POSITION',
    'MAX_RANK_POSITION',
    # Scoring models
    'ScoringContext',
    'ScoringResult',
]
