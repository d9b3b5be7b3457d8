"""
Bellyfed ranking engine.

Turns a user's categorized dishes into normalized scores and answers
top-N and per-category queries per menu item.
"""
from .models import RankingCategory, RankedItem, ScoredItem
from .services import RankingService, calculate_scores, get_top_items, get_items_by_category

__version__ = "0.1.0"

__all__ = [
    'RankingCategory',
    'RankedItem',
    'ScoredItem',
    'RankingService',
    'calculate_scores',
    'get_top_items',
    'get_items_by_category',
]
