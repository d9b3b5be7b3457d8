"""
Ranking services built on top of the scorers.
"""
from .ranking_service import (
    RankingService,
    DEFAULT_LIMIT,
    get_default_service,
    calculate_scores,
    get_top_items,
    get_items_by_category,
)

__all__ = [
    'RankingService',
    'DEFAULT_LIMIT',
    'get_default_service',
    'calculate_scores',
    'get_top_items',
    'get_items_by_category',
]
