"""
Data access layer for the ranking engine.

Provides the rankings file loader and the weights configuration manager.
"""
from .rankings_loader import RankingsLoader, items_from_dataframe, REQUIRED_COLUMNS
from .weights_manager import WeightsManager

__all__ = [
    'RankingsLoader',
    'WeightsManager',
    'items_from_dataframe',
    'REQUIRED_COLUMNS',
]
