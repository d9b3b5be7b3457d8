"""
Utility modules for the ranking engine.
"""
from .table_renderer import build_scores_table, render_scored_items, console

__all__ = [
    'build_scores_table',
    'render_scored_items',
    'console',
]
