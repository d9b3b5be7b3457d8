# bellyfed_ranking/models/scoring_context.py
"""
Scoring context models for the ranking engine.

A scorer always sees one batch of items (normally one user's items for a
single menu item) and returns one point value per item in that batch.
"""
from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional

from .ranked_item import RankedItem


@dataclass
class ScoringContext:
    """
    Batch of ranked items being scored together.

    Normalization is scoped to this batch, so callers build one context
    per menu item.
    """

    items: List[RankedItem] = field(default_factory=list)
    menu_item: Optional[str] = None  # None when the caller did not scope the batch

    def has_items(self) -> bool:
        """Check if batch has any items."""
        return len(self.items) > 0

    def item_count(self) -> int:
        """Get number of items in batch."""
        return len(self.items)

    def top_indices(self) -> List[int]:
        """
        Get indices of TOP items, in input order.

        Returns:
            List of indices into self.items
        """
        return [i for i, item in enumerate(self.items) if item.is_top()]


@dataclass
class ScoringResult:
    """
    Result from a scorer's evaluation of a batch.

    Contains:
    - One point value per context item (same order)
    - Detailed breakdown for debugging
    """

    scorer_name: str
    points: List[float]
    details: Dict[str, Any] = field(default_factory=dict)

    def point_for(self, index: int) -> float:
        """Get points for the item at index."""
        return self.points[index]

    def total(self) -> float:
        """Sum of all points in the batch."""
        return sum(self.points)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"{self.scorer_name}: {len(self.points)} item(s), total {self.total():.3f}"
