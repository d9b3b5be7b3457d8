# bellyfed_ranking/scorers/positional_scorer.py
"""
Positional Scorer - rewards a user's TOP picks by rank order.

The TOP items of a batch are treated as a fully ordered list. The item
at 1-indexed position p out of n receives (n + 1 - p) ** exponent raw
points, so the gap between 1st and 2nd is wider than between 4th and
5th. Raw points are then normalized to sum to 1 across the TOP set.
"""
import logging
from typing import List

from .base_scorer import Scorer
from bellyfed_ranking.models.scoring_context import ScoringContext, ScoringResult

logger = logging.getLogger(__name__)

DEFAULT_EXPONENT = 1.5


def positional_points(count: int, exponent: float = DEFAULT_EXPONENT) -> List[float]:
    """
    Raw points for positions 1..count.

    Args:
        count: Number of ranked positions filled
        exponent: Power-law exponent

    Returns:
        List of raw points, best position first

    Example:
        >>> positional_points(3)
        [5.196152422706632, 2.8284271247461903, 1.0]
    """
    return [float((count + 1 - position) ** exponent) for position in range(1, count + 1)]


def normalize(values: List[float]) -> List[float]:
    """
    Rescale values so they sum to 1.

    Returns all zeros when the sum is zero (including the empty list).
    """
    total = sum(values)
    if total == 0:
        return [0.0 for _ in values]
    return [value / total for value in values]


class PositionalScorer(Scorer):
    """
    Scores TOP items by their position within the batch.

    Non-TOP items always get 0 points.

    Configuration parameters (from the weights file):
    - exponent: Power-law exponent, must be > 0 (default 1.5)
    - order_by_rank_position: Sort TOP items by their stored rank_position
      before assigning points (default False, input order is authoritative)
    """

    def __init__(self, config=None):
        super().__init__(config)
        self.exponent = self._get_number("exponent", DEFAULT_EXPONENT)
        if self.exponent <= 0:
            raise ValueError(f"positional: 'exponent' must be > 0, got {self.exponent}")
        self.order_by_rank_position = self._get_flag("order_by_rank_position", False)

    @property
    def name(self) -> str:
        return "positional"

    def calculate_score(self, context: ScoringContext) -> ScoringResult:
        """
        Assign normalized positional points to the TOP items of a batch.

        Args:
            context: Batch of items

        Returns:
            ScoringResult whose points are the normalized values; raw
            points are in details["ranking_points"]
        """
        count = context.item_count()
        top = self._ordered_top_indices(context)

        if not top:
            return ScoringResult(
                scorer_name=self.name,
                points=[0.0] * count,
                details={
                    "reason": "No TOP items in batch",
                    "top_count": 0,
                    "total_points": 0.0,
                    "ranking_points": [0.0] * count,
                }
            )

        raw = positional_points(len(top), self.exponent)
        normalized = normalize(raw)

        ranking_points = [0.0] * count
        normalized_points = [0.0] * count
        for index, raw_value, norm_value in zip(top, raw, normalized):
            ranking_points[index] = raw_value
            normalized_points[index] = norm_value

        logger.debug(
            "Positional points for %d TOP item(s) (menu item %r): total %.4f",
            len(top), context.menu_item, sum(raw)
        )

        return ScoringResult(
            scorer_name=self.name,
            points=normalized_points,
            details={
                "top_count": len(top),
                "exponent": self.exponent,
                "total_points": sum(raw),
                "ranking_points": ranking_points,
            }
        )

    # =========================================================================
    # Helper methods
    # =========================================================================

    def _ordered_top_indices(self, context: ScoringContext) -> List[int]:
        """
        Get TOP indices in the order positions are assigned.

        Input order by default. With order_by_rank_position, a stable
        sort on rank_position puts unpositioned items last.
        """
        top = context.top_indices()
        if not self.order_by_rank_position:
            return top

        def sort_key(index: int):
            position = context.items[index].rank_position
            return (position is None, position or 0)

        return sorted(top, key=sort_key)
