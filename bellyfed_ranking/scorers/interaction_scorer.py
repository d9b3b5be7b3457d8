# bellyfed_ranking/scorers/interaction_scorer.py
"""
Interaction Scorer - fixed bonus/penalty per category.

Categories express how a user interacted with a dish: a dissatisfying
visit pulls the dish down, a plan to visit nudges it up. TOP gets no
interaction weight since its reward comes from the positional scorer.
"""
from types import MappingProxyType
from typing import Dict, Any, Optional

from .base_scorer import Scorer, _is_finite_number
from bellyfed_ranking.models.ranked_item import RankingCategory, Category
from bellyfed_ranking.models.scoring_context import ScoringContext, ScoringResult

DEFAULT_INTERACTION_WEIGHTS = MappingProxyType({
    RankingCategory.DISSATISFIED: -1.0,
    RankingCategory.SECOND_CHANCE: -0.5,
    RankingCategory.PLAN_TO_VISIT: 0.3,
    RankingCategory.VISITED: 0.0,
    RankingCategory.TOP: 0.0,
})


class InteractionScorer(Scorer):
    """
    Looks up a fixed weight for each item's category.

    Categories outside the weight table (including unrecognized labels)
    score 0.0.

    Configuration parameters (from the weights file):
    - weights: Dict of category name -> weight, overriding the defaults
      (e.g. {"PLAN_TO_VISIT": 0.25})
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        super().__init__(config)
        self._weights = self._build_weights(self.config.get("weights") or {})

    @property
    def name(self) -> str:
        return "interaction"

    @property
    def weights(self) -> Dict[RankingCategory, float]:
        """Copy of the effective weight table."""
        return dict(self._weights)

    def weight_of(self, category: Category) -> float:
        """
        Get the interaction weight for a category.

        Args:
            category: RankingCategory or raw label

        Returns:
            Table weight, or 0.0 for any category not in the table
        """
        parsed = RankingCategory.parse(category)
        if parsed is None or parsed not in self._weights:
            return 0.0
        return self._weights[parsed]

    def calculate_score(self, context: ScoringContext) -> ScoringResult:
        """
        Score each item by its category weight.

        Args:
            context: Batch of items

        Returns:
            ScoringResult with one weight per item
        """
        points = [self.weight_of(item.category) for item in context.items]

        category_counts: Dict[str, int] = {}
        for item in context.items:
            label = item.category_label
            category_counts[label] = category_counts.get(label, 0) + 1

        return ScoringResult(
            scorer_name=self.name,
            points=points,
            details={
                "category_counts": category_counts,
                "total_points": sum(points),
            }
        )

    # =========================================================================
    # Helper methods
    # =========================================================================

    def _build_weights(self, overrides: Dict[str, Any]) -> Dict[RankingCategory, float]:
        """
        Merge configured overrides onto the default weight table.

        Args:
            overrides: Dict keyed by category name or label

        Returns:
            Effective weight table

        Raises:
            ValueError: If a key is not a category or a weight is not a finite number
        """
        if not isinstance(overrides, dict):
            raise ValueError(f"interaction: 'weights' must be an object, got {overrides!r}")

        weights = dict(DEFAULT_INTERACTION_WEIGHTS)

        for key, value in overrides.items():
            category = RankingCategory.parse(key)
            if category is None:
                raise ValueError(f"interaction: unknown category in weights: {key!r}")
            if not _is_finite_number(value):
                raise ValueError(
                    f"interaction: weight for {key} must be a finite number, got {value!r}"
                )
            weights[category] = float(value)

        return weights
