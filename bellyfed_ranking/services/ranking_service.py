# bellyfed_ranking/services/ranking_service.py
"""
Ranking service - scores a user's ranked dishes and answers top-N queries.

Every call recomputes from the items passed in. The service holds only
its scorers' read-only configuration, so one instance can be shared
freely, and the module-level functions use a default instance.
"""
import logging
from typing import List, Dict, Any, Optional, Sequence

from bellyfed_ranking.models import RankedItem, ScoredItem, RankingCategory, Category
from bellyfed_ranking.models.scoring_context import ScoringContext
from bellyfed_ranking.scorers import create_scorer

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 5


def _validate_limit(limit: Any) -> int:
    """
    Check a result limit is a non-negative integer.

    Raises:
        ValueError: If limit is negative or not an integer
    """
    if isinstance(limit, bool) or not isinstance(limit, int):
        raise ValueError(f"Limit must be an integer, got {limit!r}")
    if limit < 0:
        raise ValueError(f"Limit must be non-negative, got {limit}")
    return limit


def _sort_by_score(items: List[ScoredItem]) -> List[ScoredItem]:
    """Sort descending by total score; equal scores keep input order."""
    return sorted(items, key=lambda item: item.total_score, reverse=True)


class RankingService:
    """
    Computes total scores for ranked dishes.

    total_score = normalized positional points + category interaction weight

    Configuration is a dict with one section per scorer, as produced by
    WeightsManager.get_service_config():
        {"positional": {"exponent": 1.5}, "interaction": {"weights": {...}}}
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize service.

        Args:
            config: Per-scorer config sections (defaults when None)

        Raises:
            ValueError: If a config section holds invalid values
        """
        config = config or {}
        self.positional = create_scorer("positional", config.get("positional"))
        self.interaction = create_scorer("interaction", config.get("interaction"))

    def calculate_scores(self, items: Sequence[RankedItem]) -> List[ScoredItem]:
        """
        Score every item in one batch.

        Normalization spans the whole batch, so pass one menu item's
        items at a time (get_top_items does this for you).

        Args:
            items: Ranked items; TOP items are ranked by their order here

        Returns:
            One ScoredItem per input item, same order
        """
        context = ScoringContext(items=list(items))
        if not context.has_items():
            return []

        positional = self.positional.calculate_score(context)
        interaction = self.interaction.calculate_score(context)
        ranking_points = positional.details["ranking_points"]

        return [
            ScoredItem.from_ranked(
                item,
                ranking_points=ranking_points[i],
                normalized_points=positional.point_for(i),
                interaction_points=interaction.point_for(i),
            )
            for i, item in enumerate(context.items)
        ]

    def score_menu_item(self, items: Sequence[RankedItem], menu_item: str) -> List[ScoredItem]:
        """
        Score the items belonging to one menu item.

        Args:
            items: Ranked items for any number of menu items
            menu_item: Menu item to keep

        Returns:
            Scored items for menu_item, input order
        """
        menu_items = [item for item in items if item.menu_item == menu_item]
        scored = self.calculate_scores(menu_items)
        logger.debug("Scored %d item(s) for menu item %r", len(scored), menu_item)
        return scored

    def get_top_items(self, items: Sequence[RankedItem], menu_item: str,
                      limit: int = DEFAULT_LIMIT) -> List[ScoredItem]:
        """
        Get the highest scoring items for a menu item.

        Args:
            items: Ranked items
            menu_item: Menu item to rank within
            limit: Maximum number of items to return

        Returns:
            Up to limit items, best first

        Raises:
            ValueError: If limit is negative or not an integer
        """
        limit = _validate_limit(limit)
        return _sort_by_score(self.score_menu_item(items, menu_item))[:limit]

    def get_items_by_category(self, items: Sequence[RankedItem], menu_item: str,
                              category: Category) -> List[ScoredItem]:
        """
        Get the items of one category for a menu item.

        Scores are computed across the whole menu item before filtering.

        Args:
            items: Ranked items
            menu_item: Menu item to filter by
            category: Category to filter by (member, name or label)

        Returns:
            Matching scored items, input order
        """
        wanted = RankingCategory.parse(category) or category
        return [
            item for item in self.score_menu_item(items, menu_item)
            if item.category == wanted
        ]

    def get_trending_items(self, items: Sequence[RankedItem], menu_item: str,
                           limit: int = DEFAULT_LIMIT) -> List[ScoredItem]:
        """Get the best scoring TRENDING items for a menu item."""
        return self._get_ranked_category(items, menu_item, RankingCategory.TRENDING, limit)

    def get_recommended_items(self, items: Sequence[RankedItem], menu_item: str,
                              limit: int = DEFAULT_LIMIT) -> List[ScoredItem]:
        """Get the best scoring RECOMMENDED items for a menu item."""
        return self._get_ranked_category(items, menu_item, RankingCategory.RECOMMENDED, limit)

    def get_popular_items(self, items: Sequence[RankedItem], menu_item: str,
                          limit: int = DEFAULT_LIMIT) -> List[ScoredItem]:
        """Get the best scoring POPULAR items for a menu item."""
        return self._get_ranked_category(items, menu_item, RankingCategory.POPULAR, limit)

    # =========================================================================
    # Helper methods
    # =========================================================================

    def _get_ranked_category(self, items: Sequence[RankedItem], menu_item: str,
                             category: RankingCategory, limit: int) -> List[ScoredItem]:
        """
        Filter to one category, sort by score and truncate.

        Args:
            items: Ranked items
            menu_item: Menu item to filter by
            category: Category to keep
            limit: Maximum number of items to return

        Returns:
            Up to limit items, best first
        """
        limit = _validate_limit(limit)
        matches = self.get_items_by_category(items, menu_item, category)
        return _sort_by_score(matches)[:limit]


_default_service: Optional[RankingService] = None


def get_default_service() -> RankingService:
    """Get a RankingService built from the default weights."""
    global _default_service
    if _default_service is None:
        _default_service = RankingService()
    return _default_service


def calculate_scores(items: Sequence[RankedItem]) -> List[ScoredItem]:
    """Score a batch with the default weights. See RankingService.calculate_scores."""
    return get_default_service().calculate_scores(items)


def get_top_items(items: Sequence[RankedItem], menu_item: str,
                  limit: int = DEFAULT_LIMIT) -> List[ScoredItem]:
    """Top items with the default weights. See RankingService.get_top_items."""
    return get_default_service().get_top_items(items, menu_item, limit)


def get_items_by_category(items: Sequence[RankedItem], menu_item: str,
                          category: Category) -> List[ScoredItem]:
    """Items in a category with the default weights. See RankingService.get_items_by_category."""
    return get_default_service().get_items_by_category(items, menu_item, category)
