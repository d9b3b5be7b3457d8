# bellyfed_ranking/models/ranked_item.py
"""
Core data models for ranked dishes.

A RankedItem is one user-categorized dish within a single menu item
grouping (e.g. "Best Char Kway Teow"). A ScoredItem is the same item
after the ranking engine has attached its score breakdown.
"""
import numbers
from enum import Enum
from dataclasses import dataclass
from typing import Optional, Dict, Any, Union

MIN_RANK_POSITION = 1
MAX_RANK_POSITION = 5


class RankingCategory(Enum):
    """
    A user's classification of a dish.

    Values are the display labels shown in the app.
    """
    TOP = "Top"
    TRENDING = "Trending"
    RECOMMENDED = "Recommended"
    POPULAR = "Popular"
    GENERAL = "General"
    VISITED = "Visited"
    SECOND_CHANCE = "Second Chance"
    DISSATISFIED = "Dissatisfied"
    PLAN_TO_VISIT = "Plan to Visit"

    @classmethod
    def parse(cls, value: Any) -> Optional['RankingCategory']:
        """
        Resolve a category from a member, name or display label.

        Args:
            value: RankingCategory, "PLAN_TO_VISIT", "Plan to Visit", "plan-to-visit", ...

        Returns:
            Matching RankingCategory, or None if unrecognized

        Example:
            >>> RankingCategory.parse("second chance")
            <RankingCategory.SECOND_CHANCE: 'Second Chance'>
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None

        key = value.strip().upper().replace("-", "_").replace(" ", "_")
        return cls.__members__.get(key)


Category = Union[RankingCategory, str]


def _coerce_rank_position(value: Any) -> Optional[int]:
    """
    Convert a loosely-typed rank position to int (or None).

    Accepts ints, integral floats and numeric strings. Missing values
    (None, empty string, NaN) become None.
    """
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
        try:
            value = float(value)
        except ValueError as e:
            raise ValueError(f"Invalid rank position: {value!r}") from e
    if isinstance(value, numbers.Integral) and not isinstance(value, bool):
        return int(value)
    if isinstance(value, float):
        if value != value:  # NaN
            return None
        if not value.is_integer():
            raise ValueError(f"Invalid rank position: {value!r}")
        return int(value)
    return value


@dataclass
class RankedItem:
    """
    One categorized dish for a single menu item.

    Attributes:
        id: Unique identifier within the working set
        name: Display label (not used in scoring)
        category: RankingCategory, or the raw label if unrecognized
        menu_item: Grouping key that scoring is scoped to
        rank_position: Optional 1-5 position, only meaningful for TOP

    Example:
        >>> item = RankedItem("d1", "Lucky Plaza CKT", "Top", "ckt", 1)
        >>> item.category
        <RankingCategory.TOP: 'Top'>
    """
    id: str
    name: str
    category: Category
    menu_item: str
    rank_position: Optional[int] = None

    def __post_init__(self):
        """Parse category and validate rank position."""
        self.id = str(self.id)
        parsed = RankingCategory.parse(self.category)
        if parsed is not None:
            self.category = parsed

        if self.rank_position is not None:
            if isinstance(self.rank_position, bool) or not isinstance(self.rank_position, int):
                raise ValueError(
                    f"Rank position must be an integer, got {self.rank_position!r}"
                )
            if not MIN_RANK_POSITION <= self.rank_position <= MAX_RANK_POSITION:
                raise ValueError(
                    f"Rank position must be between {MIN_RANK_POSITION} and "
                    f"{MAX_RANK_POSITION}, got {self.rank_position}"
                )

    def is_top(self) -> bool:
        """Check if item is in the TOP category."""
        return self.category is RankingCategory.TOP

    @property
    def category_label(self) -> str:
        """Display label for the category (raw string if unrecognized)."""
        if isinstance(self.category, RankingCategory):
            return self.category.value
        return str(self.category)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary format (for JSON/CSV serialization).

        Returns:
            Dictionary keyed by column name
        """
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category_label,
            "menu_item": self.menu_item,
            "rank_position": self.rank_position,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RankedItem':
        """
        Create from dictionary format.

        Args:
            data: Dictionary with 'id', 'name', 'category', 'menu_item' (or 'menuItem')
                  and optional 'rank_position' (or 'rankPosition')

        Returns:
            RankedItem instance

        Raises:
            ValueError: If id or menu item is missing, or position is invalid
        """
        item_id = data.get("id")
        menu_item = data.get("menu_item", data.get("menuItem"))
        if item_id is None or menu_item is None:
            raise ValueError(f"Ranked item needs 'id' and 'menu_item': {data}")

        position = data.get("rank_position", data.get("rankPosition"))
        return cls(
            id=str(item_id),
            name=str(data.get("name") or ""),
            category=data.get("category", ""),
            menu_item=str(menu_item),
            rank_position=_coerce_rank_position(position),
        )

    def __str__(self) -> str:
        """String representation."""
        return f"{self.name} [{self.category_label}]"


@dataclass
class ScoredItem(RankedItem):
    """
    A RankedItem with its score breakdown attached.

    Attributes:
        ranking_points: Raw positional points (0.0 outside TOP)
        normalized_points: ranking_points / sum over the TOP set (0.0 outside TOP)
        interaction_points: Category weight (may be negative)
        total_score: normalized_points + interaction_points
    """
    ranking_points: float = 0.0
    normalized_points: float = 0.0
    interaction_points: float = 0.0
    total_score: float = 0.0

    @classmethod
    def from_ranked(cls, item: RankedItem, ranking_points: float,
                    normalized_points: float, interaction_points: float) -> 'ScoredItem':
        """
        Build a scored copy of a ranked item.

        total_score is always derived here, never passed in.
        """
        return cls(
            id=item.id,
            name=item.name,
            category=item.category,
            menu_item=item.menu_item,
            rank_position=item.rank_position,
            ranking_points=ranking_points,
            normalized_points=normalized_points,
            interaction_points=interaction_points,
            total_score=normalized_points + interaction_points,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary including score breakdown."""
        data = super().to_dict()
        data.update({
            "ranking_points": self.ranking_points,
            "normalized_points": self.normalized_points,
            "interaction_points": self.interaction_points,
            "total_score": self.total_score,
        })
        return data

    def __str__(self) -> str:
        """String representation showing total score."""
        return f"{self.name} [{self.category_label}]: {self.total_score:.3f}"
