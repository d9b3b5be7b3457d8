# bellyfed_ranking/scorers/base_scorer.py
"""
Base scorer class for the ranking engine.

Defines the interface all scorers must implement. Scorers evaluate a
BATCH of ranked items (one menu item at a time) and return one point
value per item.
"""
import math
from abc import ABC, abstractmethod
from typing import Dict, Any, Optional

from bellyfed_ranking.models.scoring_context import ScoringContext, ScoringResult


class Scorer(ABC):
    """
    Abstract base class for ranking scorers.

    Each scorer contributes one component of an item's total score:
    - Positional: power-law points for TOP picks, normalized to sum to 1
    - Interaction: fixed bonus/penalty per category

    Scorers hold only read-only configuration, so a single instance can
    be shared between callers and threads.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize scorer.

        Args:
            config: Scorer-specific configuration section from the weights file
        """
        self.config = dict(config or {})

    @abstractmethod
    def calculate_score(self, context: ScoringContext) -> ScoringResult:
        """
        Calculate points for every item in a batch.

        Scorers should:
        1. Examine items from context.items
        2. Return exactly one point value per item, in input order
        3. Never raise for unrecognized categories

        Args:
            context: Scoring context with the batch of items

        Returns:
            ScoringResult with points list and details dict
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Scorer name (matches config key).

        Example: "positional", "interaction"
        """
        pass

    # =========================================================================
    # Helper methods available to all scorers
    # =========================================================================

    def _get_number(self, key: str, default: float) -> float:
        """
        Read a numeric config value.

        Args:
            key: Config key
            default: Value used when key is absent

        Returns:
            Config value as float

        Raises:
            ValueError: If the configured value is not a finite number
        """
        value = self.config.get(key, default)
        if not _is_finite_number(value):
            raise ValueError(f"{self.name}: '{key}' must be a finite number, got {value!r}")
        return float(value)

    def _get_flag(self, key: str, default: bool) -> bool:
        """
        Read a boolean config value.

        Raises:
            ValueError: If the configured value is not a JSON true/false
        """
        value = self.config.get(key, default)
        if not isinstance(value, bool):
            raise ValueError(f"{self.name}: '{key}' must be true or false, got {value!r}")
        return value


def _is_finite_number(value: Any) -> bool:
    """Check value is an int/float (not bool) and finite."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)
