# bellyfed_ranking/data/weights_manager.py
"""
Weights manager for ranking engine parameters.

Manages ranking_weights.json with the positional exponent and the
per-category interaction weights externalized for configuration.

Example file:
    {
        "positional": {"exponent": 1.5, "order_by_rank_position": false},
        "interaction": {"weights": {"PLAN_TO_VISIT": 0.3, "DISSATISFIED": -1.0}}
    }
"""
import json
import logging
from pathlib import Path
from typing import Optional, Dict, Any, List

from bellyfed_ranking.scorers import create_scorer, get_available_scorers

logger = logging.getLogger(__name__)


class WeightsManager:
    """
    Manages ranking weights configuration.

    A missing file means the built-in defaults are used. If the file is
    invalid, errors are collected and the defaults are used instead.
    """

    def __init__(self, filepath: Path):
        """
        Initialize weights manager.

        Args:
            filepath: Path to weights JSON file
        """
        self.filepath = Path(filepath)
        self._weights: Optional[Dict[str, Any]] = None
        self._validation_errors: List[str] = []
        self._is_valid = False

    def load(self) -> bool:
        """
        Load and validate weights from disk.

        Returns:
            True if loaded (or defaulted) and valid, False otherwise
        """
        self._validation_errors.clear()
        self._is_valid = False
        self._weights = None

        # No file - use defaults
        if not self.filepath.exists():
            logger.debug("Weights file not found, using defaults: %s", self.filepath)
            self._weights = {}
            self._is_valid = True
            return True

        # Load JSON
        try:
            with open(self.filepath, 'r', encoding='utf-8') as f:
                self._weights = json.load(f)
        except json.JSONDecodeError as e:
            self._validation_errors.append(
                f"Invalid JSON in weights file: {e}"
            )
            return False
        except OSError as e:
            self._validation_errors.append(
                f"Error reading weights file: {e}"
            )
            return False

        # Validate structure
        self._validate_structure()

        if self._validation_errors:
            for error in self._validation_errors:
                logger.warning("Weights file %s: %s", self.filepath, error)
            self._weights = None
            return False

        self._is_valid = True
        return True

    @property
    def is_valid(self) -> bool:
        """Check if weights are loaded and valid."""
        return self._is_valid

    @property
    def validation_errors(self) -> List[str]:
        """Get list of validation error messages."""
        return self._validation_errors.copy()

    def get_error_message(self) -> str:
        """
        Get formatted error message for display.

        Returns:
            Single-line error summary
        """
        if not self._validation_errors:
            return "Weights not loaded"

        if len(self._validation_errors) == 1:
            return self._validation_errors[0]

        return f"Multiple errors in weights file ({len(self._validation_errors)} issues)"

    @property
    def weights(self) -> Optional[Dict[str, Any]]:
        """Get raw weights dict (None if invalid)."""
        return self._weights if self._is_valid else None

    def get_section(self, scorer_name: str) -> Dict[str, Any]:
        """
        Get config section for one scorer.

        Returns:
            Section dict (empty when invalid or absent)
        """
        if not self.is_valid:
            return {}
        return dict(self._weights.get(scorer_name) or {})

    def get_service_config(self) -> Dict[str, Dict[str, Any]]:
        """
        Get config in the form RankingService takes.

        Returns:
            Dict of scorer name -> section (defaults when invalid)
        """
        return {name: self.get_section(name) for name in get_available_scorers()}

    # =========================================================================
    # Validation
    # =========================================================================

    def _validate_structure(self) -> None:
        """Validate loaded weights, collecting errors."""
        if not isinstance(self._weights, dict):
            self._validation_errors.append("Weights file must contain a JSON object")
            return

        known = get_available_scorers()
        for key in self._weights:
            if key not in known:
                self._validation_errors.append(
                    f"Unknown section '{key}' (expected one of: {', '.join(known)})"
                )

        for name in known:
            section = self._weights.get(name)
            if section is None:
                continue
            if not isinstance(section, dict):
                self._validation_errors.append(f"Section '{name}' must be an object")
                continue

            # Scorers validate their own parameters
            try:
                create_scorer(name, section)
            except ValueError as e:
                self._validation_errors.append(str(e))
