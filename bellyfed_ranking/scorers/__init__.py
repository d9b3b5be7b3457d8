# bellyfed_ranking/scorers/__init__.py
"""
Scorer modules for the ranking engine.

Scorers evaluate a BATCH of ranked items (one menu item at a time) and
return one point value per item. The service adds the components up to
get each item's total score.
"""
from .base_scorer import Scorer
from .positional_scorer import PositionalScorer, DEFAULT_EXPONENT, positional_points, normalize
from .interaction_scorer import InteractionScorer, DEFAULT_INTERACTION_WEIGHTS

# Scorer registry - maps scorer names to classes
SCORER_REGISTRY = {
    "positional": PositionalScorer,
    "interaction": InteractionScorer,
}


def create_scorer(scorer_name: str, config=None):
    """
    Factory function to create scorer instances.

    Args:
        scorer_name: Name of scorer (e.g., "positional")
        config: Scorer-specific config section from the weights file

    Returns:
        Scorer instance

    Raises:
        ValueError: If scorer_name not found in registry
    """
    if scorer_name not in SCORER_REGISTRY:
        raise ValueError(
            f"Unknown scorer: {scorer_name}. "
            f"Available: {list(SCORER_REGISTRY.keys())}"
        )

    scorer_class = SCORER_REGISTRY[scorer_name]
    return scorer_class(config)


def get_available_scorers():
    """
    Get list of available scorer names.

    Returns:
        List of scorer names
    """
    return list(SCORER_REGISTRY.keys())


__all__ = [
    'Scorer',
    'PositionalScorer',
    'InteractionScorer',
    'DEFAULT_EXPONENT',
    'DEFAULT_INTERACTION_WEIGHTS',
    'positional_points',
    'normalize',
    'SCORER_REGISTRY',
    'create_scorer',
    'get_available_scorers',
]
