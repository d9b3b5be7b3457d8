"""
Tests for scorers and the scorer registry.
"""
import math

import pytest
from bellyfed_ranking.models import RankedItem, RankingCategory, ScoringContext
from bellyfed_ranking.scorers import (
    PositionalScorer, InteractionScorer,
    positional_points, normalize,
    create_scorer, get_available_scorers,
)


def _items(*categories):
    """Build one ranked item per category, ids a, b, c..."""
    return [
        RankedItem(chr(ord("a") + i), f"Dish {i}", category, "ckt")
        for i, category in enumerate(categories)
    ]


# Positional point function
def test_positional_points_three():
    """Test raw points for three positions."""
    points = positional_points(3)
    assert points == pytest.approx([3 ** 1.5, 2 ** 1.5, 1.0])
    assert points[0] == pytest.approx(5.196, abs=1e-3)
    assert points[1] == pytest.approx(2.828, abs=1e-3)


def test_positional_points_single():
    """Test a single position gets exactly 1 point."""
    assert positional_points(1) == [1.0]


def test_positional_points_empty():
    """Test zero positions gives no points."""
    assert positional_points(0) == []


def test_positional_points_strictly_decreasing():
    """Test earlier positions always earn more."""
    for count in range(2, 6):
        points = positional_points(count)
        for better, worse in zip(points, points[1:]):
            assert better > worse


def test_positional_points_gap_widens_at_top():
    """Test gap between 1st and 2nd exceeds gap between 4th and 5th."""
    points = positional_points(5)
    assert points[0] - points[1] > points[3] - points[4]


# Normalizer
def test_normalize_sums_to_one():
    """Test normalized values sum to 1."""
    for count in range(1, 6):
        assert math.fsum(normalize(positional_points(count))) == pytest.approx(1.0, abs=1e-9)


def test_normalize_zero_sum():
    """Test zero totals normalize to zeros without dividing by zero."""
    assert normalize([]) == []
    assert normalize([0.0, 0.0]) == [0.0, 0.0]


# PositionalScorer
def test_positional_scorer_all_top():
    """Test three TOP items in input order."""
    scorer = PositionalScorer()
    result = scorer.calculate_score(ScoringContext(_items("Top", "Top", "Top")))

    assert result.scorer_name == "positional"
    assert result.points == pytest.approx([0.576, 0.313, 0.111], abs=1e-3)
    assert result.details["ranking_points"] == pytest.approx([3 ** 1.5, 2 ** 1.5, 1.0])
    assert result.details["top_count"] == 3


def test_positional_scorer_mixed_categories():
    """Test non-TOP items get zero and TOP order skips them."""
    scorer = PositionalScorer()
    result = scorer.calculate_score(ScoringContext(_items("Visited", "Top", "Dissatisfied", "Top")))

    assert result.points[0] == 0.0
    assert result.points[2] == 0.0
    assert result.details["ranking_points"][0] == 0.0
    assert result.details["ranking_points"][1] == pytest.approx(2 ** 1.5)
    assert result.details["ranking_points"][3] == pytest.approx(1.0)
    assert result.points[1] + result.points[3] == pytest.approx(1.0)


def test_positional_scorer_no_top():
    """Test a batch without TOP items scores all zeros."""
    result = PositionalScorer().calculate_score(ScoringContext(_items("Visited", "Plan to Visit")))
    assert result.points == [0.0, 0.0]
    assert result.details["top_count"] == 0


def test_positional_scorer_empty():
    """Test empty batch."""
    result = PositionalScorer().calculate_score(ScoringContext())
    assert result.points == []


def test_positional_scorer_ignores_stored_position_by_default():
    """Test input order wins over rank_position unless configured."""
    items = [
        RankedItem("a", "A", "Top", "ckt", 2),
        RankedItem("b", "B", "Top", "ckt", 1),
    ]
    result = PositionalScorer().calculate_score(ScoringContext(items))
    assert result.points[0] > result.points[1]


def test_positional_scorer_order_by_rank_position():
    """Test optional ordering by stored rank_position."""
    items = [
        RankedItem("a", "A", "Top", "ckt"),
        RankedItem("b", "B", "Top", "ckt", 2),
        RankedItem("c", "C", "Top", "ckt", 1),
    ]
    scorer = PositionalScorer({"order_by_rank_position": True})
    result = scorer.calculate_score(ScoringContext(items))

    # c (1) > b (2) > a (unpositioned, last)
    assert result.points[2] > result.points[1] > result.points[0]


def test_positional_scorer_custom_exponent():
    """Test exponent comes from config."""
    scorer = PositionalScorer({"exponent": 1.0})
    result = scorer.calculate_score(ScoringContext(_items("Top", "Top")))
    assert result.details["ranking_points"] == [2.0, 1.0]
    assert result.points == pytest.approx([2 / 3, 1 / 3])


def test_positional_scorer_invalid_exponent():
    """Test non-positive or non-numeric exponent raises ValueError."""
    with pytest.raises(ValueError):
        PositionalScorer({"exponent": 0})
    with pytest.raises(ValueError):
        PositionalScorer({"exponent": "high"})
    with pytest.raises(ValueError):
        PositionalScorer({"exponent": float("inf")})


def test_positional_scorer_invalid_order_flag():
    """Test order_by_rank_position only accepts true or false."""
    for value in ["false", "true", 0, 1, None]:
        with pytest.raises(ValueError):
            PositionalScorer({"order_by_rank_position": value})


# InteractionScorer
def test_interaction_weight_table():
    """Test default weights per category."""
    scorer = InteractionScorer()
    assert scorer.weight_of(RankingCategory.DISSATISFIED) == -1.0
    assert scorer.weight_of(RankingCategory.SECOND_CHANCE) == -0.5
    assert scorer.weight_of(RankingCategory.PLAN_TO_VISIT) == 0.3
    assert scorer.weight_of(RankingCategory.VISITED) == 0.0
    assert scorer.weight_of(RankingCategory.TOP) == 0.0


def test_interaction_weight_unknown_category():
    """Test categories outside the table weigh zero."""
    scorer = InteractionScorer()
    assert scorer.weight_of("Favourite") == 0.0
    assert scorer.weight_of(RankingCategory.TRENDING) == 0.0
    assert scorer.weight_of(None) == 0.0


def test_interaction_weight_accepts_labels():
    """Test weight lookup by label or name."""
    scorer = InteractionScorer()
    assert scorer.weight_of("Plan to Visit") == 0.3
    assert scorer.weight_of("DISSATISFIED") == -1.0


def test_interaction_scorer_points():
    """Test one weight per item, in order."""
    scorer = InteractionScorer()
    result = scorer.calculate_score(ScoringContext(_items("Dissatisfied", "Plan to Visit", "Mystery")))
    assert result.points == [-1.0, 0.3, 0.0]
    assert result.details["category_counts"] == {"Dissatisfied": 1, "Plan to Visit": 1, "Mystery": 1}


def test_interaction_scorer_overrides():
    """Test configured weights override defaults."""
    scorer = InteractionScorer({"weights": {"PLAN_TO_VISIT": 0.25, "Trending": 0.1}})
    assert scorer.weight_of(RankingCategory.PLAN_TO_VISIT) == 0.25
    assert scorer.weight_of(RankingCategory.TRENDING) == 0.1
    assert scorer.weight_of(RankingCategory.DISSATISFIED) == -1.0


def test_interaction_scorer_invalid_overrides():
    """Test bad override keys or values raise ValueError."""
    with pytest.raises(ValueError):
        InteractionScorer({"weights": {"FAVOURITE": 1.0}})
    with pytest.raises(ValueError):
        InteractionScorer({"weights": {"VISITED": "lots"}})
    with pytest.raises(ValueError):
        InteractionScorer({"weights": [1, 2]})


# Registry
def test_available_scorers():
    """Test registry lists both scorers."""
    assert get_available_scorers() == ["positional", "interaction"]


def test_create_scorer():
    """Test factory builds scorers with config."""
    scorer = create_scorer("positional", {"exponent": 2.0})
    assert isinstance(scorer, PositionalScorer)
    assert scorer.exponent == 2.0
    assert isinstance(create_scorer("interaction"), InteractionScorer)


def test_create_scorer_unknown():
    """Test unknown scorer name raises ValueError."""
    with pytest.raises(ValueError):
        create_scorer("popularity", {})
