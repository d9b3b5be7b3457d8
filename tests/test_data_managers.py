"""
Tests for the rankings loader and weights manager.
"""
import json

import pandas as pd
import pytest
from bellyfed_ranking.data import RankingsLoader, WeightsManager, items_from_dataframe
from bellyfed_ranking.models import RankingCategory
from bellyfed_ranking.services import RankingService

RANKINGS_CSV = """id,name,category,menu_item,rank_position
ckt-01,Outram Park,Top,Char Kway Teow,1
ckt-02,Hill Street,Top,Char Kway Teow,2
ckt-03,Zion Road,Visited,Char Kway Teow,
lak-01,328 Katong,Top,Laksa,1
lak-02,Janggut,Plan to Visit,Laksa,
"""


@pytest.fixture
def rankings_file(tmp_path):
    """Write a small rankings CSV."""
    path = tmp_path / "rankings.csv"
    path.write_text(RANKINGS_CSV, encoding="utf-8")
    return path


def _write_json(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


# RankingsLoader tests
def test_loader_items_in_file_order(rankings_file):
    """Test items load in row order with parsed fields."""
    loader = RankingsLoader(rankings_file)
    items = loader.items

    assert [item.id for item in items] == ["ckt-01", "ckt-02", "ckt-03", "lak-01", "lak-02"]
    assert items[0].category is RankingCategory.TOP
    assert items[0].rank_position == 1
    assert items[2].rank_position is None
    assert items[4].category is RankingCategory.PLAN_TO_VISIT


def test_loader_dataframe(rankings_file):
    """Test DataFrame is available after load."""
    loader = RankingsLoader(rankings_file)
    df = loader.load()
    assert len(df) == 5
    assert list(loader.df.columns) == ["id", "name", "category", "menu_item", "rank_position"]


def test_loader_menu_items(rankings_file):
    """Test menu item helpers."""
    loader = RankingsLoader(rankings_file)
    assert loader.menu_items() == ["Char Kway Teow", "Laksa"]
    assert [item.id for item in loader.for_menu_item("Laksa")] == ["lak-01", "lak-02"]
    assert loader.count_by_menu_item() == {"Char Kway Teow": 3, "Laksa": 2}


def test_loader_without_position_column(tmp_path):
    """Test rank_position column is optional."""
    path = tmp_path / "rankings.csv"
    path.write_text("id,name,category,menu_item\n1,Dish,Top,ckt\n", encoding="utf-8")

    items = RankingsLoader(path).items
    assert items[0].id == "1"
    assert items[0].rank_position is None


def test_loader_adds_missing_position_column(tmp_path):
    """Test DataFrame always carries rank_position, empty when not in the file."""
    path = tmp_path / "rankings.csv"
    path.write_text("id,name,category,menu_item\n1,Dish,Top,ckt\n", encoding="utf-8")

    df = RankingsLoader(path).load()
    assert list(df.columns) == ["id", "name", "category", "menu_item", "rank_position"]
    assert df["rank_position"].isna().all()


def test_loader_missing_column(tmp_path):
    """Test missing required column raises ValueError."""
    path = tmp_path / "rankings.csv"
    path.write_text("id,name,category\n1,Dish,Top\n", encoding="utf-8")

    with pytest.raises(ValueError, match="menu_item"):
        RankingsLoader(path).load()


def test_loader_invalid_row(tmp_path):
    """Test invalid rank position reports the row."""
    path = tmp_path / "rankings.csv"
    path.write_text("id,name,category,menu_item,rank_position\n1,Dish,Top,ckt,9\n", encoding="utf-8")

    with pytest.raises(ValueError, match="Row 1"):
        RankingsLoader(path).load()


def test_loader_missing_file(tmp_path):
    """Test missing file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        RankingsLoader(tmp_path / "nope.csv").load()


def test_loader_reload(rankings_file):
    """Test reload picks up changes on disk."""
    loader = RankingsLoader(rankings_file)
    assert len(loader.items) == 5

    rankings_file.write_text(RANKINGS_CSV + "lak-03,Sungei Road,Top,Laksa,2\n", encoding="utf-8")
    loader.reload()
    assert len(loader.items) == 6


def test_items_from_dataframe():
    """Test converting an in-memory DataFrame."""
    df = pd.DataFrame([
        {"id": "a", "name": "A", "category": "Top", "menu_item": "ckt"},
        {"id": "b", "name": "B", "category": "Dissatisfied", "menu_item": "ckt"},
    ])
    items = items_from_dataframe(df)
    scored = RankingService().calculate_scores(items)
    assert [s.total_score for s in scored] == [1.0, -1.0]


# WeightsManager tests
def test_weights_missing_file_uses_defaults(tmp_path):
    """Test absent weights file is valid and empty."""
    manager = WeightsManager(tmp_path / "weights.json")
    assert manager.load()
    assert manager.is_valid
    assert manager.get_service_config() == {"positional": {}, "interaction": {}}


def test_weights_valid_file(tmp_path):
    """Test sections are passed through to the service config."""
    path = _write_json(tmp_path / "weights.json", {
        "positional": {"exponent": 2.0},
        "interaction": {"weights": {"PLAN_TO_VISIT": 0.5}},
    })
    manager = WeightsManager(path)
    assert manager.load()

    config = manager.get_service_config()
    assert config["positional"] == {"exponent": 2.0}

    service = RankingService(config)
    assert service.positional.exponent == 2.0
    assert service.interaction.weight_of(RankingCategory.PLAN_TO_VISIT) == 0.5


def test_weights_invalid_json(tmp_path):
    """Test malformed JSON is reported."""
    path = tmp_path / "weights.json"
    path.write_text("{not json", encoding="utf-8")

    manager = WeightsManager(path)
    assert not manager.load()
    assert not manager.is_valid
    assert "Invalid JSON" in manager.get_error_message()
    assert manager.weights is None


def test_weights_invalid_values(tmp_path):
    """Test invalid values are collected and defaults are served."""
    path = _write_json(tmp_path / "weights.json", {
        "positional": {"exponent": -2},
        "interaction": {"weights": {"FAVOURITE": 1.0}},
        "popularity": {},
    })
    manager = WeightsManager(path)
    assert not manager.load()
    assert len(manager.validation_errors) == 3
    assert manager.get_error_message() == "Multiple errors in weights file (3 issues)"
    assert manager.get_service_config() == {"positional": {}, "interaction": {}}


def test_weights_single_error_message(tmp_path):
    """Test single error is shown verbatim."""
    path = _write_json(tmp_path / "weights.json", {"positional": "steep"})
    manager = WeightsManager(path)
    assert not manager.load()
    assert manager.get_error_message() == "Section 'positional' must be an object"


def test_weights_not_an_object(tmp_path):
    """Test top-level JSON must be an object."""
    path = _write_json(tmp_path / "weights.json", [1, 2, 3])
    manager = WeightsManager(path)
    assert not manager.load()
    assert manager.get_error_message() == "Weights file must contain a JSON object"


def test_weights_not_loaded_message(tmp_path):
    """Test message before load."""
    assert WeightsManager(tmp_path / "weights.json").get_error_message() == "Weights not loaded"


def test_weights_order_flag_must_be_boolean(tmp_path):
    """Test a quoted "false" is rejected rather than read as true."""
    path = _write_json(tmp_path / "weights.json", {
        "positional": {"order_by_rank_position": "false"},
    })
    manager = WeightsManager(path)
    assert not manager.load()
    assert "order_by_rank_position" in manager.get_error_message()

    # Defaults are served, so input order still decides TOP positions
    service = RankingService(manager.get_service_config())
    assert service.positional.order_by_rank_position is False


def test_weights_order_flag_from_file(tmp_path):
    """Test order_by_rank_position true is honoured from the weights file."""
    path = _write_json(tmp_path / "weights.json", {
        "positional": {"order_by_rank_position": True},
    })
    manager = WeightsManager(path)
    assert manager.load()

    service = RankingService(manager.get_service_config())
    assert service.positional.order_by_rank_position is True
