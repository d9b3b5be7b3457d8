# bellyfed_ranking/data/rankings_loader.py
"""
Rankings file operations.

Handles loading a user's rankings CSV. Each row is one dish the user
categorized for a menu item. Row order matters: TOP rows are ranked in
the order they appear.
"""
import logging
import pandas as pd
from typing import List, Dict, Any
from pathlib import Path

from bellyfed_ranking.models import RankedItem

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ["id", "name", "category", "menu_item"]
OPTIONAL_COLUMNS = ["rank_position"]


def _row_to_dict(row: Dict[str, Any]) -> Dict[str, Any]:
    """Replace pandas missing values (NaN/NA) with None."""
    return {key: (None if pd.isna(value) else value) for key, value in row.items()}


def items_from_dataframe(df: pd.DataFrame) -> List[RankedItem]:
    """
    Convert a rankings DataFrame to ranked items.

    Args:
        df: DataFrame with the required columns

    Returns:
        List of RankedItem in row order

    Raises:
        ValueError: If a required column is missing or a row is invalid
    """
    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        raise ValueError(f"Rankings file missing column(s): {', '.join(missing)}")

    items = []
    for row_number, row in enumerate(df.to_dict("records"), start=1):
        try:
            items.append(RankedItem.from_dict(_row_to_dict(row)))
        except ValueError as e:
            raise ValueError(f"Row {row_number}: {e}") from e
    return items


class RankingsLoader:
    """
    Loads and provides access to a user's rankings.

    The rankings file has columns id, name, category, menu_item and an
    optional rank_position.
    """

    def __init__(self, filepath: Path):
        """
        Initialize loader with path to rankings CSV file.

        Args:
            filepath: Path to rankings CSV file
        """
        self.filepath = Path(filepath)
        self._df = None
        self._items = None

    def load(self) -> pd.DataFrame:
        """
        Load rankings file from disk.

        Returns:
            DataFrame containing rankings data

        Raises:
            FileNotFoundError: If rankings file doesn't exist
            ValueError: If the file is missing columns or has invalid rows
        """
        df = pd.read_csv(self.filepath, dtype={"id": str, "name": str, "menu_item": str})
        df.columns = [str(col).strip().lower() for col in df.columns]
        for col in OPTIONAL_COLUMNS:
            if col not in df.columns:
                df[col] = None
        items = items_from_dataframe(df)

        self._df = df
        self._items = items
        logger.info("Loaded %d ranked item(s) from %s", len(items), self.filepath)
        return self._df

    def reload(self) -> pd.DataFrame:
        """Reload rankings file from disk."""
        self._df = None
        self._items = None
        return self.load()

    @property
    def df(self) -> pd.DataFrame:
        """Get the rankings DataFrame (loads if needed)."""
        if self._df is None:
            self.load()
        return self._df

    @property
    def items(self) -> List[RankedItem]:
        """Get all ranked items in file order (loads if needed)."""
        if self._items is None:
            self.load()
        return list(self._items)

    def menu_items(self) -> List[str]:
        """
        Get distinct menu items.

        Returns:
            Sorted list of menu item names
        """
        return sorted({item.menu_item for item in self.items})

    def for_menu_item(self, menu_item: str) -> List[RankedItem]:
        """
        Get ranked items for one menu item.

        Args:
            menu_item: Menu item name (exact match)

        Returns:
            Items in file order
        """
        return [item for item in self.items if item.menu_item == menu_item]

    def count_by_menu_item(self) -> Dict[str, int]:
        """
        Count items per menu item.

        Returns:
            Dict of menu item -> item count
        """
        counts: Dict[str, int] = {}
        for item in self.items:
            counts[item.menu_item] = counts.get(item.menu_item, 0) + 1
        return counts
