# bellyfed_ranking/utils/table_renderer.py
"""
Rich table rendering for scored items in the terminal.
"""
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from bellyfed_ranking.models import ScoredItem

console = Console()


def _score_style(score: float) -> str:
    """Pick a colour for a score: green above zero, red below."""
    if score > 0:
        return "green"
    if score < 0:
        return "red"
    return "dim"


def build_scores_table(items: List[ScoredItem], title: str,
                       show_rank: bool = True) -> Table:
    """
    Build a table of scored items.

    Args:
        items: Scored items in display order
        title: Table title
        show_rank: Prefix each row with its 1-based row number

    Returns:
        rich Table (one row per item)
    """
    table = Table(title=title)
    if show_rank:
        table.add_column("#", justify="right", style="bold")
    table.add_column("Dish")
    table.add_column("Category")
    table.add_column("Position", justify="right")
    table.add_column("Points", justify="right")
    table.add_column("Normalized", justify="right")
    table.add_column("Interaction", justify="right")
    table.add_column("Total", justify="right")

    for row_number, item in enumerate(items, start=1):
        position = str(item.rank_position) if item.rank_position is not None else "-"
        cells = [
            escape(item.name or item.id),
            escape(item.category_label),
            position,
            f"{item.ranking_points:.3f}",
            f"{item.normalized_points:.3f}",
            f"{item.interaction_points:+.2f}",
            f"[{_score_style(item.total_score)}]{item.total_score:.3f}[/]",
        ]
        if show_rank:
            cells.insert(0, str(row_number))
        table.add_row(*cells)

    return table


def render_scored_items(items: List[ScoredItem], title: str,
                        show_rank: bool = True, out: Optional[Console] = None) -> None:
    """
    Print scored items as a table.

    Args:
        items: Scored items in display order
        title: Table title
        show_rank: Prefix each row with its 1-based row number
        out: Console to print to (module console by default)
    """
    out = out or console
    if not items:
        out.print(f"[dim]{title}: no items[/dim]\n")
        return

    out.print(build_scores_table(items, title, show_rank))
    out.print()
