"""
Tests for REPL dispatch.
"""
import io

import pytest
from rich.console import Console

from bellyfed_ranking.commands import CommandContext
from main import dispatch


@pytest.fixture
def ctx(tmp_path):
    rankings = tmp_path / "rankings.csv"
    rankings.write_text("id,name,category,menu_item\na,Outram,Top,ckt\n", encoding="utf-8")
    return CommandContext(rankings, console=Console(file=io.StringIO(), width=200))


def test_dispatch_blank_line(ctx):
    """Test empty input is skipped."""
    assert dispatch(ctx, "   ")


def test_dispatch_unknown_command(ctx, capsys):
    """Test unknown command reports itself."""
    assert not dispatch(ctx, "rank ckt")
    assert "Unknown command: 'rank'" in capsys.readouterr().out


def test_dispatch_runs_command(ctx):
    """Test known command is executed."""
    assert dispatch(ctx, "TOP ckt")
    assert "Outram" in ctx.console.file.getvalue()


def test_dispatch_reports_errors(ctx, capsys):
    """Test command errors are printed, not raised."""
    assert dispatch(ctx, "top ckt --limit -3")
    assert "Error executing command: Limit must be non-negative" in capsys.readouterr().out


def test_dispatch_quit(ctx):
    """Test quit propagates SystemExit."""
    with pytest.raises(SystemExit):
        dispatch(ctx, "quit")
