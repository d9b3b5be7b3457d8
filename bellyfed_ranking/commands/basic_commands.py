"""
Basic commands: help, quit, reload, menus, weights.
"""
from bellyfed_ranking.models import RankingCategory
from .base import Command, register_command, get_registry, QUERY_GROUP, SESSION_GROUP


def _names(cmd_class) -> str:
    """Command name and aliases joined for display."""
    if isinstance(cmd_class.name, str):
        return cmd_class.name
    return ", ".join(cmd_class.name)


@register_command
class HelpCommand(Command):
    """Show help grouped into ranking queries and session commands."""

    name = ("help", "h", "?")
    help_text = "List commands"

    def execute(self, args: str) -> None:
        """Display help for all commands."""
        by_group = {}
        for cmd_class in get_registry().get_all_commands():
            by_group.setdefault(cmd_class.group, []).append(cmd_class)

        print("\nBellyfed ranking commands")
        for group in (QUERY_GROUP, SESSION_GROUP):
            print(f"\n{group}:")
            # Registration order keeps related queries together
            for cmd_class in by_group.get(group, []):
                print(f"  {_names(cmd_class):18} {cmd_class.help_text}")

        print('\nQuote menu items that contain spaces, e.g. top "Char Kway Teow"')
        print("Categories: " + ", ".join(c.value for c in RankingCategory))
        print()


@register_command
class QuitCommand(Command):
    """Leave the REPL."""

    name = ("quit", "exit", "q")
    help_text = "Leave the ranking shell"

    def execute(self, args: str) -> None:
        """Exit with status 0."""
        print("Rankings session closed.")
        raise SystemExit(0)


@register_command
class ReloadCommand(Command):
    """Reload rankings and weights from disk."""

    name = "reload"
    help_text = "Reload rankings and weights files from disk"

    def execute(self, args: str) -> None:
        """Reload both files."""
        self.ctx.reload_rankings()
        print(f"Rankings reloaded from disk ({len(self.ctx.rankings.items)} items).")

        if not self.ctx.reload_weights():
            print(f"Weights invalid, using defaults: {self.ctx.weights_error}")


@register_command
class MenusCommand(Command):
    """List menu items in the rankings file."""

    name = ("menus", "menu")
    help_text = "List menu items with item counts"

    def execute(self, args: str) -> None:
        """Display menu items."""
        counts = self.ctx.rankings.count_by_menu_item()

        if not counts:
            print("No ranked items.")
            return

        print("\nMenu items:")
        for menu_item in sorted(counts):
            print(f"  {menu_item:30} {counts[menu_item]} item(s)")
        print()


@register_command
class WeightsCommand(Command):
    """Show effective scoring weights."""

    name = "weights"
    help_text = "Show positional exponent and category weights in use"

    def execute(self, args: str) -> None:
        """Display weights."""
        if self.ctx.weights_error:
            print(f"\nWeights file invalid, using defaults: {self.ctx.weights_error}")

        service = self.ctx.service
        print(f"\nPositional exponent: {service.positional.exponent:g}")
        if service.positional.order_by_rank_position:
            print("TOP items ordered by stored rank position")
        else:
            print("TOP items ordered by file order")

        print("Category weights:")
        for category, weight in service.interaction.weights.items():
            print(f"  {category.value:20} {weight:+.2f}")
        print("  (any other category)  +0.00")
        print()
