"""
Base command classes and registry.
"""
import shlex
import logging
from abc import ABC, abstractmethod
from typing import Dict, Type, Optional, List, Tuple
from pathlib import Path

from rich.console import Console

from bellyfed_ranking.data import RankingsLoader, WeightsManager
from bellyfed_ranking.services import RankingService, DEFAULT_LIMIT
from bellyfed_ranking.utils import console as default_console

logger = logging.getLogger(__name__)

QUERY_GROUP = "Ranking queries"
SESSION_GROUP = "Session"


class CommandContext:
    """
    Shared context for all commands.

    Provides access to the rankings loader, the ranking service and
    the weights configuration.
    """

    def __init__(self, rankings_file: Path, weights_file: Path = None,
                 default_limit: int = DEFAULT_LIMIT, console: Console = None):
        """
        Initialize command context.

        Args:
            rankings_file: Path to rankings CSV
            weights_file: Path to weights JSON (optional)
            default_limit: Result limit when --limit is not given
            console: rich Console for table output (module console by default)
        """
        self.rankings = RankingsLoader(rankings_file)
        self.default_limit = default_limit
        self.console = console or default_console

        self.weights = None
        self.weights_error = None
        if weights_file:
            self.weights = WeightsManager(weights_file)
            if not self.weights.load():
                # Store error message for commands to display
                self.weights_error = self.weights.get_error_message()
                logger.warning("Using default weights: %s", self.weights_error)

        self.service = self._build_service()

    def _build_service(self) -> RankingService:
        """Build ranking service from loaded weights (defaults if unavailable)."""
        if self.weights is None:
            return RankingService()
        return RankingService(self.weights.get_service_config())

    def reload_rankings(self):
        """Reload rankings file from disk."""
        self.rankings.reload()

    def reload_weights(self) -> bool:
        """
        Reload weights file and rebuild the service.

        Returns:
            True if weights loaded cleanly
        """
        if self.weights is None:
            return True
        ok = self.weights.load()
        self.weights_error = None if ok else self.weights.get_error_message()
        self.service = self._build_service()
        return ok


class QueryArgsMixin:
    """
    Mixin for commands that take menu item arguments and --limit.
    """

    def _parse_query_args(self, args: str) -> Tuple[List[str], Optional[int]]:
        """
        Split arguments into positionals and an optional --limit.

        Args:
            args: Argument string (e.g., '"Char Kway Teow" --limit 3')

        Returns:
            Tuple of (positional args, limit or None)

        Raises:
            ValueError: If quoting is unbalanced or --limit is malformed
        """
        parts = shlex.split(args)

        positionals = []
        limit = None
        i = 0
        while i < len(parts):
            part = parts[i]
            if part in ("--limit", "-n"):
                if i + 1 >= len(parts):
                    raise ValueError(f"{part} requires a number")
                try:
                    limit = int(parts[i + 1])
                except ValueError as e:
                    raise ValueError(f"Invalid limit: {parts[i + 1]!r}") from e
                i += 2
                continue
            positionals.append(part)
            i += 1

        return positionals, limit

    def _check_menu_item(self, menu_item: str) -> bool:
        """
        Check a menu item exists in the rankings file.

        Returns:
            True if known, False otherwise (prints message)
        """
        if menu_item in self.ctx.rankings.menu_items():
            return True
        print(f"\nNo rankings for menu item '{menu_item}'. Type 'menus' to list them.\n")
        return False


class Command(ABC):
    """
    Base class for all commands.

    Each command should override:
    - name: Command name(s) that trigger it
    - help_text: Short description
    - group: Help heading (QUERY_GROUP or SESSION_GROUP)
    - execute(): Command logic
    """

    # Command name(s) - can be string or tuple of strings
    name: str | tuple = ""

    # Help text shown in help command
    help_text: str = ""

    # Heading the command is listed under in help
    group: str = SESSION_GROUP

    def __init__(self, context: CommandContext):
        """
        Initialize command with context.

        Args:
            context: Shared command context
        """
        self.ctx = context

    @abstractmethod
    def execute(self, args: str) -> None:
        """
        Execute the command.

        Args:
            args: Command arguments (everything after the command name)
        """
        pass


class CommandRegistry:
    """
    Registry for all available commands.

    Commands register themselves and can be looked up by name.
    """

    def __init__(self):
        """Initialize empty registry."""
        self._commands: Dict[str, Type[Command]] = {}

    def register(self, command_class: Type[Command]) -> None:
        """
        Register a command class.

        Args:
            command_class: Command class to register
        """
        if isinstance(command_class.name, str):
            names = [command_class.name]
        else:
            names = list(command_class.name)

        for name in names:
            self._commands[name.lower()] = command_class

    def get(self, cmd: str) -> Optional[Type[Command]]:
        """
        Get command class for a command name.

        Args:
            cmd: Command name

        Returns:
            Command class or None if not found
        """
        return self._commands.get(cmd.lower())

    def list_commands(self) -> List[str]:
        """
        Get list of all registered command names.

        Returns:
            Sorted list of command names
        """
        return sorted(set(self._commands.keys()))

    def get_all_commands(self) -> List[Type[Command]]:
        """
        Get list of all unique command classes.

        Returns:
            List of command classes
        """
        seen = set()
        commands = []
        for cmd_class in self._commands.values():
            if cmd_class not in seen:
                seen.add(cmd_class)
                commands.append(cmd_class)
        return commands


# Global registry
_registry = CommandRegistry()


def register_command(command_class: Type[Command]) -> Type[Command]:
    """
    Decorator to register a command.

    Usage:
        @register_command
        class MyCommand(Command):
            name = "mycommand"
            ...
    """
    _registry.register(command_class)
    return command_class


def get_registry() -> CommandRegistry:
    """Get the global command registry."""
    return _registry
