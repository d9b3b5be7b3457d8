"""
Bellyfed Ranking - Main Entry Point

Interactive explorer for a user's dish rankings and their scores.
"""
import logging

from config import (RANKINGS_FILE, WEIGHTS_FILE, DEFAULT_TOP_LIMIT,
                    LOG_LEVEL, LOG_FORMAT, MODE, verify_data_files)
from bellyfed_ranking.commands import CommandContext, get_registry

logger = logging.getLogger(__name__)


def print_welcome():
    """Print welcome message."""
    print("=" * 70)
    print("  Bellyfed Rankings")
    print("  Type 'help' for commands, 'quit' to exit")
    print("=" * 70)
    print()


def dispatch(ctx: CommandContext, user_input: str) -> bool:
    """
    Run one line of user input.

    Args:
        ctx: Shared command context
        user_input: Raw input line

    Returns:
        False if the line was an unknown command, True otherwise

    Raises:
        SystemExit: From the quit command
    """
    user_input = user_input.strip()

    # Skip empty input
    if not user_input:
        return True

    # Parse command and arguments
    parts = user_input.split(maxsplit=1)
    cmd_name = parts[0].lower()
    args = parts[1] if len(parts) > 1 else ""

    # Look up command
    cmd_class = get_registry().get(cmd_name)

    if cmd_class is None:
        print(f"Unknown command: '{cmd_name}'. Type 'help' for available commands.")
        return False

    # Execute command
    try:
        cmd = cmd_class(ctx)
        cmd.execute(args)
    except SystemExit:
        # Quit command raises SystemExit
        raise
    except Exception as e:
        print(f"Error executing command: {e}")
        logger.debug("Command %r failed", cmd_name, exc_info=True)
        # In development mode, show full traceback
        if MODE == "DEVELOPMENT":
            import traceback
            traceback.print_exc()

    return True


def repl():
    """
    Main Read-Eval-Print Loop.

    Handles user input and dispatches to registered commands.
    """
    # Verify data files exist
    try:
        verify_data_files()
    except FileNotFoundError as e:
        print(f"Error: {e}")
        print("\nPlease check your configuration and ensure data files exist.")
        return

    if MODE == "PRODUCTION":
        print("WARNING: Running in PRODUCTION mode - using real data!")

    # Print welcome
    print_welcome()

    # Create command context (shared state for all commands)
    ctx = CommandContext(RANKINGS_FILE, WEIGHTS_FILE, default_limit=DEFAULT_TOP_LIMIT)
    if ctx.weights_error:
        print(f"Weights file invalid, using defaults: {ctx.weights_error}\n")

    # Main loop
    while True:
        try:
            dispatch(ctx, input("> "))
        except (KeyboardInterrupt, EOFError):
            # Ctrl+C or Ctrl+D
            print("\nRankings session closed.")
            break
        except SystemExit:
            # Quit command
            break


def main():
    """Main entry point."""
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

    try:
        repl()
    except KeyboardInterrupt:
        print("\nInterrupted. Rankings session closed.")
    except Exception as e:
        print(f"Fatal error: {e}")
        if MODE == "DEVELOPMENT":
            import traceback
            traceback.print_exc()
        return 1

    return 0


if __name__ == "__main__":
    exit(main())
