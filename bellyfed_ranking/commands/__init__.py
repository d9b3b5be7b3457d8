"""
Command classes for the ranking REPL.
"""
from .base import Command, CommandContext, CommandRegistry, register_command, get_registry

# Import all command modules to trigger registration
from . import basic_commands
from . import ranking_commands

__all__ = [
    'Command',
    'CommandContext',
    'CommandRegistry',
    'register_command',
    'get_registry',
]
