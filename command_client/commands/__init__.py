"""
Command system for the command client.
"""

from .command_options import CommandOptions, DEFAULT_COMMAND_OPTIONS, resolve_options
from .command_registry import CommandCallback, CommandEntry, CommandRegistry
from .command_handler import CommandHandler, format_usage
from .help_command import generate_help, help_command, register_help

__all__ = [
    "CommandOptions",
    "DEFAULT_COMMAND_OPTIONS",
    "resolve_options",
    "CommandCallback",
    "CommandEntry",
    "CommandRegistry",
    "CommandHandler",
    "format_usage",
    "generate_help",
    "help_command",
    "register_help",
]
