"""
Prefix command dispatch for Discord clients.
"""

__version__ = "1.0.0"
__description__ = "Discord client with prefix command registry and dispatch"

from .bot.client import CommandClient, create_client, run_bot
from .commands import CommandEntry, CommandOptions, CommandRegistry, DEFAULT_COMMAND_OPTIONS

__all__ = [
    "CommandClient",
    "create_client",
    "run_bot",
    "CommandEntry",
    "CommandOptions",
    "CommandRegistry",
    "DEFAULT_COMMAND_OPTIONS",
    "__version__",
]
