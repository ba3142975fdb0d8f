"""
Utility modules for the command client.
"""

from .logger import get_logger, set_default_level, setup_logging
from .discord import DiscordUtils
from .monitoring import Monitoring
from .error_handler import ErrorHandler, get_error_handler, setup_error_handler

__all__ = [
    "get_logger",
    "set_default_level",
    "setup_logging",
    "DiscordUtils",
    "Monitoring",
    "ErrorHandler",
    "get_error_handler",
    "setup_error_handler",
]
