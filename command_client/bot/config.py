"""
Configuration management for the command client.
Loads environment variables and provides configuration settings.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_NOT_ALLOWED_MESSAGE = "You aren't allowed to run this command."


def _env_bool(name: str, default: bool) -> bool:
    return os.getenv(name, "true" if default else "false").lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Config:
    """Client configuration settings."""

    # Discord
    DISCORD_TOKEN: str = ""

    # Commands
    COMMAND_PREFIX: str = "!"
    ENABLE_HELP: bool = True
    COMMAND_NOT_ALLOWED_MESSAGE: str = DEFAULT_NOT_ALLOWED_MESSAGE

    # Web Server (keep-alive)
    KEEP_ALIVE: bool = False
    PORT: int = 11186
    HOST: str = "0.0.0.0"

    # Debug
    DEBUG: bool = False

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        return cls(
            DISCORD_TOKEN=os.getenv("DISCORD_TOKEN", ""),
            COMMAND_PREFIX=os.getenv("COMMAND_PREFIX", "!"),
            ENABLE_HELP=_env_bool("ENABLE_HELP", True),
            COMMAND_NOT_ALLOWED_MESSAGE=os.getenv("COMMAND_NOT_ALLOWED_MESSAGE", DEFAULT_NOT_ALLOWED_MESSAGE),
            KEEP_ALIVE=_env_bool("KEEP_ALIVE", False),
            PORT=int(os.getenv("PORT", "11186")),
            HOST=os.getenv("HOST", "0.0.0.0"),
            DEBUG=_env_bool("DEBUG", False),
        )

    def validate(self) -> None:
        """Validate required configuration."""
        if not self.DISCORD_TOKEN:
            raise ValueError("DISCORD_TOKEN is required")
        if not self.COMMAND_PREFIX:
            raise ValueError("COMMAND_PREFIX must not be empty")


# Global config instance
config = Config.from_env()
