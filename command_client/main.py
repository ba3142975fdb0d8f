"""
Entry point for the command client.
"""

import asyncio
import logging
import sys
from typing import Any, List

from command_client.bot.client import CommandClient, create_client, run_bot
from command_client.bot.config import config
from command_client.utils.logger import get_logger, set_default_level

logger = get_logger("Main")


async def ping_command(message: Any, command: str, args: List[str]) -> None:
    await message.reply("Pong")


async def echo_command(message: Any, command: str, args: List[str]) -> None:
    """Repeat the arguments in the channel."""
    await message.channel.send(" ".join(args))


def register_sample_commands(client: CommandClient) -> None:
    """Register the ping and echo commands."""
    client.register_command("ping", ping_command, {
        "max_args": 0,
        "help_message": "Replies with Pong",
    })
    client.register_command("echo", echo_command, {
        "min_args": 1,
        "usage_message": "%f <Message>",
        "help_message": "Repeats your message",
        "dm_allowed": True,
    })


def main():
    """Main entry point."""
    if config.DEBUG:
        set_default_level(logging.DEBUG)

    try:
        logger.info("Starting command client...")
        client = create_client(config)
        register_sample_commands(client)
        asyncio.run(run_bot(client, config))
    except KeyboardInterrupt:
        logger.info("Client stopped by user")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Fatal error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
