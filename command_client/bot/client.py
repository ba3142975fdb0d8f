"""
Discord client with prefix command support using discord.py.
"""

import asyncio
import sys
from typing import Any, Mapping, Optional, Union

import discord

from command_client.bot.config import DEFAULT_NOT_ALLOWED_MESSAGE, Config
from command_client.bot.keep_alive import attach_client, run_server, update_bot_status
from command_client.commands.command_handler import CommandHandler
from command_client.commands.command_options import CommandOptions
from command_client.commands.command_registry import CommandCallback, CommandRegistry
from command_client.commands.help_command import register_help
from command_client.utils.error_handler import get_error_handler, setup_error_handler
from command_client.utils.logger import get_logger
from command_client.utils.monitoring import Monitoring

logger = get_logger("Client")


class CommandClient(discord.Client):
    """
    Discord client which dispatches prefixed messages to registered commands.

    ``prefix``, ``command_not_allowed_message`` and ``enable_help`` can be
    changed at any time; every message is checked against the current values.
    """

    def __init__(self, prefix: str = "!", **options: Any):
        if "intents" not in options:
            intents = discord.Intents.default()
            intents.message_content = True
            options["intents"] = intents

        super().__init__(**options)

        self.prefix = prefix
        self.command_not_allowed_message = DEFAULT_NOT_ALLOWED_MESSAGE
        self.enable_help = True

        self.registry = CommandRegistry()
        self.monitoring = Monitoring()
        self.command_handler = CommandHandler(self, self.registry)

        # Keep-alive server task, set by run_bot
        self.keep_alive_task: Optional[asyncio.Task] = None

        register_help(self, self.registry)

    def register_command(
        self,
        command: str,
        callback: CommandCallback,
        options: Union[CommandOptions, Mapping[str, Any], None] = None,
    ) -> None:
        """
        Register a new command.

        Args:
            command: Command without the prefix
            callback: Called as callback(message, command, args) when triggered
            options: Partial options, missing fields use the defaults
        """
        self.registry.register(command, callback, options)

    def unregister_command(self, command: str) -> None:
        self.registry.unregister(command)

    def edit_command_data(self, command: str, callback: CommandCallback) -> None:
        """Replace the callback of a registered command."""
        self.registry.edit_callback(command, callback)

    def edit_command_options(self, command: str, options: Mapping[str, Any]) -> None:
        """Override some options of a registered command."""
        self.registry.edit_options(command, options)

    async def on_ready(self) -> None:
        update_bot_status(status="ready", discord_connected=True)
        logger.info(f"Logged in as: {self.user}")
        if self.enable_help:
            logger.info(f"Use {self.prefix}help to see available commands")

    async def on_message(self, message: discord.Message) -> None:
        await self.command_handler.handle(message)

    async def on_error(self, event_method: str, /, *args: Any, **kwargs: Any) -> None:
        """Route errors raised by event handlers, command callbacks included."""
        error = sys.exc_info()[1]
        if error is not None:
            get_error_handler().handle_exception(error, event_method)

    async def close(self) -> None:
        logger.info("Shutting down client...")
        update_bot_status(status="offline", discord_connected=False)

        task, self.keep_alive_task = self.keep_alive_task, None
        if task and not task.done():
            task.cancel()
            try:
                await task
            except asyncio.CancelledError:
                pass

        await super().close()


def create_client(settings: Optional[Config] = None, **options: Any) -> CommandClient:
    """
    Create a client configured from settings.

    Args:
        settings: Configuration, defaults to an all-default Config
        **options: Passed to discord.Client

    Returns:
        New CommandClient
    """
    settings = settings or Config()
    client = CommandClient(settings.COMMAND_PREFIX, **options)
    client.enable_help = settings.ENABLE_HELP
    client.command_not_allowed_message = settings.COMMAND_NOT_ALLOWED_MESSAGE
    return client


async def run_bot(client: CommandClient, settings: Config) -> None:
    """
    Log the client in and process events until it is closed.

    Args:
        client: Client with its commands registered
        settings: Configuration holding the token and keep-alive settings
    """
    settings.validate()
    setup_error_handler()

    if settings.KEEP_ALIVE:
        attach_client(client)
        client.keep_alive_task = run_server(settings)

    try:
        async with client:
            await client.start(settings.DISCORD_TOKEN)
    except Exception as e:
        logger.error(f"Client error: {e}")
        raise
