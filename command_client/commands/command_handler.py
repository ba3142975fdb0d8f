"""
Command Handler
Parses prefixed messages and dispatches them through the command registry
"""

import inspect
import re
from typing import Any, List, Optional, Tuple

from command_client.commands.command_registry import CommandEntry, CommandRegistry
from command_client.utils.discord import DiscordUtils
from command_client.utils.logger import get_logger

# Usage template placeholders: %p prefix, %f prefix + command, %c command
USAGE_PLACEHOLDER = re.compile(r"%([pfc])")


def format_usage(template: str, prefix: str, command_name: str) -> str:
    """
    Fill a usage template.

    ``%p`` becomes the prefix, ``%f`` the prefix followed by the command name
    and ``%c`` the command name. Every occurrence is replaced in one pass, so
    substituted text is never scanned again.

    Args:
        template: Usage template
        prefix: Current command prefix
        command_name: Invoked command name

    Returns:
        New string with placeholders substituted
    """
    values = {
        "p": prefix,
        "f": prefix + command_name,
        "c": command_name,
    }
    return USAGE_PLACEHOLDER.sub(lambda match: values[match.group(1)], template)


class CommandHandler:
    """
    Decides, for one incoming message, whether a command fires.

    Holds a reference to the client for the settings a host may change at any
    time (prefix, command_not_allowed_message) and for the bot's own user.
    Nothing is kept between messages.
    """

    def __init__(self, client: Any, registry: CommandRegistry):
        self.logger = get_logger("Command")
        self.client = client
        self.registry = registry

    @staticmethod
    def parse_command(content: str, prefix: str) -> Tuple[str, List[str]]:
        """
        Split a prefixed message into command name and arguments.

        Splits on single spaces, so consecutive spaces produce empty
        arguments.

        Args:
            content: Message content starting with the prefix
            prefix: Current command prefix

        Returns:
            Tuple of (command_name, args)
        """
        parts = content[len(prefix):].split(" ")
        return parts[0], parts[1:]

    async def handle(self, message: Any) -> None:
        """
        Handle incoming message.

        Exceptions raised by the command callback propagate to the caller.

        Args:
            message: Discord message object
        """
        monitoring = getattr(self.client, "monitoring", None)
        if monitoring:
            monitoring.record_message()

        prefix = self.client.prefix
        content = message.content or ""

        if not content.startswith(prefix):
            return

        command_name, args = self.parse_command(content, prefix)

        entry = self.registry.lookup(command_name)
        if entry is None:
            return

        options = entry.options
        is_dm = DiscordUtils.is_dm_channel(message.channel)

        if is_dm and not options.dm_allowed:
            self.logger.debug(f"Ignoring {command_name}: not allowed in DMs")
            return

        if len(args) < options.min_args:
            self.logger.debug(f"Not enough arguments for {command_name}: {len(args)} < {options.min_args}")
            await self.send_usage(message, entry, prefix)
            return

        if not options.unbounded and len(args) > options.max_args:
            self.logger.debug(f"Too many arguments for {command_name}: {len(args)} > {options.max_args}")
            await self.send_usage(message, entry, prefix)
            return

        if not is_dm:
            required = DiscordUtils.resolve_permission(options.required_permission)
            if required is not None and not DiscordUtils.has_permission(message.channel, message.author, required):
                self.logger.debug(f"Denied {command_name} for {message.author}")
                if monitoring:
                    monitoring.record_denied()
                await self.reply(message, self.client.command_not_allowed_message)
                return

        self.logger.debug(f"Executing: {command_name} {args}")
        if monitoring:
            monitoring.record_command()

        try:
            result = entry.callback(message, command_name, args)
            if inspect.isawaitable(result):
                await result
        except Exception:
            if monitoring:
                monitoring.record_error()
            raise

    async def send_usage(self, message: Any, entry: CommandEntry, prefix: str) -> Optional[Any]:
        """
        Reply with the usage message of a command, if it has one.

        Args:
            message: Original message
            entry: Invoked command
            prefix: Prefix the command was invoked with

        Returns:
            Sent message or None
        """
        template = entry.options.usage_message
        if not template:
            return None

        monitoring = getattr(self.client, "monitoring", None)
        if monitoring:
            monitoring.record_usage()

        usage = format_usage(template, prefix, entry.name)
        return await self.reply(message, f"Usage: `{usage}`")

    async def reply(self, message: Any, text: str) -> Optional[Any]:
        """Reply through the permission check."""
        return await DiscordUtils.reply_if_permitted(message, text, getattr(self.client, "user", None))
