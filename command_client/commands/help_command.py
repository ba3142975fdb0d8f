"""
Help Command
Lists the commands available in the current channel
"""

from typing import Any, Iterable, List

from command_client.commands.command_registry import CommandCallback, CommandEntry, CommandRegistry
from command_client.utils.discord import DiscordUtils

HELP_COMMAND_NAME = "help"

HELP_COMMAND_OPTIONS = {
    "dm_allowed": True,
    "help_message": "Displays this help",
}


def generate_help(entries: Iterable[CommandEntry], prefix: str, is_dm: bool) -> str:
    """
    Generate help text for the given commands.

    Args:
        entries: Registered commands, in display order
        prefix: Current command prefix
        is_dm: Whether the listing is for a DM channel

    Returns:
        One line per visible command, empty string if none
    """
    lines = []
    for entry in entries:
        options = entry.options
        if not options.display_in_help:
            continue
        if is_dm and not options.dm_allowed:
            continue
        lines.append(f"`{prefix}{entry.name}`: {options.help_message}\n")
    return "".join(lines)


def help_command(client: Any, registry: CommandRegistry) -> CommandCallback:
    """Create the callback for the help command."""

    async def handler(message: Any, command_name: str, args: List[str]) -> None:
        if not client.enable_help:
            return

        channel = message.channel
        is_dm = DiscordUtils.is_dm_channel(channel)
        if not is_dm and not DiscordUtils.can_send(channel, DiscordUtils.bot_member(channel, client.user)):
            return

        help_text = generate_help(registry.entries(), client.prefix, is_dm)
        if help_text:
            await channel.send(help_text)

    return handler


def register_help(client: Any, registry: CommandRegistry) -> None:
    """Register the help command on a registry."""
    registry.register(HELP_COMMAND_NAME, help_command(client, registry), HELP_COMMAND_OPTIONS)
