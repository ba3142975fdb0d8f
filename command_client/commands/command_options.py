"""
Command Options
Policy attached to a single registered command
"""

from dataclasses import dataclass, fields, replace
from typing import Any, Mapping, Optional, Union

import discord

# Permission given as raw bit value, flag name or Permissions object
PermissionLike = Union[int, str, discord.Permissions]


@dataclass(frozen=True)
class CommandOptions:
    """
    Options evaluated when a command is triggered.

    Attributes:
        min_args: Minimum number of arguments required
        max_args: Maximum number of arguments allowed, negative for unbounded
        display_in_help: Whether the command is listed by the help command
        help_message: Text shown next to the command in the help listing
        usage_message: Usage template, ``%p`` is the prefix, ``%c`` the command
            name and ``%f`` both. Empty disables usage replies.
        required_permission: Permission the author needs in a guild channel,
            0 for none
        dm_allowed: Whether the command runs in direct and group messages
    """

    min_args: int = 0
    max_args: int = -1
    display_in_help: bool = True
    help_message: str = "No help available"
    usage_message: str = ""
    required_permission: PermissionLike = 0
    dm_allowed: bool = False

    def merge(self, partial: Optional[Mapping[str, Any]] = None) -> "CommandOptions":
        """
        Build new options with the given fields overriding this instance.

        Args:
            partial: Mapping of option names to values

        Returns:
            New CommandOptions, self when nothing is overridden

        Raises:
            TypeError: If partial contains an unknown option name
        """
        if not partial:
            return self

        unknown = set(partial) - OPTION_NAMES
        if unknown:
            raise TypeError(f"Unknown command option(s): {', '.join(sorted(unknown))}")

        return replace(self, **partial)

    @property
    def unbounded(self) -> bool:
        """True when there is no maximum argument count."""
        return self.max_args < 0


OPTION_NAMES = frozenset(f.name for f in fields(CommandOptions))

DEFAULT_COMMAND_OPTIONS = CommandOptions()


def resolve_options(options: Union[CommandOptions, Mapping[str, Any], None]) -> CommandOptions:
    """
    Resolve user supplied options against the defaults.

    Args:
        options: CommandOptions, partial mapping or None

    Returns:
        Fully populated CommandOptions
    """
    if options is None:
        return DEFAULT_COMMAND_OPTIONS
    if isinstance(options, CommandOptions):
        return options
    return DEFAULT_COMMAND_OPTIONS.merge(options)
