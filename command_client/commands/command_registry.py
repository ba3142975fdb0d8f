"""
Command Registry
Per-client command registration and management
"""

from dataclasses import dataclass, replace
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional, Union

from command_client.commands.command_options import (
    DEFAULT_COMMAND_OPTIONS,
    CommandOptions,
    resolve_options,
)
from command_client.utils.logger import get_logger

# Callback signature: (message, command_name, args)
CommandCallback = Callable[[Any, str, List[str]], Optional[Awaitable[Any]]]


@dataclass(frozen=True)
class CommandEntry:
    """Registered command with its callback and options."""

    name: str
    callback: CommandCallback
    options: CommandOptions = DEFAULT_COMMAND_OPTIONS


class CommandRegistry:
    """
    Mapping from command name to CommandEntry.

    Names are case-sensitive and exclude the prefix. Iteration follows the
    order in which names were first registered; overwriting a name keeps its
    position. Entries are immutable and edits swap in a new entry, so a
    reader never observes a half-updated command.
    """

    def __init__(self):
        self.logger = get_logger("CommandRegistry")
        self._commands: Dict[str, CommandEntry] = {}

    def register(
        self,
        name: str,
        callback: CommandCallback,
        options: Union[CommandOptions, Mapping[str, Any], None] = None,
    ) -> "CommandRegistry":
        """
        Register a command, replacing any command with the same name.

        Args:
            name: Command name without the prefix
            callback: Function called as callback(message, name, args)
            options: Partial options merged over the defaults

        Returns:
            Self for chaining
        """
        resolved = resolve_options(options)

        if resolved.max_args >= 0 and resolved.max_args < resolved.min_args:
            self.logger.warning(
                f"Command {name} can never run: max_args={resolved.max_args} < min_args={resolved.min_args}"
            )

        if name in self._commands:
            self.logger.debug(f"Overwriting command: {name}")

        self._commands[name] = CommandEntry(name=name, callback=callback, options=resolved)
        self.logger.debug(f"Registered command: {name}")
        return self

    def unregister(self, name: str) -> None:
        """Remove a command. Unknown names are ignored."""
        if self._commands.pop(name, None) is not None:
            self.logger.debug(f"Unregistered command: {name}")

    def edit_callback(self, name: str, callback: CommandCallback) -> None:
        """
        Replace the callback of an existing command.

        Args:
            name: Command name
            callback: New callback
        """
        entry = self._commands.get(name)
        if entry is None:
            return
        self._commands[name] = replace(entry, callback=callback)
        self.logger.debug(f"Edited callback of command: {name}")

    def edit_options(self, name: str, partial_options: Mapping[str, Any]) -> None:
        """
        Merge partial options onto an existing command.

        Args:
            name: Command name
            partial_options: Option fields to override, others are kept
        """
        entry = self._commands.get(name)
        if entry is None:
            return
        options = entry.options.merge(partial_options)
        if options is entry.options:
            return
        self._commands[name] = replace(entry, options=options)
        self.logger.debug(f"Edited options of command: {name}")

    def lookup(self, name: str) -> Optional[CommandEntry]:
        """
        Get a command by name.

        Args:
            name: Command name, matched exactly

        Returns:
            CommandEntry or None if not found
        """
        return self._commands.get(name)

    def entries(self) -> List[CommandEntry]:
        """Snapshot of all registered commands in registration order."""
        return list(self._commands.values())

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __len__(self) -> int:
        return len(self._commands)
