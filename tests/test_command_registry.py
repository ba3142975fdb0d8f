"""Tests for commands/command_options.py and commands/command_registry.py."""

import pytest

from command_client.commands.command_options import (
    DEFAULT_COMMAND_OPTIONS,
    CommandOptions,
    resolve_options,
)
from command_client.commands.command_registry import CommandRegistry


async def noop(message, command, args) -> None:
    pass


async def other(message, command, args) -> None:
    pass


# --- CommandOptions ---


def test_default_options() -> None:
    assert DEFAULT_COMMAND_OPTIONS == CommandOptions(
        min_args=0,
        max_args=-1,
        display_in_help=True,
        help_message="No help available",
        usage_message="",
        required_permission=0,
        dm_allowed=False,
    )
    assert DEFAULT_COMMAND_OPTIONS.unbounded


def test_merge_supplied_fields_win() -> None:
    merged = DEFAULT_COMMAND_OPTIONS.merge({"max_args": 0, "dm_allowed": True})
    assert merged.max_args == 0
    assert merged.dm_allowed is True
    assert merged.min_args == 0
    assert merged.help_message == "No help available"
    # Defaults are untouched
    assert DEFAULT_COMMAND_OPTIONS.max_args == -1


def test_merge_empty_returns_same_options() -> None:
    options = CommandOptions(min_args=2)
    assert options.merge({}) is options
    assert options.merge(None) is options


def test_merge_unknown_field_raises() -> None:
    with pytest.raises(TypeError, match="pmAllowed"):
        DEFAULT_COMMAND_OPTIONS.merge({"pmAllowed": True})


def test_resolve_options() -> None:
    explicit = CommandOptions(help_message="hi")
    assert resolve_options(None) is DEFAULT_COMMAND_OPTIONS
    assert resolve_options(explicit) is explicit
    assert resolve_options({"min_args": 1}) == CommandOptions(min_args=1)


# --- CommandRegistry ---


def test_register_then_lookup_merges_defaults(registry: CommandRegistry) -> None:
    registry.register("echo", noop, {"min_args": 1, "usage_message": "%f <Message>"})

    entry = registry.lookup("echo")
    assert entry is not None
    assert entry.name == "echo"
    assert entry.callback is noop
    assert entry.options == DEFAULT_COMMAND_OPTIONS.merge({"min_args": 1, "usage_message": "%f <Message>"})


def test_register_without_options_uses_defaults(registry: CommandRegistry) -> None:
    registry.register("ping", noop)
    assert registry.lookup("ping").options == DEFAULT_COMMAND_OPTIONS


def test_register_overwrites(registry: CommandRegistry) -> None:
    registry.register("ping", noop, {"max_args": 0})
    registry.register("ping", other)

    entry = registry.lookup("ping")
    assert entry.callback is other
    assert entry.options == DEFAULT_COMMAND_OPTIONS
    assert len(registry) == 1


def test_register_returns_registry_for_chaining(registry: CommandRegistry) -> None:
    registry.register("a", noop).register("b", noop)
    assert "a" in registry and "b" in registry


def test_lookup_is_case_sensitive(registry: CommandRegistry) -> None:
    registry.register("ping", noop)
    assert registry.lookup("Ping") is None
    assert registry.lookup("ping") is not None


def test_unregister(registry: CommandRegistry) -> None:
    registry.register("ping", noop)
    registry.unregister("ping")
    assert registry.lookup("ping") is None


def test_unregister_unknown_is_noop(registry: CommandRegistry) -> None:
    registry.unregister("missing")
    assert len(registry) == 0


def test_edit_callback(registry: CommandRegistry) -> None:
    registry.register("ping", noop, {"max_args": 0})
    registry.edit_callback("ping", other)

    entry = registry.lookup("ping")
    assert entry.callback is other
    assert entry.options.max_args == 0


def test_edit_callback_unknown_is_noop(registry: CommandRegistry) -> None:
    registry.edit_callback("missing", other)
    assert registry.lookup("missing") is None


def test_edit_options_merges_onto_existing(registry: CommandRegistry) -> None:
    registry.register("echo", noop, {"min_args": 1, "dm_allowed": True})
    registry.edit_options("echo", {"help_message": "Repeats"})

    options = registry.lookup("echo").options
    assert options.min_args == 1
    assert options.dm_allowed is True
    assert options.help_message == "Repeats"


def test_edit_options_empty_is_idempotent(registry: CommandRegistry) -> None:
    registry.register("echo", noop, {"min_args": 1})
    before = registry.lookup("echo")

    registry.edit_options("echo", {})

    assert registry.lookup("echo").options == before.options


def test_edit_options_unknown_is_noop(registry: CommandRegistry) -> None:
    registry.edit_options("missing", {"min_args": 3})
    assert registry.lookup("missing") is None


def test_edit_replaces_entry_instead_of_mutating(registry: CommandRegistry) -> None:
    registry.register("echo", noop)
    before = registry.lookup("echo")

    registry.edit_options("echo", {"min_args": 2})

    assert before.options.min_args == 0
    assert registry.lookup("echo").options.min_args == 2


def test_entries_follow_registration_order(registry: CommandRegistry) -> None:
    registry.register("b", noop)
    registry.register("a", noop)
    registry.register("c", noop)
    registry.register("b", other)

    assert [entry.name for entry in registry.entries()] == ["b", "a", "c"]


def test_entries_is_a_snapshot(registry: CommandRegistry) -> None:
    registry.register("a", noop)
    snapshot = registry.entries()
    registry.register("b", noop)
    assert [entry.name for entry in snapshot] == ["a"]
