from types import SimpleNamespace

import pytest

from command_client.commands.command_handler import CommandHandler
from command_client.commands.command_registry import CommandRegistry
from command_client.utils.monitoring import Monitoring
from discord_fakes import BOT_MEMBER, Recorder


@pytest.fixture
def client() -> SimpleNamespace:
    """Stand-in for CommandClient's mutable settings."""
    return SimpleNamespace(
        prefix="!",
        command_not_allowed_message="You aren't allowed to run this command.",
        enable_help=True,
        user=BOT_MEMBER,
        monitoring=Monitoring(),
    )


@pytest.fixture
def registry() -> CommandRegistry:
    return CommandRegistry()


@pytest.fixture
def handler(client: SimpleNamespace, registry: CommandRegistry) -> CommandHandler:
    return CommandHandler(client, registry)


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()
