"""Tests for utils/error_handler.py."""

import asyncio

import pytest

from command_client.utils.error_handler import ErrorHandler, get_error_handler, setup_error_handler


@pytest.fixture
def loop():
    loop = asyncio.new_event_loop()
    yield loop
    loop.close()


def test_handle_exception_counts_per_context() -> None:
    handler = ErrorHandler()

    assert handler.handle_exception(ValueError("bad"), "ping") == 1
    assert handler.handle_exception(ValueError("bad"), "ping") == 2
    assert handler.handle_exception(KeyError("k"), "ping") == 1
    assert handler.handle_exception(ValueError("bad")) == 1

    assert handler.error_counts == {
        "ping:ValueError": 2,
        "ping:KeyError": 1,
        ":ValueError": 1,
    }


def test_loop_exception_handler_counts_exceptions(loop) -> None:
    handler = setup_error_handler(loop)
    assert handler is get_error_handler()
    before = handler.error_counts.get("async:RuntimeError", 0)

    loop.call_exception_handler({"message": "Task exception", "exception": RuntimeError("boom")})

    assert handler.error_counts["async:RuntimeError"] == before + 1


def test_loop_exception_handler_without_exception(loop) -> None:
    handler = setup_error_handler(loop)
    before = dict(handler.error_counts)

    loop.call_exception_handler({"message": "Unclosed connector"})

    assert handler.error_counts == before


@pytest.mark.asyncio
async def test_initialize_uses_running_loop() -> None:
    running = asyncio.get_running_loop()
    handler = ErrorHandler()

    handler.initialize()
    try:
        assert running.get_exception_handler() == handler._async_exception_handler
    finally:
        running.set_exception_handler(None)
