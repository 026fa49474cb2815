import logging
from typing import Any

import pytest
import structlog
from structlog.testing import capture_logs

from smurfscan.core.observability import (
    clear_correlation_id,
    configure_logging,
    set_correlation_id,
    traced,
)


@pytest.mark.asyncio
async def test_traced_async_logs_start_and_finish() -> None:
    """capture_logs() bypasses merge_contextvars, so only the wrapper's own fields are checked."""
    set_correlation_id("test-cid-1234")

    @traced(log_level="INFO", add_metadata={"flow": "unit"})
    async def _foo(x: int) -> int:
        return x * 2

    try:
        with capture_logs() as cap:
            assert await _foo(x=21) == 42
    finally:
        clear_correlation_id()

    events = [e["event"] for e in cap]
    assert events == ["function_started", "function_finished"]
    assert all(e["flow"] == "unit" for e in cap)
    assert cap[0]["kwargs"] == {"x": "21"}
    assert "duration_ms" in cap[1]


@pytest.mark.asyncio
async def test_traced_async_logs_failure_and_reraises() -> None:
    @traced()
    async def _boom() -> None:
        raise RuntimeError("nope")

    with capture_logs() as cap:
        with pytest.raises(RuntimeError, match="nope"):
            await _boom()

    failed = [e for e in cap if e["event"] == "function_failed"]
    assert len(failed) == 1
    assert failed[0]["error_type"] == "RuntimeError"
    assert failed[0]["log_level"] == "error"


def test_traced_sync_and_masks_sensitive_kwargs() -> None:
    @traced(log_level="DEBUG")
    def _login(api_key: str, user: str) -> str:
        return user

    with capture_logs() as cap:
        assert _login(api_key="RGAPI-1234567890", user="alice") == "alice"

    started = cap[0]
    assert started["kwargs"]["api_key"] == "RGAP…890"
    assert started["kwargs"]["user"] == "'alice'"
    assert "RGAPI-1234567890" not in repr(cap)


def test_traced_preserves_function_metadata() -> None:
    @traced(capture_kwargs=False)
    def documented() -> None:
        """Docstring survives."""

    assert documented.__name__ == "documented"
    assert documented.__doc__ == "Docstring survives."


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
    root.setLevel(level)
    structlog.reset_defaults()


@pytest.mark.usefixtures("restore_logging")
def test_configure_logging_writes_json_to_stderr(capsys) -> None:
    configure_logging("DEBUG", json_output=True)

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert logging.getLogger("aiohttp.access").level == logging.WARNING

    logging.getLogger("smurfscan.test").info("hello %s", "world")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert '"event": "hello world"' in captured.err
    assert '"level": "info"' in captured.err


def _events(cap: list[dict[str, Any]]) -> list[str]:
    return [e["event"] for e in cap]


def test_nested_traced_calls() -> None:
    @traced()
    def inner() -> int:
        return 1

    @traced()
    def outer() -> int:
        return inner() + 1

    with capture_logs() as cap:
        assert outer() == 2

    assert _events(cap) == [
        "function_started",
        "function_started",
        "function_finished",
        "function_finished",
    ]
