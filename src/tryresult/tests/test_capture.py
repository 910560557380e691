"""Tests for capture_unknown, capture_normalized and the captured decorator."""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Iterator

import pytest
from pydantic import ValidationError

from tryresult import (
    ResultError,
    capture_normalized,
    capture_unknown,
    captured,
    clear_settings_cache,
    err,
    is_err,
    is_ok,
    ok,
    ok_or_throw,
    throw,
)

TEXT = "This is example testing text"
MESSAGE = "An error has occured"


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    clear_settings_cache()
    yield
    clear_settings_cache()


def read_success() -> str:
    return TEXT


def read_error() -> str:
    raise OSError(MESSAGE)


async def read_success_async() -> str:
    await asyncio.sleep(0)
    return TEXT


async def read_error_async() -> str:
    await asyncio.sleep(0)
    raise OSError(MESSAGE)


# ═════════════════════════════════════════════════════════════════════════════
# Sync
# ═════════════════════════════════════════════════════════════════════════════


def test_capture_unknown_sync_value() -> None:
    result = capture_unknown(read_success)
    assert result == ok(TEXT)


def test_capture_unknown_preserves_exception_identity() -> None:
    error = ValueError("boom")

    def fail() -> None:
        raise error

    result = capture_unknown(fail)
    assert is_err(result)
    assert result.error is error


def test_capture_unknown_preserves_raw_string() -> None:
    """A bare string failure comes back as the string itself."""
    result = capture_unknown(lambda: throw(MESSAGE))
    assert result == err(MESSAGE)


def test_capture_unknown_preserves_raw_structure() -> None:
    payload = {"code": 500}
    result = capture_unknown(lambda: ok_or_throw(err(payload)))
    assert result.error is payload


def test_capture_normalized_sync_value() -> None:
    assert capture_normalized(read_success) == ok(TEXT)


def test_capture_normalized_keeps_exception() -> None:
    result = capture_normalized(read_error)
    assert is_err(result)
    assert isinstance(result.error, OSError)
    assert str(result.error) == MESSAGE


def test_capture_normalized_wraps_raw_string() -> None:
    result = capture_normalized(lambda: throw(MESSAGE))
    assert is_err(result)
    assert isinstance(result.error, ResultError)
    assert result.error.message == MESSAGE


def test_capture_normalized_stringifies_structures() -> None:
    """Normalization only stringifies; it does not serialize."""
    result = capture_normalized(lambda: throw({"code": 500}))
    assert result.error.message == str({"code": 500})


def test_base_exceptions_propagate() -> None:
    def interrupt() -> None:
        raise KeyboardInterrupt

    with pytest.raises(KeyboardInterrupt):
        capture_unknown(interrupt)


def test_sync_path_is_immediate() -> None:
    result = capture_unknown(lambda: 1)
    assert not inspect.isawaitable(result)


# ═════════════════════════════════════════════════════════════════════════════
# Async
# ═════════════════════════════════════════════════════════════════════════════


@pytest.mark.asyncio
async def test_capture_unknown_async_value() -> None:
    pending = capture_unknown(read_success_async)
    assert inspect.isawaitable(pending)
    assert await pending == ok(TEXT)


@pytest.mark.asyncio
async def test_capture_unknown_async_error() -> None:
    result = await capture_unknown(read_error_async)
    assert is_err(result)
    assert isinstance(result.error, OSError)


@pytest.mark.asyncio
async def test_capture_unknown_async_raw_payload() -> None:
    async def fail() -> None:
        throw(MESSAGE)

    assert await capture_unknown(fail) == err(MESSAGE)


@pytest.mark.asyncio
async def test_capture_normalized_async() -> None:
    assert await capture_normalized(read_success_async) == ok(TEXT)

    result = await capture_normalized(read_error_async)
    assert is_err(result)
    assert str(result.error) == MESSAGE


@pytest.mark.asyncio
async def test_capture_normalized_async_raw_payload() -> None:
    async def fail() -> None:
        throw(MESSAGE)

    result = await capture_normalized(fail)
    assert isinstance(result.error, ResultError)
    assert result.error.message == MESSAGE


@pytest.mark.asyncio
async def test_resolves_only_after_suspension() -> None:
    """The Result is not observable before the computation settles."""
    gate = asyncio.Event()
    steps: list[str] = []

    async def slow() -> str:
        await gate.wait()
        steps.append("settled")
        return TEXT

    task = asyncio.ensure_future(capture_unknown(slow))
    await asyncio.sleep(0)
    assert not task.done()

    gate.set()
    result = await task
    assert steps == ["settled"]
    assert result == ok(TEXT)


@pytest.mark.asyncio
async def test_accepts_plain_awaitables() -> None:
    future: asyncio.Future[int] = asyncio.get_running_loop().create_future()
    future.set_result(3)
    assert await capture_unknown(lambda: future) == ok(3)


# ═════════════════════════════════════════════════════════════════════════════
# Decorator
# ═════════════════════════════════════════════════════════════════════════════


def test_captured_sync() -> None:
    @captured
    def parse(s: str) -> int:
        """Parse an int."""
        return int(s)

    assert parse("7") == ok(7)
    assert is_err(parse("x"))
    assert isinstance(parse("x").error, ValueError)
    assert parse.__doc__ == "Parse an int."


def test_captured_without_normalization() -> None:
    @captured(normalize=False)
    def fail() -> None:
        throw({"code": 1})

    assert fail() == err({"code": 1})


@pytest.mark.asyncio
async def test_captured_async() -> None:
    @captured
    async def fetch(flag: bool) -> str:
        await asyncio.sleep(0)
        if not flag:
            throw(MESSAGE)
        return TEXT

    assert inspect.iscoroutinefunction(fetch)
    assert await fetch(True) == ok(TEXT)
    failed = await fetch(False)
    assert is_err(failed) and failed.error.message == MESSAGE
    assert is_ok(await fetch(flag=True))


# ═════════════════════════════════════════════════════════════════════════════
# Logging
# ═════════════════════════════════════════════════════════════════════════════


def test_no_capture_logging_by_default(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="tryresult.capture"):
        capture_unknown(read_error)
    assert caplog.records == []


def test_capture_logging_enabled(monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture) -> None:
    monkeypatch.setenv("TRYRESULT_LOG_CAPTURES", "true")
    monkeypatch.setenv("TRYRESULT_LOG_LEVEL", "warning")
    clear_settings_cache()

    with caplog.at_level(logging.DEBUG, logger="tryresult.capture"):
        capture_unknown(read_error)

    [record] = caplog.records
    assert record.levelno == logging.WARNING
    assert record.getMessage() == f"captured OSError: {MESSAGE}"


def test_bad_log_level_never_escapes_capture(monkeypatch: pytest.MonkeyPatch) -> None:
    """An invalid environment value does not break the capture boundary."""
    monkeypatch.setenv("TRYRESULT_LOG_LEVEL", "verbose")

    result = capture_unknown(read_error)
    assert is_err(result)
    assert isinstance(result.error, OSError)

    with pytest.raises(ValidationError):
        clear_settings_cache()

    assert is_err(capture_unknown(read_error))
