"""Capture raised failures of a computation into a Result.

The capture adapters are the only place where raised exceptions become Err
values. Dispatch between the sync and async paths happens at call time on
what the computation returns: a plain value gives an immediate Result, an
awaitable gives a coroutine that resolves to a Result once it settles.

Example:
    >>> from tryresult import capture_normalized
    >>> capture_normalized(lambda: int("42"))
    Ok(42)
    >>> capture_normalized(lambda: int("x")).is_err()
    True

    Async computations return a coroutine to await:
    >>> async def fetch() -> str: ...
    >>> result = await capture_normalized(fetch)  # doctest: +SKIP
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Any, Coroutine, ParamSpec, TypeVar, overload

from .config import get_settings
from .errors import UnwrapError, to_error
from .result import Result, _ERR, _OK

T = TypeVar("T")
P = ParamSpec("P")

logger = logging.getLogger("tryresult.capture")


def _failure(exc: Exception) -> Result[Any, object]:
    """Err holding the raw failure, unpacking UnwrapError carriers."""
    log = get_settings().logging
    if log.captures:
        logger.log(logging.getLevelNamesMapping()[log.level], "captured %s: %s", type(exc).__name__, exc)
    return Result(exc.error if isinstance(exc, UnwrapError) else exc, _ERR)


async def _settle(awaitable: Awaitable[T]) -> Result[T, object]:
    try:
        return Result(await awaitable, _OK)
    except Exception as e:
        return _failure(e)


@overload
def capture_unknown(fn: Callable[[], Awaitable[T]]) -> Coroutine[Any, Any, Result[T, object]]: ...
@overload
def capture_unknown(fn: Callable[[], T]) -> Result[T, object]: ...
def capture_unknown(
    fn: Callable[[], T] | Callable[[], Awaitable[T]],
) -> Result[T, object] | Coroutine[Any, Any, Result[T, object]]:
    """Run fn and capture whatever it raises, unmodified, as Err.

    Raw payloads raised via throw()/ok_or_throw() come back as the payload
    itself. Only Exception subclasses are captured; KeyboardInterrupt,
    SystemExit and asyncio.CancelledError propagate.
    """
    try:
        value = fn()
    except Exception as e:
        return _failure(e)
    if inspect.isawaitable(value):
        return _settle(value)
    return Result(value, _OK)


def _normalize(result: Result[T, object]) -> Result[T, BaseException]:
    if result._tag is _OK or isinstance(result._value, BaseException):
        return result  # type: ignore[return-value]
    return Result(to_error(result._value), _ERR)


async def _normalize_async(pending: Awaitable[Result[T, object]]) -> Result[T, BaseException]:
    return _normalize(await pending)


@overload
def capture_normalized(fn: Callable[[], Awaitable[T]]) -> Coroutine[Any, Any, Result[T, BaseException]]: ...
@overload
def capture_normalized(fn: Callable[[], T]) -> Result[T, BaseException]: ...
def capture_normalized(
    fn: Callable[[], T] | Callable[[], Awaitable[T]],
) -> Result[T, BaseException] | Coroutine[Any, Any, Result[T, BaseException]]:
    """Run fn like capture_unknown, but guarantee the Err payload is an exception.

    Exceptions pass through unchanged; any other raw payload becomes
    ResultError(str(payload)).
    """
    outcome = capture_unknown(fn)
    if inspect.isawaitable(outcome):
        return _normalize_async(outcome)
    return _normalize(outcome)


# ═══════════════════════════════════════════════════════════════════════════════
# Decorator
# ═══════════════════════════════════════════════════════════════════════════════


@overload
def captured(fn: Callable[P, T], /) -> Callable[P, Any]: ...
@overload
def captured(*, normalize: bool = True) -> Callable[[Callable[P, T]], Callable[P, Any]]: ...
def captured(
    fn: Callable[P, T] | None = None,
    /,
    *,
    normalize: bool = True,
) -> Callable[P, Any] | Callable[[Callable[P, T]], Callable[P, Any]]:
    """Decorator: every call of the wrapped function returns a Result.

    Works bare (@captured) or with options (@captured(normalize=False)).
    ``async def`` functions stay coroutine functions.

    Example:
        >>> @captured
        ... def parse(s: str) -> int:
        ...     return int(s)
        >>> parse("7")
        Ok(7)
    """
    run = capture_normalized if normalize else capture_unknown

    def decorator(func: Callable[P, T]) -> Callable[P, Any]:
        if inspect.iscoroutinefunction(func):
            @wraps(func)
            async def async_wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[Any, Any]:
                return await run(lambda: func(*args, **kwargs))  # type: ignore[misc]
            return async_wrapper

        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Any:
            return run(lambda: func(*args, **kwargs))
        return wrapper

    return decorator(fn) if fn is not None else decorator
