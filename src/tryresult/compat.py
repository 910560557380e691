"""Bare-union helpers kept from the pre-Result API.

These return ``T | BaseException`` instead of a Result. New code should use
capture_normalized and the Result combinators.

The oldest helpers map as follows: ``resultAll`` is try_sync (awaiting is
unnecessary for a sync callback), ``hasError`` and ``isError`` are is_error,
``okOr`` is value_or.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TypeVar

from .capture import capture_unknown
from .errors import to_error
from .result import Result, _OK

T = TypeVar("T")


def _unwrap_union(result: Result[T, object]) -> T | BaseException:
    return result._value if result._tag is _OK else to_error(result._value)  # type: ignore[return-value]


def try_sync(callback: Callable[[], T]) -> T | BaseException:
    """Call callback, returning its value or the exception it raised."""
    return _unwrap_union(capture_unknown(callback))  # type: ignore[arg-type]


async def try_async(awaitable: Awaitable[T]) -> T | BaseException:
    """Await an already-created awaitable, returning its value or the exception it raised."""
    return _unwrap_union(await capture_unknown(lambda: awaitable))


def is_error(value: object) -> bool:
    """True if value is an exception; narrows a bare union to its error arm."""
    return isinstance(value, BaseException)


def value_or(value: T | BaseException, default: T) -> T:
    """Discard an error in favor of default."""
    return default if isinstance(value, BaseException) else value
