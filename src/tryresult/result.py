"""Result type for explicit success/failure values.

A Result is a discriminated union tagged Ok or Err. The free functions
(ok, err, is_ok, is_err, ok_or_throw, ok_or, match) are the primary API;
Result methods are sugar with the same semantics.

Performance notes:
- Uses __slots__ for minimal memory footprint
- Direct attribute access (no method calls) in hot paths
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Callable, Generic, TypeVar

from .errors import InvalidResultError, throw

if TYPE_CHECKING:
    from collections.abc import Iterator

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")


class Tag(StrEnum):
    """Discriminator of a Result."""
    OK = "Ok"
    ERR = "Err"


_OK = Tag.OK
_ERR = Tag.ERR


class Result(Generic[T, E]):
    """Discriminated union representing success (Ok) or failure (Err).

    Immutable once built. ``value`` exists only on Ok and ``error`` only on
    Err; read either after narrowing with is_ok()/is_err().

    Examples:
        >>> ok(42).map(lambda x: x * 2).unwrap()
        84
        >>> err("fail").map(lambda x: x * 2).error
        'fail'
        >>> match(ok(5), ok=lambda v: f"got {v}", err=lambda e: f"failed: {e}")
        'got 5'
    """

    __slots__ = ("_tag", "_value")
    __match_args__ = ("_tag", "_value")

    def __init__(self, value: T | E, tag: Tag) -> None:
        object.__setattr__(self, "_tag", tag)
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[type[Result[T, E]], tuple[T | E, Tag]]:
        return (Result, (self._value, self._tag))

    # ─── Fields ───────────────────────────────────────────────────────

    @property
    def tag(self) -> Tag:
        return self._tag

    @property
    def value(self) -> T:
        """Ok payload. AttributeError on Err."""
        if self._tag is _OK:
            return self._value  # type: ignore[return-value]
        raise AttributeError("Err result has no 'value'")

    @property
    def error(self) -> E:
        """Err payload. AttributeError on Ok."""
        if self._tag is _ERR:
            return self._value  # type: ignore[return-value]
        raise AttributeError("Ok result has no 'error'")

    # ─── Type Checking ────────────────────────────────────────────────

    def is_ok(self) -> bool:
        return self._tag is _OK

    def is_err(self) -> bool:
        return self._tag is _ERR

    # ─── Value Extraction ─────────────────────────────────────────────

    def unwrap(self) -> T:
        """Same as ok_or_throw(self)."""
        return ok_or_throw(self)

    def unwrap_or(self, default: T) -> T:
        return self._value if self._tag is _OK else default  # type: ignore[return-value]

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        """Extract Ok value or compute a fallback from the error via f."""
        return self._value if self._tag is _OK else f(self._value)  # type: ignore[return-value,arg-type]

    # ─── Transformations ──────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        """Apply f to Ok value. Err passes through and f is not called."""
        return Result(f(self._value), _OK) if self._tag is _OK else self  # type: ignore[arg-type,return-value]

    def map_err(self, f: Callable[[E], F]) -> Result[T, F]:
        """Apply f to Err value. Ok passes through and f is not called."""
        return Result(f(self._value), _ERR) if self._tag is _ERR else self  # type: ignore[arg-type,return-value]

    def and_then(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Chain an operation that can itself fail. Short-circuits on Err."""
        return f(self._value) if self._tag is _OK else self  # type: ignore[arg-type,return-value]

    def match(self, *, ok: Callable[[T], U], err: Callable[[E], U]) -> U:
        """Same as match(self, ok=..., err=...)."""
        return match(self, ok=ok, err=err)

    # ─── Dunder Methods ───────────────────────────────────────────────

    __bool__ = lambda self: self._tag is _OK  # noqa: E731
    __hash__ = lambda self: hash((self._tag, self._value))  # noqa: E731
    __repr__ = lambda self: f"{self._tag.value}({self._value!r})"  # noqa: E731
    __str__ = __repr__

    def __eq__(self, other: object) -> bool:
        return self._tag == other._tag and self._value == other._value if isinstance(other, Result) else NotImplemented

    def __iter__(self) -> Iterator[T]:
        """Iterate: yields value if Ok, nothing if Err."""
        if self._tag is _OK:
            yield self._value  # type: ignore[misc]


# ═══════════════════════════════════════════════════════════════════════════════
# Constructors
# ═══════════════════════════════════════════════════════════════════════════════


def ok(value: T) -> Result[T, E]:
    """Construct Ok variant (success)."""
    return Result(value, _OK)


def err(error: E) -> Result[T, E]:
    """Construct Err variant (failure)."""
    return Result(error, _ERR)


# ═══════════════════════════════════════════════════════════════════════════════
# Predicates & Extraction
# ═══════════════════════════════════════════════════════════════════════════════


def _tag_of(result: object) -> object:
    # Tolerates fabricated objects so misuse surfaces as InvalidResultError
    return getattr(result, "_tag", None)


def is_ok(result: Result[T, E]) -> bool:
    """True if result is Ok. After a True check, ``result.value`` is safe to read."""
    return _tag_of(result) == _OK


def is_err(result: Result[T, E]) -> bool:
    """True if result is Err. After a True check, ``result.error`` is safe to read."""
    return _tag_of(result) == _ERR


def ok_or_throw(result: Result[T, E]) -> T:
    """Return the Ok value, or raise the Err payload.

    An exception payload is raised as-is (same object). Any other payload is
    raised wrapped in UnwrapError, whose ``.error`` is the payload.

    Raises:
        InvalidResultError: result is neither Ok nor Err
    """
    tag = _tag_of(result)
    if tag == _OK:
        return result._value  # type: ignore[return-value]
    if tag == _ERR:
        throw(result._value)
    raise InvalidResultError()


def ok_or(result: Result[T, E], default: T) -> T:
    """Return the Ok value, or default on Err. Never raises."""
    return result._value if is_ok(result) else default  # type: ignore[return-value]


def match(result: Result[T, E], *, ok: Callable[[T], U], err: Callable[[E], U]) -> U:
    """Exhaustive case analysis. Exactly one handler runs.

    Example:
        >>> match(err("denied"), ok=lambda v: f"value: {v}", err=lambda e: f"error: {e}")
        'error: denied'

    Raises:
        InvalidResultError: result is neither Ok nor Err
    """
    tag = _tag_of(result)
    if tag == _OK:
        return ok(result._value)  # type: ignore[arg-type]
    if tag == _ERR:
        return err(result._value)  # type: ignore[arg-type]
    raise InvalidResultError()


# ═══════════════════════════════════════════════════════════════════════════════
# Collection Operations
# ═══════════════════════════════════════════════════════════════════════════════


def sequence(results: list[Result[T, E]]) -> Result[list[T], E]:
    """List[Result[T,E]] → Result[List[T], E]. Fail-fast on first Err."""
    values: list[T] = []
    for r in results:
        if r._tag is not _OK:
            return r  # type: ignore[return-value]
        values.append(r._value)  # type: ignore[arg-type]
    return Result(values, _OK)


def collect_results(results: list[Result[T, E]]) -> Result[list[T], list[E]]:
    """Collect all Results, accumulating ALL errors (not fail-fast)."""
    values: list[T] = []
    errors: list[E] = []
    for r in results:
        (values if r._tag is _OK else errors).append(r._value)  # type: ignore[arg-type]
    return Result(values, _OK) if not errors else Result(errors, _ERR)
