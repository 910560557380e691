"""Error objects raised and produced by tryresult.

- ResultError: canonical normalized failure (message + optional cause/details)
- InvalidResultError: misuse of a value that is not a well-formed Result
- UnwrapError: carrier for raising a non-exception failure payload
"""

from __future__ import annotations

from typing import NoReturn


class ResultError(Exception):
    """Canonical error object for normalized failures.

    The message doubles as ``str(error)``. A cause, when given, is chained
    through ``__cause__`` so the original exception keeps its identity.
    """

    def __init__(self, message: str, *, details: str | None = None, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details
        if cause is not None:
            self.__cause__ = cause

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class InvalidResultError(ResultError):
    """Raised when a combinator receives something that is neither Ok nor Err."""

    def __init__(self, message: str = "Invalid result type") -> None:
        super().__init__(message)


class UnwrapError(ResultError):
    """Carries a non-exception failure payload through ``raise``.

    Python can only raise exceptions, so ``throw("boom")`` raises
    ``UnwrapError`` with ``.error == "boom"``. The capture layer unpacks it
    again, so the raw payload round-trips unchanged.
    """

    def __init__(self, error: object) -> None:
        super().__init__(str(error))
        self.error = error


def throw(value: object) -> NoReturn:
    """Raise value as a failure signal. Exceptions are raised as-is."""
    if isinstance(value, BaseException):
        raise value
    raise UnwrapError(value)


def to_error(value: object) -> BaseException:
    """Coerce a raw failure into an error object by stringification only."""
    if isinstance(value, BaseException):
        return value
    return ResultError(str(value))
