"""Typed error handling with explicit Result values.

- Result/ok/err: tagged union of a success value or a failure value
- is_ok/is_err/ok_or_throw/ok_or/match: inspect and unwrap a Result
- map_ok/map_err: transform one arm, with map_err_to_error/map_err_to_string
- capture_unknown/capture_normalized/captured: turn raised failures into Err,
  for plain and awaitable computations alike

Example:
    >>> from tryresult import capture_normalized, match
    >>>
    >>> result = capture_normalized(lambda: int("not a number"))
    >>> match(result, ok=lambda n: n * 2, err=lambda e: f"bad input: {e}")
    "bad input: invalid literal for int() with base 10: 'not a number'"
"""

from .capture import capture_normalized, capture_unknown, captured
from .compat import is_error, try_async, try_sync, value_or
from .config import TryResultSettings, clear_settings_cache, get_settings
from .errors import InvalidResultError, ResultError, UnwrapError, throw, to_error
from .mapping import map_err, map_err_to_error, map_err_to_string, map_ok
from .result import (
    Result,
    Tag,
    collect_results,
    err,
    is_err,
    is_ok,
    match,
    ok,
    ok_or,
    ok_or_throw,
    sequence,
)

__all__ = [
    # Core
    "Result", "Tag", "ok", "err", "is_ok", "is_err", "ok_or_throw", "ok_or", "match",
    "sequence", "collect_results",
    # Mapping
    "map_ok", "map_err", "map_err_to_error", "map_err_to_string",
    # Capture
    "capture_unknown", "capture_normalized", "captured",
    # Errors
    "ResultError", "InvalidResultError", "UnwrapError", "throw", "to_error",
    # Config
    "TryResultSettings", "get_settings", "clear_settings_cache",
    # Bare-union API
    "try_sync", "try_async", "is_error", "value_or",
]
