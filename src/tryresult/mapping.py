"""Transformations over one arm of a Result, plus canonical error mappers.

map_ok/map_err are not capture boundaries: a mapper that raises propagates
to the caller. map_err_to_error/map_err_to_string are ready-made targets for
map_err.

Example:
    >>> from tryresult import err, map_err
    >>> map_err(err({"code": 404}), map_err_to_string).error
    '{"code":404}'
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Callable, TypeVar

import orjson
from pydantic import BaseModel

from .config import get_settings
from .errors import ResultError
from .result import Result

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")


def map_ok(result: Result[T, E], fn: Callable[[T], U]) -> Result[U, E]:
    """Apply fn to the Ok value. Err is returned unchanged and fn is not called."""
    return result.map(fn)


def map_err(result: Result[T, E], fn: Callable[[E], F]) -> Result[T, F]:
    """Apply fn to the Err value. Ok is returned unchanged and fn is not called."""
    return result.map_err(fn)


# ═══════════════════════════════════════════════════════════════════════════════
# Structured Payloads
# ═══════════════════════════════════════════════════════════════════════════════


def _is_structured(value: object) -> bool:
    if isinstance(value, (Mapping, list, tuple, BaseModel)):
        return True
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def _default(obj: object) -> object:
    """orjson fallback for values it cannot encode natively."""
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    if isinstance(obj, Mapping):
        return dict(obj)
    return str(obj)


def serialize(value: object) -> str:
    """Render a structured value as a diagnostic JSON-like string.

    Not a canonical format: key order follows insertion unless
    TRYRESULT_SERIALIZE_SORT_KEYS is set, and unencodable leaves are
    stringified. Falls back to str(value) if encoding fails outright.
    """
    option = orjson.OPT_NON_STR_KEYS
    if get_settings().serialize.sort_keys:
        option |= orjson.OPT_SORT_KEYS
    try:
        return orjson.dumps(value, default=_default, option=option).decode()
    except orjson.JSONEncodeError:
        return str(value)


# ═══════════════════════════════════════════════════════════════════════════════
# Mappers
# ═══════════════════════════════════════════════════════════════════════════════


def _exception_message(exc: BaseException) -> str:
    # KeyError quotes its key in str(); a lone string argument is the message
    if len(exc.args) == 1 and isinstance(exc.args[0], str):
        return exc.args[0]
    return str(exc)


def map_err_to_error(error: object) -> BaseException:
    """Map any failure payload to an error object. For use with map_err.

    Precedence: exception (returned as-is) → str → structured value
    (serialized) → str(error).
    """
    if isinstance(error, BaseException):
        return error
    if isinstance(error, str):
        return ResultError(error)
    if _is_structured(error):
        return ResultError(serialize(error))
    return ResultError(str(error))


def map_err_to_string(error: object) -> str:
    """Map any failure payload to a string. For use with map_err.

    Precedence: str (as-is) → exception message (its lone string argument,
    else str(exc)) → structured value (serialized) → str(error).
    """
    if isinstance(error, str):
        return error
    if isinstance(error, ResultError):
        return error.message
    if isinstance(error, BaseException):
        return _exception_message(error)
    if _is_structured(error):
        return serialize(error)
    return str(error)
