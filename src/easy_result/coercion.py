"""Coercion of bare values and errors into results.

Lets a function return a plain value or a plain ``Error`` and still hand a
``Result`` to its callers:

    @returns_result
    def parse_port(raw: str) -> int | Error:
        if not raw.isdigit():
            return PortErrors.NOT_NUMERIC
        return int(raw)

    parse_port("8080")  # Result.success(8080)
    parse_port("http")  # Result.failure(Error(code='Port.NotNumeric', ...))
"""

from __future__ import annotations

from collections.abc import Callable
import functools
from typing import Any

from easy_result.error import Error
from easy_result.result import Result

__all__ = ["coerce", "returns_result"]


def coerce(obj: Any) -> Result[Any]:
    """Convert ``obj`` into a ``Result``.

    - a ``Result`` is returned unchanged;
    - an ``Error`` becomes ``Result.from_error(obj)``;
    - anything else goes through ``Result.from_value``, so ``None`` becomes a
      ``Error.NULL_VALUE`` failure and falsy values stay successes.
    """
    if isinstance(obj, Result):
        return obj
    if isinstance(obj, Error):
        return Result.from_error(obj)
    return Result.from_value(obj)


def returns_result[**P](func: Callable[P, Any]) -> Callable[P, Result[Any]]:
    """Decorate ``func`` so that its return value is passed through ``coerce``.

    Exceptions raised by ``func`` are not caught.
    """

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[Any]:
        return coerce(func(*args, **kwargs))

    return wrapper
