"""Composition operators over ``Result``.

Stateless functions; each one returns either its input or a new result and
never mutates anything. The same operations are available as chaining
methods on ``Result`` (``result.map(f).ensure(p, err).tap(log)``).

Callbacks that receive a success payload are called with it as the single
argument. A success without payload (``Result.success()``) calls them with no
arguments, so no-payload results pair with zero-argument callbacks. A
payload of ``None`` is still a payload and is passed along like any other.
"""

from __future__ import annotations

from collections.abc import Callable
import logging
from typing import TYPE_CHECKING, Any

from easy_result.result import Result

if TYPE_CHECKING:
    from easy_result.error import Error

__all__ = ["ensure", "map_result", "match", "tap"]

logger = logging.getLogger(__name__)


def _call_with_payload[TOut](func: Callable[..., TOut], result: Result[Any]) -> TOut:
    if not result.has_payload:
        return func()
    return func(result.value)


def match[TOut](
    result: Result[Any],
    on_success: Callable[..., TOut],
    on_failure: Callable[[Error], TOut],
) -> TOut:
    """Run exactly one branch and return what it produces.

    Example:
        message = match(result, lambda v: f"ok:{v}", lambda e: f"err:{e.code}")
    """
    if result.is_success:
        return _call_with_payload(on_success, result)
    return on_failure(result.error)


def map_result[TValue, TNew](
    result: Result[TValue], func: Callable[[TValue], TNew]
) -> Result[TNew]:
    """Apply ``func`` to the payload of a success.

    The outcome always carries ``func``'s return value as its payload, even
    when that value is ``None``. A failure is re-wrapped with the very same ``Error`` object and ``func`` is
    not called.
    """
    if result.is_success:
        return Result.success(_call_with_payload(func, result))
    return Result.failure(result.error)


def tap[TValue](
    result: Result[TValue], action: Callable[[TValue], object]
) -> Result[TValue]:
    """Invoke ``action`` for its side effect on a success; return ``result``.

    Exceptions raised by ``action`` propagate to the caller.
    """
    if result.is_success:
        _call_with_payload(action, result)
    return result


def ensure[TValue](
    result: Result[TValue], predicate: Callable[[TValue], bool], error: Error
) -> Result[TValue]:
    """Require ``predicate`` to hold for the payload of a success.

    Failures short-circuit without evaluating ``predicate``. A success whose
    payload fails the predicate becomes ``Result.failure(error)``.
    """
    if result.is_failure:
        return result
    if _call_with_payload(predicate, result):
        return result
    logger.debug("Predicate rejected success payload; failing with %s", error.code)
    return Result.failure(error)
