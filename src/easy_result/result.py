"""Result type for explicit success/failure outcomes.

A ``Result`` replaces exception-driven control flow for expected domain
failures. Construct one through the factories, never directly:

    def find_user(user_id: int) -> Result[User]:
        user = repo.get(user_id)
        if user is None:
            return Result.failure(UserErrors.NOT_FOUND)
        return Result.success(user)

The no-payload result is ``Result[None]``: ``Result.success()`` returns one
shared instance, since a success without payload carries no distinguishing
state. It is distinct from ``Result.success(None)``, which carries ``None``
as its payload.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
import dataclasses
import logging
from typing import Any, NoReturn, overload

from easy_result.error import Error
from easy_result.exceptions import InvariantViolationError, ValueAccessError

logger = logging.getLogger(__name__)


class _NoPayload:
    __slots__ = ()

    def __repr__(self) -> str:
        return "<no payload>"


_NO_PAYLOAD: Any = _NoPayload()


@dataclasses.dataclass(frozen=True, slots=True, repr=False, match_args=False)
class Result[TValue]:
    """The outcome of an operation: success with an optional payload, or failure.

    Invariants, checked at construction:
    - ``is_success`` is a ``bool``;
    - success results carry ``Error.NONE``;
    - failure results carry any other ``Error`` and no payload.

    A violation raises ``InvariantViolationError``. That is a bug in the
    caller, not a domain failure.

    Equality compares flag, error and payload with ``==``, so payloads follow
    Python's own equality: ``Result.success(1) == Result.success(True)``.

    Supports tuple unpacking and structural pattern matching on
    ``(is_success, error)``:

        ok, error = result

        match result:
            case Result(True, _):
                ...
            case Result(False, error):
                ...
    """

    __match_args__ = ("is_success", "error")

    is_success: bool
    error: Error
    _value: Any = _NO_PAYLOAD

    def __post_init__(self) -> None:
        """Reject inconsistent flag/error/payload combinations."""
        if not isinstance(self.is_success, bool):
            _fault(
                "A result success flag must be a bool, "
                f"got {type(self.is_success).__name__}."
            )
        if not isinstance(self.error, Error):
            _fault(
                "A result error must be an Error instance, "
                f"got {type(self.error).__name__}.",
                hint="Wrap domain failures as Error(code, message).",
            )
        if self.is_success and self.error != Error.NONE:
            _fault("A success result cannot contain an error.")
        if not self.is_success and self.error == Error.NONE:
            _fault(
                "A failure result must contain an error.",
                hint="Use a specific Error instead of Error.NONE.",
            )
        if not self.is_success and self._value is not _NO_PAYLOAD:
            _fault("A failure result cannot carry a value.")

    # -- factories ---------------------------------------------------------

    @overload
    @classmethod
    def success(cls) -> Result[None]: ...

    @overload
    @classmethod
    def success[T](cls, value: T) -> Result[T]: ...

    @classmethod
    def success(cls, value: Any = _NO_PAYLOAD) -> Result[Any]:
        """Create a successful result, optionally wrapping ``value``.

        Without a payload the shared success instance is returned. An explicit
        ``None`` is a payload like any other.
        """
        if value is _NO_PAYLOAD:
            return _SUCCESS
        return cls(True, Error.NONE, value)

    @classmethod
    def failure[T](cls, error: Error) -> Result[T]:
        """Create a failed result carrying ``error``.

        Raises:
            InvariantViolationError: If ``error`` is ``Error.NONE``.
        """
        return cls(False, error)

    @classmethod
    def from_value[T](cls, value: T | None) -> Result[T]:
        """Coerce a bare value into a result.

        ``None`` becomes a failure with ``Error.NULL_VALUE``. Every other
        value, falsy ones such as ``0``, ``""`` or ``False`` included,
        becomes a success.
        """
        if value is None:
            logger.debug("Coerced None into a %s failure", Error.NULL_VALUE.code)
            return cls.failure(Error.NULL_VALUE)
        return cls.success(value)

    @classmethod
    def from_error[T](cls, error: Error) -> Result[T]:
        """Coerce a bare error into a failed result."""
        return cls.failure(error)

    # -- inspection --------------------------------------------------------

    @property
    def is_failure(self) -> bool:
        return not self.is_success

    @property
    def has_payload(self) -> bool:
        """True for a success built with a value, ``None`` included."""
        return self._value is not _NO_PAYLOAD

    @property
    def value(self) -> TValue:
        """The payload of a successful result (``None`` when there is none).

        Raises:
            ValueAccessError: If the result is a failure. Check
                ``is_success`` first, or use ``match``.
        """
        if not self.is_success:
            logger.debug("Rejected value access on failure %s", self.error.code)
            raise ValueAccessError(
                self.error, hint="Check is_success before reading value."
            )
        if self._value is _NO_PAYLOAD:
            return None  # type: ignore[return-value]
        return self._value

    # -- composition -------------------------------------------------------

    def match[TOut](
        self,
        on_success: Callable[..., TOut],
        on_failure: Callable[[Error], TOut],
    ) -> TOut:
        """Run ``on_success`` or ``on_failure`` and return its result."""
        from easy_result import operators

        return operators.match(self, on_success, on_failure)

    def map[TNew](self, func: Callable[..., TNew]) -> Result[TNew]:
        """Transform the payload of a success; pass failures through."""
        from easy_result import operators

        return operators.map_result(self, func)

    def tap(self, action: Callable[..., object]) -> Result[TValue]:
        """Run ``action`` on the payload of a success and return ``self``."""
        from easy_result import operators

        return operators.tap(self, action)

    def ensure(
        self, predicate: Callable[..., bool], error: Error
    ) -> Result[TValue]:
        """Turn a success into ``failure(error)`` when ``predicate`` fails."""
        from easy_result import operators

        return operators.ensure(self, predicate, error)

    # -- protocols ---------------------------------------------------------

    def __iter__(self) -> Iterator[Any]:
        yield self.is_success
        yield self.error

    def __repr__(self) -> str:
        if self.is_failure:
            return f"Result.failure({self.error!r})"
        if self._value is _NO_PAYLOAD:
            return "Result.success()"
        return f"Result.success({self._value!r})"


def _fault(message: str, *, hint: str | None = None) -> NoReturn:
    logger.debug("Result invariant violated: %s", message)
    raise InvariantViolationError(message, hint=hint)


_SUCCESS: Result[None] = Result(True, Error.NONE)
