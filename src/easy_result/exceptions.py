"""Fault hierarchy for easy-result.

These exceptions signal programming errors: an inconsistent ``Result`` or a
payload read from a failure. They are deliberately not ``Error`` values and
are never folded back into a ``Result``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from easy_result.error import Error


class EasyResultError(Exception):
    """Base exception for all easy-result faults."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint

    def __str__(self) -> str:
        """Return the message, followed by the hint when one is attached."""
        msg = super().__str__()
        return f"{msg.rstrip('.')}. {self.hint}" if self.hint else msg


class InvariantViolationError(EasyResultError):
    """A Result was constructed with an inconsistent success flag and error."""


class ValueAccessError(InvariantViolationError):
    """The payload of a failure result was read.

    The offending domain error is kept on ``error`` for diagnostics.
    """

    def __init__(self, error: Error, *, hint: str | None = None) -> None:
        super().__init__(
            "The value of a failure result can not be accessed "
            f"(error code: {error.code!r}).",
            hint=hint,
        )
        self.error = error
