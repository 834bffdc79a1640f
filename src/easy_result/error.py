"""Domain error descriptor: an immutable ``(code, message)`` pair."""

from __future__ import annotations

import dataclasses
from typing import ClassVar


@dataclasses.dataclass(frozen=True, slots=True)
class Error:
    """A domain failure identified by a stable code and a readable message.

    Equality and hashing are structural over both fields. ``str(error)``
    yields the bare code; use ``error.message`` for the human-readable text.
    Fields are not validated.

    Example:
        NOT_FOUND = Error("User.NotFound", "The user does not exist.")
        assert str(NOT_FOUND) == "User.NotFound"
    """

    #: Marker for "no error"; carried by every successful result.
    NONE: ClassVar[Error]
    #: Used when a ``None`` payload is coerced into a result.
    NULL_VALUE: ClassVar[Error]

    code: str
    message: str

    def __str__(self) -> str:
        return self.code


Error.NONE = Error("", "")
Error.NULL_VALUE = Error("Error.NullValue", "The specified result value is null.")
