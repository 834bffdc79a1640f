"""Test helpers (small, reusable doubles).

Keep this file tiny and purpose-built: it exists so operator tests can count
callback invocations without defining one-off closures everywhere.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

_ECHO = object()


@dataclass
class CallSpy:
    """Callable that records every call and returns a scripted value.

    By default the spy echoes its first positional argument (or ``None`` when
    called without arguments).
    """

    returns: Any = _ECHO
    calls: list[tuple[Any, ...]] = field(default_factory=list)

    def __call__(self, *args: Any) -> Any:
        self.calls.append(args)
        if self.returns is not _ECHO:
            return self.returns
        return args[0] if args else None

    @property
    def call_count(self) -> int:
        return len(self.calls)


@dataclass
class RaisingAction:
    """Callable that always raises ``exc``; used to verify propagation."""

    exc: BaseException
    calls: int = 0

    def __call__(self, *args: Any) -> Any:
        del args
        self.calls += 1
        raise self.exc
