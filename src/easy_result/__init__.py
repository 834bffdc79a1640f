"""easy-result: explicit success/failure values instead of exceptions.

Public API:
    - Error: Immutable (code, message) domain error with NONE/NULL_VALUE sentinels
    - Result: Success or failure outcome, with an optional payload
    - match, map_result, tap, ensure: Composition operators
    - coerce, returns_result: Bare value/Error to Result coercion
    - EasyResultError, InvariantViolationError, ValueAccessError: Programming faults
"""

from __future__ import annotations

import logging

from easy_result.coercion import coerce, returns_result
from easy_result.error import Error
from easy_result.exceptions import (
    EasyResultError,
    InvariantViolationError,
    ValueAccessError,
)
from easy_result.operators import ensure, map_result, match, tap
from easy_result.result import Result

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("easy-result")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("easy_result").addHandler(logging.NullHandler())

__all__ = [
    "EasyResultError",
    "Error",
    "InvariantViolationError",
    "Result",
    "ValueAccessError",
    "__version__",
    "coerce",
    "ensure",
    "map_result",
    "match",
    "returns_result",
    "tap",
]
