"""Pytest configuration and fixtures.

Provides logging configuration. All fixtures here are autouse unless noted.
"""

from __future__ import annotations

import logging

import pytest

# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def library_debug_logging():
    """Let caplog see the library's debug records."""
    logging.getLogger("easy_result").setLevel(logging.DEBUG)
