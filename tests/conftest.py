"""Pytest configuration and fixtures.

Provides awaitable test doubles and log capture for the converter.
"""

from __future__ import annotations

import asyncio
from collections.abc import Generator
import logging
from typing import Any

import pytest

# =============================================================================
# Test Doubles
# =============================================================================


class ReadyAwaitable:
    """Hand-rolled awaitable (no coroutine, no Future) that is also callable.

    Awaiting yields to the loop once, then returns ``value`` or raises
    ``error``. Calls are counted so tests can assert it was awaited, not
    called.
    """

    def __init__(self, value: Any = None, *, error: BaseException | None = None):
        self.value = value
        self.error = error
        self.calls = 0

    def __await__(self) -> Generator[Any, None, Any]:
        yield from asyncio.sleep(0).__await__()
        if self.error is not None:
            raise self.error
        return self.value

    def __call__(self) -> str:
        self.calls += 1
        return "called"


@pytest.fixture
def ready_awaitable() -> type[ReadyAwaitable]:
    """Return the ReadyAwaitable class for per-test construction."""
    return ReadyAwaitable


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture
def debug_logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """Capture DEBUG records from the trycatch logger hierarchy."""
    caplog.set_level(logging.DEBUG, logger="trycatch")
    return caplog
