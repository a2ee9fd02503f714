"""Pytest configuration and fixtures."""

from collections.abc import Iterator
from decimal import ROUND_FLOOR, Context, localcontext

import pytest
from structlog.testing import capture_logs


@pytest.fixture
def low_precision_context() -> Iterator[Context]:
    """Shrink the thread's default decimal context to 3 digits, rounding down.

    Helpers must not depend on the default context, so results computed
    inside this fixture should match the exact ones.
    """
    with localcontext() as ctx:
        ctx.prec = 3
        ctx.rounding = ROUND_FLOOR
        yield ctx


@pytest.fixture
def log_events() -> Iterator[list[dict]]:
    """Capture structlog events emitted during the test."""
    with capture_logs() as events:
        yield events
