"""Test helpers module for shared test utilities.

- constants: Decimal values reused across tests
- factories: LineItem factory for extractor-based sums
"""

from tests.helpers.constants import (
    HUGE,
    MINUS_ONE,
    NEGATIVE_ZERO,
    ONE,
    ONE_POINT_ZERO,
    ONE_POINT_ZERO_ZERO,
    TINY,
)
from tests.helpers.factories import LineItem, make_line_item

__all__ = [
    # Constants
    "ONE",
    "ONE_POINT_ZERO",
    "ONE_POINT_ZERO_ZERO",
    "MINUS_ONE",
    "NEGATIVE_ZERO",
    "HUGE",
    "TINY",
    # Factories
    "LineItem",
    "make_line_item",
]
