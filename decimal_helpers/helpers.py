"""Decimal arithmetic helpers.

Two families of functions live here:

- None-tolerant: value_equals(), value_or_zero(), sum_values() and sum_by()
  treat None as "no value" and never raise for it.
- None-intolerant: equals(), not_equals(), add(), subtract(),
  multiply_by_int() and clamp_non_negative() raise NullInputError when
  given None. Use these when a missing value is a bug, not a domain state.

Arithmetic is exact. Sums and products are computed in a context sized to
the operands, so no result is rounded to the default 28 digits.

Usage:
    from decimal_helpers import divide_by_hundred, sum_by, value_or_zero

    rate = divide_by_hundred("15")                          # Decimal("0.15")
    total = sum_by(lines, lambda line: line.discount)       # skips None
    discount = value_or_zero(order.discount)
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from decimal import Decimal, Inexact
from typing import TypeVar

import structlog

from decimal_helpers.constants import CENT, HUNDRED, PERCENT_SCALE, ZERO
from decimal_helpers.contexts import (
    exact_context,
    product_precision,
    sum_precision,
)
from decimal_helpers.errors import PrecisionError
from decimal_helpers.parsing import parse_decimal, require_present

__all__ = [
    "add",
    "clamp_non_negative",
    "divide_by_hundred",
    "equals",
    "greater_than_zero",
    "less_than_zero",
    "multiply_by_int",
    "not_equals",
    "subtract",
    "sum_by",
    "sum_values",
    "value_equals",
    "value_or_zero",
]

logger = structlog.get_logger()

T = TypeVar("T")


def _as_decimal(value: Decimal | int, name: str) -> Decimal:
    """Return value as a Decimal, converting ints exactly.

    Raises:
        NullInputError: If value is None
        TypeError: If value is neither a Decimal nor an int (bools included)
    """
    require_present(value, name)
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Decimal(value)
    raise TypeError(f"{name} must be Decimal or int, got {type(value).__name__}")


# =============================================================================
# None-tolerant helpers
# =============================================================================


def value_equals(a: Decimal | None, b: Decimal | None) -> bool:
    """True if both values are present and numerically equal.

    Scale is ignored: Decimal("1.0") equals Decimal("1.00"). None on either
    side (or both) gives False.
    """
    return a is not None and b is not None and a == b


def value_or_zero(value: Decimal | None) -> Decimal:
    """Return value, or ZERO if it is None."""
    return ZERO if value is None else value


def sum_values(*values: Decimal | None) -> Decimal:
    """Sum the present values, skipping None.

    Returns ZERO when called with no values or only None.

    Raises:
        TypeError: If a present value is neither a Decimal nor an int
    """
    total = ZERO
    for index, value in enumerate(values):
        if value is not None:
            total = add(total, _as_decimal(value, f"values[{index}]"))
    return total


def sum_by(items: Iterable[T], extractor: Callable[[T], Decimal | None]) -> Decimal:
    """Sum extractor(item) over items, skipping items that extract to None.

    Args:
        items: Items to sum over
        extractor: Maps an item to its Decimal value, or None for no value

    Returns:
        Sum of the present extracted values (ZERO if there are none)

    Raises:
        TypeError: If an extracted value is neither a Decimal nor an int
    """
    return sum_values(*(extractor(item) for item in items))


# =============================================================================
# None-intolerant helpers
# =============================================================================


def equals(a: Decimal, b: Decimal) -> bool:
    """True if a and b are numerically equal.

    Raises:
        NullInputError: If either value is None
    """
    require_present(a, "a")
    require_present(b, "b")
    return a == b


def not_equals(a: Decimal, b: Decimal) -> bool:
    """Negation of equals().

    Raises:
        NullInputError: If either value is None
    """
    return not equals(a, b)


def add(a: Decimal, b: Decimal) -> Decimal:
    """Exact a + b.

    Raises:
        NullInputError: If either value is None
        TypeError: If either value is neither a Decimal nor an int
    """
    a = _as_decimal(a, "a")
    b = _as_decimal(b, "b")
    return exact_context(sum_precision(a, b)).add(a, b)


def subtract(a: Decimal, b: Decimal) -> Decimal:
    """Exact a - b.

    Raises:
        NullInputError: If either value is None
        TypeError: If either value is neither a Decimal nor an int
    """
    a = _as_decimal(a, "a")
    b = _as_decimal(b, "b")
    return exact_context(sum_precision(a, b)).subtract(a, b)


def multiply_by_int(multiplier: Decimal, multiplicand: int) -> Decimal:
    """Exact multiplier * multiplicand.

    Args:
        multiplier: Decimal factor
        multiplicand: Integer factor, converted to Decimal first

    Raises:
        NullInputError: If either value is None
        TypeError: If multiplier is not a Decimal or int, or multiplicand is not an int
    """
    multiplier = _as_decimal(multiplier, "multiplier")
    require_present(multiplicand, "multiplicand")
    if isinstance(multiplicand, bool) or not isinstance(multiplicand, int):
        raise TypeError(f"multiplicand must be int, got {type(multiplicand).__name__}")

    factor = Decimal(multiplicand)
    return exact_context(product_precision(multiplier, factor)).multiply(multiplier, factor)


def clamp_non_negative(value: Decimal) -> Decimal:
    """Return value if it is not negative, else ZERO.

    Raises:
        NullInputError: If value is None
    """
    require_present(value, "value")
    return ZERO if value < ZERO else value


# =============================================================================
# Helpers over numeric strings
# =============================================================================


def divide_by_hundred(percent: str) -> Decimal:
    """Convert a percentage string into its fractional form with scale 2.

    The division never rounds: "50" gives Decimal("0.50") and "7" gives
    Decimal("0.07"), but "12.5" (0.125) raises PrecisionError.

    Args:
        percent: Percentage as a numeric string

    Returns:
        percent / 100 with exactly PERCENT_SCALE fractional digits

    Raises:
        NullInputError: If percent is None
        ParseError: If percent is not a decimal number
        PrecisionError: If the exact quotient has more than PERCENT_SCALE
            significant fractional digits
    """
    value = parse_decimal(percent)

    # Dividing by 100 never needs more digits than the dividend has
    quotient = exact_context(len(value.as_tuple().digits)).divide(value, HUNDRED)

    # Integer digits + PERCENT_SCALE fractional digits
    context = exact_context(max(quotient.adjusted(), 0) + 1 + PERCENT_SCALE)
    try:
        result = quotient.quantize(CENT, context=context)
    except Inexact as err:
        logger.debug(
            "percent_conversion_inexact",
            percent=percent,
            quotient=str(quotient),
            scale=PERCENT_SCALE,
        )
        raise PrecisionError(quotient, PERCENT_SCALE) from err

    # "-0" and "0" both convert to 0.00
    return result.copy_abs() if result.is_zero() else result


def greater_than_zero(num: str) -> bool:
    """True if num parses to a value above zero.

    Raises:
        NullInputError: If num is None
        ParseError: If num is not a decimal number
    """
    return parse_decimal(num) > ZERO


def less_than_zero(num: str) -> bool:
    """True if num parses to a value below zero.

    Raises:
        NullInputError: If num is None
        ParseError: If num is not a decimal number
    """
    return parse_decimal(num) < ZERO
