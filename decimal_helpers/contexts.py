"""Per-call decimal contexts.

Arithmetic through the thread's default context rounds to 28 significant
digits. These helpers build contexts sized to the operands instead, so
results are exact (or rounded only where a caller asks for it) whatever
decimal.getcontext() says.
"""

from __future__ import annotations

from decimal import MAX_EMAX, MIN_EMIN, Context, Decimal, Inexact, InvalidOperation

__all__ = [
    "exact_context",
    "product_precision",
    "rounding_context",
    "sum_precision",
]


def _digits(value: Decimal) -> int:
    return len(value.as_tuple().digits)


def _exponent(value: Decimal) -> int:
    # as_tuple() reports "n", "N" or "F" as the exponent of NaN and Infinity
    return value.as_tuple().exponent if value.is_finite() else 0


def sum_precision(a: Decimal, b: Decimal) -> int:
    """Significant digits needed to hold a + b (or a - b) exactly."""
    highest = max(a.adjusted(), b.adjusted())
    lowest = min(_exponent(a), _exponent(b))
    # +1 for the digit at position 0, +1 for a carry
    return max(highest - lowest + 2, 1)


def product_precision(a: Decimal, b: Decimal) -> int:
    """Significant digits needed to hold a * b exactly."""
    return _digits(a) + _digits(b)


def exact_context(precision: int) -> Context:
    """Context that raises decimal.Inexact instead of rounding."""
    return Context(
        prec=max(precision, 1),
        Emax=MAX_EMAX,
        Emin=MIN_EMIN,
        traps=[InvalidOperation, Inexact],
    )


def rounding_context(precision: int, rounding: str) -> Context:
    """Context that rounds with the given mode."""
    return Context(
        prec=max(precision, 1),
        rounding=rounding,
        Emax=MAX_EMAX,
        Emin=MIN_EMIN,
        traps=[InvalidOperation],
    )
