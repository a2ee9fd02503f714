"""Fixed-pattern decimal formatting.

A DecimalFormat renders a Decimal with a fixed number of fractional digits
in plain notation: no exponent, no grouping separators. Formats are frozen
and every call builds its own decimal.Context, so one instance can be
shared by any number of threads without locking and results never depend
on the calling thread's default context.

Usage:
    from decimal_helpers.formatting import TWO_DECIMAL_FORMAT

    TWO_DECIMAL_FORMAT.format(Decimal("1"))      # "1.00"
    TWO_DECIMAL_FORMAT.format(Decimal("2.345"))  # "2.34" (half-even)
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import (
    ROUND_05UP,
    ROUND_CEILING,
    ROUND_DOWN,
    ROUND_FLOOR,
    ROUND_HALF_DOWN,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    ROUND_UP,
    Context,
    Decimal,
)

from decimal_helpers.contexts import rounding_context
from decimal_helpers.parsing import require_present

__all__ = [
    "DecimalFormat",
    "INTEGER_FORMAT",
    "TWO_DECIMAL_FORMAT",
    "format_as_integer",
    "format_as_two_decimal",
]

_ROUNDING_MODES = frozenset(
    {
        ROUND_05UP,
        ROUND_CEILING,
        ROUND_DOWN,
        ROUND_FLOOR,
        ROUND_HALF_DOWN,
        ROUND_HALF_EVEN,
        ROUND_HALF_UP,
        ROUND_UP,
    }
)


@dataclass(frozen=True)
class DecimalFormat:
    """Formatting pattern with a fixed number of fractional digits.

    Attributes:
        fraction_digits: Digits rendered after the decimal point (0 = none,
            and no decimal point)
        rounding: decimal rounding mode applied when the value has more
            fractional digits (default: ROUND_HALF_EVEN)
    """

    fraction_digits: int
    rounding: str = ROUND_HALF_EVEN

    def __post_init__(self) -> None:
        if isinstance(self.fraction_digits, bool) or not isinstance(self.fraction_digits, int):
            raise TypeError(
                f"fraction_digits must be int, got {type(self.fraction_digits).__name__}"
            )
        if self.fraction_digits < 0:
            raise ValueError(f"fraction_digits cannot be negative: {self.fraction_digits}")
        if self.rounding not in _ROUNDING_MODES:
            raise ValueError(f"Unknown rounding mode: {self.rounding!r}")

    @property
    def exponent(self) -> Decimal:
        """Quantization exponent, e.g. Decimal("1E-2") for two digits."""
        return Decimal((0, (1,), -self.fraction_digits))

    def format(self, value: Decimal | int) -> str:
        """Render value with exactly fraction_digits fractional digits.

        Negative values that round to zero keep their sign ("-0", "-0.00").

        Raises:
            NullInputError: If value is None
            TypeError: If value is not a Decimal or int
            ValueError: If value is NaN or infinite
        """
        require_present(value, "value")
        if isinstance(value, bool) or not isinstance(value, (Decimal, int)):
            raise TypeError(f"Cannot format {type(value).__name__} as a decimal")
        number = Decimal(value)
        if not number.is_finite():
            raise ValueError(f"Cannot format non-finite value: {number}")

        context = self._context_for(number)
        return f"{number.quantize(self.exponent, context=context):f}"

    def _context_for(self, number: Decimal) -> Context:
        # Integer digits + fractional digits + one for a rounding carry (9.99 -> 10.0)
        precision = max(number.adjusted(), 0) + 1 + self.fraction_digits + 1
        return rounding_context(precision, self.rounding)


INTEGER_FORMAT = DecimalFormat(fraction_digits=0)
TWO_DECIMAL_FORMAT = DecimalFormat(fraction_digits=2)


def format_as_integer(value: Decimal) -> str:
    """Format value as an integer string, rounding half-even.

    Example: Decimal("3.7") -> "4", Decimal("2.5") -> "2"
    """
    return INTEGER_FORMAT.format(value)


def format_as_two_decimal(value: Decimal) -> str:
    """Format value with exactly two fractional digits, rounding half-even.

    Example: Decimal("1") -> "1.00"
    """
    return TWO_DECIMAL_FORMAT.format(value)
