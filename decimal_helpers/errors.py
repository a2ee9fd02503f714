"""Errors raised by the decimal helpers.

All errors derive from DecimalHelperError, itself an ArithmeticError, so a
caller can catch everything this package raises with one clause:

    try:
        ratio = divide_by_hundred(raw)
    except DecimalHelperError:
        ...

The narrow subclasses also inherit from the builtin error that best matches
their cause (ValueError for unparseable text, TypeError for a missing
argument) so existing handlers keep working.
"""

from __future__ import annotations

from decimal import Decimal


class DecimalHelperError(ArithmeticError):
    """Base class for decimal helper errors."""

    pass


class ParseError(DecimalHelperError, ValueError):
    """Text is not a finite decimal number."""

    def __init__(self, text: object, reason: str = "not a decimal number") -> None:
        self.text = text
        super().__init__(f"Cannot parse {text!r}: {reason}")


class PrecisionError(DecimalHelperError):
    """Exact result cannot be represented at the required scale without rounding."""

    def __init__(self, value: Decimal, scale: int) -> None:
        self.value = value
        self.scale = scale
        super().__init__(f"{value} cannot be represented with {scale} fractional digits")


class NullInputError(DecimalHelperError, TypeError):
    """None passed where a value is required."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"{name} must not be None")
