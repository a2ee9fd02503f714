"""Strict parsing of decimal values.

Decimal() on its own is lenient: it strips whitespace, accepts underscores
and produces NaN or Infinity from text. parse_decimal() only accepts plain
finite numbers written with ASCII digits, such as "12", "-0.5", ".25" or
"1E+3", and raises ParseError for anything else.
"""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import Annotated, Any, TypeVar

import structlog
from pydantic import BeforeValidator

from decimal_helpers.errors import NullInputError, ParseError

__all__ = [
    "DecimalString",
    "parse_decimal",
    "require_present",
    "validate_decimal",
]

logger = structlog.get_logger()

T = TypeVar("T")

# sign, integer part with optional fraction (or bare fraction), optional exponent
_DECIMAL_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def require_present(value: T | None, name: str) -> T:
    """Return value, or raise NullInputError if it is None.

    Args:
        value: Argument to check
        name: Argument name used in the error message

    Raises:
        NullInputError: If value is None
    """
    if value is None:
        raise NullInputError(name)
    return value


def parse_decimal(text: str) -> Decimal:
    """Parse a numeric string into a finite Decimal.

    The scale of the input is preserved: "1.50" parses to Decimal("1.50").

    Args:
        text: Numeric string

    Returns:
        The parsed Decimal

    Raises:
        NullInputError: If text is None
        ParseError: If text is not a string or not a plain decimal number
    """
    require_present(text, "text")
    if not isinstance(text, str):
        raise ParseError(text, f"expected str, got {type(text).__name__}")

    if _DECIMAL_PATTERN.fullmatch(text) is None:
        logger.debug("decimal_parse_failed", text=text[:32])
        raise ParseError(text)

    try:
        return Decimal(text)
    except InvalidOperation as err:
        # Only reachable for exponents beyond what the decimal module supports
        logger.debug("decimal_parse_failed", text=text[:32], reason="exponent_out_of_range")
        raise ParseError(text, "exponent out of range") from err


def validate_decimal(value: Any) -> Decimal:
    """Validate a field value as an exact Decimal.

    Strings go through parse_decimal(). Ints and finite Decimals pass
    through. Floats are rejected since they are not exact.

    Raises:
        ValueError: If the value is not an exact decimal number
    """
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise ValueError(f"Decimal must be finite, got {value}")
        return value

    if isinstance(value, bool):
        raise ValueError("Decimal cannot be a bool")

    if isinstance(value, int):
        return Decimal(value)

    if isinstance(value, str):
        return parse_decimal(value)

    raise ValueError(f"Decimal must be string, int or Decimal, got {type(value).__name__}")


# Decimal field for pydantic models, parsed with the same rules as the helpers
DecimalString = Annotated[Decimal, BeforeValidator(validate_decimal)]
