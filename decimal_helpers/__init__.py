"""Exact decimal arithmetic helpers.

Null-safe defaults, value equality, exact sums and percentage conversion
over decimal.Decimal, plus fixed-pattern formatting that is safe to share
between threads.
"""

from decimal_helpers.constants import HUNDRED, PERCENT_SCALE, ZERO
from decimal_helpers.errors import (
    DecimalHelperError,
    NullInputError,
    ParseError,
    PrecisionError,
)
from decimal_helpers.formatting import (
    INTEGER_FORMAT,
    TWO_DECIMAL_FORMAT,
    DecimalFormat,
    format_as_integer,
    format_as_two_decimal,
)
from decimal_helpers.helpers import (
    add,
    clamp_non_negative,
    divide_by_hundred,
    equals,
    greater_than_zero,
    less_than_zero,
    multiply_by_int,
    not_equals,
    subtract,
    sum_by,
    sum_values,
    value_equals,
    value_or_zero,
)
from decimal_helpers.parsing import DecimalString, parse_decimal, require_present

__version__ = "0.1.0"
__all__ = [
    # Constants
    "ZERO",
    "HUNDRED",
    "PERCENT_SCALE",
    # Errors
    "DecimalHelperError",
    "ParseError",
    "PrecisionError",
    "NullInputError",
    # Parsing
    "DecimalString",
    "parse_decimal",
    "require_present",
    # Formatting
    "DecimalFormat",
    "INTEGER_FORMAT",
    "TWO_DECIMAL_FORMAT",
    "format_as_integer",
    "format_as_two_decimal",
    # Helpers
    "value_equals",
    "value_or_zero",
    "clamp_non_negative",
    "multiply_by_int",
    "divide_by_hundred",
    "add",
    "subtract",
    "equals",
    "not_equals",
    "sum_values",
    "sum_by",
    "greater_than_zero",
    "less_than_zero",
    "__version__",
]
