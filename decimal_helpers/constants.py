"""Shared decimal constants.

Quantization exponents are written as Decimal literals so that
Decimal.quantize() can use them directly.
"""

from decimal import Decimal

ZERO = Decimal(0)

# Divisor when turning a percentage into its fractional form
HUNDRED = Decimal(100)

# Fractional digits kept by divide_by_hundred
PERCENT_SCALE = 2

# Quantization exponent for PERCENT_SCALE
CENT = Decimal("0.01")
