"""Fixed-point helpers for currency amounts."""
from decimal import Decimal, ROUND_HALF_UP

CENT = Decimal("0.01")

# Split rounding drift and the settled dead-zone share this bound.
TOLERANCE = Decimal("0.01")

ZERO = Decimal("0")


def to_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def round_money(value) -> Decimal:
    """Round to cents, half-up."""
    return to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)
