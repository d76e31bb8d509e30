# utils/rounding.py

from decimal import Decimal, ROUND_FLOOR
from typing import Union

Number = Union[int, float, Decimal]

ONE = Decimal("1")
HUNDRED = Decimal("100")
HALF = Decimal("0.5")


def to_decimal(value: Number) -> Decimal:
    """Convert ints/floats to Decimal via their shortest repr (10.1 -> Decimal('10.1'))."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_amount(value: Decimal) -> int:
    """Round to the nearest whole unit, halves towards positive infinity (-2.5 -> -2)."""
    return int((value + HALF).to_integral_value(rounding=ROUND_FLOOR))


def scale_amount(amount: int, factor: Number) -> int:
    """``round(amount * factor)``."""
    return round_amount(to_decimal(amount) * to_decimal(factor))


def percent_of(amount: int, percent: Number) -> int:
    """``round(amount * percent / 100)``."""
    return round_amount(to_decimal(amount) * to_decimal(percent) / HUNDRED)


def remaining_after(amount: int, percent: Number) -> int:
    """``round(amount * (1 - percent / 100))``."""
    return round_amount(to_decimal(amount) * (ONE - to_decimal(percent) / HUNDRED))
