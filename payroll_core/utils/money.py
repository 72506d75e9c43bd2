"""
Payroll Core - Money Helpers

Decimal conversion and rounding shared by every calculator.
Amounts are rounded half-up to the cent at each computed value.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Iterable


CENT = Decimal("0.01")
ZERO = Decimal("0")


def to_decimal(value: Any) -> Decimal:
    """Convert ints, strings and floats to Decimal via their string form."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_money(value: Any) -> Decimal:
    """Round to 2 decimal places, half-up."""
    return to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def sum_money(values: Iterable[Decimal]) -> Decimal:
    return round_money(sum(values, ZERO))
