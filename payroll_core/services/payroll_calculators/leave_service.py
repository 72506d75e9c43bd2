"""
Payroll Core - Paid Leave Tracker

Running paid-leave balance: 2.5 days earned per month worked
(30 working days a year), minus the days taken. The balance may go
negative when an employee takes leave in advance.
"""

from decimal import Decimal
from typing import Any, Iterable, List

from payroll_core.models.payroll import PayslipRecord
from payroll_core.utils.error_handling import InvalidInputException, validate_amount
from payroll_core.utils.money import ZERO, to_decimal


# ===========================================
# CONSTANTS
# ===========================================

STANDARD_MONTHLY_ACCRUAL = Decimal("2.5")


def accrue_month(
    previous_balance: Any,
    accrued_this_month: Any = STANDARD_MONTHLY_ACCRUAL,
    taken_this_month: Any = ZERO,
) -> Decimal:
    """Get the leave balance after one month."""
    try:
        balance = to_decimal(previous_balance)
    except ArithmeticError:
        balance = None
    if balance is None or not balance.is_finite():
        raise InvalidInputException(
            f"Invalid leave balance: {previous_balance}",
            field="previous_balance",
        )

    accrued = validate_amount(accrued_this_month, "accrued_this_month")
    taken = validate_amount(taken_this_month, "taken_this_month")
    return balance + accrued - taken


def leave_balance_series(
    records: Iterable[PayslipRecord],
    opening_balance: Any = ZERO,
) -> List[Decimal]:
    """Running balance after each record, in month order."""
    balance = to_decimal(opening_balance)
    series = []
    for record in sorted(records, key=lambda r: r.period_month):
        balance = accrue_month(balance, record.leave_accrued, record.leave_taken)
        series.append(balance)
    return series
