"""
Payroll Core - Payslip History and Annual Cumulation

Folds an employee's monthly payslip records into year-to-date totals and a
month-by-month table.

The records are the source of truth: totals are recomputed on demand, and
a month without a record stays absent rather than becoming a zero row.
"""

import logging
from decimal import Decimal
from typing import Dict, Iterable, List, Optional

from payroll_core.models.payroll import AnnualCumulation, MonthlyRow, PayslipRecord
from payroll_core.services.payroll_calculators.leave_service import accrue_month
from payroll_core.utils.error_handling import DuplicatePeriodException, validate_period
from payroll_core.utils.money import ZERO, sum_money, to_decimal

logger = logging.getLogger(__name__)


# ===========================================
# CONSTANTS
# ===========================================

MONTH_LABELS = (
    "JAN", "FEV", "MAR", "AVR", "MAI", "JUN",
    "JUL", "AOU", "SEP", "OCT", "NOV", "DEC",
)


def month_label(month: int, year: int) -> str:
    """Short month label, e.g. JAN24."""
    return f"{MONTH_LABELS[month - 1]}{str(year)[-2:]}"


def cumulate_year(records: Iterable[PayslipRecord]) -> Optional[AnnualCumulation]:
    """
    Calculate annual totals for one employee and year.

    The employee and year are taken from the first record; records for
    any other employee or year are left out. An empty history is a normal
    state for a new employee and returns None.

    Raises:
        InvalidTaxPeriodException: if any record has a month outside 1-12
    """
    records = list(records)
    if not records:
        return None

    for record in records:
        validate_period(record.period_month, record.period_year)

    first = records[0]
    key = (first.employee_id, first.period_year)
    matching = [r for r in records if (r.employee_id, r.period_year) == key]

    skipped = len(records) - len(matching)
    if skipped:
        logger.warning(
            f"Skipped {skipped} payslip record(s) not belonging to "
            f"employee {first.employee_id} / {first.period_year}"
        )

    return AnnualCumulation(
        employee_id=first.employee_id,
        year=first.period_year,
        gross=sum_money(r.gross for r in matching),
        net=sum_money(r.net for r in matching),
        employee_contributions=sum_money(r.employee_contributions for r in matching),
        employer_contributions=sum_money(r.employer_contributions for r in matching),
        employer_cost=sum_money(r.employer_cost for r in matching),
        tax_amount=sum_money(r.tax_amount for r in matching),
        leave_accrued=sum((r.leave_accrued for r in matching), ZERO),
        leave_taken=sum((r.leave_taken for r in matching), ZERO),
        records=tuple(sorted(matching, key=lambda r: r.period_month)),
    )


def monthly_table(
    cumulation: Optional[AnnualCumulation],
    opening_leave_balance: Decimal = ZERO,
) -> List[MonthlyRow]:
    """
    Build the 12-month table for an annual cumulation.

    Months without a payslip are marked as not issued: their amounts are
    None while the leave balance carries over unchanged.
    """
    if cumulation is None:
        return []

    by_month: Dict[int, PayslipRecord] = {}
    for record in cumulation.records:
        if record.period_month in by_month:
            raise DuplicatePeriodException(
                cumulation.employee_id, record.period_month, cumulation.year
            )
        by_month[record.period_month] = record

    rows = []
    balance = to_decimal(opening_leave_balance)
    for month in range(1, 13):
        label = month_label(month, cumulation.year)
        record = by_month.get(month)

        if record is None:
            rows.append(MonthlyRow(
                month=month,
                label=label,
                issued=False,
                gross=None,
                net=None,
                contributions=None,
                tax_amount=None,
                leave_accrued=None,
                leave_taken=None,
                leave_balance=balance,
            ))
            continue

        balance = accrue_month(balance, record.leave_accrued, record.leave_taken)
        rows.append(MonthlyRow(
            month=month,
            label=label,
            issued=True,
            gross=record.gross,
            net=record.net,
            contributions=record.employee_contributions,
            tax_amount=record.tax_amount,
            leave_accrued=record.leave_accrued,
            leave_taken=record.leave_taken,
            leave_balance=balance,
        ))

    return rows
