"""
Payroll Core - Gross Pay Calculator

Gross pay = base salary + overtime + bonuses.

Overtime:
- Hourly rate = base salary / 151.67 (35h/week x 52 weeks / 12 months)
- First tier paid at 125% of the hourly rate
- Second tier paid at 150% of the hourly rate

Each amount is rounded to the cent as soon as it is computed.
"""

from decimal import Decimal
from typing import Any

from payroll_core.models.payroll import GrossPayBreakdown, GrossPayResult
from payroll_core.schemas.payroll import GrossPayInput
from payroll_core.utils.error_handling import InvalidInputException, validate_amount
from payroll_core.utils.money import round_money


# ===========================================
# CONSTANTS
# ===========================================

# 35 hours x 52 weeks / 12 months
STANDARD_MONTHLY_HOURS = Decimal("151.67")

# Legal full-time week
FULL_TIME_WEEKLY_HOURS = Decimal("35")

OVERTIME_25_MULTIPLIER = Decimal("1.25")
OVERTIME_50_MULTIPLIER = Decimal("1.5")


def hourly_rate(base_salary: Decimal) -> Decimal:
    """Unrounded hourly rate; only ever used as a multiplier."""
    return base_salary / STANDARD_MONTHLY_HOURS


def compute_gross(gross_input: GrossPayInput) -> GrossPayResult:
    """
    Calculate total gross pay with its line breakdown.

    Returns:
        GrossPayResult with total, per-component amounts and hourly rate
    """
    base = round_money(gross_input.base_salary)
    bonuses = round_money(gross_input.bonuses)
    rate = hourly_rate(gross_input.base_salary)

    overtime_25 = round_money(rate * OVERTIME_25_MULTIPLIER * gross_input.overtime_hours_25)
    overtime_50 = round_money(rate * OVERTIME_50_MULTIPLIER * gross_input.overtime_hours_50)

    total = round_money(base + overtime_25 + overtime_50 + bonuses)

    return GrossPayResult(
        total=total,
        breakdown=GrossPayBreakdown(
            base=base,
            overtime_25_amount=overtime_25,
            overtime_50_amount=overtime_50,
            bonuses=bonuses,
        ),
        hourly_rate=rate,
    )


def prorate_salary(
    full_time_salary: Any,
    weekly_hours: Any,
    full_time_hours: Any = FULL_TIME_WEEKLY_HOURS,
) -> Decimal:
    """
    Scale a full-time salary to a part-time contract.

    Contracts at or above the full-time week keep the full salary.
    """
    salary = validate_amount(full_time_salary, "full_time_salary")
    hours = validate_amount(weekly_hours, "weekly_hours")
    reference = validate_amount(full_time_hours, "full_time_hours")

    if hours == 0 or reference == 0:
        raise InvalidInputException(
            "Weekly hours must be greater than zero",
            field="weekly_hours",
            details={"weekly_hours": str(hours), "full_time_hours": str(reference)},
        )

    if hours >= reference:
        return round_money(salary)

    return round_money(salary * hours / reference)
