"""
Payroll Core - Payroll Calculators Package

Pure payroll calculation functions.

Modules:
- rates_service: contribution rate tables per fiscal year (2023-2025)
- gross_service: gross pay with +25%/+50% overtime, part-time pro-ration
- contributions_service: itemized employee/employer contributions
- net_service: taxable income, withholding tax, net pay, employer cost
- leave_service: monthly paid-leave accrual (2.5 days/month)
- history_service: annual cumulation and month-by-month table
"""

from decimal import Decimal
from typing import Any

from pydantic import ValidationError

from payroll_core.models.payroll import ContributionResult, GrossPayResult
from payroll_core.schemas.payroll import GrossPayInput
from payroll_core.utils.error_handling import from_validation_error
from payroll_core.services.payroll_calculators.rates_service import (
    RATE_TABLES,
    LATEST_FISCAL_YEAR,
    get_rates,
    known_fiscal_years,
    resolve_fiscal_year,
)
from payroll_core.services.payroll_calculators.gross_service import (
    STANDARD_MONTHLY_HOURS,
    FULL_TIME_WEEKLY_HOURS,
    compute_gross,
    prorate_salary,
)
from payroll_core.services.payroll_calculators.contributions_service import (
    EXECUTIVE_RETIREMENT_MULTIPLIER,
    CATEGORY_DESCRIPTORS,
    CategoryDescriptor,
    compute_contributions,
)
from payroll_core.services.payroll_calculators.net_service import (
    NON_DEDUCTIBLE_CSG_CRDS_RATE,
    compute_net,
)
from payroll_core.services.payroll_calculators.leave_service import (
    STANDARD_MONTHLY_ACCRUAL,
    accrue_month,
    leave_balance_series,
)
from payroll_core.services.payroll_calculators.history_service import (
    cumulate_year,
    monthly_table,
    month_label,
)


# ===========================================
# CONVENIENCE FUNCTIONS
# ===========================================

def calculate_gross(
    base_salary: Any,
    overtime_hours_25: Any = Decimal("0"),
    overtime_hours_50: Any = Decimal("0"),
    bonuses: Any = Decimal("0"),
) -> GrossPayResult:
    """
    Calculate gross pay from plain values.

    Raises:
        ValidationException: for negative or non-numeric inputs
    """
    try:
        gross_input = GrossPayInput(
            base_salary=base_salary,
            overtime_hours_25=overtime_hours_25,
            overtime_hours_50=overtime_hours_50,
            bonuses=bonuses,
        )
    except ValidationError as e:
        raise from_validation_error(e, "Invalid gross pay input") from e
    return compute_gross(gross_input)


def calculate_contributions(
    gross: Any,
    fiscal_year: int,
    is_executive: bool = False,
) -> ContributionResult:
    """
    Calculate contributions with the rate table of a fiscal year.

    Unknown years use the latest table.
    """
    return compute_contributions(gross, get_rates(fiscal_year), is_executive)


__all__ = [
    # Rates
    "RATE_TABLES",
    "LATEST_FISCAL_YEAR",
    "get_rates",
    "known_fiscal_years",
    "resolve_fiscal_year",
    # Gross
    "STANDARD_MONTHLY_HOURS",
    "FULL_TIME_WEEKLY_HOURS",
    "compute_gross",
    "prorate_salary",
    # Contributions
    "EXECUTIVE_RETIREMENT_MULTIPLIER",
    "CATEGORY_DESCRIPTORS",
    "CategoryDescriptor",
    "compute_contributions",
    # Net
    "NON_DEDUCTIBLE_CSG_CRDS_RATE",
    "compute_net",
    # Leave
    "STANDARD_MONTHLY_ACCRUAL",
    "accrue_month",
    "leave_balance_series",
    # History
    "cumulate_year",
    "monthly_table",
    "month_label",
    # Convenience functions
    "calculate_gross",
    "calculate_contributions",
]
