"""
Payroll Core - Net Pay and Employer Cost

From gross and contributions to the amounts paid:
- Net before tax = gross - employee contributions
- Taxable income (net imposable) = gross - deductible employee contributions
- Withholding tax = taxable income x personal rate
- Net salary = net before tax - withholding tax
- Employer cost = gross + employer contributions

Non-deductible contributions:
- 2.4 points of CSG and the whole 0.5% CRDS are not deductible from taxable
  income, i.e. 2.9% of the CSG/CRDS base
"""

from decimal import Decimal
from typing import Any

from payroll_core.models.payroll import (
    ContributionCategory,
    ContributionResult,
    NetPayResult,
)
from payroll_core.utils.error_handling import validate_amount, validate_rate_percent
from payroll_core.utils.money import ZERO, round_money


# ===========================================
# CONSTANTS
# ===========================================

# CSG non déductible (2.4%) + CRDS (0.5%), applied to the CSG/CRDS base
NON_DEDUCTIBLE_CSG_CRDS_RATE = Decimal("0.029")


def non_deductible_contributions(contributions: ContributionResult) -> Decimal:
    """
    Employee contributions that stay in taxable income.

    Zero when no CSG/CRDS line was charged; never more than what the
    CSG and CRDS lines actually withheld.
    """
    csg = contributions.item(ContributionCategory.CSG)
    crds = contributions.item(ContributionCategory.CRDS)
    lines = [line for line in (csg, crds) if line is not None]
    if not lines:
        return ZERO

    charged = sum((line.employee_amount for line in lines), ZERO)
    portion = round_money(lines[0].base * NON_DEDUCTIBLE_CSG_CRDS_RATE)
    return min(portion, charged)


def compute_net(
    gross: Any,
    contributions: ContributionResult,
    tax_rate_percent: Any = Decimal("0"),
) -> NetPayResult:
    """
    Calculate net pay, withholding tax and employer cost.

    Args:
        gross: Gross salary for the period
        contributions: Result of compute_contributions for the same gross
        tax_rate_percent: Personal withholding rate, 0-100

    Returns:
        NetPayResult with every intermediate amount rounded to the cent
    """
    gross_amount = round_money(validate_amount(gross, "gross"))
    rate = validate_rate_percent(tax_rate_percent)

    employee_total = contributions.employee_total
    non_deductible = non_deductible_contributions(contributions)

    taxable_income = round_money(gross_amount - (employee_total - non_deductible))
    tax_amount = round_money(taxable_income * rate / 100)
    net_before_tax = round_money(gross_amount - employee_total)
    net_salary = round_money(net_before_tax - tax_amount)
    employer_cost = round_money(gross_amount + contributions.employer_total)

    return NetPayResult(
        net_before_tax=net_before_tax,
        taxable_income=taxable_income,
        tax_amount=tax_amount,
        net_salary=net_salary,
        employer_cost=employer_cost,
        non_deductible_contributions=non_deductible,
    )
