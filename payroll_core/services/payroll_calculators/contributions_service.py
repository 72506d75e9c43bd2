"""
Payroll Core - Contribution Calculator

Employee and employer social contributions for a gross salary.

Every category goes through the same loop, driven by a descriptor:
- capped: the base stops at the social security ceiling and the part of
  gross above it is charged at the table's lower excess rate
- executive_multiplier: both rates are multiplied by 1.2 for executives
  (cadres)

Tier amounts are rounded to the cent, line amounts are the sum of their
rounded tiers and totals are the sum of the rounded lines, so re-adding
the lines always reproduces the totals.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, List, Tuple

from payroll_core.models.payroll import (
    ContributionCategory,
    ContributionLineItem,
    ContributionResult,
    RateTable,
)
from payroll_core.utils.error_handling import validate_amount
from payroll_core.utils.money import ZERO, round_money, sum_money


# ===========================================
# CONSTANTS
# ===========================================

EXECUTIVE_RETIREMENT_MULTIPLIER = Decimal("1.2")


@dataclass(frozen=True)
class CategoryDescriptor:
    """How a contribution category computes its base and rates."""
    category: ContributionCategory
    label: str
    capped: bool = False
    executive_multiplier: bool = False


# Payslip line order; renderers rely on it
CATEGORY_DESCRIPTORS: Tuple[CategoryDescriptor, ...] = (
    CategoryDescriptor(ContributionCategory.SANTE, "Assurance maladie"),
    CategoryDescriptor(ContributionCategory.RETRAITE_BASE, "Retraite de base", capped=True),
    CategoryDescriptor(
        ContributionCategory.RETRAITE_COMPLEMENTAIRE,
        "Retraite complémentaire",
        executive_multiplier=True,
    ),
    CategoryDescriptor(ContributionCategory.CHOMAGE, "Assurance chômage"),
    CategoryDescriptor(ContributionCategory.CSG, "CSG"),
    CategoryDescriptor(ContributionCategory.CRDS, "CRDS"),
    CategoryDescriptor(ContributionCategory.FAMILIALES, "Allocations familiales"),
    CategoryDescriptor(ContributionCategory.ACCIDENTS, "Accidents du travail"),
    CategoryDescriptor(ContributionCategory.DIVERS, "Autres contributions"),
)


def split_capped_base(gross: Decimal, ceiling: Decimal) -> Tuple[Decimal, Decimal]:
    """
    Split gross into (capped tier, excess tier) around the ceiling.

    Below the ceiling the capped tier is the whole gross.
    """
    capped = min(gross, ceiling)
    excess = max(gross - ceiling, ZERO)
    return capped, excess


def _line_item(
    descriptor: CategoryDescriptor,
    gross: Decimal,
    rates: RateTable,
    is_executive: bool,
) -> ContributionLineItem:
    category = descriptor.category
    employee_rate = rates.employee_rates.get(category, ZERO)
    employer_rate = rates.employer_rates.get(category, ZERO)

    if descriptor.executive_multiplier and is_executive:
        employee_rate = employee_rate * EXECUTIVE_RETIREMENT_MULTIPLIER
        employer_rate = employer_rate * EXECUTIVE_RETIREMENT_MULTIPLIER

    if descriptor.capped:
        base, excess_base = split_capped_base(gross, rates.social_security_ceiling)
        excess_employee_rate = rates.excess_employee_rates.get(category, ZERO)
        excess_employer_rate = rates.excess_employer_rates.get(category, ZERO)
    else:
        base, excess_base = gross, ZERO
        excess_employee_rate = excess_employer_rate = ZERO

    employee_amount = round_money(base * employee_rate) + round_money(excess_base * excess_employee_rate)
    employer_amount = round_money(base * employer_rate) + round_money(excess_base * excess_employer_rate)

    return ContributionLineItem(
        category=category,
        label=descriptor.label,
        base=base,
        employee_rate=employee_rate,
        employer_rate=employer_rate,
        employee_amount=employee_amount,
        employer_amount=employer_amount,
        excess_base=excess_base,
        excess_employee_rate=excess_employee_rate,
        excess_employer_rate=excess_employer_rate,
    )


def compute_contributions(
    gross: Any,
    rates: RateTable,
    is_executive: bool = False,
) -> ContributionResult:
    """
    Calculate itemized employee and employer contributions.

    Categories missing from both rate maps produce no line.

    Args:
        gross: Gross salary for the period
        rates: Rate table snapshot for the fiscal year
        is_executive: Executive (cadre) status

    Returns:
        ContributionResult with totals and ordered line items
    """
    gross_amount = round_money(validate_amount(gross, "gross"))

    items: List[ContributionLineItem] = [
        _line_item(descriptor, gross_amount, rates, is_executive)
        for descriptor in CATEGORY_DESCRIPTORS
        if rates.has_category(descriptor.category)
    ]

    return ContributionResult(
        employee_total=sum_money(item.employee_amount for item in items),
        employer_total=sum_money(item.employer_amount for item in items),
        items=tuple(items),
    )
