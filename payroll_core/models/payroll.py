"""
Payroll Core - Payroll Value Models

Immutable result and record types produced by the calculators.
Persistence lives outside the core; these are plain value objects.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Tuple


class ContributionCategory(str, Enum):
    """Social contribution categories, in payslip line order."""
    SANTE = "sante"
    RETRAITE_BASE = "retraite_base"
    RETRAITE_COMPLEMENTAIRE = "retraite_complementaire"
    CHOMAGE = "chomage"
    CSG = "csg"
    CRDS = "crds"
    FAMILIALES = "familiales"
    ACCIDENTS = "accidents"
    DIVERS = "divers"


# ===========================================
# RATE TABLES
# ===========================================

@dataclass(frozen=True)
class RateTable:
    """Contribution rates for one fiscal year (fractions, e.g. 0.069)."""
    fiscal_year: int
    employee_rates: Mapping[ContributionCategory, Decimal]
    employer_rates: Mapping[ContributionCategory, Decimal]
    social_security_ceiling: Decimal
    excess_employee_rates: Mapping[ContributionCategory, Decimal] = field(default_factory=dict)
    excess_employer_rates: Mapping[ContributionCategory, Decimal] = field(default_factory=dict)

    def __post_init__(self):
        # Freeze the mappings so a shared table cannot be altered mid-run
        for name in (
            "employee_rates",
            "employer_rates",
            "excess_employee_rates",
            "excess_employer_rates",
        ):
            object.__setattr__(self, name, MappingProxyType(dict(getattr(self, name))))

    def has_category(self, category: ContributionCategory) -> bool:
        return category in self.employee_rates or category in self.employer_rates


# ===========================================
# GROSS PAY
# ===========================================

@dataclass(frozen=True)
class GrossPayBreakdown:
    base: Decimal
    overtime_25_amount: Decimal
    overtime_50_amount: Decimal
    bonuses: Decimal


@dataclass(frozen=True)
class GrossPayResult:
    total: Decimal
    breakdown: GrossPayBreakdown
    hourly_rate: Decimal


# ===========================================
# CONTRIBUTIONS
# ===========================================

@dataclass(frozen=True)
class ContributionLineItem:
    """
    One payslip contribution line.

    For ceiling-sensitive categories `base` is the capped tier and
    `excess_base` the part of gross above the ceiling; both amounts already
    include the excess tier.
    """
    category: ContributionCategory
    label: str
    base: Decimal
    employee_rate: Decimal
    employer_rate: Decimal
    employee_amount: Decimal
    employer_amount: Decimal
    excess_base: Decimal = Decimal("0")
    excess_employee_rate: Decimal = Decimal("0")
    excess_employer_rate: Decimal = Decimal("0")


@dataclass(frozen=True)
class ContributionResult:
    employee_total: Decimal
    employer_total: Decimal
    items: Tuple[ContributionLineItem, ...]

    def item(self, category: ContributionCategory) -> Optional[ContributionLineItem]:
        """Get the line for a category, or None when it was not charged."""
        for line in self.items:
            if line.category == category:
                return line
        return None


# ===========================================
# NET PAY
# ===========================================

@dataclass(frozen=True)
class NetPayResult:
    net_before_tax: Decimal
    taxable_income: Decimal
    tax_amount: Decimal
    net_salary: Decimal
    employer_cost: Decimal
    non_deductible_contributions: Decimal


# ===========================================
# PAYSLIP RECORDS AND HISTORY
# ===========================================

@dataclass(frozen=True)
class PayslipRecord:
    """
    Monthly payslip figures as stored by the persistence layer.

    Invariants (to the cent):
        net = gross - employee_contributions - tax_amount
        employer_cost = gross + employer_contributions
    """
    employee_id: str
    period_month: int
    period_year: int
    gross: Decimal
    net: Decimal
    employee_contributions: Decimal
    employer_contributions: Decimal
    employer_cost: Decimal
    tax_amount: Decimal
    leave_accrued: Decimal
    leave_taken: Decimal
    is_validated: bool = False


@dataclass(frozen=True)
class AnnualCumulation:
    """Year-to-date totals derived from payslip records; never stored."""
    employee_id: str
    year: int
    gross: Decimal
    net: Decimal
    employee_contributions: Decimal
    employer_contributions: Decimal
    employer_cost: Decimal
    tax_amount: Decimal
    leave_accrued: Decimal
    leave_taken: Decimal
    records: Tuple[PayslipRecord, ...]

    @property
    def leave_balance(self) -> Decimal:
        return self.leave_accrued - self.leave_taken

    @property
    def months_issued(self) -> Tuple[int, ...]:
        return tuple(record.period_month for record in self.records)


@dataclass(frozen=True)
class MonthlyRow:
    """
    One row of the month-by-month table.

    Amount fields are None for months without a payslip ("not issued"),
    while leave_balance keeps running across them.
    """
    month: int
    label: str
    issued: bool
    gross: Optional[Decimal]
    net: Optional[Decimal]
    contributions: Optional[Decimal]
    tax_amount: Optional[Decimal]
    leave_accrued: Optional[Decimal]
    leave_taken: Optional[Decimal]
    leave_balance: Decimal


@dataclass(frozen=True)
class PayslipComputation:
    """Everything computed for one employee/period."""
    record: PayslipRecord
    gross: GrossPayResult
    contributions: ContributionResult
    net: NetPayResult
    rates: RateTable
