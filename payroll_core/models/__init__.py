"""
Payroll Core - Models Package

Immutable value types exchanged with persistence and rendering collaborators.
"""

from payroll_core.models.payroll import (
    ContributionCategory,
    RateTable,
    GrossPayBreakdown,
    GrossPayResult,
    ContributionLineItem,
    ContributionResult,
    NetPayResult,
    PayslipRecord,
    AnnualCumulation,
    MonthlyRow,
    PayslipComputation,
)

__all__ = [
    "ContributionCategory",
    "RateTable",
    "GrossPayBreakdown",
    "GrossPayResult",
    "ContributionLineItem",
    "ContributionResult",
    "NetPayResult",
    "PayslipRecord",
    "AnnualCumulation",
    "MonthlyRow",
    "PayslipComputation",
]
