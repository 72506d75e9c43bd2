"""
Payroll Core - Test Configuration

Pytest fixtures and configuration.
"""

from decimal import Decimal
from typing import Callable

import pytest

from payroll_core.config import get_settings
from payroll_core.models.payroll import PayslipRecord, RateTable
from payroll_core.services.payroll_calculators import get_rates


@pytest.fixture(autouse=True)
def fresh_settings():
    """Re-read settings from the environment around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def rates_2023() -> RateTable:
    return get_rates(2023)


@pytest.fixture
def make_record() -> Callable[..., PayslipRecord]:
    """
    Build a consistent payslip record.

    Net and employer cost are derived from the other amounts so every
    record satisfies the payslip identities.
    """
    def _make(
        month: int,
        gross: str,
        employee_contributions: str,
        employer_contributions: str,
        tax_amount: str = "0.00",
        leave_taken: str = "0",
        employee_id: str = "EMP-001",
        year: int = 2024,
        leave_accrued: str = "2.5",
    ) -> PayslipRecord:
        gross_d = Decimal(gross)
        employee_d = Decimal(employee_contributions)
        employer_d = Decimal(employer_contributions)
        tax_d = Decimal(tax_amount)
        return PayslipRecord(
            employee_id=employee_id,
            period_month=month,
            period_year=year,
            gross=gross_d,
            net=gross_d - employee_d - tax_d,
            employee_contributions=employee_d,
            employer_contributions=employer_d,
            employer_cost=gross_d + employer_d,
            tax_amount=tax_d,
            leave_accrued=Decimal(leave_accrued),
            leave_taken=Decimal(leave_taken),
        )

    return _make


@pytest.fixture
def quarter_records(make_record):
    """Three months of payslips for EMP-001 in 2024, deliberately unordered."""
    return [
        make_record(3, "2700.50", "833.05", "1155.81", tax_amount="60.25", leave_taken="3"),
        make_record(1, "2500.00", "771.25", "1070.00"),
        make_record(2, "2600.00", "802.10", "1112.80", tax_amount="50.00", leave_taken="1"),
    ]
