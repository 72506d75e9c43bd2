"""
Payroll Core - Services Package

Payroll calculation and export services.
"""

from payroll_core.services.payslip_service import (
    PayslipCalculator,
    compute_payslip,
    record_is_consistent,
)
from payroll_core.services.report_export_service import export_cumulation_csv

__all__ = [
    "PayslipCalculator",
    "compute_payslip",
    "record_is_consistent",
    "export_cumulation_csv",
]
