"""
Payroll Core - Schemas Package

Pydantic schemas for input validation.
"""

from payroll_core.schemas.payroll import GrossPayInput, PayslipRequest

__all__ = [
    "GrossPayInput",
    "PayslipRequest",
]
