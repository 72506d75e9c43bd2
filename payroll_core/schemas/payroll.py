"""
Payroll Core - Payroll Schemas

Pydantic schemas for calculator inputs.
Inputs are validated at the boundary and never clamped.
"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ===========================================
# GROSS PAY INPUT
# ===========================================

class GrossPayInput(BaseModel):
    """Per-period gross pay input derived from the employee contract."""
    model_config = ConfigDict(frozen=True)

    base_salary: Decimal = Field(..., ge=0, description="Monthly base salary")
    overtime_hours_25: Decimal = Field(Decimal("0"), ge=0, description="Hours paid at 125%")
    overtime_hours_50: Decimal = Field(Decimal("0"), ge=0, description="Hours paid at 150%")
    bonuses: Decimal = Field(Decimal("0"), ge=0, description="Bonus amount for the period")


# ===========================================
# PAYSLIP REQUEST
# ===========================================

class PayslipRequest(BaseModel):
    """Everything needed to compute one employee's payslip for a month."""
    model_config = ConfigDict(frozen=True)

    employee_id: str = Field(..., min_length=1, max_length=100)
    period_month: int = Field(..., ge=1, le=12)
    period_year: int = Field(..., ge=1900, le=2999)
    gross_input: GrossPayInput
    is_executive: bool = False
    tax_rate_percent: Decimal = Field(Decimal("0"), ge=0, le=100)
    weekly_hours: Decimal = Field(Decimal("35"), gt=0, le=48)
    leave_taken: Decimal = Field(Decimal("0"), ge=0)
    leave_accrued: Optional[Decimal] = Field(None, ge=0)

    @field_validator("employee_id")
    @classmethod
    def validate_employee_id(cls, v: str) -> str:
        cleaned = v.strip()
        if not cleaned:
            raise ValueError("Employee ID cannot be blank")
        return cleaned
