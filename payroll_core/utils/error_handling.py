"""
Error Handling Module for Payroll Core

This module provides centralized error handling with:
- Custom exception hierarchy
- Standardized error payloads
- Translation of pydantic validation errors
- Boundary validators for amounts, periods and rates
"""

from datetime import datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Dict, Optional
import logging

from pydantic import ValidationError

# Configure logging
logger = logging.getLogger("payroll_core.errors")


class ErrorCode(str, Enum):
    """Standardized error codes for the payroll core"""

    # Validation Errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_INPUT = "INVALID_INPUT"
    INVALID_AMOUNT = "INVALID_AMOUNT"
    INVALID_TAX_PERIOD = "INVALID_TAX_PERIOD"
    INVALID_RATE = "INVALID_RATE"

    # Business Logic Errors
    DUPLICATE_PERIOD = "DUPLICATE_PERIOD"


class AppException(Exception):
    """Base exception for all payroll core exceptions"""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        field: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.code = code
        self.message = message
        self.details = details or {}
        self.field = field
        self.original_error = original_error
        self.timestamp = datetime.utcnow()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to a dictionary for callers that serialize errors"""
        result = {
            "code": self.code.value,
            "message": self.message,
            "timestamp": self.timestamp.isoformat() + "Z",
        }
        if self.field:
            result["field"] = self.field
        if self.details:
            result["details"] = self.details
        return result


# ============================================================================
# Validation Exceptions
# ============================================================================

class ValidationException(AppException):
    """Base validation exception"""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(
            code=code,
            message=message,
            details=details,
            field=field,
            original_error=original_error,
        )


class InvalidInputException(ValidationException):
    """Caller contract violation on a calculator input"""

    def __init__(self, message: str, field: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            field=field,
            code=ErrorCode.INVALID_INPUT,
            details=details,
        )


class InvalidAmountException(ValidationException):
    """Invalid monetary amount or quantity"""

    def __init__(self, amount: Any, field: str = "amount", message: Optional[str] = None):
        super().__init__(
            message=message or f"Invalid amount: {amount}. Amount must be a non-negative number.",
            field=field,
            code=ErrorCode.INVALID_AMOUNT,
            details={"provided_amount": str(amount)},
        )


class InvalidTaxPeriodException(ValidationException):
    """Pay period outside the valid month/year range"""

    def __init__(self, month: Any, year: Any, message: Optional[str] = None):
        super().__init__(
            message=message or f"Invalid pay period: {month}/{year}. Month must be 1-12 and year 1900-2999.",
            field="period",
            code=ErrorCode.INVALID_TAX_PERIOD,
            details={"month": str(month), "year": str(year)},
        )


class InvalidRateException(ValidationException):
    """Percentage rate outside 0-100"""

    def __init__(self, rate: Any, field: str = "tax_rate_percent"):
        super().__init__(
            message=f"Invalid rate: {rate}. Rate must be a percentage between 0 and 100.",
            field=field,
            code=ErrorCode.INVALID_RATE,
            details={"provided_rate": str(rate)},
        )


class DuplicatePeriodException(ValidationException):
    """More than one payslip record for the same employee and month"""

    def __init__(self, employee_id: str, month: int, year: int):
        super().__init__(
            message=f"Duplicate payslip for employee '{employee_id}' in {month:02d}/{year}",
            field="period_month",
            code=ErrorCode.DUPLICATE_PERIOD,
            details={"employee_id": employee_id, "month": month, "year": year},
        )


# ============================================================================
# Translation
# ============================================================================

def from_validation_error(exc: ValidationError, message: str = "Payroll input validation failed") -> ValidationException:
    """Translate a pydantic ValidationError into a ValidationException"""
    errors = []
    for error in exc.errors():
        field = ".".join(str(loc) for loc in error["loc"])
        errors.append({
            "field": field,
            "message": error["msg"],
            "type": error["type"],
        })

    logger.warning(
        f"ValidationError: {len(errors)} validation errors",
        extra={"errors": errors},
    )

    first_field = errors[0]["field"] if errors else None
    return ValidationException(
        message=message,
        field=first_field,
        details={"errors": errors},
        original_error=exc,
    )


# ============================================================================
# Utility Functions
# ============================================================================

def validate_amount(amount: Any, field: str = "amount") -> Decimal:
    """Validate a non-negative monetary amount or quantity"""
    if isinstance(amount, bool):
        raise InvalidAmountException(amount, field)
    try:
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    except (TypeError, ValueError, InvalidOperation):
        raise InvalidAmountException(amount, field)
    if not value.is_finite() or value < 0:
        raise InvalidAmountException(amount, field)
    return value


def validate_period(month: Any, year: Any) -> None:
    """Validate a pay period month (1-12) and year"""
    if not isinstance(month, int) or not isinstance(year, int):
        raise InvalidTaxPeriodException(month, year)
    if not 1 <= month <= 12 or not 1900 <= year <= 2999:
        raise InvalidTaxPeriodException(month, year)


def validate_rate_percent(rate: Any, field: str = "tax_rate_percent") -> Decimal:
    """Validate a percentage between 0 and 100"""
    try:
        value = rate if isinstance(rate, Decimal) else Decimal(str(rate))
    except (TypeError, ValueError, InvalidOperation):
        raise InvalidRateException(rate, field)
    if not value.is_finite() or value < 0 or value > 100:
        raise InvalidRateException(rate, field)
    return value


# Export all exceptions for easy importing
__all__ = [
    # Base
    "AppException",
    "ErrorCode",

    # Validation
    "ValidationException",
    "InvalidInputException",
    "InvalidAmountException",
    "InvalidTaxPeriodException",
    "InvalidRateException",
    "DuplicatePeriodException",

    # Translation
    "from_validation_error",

    # Validators
    "validate_amount",
    "validate_period",
    "validate_rate_percent",
]
