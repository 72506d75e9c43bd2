"""
Payroll Core - Error Handling Tests

Tests for the exception hierarchy and input validators.
"""

import pytest
from decimal import Decimal
from pydantic import ValidationError

from payroll_core.schemas.payroll import GrossPayInput
from payroll_core.utils.error_handling import (
    AppException,
    DuplicatePeriodException,
    ErrorCode,
    InvalidAmountException,
    InvalidRateException,
    InvalidTaxPeriodException,
    ValidationException,
    from_validation_error,
    validate_amount,
    validate_period,
    validate_rate_percent,
)


class TestExceptionHierarchy:
    """Test exception codes and serialization."""

    def test_validation_exceptions_share_base(self):
        for exc in (
            InvalidAmountException("-1"),
            InvalidRateException("120"),
            InvalidTaxPeriodException(13, 2024),
            DuplicatePeriodException("EMP-001", 4, 2024),
        ):
            assert isinstance(exc, ValidationException)
            assert isinstance(exc, AppException)

    def test_to_dict(self):
        exc = InvalidAmountException("-5", field="bonuses")
        data = exc.to_dict()

        assert data["code"] == "INVALID_AMOUNT"
        assert data["field"] == "bonuses"
        assert data["details"] == {"provided_amount": "-5"}
        assert data["timestamp"].endswith("Z")

    def test_to_dict_omits_empty_fields(self):
        data = AppException(ErrorCode.VALIDATION_ERROR, "bad input").to_dict()

        assert "field" not in data
        assert "details" not in data

    def test_duplicate_period_message(self):
        exc = DuplicatePeriodException("EMP-001", 4, 2024)

        assert exc.code == ErrorCode.DUPLICATE_PERIOD
        assert "04/2024" in exc.message


class TestValidators:
    """Test input validation helpers."""

    def test_validate_amount(self):
        assert validate_amount("12.50") == Decimal("12.50")
        assert validate_amount(3) == Decimal("3")
        assert validate_amount(Decimal("0")) == Decimal("0")

    @pytest.mark.parametrize("value", ["-0.01", "abc", None, True, "NaN", "Infinity"])
    def test_validate_amount_rejects(self, value):
        with pytest.raises(InvalidAmountException):
            validate_amount(value)

    def test_validate_period(self):
        validate_period(1, 2023)
        validate_period(12, 2999)

    @pytest.mark.parametrize("month,year", [(0, 2024), (13, 2024), (6, 1899), ("6", 2024)])
    def test_validate_period_rejects(self, month, year):
        with pytest.raises(InvalidTaxPeriodException):
            validate_period(month, year)

    def test_validate_rate_percent(self):
        assert validate_rate_percent("12.5") == Decimal("12.5")
        assert validate_rate_percent(100) == Decimal("100")

    @pytest.mark.parametrize("value", ["-1", "100.01", "ten"])
    def test_validate_rate_percent_rejects(self, value):
        with pytest.raises(InvalidRateException):
            validate_rate_percent(value)


class TestValidationErrorTranslation:
    """Test pydantic errors mapped to ValidationException."""

    def test_every_error_is_listed(self):
        with pytest.raises(ValidationError) as exc_info:
            GrossPayInput(base_salary=Decimal("-1"), bonuses=Decimal("-2"))

        exc = from_validation_error(exc_info.value, "Invalid gross input")
        fields = [error["field"] for error in exc.details["errors"]]

        assert exc.message == "Invalid gross input"
        assert exc.field == "base_salary"
        assert fields == ["base_salary", "bonuses"]
        assert exc.original_error is exc_info.value
