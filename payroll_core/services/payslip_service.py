"""
Payroll Core - Payslip Service

Runs one employee/period through the full calculation:

1. Rate table resolved once for the fiscal year (or a caller snapshot)
2. Part-time base salary pro-rated against the 35-hour week
3. Gross pay (base + overtime + bonuses)
4. Employee and employer contributions
5. Taxable income, withholding tax, net pay and employer cost
6. Draft payslip record (is_validated=False) with the month's leave

Validation of the draft (draft -> final) and storage happen in the caller.
"""

import logging
from decimal import Decimal
from typing import Any, Dict, Optional, Sequence, Union

from pydantic import ValidationError

from payroll_core.config import get_settings
from payroll_core.models.payroll import (
    AnnualCumulation,
    PayslipComputation,
    PayslipRecord,
    RateTable,
)
from payroll_core.schemas.payroll import PayslipRequest
from payroll_core.services.payroll_calculators import (
    STANDARD_MONTHLY_ACCRUAL,
    compute_contributions,
    compute_gross,
    compute_net,
    cumulate_year,
    get_rates,
    prorate_salary,
)
from payroll_core.utils.error_handling import from_validation_error

logger = logging.getLogger(__name__)


def compute_payslip(
    request: PayslipRequest,
    rates: Optional[RateTable] = None,
) -> PayslipComputation:
    """
    Calculate a complete payslip for one employee and month.

    Args:
        request: Validated payslip request
        rates: Rate table snapshot shared by a payroll run; resolved from
            the period year when omitted

    Returns:
        PayslipComputation with the draft record and every itemized result
    """
    table = rates if rates is not None else get_rates(request.period_year)

    gross_input = request.gross_input
    prorated_base = prorate_salary(gross_input.base_salary, request.weekly_hours)
    if prorated_base != gross_input.base_salary:
        gross_input = gross_input.model_copy(update={"base_salary": prorated_base})

    gross = compute_gross(gross_input)
    contributions = compute_contributions(gross.total, table, request.is_executive)
    net = compute_net(gross.total, contributions, request.tax_rate_percent)

    leave_accrued = (
        request.leave_accrued
        if request.leave_accrued is not None
        else STANDARD_MONTHLY_ACCRUAL
    )

    record = PayslipRecord(
        employee_id=request.employee_id,
        period_month=request.period_month,
        period_year=request.period_year,
        gross=gross.total,
        net=net.net_salary,
        employee_contributions=contributions.employee_total,
        employer_contributions=contributions.employer_total,
        employer_cost=net.employer_cost,
        tax_amount=net.tax_amount,
        leave_accrued=leave_accrued,
        leave_taken=request.leave_taken,
    )

    logger.debug(
        f"Payslip {request.employee_id} {request.period_month:02d}/{request.period_year}: "
        f"gross={record.gross} net={record.net} cost={record.employer_cost} "
        f"(rates {table.fiscal_year})"
    )

    return PayslipComputation(
        record=record,
        gross=gross,
        contributions=contributions,
        net=net,
        rates=table,
    )


def record_is_consistent(record: PayslipRecord) -> bool:
    """Check the net and employer-cost identities of a stored record."""
    return (
        record.net == record.gross - record.employee_contributions - record.tax_amount
        and record.employer_cost == record.gross + record.employer_contributions
    )


class PayslipCalculator:
    """
    Stateless payslip calculator.

    Holds only configuration defaults and an optional rate snapshot, so a
    single instance can serve a whole payroll run.
    """

    def __init__(
        self,
        rates: Optional[RateTable] = None,
        default_tax_rate_percent: Optional[Decimal] = None,
        default_weekly_hours: Optional[Decimal] = None,
    ):
        settings = get_settings()
        self.rates = rates
        self.default_tax_rate_percent = (
            default_tax_rate_percent
            if default_tax_rate_percent is not None
            else settings.default_tax_rate_percent
        )
        self.default_weekly_hours = (
            default_weekly_hours
            if default_weekly_hours is not None
            else settings.default_weekly_hours
        )

    def build_request(self, data: Dict[str, Any]) -> PayslipRequest:
        """
        Validate plain payslip data, filling configured defaults.

        Raises:
            ValidationException: with one entry per invalid field
        """
        payload = dict(data)
        payload.setdefault("tax_rate_percent", self.default_tax_rate_percent)
        payload.setdefault("weekly_hours", self.default_weekly_hours)
        try:
            return PayslipRequest(**payload)
        except ValidationError as e:
            raise from_validation_error(e, "Invalid payslip request") from e

    def calculate(self, request: Union[PayslipRequest, Dict[str, Any]]) -> PayslipComputation:
        """Calculate a payslip from a request or plain data."""
        if not isinstance(request, PayslipRequest):
            request = self.build_request(request)
        return compute_payslip(request, self.rates)

    def cumulate(self, records: Sequence[PayslipRecord]) -> Optional[AnnualCumulation]:
        """Annual totals over stored payslip records."""
        return cumulate_year(records)
