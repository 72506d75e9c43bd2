"""
Payroll Core - Cumulation Export Service

CSV export of an employee's annual payroll history:
- One row per calendar month ("non émis" when no payslip was issued)
- Running paid-leave balance
- TOTAL row with the annual cumulation

French spreadsheet conventions by default: semicolon separator and
decimal comma. Locale formatting happens here only; the calculators
return plain Decimals.
"""

import csv
import io
from decimal import Decimal
from typing import Optional

from payroll_core.models.payroll import AnnualCumulation
from payroll_core.services.payroll_calculators.history_service import monthly_table
from payroll_core.utils.money import round_money


NOT_ISSUED = "non émis"

CSV_HEADERS = [
    "Mois",
    "Brut",
    "Net",
    "Cotisations",
    "Impôt",
    "Congés acquis",
    "Congés pris",
    "Solde congés",
]


def format_amount(value: Optional[Decimal], decimal_comma: bool = True) -> str:
    """Format a Decimal with 2 places; None renders as not issued."""
    if value is None:
        return NOT_ISSUED
    text = f"{round_money(value):.2f}"
    return text.replace(".", ",") if decimal_comma else text


def export_cumulation_csv(
    cumulation: Optional[AnnualCumulation],
    decimal_comma: bool = True,
    opening_leave_balance: Decimal = Decimal("0"),
) -> str:
    """
    Export an annual cumulation as CSV text.

    An absent cumulation (no payslips yet) exports the header only.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, delimiter=";" if decimal_comma else ",", lineterminator="\n")
    writer.writerow(CSV_HEADERS)

    if cumulation is None:
        return buffer.getvalue()

    fmt = lambda value: format_amount(value, decimal_comma)

    for row in monthly_table(cumulation, opening_leave_balance):
        writer.writerow([
            row.label,
            fmt(row.gross),
            fmt(row.net),
            fmt(row.contributions),
            fmt(row.tax_amount),
            fmt(row.leave_accrued),
            fmt(row.leave_taken),
            fmt(row.leave_balance),
        ])

    writer.writerow([
        "TOTAL",
        fmt(cumulation.gross),
        fmt(cumulation.net),
        fmt(cumulation.employee_contributions),
        fmt(cumulation.tax_amount),
        fmt(cumulation.leave_accrued),
        fmt(cumulation.leave_taken),
        fmt(opening_leave_balance + cumulation.leave_balance),
    ])

    return buffer.getvalue()
