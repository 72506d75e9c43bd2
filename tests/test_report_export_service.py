"""
Payroll Core - Cumulation Export Tests
"""

from decimal import Decimal

from payroll_core.services.payroll_calculators import cumulate_year
from payroll_core.services.report_export_service import (
    CSV_HEADERS,
    NOT_ISSUED,
    export_cumulation_csv,
    format_amount,
)


class TestFormatAmount:
    """Test amount formatting for the export."""

    def test_decimal_comma(self):
        assert format_amount(Decimal("1728.75")) == "1728,75"

    def test_decimal_point(self):
        assert format_amount(Decimal("1728.75"), decimal_comma=False) == "1728.75"

    def test_two_places(self):
        assert format_amount(Decimal("2.5")) == "2,50"
        assert format_amount(Decimal("0.005")) == "0,01"

    def test_missing_value(self):
        assert format_amount(None) == NOT_ISSUED


class TestCumulationExport:
    """Test the annual history CSV."""

    def _cumulation(self, make_record):
        return cumulate_year([
            make_record(1, "2500.00", "771.25", "1070.00"),
            make_record(3, "2500.00", "771.25", "1070.00", leave_taken="3"),
        ])

    def test_header_and_row_count(self, make_record):
        lines = export_cumulation_csv(self._cumulation(make_record)).splitlines()

        assert lines[0] == ";".join(CSV_HEADERS)
        # header + 12 months + TOTAL
        assert len(lines) == 14

    def test_issued_and_missing_months(self, make_record):
        lines = export_cumulation_csv(self._cumulation(make_record)).splitlines()

        assert lines[1] == "JAN24;2500,00;1728,75;771,25;0,00;2,50;0,00;2,50"
        assert lines[2] == "FEV24;" + ";".join([NOT_ISSUED] * 6) + ";2,50"
        assert lines[3] == "MAR24;2500,00;1728,75;771,25;0,00;2,50;3,00;2,00"
        assert lines[12].startswith("DEC24;" + NOT_ISSUED)

    def test_total_row(self, make_record):
        lines = export_cumulation_csv(self._cumulation(make_record)).splitlines()

        assert lines[-1] == "TOTAL;5000,00;3457,50;1542,50;0,00;5,00;3,00;2,00"

    def test_opening_balance_in_total(self, make_record):
        lines = export_cumulation_csv(
            self._cumulation(make_record),
            opening_leave_balance=Decimal("4"),
        ).splitlines()

        assert lines[1].endswith(";6,50")
        assert lines[-1].endswith(";6,00")

    def test_decimal_point_uses_comma_separator(self, make_record):
        lines = export_cumulation_csv(self._cumulation(make_record), decimal_comma=False).splitlines()

        assert lines[0] == ",".join(CSV_HEADERS)
        assert lines[1] == "JAN24,2500.00,1728.75,771.25,0.00,2.50,0.00,2.50"

    def test_no_cumulation_exports_header_only(self):
        assert export_cumulation_csv(None) == ";".join(CSV_HEADERS) + "\n"
