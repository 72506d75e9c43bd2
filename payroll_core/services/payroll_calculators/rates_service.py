"""
Payroll Core - Contribution Rate Tables

Social contribution rates per fiscal year.

Employee rates (2023):
- Santé: 7.5%
- Retraite de base: 6.9% up to the ceiling, 0.4% above it
- Retraite complémentaire: 3.8%
- Chômage: 2.4%
- CSG: 9.75%
- CRDS: 0.5%

Employer rates (2023):
- Santé: 13.0%
- Retraite de base: 8.4% up to the ceiling, 1.9% above it
- Retraite complémentaire: 5.7%
- Chômage: 4.1%
- Allocations familiales: 5.1%
- Accidents du travail: 2.0%
- Divers (transport, logement, ...): 4.5%

Years without a table resolve to the latest known table.
"""

import logging
from decimal import Decimal
from typing import Dict, List

from payroll_core.config import get_settings
from payroll_core.models.payroll import ContributionCategory as C, RateTable

logger = logging.getLogger(__name__)


# ===========================================
# CONSTANTS
# ===========================================

# Uncapped rates applied above the social security ceiling (retraite déplafonnée)
RETIREMENT_EXCESS_EMPLOYEE_RATE = Decimal("0.004")
RETIREMENT_EXCESS_EMPLOYER_RATE = Decimal("0.019")


def _table(
    year: int,
    ceiling: str,
    employee: Dict[C, str],
    employer: Dict[C, str],
) -> RateTable:
    return RateTable(
        fiscal_year=year,
        employee_rates={category: Decimal(rate) for category, rate in employee.items()},
        employer_rates={category: Decimal(rate) for category, rate in employer.items()},
        social_security_ceiling=Decimal(ceiling),
        excess_employee_rates={C.RETRAITE_BASE: RETIREMENT_EXCESS_EMPLOYEE_RATE},
        excess_employer_rates={C.RETRAITE_BASE: RETIREMENT_EXCESS_EMPLOYER_RATE},
    )


RATES_2023 = _table(
    2023,
    ceiling="3666",
    employee={
        C.SANTE: "0.075",
        C.RETRAITE_BASE: "0.069",
        C.RETRAITE_COMPLEMENTAIRE: "0.038",
        C.CHOMAGE: "0.024",
        C.CSG: "0.0975",
        C.CRDS: "0.005",
    },
    employer={
        C.SANTE: "0.130",
        C.RETRAITE_BASE: "0.084",
        C.RETRAITE_COMPLEMENTAIRE: "0.057",
        C.CHOMAGE: "0.041",
        C.FAMILIALES: "0.051",
        C.ACCIDENTS: "0.020",
        C.DIVERS: "0.045",
    },
)

RATES_2024 = _table(
    2024,
    ceiling="3864",
    employee={
        C.SANTE: "0.076",
        C.RETRAITE_BASE: "0.070",
        C.RETRAITE_COMPLEMENTAIRE: "0.039",
        C.CHOMAGE: "0.024",
        C.CSG: "0.0975",
        C.CRDS: "0.005",
    },
    employer={
        C.SANTE: "0.132",
        C.RETRAITE_BASE: "0.085",
        C.RETRAITE_COMPLEMENTAIRE: "0.058",
        C.CHOMAGE: "0.041",
        C.FAMILIALES: "0.052",
        C.ACCIDENTS: "0.020",
        C.DIVERS: "0.046",
    },
)

RATES_2025 = _table(
    2025,
    ceiling="3925",
    employee={
        C.SANTE: "0.077",
        C.RETRAITE_BASE: "0.071",
        C.RETRAITE_COMPLEMENTAIRE: "0.040",
        C.CHOMAGE: "0.025",
        C.CSG: "0.0980",
        C.CRDS: "0.005",
    },
    employer={
        C.SANTE: "0.134",
        C.RETRAITE_BASE: "0.086",
        C.RETRAITE_COMPLEMENTAIRE: "0.059",
        C.CHOMAGE: "0.042",
        C.FAMILIALES: "0.053",
        C.ACCIDENTS: "0.021",
        C.DIVERS: "0.047",
    },
)

RATE_TABLES: Dict[int, RateTable] = {
    table.fiscal_year: table for table in (RATES_2023, RATES_2024, RATES_2025)
}

LATEST_FISCAL_YEAR = max(RATE_TABLES)


def known_fiscal_years() -> List[int]:
    """Fiscal years with a rate table, ascending."""
    return sorted(RATE_TABLES)


def resolve_fiscal_year(year: int) -> int:
    """
    Get the fiscal year whose table applies to `year`.

    Unknown years fall back to the latest known table with a warning.
    """
    if year in RATE_TABLES:
        return year

    if get_settings().warn_on_rate_fallback:
        logger.warning(
            f"No contribution rates for fiscal year {year}; "
            f"using {LATEST_FISCAL_YEAR} rates"
        )
    return LATEST_FISCAL_YEAR


def get_rates(year: int) -> RateTable:
    """Get the contribution rate table for a fiscal year. Never raises."""
    return RATE_TABLES[resolve_fiscal_year(year)]
