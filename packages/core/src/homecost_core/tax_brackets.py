"""Federal income tax brackets used to value the homeowner deductions.

Only the marginal rate matters here: a deduction saves its amount times the
rate of the bracket the household's income falls into.

Source: IRS Rev. Proc. 2022-38 (tax year 2023 rate schedules)
"""

from typing import NamedTuple

from .models import FilingStatus, TaxRates


# =============================================================================
# VERSION TRACKING
# =============================================================================

TAX_TABLE_VERSION = "2023"


def get_tax_table_version() -> str:
    """Return the tax year the bracket tables belong to."""
    return TAX_TABLE_VERSION


# =============================================================================
# FEDERAL BRACKETS
# =============================================================================
# Ordered by upper bound. Income above the last bound is taxed at TOP_RATE.

class TaxBracket(NamedTuple):
    upper_bound: float
    rate: float


SINGLE_BRACKETS: tuple[TaxBracket, ...] = (
    TaxBracket(11000, 0.10),
    TaxBracket(44725, 0.12),
    TaxBracket(95375, 0.22),
    TaxBracket(182050, 0.24),
    TaxBracket(231250, 0.32),
    TaxBracket(578125, 0.35),
)

MARRIED_FILING_JOINTLY_BRACKETS: tuple[TaxBracket, ...] = (
    TaxBracket(22000, 0.10),
    TaxBracket(89450, 0.12),
    TaxBracket(190750, 0.22),
    TaxBracket(364200, 0.24),
    TaxBracket(462500, 0.32),
    TaxBracket(693750, 0.35),
)

TOP_RATE = 0.37

FEDERAL_BRACKETS = {
    FilingStatus.SINGLE: SINGLE_BRACKETS,
    FilingStatus.MARRIED_FILING_JOINTLY: MARRIED_FILING_JOINTLY_BRACKETS,
}

# No state income tax is modeled.
STATE_TAX_RATE = 0.0


def get_federal_brackets(filing_status: FilingStatus) -> tuple[TaxBracket, ...]:
    """Get the ordered bracket table for a filing status."""
    return FEDERAL_BRACKETS[FilingStatus(filing_status)]


def get_federal_tax_rate(income: float, filing_status: FilingStatus) -> float:
    """Get the federal marginal rate for an annual income.

    The first bracket whose upper bound is at least the income wins. Income
    above every bound, and NaN income, gets the top rate.

    Args:
        income: Gross annual income
        filing_status: Federal filing status

    Returns:
        Marginal rate as a decimal fraction
    """
    for bracket in get_federal_brackets(filing_status):
        if income <= bracket.upper_bound:
            return bracket.rate
    return TOP_RATE


def get_tax_rates(
    income: float,
    filing_status: FilingStatus,
    property_rate: float,
) -> TaxRates:
    """Collect the rates the calculator needs.

    Args:
        income: Gross annual income
        filing_status: Federal filing status
        property_rate: Property tax rate, already a decimal fraction

    Returns:
        TaxRates with federal, state and property rates
    """
    return TaxRates(
        federal=get_federal_tax_rate(income, filing_status),
        state=STATE_TAX_RATE,
        property_rate=property_rate,
    )
