"""Tests for the federal bracket tables and rate lookup."""

import math

import pytest

from homecost_core import FilingStatus, TaxRates, get_federal_tax_rate, get_tax_rates
from homecost_core.tax_brackets import (
    MARRIED_FILING_JOINTLY_BRACKETS,
    SINGLE_BRACKETS,
    TOP_RATE,
    get_federal_brackets,
    get_tax_table_version,
)


class TestFederalTaxRate:
    """Marginal rate is a step function of income."""

    @pytest.mark.parametrize("income,expected", [
        (0, 0.10),
        (11000, 0.10),
        (11001, 0.12),
        (44725, 0.12),
        (95375, 0.22),
        (120000, 0.24),
        (182050, 0.24),
        (231250, 0.32),
        (578125, 0.35),
        (578126, 0.37),
        (10_000_000, 0.37),
    ])
    def test_single_brackets(self, income, expected):
        """Upper bounds are inclusive."""
        assert get_federal_tax_rate(income, FilingStatus.SINGLE) == expected

    @pytest.mark.parametrize("income,expected", [
        (22000, 0.10),
        (22001, 0.12),
        (89450, 0.12),
        (120000, 0.22),
        (190750, 0.22),
        (364200, 0.24),
        (462500, 0.32),
        (693750, 0.35),
        (693751, 0.37),
    ])
    def test_married_brackets(self, income, expected):
        """Married filing jointly uses the wider table."""
        assert get_federal_tax_rate(income, FilingStatus.MARRIED_FILING_JOINTLY) == expected

    def test_negative_income_gets_lowest_rate(self):
        """Negative income falls in the first bracket."""
        assert get_federal_tax_rate(-5000, FilingStatus.SINGLE) == 0.10

    def test_nan_income_gets_top_rate(self):
        """NaN matches no bracket, so the top rate applies."""
        assert get_federal_tax_rate(math.nan, FilingStatus.SINGLE) == TOP_RATE

    def test_accepts_string_status(self):
        """The enum's string value works as a status."""
        assert get_federal_tax_rate(120000, "married") == 0.22

    @pytest.mark.parametrize("status", list(FilingStatus))
    def test_rate_non_decreasing_in_income(self, status):
        """More income never lowers the marginal rate."""
        incomes = range(0, 1_000_001, 2500)
        rates = [get_federal_tax_rate(i, status) for i in incomes]

        assert rates == sorted(rates)

    def test_married_thresholds_at_least_single(self):
        """Each married threshold is at or above the single one."""
        for single, married in zip(SINGLE_BRACKETS, MARRIED_FILING_JOINTLY_BRACKETS):
            assert married.upper_bound >= single.upper_bound
            assert married.rate == single.rate

    def test_tables_are_ordered(self):
        """Bracket tables scan in ascending order."""
        for status in FilingStatus:
            bounds = [b.upper_bound for b in get_federal_brackets(status)]
            assert bounds == sorted(bounds)


class TestTaxRates:
    """Tests for get_tax_rates."""

    def test_collects_rates(self):
        """Federal from brackets, no state tax, property passed through."""
        rates = get_tax_rates(120000, FilingStatus.SINGLE, 0.012)

        assert isinstance(rates, TaxRates)
        assert rates.federal == 0.24
        assert rates.state == 0.0
        assert rates.property_rate == 0.012
        assert rates.total_income_tax_rate == 0.24

    def test_version(self):
        """Tables are tagged with their tax year."""
        assert get_tax_table_version() == "2023"
