"""Tests for the amortized mortgage payment."""

import math

import pytest

from homecost_core.mortgage import ieee_divide, monthly_mortgage_payment


def _remaining_balance(principal: float, annual_rate: float, years: int, payment: float) -> float:
    balance = principal
    monthly_rate = annual_rate / 12
    for _ in range(years * 12):
        balance = balance * (1 + monthly_rate) - payment
    return balance


class TestMonthlyMortgagePayment:
    """Standard fixed-rate amortization."""

    def test_known_payment(self):
        """$400k at 6.5% for 30 years."""
        assert monthly_mortgage_payment(400000, 0.065, 30) == pytest.approx(2528.27, abs=0.01)

    def test_default_term_is_thirty_years(self):
        """Omitting years means a 30-year loan."""
        assert monthly_mortgage_payment(400000, 0.065) == monthly_mortgage_payment(400000, 0.065, 30)

    @pytest.mark.parametrize("principal,rate,years", [
        (400000, 0.065, 30),
        (250000, 0.03, 15),
        (1_000_000, 0.0725, 20),
        (50000, 0.12, 5),
    ])
    def test_payments_retire_the_loan(self, principal, rate, years):
        """Paying the amortized amount every month leaves no balance."""
        payment = monthly_mortgage_payment(principal, rate, years)

        assert _remaining_balance(principal, rate, years, payment) == pytest.approx(0, abs=1e-4)

    def test_zero_rate_is_straight_division(self):
        """With no interest the payment is principal over the number of payments."""
        payment = monthly_mortgage_payment(400000, 0.0, 30)

        assert payment == 400000 / 360
        assert payment * 360 == pytest.approx(400000)

    def test_zero_rate_exact_for_round_division(self):
        """When it divides evenly the reconstruction is exact."""
        payment = monthly_mortgage_payment(360000, 0.0, 30)

        assert payment * 360 == 360000

    def test_zero_principal(self):
        """Nothing borrowed, nothing owed."""
        assert monthly_mortgage_payment(0, 0.065, 30) == 0

    def test_zero_term_does_not_raise(self):
        """A zero-year loan gives an infinite payment instead of an error."""
        assert monthly_mortgage_payment(400000, 0.0, 0) == math.inf
        assert monthly_mortgage_payment(400000, 0.065, 0) == math.inf

    def test_overflowing_rate_gives_nan(self):
        """An absurd rate overflows to NaN rather than raising."""
        assert math.isnan(monthly_mortgage_payment(400000, 10000.0, 30))

    def test_higher_rate_higher_payment(self):
        """Payment rises with the rate."""
        payments = [monthly_mortgage_payment(300000, r / 100, 30) for r in range(1, 15)]

        assert payments == sorted(payments)


class TestIeeeDivide:
    """Division that never raises."""

    def test_ordinary_division(self):
        assert ieee_divide(10, 4) == 2.5

    def test_positive_over_zero(self):
        assert ieee_divide(1, 0) == math.inf

    def test_negative_over_zero(self):
        assert ieee_divide(-1, 0) == -math.inf

    def test_zero_over_zero(self):
        assert math.isnan(ieee_divide(0, 0))

    def test_nan_over_zero(self):
        assert math.isnan(ieee_divide(math.nan, 0))

    def test_negative_zero_denominator(self):
        assert ieee_divide(1, -0.0) == -math.inf
