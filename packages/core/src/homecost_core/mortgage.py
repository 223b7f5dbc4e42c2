"""Fixed-rate mortgage payment math.

Arithmetic follows IEEE float rules all the way through: a zero-length term
or an absurd rate produces inf or nan instead of raising, so a bad input
never stops the net cost calculation.
"""

import math

DEFAULT_TERM_YEARS = 30


def ieee_divide(numerator: float, denominator: float) -> float:
    """Divide like IEEE 754: x/0 is +-inf, 0/0 and nan operands give nan."""
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _compound(rate: float, periods: float) -> float:
    try:
        return (1 + rate) ** periods
    except OverflowError:
        return math.inf
    except ZeroDivisionError:
        # 0.0 ** negative
        return math.inf


def monthly_mortgage_payment(
    loan_amount: float,
    annual_rate: float,
    years: int = DEFAULT_TERM_YEARS,
) -> float:
    """
    Standard fixed-rate amortization payment:
      M = P * [ r(1+r)^n / ((1+r)^n - 1) ]
    where r = annual_rate/12 and n = years*12.

    A zero rate has no compounding term, so the payment is simply P / n.

    Args:
        loan_amount: Amount borrowed
        annual_rate: Annual nominal rate as a decimal fraction (0.065)
        years: Loan term in years

    Returns:
        Monthly principal and interest payment
    """
    monthly_rate = annual_rate / 12
    num_payments = years * 12

    if monthly_rate == 0:
        return ieee_divide(loan_amount, num_payments)

    growth = _compound(monthly_rate, num_payments)
    if isinstance(growth, complex):
        # negative base with fractional exponent
        return math.nan
    factor = ieee_divide(monthly_rate * growth, growth - 1)
    return loan_amount * factor
