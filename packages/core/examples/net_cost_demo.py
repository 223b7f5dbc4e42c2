#!/usr/bin/env python3
"""
Net Cost of Ownership Demonstration

This script walks through the calculator workflow:
1. Build the inputs for a few households
2. Compute the annual net cost of owning
3. Print a report for each

Run: python examples/net_cost_demo.py
"""

from homecost_core import (
    FilingStatus,
    HomeCostCalculator,
    HomeCostInputs,
    HomeCostReportGenerator,
    format_currency,
    format_percentage,
)


def create_scenarios() -> dict[str, HomeCostInputs]:
    """A few realistic and one deliberately stretched household."""
    return {
        "Starter home, single buyer": HomeCostInputs(
            house_price=500000,
            user_income=120000,
            mortgage_rate=6.5,
            home_appreciation=3,
            filing_status=FilingStatus.SINGLE,
            down_payment_percent=20,
        ),
        "Family home, married buyers": HomeCostInputs(
            house_price=850000,
            user_income=260000,
            mortgage_rate=6.75,
            home_appreciation=3.5,
            filing_status=FilingStatus.MARRIED_FILING_JOINTLY,
            down_payment_percent=15,
            property_tax_rate=1.8,
        ),
        "Stretch purchase": HomeCostInputs(
            house_price=1000000,
            user_income=50000,
            mortgage_rate=7,
            home_appreciation=4,
            down_payment_percent=5,
        ),
    }


def main():
    """Run every scenario and print a comparison followed by full reports."""
    calculator = HomeCostCalculator()
    generator = HomeCostReportGenerator()
    scenarios = create_scenarios()

    print("=" * 70)
    print("HOMECOST - Annual Net Cost of Ownership")
    print("=" * 70)
    print()
    print(f"{'Scenario':<32}{'Net cost':>14}{'Monthly':>12}{'Ratio':>10}")
    print("-" * 70)

    results = {}
    for name, inputs in scenarios.items():
        result = calculator.calculate(inputs)
        results[name] = result
        print(
            f"{name:<32}"
            f"{format_currency(result.total_net_cost):>14}"
            f"{format_currency(result.monthly_payment):>12}"
            f"{format_percentage(result.front_end_ratio):>10}"
        )

    for name, inputs in scenarios.items():
        print()
        print(f"### {name}")
        print(generator.generate(inputs, results[name]))


if __name__ == "__main__":
    main()
