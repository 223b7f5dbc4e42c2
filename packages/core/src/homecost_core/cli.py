"""Command line entry point: ``homecost``.

Examples:
  # Defaults for everything optional
  homecost --price 500000 --income 120000 --rate 6.5 --appreciation 3

  # Married, 10% down, Markdown report
  homecost --price 750000 --income 210000 --rate 6.9 --appreciation 4 \\
      --filing-status married --down-payment 10 --format markdown

  # Machine-readable result
  homecost --price 500000 --income 120000 --rate 6.5 --appreciation 3 --format json
"""

import argparse
import sys
from typing import Optional, Sequence

import structlog

from .calculator import HomeCostCalculator
from .config import get_settings
from .exceptions import HomeCostError
from .forms import parse_form
from .log_config import configure_logging
from .models import (
    DEFAULT_CLOSING_COSTS_PERCENT,
    DEFAULT_DOWN_PAYMENT_PERCENT,
    DEFAULT_INSURANCE_PERCENT,
    DEFAULT_MAINTENANCE_COST_RATE,
    DEFAULT_MORTGAGE_YEARS,
    DEFAULT_OPPORTUNITY_COST_RATE,
    DEFAULT_PROPERTY_TAX_RATE,
)
from .report import generate_report

logger = structlog.get_logger()

EXIT_OK = 0
EXIT_INVALID_INPUT = 2

# argparse dest -> form field name
_FORM_FIELDS = {
    "price": "housePrice",
    "income": "userIncome",
    "rate": "mortgageRate",
    "appreciation": "homeAppreciation",
    "filing_status": "filingStatus",
    "property_tax": "propertyTaxRate",
    "down_payment": "downPayment",
    "opportunity_cost": "opportunityCost",
    "maintenance": "maintenanceCost",
    "insurance": "insurance",
    "closing_costs": "closingCosts",
    "years": "mortgageYears",
}


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="homecost",
        description="Estimate the annual net cost of owning a home",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__.split("Examples:", 1)[1] if __doc__ else None,
    )
    parser.add_argument("--price", "-p", required=True, help="House price")
    parser.add_argument("--income", "-i", required=True, help="Gross annual income")
    parser.add_argument("--rate", "-r", required=True, help="Mortgage rate, percent")
    parser.add_argument(
        "--appreciation", "-a",
        required=True,
        help="Expected annual home appreciation, percent",
    )
    parser.add_argument(
        "--filing-status", "-f",
        default="single",
        help="single or married (default: single)",
    )
    parser.add_argument(
        "--property-tax",
        help=f"Property tax, percent of price (default: {DEFAULT_PROPERTY_TAX_RATE:g})",
    )
    parser.add_argument(
        "--down-payment", "-d",
        help=f"Down payment, percent of price (default: {DEFAULT_DOWN_PAYMENT_PERCENT:g})",
    )
    parser.add_argument(
        "--opportunity-cost",
        help=f"Foregone investment return, percent (default: {DEFAULT_OPPORTUNITY_COST_RATE:g})",
    )
    parser.add_argument(
        "--maintenance",
        help=f"Maintenance, percent of price (default: {DEFAULT_MAINTENANCE_COST_RATE:g})",
    )
    parser.add_argument(
        "--insurance",
        help=f"Insurance, percent of price (default: {DEFAULT_INSURANCE_PERCENT:g})",
    )
    parser.add_argument(
        "--closing-costs",
        help=f"Closing costs, percent of price (default: {DEFAULT_CLOSING_COSTS_PERCENT:g})",
    )
    parser.add_argument(
        "--years", "-y",
        help=f"Loan term in years (default: {DEFAULT_MORTGAGE_YEARS})",
    )
    parser.add_argument(
        "--format",
        choices=("text", "markdown", "json"),
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log every calculation step",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the homecost command."""
    args = build_parser().parse_args(argv)

    settings = get_settings()
    configure_logging(level="DEBUG" if args.verbose else None, settings=settings)

    raw = {
        form_name: getattr(args, dest)
        for dest, form_name in _FORM_FIELDS.items()
        if getattr(args, dest) is not None
    }

    try:
        inputs = parse_form(raw)
    except HomeCostError as e:
        logger.warning("invalid_input", error=str(e), **e.details)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    result = HomeCostCalculator(settings.calculation_rules()).calculate(inputs)

    if args.format == "json":
        print(result.model_dump_json(indent=2))
    else:
        print(generate_report(inputs, result, format=args.format))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
