"""Turn submitted calculator form fields into a HomeCostInputs record.

Numbers are read leniently, the way browsers read number inputs: leading
whitespace is skipped, the longest numeric prefix is used ("6.5%" gives 6.5)
and anything without one becomes NaN. A NaN still flows through the
calculation; the result's warnings and figures show the problem. Only
things the calculator cannot represent at all (a missing required field,
an unknown filing status, a non-integer loan term) raise.
"""

import math
import re
from collections.abc import Mapping
from typing import Optional

import structlog

from .exceptions import InvalidInputError, MissingFieldError
from .models import FilingStatus, HomeCostInputs

logger = structlog.get_logger()

_NUMBER_PREFIX = re.compile(
    r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
)

# Form field name -> HomeCostInputs field name
REQUIRED_FIELDS = {
    "housePrice": "house_price",
    "userIncome": "user_income",
    "mortgageRate": "mortgage_rate",
    "homeAppreciation": "home_appreciation",
}

OPTIONAL_FIELDS = {
    "propertyTaxRate": "property_tax_rate",
    "downPayment": "down_payment_percent",
    "opportunityCost": "opportunity_cost_rate",
    "maintenanceCost": "maintenance_cost_rate",
    "insurance": "insurance_percent",
    "closingCosts": "closing_costs_percent",
}

_FILING_STATUS_ALIASES = {
    "single": FilingStatus.SINGLE,
    "married": FilingStatus.MARRIED_FILING_JOINTLY,
    "married_filing_jointly": FilingStatus.MARRIED_FILING_JOINTLY,
}


def parse_number(raw: Optional[str]) -> float:
    """Read a number with browser parseFloat rules; NaN when there is none."""
    if raw is None:
        return math.nan
    match = _NUMBER_PREFIX.match(str(raw).lstrip())
    if not match:
        return math.nan
    text = match.group(0)
    if text.endswith("Infinity"):
        return -math.inf if text.startswith("-") else math.inf
    return float(text)


def parse_filing_status(raw: Optional[str]) -> FilingStatus:
    """Map a select value or enum name onto FilingStatus."""
    if raw is None or not str(raw).strip():
        return FilingStatus.SINGLE
    key = str(raw).strip().lower()
    try:
        return _FILING_STATUS_ALIASES[key]
    except KeyError:
        raise InvalidInputError(
            f"Unknown filing status: {raw}",
            field="filingStatus",
            raw_value=str(raw),
        ) from None


def _is_blank(raw: Optional[str]) -> bool:
    return raw is None or not str(raw).strip()


def parse_form(raw: Mapping[str, str]) -> HomeCostInputs:
    """
    Build calculator inputs from submitted form fields.

    Args:
        raw: Field name to submitted string, e.g. {"housePrice": "500000"}

    Returns:
        HomeCostInputs with defaults for blank optional fields

    Raises:
        MissingFieldError: A required field is absent or blank
        InvalidInputError: Unknown filing status or unusable loan term
    """
    values: dict[str, object] = {}

    for form_name, field_name in REQUIRED_FIELDS.items():
        value = raw.get(form_name)
        if _is_blank(value):
            raise MissingFieldError(
                f"Missing required field: {form_name}",
                field=form_name,
                raw_value=value,
            )
        values[field_name] = parse_number(value)

    for form_name, field_name in OPTIONAL_FIELDS.items():
        value = raw.get(form_name)
        if not _is_blank(value):
            values[field_name] = parse_number(value)

    values["filing_status"] = parse_filing_status(raw.get("filingStatus"))

    years = raw.get("mortgageYears")
    if not _is_blank(years):
        parsed_years = parse_number(years)
        if not math.isfinite(parsed_years) or not parsed_years.is_integer():
            raise InvalidInputError(
                f"Loan term must be a whole number of years: {years}",
                field="mortgageYears",
                raw_value=years,
            )
        values["mortgage_years"] = int(parsed_years)

    inputs = HomeCostInputs(**values)
    logger.debug(
        "form_parsed",
        fields=sorted(k for k, v in raw.items() if not _is_blank(v)),
    )
    return inputs
