"""HomeCost Core - Annual net cost of homeownership versus renting."""

__version__ = "0.1.0"

from .calculator import HomeCostCalculator, compute_net_cost, validate_inputs
from .config import HomeCostSettings, get_settings
from .exceptions import (
    ConfigurationError,
    HomeCostError,
    InputParseError,
    InvalidInputError,
    MissingFieldError,
)
from .forms import parse_form
from .models import (
    AuditEntry,
    CalculationRules,
    CostBreakdown,
    FilingStatus,
    HomeCostInputs,
    HomeCostResult,
    TaxRates,
)
from .mortgage import monthly_mortgage_payment
from .report import (
    BreakdownLineItem,
    HomeCostReportGenerator,
    affordability_label,
    breakdown_line_items,
    format_currency,
    format_percentage,
)
from .tax_brackets import get_federal_tax_rate, get_tax_rates

__all__ = [
    "HomeCostCalculator",
    "compute_net_cost",
    "validate_inputs",
    "HomeCostSettings",
    "get_settings",
    "HomeCostError",
    "InputParseError",
    "MissingFieldError",
    "InvalidInputError",
    "ConfigurationError",
    "parse_form",
    "AuditEntry",
    "CalculationRules",
    "CostBreakdown",
    "FilingStatus",
    "HomeCostInputs",
    "HomeCostResult",
    "TaxRates",
    "monthly_mortgage_payment",
    "BreakdownLineItem",
    "HomeCostReportGenerator",
    "affordability_label",
    "breakdown_line_items",
    "format_currency",
    "format_percentage",
    "get_federal_tax_rate",
    "get_tax_rates",
]
