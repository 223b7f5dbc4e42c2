"""Data models for the homeownership net cost calculation.

Inputs take percentages the way a person types them (6.5 means 6.5%);
the calculator converts them to decimal fractions before use. Nothing here
range-checks numbers: negative, zero or NaN values are accepted and the
calculator reports them through warnings instead.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


# =============================================================================
# DEFAULTS
# =============================================================================

DEFAULT_INSURANCE_PERCENT = 0.5
DEFAULT_DOWN_PAYMENT_PERCENT = 20.0
DEFAULT_CLOSING_COSTS_PERCENT = 3.0
DEFAULT_OPPORTUNITY_COST_RATE = 8.0
DEFAULT_MORTGAGE_YEARS = 30
DEFAULT_MAINTENANCE_COST_RATE = 1.0
DEFAULT_PROPERTY_TAX_RATE = 1.0

DEFAULT_AFFORDABILITY_THRESHOLD = 0.28
DEFAULT_PROPERTY_TAX_DEDUCTION_CAP = 10000.0
DEFAULT_MORTGAGE_DEDUCTION_PRINCIPAL_CAP = 750000.0
DEFAULT_INCOME_MULTIPLE_WARNING = 10.0


# =============================================================================
# ENUMERATIONS
# =============================================================================

class FilingStatus(str, Enum):
    """Federal filing status used for the bracket lookup."""
    SINGLE = "single"
    MARRIED_FILING_JOINTLY = "married"


# =============================================================================
# RULES
# =============================================================================

class CalculationRules(BaseModel):
    """Thresholds and deduction caps applied by the calculator.

    The defaults are the conventional 28% front-end rule, the $10,000 SALT
    cap, the $750,000 mortgage interest principal cap and a 10x
    price-to-income warning. They never read the environment; the CLI builds
    rules from HomeCostSettings when an override is wanted.
    """

    model_config = {"frozen": True}

    affordability_threshold: float = Field(
        default=DEFAULT_AFFORDABILITY_THRESHOLD,
        gt=0.0,
        le=1.0,
        description="Highest front-end ratio still considered affordable",
    )
    property_tax_deduction_cap: float = Field(
        default=DEFAULT_PROPERTY_TAX_DEDUCTION_CAP,
        ge=0,
        description="Ceiling on deductible property tax (SALT cap)",
    )
    mortgage_deduction_principal_cap: float = Field(
        default=DEFAULT_MORTGAGE_DEDUCTION_PRINCIPAL_CAP,
        ge=0,
        description="Ceiling on mortgage principal whose interest is deductible",
    )
    income_multiple_warning: float = Field(
        default=DEFAULT_INCOME_MULTIPLE_WARNING,
        gt=0,
        description="Warn when the house price exceeds this multiple of income",
    )


# =============================================================================
# INPUT
# =============================================================================

class HomeCostInputs(BaseModel):
    """Everything needed to estimate the annual cost of owning a home."""

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "house_price": 500000,
                    "user_income": 120000,
                    "mortgage_rate": 6.5,
                    "home_appreciation": 3,
                    "filing_status": "single",
                    "down_payment_percent": 20,
                }
            ]
        },
    }

    house_price: float = Field(description="Purchase price of the home")
    user_income: float = Field(description="Gross annual household income")
    mortgage_rate: float = Field(description="Annual nominal mortgage rate, percent")
    home_appreciation: float = Field(description="Expected annual appreciation, percent")
    filing_status: FilingStatus = Field(
        default=FilingStatus.SINGLE,
        description="Federal filing status",
    )
    insurance_percent: float = Field(
        default=DEFAULT_INSURANCE_PERCENT,
        description="Annual homeowners insurance, percent of house price",
    )
    down_payment_percent: float = Field(
        default=DEFAULT_DOWN_PAYMENT_PERCENT,
        description="Down payment, percent of house price",
    )
    closing_costs_percent: float = Field(
        default=DEFAULT_CLOSING_COSTS_PERCENT,
        description="Closing costs, percent of house price",
    )
    opportunity_cost_rate: float = Field(
        default=DEFAULT_OPPORTUNITY_COST_RATE,
        description="Annual return foregone on cash put into the home, percent",
    )
    mortgage_years: int = Field(
        default=DEFAULT_MORTGAGE_YEARS,
        description="Loan term in years",
    )
    maintenance_cost_rate: float = Field(
        default=DEFAULT_MAINTENANCE_COST_RATE,
        description="Annual maintenance, percent of house price",
    )
    property_tax_rate: float = Field(
        default=DEFAULT_PROPERTY_TAX_RATE,
        description="Annual property tax, percent of house price",
    )


# =============================================================================
# RESULTS
# =============================================================================

class TaxRates(BaseModel):
    """Marginal rates applied to deductions, as decimal fractions."""

    model_config = {"frozen": True}

    federal: float
    state: float
    property_rate: float

    @property
    def total_income_tax_rate(self) -> float:
        """Federal plus state marginal rate."""
        return self.federal + self.state


class AuditEntry(BaseModel):
    """Audit log entry for calculation transparency."""

    model_config = {"frozen": True}

    step: str
    input_value: str
    output_value: str
    source: str
    notes: Optional[str] = None


class CostBreakdown(BaseModel):
    """Every intermediate amount behind the net cost figure.

    Annual currency amounts unless the name says otherwise; tax rates are
    decimal fractions.
    """

    model_config = {"frozen": True}

    annual_mortgage_payment: float
    property_tax: float
    insurance: float
    maintenance: float
    opportunity_cost_upfront: float
    opportunity_cost_mortgage_payments: float
    total_opportunity_cost: float
    home_appreciation_value: float
    mortgage_interest_tax_savings: float
    property_tax_tax_savings: float
    down_payment: float
    closing_costs: float
    total_upfront_costs: float
    monthly_mortgage_payment: float
    federal_tax_rate: float
    state_tax_rate: float

    @property
    def total_annual_costs(self) -> float:
        """Cash costs of owning plus the return given up on that cash."""
        return (
            self.annual_mortgage_payment
            + self.property_tax
            + self.insurance
            + self.maintenance
            + self.total_opportunity_cost
        )

    @property
    def total_annual_benefits(self) -> float:
        """Appreciation plus the value of the two deductions."""
        return (
            self.home_appreciation_value
            + self.mortgage_interest_tax_savings
            + self.property_tax_tax_savings
        )


class HomeCostResult(BaseModel):
    """Annual net cost of owning, with affordability and warnings."""

    model_config = {"frozen": True}

    total_net_cost: float
    monthly_payment: float
    front_end_ratio: float
    is_affordable: bool
    total_tax_rate: float
    breakdown: CostBreakdown
    loan_amount: float = Field(description="House price less the down payment")
    affordability_threshold: float = Field(
        default=DEFAULT_AFFORDABILITY_THRESHOLD,
        description="Front-end ratio ceiling the affordability check used",
    )
    warnings: tuple[str, ...] = ()
    audit_log: tuple[AuditEntry, ...] = ()
    tax_table_version: str = ""

    @property
    def has_warnings(self) -> bool:
        """True when validation flagged at least one input."""
        return len(self.warnings) > 0


__all__ = [
    "DEFAULT_INSURANCE_PERCENT",
    "DEFAULT_DOWN_PAYMENT_PERCENT",
    "DEFAULT_CLOSING_COSTS_PERCENT",
    "DEFAULT_OPPORTUNITY_COST_RATE",
    "DEFAULT_MORTGAGE_YEARS",
    "DEFAULT_MAINTENANCE_COST_RATE",
    "DEFAULT_PROPERTY_TAX_RATE",
    "DEFAULT_AFFORDABILITY_THRESHOLD",
    "DEFAULT_PROPERTY_TAX_DEDUCTION_CAP",
    "DEFAULT_MORTGAGE_DEDUCTION_PRINCIPAL_CAP",
    "DEFAULT_INCOME_MULTIPLE_WARNING",
    "CalculationRules",
    "FilingStatus",
    "HomeCostInputs",
    "TaxRates",
    "AuditEntry",
    "CostBreakdown",
    "HomeCostResult",
]
