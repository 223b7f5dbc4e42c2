"""Annual net cost of homeownership.

The calculator turns a HomeCostInputs record into a HomeCostResult:
yearly cash costs of owning, the investment return given up on that cash,
minus appreciation and the value of the mortgage interest and property tax
deductions. It also reports the front-end ratio against the 28% rule.

Validation is advisory only. Suspicious inputs add a warning to the result
and the arithmetic carries on with whatever the numbers produce, including
inf and nan.

Each call builds its own audit log, so one calculator can be shared freely
across threads.
"""

import math
from typing import Optional

import structlog

from .models import (
    AuditEntry,
    CalculationRules,
    CostBreakdown,
    HomeCostInputs,
    HomeCostResult,
)
from .mortgage import ieee_divide, monthly_mortgage_payment
from .tax_brackets import get_tax_rates, get_tax_table_version

logger = structlog.get_logger()

MONTHS_PER_YEAR = 12


def _percent(value: float) -> float:
    """Convert a percentage (6.5) to a decimal fraction (0.065)."""
    return value / 100


def _format_number(value: float) -> str:
    """Render a number the way a person typed it: 25 rather than 25.0."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def validate_inputs(
    inputs: HomeCostInputs,
    income_multiple: float = 10.0,
) -> list[str]:
    """Flag inputs that look wrong without rejecting them.

    Warnings always come out in the same order, so adding a violated
    condition only ever inserts its own message.

    Args:
        inputs: Raw calculator inputs
        income_multiple: Price-to-income multiple above which to warn

    Returns:
        Human-readable warnings, empty when nothing looks off
    """
    warnings: list[str] = []

    if inputs.house_price <= 0:
        warnings.append("House price must be positive")
    if inputs.user_income <= 0:
        warnings.append("User income must be positive")
    if inputs.mortgage_rate < 0 or inputs.mortgage_rate > 20:
        warnings.append(
            f"Mortgage rate seems unrealistic ({_format_number(inputs.mortgage_rate)}%)"
        )
    if inputs.home_appreciation < -10 or inputs.home_appreciation > 20:
        warnings.append(
            "Home appreciation rate seems extreme "
            f"({_format_number(inputs.home_appreciation)}%)"
        )
    if inputs.down_payment_percent < 3 or inputs.down_payment_percent > 50:
        warnings.append(
            "Down payment percentage seems unusual "
            f"({_format_number(inputs.down_payment_percent)}%)"
        )
    if inputs.house_price > inputs.user_income * income_multiple:
        warnings.append(
            f"House price is more than {_format_number(income_multiple)}x "
            "annual income - may not be affordable"
        )

    return warnings


class HomeCostCalculator:
    """
    Estimate the yearly net cost of owning a home.

    Costs: mortgage payments, property tax, insurance, maintenance and the
    return foregone on the down payment, closing costs and mortgage payments.
    Benefits: appreciation and the tax saved by deducting mortgage interest
    and property tax at the household's marginal rate.

    Appreciation and opportunity cost are flat one-year percentages, and
    deductible interest is the capped principal times the rate rather than
    the first year of an amortization schedule.
    """

    def __init__(self, rules: Optional[CalculationRules] = None):
        """
        Initialize calculator with calculation rules.

        Args:
            rules: Thresholds and deduction caps (default: conventional rules)
        """
        self.rules = rules or CalculationRules()

    def _log_step(
        self,
        audit_log: list[AuditEntry],
        step: str,
        input_value: str,
        output_value: float,
        source: str,
        notes: Optional[str] = None,
    ) -> None:
        """Add an entry to the audit log."""
        entry = AuditEntry(
            step=step,
            input_value=input_value,
            output_value=str(output_value),
            source=source,
            notes=notes,
        )
        audit_log.append(entry)
        logger.debug(
            "calculation_step",
            step=step,
            input=input_value,
            output=entry.output_value,
            source=source,
        )

    def calculate(self, inputs: HomeCostInputs) -> HomeCostResult:
        """
        Compute the annual net cost of owning and the affordability check.

        Args:
            inputs: House, income, loan and assumption inputs

        Returns:
            HomeCostResult with breakdown, warnings and audit trail
        """
        rules = self.rules
        audit_log: list[AuditEntry] = []

        mortgage_rate = _percent(inputs.mortgage_rate)
        appreciation_rate = _percent(inputs.home_appreciation)
        down_payment_rate = _percent(inputs.down_payment_percent)
        closing_costs_rate = _percent(inputs.closing_costs_percent)
        opportunity_rate = _percent(inputs.opportunity_cost_rate)
        maintenance_rate = _percent(inputs.maintenance_cost_rate)
        insurance_rate = _percent(inputs.insurance_percent)
        property_tax_rate = _percent(inputs.property_tax_rate)
        price = inputs.house_price

        # Step 1: Advisory validation
        warnings = validate_inputs(inputs, rules.income_multiple_warning)

        # Step 2: Marginal tax rates
        tax_rates = get_tax_rates(inputs.user_income, inputs.filing_status, property_tax_rate)
        total_tax_rate = tax_rates.federal + tax_rates.state
        self._log_step(
            audit_log,
            step="marginal_tax_rate",
            input_value=f"income={inputs.user_income}, status={inputs.filing_status.value}",
            output_value=total_tax_rate,
            source=f"Federal brackets {get_tax_table_version()}",
        )

        # Step 3: Upfront costs
        down_payment = price * down_payment_rate
        closing_costs = price * closing_costs_rate
        total_upfront_costs = down_payment + closing_costs
        opportunity_cost_upfront = total_upfront_costs * opportunity_rate
        self._log_step(
            audit_log,
            step="opportunity_cost_upfront",
            input_value=f"({down_payment} + {closing_costs}) * {opportunity_rate}",
            output_value=opportunity_cost_upfront,
            source="Down payment and closing costs",
        )

        # Step 4: Mortgage
        loan_amount = price - down_payment
        monthly_mortgage = monthly_mortgage_payment(
            loan_amount, mortgage_rate, inputs.mortgage_years
        )
        annual_mortgage_payment = monthly_mortgage * MONTHS_PER_YEAR
        opportunity_cost_mortgage = annual_mortgage_payment * opportunity_rate
        total_opportunity_cost = opportunity_cost_upfront + opportunity_cost_mortgage
        self._log_step(
            audit_log,
            step="annual_mortgage_payment",
            input_value=f"loan={loan_amount}, rate={mortgage_rate}, years={inputs.mortgage_years}",
            output_value=annual_mortgage_payment,
            source="Fixed-rate amortization",
        )
        self._log_step(
            audit_log,
            step="opportunity_cost_mortgage_payments",
            input_value=f"{annual_mortgage_payment} * {opportunity_rate}",
            output_value=opportunity_cost_mortgage,
            source="Mortgage payments",
            notes="Flat annual rate, not compounded within the year",
        )

        # Step 5: Recurring costs
        property_tax = price * tax_rates.property_rate
        property_tax_deduction = min(property_tax, rules.property_tax_deduction_cap)
        insurance = price * insurance_rate
        maintenance = price * maintenance_rate
        self._log_step(
            audit_log,
            step="recurring_costs",
            input_value=f"price={price}",
            output_value=property_tax + insurance + maintenance,
            source="Property tax, insurance and maintenance rates",
        )

        # Step 6: Tax benefits
        deductible_principal = min(loan_amount, rules.mortgage_deduction_principal_cap)
        annual_mortgage_interest = deductible_principal * mortgage_rate
        mortgage_interest_tax_savings = annual_mortgage_interest * total_tax_rate
        property_tax_tax_savings = property_tax_deduction * total_tax_rate
        self._log_step(
            audit_log,
            step="tax_savings",
            input_value=(
                f"interest={annual_mortgage_interest}, "
                f"property_tax_deduction={property_tax_deduction}, rate={total_tax_rate}"
            ),
            output_value=mortgage_interest_tax_savings + property_tax_tax_savings,
            source="Mortgage interest and property tax deductions",
            notes=(
                f"Principal capped at {rules.mortgage_deduction_principal_cap}, "
                f"property tax capped at {rules.property_tax_deduction_cap}"
            ),
        )

        # Step 7: Appreciation
        home_appreciation_value = price * appreciation_rate

        # Step 8: Net cost
        breakdown = CostBreakdown(
            annual_mortgage_payment=annual_mortgage_payment,
            property_tax=property_tax,
            insurance=insurance,
            maintenance=maintenance,
            opportunity_cost_upfront=opportunity_cost_upfront,
            opportunity_cost_mortgage_payments=opportunity_cost_mortgage,
            total_opportunity_cost=total_opportunity_cost,
            home_appreciation_value=home_appreciation_value,
            mortgage_interest_tax_savings=mortgage_interest_tax_savings,
            property_tax_tax_savings=property_tax_tax_savings,
            down_payment=down_payment,
            closing_costs=closing_costs,
            total_upfront_costs=total_upfront_costs,
            monthly_mortgage_payment=monthly_mortgage,
            federal_tax_rate=tax_rates.federal,
            state_tax_rate=tax_rates.state,
        )
        total_annual_costs = breakdown.total_annual_costs
        total_annual_benefits = breakdown.total_annual_benefits
        total_net_cost = total_annual_costs - total_annual_benefits
        self._log_step(
            audit_log,
            step="total_net_cost",
            input_value=f"{total_annual_costs} - {total_annual_benefits}",
            output_value=total_net_cost,
            source="Annual costs minus annual benefits",
        )

        # Step 9: Affordability (opportunity cost is not a cash outlay)
        monthly_payment = (
            annual_mortgage_payment + property_tax + insurance + maintenance
        ) / MONTHS_PER_YEAR
        monthly_income = inputs.user_income / MONTHS_PER_YEAR
        front_end_ratio = ieee_divide(monthly_payment, monthly_income)
        is_affordable = front_end_ratio <= rules.affordability_threshold
        self._log_step(
            audit_log,
            step="front_end_ratio",
            input_value=f"{monthly_payment} / {monthly_income}",
            output_value=front_end_ratio,
            source=f"{rules.affordability_threshold:.0%} front-end rule",
        )

        logger.debug(
            "net_cost_computed",
            total_net_cost=total_net_cost,
            front_end_ratio=front_end_ratio,
            is_affordable=is_affordable,
            warnings=len(warnings),
        )

        return HomeCostResult(
            total_net_cost=total_net_cost,
            monthly_payment=monthly_payment,
            front_end_ratio=front_end_ratio,
            is_affordable=is_affordable,
            total_tax_rate=total_tax_rate,
            breakdown=breakdown,
            loan_amount=loan_amount,
            affordability_threshold=rules.affordability_threshold,
            warnings=tuple(warnings),
            audit_log=tuple(audit_log),
            tax_table_version=get_tax_table_version(),
        )


def compute_net_cost(
    inputs: HomeCostInputs,
    rules: Optional[CalculationRules] = None,
) -> HomeCostResult:
    """Compute the annual net cost of owning with the default rules."""
    return HomeCostCalculator(rules).calculate(inputs)
