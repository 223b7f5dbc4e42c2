"""Presentation helpers and report generation for net cost results.

The calculator returns raw floats; everything about how they are shown to
a person lives here: whole-dollar currency strings, one-decimal percentages,
the fixed nine-line breakdown and the affordability label.
"""

import math
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Optional

import structlog

from .models import HomeCostInputs, HomeCostResult

logger = structlog.get_logger()


AFFORDABLE_LABEL = "Affordable (≤{threshold})"
UNAFFORDABLE_LABEL = "Above {threshold} Rule"

DISCLAIMER = (
    "Estimates only. Appreciation and opportunity cost are flat one-year "
    "rates and do not constitute financial or tax advice."
)


def format_currency(amount: float) -> str:
    """Format as US dollars with no cents: 30339.4 -> "$30,339"."""
    if math.isnan(amount):
        return "$NaN"
    if math.isinf(amount):
        return "$∞" if amount > 0 else "-$∞"
    rounded = Decimal(repr(amount)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    if rounded == 0:
        return "$0"
    sign = "-" if rounded < 0 else ""
    return f"{sign}${abs(rounded):,.0f}"


def format_percentage(value: float) -> str:
    """Format a decimal fraction with one decimal place: 0.253 -> "25.3%"."""
    if math.isnan(value):
        return "NaN%"
    if math.isinf(value):
        return "∞%" if value > 0 else "-∞%"
    return f"{value * 100:.1f}%"


class LineItemKind(str, Enum):
    """Whether a breakdown line adds to or reduces the net cost."""
    COST = "cost"
    BENEFIT = "benefit"


@dataclass(frozen=True)
class BreakdownLineItem:
    """One labeled row of the displayed breakdown."""
    label: str
    value: float
    kind: LineItemKind

    @property
    def display_amount(self) -> str:
        """Absolute value as currency; the kind carries the sign."""
        return format_currency(abs(self.value))


def breakdown_line_items(result: HomeCostResult) -> list[BreakdownLineItem]:
    """The nine displayed breakdown rows in presentation order.

    Benefits are sign-flipped so every row reads as its effect on net cost.
    """
    b = result.breakdown
    return [
        BreakdownLineItem("Annual Mortgage Payment", b.annual_mortgage_payment, LineItemKind.COST),
        BreakdownLineItem("Property Tax", b.property_tax, LineItemKind.COST),
        BreakdownLineItem("Insurance", b.insurance, LineItemKind.COST),
        BreakdownLineItem("Maintenance", b.maintenance, LineItemKind.COST),
        BreakdownLineItem(
            "Stock gains lost from down payment",
            b.opportunity_cost_upfront,
            LineItemKind.COST,
        ),
        BreakdownLineItem(
            "Stock gains lost from mortgage payment",
            b.opportunity_cost_mortgage_payments,
            LineItemKind.COST,
        ),
        BreakdownLineItem("Home Appreciation", -b.home_appreciation_value, LineItemKind.BENEFIT),
        BreakdownLineItem(
            "Mortgage Interest Tax Savings",
            -b.mortgage_interest_tax_savings,
            LineItemKind.BENEFIT,
        ),
        BreakdownLineItem(
            "Property Tax Tax Savings",
            -b.property_tax_tax_savings,
            LineItemKind.BENEFIT,
        ),
    ]


def affordability_label(result: HomeCostResult) -> str:
    """Status label for the front-end rule the result was checked against.

    The default rule reads "Affordable (≤28%)" or "Above 28% Rule".
    """
    threshold = f"{result.affordability_threshold * 100:g}%"
    template = AFFORDABLE_LABEL if result.is_affordable else UNAFFORDABLE_LABEL
    return template.format(threshold=threshold)


@dataclass
class ReportSection:
    """A section of the report, pre-rendered for each output format."""
    title: str
    lines: list[str] = field(default_factory=list)
    markdown_lines: list[str] = field(default_factory=list)


class HomeCostReportGenerator:
    """
    Generate a readable net cost report.

    Sections:
    - Summary (net cost, monthly payment, front-end ratio, down payment)
    - Cost breakdown
    - Warnings (only when there are any)
    """

    def __init__(self):
        """Initialize the report generator."""
        self._sections: list[ReportSection] = []

    def generate(
        self,
        inputs: HomeCostInputs,
        result: HomeCostResult,
        format: str = "text",
    ) -> str:
        """
        Generate a complete report.

        Args:
            inputs: The inputs the result was computed from
            result: The calculation result
            format: Output format ("text" or "markdown")

        Returns:
            Formatted report string
        """
        self._sections = []

        self._add_summary(inputs, result)
        self._add_breakdown(result)
        if result.warnings:
            self._add_warnings(result)

        logger.debug("report_generated", format=format, sections=len(self._sections))

        if format == "markdown":
            return self._format_markdown()
        return self._format_text()

    def _add_summary(self, inputs: HomeCostInputs, result: HomeCostResult) -> None:
        """Add headline figures."""
        rows = [
            ("House Price", format_currency(inputs.house_price)),
            ("Annual Income", format_currency(inputs.user_income)),
            ("Filing Status", inputs.filing_status.name.replace("_", " ").title()),
            ("Total Annual Net Cost", format_currency(result.total_net_cost)),
            ("Monthly Payment", format_currency(result.monthly_payment)),
            ("Front-End Ratio", format_percentage(result.front_end_ratio)),
            ("Down Payment", format_currency(result.breakdown.down_payment)),
            ("Loan Amount", format_currency(result.loan_amount)),
            ("Status", affordability_label(result)),
        ]
        self._sections.append(ReportSection(
            title="Summary",
            lines=[f"{label + ':':<24}{value}" for label, value in rows],
            markdown_lines=[f"- **{label}:** {value}" for label, value in rows],
        ))

    def _add_breakdown(self, result: HomeCostResult) -> None:
        """Add the nine breakdown rows."""
        items = breakdown_line_items(result)
        lines = []
        markdown_lines = ["| Item | Effect | Amount |", "|---|---|---|"]
        for item in items:
            marker = "+" if item.kind == LineItemKind.COST else "-"
            lines.append(f"{marker} {item.label:<40} {item.display_amount:>12}")
            markdown_lines.append(f"| {item.label} | {item.kind.value} | {item.display_amount} |")
        self._sections.append(ReportSection(
            title="Annual Cost Breakdown",
            lines=lines,
            markdown_lines=markdown_lines,
        ))

    def _add_warnings(self, result: HomeCostResult) -> None:
        """Add validation warnings."""
        self._sections.append(ReportSection(
            title="Warnings",
            lines=[f"* {warning}" for warning in result.warnings],
            markdown_lines=[f"- {warning}" for warning in result.warnings],
        ))

    def _format_text(self) -> str:
        """Format report as plain text."""
        output = ["HOME OWNERSHIP NET COST REPORT"]

        for section in self._sections:
            output.append("")
            output.append("=" * 60)
            output.append(section.title.upper())
            output.append("=" * 60)
            output.extend(section.lines)

        output.append("")
        output.append(DISCLAIMER)
        return "\n".join(output)

    def _format_markdown(self) -> str:
        """Format report as Markdown."""
        output = ["# Home Ownership Net Cost Report"]

        for section in self._sections:
            output.append(f"\n## {section.title}\n")
            output.extend(section.markdown_lines)

        output.append("")
        output.append(f"_{DISCLAIMER}_")
        return "\n".join(output)


def generate_report(
    inputs: HomeCostInputs,
    result: HomeCostResult,
    format: Optional[str] = None,
) -> str:
    """Shortcut for HomeCostReportGenerator().generate(...)."""
    return HomeCostReportGenerator().generate(inputs, result, format=format or "text")
