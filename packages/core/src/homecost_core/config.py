"""Configuration system for HomeCost.

Pydantic Settings-based configuration with environment variable support.
Only the command line reads these settings; library callers get the fixed
CalculationRules defaults unless they pass their own.

Usage:
    from homecost_core.config import HomeCostSettings

    # Load from environment variables and .env file
    settings = HomeCostSettings()
    calculator = HomeCostCalculator(settings.calculation_rules())

Environment Variables:
    HOMECOST_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
    HOMECOST_LOG_FORMAT: console or json
    HOMECOST_AFFORDABILITY_THRESHOLD: Max front-end ratio considered affordable
    HOMECOST_PROPERTY_TAX_DEDUCTION_CAP: Ceiling on deductible property tax
    HOMECOST_MORTGAGE_DEDUCTION_PRINCIPAL_CAP: Ceiling on principal whose
        interest is deductible
    HOMECOST_INCOME_MULTIPLE_WARNING: Price-to-income multiple that triggers
        a warning
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import (
    DEFAULT_AFFORDABILITY_THRESHOLD,
    DEFAULT_INCOME_MULTIPLE_WARNING,
    DEFAULT_MORTGAGE_DEDUCTION_PRINCIPAL_CAP,
    DEFAULT_PROPERTY_TAX_DEDUCTION_CAP,
    CalculationRules,
)


class HomeCostSettings(BaseSettings):
    """Root configuration for HomeCost."""

    model_config = SettingsConfigDict(
        env_prefix="HOMECOST_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    log_format: str = Field(
        default="console",
        description="Log renderer: console for humans, json for collectors",
    )

    # Calculation rules
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

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper().strip()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of: {valid_levels}")
        return v_upper

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate and normalize log format."""
        valid_formats = {"console", "json"}
        v_lower = v.lower().strip()
        if v_lower not in valid_formats:
            raise ValueError(f"Invalid log format: {v}. Must be one of: {valid_formats}")
        return v_lower

    def calculation_rules(self) -> CalculationRules:
        """Rules for HomeCostCalculator built from these settings."""
        return CalculationRules(
            affordability_threshold=self.affordability_threshold,
            property_tax_deduction_cap=self.property_tax_deduction_cap,
            mortgage_deduction_principal_cap=self.mortgage_deduction_principal_cap,
            income_multiple_warning=self.income_multiple_warning,
        )


@lru_cache(maxsize=1)
def get_settings() -> HomeCostSettings:
    """Return the process-wide settings, loaded once."""
    return HomeCostSettings()
