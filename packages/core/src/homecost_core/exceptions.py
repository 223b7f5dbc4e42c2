"""Custom exceptions for the HomeCost application.

The net cost calculation itself never raises: out-of-range inputs are
reported through the result's warnings. These exceptions belong to the
layers around it (form parsing, configuration, the command line) and all
inherit from HomeCostError.

Example:
    try:
        inputs = parse_form(request_fields)
    except MissingFieldError as e:
        show_field_error(e.field, str(e))
    except HomeCostError as e:
        logger.error("form_rejected", error=str(e))
"""

from typing import Any, Optional


class HomeCostError(Exception):
    """Base exception for all HomeCost application errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary with additional context.
        recoverable: Whether the error is potentially recoverable.

    Example:
        >>> raise HomeCostError("Something went wrong", details={"code": 500})
        HomeCostError: Something went wrong
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        recoverable: bool = False,
    ) -> None:
        """Initialize HomeCostError.

        Args:
            message: Human-readable error description.
            details: Optional dictionary with additional context about the error.
            recoverable: Whether the error is potentially recoverable through
                user correction. Defaults to False.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.recoverable = recoverable

    def __str__(self) -> str:
        """Return string representation of the error."""
        return self.message

    def __repr__(self) -> str:
        """Return detailed representation of the error."""
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"details={self.details!r}, "
            f"recoverable={self.recoverable!r})"
        )


class InputParseError(HomeCostError):
    """Error raised when raw form input cannot be turned into an input record.

    Attributes:
        field: The form field that could not be used.
        raw_value: The raw value as submitted (if any).

    Example:
        >>> raise InputParseError(
        ...     "Unknown filing status",
        ...     field="filingStatus",
        ...     raw_value="widowed",
        ... )
        InputParseError: Unknown filing status
    """

    def __init__(
        self,
        message: str,
        *,
        field: Optional[str] = None,
        raw_value: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        recoverable: bool = True,
    ) -> None:
        """Initialize InputParseError.

        Args:
            message: Human-readable error description.
            field: The name of the form field.
            raw_value: The submitted value that could not be used.
            details: Optional dictionary with additional context.
            recoverable: Whether the user can fix the error by editing the
                form. Defaults to True.
        """
        super().__init__(message, details=details, recoverable=recoverable)
        self.field = field
        self.raw_value = raw_value

        if field:
            self.details["field"] = field
        if raw_value is not None:
            self.details["raw_value"] = raw_value


class MissingFieldError(InputParseError):
    """A required form field was absent or blank."""


class InvalidInputError(InputParseError):
    """A form field held a value outside its closed set of choices."""


class ConfigurationError(HomeCostError):
    """Error raised when configuration is invalid or missing.

    Attributes:
        config_key: The configuration key that is problematic.
        expected: Description of the expected value or format.
        actual: The actual value found (if any).

    Example:
        >>> raise ConfigurationError(
        ...     "Unsupported log format",
        ...     config_key="HOMECOST_LOG_FORMAT",
        ...     expected="console or json",
        ...     actual="xml",
        ... )
        ConfigurationError: Unsupported log format
    """

    def __init__(
        self,
        message: str,
        *,
        config_key: Optional[str] = None,
        expected: Optional[str] = None,
        actual: Optional[Any] = None,
        details: Optional[dict[str, Any]] = None,
        recoverable: bool = False,
    ) -> None:
        """Initialize ConfigurationError.

        Args:
            message: Human-readable error description.
            config_key: The name of the configuration key that is problematic.
            expected: Description of what value was expected.
            actual: The actual value found.
            details: Optional dictionary with additional context.
            recoverable: Whether the error can be fixed at runtime.
                Defaults to False.
        """
        super().__init__(message, details=details, recoverable=recoverable)
        self.config_key = config_key
        self.expected = expected
        self.actual = actual

        if config_key:
            self.details["config_key"] = config_key
        if expected:
            self.details["expected"] = expected
        if actual is not None:
            self.details["actual"] = actual


__all__ = [
    "HomeCostError",
    "InputParseError",
    "MissingFieldError",
    "InvalidInputError",
    "ConfigurationError",
]
