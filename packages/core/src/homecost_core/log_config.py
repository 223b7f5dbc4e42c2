"""structlog setup for command line and service entry points.

Library code only ever calls ``structlog.get_logger()``; whoever owns the
process calls ``configure_logging`` once.
"""

import logging
import sys
from typing import Optional

import structlog

from .config import HomeCostSettings, get_settings
from .exceptions import ConfigurationError

LOG_FORMATS = ("console", "json")


def configure_logging(
    level: Optional[str] = None,
    fmt: Optional[str] = None,
    settings: Optional[HomeCostSettings] = None,
) -> None:
    """Configure structlog processors and the level filter.

    Args:
        level: Logging level name; defaults to settings.log_level
        fmt: "console" or "json"; defaults to settings.log_format
        settings: Settings to read defaults from (default: process settings)
    """
    settings = settings or get_settings()
    level_name = (level or settings.log_level).upper()
    fmt = (fmt or settings.log_format).lower()

    level_value = logging.getLevelName(level_name)
    if not isinstance(level_value, int):
        raise ConfigurationError(
            f"Unknown log level: {level_name}",
            config_key="HOMECOST_LOG_LEVEL",
            expected="DEBUG, INFO, WARNING, ERROR or CRITICAL",
            actual=level_name,
        )
    if fmt not in LOG_FORMATS:
        raise ConfigurationError(
            f"Unsupported log format: {fmt}",
            config_key="HOMECOST_LOG_FORMAT",
            expected="console or json",
            actual=fmt,
        )

    if fmt == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level_value),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
