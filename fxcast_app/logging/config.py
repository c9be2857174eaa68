"""
Centralized logging configuration for the forecasting engine.

This module provides standardized logging configuration using structlog
for all components. All logging throughout the package should go through
this configuration to keep output formatting and structured keys consistent.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger

from fxcast_app.config.defaults import LoggingParams


def configure_logging(
    params: Optional[LoggingParams] = None,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog from the `logging` section of a ForecastConfig.

    Args:
        params: Level and renderer choice; defaults to LoggingParams()
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    params = params or LoggingParams()
    log_level = getattr(logging, params.level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if params.format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_forecast_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound to the forecasting subsystem.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for forecast results
    """
    return get_logger(name).bind(subsystem="forecasting")


def log_forecast_result(
    logger: FilteringBoundLogger,
    currency: str,
    current_rate: float,
    projected_rate: float,
    change_percent: float,
    recommendation: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a completed forecast with standardized format.

    Args:
        logger: Structlog logger instance
        currency: Forecast currency code
        current_rate: Most recent historical rate
        projected_rate: Rate at the end of the forecast horizon
        change_percent: Percentage change between the two
        recommendation: Recommendation label value
        context: Additional context data
    """
    bound_logger = logger.bind(
        currency=currency,
        current_rate=current_rate,
        projected_rate=projected_rate,
        change_percent=round(change_percent, 4),
        recommendation=recommendation,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.info("forecast_complete")
