"""
Error classification system for the forecasting engine.

This module provides a structured exception hierarchy for the failures that
can occur while fetching live rates, synthesizing history and fitting trends.
"""

from .base import ForecastError
from .data_quality import (
    DataQualityError,
    InvalidRateError,
    UnsupportedCurrencyError,
    MalformedSeriesError,
)
from .system_failures import (
    SystemFailureError,
    InsufficientDataError,
    RateUnavailableError,
    ConfigurationError,
)

__all__ = [
    "ForecastError",
    # Data Quality Errors
    "DataQualityError",
    "InvalidRateError",
    "UnsupportedCurrencyError",
    "MalformedSeriesError",
    # System Failures
    "SystemFailureError",
    "InsufficientDataError",
    "RateUnavailableError",
    "ConfigurationError",
]
