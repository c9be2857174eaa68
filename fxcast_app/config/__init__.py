"""Configuration defaults, YAML loading and validation."""

from .defaults import (
    CurrencyParams,
    ForecastConfig,
    ForecastParams,
    LoggingParams,
    RateSourceParams,
    get_default_config,
)
from .loader import ConfigLoader
from .validation import ConfigValidator, ValidationError

__all__ = [
    "ConfigLoader",
    "ConfigValidator",
    "CurrencyParams",
    "ForecastConfig",
    "ForecastParams",
    "LoggingParams",
    "RateSourceParams",
    "ValidationError",
    "get_default_config",
]
