"""
Logging configuration and utilities for the forecasting engine.
"""
from .config import configure_logging, get_logger, get_forecast_logger, log_forecast_result

__all__ = ["configure_logging", "get_logger", "get_forecast_logger", "log_forecast_result"]
