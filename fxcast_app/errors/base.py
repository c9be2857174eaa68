"""Root of the forecasting error hierarchy."""

from typing import Optional, Dict, Any


class ForecastError(Exception):
    """Base class for every error raised by the forecasting engine."""

    recoverable = True

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
