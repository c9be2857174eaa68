"""
System failure error classifications.

These exceptions represent failures outside the caller's input: an upstream
rate feed that cannot be reached, a broken internal invariant, or an invalid
configuration that prevents the engine from starting.
"""

from typing import Optional, Dict, Any, List

from .base import ForecastError


class SystemFailureError(ForecastError):
    """Base class for failures that are not caused by the requested currency."""

    recoverable = False


class InsufficientDataError(SystemFailureError):
    """Not enough points to fit a trend. Indicates a programming fault."""

    def __init__(self, message: str, required_count: Optional[int] = None,
                 available_count: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.required_count = required_count
        self.available_count = available_count


class RateUnavailableError(SystemFailureError):
    """Rate source failed, returned unparsable data or lacks the currency.

    Never retried. Inside a batch the failure is confined to one currency,
    hence it is flagged as recoverable at the batch level.
    """

    recoverable = True

    def __init__(self, message: str, currency: Optional[str] = None,
                 source: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.currency = currency
        self.source = source


class ConfigurationError(SystemFailureError):
    """Merged configuration failed validation."""

    def __init__(self, message: str, errors: Optional[List[Any]] = None,
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message, context=context)
        self.errors = errors or []
