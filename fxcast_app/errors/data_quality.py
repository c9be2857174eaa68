"""
Data quality error classifications for rate forecasting.

These exceptions describe bad input: a rate that cannot anchor a series,
a currency outside the supported set, or a series that breaks ordering.
A data quality failure only affects the currency it was raised for.
"""

from typing import Optional, Sequence, Any

from .base import ForecastError


class DataQualityError(ForecastError):
    """Base class for input issues that are reported per currency."""


class InvalidRateError(DataQualityError):
    """Current rate is missing, non-numeric, non-finite or not positive."""

    def __init__(self, message: str, rate: Optional[Any] = None,
                 currency: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.rate = rate
        self.currency = currency


class UnsupportedCurrencyError(DataQualityError):
    """Requested currency is not part of the configured supported set."""

    def __init__(self, message: str, currency: Optional[Any] = None,
                 supported: Optional[Sequence[str]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.currency = currency
        self.supported = tuple(supported or ())


class MalformedSeriesError(DataQualityError):
    """Rate points are not strictly ascending by date."""

    def __init__(self, message: str, position: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.position = position
