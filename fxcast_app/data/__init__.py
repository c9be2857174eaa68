"""
Data models module.

Immutable data structures for rate points, series, fitted trends and
forecast results. Follows functional programming principles with frozen
dataclasses.
"""

from .models import (
    BatchEntry,
    ForecastResult,
    ForecastSummary,
    RatePoint,
    RateSeries,
    Recommendation,
    TrendModel,
)

__all__ = [
    "BatchEntry",
    "ForecastResult",
    "ForecastSummary",
    "RatePoint",
    "RateSeries",
    "Recommendation",
    "TrendModel",
]
