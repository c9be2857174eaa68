"""
Canonical data models for exchange-rate series and forecasts.

This module defines immutable data structures that flow through the
forecasting pipeline. Rates are expressed as units of foreign currency per
one unit of the base currency.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Iterator, Optional, Union

from fxcast_app.errors import ForecastError, MalformedSeriesError


class Recommendation(str, Enum):
    """Predicted base-currency strength against a foreign currency."""
    STABLE = "stable"
    STRENGTHEN_BASE = "strengthen_base"
    WEAKEN_BASE = "weaken_base"


@dataclass(frozen=True)
class RatePoint:
    """Single daily exchange rate observation."""
    date: date
    rate: float


@dataclass(frozen=True)
class RateSeries:
    """Immutable sequence of rate points, strictly ascending by date."""
    points: tuple[RatePoint, ...]

    def __post_init__(self):
        if not isinstance(self.points, tuple):
            object.__setattr__(self, "points", tuple(self.points))

        for i in range(1, len(self.points)):
            if self.points[i].date <= self.points[i - 1].date:
                raise MalformedSeriesError(
                    f"Rate points must be strictly ascending by date: "
                    f"{self.points[i - 1].date} followed by {self.points[i].date}",
                    position=i
                )

    def __iter__(self) -> Iterator[RatePoint]:
        return iter(self.points)

    def __len__(self) -> int:
        return len(self.points)

    def __getitem__(self, index):
        return self.points[index]

    @property
    def dates(self) -> list[date]:
        return [p.date for p in self.points]

    @property
    def rates(self) -> list[float]:
        return [p.rate for p in self.points]

    @property
    def first(self) -> RatePoint:
        """Oldest point."""
        return self.points[0]

    @property
    def last(self) -> RatePoint:
        """Most recent point."""
        return self.points[-1]

    def as_dict(self) -> dict[date, float]:
        """Ordered date -> rate mapping, oldest first."""
        return {p.date: p.rate for p in self.points}


@dataclass(frozen=True)
class TrendModel:
    """Least-squares line y = intercept + slope * x over positional indices."""
    slope: float
    intercept: float
    sample_size: int

    def predict(self, index: float) -> float:
        """Evaluate the line at any index, including beyond the fitted range."""
        return self.intercept + self.slope * index


@dataclass(frozen=True)
class ForecastSummary:
    """Outward-facing forecast result for one currency."""
    currency: str
    current_rate: float
    projected_rate: float
    change_percent: float
    recommendation: Recommendation


@dataclass(frozen=True)
class ForecastResult:
    """Summary together with the series and trend it was derived from."""
    summary: ForecastSummary
    history: RateSeries
    projection: RateSeries
    trend: TrendModel

    @property
    def currency(self) -> str:
        return self.summary.currency


@dataclass(frozen=True)
class BatchEntry:
    """Outcome of one currency inside a multi-currency forecast."""
    currency: str
    summary: Optional[ForecastSummary] = None
    error: Optional[Union[ForecastError, Exception]] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.summary is not None
