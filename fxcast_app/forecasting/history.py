"""Synthetic exchange-rate history anchored at a single live observation."""

import math
import random
from datetime import date, timedelta
from typing import Optional

from fxcast_app.config.defaults import ForecastParams
from fxcast_app.data.models import RatePoint, RateSeries
from fxcast_app.errors import InvalidRateError, UnsupportedCurrencyError

from .seeding import currency_seed


def validate_current_rate(current_rate, currency: Optional[str] = None) -> float:
    """
    Check that a live rate can anchor a series.

    Args:
        current_rate: Rate reported by the rate source
        currency: Currency code, for error context

    Returns:
        The rate as a float

    Raises:
        InvalidRateError: rate is missing, non-numeric, non-finite or <= 0
    """
    if current_rate is None or isinstance(current_rate, bool) \
            or not isinstance(current_rate, (int, float)):
        raise InvalidRateError(
            f"Current rate for {currency} is missing or not a number: {current_rate!r}",
            rate=current_rate,
            currency=currency
        )

    if not math.isfinite(current_rate) or current_rate <= 0:
        raise InvalidRateError(
            f"Current rate for {currency} must be a positive finite number, got {current_rate}",
            rate=current_rate,
            currency=currency
        )

    return float(current_rate)


def synthesize_history(
    currency: str,
    current_rate: float,
    as_of: date,
    days: int = 30,
    daily_volatility: float = 0.005,
    drift_range: float = 0.001,
) -> RateSeries:
    """
    Generate a daily rate history ending at ``as_of`` via a seeded random walk.

    The walk starts at ``current_rate`` on ``as_of`` and steps backwards one
    day at a time. A per-currency drift is drawn once, then every step
    applies ``rate_prev = rate * (1 + (u - 0.5) * daily_volatility + drift)``
    with ``u`` uniform in [0, 1).

    Args:
        currency: Currency code, seeds the generator
        current_rate: Live rate, becomes the value for ``as_of``
        as_of: Date of the most recent point
        days: Number of points, ``as_of`` included
        daily_volatility: Scale of the centred daily draw
        drift_range: Scale of the centred drift draw

    Returns:
        RateSeries of ``days`` points, oldest first
    """
    if not isinstance(currency, str) or not currency:
        raise UnsupportedCurrencyError(
            f"Currency must be a non-empty string, got {currency!r}",
            currency=currency
        )
    rate = validate_current_rate(current_rate, currency)

    rng = random.Random(currency_seed(currency))
    drift = (rng.random() - 0.5) * drift_range

    # Generated newest first
    points = []
    for offset in range(days):
        points.append(RatePoint(date=as_of - timedelta(days=offset), rate=rate))

        change = (rng.random() - 0.5) * daily_volatility + drift
        rate = rate * (1 + change)

    points.sort(key=lambda p: p.date)
    return RateSeries(points)


class HistorySynthesizer:
    """Builds synthetic histories using configured walk parameters."""

    def __init__(self, params: Optional[ForecastParams] = None):
        self.params = params or ForecastParams()

    def synthesize(self, currency: str, current_rate: float, as_of: date) -> RateSeries:
        """
        Generate the history for one currency.

        Args:
            currency: Currency code
            current_rate: Live rate for ``as_of``
            as_of: Date of the most recent point

        Returns:
            RateSeries of ``params.history_days`` points, oldest first
        """
        return synthesize_history(
            currency,
            current_rate,
            as_of,
            days=self.params.history_days,
            daily_volatility=self.params.daily_volatility,
            drift_range=self.params.drift_range,
        )
