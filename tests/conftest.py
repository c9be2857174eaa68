"""Pytest configuration and shared fixtures."""

import pytest
from datetime import date, timedelta
from typing import Dict, List, Optional

from fxcast_app.config.defaults import get_default_config
from fxcast_app.data.models import RatePoint, RateSeries
from fxcast_app.errors import RateUnavailableError
from fxcast_app.forecasting.forecaster import Forecaster
from fxcast_app.sources.base import BaseRateSource
from fxcast_app.sources.static_source import StaticRateSource


AS_OF = date(2024, 3, 15)


class RecordingRateSource(BaseRateSource):
    """Rate source that records calls and fails for selected currencies."""

    NAME = "recording"

    def __init__(self, rates: Dict[str, float], failing: Optional[Dict[str, Exception]] = None):
        super().__init__()
        self.rates = rates
        self.failing = failing or {}
        self.calls: List[tuple] = []

    def get_current_rate(self, base_currency: str, target_currency: str) -> float:
        self.calls.append((base_currency, target_currency))
        if target_currency in self.failing:
            raise self.failing[target_currency]
        return self.rates[target_currency]

    def health_check(self) -> bool:
        return True


class FixedHistorySynthesizer:
    """Synthesizer stand-in that returns a prepared series of rates."""

    def __init__(self, rates: List[float]):
        self.rates = rates
        self.calls: List[tuple] = []

    def synthesize(self, currency: str, current_rate: float, as_of: date) -> RateSeries:
        self.calls.append((currency, current_rate, as_of))
        n = len(self.rates)
        return RateSeries(
            RatePoint(date=as_of - timedelta(days=n - 1 - i), rate=rate)
            for i, rate in enumerate(self.rates)
        )


@pytest.fixture
def as_of() -> date:
    """Fixed forecast date."""
    return AS_OF


@pytest.fixture
def sample_rates() -> Dict[str, float]:
    """Live rates for every supported currency, quoted against USD."""
    return {
        "EUR": 0.92,
        "GBP": 0.79,
        "JPY": 149.50,
        "AUD": 1.52,
        "RON": 4.57,
    }


@pytest.fixture
def static_source(sample_rates) -> StaticRateSource:
    return StaticRateSource(sample_rates)


@pytest.fixture
def forecaster(static_source) -> Forecaster:
    return Forecaster(static_source, get_default_config(), clock=lambda: AS_OF)


@pytest.fixture
def recording_source(sample_rates) -> RecordingRateSource:
    return RecordingRateSource(sample_rates)


@pytest.fixture
def unavailable_gbp_source(sample_rates) -> RecordingRateSource:
    """Source whose GBP lookup fails upstream."""
    return RecordingRateSource(
        sample_rates,
        failing={"GBP": RateUnavailableError("Currency 'GBP' not found in API response",
                                             currency="GBP", source="recording")}
    )


@pytest.fixture
def fixed_history():
    """Factory for synthesizers returning a prepared rate series."""
    return FixedHistorySynthesizer


@pytest.fixture
def make_source(sample_rates):
    """Factory for recording sources with per-currency failures."""
    def _make(failing: Optional[Dict[str, Exception]] = None, rates: Optional[Dict[str, float]] = None):
        return RecordingRateSource(rates if rates is not None else sample_rates, failing)
    return _make
