"""
Error handling tests for the forecasting engine.

Tests cover the error taxonomy and how failures surface from single-currency
forecasts and multi-currency batches.
"""

import pytest

from fxcast_app.errors import (
    ConfigurationError,
    DataQualityError,
    ForecastError,
    InsufficientDataError,
    InvalidRateError,
    MalformedSeriesError,
    RateUnavailableError,
    SystemFailureError,
    UnsupportedCurrencyError,
)
from fxcast_app.forecasting.forecaster import Forecaster


class TestErrorClassification:
    """Test error classification system."""

    def test_data_quality_error_hierarchy(self):
        base_error = DataQualityError("base error")
        assert isinstance(base_error, ForecastError)
        assert base_error.recoverable is True
        assert base_error.context == {}

        rate_error = InvalidRateError("bad rate", rate=-1.0, currency="EUR")
        assert isinstance(rate_error, DataQualityError)
        assert rate_error.rate == -1.0
        assert rate_error.currency == "EUR"

        currency_error = UnsupportedCurrencyError("no", currency="XYZ", supported=["EUR", "GBP"])
        assert isinstance(currency_error, DataQualityError)
        assert currency_error.supported == ("EUR", "GBP")

        series_error = MalformedSeriesError("out of order", position=3)
        assert series_error.position == 3

    def test_system_failure_error_hierarchy(self):
        data_error = InsufficientDataError("too short", required_count=2, available_count=1)
        assert isinstance(data_error, SystemFailureError)
        assert data_error.recoverable is False
        assert data_error.required_count == 2

        config_error = ConfigurationError("bad config", errors=["x"])
        assert config_error.recoverable is False
        assert config_error.errors == ["x"]

    def test_rate_unavailable_is_recoverable_per_currency(self):
        error = RateUnavailableError("down", currency="GBP", source="http", context={"url": "u"})
        assert isinstance(error, SystemFailureError)
        assert error.recoverable is True
        assert error.currency == "GBP"
        assert error.source == "http"
        assert error.context == {"url": "u"}

    def test_message_preserved(self):
        assert str(InvalidRateError("Current rate for EUR must be positive")) == \
            "Current rate for EUR must be positive"


class TestBatchErrorIsolation:
    """Test that per-currency failures stay inside their entry."""

    def test_invalid_rate_isolated(self, make_source, sample_rates, as_of):
        rates = dict(sample_rates, JPY=-149.5)
        forecaster = Forecaster(make_source(rates=rates))

        entries = forecaster.forecast_all(as_of)

        by_currency = {e.currency: e for e in entries}
        assert isinstance(by_currency["JPY"].error, InvalidRateError)
        assert by_currency["JPY"].summary is None
        assert all(e.ok for c, e in by_currency.items() if c != "JPY")

    def test_unexpected_exception_isolated(self, make_source, as_of):
        forecaster = Forecaster(make_source(failing={"AUD": ValueError("bad payload")}))

        entries = forecaster.forecast_all(as_of)

        aud = [e for e in entries if e.currency == "AUD"][0]
        assert isinstance(aud.error, RateUnavailableError)
        assert sum(e.ok for e in entries) == 4

    def test_insufficient_data_not_swallowed(self, recording_source, fixed_history, as_of):
        forecaster = Forecaster(recording_source, synthesizer=fixed_history([1.0]))
        with pytest.raises(InsufficientDataError):
            forecaster.forecast_all(as_of)

    def test_all_failing(self, make_source, as_of):
        failing = {c: RateUnavailableError("down", currency=c) for c in ("EUR", "GBP", "JPY", "AUD", "RON")}
        forecaster = Forecaster(make_source(failing=failing))

        entries = forecaster.forecast_all(as_of)

        assert len(entries) == 5
        assert not any(e.ok for e in entries)
