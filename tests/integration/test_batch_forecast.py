"""Integration tests for multi-currency forecasting and reporting."""

from unittest.mock import Mock

import pytest

from fxcast_app.config.loader import ConfigLoader
from fxcast_app.errors import RateUnavailableError
from fxcast_app.forecasting.forecaster import Forecaster
from fxcast_app.reporting.report import ReportAssembler, render_table


class TestForecastAll:
    """Test batch forecasting across supported currencies."""

    def test_all_currencies_in_order(self, forecaster, as_of):
        entries = forecaster.forecast_all(as_of)

        assert [e.currency for e in entries] == ["EUR", "GBP", "JPY", "AUD", "RON"]
        assert all(e.ok for e in entries)
        assert [e.summary.current_rate for e in entries] == [0.92, 0.79, 149.50, 1.52, 4.57]

    def test_one_failure_does_not_abort_batch(self, unavailable_gbp_source, as_of):
        forecaster = Forecaster(unavailable_gbp_source)

        entries = forecaster.forecast_all(as_of)

        assert len(entries) == 5
        ok = [e.currency for e in entries if e.ok]
        assert ok == ["EUR", "JPY", "AUD", "RON"]
        gbp = entries[1]
        assert gbp.currency == "GBP"
        assert isinstance(gbp.error, RateUnavailableError)
        assert gbp.summary is None

    def test_every_currency_attempted_once(self, unavailable_gbp_source, as_of):
        Forecaster(unavailable_gbp_source).forecast_all(as_of)
        assert sorted(unavailable_gbp_source.calls) == sorted(
            ("USD", c) for c in ("EUR", "GBP", "JPY", "AUD", "RON")
        )

    def test_batch_matches_single_forecasts(self, forecaster, as_of):
        entries = forecaster.forecast_all(as_of)
        for entry in entries:
            assert entry.summary == forecaster.summarize(entry.currency, as_of)

    @pytest.mark.parametrize("max_workers", [2, 5, 8])
    def test_threaded_matches_serial(self, unavailable_gbp_source, as_of, max_workers):
        forecaster = Forecaster(unavailable_gbp_source)

        serial = forecaster.forecast_all(as_of)
        threaded = forecaster.forecast_all(as_of, max_workers=max_workers)

        assert [e.currency for e in threaded] == [e.currency for e in serial]
        assert [e.summary for e in threaded] == [e.summary for e in serial]
        assert [type(e.error) for e in threaded] == [type(e.error) for e in serial]

    def test_custom_supported_list(self, static_source, as_of, tmp_path):
        config = ConfigLoader.create(tmp_path).load({"currencies": {"supported": ["JPY", "EUR"]}})
        entries = Forecaster(static_source, config).forecast_all(as_of)
        assert [e.currency for e in entries] == ["JPY", "EUR"]


class TestRecommendations:
    """Test long-form recommendation messages."""

    def test_messages_for_every_currency(self, unavailable_gbp_source, as_of):
        messages = Forecaster(unavailable_gbp_source).recommendations(as_of)

        assert list(messages) == ["EUR", "GBP", "JPY", "AUD", "RON"]
        assert messages["GBP"] == "Currency 'GBP' not found in API response"
        for currency in ("EUR", "JPY", "AUD", "RON"):
            message = messages[currency]
            assert (message == "Stable - No significant change expected"
                    or message.startswith(f"USD likely to strengthen against {currency} (")
                    or message.startswith(f"USD likely to weaken against {currency} ("))


class TestReportPipeline:
    """Test forecast → report rows → table."""

    def test_report_rows(self, unavailable_gbp_source, as_of):
        forecaster = Forecaster(unavailable_gbp_source)
        rows = ReportAssembler("USD").build_rows(forecaster.forecast_all(as_of))

        assert [r.currency for r in rows] == ["EUR", "GBP", "JPY", "AUD", "RON"]
        assert rows[0].current_rate == "1 USD = 0.9200 EUR"
        assert rows[2].current_rate == "1 USD = 149.5000 JPY"
        assert rows[1].failed
        assert rows[1].error == "Currency 'GBP' not found in API response"
        for row in rows:
            if not row.failed:
                assert row.change_percent.endswith("%")
                assert row.recommendation in (
                    "Stable", "USD likely to strengthen", "USD likely to weaken"
                )

        table = render_table(rows)
        assert "Currency 'GBP' not found in API response" in table
        assert table.count("\n") == len(rows) + 1


class TestForecastLogging:
    """Test structured logging of forecast results."""

    def test_forecast_logs_result(self, forecaster, as_of):
        bound = Mock()
        fake_logger = Mock()
        fake_logger.bind.return_value = bound
        bound.bind.return_value = bound
        forecaster.forecast_logger = fake_logger

        summary = forecaster.summarize("EUR", as_of)

        kwargs = fake_logger.bind.call_args[1]
        assert kwargs["currency"] == "EUR"
        assert kwargs["current_rate"] == 0.92
        assert kwargs["recommendation"] == summary.recommendation.value
        bound.info.assert_called_once_with("forecast_complete")

    def test_batch_failure_logged(self, unavailable_gbp_source, as_of):
        forecaster = Forecaster(unavailable_gbp_source)
        forecaster.logger = Mock()

        forecaster.forecast_all(as_of)

        warning = forecaster.logger.warning.call_args
        assert warning[0][0] == "Forecast failed for currency"
        assert warning[1]["currency"] == "GBP"
        assert warning[1]["error_type"] == "RateUnavailableError"
