"""
Forecast orchestration.

Composes the rate source, history synthesizer and trend fitter into a
7-day-ahead projection and a recommendation per supported currency:

Currency → Live Rate → Synthetic History → Trend → Projection → Summary
"""

from concurrent.futures import ThreadPoolExecutor
from datetime import date, timedelta
from typing import Callable, Optional

import structlog

from ..config.defaults import ForecastConfig, get_default_config
from ..data.models import (
    BatchEntry,
    ForecastResult,
    ForecastSummary,
    RatePoint,
    RateSeries,
    Recommendation,
    TrendModel,
)
from ..errors import (
    ForecastError,
    InsufficientDataError,
    RateUnavailableError,
    UnsupportedCurrencyError,
)
from ..logging.config import get_forecast_logger, log_forecast_result
from ..sources.base import BaseRateSource
from .history import HistorySynthesizer
from .trend import TrendFitter

logger = structlog.get_logger(__name__)


def percent_change(current_rate: float, projected_rate: float) -> float:
    """Percentage move from ``current_rate`` to ``projected_rate``."""
    return (projected_rate - current_rate) / current_rate * 100


def classify_change(change_percent: float, stable_threshold_pct: float = 0.5) -> Recommendation:
    """
    Map a projected percentage change to a recommendation.

    A change strictly inside the threshold is stable; a change of exactly
    the threshold already counts as a move.

    Args:
        change_percent: Projected change of the foreign-per-base rate
        stable_threshold_pct: Half-width of the stable band

    Returns:
        STABLE, STRENGTHEN_BASE (rate rising) or WEAKEN_BASE (rate falling)
    """
    if abs(change_percent) < stable_threshold_pct:
        return Recommendation.STABLE
    if change_percent > 0:
        return Recommendation.STRENGTHEN_BASE
    return Recommendation.WEAKEN_BASE


def recommendation_message(summary: ForecastSummary, base_currency: str = "USD") -> str:
    """Long-form recommendation text for one summary."""
    if summary.recommendation is Recommendation.STABLE:
        return "Stable - No significant change expected"
    if summary.recommendation is Recommendation.STRENGTHEN_BASE:
        return (f"{base_currency} likely to strengthen against {summary.currency} "
                f"({summary.change_percent:.2f}% change)")
    return (f"{base_currency} likely to weaken against {summary.currency} "
            f"({abs(summary.change_percent):.2f}% change)")


class Forecaster:
    """
    Produces rate forecasts for the configured supported currencies.

    Holds no mutable state between calls: every forecast fetches a fresh
    live rate and builds a fresh history and trend, so per-currency
    forecasts are independent and may run concurrently.
    """

    def __init__(
        self,
        rate_source: BaseRateSource,
        config: Optional[ForecastConfig] = None,
        synthesizer: Optional[HistorySynthesizer] = None,
        fitter: Optional[TrendFitter] = None,
        clock: Callable[[], date] = date.today,
    ) -> None:
        self.config = config or get_default_config()
        self.rate_source = rate_source
        self.synthesizer = synthesizer or HistorySynthesizer(self.config.forecast)
        self.fitter = fitter or TrendFitter(self.config.forecast.min_fit_points)
        self.clock = clock
        self.logger = logger
        self.forecast_logger = get_forecast_logger(__name__)

    @property
    def base_currency(self) -> str:
        return self.config.currencies.base_currency

    def supported_currencies(self) -> tuple[str, ...]:
        """Supported currencies in configured order."""
        return tuple(self.config.currencies.supported)

    def _check_supported(self, currency: str) -> None:
        if currency not in self.config.currencies.supported:
            raise UnsupportedCurrencyError(
                f"Currency '{currency}' is not supported for forecasting",
                currency=currency,
                supported=self.config.currencies.supported
            )

    def _fetch_current_rate(self, currency: str) -> float:
        """Single attempt at the rate source, failures normalized."""
        try:
            return self.rate_source.get_current_rate(self.base_currency, currency)
        except ForecastError:
            raise
        except Exception as e:
            raise RateUnavailableError(
                f"Rate source failed for {currency}: {str(e)}",
                currency=currency,
                source=getattr(self.rate_source, "NAME", type(self.rate_source).__name__)
            ) from e

    def historical_rates(self, currency: str, as_of: Optional[date] = None) -> RateSeries:
        """
        Synthetic history for one currency, ending at ``as_of``.

        Raises:
            UnsupportedCurrencyError: currency outside the supported set
            RateUnavailableError: live rate could not be obtained
            InvalidRateError: live rate is not a positive number
        """
        self._check_supported(currency)
        as_of = as_of or self.clock()

        current_rate = self._fetch_current_rate(currency)
        return self.synthesizer.synthesize(currency, current_rate, as_of)

    def project(self, history: RateSeries) -> tuple[RateSeries, TrendModel]:
        """Fit a trend over ``history`` and extend it over the horizon."""
        trend = self.fitter.fit(history)
        last_index = len(history) - 1
        last_date = history.last.date

        projection = RateSeries(
            RatePoint(
                date=last_date + timedelta(days=day),
                rate=trend.predict(last_index + day)
            )
            for day in range(1, self.config.forecast.horizon_days + 1)
        )
        return projection, trend

    def forecast(self, currency: str, as_of: Optional[date] = None) -> ForecastResult:
        """
        Forecast one currency over the configured horizon.

        Args:
            currency: Supported currency code
            as_of: Date of the live rate, defaults to today

        Returns:
            ForecastResult with summary, history, projection and trend
        """
        history = self.historical_rates(currency, as_of)
        projection, trend = self.project(history)

        current_rate = history.last.rate
        projected_rate = projection.last.rate
        change = percent_change(current_rate, projected_rate)
        recommendation = classify_change(change, self.config.forecast.stable_threshold_pct)

        summary = ForecastSummary(
            currency=currency,
            current_rate=current_rate,
            projected_rate=projected_rate,
            change_percent=change,
            recommendation=recommendation,
        )

        log_forecast_result(
            self.forecast_logger,
            currency=currency,
            current_rate=current_rate,
            projected_rate=projected_rate,
            change_percent=change,
            recommendation=recommendation.value,
            context={"slope": trend.slope, "as_of": history.last.date.isoformat()}
        )

        return ForecastResult(
            summary=summary,
            history=history,
            projection=projection,
            trend=trend,
        )

    def summarize(self, currency: str, as_of: Optional[date] = None) -> ForecastSummary:
        """Forecast one currency and return only the summary."""
        return self.forecast(currency, as_of).summary

    def predict_future_rates(self, currency: str, as_of: Optional[date] = None) -> RateSeries:
        """Projected rates for the days after ``as_of``."""
        return self.forecast(currency, as_of).projection

    def predicted_change_percent(self, currency: str, as_of: Optional[date] = None) -> float:
        """Projected percentage change at the end of the horizon."""
        return self.forecast(currency, as_of).summary.change_percent

    def _batch_entry(self, currency: str, as_of: date) -> BatchEntry:
        """Forecast one currency, capturing its failure in the entry."""
        try:
            return BatchEntry(currency=currency, summary=self.summarize(currency, as_of))
        except InsufficientDataError:
            # Internal invariant violation, not a per-currency condition
            raise
        except ForecastError as e:
            self.logger.warning(
                "Forecast failed for currency",
                currency=currency,
                error=str(e),
                error_type=type(e).__name__,
                context=e.context
            )
            return BatchEntry(currency=currency, error=e)

    def forecast_all(self, as_of: Optional[date] = None, max_workers: int = 1) -> list[BatchEntry]:
        """
        Forecast every supported currency independently.

        A failure for one currency is recorded in its entry and does not
        prevent the others from completing.

        Args:
            as_of: Date of the live rates, defaults to today
            max_workers: Thread count for fetching in parallel; 1 runs serially

        Returns:
            One BatchEntry per supported currency, in configured order
        """
        as_of = as_of or self.clock()
        currencies = self.supported_currencies()

        if max_workers <= 1 or len(currencies) <= 1:
            entries = [self._batch_entry(currency, as_of) for currency in currencies]
        else:
            with ThreadPoolExecutor(max_workers=max_workers) as executor:
                entries = list(executor.map(lambda c: self._batch_entry(c, as_of), currencies))

        failed = [e.currency for e in entries if not e.ok]
        self.logger.info(
            "Batch forecast complete",
            as_of=as_of.isoformat(),
            succeeded=len(entries) - len(failed),
            failed=failed
        )
        return entries

    def recommendations(self, as_of: Optional[date] = None) -> dict[str, str]:
        """Long-form recommendation text per supported currency."""
        messages = {}
        for entry in self.forecast_all(as_of):
            if entry.ok:
                messages[entry.currency] = recommendation_message(entry.summary, self.base_currency)
            else:
                messages[entry.currency] = str(entry.error)
        return messages
