"""In-memory rate source for offline runs and tests."""

from collections.abc import Mapping

from fxcast_app.errors import RateUnavailableError

from .base import BaseRateSource


class StaticRateSource(BaseRateSource):
    """Serves rates from a fixed mapping of currency code to rate."""

    NAME = "static"

    def __init__(self, rates: Mapping[str, float], base_currency: str = "USD"):
        super().__init__()
        self.rates = dict(rates)
        self.base_currency = base_currency

    def get_current_rate(self, base_currency: str, target_currency: str) -> float:
        self._record_request()

        if base_currency != self.base_currency:
            self._record_error()
            raise RateUnavailableError(
                f"Static rates are quoted against {self.base_currency}, not {base_currency}",
                currency=target_currency,
                source=self.NAME
            )

        if target_currency not in self.rates:
            self._record_error()
            raise RateUnavailableError(
                f"Currency '{target_currency}' not found in static rates",
                currency=target_currency,
                source=self.NAME
            )

        return self.rates[target_currency]

    def health_check(self) -> bool:
        return True
