"""Base class for exchange-rate sources."""

import threading
from abc import ABC, abstractmethod
from typing import Any

import structlog


class BaseRateSource(ABC):
    """Supplies one live rate per currency pair on demand."""

    NAME: str = "base"

    def __init__(self) -> None:
        self.logger = structlog.get_logger(f"fxcast.source.{self.NAME}")
        self._request_count = 0
        self._error_count = 0
        self._stats_lock = threading.Lock()

    @abstractmethod
    def get_current_rate(self, base_currency: str, target_currency: str) -> float:
        """
        Fetch the current rate for a currency pair.

        Args:
            base_currency: Currency the quote is expressed against, e.g. "USD"
            target_currency: Foreign currency, e.g. "EUR"

        Returns:
            Units of ``target_currency`` per one unit of ``base_currency``

        Raises:
            RateUnavailableError: upstream failure, unparsable response or
                currency absent from the response
        """

    @abstractmethod
    def health_check(self) -> bool:
        """Return True when the source looks reachable."""

    def _record_request(self) -> None:
        with self._stats_lock:
            self._request_count += 1

    def _record_error(self) -> None:
        with self._stats_lock:
            self._error_count += 1

    def get_stats(self) -> dict[str, Any]:
        """Get request statistics."""
        with self._stats_lock:
            return {
                "name": self.NAME,
                "request_count": self._request_count,
                "error_count": self._error_count,
            }

    def reset_stats(self) -> None:
        """Reset request statistics."""
        with self._stats_lock:
            self._request_count = 0
            self._error_count = 0
