"""HTTP GET rate source for open.er-api.com style endpoints."""

import json
import socket
from http.client import HTTPException
from typing import Any, Optional
from urllib.error import HTTPError, URLError
from urllib.parse import urlparse
from urllib.request import Request, urlopen

from fxcast_app.config.defaults import RateSourceParams
from fxcast_app.errors import ConfigurationError, RateUnavailableError

from .base import BaseRateSource


class HttpRateSource(BaseRateSource):
    """
    Fetches the latest rates for a base currency over HTTP.

    The endpoint is ``{api_url}{base_currency}`` and must answer with a JSON
    object holding a ``rates`` mapping of currency code to rate. Every call
    is a single attempt; failures are raised, never retried.
    """

    NAME = "http"

    def __init__(self, config: Optional[RateSourceParams] = None):
        super().__init__()
        self.config = config or RateSourceParams()

        parsed = urlparse(self.config.api_url)
        if not parsed.scheme or not parsed.netloc:
            raise ConfigurationError(
                f"Invalid rate source URL: {self.config.api_url}",
                context={"api_url": self.config.api_url}
            )

    def get_current_rate(self, base_currency: str, target_currency: str) -> float:
        """Fetch the rate of ``target_currency`` per one ``base_currency``."""
        self._record_request()
        try:
            rates = self._fetch_rates(base_currency)
            return self._extract_rate(rates, target_currency)
        except RateUnavailableError as e:
            self._record_error()
            if e.currency is None:
                e.currency = target_currency
            self.logger.warning(
                "Rate fetch failed",
                base_currency=base_currency,
                currency=target_currency,
                error=str(e)
            )
            raise

    def _fetch_rates(self, base_currency: str) -> dict[str, Any]:
        """GET the rates payload for a base currency."""
        url = f"{self.config.api_url}{base_currency}"
        req = Request(
            url,
            headers={
                'Accept': 'application/json',
                'User-Agent': self.config.user_agent
            },
            method='GET'
        )

        try:
            with urlopen(req, timeout=self.config.timeout_seconds) as response:
                response_code = response.getcode()
                body = response.read().decode('utf-8')

        except HTTPError as e:
            raise RateUnavailableError(
                f"HTTP {e.code}: {e.reason}",
                source=self.NAME,
                context={"url": url, "status": e.code}
            ) from e

        except (OSError, URLError, socket.timeout) as e:
            raise RateUnavailableError(
                f"Network error: {str(e)}",
                source=self.NAME,
                context={"url": url}
            ) from e

        except (UnicodeDecodeError, HTTPException) as e:
            raise RateUnavailableError(
                f"Unreadable rate response: {str(e)}",
                source=self.NAME,
                context={"url": url}
            ) from e

        if not 200 <= response_code < 300:
            raise RateUnavailableError(
                f"HTTP {response_code}: {body[:200]}",
                source=self.NAME,
                context={"url": url, "status": response_code}
            )

        try:
            payload = json.loads(body)
        except json.JSONDecodeError as e:
            raise RateUnavailableError(
                f"Unparsable rate response: {str(e)}",
                source=self.NAME,
                context={"url": url, "body": body[:200]}
            ) from e

        if not isinstance(payload, dict) or not isinstance(payload.get("rates"), dict):
            raise RateUnavailableError(
                f"API response format unexpected. Response: {body[:200]}",
                source=self.NAME,
                context={"url": url}
            )

        self.logger.debug(
            "Fetched rates",
            base_currency=base_currency,
            rate_count=len(payload["rates"])
        )
        return payload["rates"]

    def _extract_rate(self, rates: dict[str, Any], currency: str) -> float:
        """Pull one currency out of the rates mapping."""
        if currency not in rates:
            raise RateUnavailableError(
                f"Currency '{currency}' not found in API response",
                currency=currency,
                source=self.NAME
            )

        value = rates[currency]
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise RateUnavailableError(
                f"Rate for '{currency}' is not numeric: {value!r}",
                currency=currency,
                source=self.NAME
            )

        return float(value)

    def health_check(self) -> bool:
        """Check if the rate endpoint host is reachable."""
        try:
            parsed = urlparse(self.config.api_url)
            health_url = f"{parsed.scheme}://{parsed.netloc}"

            req = Request(health_url, method='HEAD')
            with urlopen(req, timeout=5) as response:
                return 200 <= response.getcode() < 400

        except (OSError, URLError, socket.timeout) as e:
            self.logger.warning(
                "Health check failed",
                source=self.NAME,
                error=str(e)
            )
            return False
