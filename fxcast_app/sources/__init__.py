"""Live exchange-rate sources consumed by the forecaster."""

from .base import BaseRateSource
from .http_source import HttpRateSource
from .static_source import StaticRateSource

__all__ = ["BaseRateSource", "HttpRateSource", "StaticRateSource"]
