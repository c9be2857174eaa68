"""History synthesis, trend fitting and forecast orchestration."""

from .forecaster import Forecaster, classify_change, percent_change
from .history import HistorySynthesizer, synthesize_history
from .seeding import currency_seed
from .trend import TrendFitter, fit_series, fit_trend

__all__ = [
    "Forecaster",
    "HistorySynthesizer",
    "TrendFitter",
    "classify_change",
    "currency_seed",
    "fit_series",
    "fit_trend",
    "percent_change",
    "synthesize_history",
]
