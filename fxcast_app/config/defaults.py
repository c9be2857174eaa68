"""Default configuration parameters for the forecasting engine."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ForecastParams:
    """History synthesis, trend fitting and classification parameters."""
    # Series lengths
    history_days: int = 30                # Synthesized history, today included
    horizon_days: int = 7                 # Days projected past the last history point

    # Random walk
    daily_volatility: float = 0.005       # Scale applied to each centred daily draw
    drift_range: float = 0.001            # Scale applied to the one-off drift draw

    # Classification
    stable_threshold_pct: float = 0.5     # |change| strictly below this is Stable

    # Trend fitting
    min_fit_points: int = 2


@dataclass(frozen=True)
class CurrencyParams:
    """Base currency and the fixed list of forecastable currencies."""
    base_currency: str = "USD"
    supported: tuple[str, ...] = ("EUR", "GBP", "JPY", "AUD", "RON")


@dataclass(frozen=True)
class RateSourceParams:
    """Live rate endpoint parameters."""
    api_url: str = "https://open.er-api.com/v6/latest/"
    timeout_seconds: float = 10.0
    user_agent: str = "fxcast-app/0.1"


@dataclass(frozen=True)
class LoggingParams:
    """Logging output parameters."""
    level: str = "INFO"
    format_json: bool = False


@dataclass(frozen=True)
class ForecastConfig:
    """Complete engine configuration."""
    forecast: ForecastParams = field(default_factory=ForecastParams)
    currencies: CurrencyParams = field(default_factory=CurrencyParams)
    rate_source: RateSourceParams = field(default_factory=RateSourceParams)
    logging: LoggingParams = field(default_factory=LoggingParams)


def get_default_config() -> ForecastConfig:
    """Get the default configuration instance."""
    return ForecastConfig(
        forecast=ForecastParams(),
        currencies=CurrencyParams(),
        rate_source=RateSourceParams(),
        logging=LoggingParams(),
    )
