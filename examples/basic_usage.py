#!/usr/bin/env python3
"""
Basic Usage Example - FXCast Forecasting Engine

This script demonstrates the forecasting engine with fixed sample rates,
so it runs without network access. It shows how to:
- Build a forecaster around a rate source
- Inspect the synthetic history and the projected rates for one currency
- Run the batch forecast and print the report rows

Run: python examples/basic_usage.py
"""

from datetime import date

from fxcast_app.config.defaults import LoggingParams, get_default_config
from fxcast_app.forecasting.forecaster import Forecaster
from fxcast_app.logging.config import configure_logging
from fxcast_app.reporting.report import ReportAssembler, render_table
from fxcast_app.sources.static_source import StaticRateSource


def main() -> None:
    configure_logging(LoggingParams(level="WARNING"))

    config = get_default_config()
    source = StaticRateSource({"EUR": 0.92, "GBP": 0.79, "JPY": 149.5, "AUD": 1.52})
    forecaster = Forecaster(source, config)
    as_of = date(2024, 3, 15)

    result = forecaster.forecast("EUR", as_of)

    print("📈 EUR synthetic history (last 5 days)")
    for point in result.history[-5:]:
        print(f"  {point.date.isoformat()}  {point.rate:.4f}")

    print("\n🔮 EUR projection")
    for point in result.projection:
        print(f"  {point.date.isoformat()}  {point.rate:.4f}")

    print(f"\n  slope={result.trend.slope:.6f} change={result.summary.change_percent:.2f}% "
          f"-> {result.summary.recommendation.value}")

    # RON is missing from the sample rates, so its row reports the failure
    print("\n📋 Batch report")
    rows = ReportAssembler(config.currencies.base_currency).build_rows(forecaster.forecast_all(as_of))
    print(render_table(rows))

    print("\n💬 Recommendations")
    for currency, message in forecaster.recommendations(as_of).items():
        print(f"  {currency}: {message}")


if __name__ == "__main__":
    main()
