#!/usr/bin/env python3
"""Print the 7-day currency forecast report.

Usage:
    python scripts/forecast_report.py            # live rates over HTTP
    python scripts/forecast_report.py --offline  # built-in sample rates
"""

import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from fxcast_app.config.loader import ConfigLoader
from fxcast_app.errors import ConfigurationError
from fxcast_app.forecasting.forecaster import Forecaster
from fxcast_app.logging.config import configure_logging
from fxcast_app.reporting.report import ReportAssembler, render_table
from fxcast_app.sources.http_source import HttpRateSource
from fxcast_app.sources.static_source import StaticRateSource

SAMPLE_RATES = {
    "EUR": 0.92,
    "GBP": 0.79,
    "JPY": 149.50,
    "AUD": 1.52,
    "RON": 4.57,
}


def main() -> int:
    """Build and print the report."""
    try:
        config = ConfigLoader.create().load()
    except ConfigurationError as e:
        print(f"❌ {e}")
        return 1

    configure_logging(config.logging)

    if "--offline" in sys.argv[1:]:
        source = StaticRateSource(SAMPLE_RATES, base_currency=config.currencies.base_currency)
    else:
        source = HttpRateSource(config.rate_source)

    forecaster = Forecaster(source, config)
    entries = forecaster.forecast_all(max_workers=len(forecaster.supported_currencies()))

    rows = ReportAssembler(config.currencies.base_currency).build_rows(entries)
    print(render_table(rows))

    return 0 if all(entry.ok for entry in entries) else 1


if __name__ == "__main__":
    sys.exit(main())
