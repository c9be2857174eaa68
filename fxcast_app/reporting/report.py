"""
Forecast report assembly.

Maps forecast summaries into display rows. Rates are shown as
"1 USD = 0.9200 EUR" with 4 decimals and changes as "0.53%" with 2
decimals; these formats are consumed as-is by downstream displays.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional

from ..data.models import BatchEntry, ForecastSummary, Recommendation

NOT_AVAILABLE = "N/A"

RECOMMENDATION_LABELS = {
    Recommendation.STABLE: "Stable",
    Recommendation.STRENGTHEN_BASE: "{base} likely to strengthen",
    Recommendation.WEAKEN_BASE: "{base} likely to weaken",
}


@dataclass(frozen=True)
class ForecastReportRow:
    """One display row per currency."""
    currency: str
    current_rate: str
    projected_rate: str
    change_percent: str
    recommendation: str
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.error is not None


class ReportAssembler:
    """Formats forecast summaries for display."""

    def __init__(self, base_currency: str = "USD"):
        self.base_currency = base_currency

    def format_rate(self, rate: float, currency: str) -> str:
        return f"1 {self.base_currency} = {rate:.4f} {currency}"

    @staticmethod
    def format_change(change_percent: float) -> str:
        return f"{change_percent:.2f}%"

    def format_recommendation(self, recommendation: Recommendation) -> str:
        return RECOMMENDATION_LABELS[recommendation].format(base=self.base_currency)

    def row_for(self, summary: ForecastSummary) -> ForecastReportRow:
        """Build the display row for a successful forecast."""
        return ForecastReportRow(
            currency=summary.currency,
            current_rate=self.format_rate(summary.current_rate, summary.currency),
            projected_rate=self.format_rate(summary.projected_rate, summary.currency),
            change_percent=self.format_change(summary.change_percent),
            recommendation=self.format_recommendation(summary.recommendation),
        )

    def error_row(self, currency: str, error: Exception) -> ForecastReportRow:
        """Build the display row for a failed forecast."""
        message = str(error) or type(error).__name__
        return ForecastReportRow(
            currency=currency,
            current_rate=NOT_AVAILABLE,
            projected_rate=NOT_AVAILABLE,
            change_percent=NOT_AVAILABLE,
            recommendation=f"Error: {message}",
            error=message,
        )

    def build_rows(self, entries: Iterable[BatchEntry]) -> list[ForecastReportRow]:
        """Rows for a batch, keeping batch order; failures become error rows."""
        rows = []
        for entry in entries:
            if entry.ok:
                rows.append(self.row_for(entry.summary))
            else:
                rows.append(self.error_row(entry.currency, entry.error))
        return rows


def render_table(rows: Iterable[ForecastReportRow]) -> str:
    """Render rows as a left-aligned plain-text table."""
    headers = ("Currency", "Current Rate", "Predicted Rate (7d)", "Change", "Recommendation")
    table = [headers] + [
        (r.currency, r.current_rate, r.projected_rate, r.change_percent, r.recommendation)
        for r in rows
    ]
    widths = [max(len(line[i]) for line in table) for i in range(len(headers))]

    lines = []
    for n, line in enumerate(table):
        lines.append("  ".join(cell.ljust(widths[i]) for i, cell in enumerate(line)).rstrip())
        if n == 0:
            lines.append("  ".join("-" * w for w in widths))
    return "\n".join(lines)
