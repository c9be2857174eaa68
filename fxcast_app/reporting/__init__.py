"""Presentation rows for forecast results."""

from .report import ForecastReportRow, ReportAssembler, render_table

__all__ = ["ForecastReportRow", "ReportAssembler", "render_table"]
