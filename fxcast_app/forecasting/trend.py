"""Ordinary least-squares trend fitting over positional indices."""

from collections.abc import Sequence

from fxcast_app.data.models import RateSeries, TrendModel
from fxcast_app.errors import InsufficientDataError


def fit_trend(values: Sequence[float], min_points: int = 2) -> TrendModel:
    """
    Fit y = a + b*x where x is the zero-based position of each value.

    b = sum((x - mean_x) * (y - mean_y)) / sum((x - mean_x)^2)
    a = mean_y - b * mean_x

    Args:
        values: Ordered numeric series
        min_points: Minimum number of values required

    Returns:
        Fitted TrendModel

    Raises:
        InsufficientDataError: fewer than ``min_points`` values
    """
    n = len(values)
    required = max(min_points, 2)
    if n < required:
        raise InsufficientDataError(
            f"Trend fitting needs at least {required} points, got {n}",
            required_count=required,
            available_count=n
        )

    mean_x = (n - 1) / 2.0
    mean_y = sum(values) / n

    numerator = 0.0
    denominator = 0.0
    for x, y in enumerate(values):
        numerator += (x - mean_x) * (y - mean_y)
        denominator += (x - mean_x) ** 2

    # Unreachable with sequential indices
    slope = numerator / denominator if denominator != 0 else 0.0
    intercept = mean_y - slope * mean_x

    return TrendModel(slope=slope, intercept=intercept, sample_size=n)


def fit_series(series: RateSeries, min_points: int = 2) -> TrendModel:
    """Fit a trend over the rates of a series, oldest point at index 0."""
    return fit_trend(series.rates, min_points)


class TrendFitter:
    """Fits trend lines with a configured minimum sample size."""

    def __init__(self, min_points: int = 2):
        self.min_points = min_points

    def fit(self, series: RateSeries) -> TrendModel:
        return fit_series(series, self.min_points)

    def fit_values(self, values: Sequence[float]) -> TrendModel:
        return fit_trend(values, self.min_points)
