"""
FXCast App - Currency Rate Simulation and Forecasting Engine

The forecasting core of a personal-finance record keeper. Takes a single
live exchange rate per currency, synthesizes a deterministic 30-day history,
fits a linear trend and projects it a week ahead to classify whether the
base currency is likely to strengthen, weaken or stay stable.
"""

__version__ = "0.1.0"
__author__ = "FXCast Team"
