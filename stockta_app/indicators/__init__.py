"""
Pure indicator functions for technical analysis.

IndicatorCalculator is imported from ``stockta_app.indicators.calculator``.
"""

from .crossover import (
    detect_golden_death_cross,
    detect_macd_crossovers,
    detect_rsi_threshold_signals,
)
from .divergence import detect_divergences, is_pivot_high, is_pivot_low
from .extrema import calculate_all_period_extrema, calculate_period_extrema
from .momentum import calculate_macd
from .moving_average import calculate_ema, calculate_sma
from .oscillator import SmoothingType, calculate_rsi, calculate_rsi_smoothing
from .resample import resample
from .retracement import calculate_fibonacci
from .volatility import calculate_bollinger_bands, detect_band_breaches

__all__ = [
    "calculate_sma",
    "calculate_ema",
    "calculate_rsi",
    "calculate_rsi_smoothing",
    "SmoothingType",
    "calculate_macd",
    "calculate_bollinger_bands",
    "detect_band_breaches",
    "calculate_fibonacci",
    "detect_golden_death_cross",
    "detect_rsi_threshold_signals",
    "detect_macd_crossovers",
    "detect_divergences",
    "is_pivot_low",
    "is_pivot_high",
    "calculate_period_extrema",
    "calculate_all_period_extrema",
    "resample",
]
