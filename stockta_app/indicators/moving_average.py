"""SMA (Simple Moving Average) and EMA (Exponential Moving Average) calculations"""

from dataclasses import dataclass
from typing import Optional

from ..data.series import SeriesInput, TemporalSeries, as_series


@dataclass(frozen=True)
class WindowSum:
    """Running sum over a fixed-size trailing window."""
    total: float = 0.0
    count: int = 0

    def push(self, entering: float, leaving: Optional[float] = None) -> "WindowSum":
        """
        Add the newest value and drop the one leaving the window

        Args:
            entering: Value entering the window
            leaving: Value falling out of the window, None while filling

        Returns:
            Updated accumulator
        """
        if leaving is None:
            return WindowSum(self.total + entering, self.count + 1)
        return WindowSum(self.total + entering - leaving, self.count)

    @property
    def mean(self) -> float:
        return self.total / self.count


def calculate_sma(series: SeriesInput, period: int) -> TemporalSeries:
    """
    Calculate Simple Moving Average

    SMA[i] = mean(value[i-period+1 .. i]), kept in O(n) with a running sum

    Args:
        series: Price series (closes used) or an indicator series
        period: Window length

    Returns:
        Series defined for indices period-1..n-1, empty if n < period
    """
    source = as_series(series)
    values = source.values()
    if period <= 0 or len(values) < period:
        return TemporalSeries()

    window = WindowSum()
    pairs = []
    for i, point in enumerate(source):
        leaving = values[i - period] if i >= period else None
        window = window.push(values[i], leaving)
        if i >= period - 1:
            pairs.append((point.date, window.mean))

    return TemporalSeries.from_pairs(pairs)


def calculate_ema(series: SeriesInput, period: int) -> TemporalSeries:
    """
    Calculate Exponential Moving Average

    Seed = mean of the first ``period`` values, emitted at index period-1
    EMA = value * k + EMA_prev * (1 - k), k = 2 / (period + 1)

    Args:
        series: Price series (closes used) or an indicator series
        period: EMA period

    Returns:
        Series defined for indices period-1..n-1, empty if n < period
    """
    source = as_series(series)
    values = source.values()
    if period <= 0 or len(values) < period:
        return TemporalSeries()

    k = 2 / (period + 1)
    ema = sum(values[:period]) / period

    pairs = [(source[period - 1].date, ema)]
    for i in range(period, len(values)):
        ema = values[i] * k + ema * (1 - k)
        pairs.append((source[i].date, ema))

    return TemporalSeries.from_pairs(pairs)
