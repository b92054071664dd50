"""MACD (Moving Average Convergence Divergence) calculations"""

from ..data.models import MacdResult
from ..data.series import SeriesInput, TemporalSeries, as_series, join_by_date
from .moving_average import calculate_ema


def empty_macd() -> MacdResult:
    return MacdResult(
        macd_line=TemporalSeries(),
        signal_line=TemporalSeries(),
        histogram=TemporalSeries(),
    )


def calculate_macd(
    series: SeriesInput,
    fast: int = 12,
    slow: int = 26,
    signal: int = 9,
) -> MacdResult:
    """
    Calculate MACD line, signal line and histogram

    MACD line = EMA(close, fast) - EMA(close, slow), on days both are defined
    Signal line = EMA(MACD line, signal)
    Histogram = MACD line - signal line, on days both are defined

    Args:
        series: Price series (closes used)
        fast: Fast EMA period (default 12)
        slow: Slow EMA period (default 26)
        signal: Signal EMA period (default 9)

    Returns:
        MacdResult; all three series empty if n < slow + signal
    """
    source = as_series(series)
    if len(source) < slow + signal:
        return empty_macd()

    ema_fast = calculate_ema(source, fast)
    ema_slow = calculate_ema(source, slow)

    macd_line = TemporalSeries.from_pairs(
        (day, fast_value - slow_value)
        for day, fast_value, slow_value in join_by_date(ema_fast, ema_slow)
    )
    signal_line = calculate_ema(macd_line, signal)
    histogram = TemporalSeries.from_pairs(
        (day, macd_value - signal_value)
        for day, macd_value, signal_value in join_by_date(macd_line, signal_line)
    )

    return MacdResult(
        macd_line=macd_line,
        signal_line=signal_line,
        histogram=histogram,
    )
