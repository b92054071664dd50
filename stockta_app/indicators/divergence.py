"""RSI/price divergence detection"""

from typing import Optional, Sequence

from ..data.models import PricePoint, Signal, SignalKind
from ..data.series import TemporalSeries, join_by_date


def is_pivot_low(values: Sequence[float], i: int, lookback_left: int, lookback_right: int) -> bool:
    """
    Pivot low test

    Left neighbours must be >= the value, right neighbours strictly greater.
    The asymmetry decides which bar of a flat bottom qualifies and must be
    kept as is.
    """
    if i < lookback_left or i >= len(values) - lookback_right:
        return False
    value = values[i]
    for j in range(1, lookback_left + 1):
        if values[i - j] < value:
            return False
    for j in range(1, lookback_right + 1):
        if values[i + j] <= value:
            return False
    return True


def is_pivot_high(values: Sequence[float], i: int, lookback_left: int, lookback_right: int) -> bool:
    """
    Pivot high test

    Left neighbours must be <= the value, right neighbours strictly less.
    """
    if i < lookback_left or i >= len(values) - lookback_right:
        return False
    value = values[i]
    for j in range(1, lookback_left + 1):
        if values[i - j] > value:
            return False
    for j in range(1, lookback_right + 1):
        if values[i + j] >= value:
            return False
    return True


def detect_divergences(
    rsi: TemporalSeries,
    prices: Sequence[PricePoint],
    lookback_left: int = 5,
    lookback_right: int = 5,
) -> tuple[Signal, ...]:
    """
    Detect regular bullish and bearish RSI divergences

    Bullish: at a new RSI pivot low, price low is lower than at the previous
    pivot low while RSI is higher.
    Bearish: at a new RSI pivot high, price high is higher than at the
    previous pivot high while RSI is lower.
    Only the most recent pivot of each polarity is kept for comparison.

    Args:
        rsi: RSI series
        prices: Price series; ``low``/``high`` are used, falling back to close
        lookback_left: Bars left of a pivot that must confirm it
        lookback_right: Bars right of a pivot that must confirm it

    Returns:
        Divergence signals at the pivot date, anchored at the RSI value
    """
    lows = TemporalSeries.from_pairs((p.date, p.low_or_close) for p in prices)
    highs = TemporalSeries.from_pairs((p.date, p.high_or_close) for p in prices)
    combined = join_by_date(rsi, lows, highs)

    rsi_values = [row[1] for row in combined]
    low_values = [row[2] for row in combined]
    high_values = [row[3] for row in combined]

    signals = []
    last_low: Optional[tuple[float, float]] = None    # (rsi, price)
    last_high: Optional[tuple[float, float]] = None

    for i in range(lookback_left, len(combined) - lookback_right):
        day = combined[i][0]

        if is_pivot_low(rsi_values, i, lookback_left, lookback_right):
            if last_low is not None:
                prev_rsi, prev_price = last_low
                if low_values[i] < prev_price and rsi_values[i] > prev_rsi:
                    signals.append(Signal(
                        date=day,
                        kind=SignalKind.BULL_DIVERGENCE,
                        anchor_value=rsi_values[i],
                    ))
            last_low = (rsi_values[i], low_values[i])

        if is_pivot_high(rsi_values, i, lookback_left, lookback_right):
            if last_high is not None:
                prev_rsi, prev_price = last_high
                if high_values[i] > prev_price and rsi_values[i] < prev_rsi:
                    signals.append(Signal(
                        date=day,
                        kind=SignalKind.BEAR_DIVERGENCE,
                        anchor_value=rsi_values[i],
                    ))
            last_high = (rsi_values[i], high_values[i])

    return tuple(signals)
