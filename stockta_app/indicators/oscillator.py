"""RSI (Relative Strength Index) and RSI smoothing overlay calculations"""

import math
from enum import Enum
from typing import Optional, Sequence

from ..data.models import RsiPoint
from ..data.series import SeriesInput, TemporalSeries, as_series
from .moving_average import calculate_ema, calculate_sma


class SmoothingType(str, Enum):
    SMA = "SMA"
    EMA = "EMA"
    SMA_BANDS = "SMA + Bollinger Bands"


def population_stdev(values: Sequence[float]) -> float:
    """Population standard deviation: sqrt(sum((x - mean)^2) / N)"""
    mean = sum(values) / len(values)
    return math.sqrt(sum((v - mean) ** 2 for v in values) / len(values))


def _rsi_value(avg_gain: float, avg_loss: float) -> float:
    if avg_loss == 0:
        return 100.0
    rs = avg_gain / avg_loss
    rsi = 100.0 - 100.0 / (1.0 + rs)
    return min(max(rsi, 0.0), 100.0)


def calculate_rsi(series: SeriesInput, period: int = 14) -> TemporalSeries:
    """
    Calculate RSI with Wilder smoothing

    change[i] = close[i] - close[i-1]
    Seed avg_gain/avg_loss = mean gain/loss over the first ``period`` changes
    Then avg = (avg_prev * (period - 1) + current) / period for each side
    RSI = 100 - 100 / (1 + avg_gain / avg_loss), 100 when avg_loss == 0

    Args:
        series: Price series (closes used)
        period: RSI period (default 14)

    Returns:
        RSI series starting at index ``period``, empty if n < period + 1
    """
    source = as_series(series)
    closes = source.values()
    if period <= 0 or len(closes) < period + 1:
        return TemporalSeries()

    changes = [closes[i] - closes[i - 1] for i in range(1, len(closes))]

    seed = changes[:period]
    avg_gain = sum(c for c in seed if c > 0) / period
    avg_loss = sum(-c for c in seed if c <= 0) / period

    # changes[i] belongs to source[i + 1]
    pairs = [(source[period].date, _rsi_value(avg_gain, avg_loss))]
    for i in range(period, len(changes)):
        change = changes[i]
        if change > 0:
            avg_gain = (avg_gain * (period - 1) + change) / period
            avg_loss = avg_loss * (period - 1) / period
        else:
            avg_gain = avg_gain * (period - 1) / period
            avg_loss = (avg_loss * (period - 1) - change) / period
        pairs.append((source[i + 1].date, _rsi_value(avg_gain, avg_loss)))

    return TemporalSeries.from_pairs(pairs)


def calculate_rsi_smoothing(
    rsi: TemporalSeries,
    lookback: int = 14,
    mult: float = 2.0,
    smoothing_type: SmoothingType = SmoothingType.SMA_BANDS,
) -> tuple[RsiPoint, ...]:
    """
    Attach a smoothing line, and optionally bands, to an RSI series

    SMA + Bollinger Bands: smoothing = SMA(RSI, lookback),
    upper/lower = smoothing +/- mult * population stdev of the same window.
    SMA and EMA attach only the smoothing line.

    Args:
        rsi: Output of calculate_rsi
        lookback: Smoothing window
        mult: Band width in standard deviations
        smoothing_type: Which overlay to compute

    Returns:
        One RsiPoint per RSI point; smoothing fields are None until
        ``lookback`` RSI values have accumulated
    """
    smoothing_type = SmoothingType(smoothing_type)
    defined = rsi.defined()
    values = defined.values()

    if smoothing_type == SmoothingType.EMA:
        smoothing = calculate_ema(defined, lookback)
    else:
        smoothing = calculate_sma(defined, lookback)

    points = []
    for i, point in enumerate(defined):
        ma: Optional[float] = smoothing.get(point.date)
        upper: Optional[float] = None
        lower: Optional[float] = None
        if smoothing_type == SmoothingType.SMA_BANDS and ma is not None:
            std = population_stdev(values[i - lookback + 1:i + 1])
            upper = ma + std * mult
            lower = ma - std * mult
        points.append(RsiPoint(
            date=point.date,
            value=point.value,
            smoothing=ma,
            upper=upper,
            lower=lower,
        ))

    return tuple(points)
