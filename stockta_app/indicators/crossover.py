"""Crossover detection: golden/death crosses, RSI threshold crosses, MACD crosses"""

from typing import Optional, Sequence

from ..data.models import (
    CrossoverResult,
    MacdResult,
    PricePoint,
    Signal,
    SignalKind,
    Zone,
    ZoneKind,
)
from ..data.series import TemporalSeries, join_by_date


def detect_golden_death_cross(
    prices: Sequence[PricePoint],
    fast_ma: TemporalSeries,
    slow_ma: TemporalSeries,
) -> CrossoverResult:
    """
    Detect golden/death crosses between two moving averages

    Golden: prev.fast <= prev.slow and cur.fast > cur.slow
    Death:  prev.fast >= prev.slow and cur.fast < cur.slow

    Zones: the first zone starts at the first evaluable bar (the later bar
    of the first joined pair) with its kind taken from fast > slow at that
    bar. Each crossing closes the open zone at the crossing date and opens
    a new one; the last zone closes at the last joined date.

    Args:
        prices: Price series used to anchor signals at the close
        fast_ma: Shorter moving average, e.g. SMA(50)
        slow_ma: Longer moving average, e.g. SMA(200)

    Returns:
        CrossoverResult with signals and non-overlapping zones in date order
    """
    closes = TemporalSeries.from_prices(prices, "close")
    joined = join_by_date(fast_ma, slow_ma, closes)

    signals = []
    zones = []
    zone_start = None
    zone_kind: Optional[ZoneKind] = None

    for prev, cur in zip(joined, joined[1:]):
        _, prev_fast, prev_slow, _ = prev
        day, fast, slow, close = cur

        kind: Optional[ZoneKind] = None
        if prev_fast <= prev_slow and fast > slow:
            kind = ZoneKind.GOLDEN
        elif prev_fast >= prev_slow and fast < slow:
            kind = ZoneKind.DEATH

        if kind is not None:
            signals.append(Signal(date=day, kind=SignalKind(kind.value), anchor_value=close))
            if zone_start is not None:
                zones.append(Zone(start=zone_start, end=day, kind=zone_kind))
            zone_start = day
            zone_kind = kind
        elif zone_start is None:
            zone_start = day
            zone_kind = ZoneKind.GOLDEN if fast > slow else ZoneKind.DEATH

    if zone_start is not None:
        zones.append(Zone(start=zone_start, end=joined[-1][0], kind=zone_kind))

    return CrossoverResult(signals=tuple(signals), zones=tuple(zones))


def detect_rsi_threshold_signals(
    prices: Sequence[PricePoint],
    rsi: TemporalSeries,
    oversold: float = 30.0,
    overbought: float = 70.0,
) -> tuple[Signal, ...]:
    """
    Detect RSI crossing out of the oversold/overbought regions

    Buy:  RSI crosses up through ``oversold`` (prev <= oversold < cur)
    Sell: RSI crosses down through ``overbought`` (prev >= overbought > cur)

    Returns:
        Signals anchored at the close, in date order
    """
    closes = TemporalSeries.from_prices(prices, "close")
    joined = join_by_date(rsi, closes)

    signals = []
    for (_, prev_rsi, _), (day, cur_rsi, close) in zip(joined, joined[1:]):
        if prev_rsi <= oversold < cur_rsi:
            signals.append(Signal(date=day, kind=SignalKind.BUY, anchor_value=close))
        elif prev_rsi >= overbought > cur_rsi:
            signals.append(Signal(date=day, kind=SignalKind.SELL, anchor_value=close))

    return tuple(signals)


def detect_macd_crossovers(
    prices: Sequence[PricePoint],
    macd: MacdResult,
) -> tuple[Signal, ...]:
    """
    Detect the MACD line crossing its signal line

    Buy:  prev.macd <= prev.signal and cur.macd > cur.signal
    Sell: prev.macd >= prev.signal and cur.macd < cur.signal

    Returns:
        Signals anchored at the close, in date order
    """
    closes = TemporalSeries.from_prices(prices, "close")
    joined = join_by_date(macd.macd_line, macd.signal_line, closes)

    signals = []
    for prev, cur in zip(joined, joined[1:]):
        _, prev_macd, prev_signal, _ = prev
        day, cur_macd, cur_signal, close = cur
        if prev_macd <= prev_signal and cur_macd > cur_signal:
            signals.append(Signal(date=day, kind=SignalKind.BUY, anchor_value=close))
        elif prev_macd >= prev_signal and cur_macd < cur_signal:
            signals.append(Signal(date=day, kind=SignalKind.SELL, anchor_value=close))

    return tuple(signals)
