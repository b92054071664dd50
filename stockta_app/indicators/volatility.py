"""Bollinger Bands calculations and band breach detection"""

from typing import Sequence

from ..data.models import BandBreach, BandPoint, BreachKind, PricePoint
from ..data.series import SeriesInput, TemporalSeries, as_series, join_by_date
from .moving_average import calculate_sma
from .oscillator import population_stdev


def calculate_bollinger_bands(
    series: SeriesInput,
    period: int = 20,
    devs: float = 2.0,
) -> tuple[BandPoint, ...]:
    """
    Calculate Bollinger Bands

    Middle = SMA(close, period)
    Upper/Lower = Middle +/- devs * population stdev of the trailing closes

    Args:
        series: Price series (closes used)
        period: Window length (default 20)
        devs: Band width in standard deviations (default 2)

    Returns:
        One BandPoint per index >= period-1, empty if n < period
    """
    source = as_series(series)
    closes = source.values()
    middle = calculate_sma(source, period)
    if not len(middle):
        return ()

    bands = []
    for offset, point in enumerate(middle):
        end = period + offset
        sd = population_stdev(closes[end - period:end])
        bands.append(BandPoint(
            date=point.date,
            upper=point.value + devs * sd,
            middle=point.value,
            lower=point.value - devs * sd,
        ))

    return tuple(bands)


def detect_band_breaches(
    prices: Sequence[PricePoint],
    bands: Sequence[BandPoint],
) -> tuple[BandBreach, ...]:
    """
    Flag closes outside the Bollinger envelope

    Close above upper -> overbought, close below lower -> oversold

    Args:
        prices: Price series
        bands: Output of calculate_bollinger_bands

    Returns:
        Breaches in date order
    """
    closes = TemporalSeries.from_prices(prices, "close")
    upper = TemporalSeries.from_pairs((b.date, b.upper) for b in bands)
    lower = TemporalSeries.from_pairs((b.date, b.lower) for b in bands)

    breaches = []
    for day, close, upper_value, lower_value in join_by_date(closes, upper, lower):
        if close > upper_value:
            breaches.append(BandBreach(date=day, kind=BreachKind.OVERBOUGHT, value=close))
        elif close < lower_value:
            breaches.append(BandBreach(date=day, kind=BreachKind.OVERSOLD, value=close))

    return tuple(breaches)
