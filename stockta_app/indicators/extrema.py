"""Weekly, monthly and yearly high/low extraction"""

from typing import Callable, Iterable, Sequence

from ..data.models import Peak, PeakKind, Period, PricePoint
from ..utils.time import month_key, week_key, year_key

PERIOD_KEYS: dict[Period, Callable] = {
    Period.WEEK: week_key,
    Period.MONTH: month_key,
    Period.YEAR: year_key,
}


def calculate_period_extrema(prices: Sequence[PricePoint], period: Period) -> tuple[Peak, ...]:
    """
    Find the highest high and lowest low of each calendar bucket

    Buckets are ISO weeks, year-months or years. ``high``/``low`` fall back
    to close when absent; on ties the earliest bar wins. Peaks carry the
    date of the bar that made them, not the bucket boundary.

    Args:
        prices: Price series
        period: Bucket size

    Returns:
        One periodHigh and one periodLow per bucket, buckets in order of
        first appearance
    """
    period = Period(period)
    key_for = PERIOD_KEYS[period]

    groups: dict[str, list[PricePoint]] = {}
    for price in prices:
        groups.setdefault(key_for(price.date), []).append(price)

    peaks = []
    for items in groups.values():
        high_item = items[0]
        low_item = items[0]
        for item in items[1:]:
            if item.high_or_close > high_item.high_or_close:
                high_item = item
            if item.low_or_close < low_item.low_or_close:
                low_item = item

        peaks.append(Peak(
            date=high_item.date,
            kind=PeakKind.PERIOD_HIGH,
            period=period,
            value=high_item.high_or_close,
        ))
        peaks.append(Peak(
            date=low_item.date,
            kind=PeakKind.PERIOD_LOW,
            period=period,
            value=low_item.low_or_close,
        ))

    return tuple(peaks)


def calculate_all_period_extrema(
    prices: Sequence[PricePoint],
    periods: Iterable[Period] = (Period.WEEK, Period.MONTH, Period.YEAR),
) -> tuple[Peak, ...]:
    """Concatenate period extrema for several bucket sizes."""
    peaks: list[Peak] = []
    for period in periods:
        peaks.extend(calculate_period_extrema(prices, period))
    return tuple(peaks)
