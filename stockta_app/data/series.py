"""
Date-keyed series and the join used to combine them.

Derived series start at different offsets (an EMA(200) begins 199 bars
after the raw series), so any component combining two series must join
them by calendar day instead of by position. ``join_by_date`` is that
single join primitive.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, Iterator, Optional, Sequence, Union

from ..errors import TemporalDataError
from .models import IndicatorPoint, PricePoint


@dataclass(frozen=True)
class TemporalSeries:
    """Immutable, ascending sequence of IndicatorPoint keyed by date."""

    points: tuple[IndicatorPoint, ...] = ()
    _index: dict[date, int] = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self):
        """Build the day index once."""
        object.__setattr__(self, "points", tuple(self.points))
        object.__setattr__(
            self, "_index", {point.date: i for i, point in enumerate(self.points)}
        )

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[date, Optional[float]]]) -> "TemporalSeries":
        """Create a series from (date, value) pairs."""
        return cls(tuple(IndicatorPoint(date=day, value=value) for day, value in pairs))

    @classmethod
    def from_prices(cls, prices: Sequence[PricePoint], field_name: str = "close") -> "TemporalSeries":
        """Project one price field (close, high, low, volume) into a series."""
        return cls(tuple(
            IndicatorPoint(date=price.date, value=getattr(price, field_name))
            for price in prices
        ))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[IndicatorPoint]:
        return iter(self.points)

    def __getitem__(self, index: int) -> IndicatorPoint:
        return self.points[index]

    def dates(self) -> list[date]:
        return [point.date for point in self.points]

    def values(self) -> list[Optional[float]]:
        return [point.value for point in self.points]

    def get(self, day: date) -> Optional[float]:
        """Value on ``day``; None if the day is absent or undefined."""
        index = self._index.get(day)
        if index is None:
            return None
        return self.points[index].value

    def __contains__(self, day: object) -> bool:
        return day in self._index

    def defined(self) -> "TemporalSeries":
        """Copy without undefined points."""
        return TemporalSeries(tuple(p for p in self.points if p.value is not None))

    def first_date(self) -> Optional[date]:
        return self.points[0].date if self.points else None

    def last_date(self) -> Optional[date]:
        return self.points[-1].date if self.points else None


SeriesInput = Union[Sequence[PricePoint], TemporalSeries]


def as_series(data: SeriesInput) -> TemporalSeries:
    """
    Normalize indicator input into a TemporalSeries of values.

    Price sequences contribute their closes; TemporalSeries contribute their
    defined points, which lets a derived series (e.g. the MACD line) feed
    the same moving-average code as raw prices.
    """
    if isinstance(data, TemporalSeries):
        return data.defined()
    return TemporalSeries.from_prices(data, "close")


def join_by_date(
    first: TemporalSeries, *others: TemporalSeries
) -> list[tuple]:
    """
    Align series on the days where every one of them is defined.

    Args:
        first: Series whose ordering drives the result
        *others: Series looked up by day

    Returns:
        List of ``(date, first_value, *other_values)`` tuples in date order
    """
    joined = []
    for point in first:
        if point.value is None:
            continue
        row = [point.date, point.value]
        for other in others:
            value = other.get(point.date)
            if value is None:
                break
            row.append(value)
        else:
            joined.append(tuple(row))
    return joined


def ensure_ascending(prices: Sequence[PricePoint]) -> None:
    """
    Verify the ascending, unique-day precondition of an input series.

    The normalizer guarantees this for fetched history; a violation here
    means a caller bypassed it.

    Raises:
        TemporalDataError: If a day repeats or goes backwards
    """
    previous: Optional[date] = None
    for price in prices:
        if previous is not None and price.date <= previous:
            raise TemporalDataError(
                f"Price series not strictly ascending: {price.date} after {previous}",
                day=price.date,
                previous_day=previous,
            )
        previous = price.date
