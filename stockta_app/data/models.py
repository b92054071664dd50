"""
Canonical data models for price history and indicator output.

This module defines immutable data structures for the daily price series
handed to the engine and for every kind of result the engine emits. All
dates are UTC calendar days (``datetime.date``), the single key used for
cross-series joins.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .series import TemporalSeries


@dataclass(frozen=True)
class PricePoint:
    """Daily price bar keyed by UTC calendar day."""
    date: date                       # UTC calendar day, unique per series
    close: float                     # Closing price
    high: Optional[float] = None     # Session high, if provided
    low: Optional[float] = None      # Session low, if provided
    volume: Optional[float] = None   # Traded volume, if provided

    @property
    def high_or_close(self) -> float:
        """High price, falling back to close."""
        return self.high if self.high is not None else self.close

    @property
    def low_or_close(self) -> float:
        """Low price, falling back to close."""
        return self.low if self.low is not None else self.close


@dataclass(frozen=True)
class IndicatorPoint:
    """Single indicator value; None means not yet computable."""
    date: date
    value: Optional[float] = None


@dataclass(frozen=True)
class RsiPoint:
    """RSI value with its smoothing line and bands."""
    date: date
    value: float
    smoothing: Optional[float] = None
    upper: Optional[float] = None
    lower: Optional[float] = None


@dataclass(frozen=True)
class BandPoint:
    """Bollinger band values for one day."""
    date: date
    upper: float
    middle: float
    lower: float


@dataclass(frozen=True)
class MacdResult:
    """MACD line, signal line and histogram, keyed by date."""
    macd_line: "TemporalSeries"
    signal_line: "TemporalSeries"
    histogram: "TemporalSeries"

    @property
    def is_empty(self) -> bool:
        return len(self.macd_line) == 0


class SignalKind(str, Enum):
    BUY = "buy"
    SELL = "sell"
    GOLDEN = "golden"
    DEATH = "death"
    BULL_DIVERGENCE = "bull-divergence"
    BEAR_DIVERGENCE = "bear-divergence"


class ZoneKind(str, Enum):
    GOLDEN = "golden"
    DEATH = "death"


@dataclass(frozen=True)
class Signal:
    """Point event drawn on a chart at ``anchor_value``."""
    date: date
    kind: SignalKind
    anchor_value: float   # Price or oscillator value the marker sits on


@dataclass(frozen=True)
class Zone:
    """Contiguous span during which the fast average is above/below the slow one."""
    start: date
    end: date
    kind: ZoneKind


@dataclass(frozen=True)
class CrossoverResult:
    """Golden/death cross signals with their zone segmentation."""
    signals: tuple[Signal, ...] = ()
    zones: tuple[Zone, ...] = ()


@dataclass(frozen=True)
class FibonacciLevel:
    label: str
    ratio: float
    value: float


@dataclass(frozen=True)
class FibonacciResult:
    """Retracement levels ordered from ``100% (Low)`` to ``0% (High)``."""
    high: float
    low: float
    levels: tuple[FibonacciLevel, ...]

    def level(self, label: str) -> Optional[FibonacciLevel]:
        """Look up a level by its label."""
        for item in self.levels:
            if item.label == label:
                return item
        return None


class Period(str, Enum):
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


class PeakKind(str, Enum):
    PERIOD_HIGH = "periodHigh"
    PERIOD_LOW = "periodLow"


@dataclass(frozen=True)
class Peak:
    """Highest high or lowest low of a calendar bucket, at the bar that made it."""
    date: date
    kind: PeakKind
    period: Period
    value: float


class BreachKind(str, Enum):
    OVERBOUGHT = "overbought"
    OVERSOLD = "oversold"


@dataclass(frozen=True)
class BandBreach:
    """Close outside the Bollinger envelope."""
    date: date
    kind: BreachKind
    value: float
