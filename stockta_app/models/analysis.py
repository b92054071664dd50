"""Data models for a complete indicator analysis"""

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Optional

from ..data.models import (
    BandBreach,
    BandPoint,
    CrossoverResult,
    FibonacciResult,
    MacdResult,
    Peak,
    PricePoint,
    RsiPoint,
    Signal,
)
from ..data.series import TemporalSeries
from ..indicators.momentum import empty_macd
from ..indicators.resample import resample
from ..utils.time import DEFAULT_DISPLAY_FORMAT, format_display_date


@dataclass(frozen=True)
class AnalysisSnapshot:
    """Every indicator computed for one symbol over one price window"""
    symbol: str
    prices: tuple[PricePoint, ...] = ()
    sma: dict[int, TemporalSeries] = field(default_factory=dict)
    ema: dict[int, TemporalSeries] = field(default_factory=dict)
    rsi: TemporalSeries = field(default_factory=TemporalSeries)
    rsi_smoothing: tuple[RsiPoint, ...] = ()
    macd: MacdResult = field(default_factory=empty_macd)
    bollinger: tuple[BandPoint, ...] = ()
    band_breaches: tuple[BandBreach, ...] = ()
    fibonacci: Optional[FibonacciResult] = None
    golden_death: CrossoverResult = field(default_factory=CrossoverResult)
    rsi_signals: tuple[Signal, ...] = ()
    macd_signals: tuple[Signal, ...] = ()
    divergences: tuple[Signal, ...] = ()
    peaks: tuple[Peak, ...] = ()

    @property
    def start(self) -> Optional[date]:
        return self.prices[0].date if self.prices else None

    @property
    def end(self) -> Optional[date]:
        return self.prices[-1].date if self.prices else None

    def has_sufficient_data(self) -> bool:
        """Check the core oscillators produced output"""
        return len(self.rsi) > 0 and not self.macd.is_empty and len(self.bollinger) > 0

    def latest_rsi(self) -> Optional[float]:
        return self.rsi[-1].value if len(self.rsi) else None

    def all_signals(self) -> list[Signal]:
        """Every signal kind merged in date order"""
        signals = [
            *self.golden_death.signals,
            *self.rsi_signals,
            *self.macd_signals,
            *self.divergences,
        ]
        return sorted(signals, key=lambda s: s.date)

    def overlay_rows(self, date_format: str = DEFAULT_DISPLAY_FORMAT) -> list[dict[str, Any]]:
        """
        Price rows with every overlay looked up by canonical date

        ``date`` stays the canonical key; ``label`` is for display only.
        """
        bands = {band.date: band for band in self.bollinger}
        rows = []
        previous_close = None
        for price in self.prices:
            band = bands.get(price.date)
            row = {
                "date": price.date,
                "label": format_display_date(price.date, date_format),
                "close": price.close,
                "volume": price.volume or 0.0,
                "is_up": previous_close is None or price.close >= previous_close,
                "bb_upper": band.upper if band else None,
                "bb_middle": band.middle if band else None,
                "bb_lower": band.lower if band else None,
            }
            for period, series in self.sma.items():
                row[f"sma{period}"] = series.get(price.date)
            for period, series in self.ema.items():
                row[f"ema{period}"] = series.get(price.date)
            rows.append(row)
            previous_close = price.close
        return rows

    def display_series(self, max_points: int = 45,
                       date_format: str = DEFAULT_DISPLAY_FORMAT) -> dict[str, list]:
        """Display-sized copies of the chart series"""
        return {
            "price": resample(self.overlay_rows(date_format), max_points),
            "rsi": resample(self.rsi_smoothing, max_points),
            "macd_histogram": resample(self.macd.histogram.points, max_points),
        }
