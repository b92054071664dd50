"""Main indicator calculator for coordinating all indicator calculations"""

from typing import Any, Callable, Optional, Sequence

from ..config.defaults import DefaultConfig, get_default_config
from ..data.models import Period, PricePoint
from ..data.series import ensure_ascending
from ..errors import IndicatorCalculationError
from ..logging.config import get_indicator_logger, log_indicator_result
from ..models.analysis import AnalysisSnapshot
from .crossover import (
    detect_golden_death_cross,
    detect_macd_crossovers,
    detect_rsi_threshold_signals,
)
from .divergence import detect_divergences
from .extrema import calculate_all_period_extrema
from .momentum import calculate_macd
from .moving_average import calculate_ema, calculate_sma
from .oscillator import calculate_rsi, calculate_rsi_smoothing
from .retracement import calculate_fibonacci
from .volatility import calculate_bollinger_bands, detect_band_breaches

logger = get_indicator_logger(__name__)


def _size(result: Any) -> int:
    if result is None:
        return 0
    if hasattr(result, "macd_line"):
        return len(result.macd_line)
    if hasattr(result, "levels"):
        return len(result.levels)
    if hasattr(result, "zones"):
        return len(result.zones)
    return len(result)


class IndicatorCalculator:
    """
    Runs the configured indicator set over one price series.

    Holds only configuration; every call works on its own input and
    returns a fresh AnalysisSnapshot.
    """

    def __init__(self, config: Optional[DefaultConfig] = None):
        self.config = config or get_default_config()

    def calculate(self, prices: Sequence[PricePoint], symbol: str = "") -> AnalysisSnapshot:
        """
        Calculate every indicator for a price series

        Args:
            prices: Ascending, unique-day price series
            symbol: Symbol used in log context

        Returns:
            AnalysisSnapshot with all outputs

        Raises:
            TemporalDataError: If prices are not strictly ascending
            IndicatorCalculationError: If an indicator fails unexpectedly
        """
        ensure_ascending(prices)
        prices = tuple(prices)
        cfg = self.config

        sma = {
            period: self._run(f"sma_{period}", symbol, calculate_sma, prices, period)
            for period in cfg.moving_average.sma_periods
        }
        ema = {
            period: self._run(f"ema_{period}", symbol, calculate_ema, prices, period)
            for period in cfg.moving_average.ema_periods
        }

        rsi = self._run("rsi", symbol, calculate_rsi, prices, cfg.rsi.period)
        rsi_smoothing = self._run(
            "rsi_smoothing", symbol, calculate_rsi_smoothing, rsi,
            cfg.rsi.smoothing_length, cfg.rsi.band_multiplier, cfg.rsi.smoothing_type,
        )
        rsi_signals = self._run(
            "rsi_signals", symbol, detect_rsi_threshold_signals, prices, rsi,
            cfg.rsi.oversold, cfg.rsi.overbought,
        )

        divergences: tuple = ()
        if cfg.divergence.enabled:
            divergences = self._run(
                "divergence", symbol, detect_divergences, rsi, prices,
                cfg.divergence.lookback_left, cfg.divergence.lookback_right,
            )

        macd = self._run(
            "macd", symbol, calculate_macd, prices,
            cfg.macd.fast, cfg.macd.slow, cfg.macd.signal,
        )
        macd_signals = self._run("macd_signals", symbol, detect_macd_crossovers, prices, macd)

        bollinger = self._run(
            "bollinger", symbol, calculate_bollinger_bands, prices,
            cfg.bollinger.period, cfg.bollinger.devs,
        )
        band_breaches = self._run("band_breaches", symbol, detect_band_breaches, prices, bollinger)

        fibonacci = self._run("fibonacci", symbol, calculate_fibonacci, prices)

        fast_ma = sma.get(cfg.cross.fast_period)
        if fast_ma is None:
            fast_ma = calculate_sma(prices, cfg.cross.fast_period)
        slow_ma = sma.get(cfg.cross.slow_period)
        if slow_ma is None:
            slow_ma = calculate_sma(prices, cfg.cross.slow_period)
        golden_death = self._run(
            "golden_death", symbol, detect_golden_death_cross, prices, fast_ma, slow_ma,
        )

        peaks = self._run(
            "period_extrema", symbol, calculate_all_period_extrema, prices,
            [Period(p) for p in cfg.extrema.periods],
        )

        return AnalysisSnapshot(
            symbol=symbol,
            prices=prices,
            sma=sma,
            ema=ema,
            rsi=rsi,
            rsi_smoothing=rsi_smoothing,
            macd=macd,
            bollinger=bollinger,
            band_breaches=band_breaches,
            fibonacci=fibonacci,
            golden_death=golden_death,
            rsi_signals=rsi_signals,
            macd_signals=macd_signals,
            divergences=divergences,
            peaks=peaks,
        )

    def get_warmup_period(self) -> int:
        """Get the minimum number of points for every indicator to produce output"""
        cfg = self.config
        return max(
            max(cfg.moving_average.sma_periods, default=0),
            max(cfg.moving_average.ema_periods, default=0),
            cfg.rsi.period + 1,
            cfg.macd.slow + cfg.macd.signal,
            cfg.bollinger.period,
            cfg.cross.slow_period + 1,
        )

    def _run(self, name: str, symbol: str, func: Callable, *args: Any) -> Any:
        """Run one indicator, log its size and wrap unexpected failures."""
        try:
            result = func(*args)
        except Exception as e:
            raise IndicatorCalculationError(
                f"{name} calculation failed: {str(e)}",
                indicator_name=name,
                calculation_input={"symbol": symbol, "points": len(args[0]) if args else 0},
            ) from e

        log_indicator_result(logger, name, symbol, _size(result))
        return result
