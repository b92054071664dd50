"""Default configuration parameters for the indicator engine."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MovingAverageParams:
    """Moving average overlays drawn on the price chart."""
    sma_periods: tuple[int, ...] = (10, 50, 100, 200)
    ema_periods: tuple[int, ...] = (50, 100, 200)


@dataclass(frozen=True)
class RSIParams:
    """RSI and its smoothing overlay."""
    period: int = 14                                 # Wilder's standard length
    smoothing_type: str = "SMA + Bollinger Bands"    # SMA, EMA or SMA + Bollinger Bands
    smoothing_length: int = 14
    band_multiplier: float = 2.0                     # Smoothing band width in stdevs

    # Threshold crosses
    oversold: float = 30.0
    overbought: float = 70.0


@dataclass(frozen=True)
class DivergenceParams:
    """RSI pivot and divergence detection."""
    enabled: bool = True
    lookback_left: int = 5
    lookback_right: int = 5


@dataclass(frozen=True)
class MACDParams:
    """MACD periods."""
    fast: int = 12
    slow: int = 26
    signal: int = 9


@dataclass(frozen=True)
class BollingerParams:
    """Bollinger band parameters."""
    period: int = 20
    devs: float = 2.0


@dataclass(frozen=True)
class CrossParams:
    """Golden/death cross moving averages (SMA periods)."""
    fast_period: int = 50
    slow_period: int = 200


@dataclass(frozen=True)
class ExtremaParams:
    """Calendar buckets for period highs/lows."""
    periods: tuple[str, ...] = ("week", "month", "year")


@dataclass(frozen=True)
class DisplayParams:
    """Presentation-boundary parameters."""
    max_points: int = 45
    date_format: str = "%d %b %Y"


@dataclass(frozen=True)
class AnalysisParams:
    """Whole-request parameters."""
    min_points: int = 35                 # Recommended history length
    enforce_min_points: bool = False     # Raise instead of warn below min_points


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    moving_average: MovingAverageParams
    rsi: RSIParams
    divergence: DivergenceParams
    macd: MACDParams
    bollinger: BollingerParams
    cross: CrossParams
    extrema: ExtremaParams
    display: DisplayParams
    analysis: AnalysisParams


# Section name -> params class, in DefaultConfig field order
SECTIONS = {
    "moving_average": MovingAverageParams,
    "rsi": RSIParams,
    "divergence": DivergenceParams,
    "macd": MACDParams,
    "bollinger": BollingerParams,
    "cross": CrossParams,
    "extrema": ExtremaParams,
    "display": DisplayParams,
    "analysis": AnalysisParams,
}


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(**{name: params() for name, params in SECTIONS.items()})
