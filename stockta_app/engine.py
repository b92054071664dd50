"""
Main indicator engine coordinator.

Orchestrates one analysis request: configuration merge and validation,
price history normalization, indicator calculation and result logging.
"""

from pathlib import Path
from typing import Any, Iterable, Optional, Sequence, Union

import structlog

from .config.defaults import DefaultConfig
from .config.loader import ConfigLoader, config_from_dict
from .config.validation import ConfigValidator
from .data.models import PricePoint
from .data.normalizer import PriceHistoryNormalizer
from .errors import (
    ConfigurationError,
    DataQualityError,
    InsufficientDataError,
    MissingDataError,
)
from .indicators.calculator import IndicatorCalculator
from .logging.config import log_signal_summary
from .models.analysis import AnalysisSnapshot

logger = structlog.get_logger(__name__)


class IndicatorEngine:
    """
    Main entry point for stock indicator analysis.

    Manages the analysis pipeline:
    Raw History → Normalization → Indicators → AnalysisSnapshot

    The engine holds configuration only, so concurrent requests for
    different symbols can share one instance.
    """

    def __init__(self, config_dir: Optional[Union[str, Path]] = None) -> None:
        """Initialize the indicator engine."""
        self.logger = logger

        self.config_loader = ConfigLoader.create(Path(config_dir) if config_dir else None)
        self.normalizer = PriceHistoryNormalizer()

        self.logger.info("Indicator engine initialized", config_dir=str(self.config_loader.config_dir))

    def resolve_config(
        self,
        symbol: str,
        overrides: Optional[dict[str, Any]] = None
    ) -> DefaultConfig:
        """
        Merge and validate configuration for a symbol.

        Raises:
            ConfigurationError: If the merged configuration is invalid
        """
        merged = self.config_loader.merge_config(symbol, overrides)
        validation_errors = ConfigValidator.validate_config(merged)
        if validation_errors:
            error_msgs = [f"{err.field}: {err.message} (got: {err.value})" for err in validation_errors]
            self.logger.error(
                "Configuration validation failed",
                symbol=symbol,
                errors=error_msgs
            )
            raise ConfigurationError(
                f"Invalid configuration for {symbol}",
                errors=validation_errors,
                context={"symbol": symbol},
            )
        return config_from_dict(merged)

    def analyze(
        self,
        symbol: str,
        rows: Iterable[Any],
        overrides: Optional[dict[str, Any]] = None
    ) -> AnalysisSnapshot:
        """
        Analyze raw price history rows.

        Args:
            symbol: Ticker the history belongs to
            rows: Raw daily rows ``{date, close, high?, low?, volume?}``
            overrides: Per-request configuration overrides

        Returns:
            AnalysisSnapshot with every indicator

        Raises:
            ConfigurationError: If configuration is invalid
            MissingDataError: If no row survives normalization
            InsufficientDataError: If history is shorter than
                ``analysis.min_points`` and enforcement is enabled
        """
        config = self.resolve_config(symbol, overrides)

        try:
            result = self.normalizer.normalize(rows)
            if not result.success:
                raise MissingDataError(
                    f"No valid price rows for {symbol}",
                    data_type="history",
                    context={"received": result.received, "dropped": result.dropped},
                )
        except DataQualityError as e:
            self.logger.warning(
                "Price history rejected",
                symbol=symbol,
                error=str(e),
                error_type=type(e).__name__,
                context=getattr(e, 'context', {})
            )
            raise

        self.logger.info(
            "Price history normalized",
            symbol=symbol,
            received=result.received,
            kept=len(result.prices),
            dropped=result.dropped,
            duplicates=result.duplicates,
        )

        return self._analyze_with_config(symbol, result.prices, config)

    def analyze_prices(
        self,
        symbol: str,
        prices: Sequence[PricePoint],
        overrides: Optional[dict[str, Any]] = None
    ) -> AnalysisSnapshot:
        """
        Analyze an already-normalized price series.

        Raises:
            TemporalDataError: If prices are not strictly ascending by day
        """
        config = self.resolve_config(symbol, overrides)
        return self._analyze_with_config(symbol, prices, config)

    def display(
        self,
        snapshot: AnalysisSnapshot,
        overrides: Optional[dict[str, Any]] = None
    ) -> dict[str, list]:
        """
        Display-sized series for a snapshot, sized by the symbol's display config.

        Returns:
            Dict of resampled ``price`` overlay rows, ``rsi`` and ``macd_histogram``
        """
        display_config = self.resolve_config(snapshot.symbol, overrides).display
        return snapshot.display_series(
            max_points=display_config.max_points,
            date_format=display_config.date_format,
        )

    def _analyze_with_config(
        self,
        symbol: str,
        prices: Sequence[PricePoint],
        config: DefaultConfig
    ) -> AnalysisSnapshot:
        min_points = config.analysis.min_points
        if len(prices) < min_points:
            if config.analysis.enforce_min_points:
                raise InsufficientDataError(
                    f"{symbol} needs at least {min_points} days of history",
                    required_count=min_points,
                    available_count=len(prices),
                )
            self.logger.warning(
                "Short price history, some indicators will be empty",
                symbol=symbol,
                available=len(prices),
                recommended=min_points,
            )

        calculator = IndicatorCalculator(config)
        snapshot = calculator.calculate(prices, symbol=symbol)

        log_signal_summary(self.logger, symbol, snapshot.all_signals())
        self.logger.info(
            "Analysis complete",
            symbol=symbol,
            start=str(snapshot.start),
            end=str(snapshot.end),
            points=len(snapshot.prices),
            warmed_up=len(prices) >= calculator.get_warmup_period(),
        )

        return snapshot
