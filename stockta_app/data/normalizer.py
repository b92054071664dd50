"""
Price history normalization pipeline.

This module provides the PriceHistoryNormalizer that turns raw provider rows
into the ascending, de-duplicated series the indicator engine requires.
Rows that fail to parse are dropped and counted, never repaired.
"""

import logging
from dataclasses import dataclass
from typing import Any, Iterable

from ..errors import MalformedDataError, MissingDataError
from .models import PricePoint
from .parsers import parse_price_row

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NormalizationResult:
    """Result of normalizing one batch of history rows."""

    prices: tuple[PricePoint, ...] = ()

    # Processing metadata
    received: int = 0
    dropped: int = 0
    duplicates: int = 0

    @property
    def success(self) -> bool:
        return len(self.prices) > 0


class PriceHistoryNormalizer:
    """
    Normalizes raw daily history rows into a canonical price series.

    Sorting is ascending by calendar day; when a provider repeats a day the
    last row received for it wins.
    """

    def normalize(self, rows: Iterable[Any]) -> NormalizationResult:
        """
        Normalize raw rows.

        Args:
            rows: Raw history rows from the fetching collaborator

        Returns:
            NormalizationResult with the clean series and drop counts

        Raises:
            MissingDataError: If ``rows`` is None
        """
        if rows is None:
            raise MissingDataError("No price history supplied", data_type="history")

        by_day: dict = {}
        received = 0
        dropped = 0
        duplicates = 0

        for row in rows:
            received += 1
            try:
                price = parse_price_row(row)
            except MalformedDataError as e:
                dropped += 1
                logger.debug(f"Dropping malformed price row: {e}")
                continue

            if price.date in by_day:
                duplicates += 1
            by_day[price.date] = price

        prices = tuple(by_day[day] for day in sorted(by_day))

        if dropped or duplicates:
            logger.warning(
                f"Normalized price history with issues: received={received} "
                f"kept={len(prices)} dropped={dropped} duplicates={duplicates}"
            )

        return NormalizationResult(
            prices=prices,
            received=received,
            dropped=dropped,
            duplicates=duplicates,
        )
