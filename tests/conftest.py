"""Pytest configuration and shared fixtures."""

import math
from datetime import date, timedelta
from typing import Any, Callable, Dict, List, Optional, Sequence

import pytest

from stockta_app.data.models import PricePoint

# Monday, start of ISO week 2024-W01
START = date(2024, 1, 1)


def build_prices(
    closes: Sequence[float],
    highs: Optional[Sequence[Optional[float]]] = None,
    lows: Optional[Sequence[Optional[float]]] = None,
    start: date = START,
) -> tuple[PricePoint, ...]:
    """Consecutive daily PricePoints from parallel value lists."""
    return tuple(
        PricePoint(
            date=start + timedelta(days=i),
            close=float(close),
            high=highs[i] if highs is not None else None,
            low=lows[i] if lows is not None else None,
            volume=1000.0,
        )
        for i, close in enumerate(closes)
    )


def wave_closes(count: int) -> List[float]:
    """Trending sine wave, long enough to produce crosses and pivots."""
    return [100.0 + 15.0 * math.sin(i / 12.0) + 0.05 * i for i in range(count)]


@pytest.fixture
def make_prices() -> Callable[..., tuple[PricePoint, ...]]:
    """Factory for consecutive daily price series."""
    return build_prices


@pytest.fixture
def wave_prices() -> tuple[PricePoint, ...]:
    """260 days of oscillating prices with highs and lows."""
    closes = wave_closes(260)
    return build_prices(
        closes,
        highs=[c + 1.5 for c in closes],
        lows=[c - 1.5 for c in closes],
    )


@pytest.fixture
def sample_rows() -> List[Dict[str, Any]]:
    """Raw provider rows for 260 days, newest first."""
    closes = wave_closes(260)
    rows = [
        {
            "date": (START + timedelta(days=i)).isoformat(),
            "close": close,
            "high": close + 1.5,
            "low": close - 1.5,
            "volume": 1_000_000 + i,
        }
        for i, close in enumerate(closes)
    ]
    return list(reversed(rows))
