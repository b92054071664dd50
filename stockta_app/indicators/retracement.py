"""Fibonacci retracement levels"""

import math
from typing import Optional, Sequence

from ..data.models import FibonacciLevel, FibonacciResult, PricePoint

# Ordered from the low (100% retraced) to the high (0% retraced)
FIBONACCI_RATIOS = (
    ("100% (Low)", 1.0),
    ("78.6%", 0.786),
    ("61.8%", 0.618),
    ("50%", 0.5),
    ("38.2%", 0.382),
    ("23.6%", 0.236),
    ("0% (High)", 0.0),
)


def calculate_fibonacci(prices: Sequence[PricePoint]) -> Optional[FibonacciResult]:
    """
    Calculate Fibonacci retracement levels over the whole window

    level = high - (high - low) * ratio, with high/low taken from closes.
    The end levels are assigned directly so they equal low and high exactly.

    Args:
        prices: Price series

    Returns:
        FibonacciResult, or None if fewer than two finite closes
    """
    closes = [p.close for p in prices if isinstance(p.close, (int, float)) and math.isfinite(p.close)]
    if len(closes) < 2:
        return None

    high = max(closes)
    low = min(closes)
    diff = high - low

    levels = []
    for label, ratio in FIBONACCI_RATIOS:
        if ratio == 1.0:
            value = low
        elif ratio == 0.0:
            value = high
        else:
            value = high - diff * ratio
        levels.append(FibonacciLevel(label=label, ratio=ratio, value=value))

    return FibonacciResult(high=high, low=low, levels=tuple(levels))
