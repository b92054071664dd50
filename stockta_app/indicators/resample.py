"""Point-count reduction for chart display"""

import math
from typing import Sequence, TypeVar

T = TypeVar("T")


def resample(points: Sequence[T], max_points: int = 50) -> list[T]:
    """
    Thin a series to roughly ``max_points`` for display

    Keeps every ``ceil(n / max_points)``-th point plus the final point.
    Only used at the presentation boundary, never by other indicators.

    Args:
        points: Any ordered sequence
        max_points: Target size

    Returns:
        The input unchanged (as a list) if it already fits
    """
    if max_points <= 0 or len(points) <= max_points:
        return list(points)

    step = math.ceil(len(points) / max_points)
    last = len(points) - 1
    return [p for i, p in enumerate(points) if i % step == 0 or i == last]
