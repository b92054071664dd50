"""
Parsers for raw daily price rows.

Price providers disagree on field names and types; these helpers turn one
raw row into a PricePoint or reject it with MalformedDataError.
"""

import math
from typing import Any, Optional

from ..errors import MalformedDataError
from ..utils.time import to_day_key
from .models import PricePoint

DATE_FIELDS = ("date", "timestamp", "time")


def parse_number(value: Any) -> Optional[float]:
    """
    Parse a finite float from a number or numeric string.

    Returns:
        Float value, or None for missing, non-numeric or non-finite input
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None

    if math.isnan(number) or math.isinf(number):
        return None
    return number


def parse_price_row(row: dict[str, Any]) -> PricePoint:
    """
    Parse one raw history row.

    Args:
        row: Mapping with a date field and ``close``; ``high``, ``low`` and
            ``volume`` are optional

    Returns:
        Parsed PricePoint

    Raises:
        MalformedDataError: If the row is not a mapping, the date cannot be
            interpreted, or close is not a finite number
    """
    if not isinstance(row, dict):
        raise MalformedDataError(
            f"Price row must be a mapping, got {type(row).__name__}",
            raw_data=str(row)[:100],
            expected_format="dict",
        )

    raw_date = next((row[name] for name in DATE_FIELDS if row.get(name) is not None), None)
    day = to_day_key(raw_date)
    if day is None:
        raise MalformedDataError(
            "Price row has no parseable date",
            raw_data=str(row)[:100],
            expected_format="ISO date or epoch timestamp",
        )

    close = parse_number(row.get("close"))
    if close is None:
        raise MalformedDataError(
            f"Price row for {day} has invalid close: {row.get('close')!r}",
            raw_data=str(row)[:100],
            expected_format="finite number",
        )

    return PricePoint(
        date=day,
        close=close,
        high=parse_number(row.get("high")),
        low=parse_number(row.get("low")),
        volume=parse_number(row.get("volume")),
    )
