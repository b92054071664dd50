"""
Calendar-day semantics for price history.

This module converts the many timestamp shapes price providers emit into
one canonical join key, a UTC ``datetime.date``, and derives the period
keys used for weekly, monthly and yearly aggregation.
"""

import re
from datetime import date, datetime, timezone
from typing import Any, Optional

# Epoch values above this are milliseconds, below are seconds
EPOCH_MS_THRESHOLD = 1e12

DEFAULT_DISPLAY_FORMAT = "%d %b %Y"

_DIGITS = re.compile(r"^\d+$")


def _from_epoch(value: float) -> datetime:
    seconds = value / 1000.0 if value > EPOCH_MS_THRESHOLD else value
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


def to_day_key(value: Any) -> Optional[date]:
    """
    Convert a provider timestamp into the canonical calendar-day key.

    Accepts ``date``, ``datetime`` (naive values are treated as UTC),
    epoch seconds or milliseconds as numbers or digit strings, and ISO 8601
    strings.

    Args:
        value: Raw timestamp

    Returns:
        UTC calendar day, or None if the value cannot be interpreted
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()

    if isinstance(value, date):
        return value

    try:
        if isinstance(value, (int, float)):
            return _from_epoch(float(value)).date()

        if isinstance(value, str):
            trimmed = value.strip()
            if not trimmed:
                return None
            if _DIGITS.match(trimmed):
                return _from_epoch(float(trimmed)).date()
            # fromisoformat only accepts a trailing "Z" from 3.11 on
            parsed = datetime.fromisoformat(trimmed.replace("Z", "+00:00"))
            return to_day_key(parsed)
    except (ValueError, OverflowError, OSError):
        return None

    return None


def week_key(day: date) -> str:
    """ISO week bucket key, e.g. ``2024-W03``."""
    iso_year, iso_week, _ = day.isocalendar()
    return f"{iso_year}-W{iso_week:02d}"


def month_key(day: date) -> str:
    """Year-month bucket key, e.g. ``2024-01``."""
    return f"{day.year}-{day.month:02d}"


def year_key(day: date) -> str:
    """Year bucket key, e.g. ``2024``."""
    return f"{day.year}"


def format_display_date(day: date, fmt: str = DEFAULT_DISPLAY_FORMAT) -> str:
    """
    Format a canonical day key for display.

    Args:
        day: Canonical calendar day
        fmt: strftime format

    Returns:
        Display label; never used as a join key
    """
    return day.strftime(fmt)


def days_in_range(start: date, end: date) -> int:
    """
    Number of calendar days in an inclusive date range.

    Returns 0 when ``end`` precedes ``start``.
    """
    if end < start:
        return 0
    return (end - start).days + 1
