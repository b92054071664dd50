"""Tests for calendar-day utilities."""

from datetime import date, datetime, timedelta, timezone

import pytest

from stockta_app.utils.time import (
    days_in_range,
    format_display_date,
    month_key,
    to_day_key,
    week_key,
    year_key,
)


class TestToDayKey:
    """Test timestamp to day-key conversion."""

    def test_date_passthrough(self):
        assert to_day_key(date(2024, 5, 1)) == date(2024, 5, 1)

    def test_aware_datetime_uses_utc_day(self):
        """Test an aware datetime is keyed by its UTC calendar day."""
        bangkok = timezone(timedelta(hours=7))
        value = datetime(2024, 5, 2, 3, 0, tzinfo=bangkok)
        assert to_day_key(value) == date(2024, 5, 1)

    def test_naive_datetime(self):
        assert to_day_key(datetime(2024, 5, 1, 23, 59)) == date(2024, 5, 1)

    @pytest.mark.parametrize("value", [
        "2024-05-01",
        "2024-05-01T16:00:00Z",
        "2024-05-01T16:00:00+00:00",
        1714579200,
        1714579200000,
        "1714579200000",
    ])
    def test_supported_shapes(self, value):
        """Test every supported shape of 2024-05-01."""
        assert to_day_key(value) == date(2024, 5, 1)

    @pytest.mark.parametrize("value", [None, True, "", "   ", "yesterday", "2024-13-40", [2024, 5, 1]])
    def test_unparseable(self, value):
        """Test unparseable values return None."""
        assert to_day_key(value) is None

    def test_same_day_different_times(self):
        """Test two timestamps on the same UTC day share a key."""
        assert to_day_key("2024-05-01T00:00:01Z") == to_day_key("2024-05-01T23:59:59Z")


class TestPeriodKeys:
    """Test bucket keys."""

    def test_week_key_iso(self):
        """Test ISO week numbering across the year boundary."""
        assert week_key(date(2024, 1, 1)) == "2024-W01"
        assert week_key(date(2024, 12, 30)) == "2025-W01"
        assert week_key(date(2021, 1, 3)) == "2020-W53"

    def test_month_and_year_keys(self):
        assert month_key(date(2024, 3, 9)) == "2024-03"
        assert year_key(date(2024, 3, 9)) == "2024"


class TestDisplayHelpers:
    """Test display-only helpers."""

    def test_format_display_date(self):
        """Test the default label format."""
        assert format_display_date(date(2024, 1, 5)) == "05 Jan 2024"
        assert format_display_date(date(2024, 1, 5), "%Y/%m/%d") == "2024/01/05"

    def test_days_in_range(self):
        """Test inclusive calendar day counts."""
        assert days_in_range(date(2024, 1, 1), date(2024, 1, 1)) == 1
        assert days_in_range(date(2024, 1, 1), date(2024, 12, 31)) == 366
        assert days_in_range(date(2024, 1, 2), date(2024, 1, 1)) == 0
