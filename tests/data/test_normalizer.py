"""Tests for price row parsing and history normalization"""

import math
from datetime import date, datetime, timezone

import pytest

from stockta_app.data.normalizer import PriceHistoryNormalizer
from stockta_app.data.parsers import parse_number, parse_price_row
from stockta_app.errors import MalformedDataError, MissingDataError


class TestParseNumber:
    """Test numeric field parsing"""

    def test_numbers_and_numeric_strings(self):
        """Test ints, floats and numeric strings parse"""
        assert parse_number(5) == 5.0
        assert parse_number(2.5) == 2.5
        assert parse_number(" 3.25 ") == 3.25

    def test_rejects_non_finite_and_garbage(self):
        """Test NaN, infinity, booleans and text are rejected"""
        assert parse_number(float("nan")) is None
        assert parse_number(math.inf) is None
        assert parse_number("abc") is None
        assert parse_number(True) is None
        assert parse_number(None) is None
        assert parse_number([1]) is None


class TestParsePriceRow:
    """Test single row parsing"""

    def test_full_row(self):
        """Test all fields are parsed"""
        row = {"date": "2024-01-15", "close": 101.5, "high": 103.0, "low": 99.0, "volume": 12000}
        price = parse_price_row(row)
        assert price.date == date(2024, 1, 15)
        assert price.close == 101.5
        assert price.high == 103.0
        assert price.low == 99.0
        assert price.volume == 12000.0

    def test_optional_fields_absent(self):
        """Test high, low and volume may be missing"""
        price = parse_price_row({"date": "2024-01-15", "close": 10})
        assert price.high is None
        assert price.low is None
        assert price.volume is None

    def test_timestamp_field_and_epoch(self):
        """Test epoch milliseconds under the timestamp key"""
        ms = int(datetime(2024, 2, 1, 15, 30, tzinfo=timezone.utc).timestamp() * 1000)
        price = parse_price_row({"timestamp": ms, "close": 1.0})
        assert price.date == date(2024, 2, 1)

    def test_bad_optional_field_becomes_none(self):
        """Test a garbage high does not reject the row"""
        price = parse_price_row({"date": "2024-01-15", "close": 10, "high": "n/a"})
        assert price.high is None

    @pytest.mark.parametrize("row", [
        {"date": "2024-01-15", "close": float("nan")},
        {"date": "2024-01-15", "close": None},
        {"date": "2024-01-15"},
        {"date": "not a date", "close": 1.0},
        {"close": 1.0},
        ["2024-01-15", 1.0],
    ])
    def test_malformed_rows_raise(self, row):
        """Test rows without a usable date or close are rejected"""
        with pytest.raises(MalformedDataError):
            parse_price_row(row)


class TestPriceHistoryNormalizer:
    """Test history normalization"""

    def setup_method(self):
        self.normalizer = PriceHistoryNormalizer()

    def test_sorts_ascending(self):
        """Test rows are sorted by day"""
        rows = [
            {"date": "2024-01-03", "close": 3},
            {"date": "2024-01-01", "close": 1},
            {"date": "2024-01-02", "close": 2},
        ]
        result = self.normalizer.normalize(rows)
        assert [p.close for p in result.prices] == [1.0, 2.0, 3.0]
        assert result.success

    def test_drops_malformed_rows(self):
        """Test malformed rows are dropped and counted"""
        rows = [
            {"date": "2024-01-01", "close": 1},
            {"date": "2024-01-02", "close": "bad"},
            {"date": None, "close": 3},
            {"date": "2024-01-04", "close": 4},
        ]
        result = self.normalizer.normalize(rows)
        assert len(result.prices) == 2
        assert result.received == 4
        assert result.dropped == 2

    def test_deduplicates_by_calendar_day(self):
        """Test two timestamps on the same UTC day collapse, last one wins"""
        rows = [
            {"date": "2024-01-01T09:30:00Z", "close": 1},
            {"date": "2024-01-01T16:00:00Z", "close": 2},
            {"date": "2024-01-02", "close": 3},
        ]
        result = self.normalizer.normalize(rows)
        assert [p.close for p in result.prices] == [2.0, 3.0]
        assert result.duplicates == 1

    def test_all_rows_malformed(self):
        """Test a batch with nothing usable is unsuccessful, not an exception"""
        result = self.normalizer.normalize([{"close": 1}, {"date": "x"}])
        assert result.prices == ()
        assert not result.success

    def test_none_rows(self):
        """Test missing history raises MissingDataError"""
        with pytest.raises(MissingDataError):
            self.normalizer.normalize(None)
