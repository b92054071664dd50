"""Tests for RSI and RSI smoothing calculations"""

import math
from datetime import date, timedelta

import pytest

from stockta_app.data.series import TemporalSeries
from stockta_app.indicators.oscillator import (
    SmoothingType,
    calculate_rsi,
    calculate_rsi_smoothing,
    population_stdev,
)


class TestRSI:
    """Test Wilder RSI"""

    def test_seed_value(self, make_prices):
        """Test the first RSI uses simple averages of the first changes"""
        prices = make_prices([1, 2, 1])
        rsi = calculate_rsi(prices, 2)

        assert rsi.dates() == [prices[2].date]
        assert rsi.values() == [pytest.approx(50.0)]

    def test_wilder_smoothing(self, make_prices):
        """Test the recursive averages after the seed"""
        rsi = calculate_rsi(make_prices([1, 2, 1, 2]), 2)
        # avg_gain = (0.5 + 1) / 2, avg_loss = 0.5 / 2
        assert rsi.values()[-1] == pytest.approx(75.0)

    def test_monotonic_rise_is_100(self, make_prices):
        """Test RSI is 100 when there are no losses"""
        rsi = calculate_rsi(make_prices(range(1, 16)), 14)
        assert rsi.values() == [100.0]

    def test_monotonic_fall_is_0(self, make_prices):
        """Test RSI is 0 when there are no gains"""
        rsi = calculate_rsi(make_prices(range(30, 0, -1)), 14)
        assert all(v == 0.0 for v in rsi.values())

    def test_flat_series_is_100(self, make_prices):
        """Test a flat series has zero average loss"""
        rsi = calculate_rsi(make_prices([10.0] * 20), 14)
        assert all(v == 100.0 for v in rsi.values())

    def test_insufficient_history(self, make_prices):
        """Test RSI needs period + 1 closes"""
        assert len(calculate_rsi(make_prices(range(14)), 14)) == 0

    def test_bounded(self, wave_prices):
        """Test every RSI value is within [0, 100]"""
        rsi = calculate_rsi(wave_prices, 14)
        assert len(rsi) == len(wave_prices) - 14
        assert all(0.0 <= v <= 100.0 for v in rsi.values())
        assert rsi.first_date() == wave_prices[14].date


class TestPopulationStdev:
    """Test population standard deviation"""

    def test_divides_by_n(self):
        """Test the population formula, not the sample one"""
        assert population_stdev([2, 4, 4, 4, 5, 5, 7, 9]) == pytest.approx(2.0)

    def test_constant(self):
        assert population_stdev([3.0, 3.0]) == 0.0


class TestRSISmoothing:
    """Test the RSI smoothing overlay"""

    def setup_method(self):
        start = date(2024, 1, 1)
        self.rsi = TemporalSeries.from_pairs(
            (start + timedelta(days=i), v) for i, v in enumerate([10.0, 20.0, 30.0, 40.0])
        )

    def test_sma_with_bands(self):
        """Test SMA smoothing with population-stdev bands"""
        points = calculate_rsi_smoothing(self.rsi, lookback=2, mult=1.0)

        assert len(points) == 4
        assert points[0].smoothing is None
        assert points[0].upper is None
        assert (points[1].smoothing, points[1].upper, points[1].lower) == (15.0, 20.0, 10.0)
        assert (points[2].smoothing, points[2].upper, points[2].lower) == (25.0, 30.0, 20.0)
        assert [p.value for p in points] == [10.0, 20.0, 30.0, 40.0]

    def test_sma_only(self):
        """Test plain SMA smoothing has no bands"""
        points = calculate_rsi_smoothing(self.rsi, lookback=2, smoothing_type=SmoothingType.SMA)
        assert points[3].smoothing == 35.0
        assert points[3].upper is None
        assert points[3].lower is None

    def test_ema(self):
        """Test EMA smoothing from its string name"""
        points = calculate_rsi_smoothing(self.rsi, lookback=2, smoothing_type="EMA")
        # seed 15, then 30 * 2/3 + 15 / 3
        assert points[1].smoothing == pytest.approx(15.0)
        assert points[2].smoothing == pytest.approx(25.0)
        assert points[2].upper is None

    def test_unknown_type(self):
        """Test an unknown smoothing type is rejected"""
        with pytest.raises(ValueError):
            calculate_rsi_smoothing(self.rsi, smoothing_type="WMA")

    def test_empty_rsi(self):
        assert calculate_rsi_smoothing(TemporalSeries()) == ()

    def test_bands_bracket_smoothing(self, wave_prices):
        """Test bands stay ordered on real-looking data"""
        points = calculate_rsi_smoothing(calculate_rsi(wave_prices, 14), 14, 2.0)
        banded = [p for p in points if p.smoothing is not None]
        assert len(banded) == len(points) - 13
        for p in banded:
            assert p.lower <= p.smoothing <= p.upper
            assert not math.isnan(p.upper)
