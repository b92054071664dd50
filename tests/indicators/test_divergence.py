"""Tests for RSI divergence detection"""

from stockta_app.data.models import SignalKind
from stockta_app.data.series import TemporalSeries
from stockta_app.indicators.divergence import detect_divergences, is_pivot_high, is_pivot_low


def rsi_on(prices, values):
    return TemporalSeries.from_pairs((p.date, v) for p, v in zip(prices, values))


class TestPivots:
    """Test pivot detection"""

    def test_flat_bottom_takes_right_bar(self):
        """Test only the right bar of a flat bottom is a pivot low"""
        values = [50, 30, 30, 50]
        assert not is_pivot_low(values, 1, 1, 1)
        assert is_pivot_low(values, 2, 1, 1)

    def test_flat_top_takes_right_bar(self):
        """Test only the right bar of a flat top is a pivot high"""
        values = [10, 40, 40, 10]
        assert not is_pivot_high(values, 1, 1, 1)
        assert is_pivot_high(values, 2, 1, 1)

    def test_edges_are_never_pivots(self):
        """Test bars without a full lookback on either side"""
        values = [10, 5, 10]
        assert not is_pivot_low(values, 0, 1, 1)
        assert not is_pivot_low(values, 2, 1, 1)
        assert is_pivot_low(values, 1, 1, 1)


class TestDivergences:
    """Test regular bullish and bearish divergence"""

    def test_bull_and_bear(self, make_prices):
        """Test lower low with higher RSI, higher high with lower RSI"""
        lows = [105, 100, 105, 95, 105, 105, 105]
        highs = [100, 100, 110, 100, 100, 115, 100]
        prices = make_prices([100] * 7, highs=highs, lows=lows)
        rsi = rsi_on(prices, [50, 30, 40, 35, 36, 38, 37])

        signals = detect_divergences(rsi, prices, 1, 1)

        assert [(s.date, s.kind, s.anchor_value) for s in signals] == [
            (prices[3].date, SignalKind.BULL_DIVERGENCE, 35),
            (prices[5].date, SignalKind.BEAR_DIVERGENCE, 38),
        ]

    def test_compares_with_most_recent_pivot(self, make_prices):
        """Test each pivot is compared with the previous pivot only"""
        lows = [120, 100, 120, 80, 120, 90, 120]
        prices = make_prices([110] * 7, highs=[130] * 7, lows=lows)
        rsi = rsi_on(prices, [50, 20, 60, 30, 60, 25, 60])

        signals = detect_divergences(rsi, prices, 1, 1)

        assert [(s.date, s.kind) for s in signals] == [(prices[3].date, SignalKind.BULL_DIVERGENCE)]

    def test_falls_back_to_close(self, make_prices):
        """Test closes stand in for missing lows"""
        prices = make_prices([105, 100, 105, 95, 105])
        rsi = rsi_on(prices, [50, 30, 40, 35, 45])

        signals = detect_divergences(rsi, prices, 1, 1)

        assert [s.kind for s in signals] == [SignalKind.BULL_DIVERGENCE]

    def test_no_divergence_when_rsi_confirms(self, make_prices):
        """Test a lower low with a lower RSI is not a divergence"""
        prices = make_prices([105, 100, 105, 95, 105])
        rsi = rsi_on(prices, [50, 30, 40, 25, 45])
        assert detect_divergences(rsi, prices, 1, 1) == ()

    def test_short_series(self, make_prices):
        """Test a series shorter than both lookbacks yields nothing"""
        prices = make_prices([1, 2, 3])
        assert detect_divergences(rsi_on(prices, [1, 2, 3]), prices) == ()
