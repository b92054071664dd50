"""Tests for display resampling"""

from stockta_app.indicators.resample import resample


class TestResample:
    """Test point-count reduction"""

    def test_keeps_every_step_and_last(self):
        """Test the stride and that the last point is kept"""
        assert resample(list(range(10)), 4) == [0, 3, 6, 9]
        assert resample(list(range(11)), 4) == [0, 3, 6, 9, 10]

    def test_short_input_unchanged(self):
        """Test input at or under the target is returned as is"""
        assert resample([1, 2, 3], 3) == [1, 2, 3]
        assert resample((), 5) == []

    def test_tuple_input(self):
        """Test any sequence is accepted and a list returned"""
        result = resample(tuple(range(100)), 50)
        assert isinstance(result, list)
        assert result[0] == 0
        assert result[-1] == 99
        assert len(result) == 51
