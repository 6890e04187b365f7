"""Tests for repeating timers."""

import pytest

from block_bite.timers import RepeatingTimer


class TestRepeatingTimer:
    def test_invalid_duration(self):
        with pytest.raises(ValueError, match="positive"):
            RepeatingTimer(0)

    def test_negative_delta(self):
        timer = RepeatingTimer(1.0)
        with pytest.raises(ValueError, match="non-negative"):
            timer.tick(-0.1)

    def test_fires_when_period_elapses(self):
        timer = RepeatingTimer(1.0)
        assert not timer.tick(0.5)
        assert not timer.tick(0.25)
        assert timer.tick(0.25)
        assert timer.elapsed == pytest.approx(0.0)

    def test_remainder_carries_over(self):
        timer = RepeatingTimer(1.0)
        assert timer.tick(1.25)
        assert timer.elapsed == pytest.approx(0.25)
        assert timer.tick(0.75)

    def test_long_frame_fires_once(self):
        timer = RepeatingTimer(1.0)
        assert timer.tick(3.5)
        assert timer.elapsed == pytest.approx(0.5)
        assert not timer.tick(0.25)

    def test_reset(self):
        timer = RepeatingTimer(1.0)
        timer.tick(0.75)
        timer.reset()
        assert not timer.tick(0.5)

    def test_thirds_of_a_period_fire_exactly(self):
        timer = RepeatingTimer(0.15)
        fired = [timer.tick(0.05) for _ in range(300)]
        assert fired.count(True) == 100
        assert fired[2::3] == [True] * 100
        assert timer.elapsed == 0.0

    def test_uneven_deltas_sum_to_period(self):
        timer = RepeatingTimer(0.15)
        assert not timer.tick(0.1)
        assert timer.tick(0.05)
        assert timer.elapsed == 0.0

    def test_sub_nanosecond_duration_rejected(self):
        with pytest.raises(ValueError, match="positive"):
            RepeatingTimer(1e-12)
