"""Repeating timers that gate per-frame operations."""

from __future__ import annotations

_NS_PER_SECOND = 1_000_000_000


def _to_ns(seconds: float) -> int:
    return round(seconds * _NS_PER_SECOND)


class RepeatingTimer:
    """Fires on frames where at least one full period has elapsed.

    Leftover time carries into the next period. A frame spanning several
    periods fires once. Time is counted in integer nanoseconds so that
    frame deltas summing to exactly one period always fire.
    """

    def __init__(self, duration: float) -> None:
        self._duration_ns = _to_ns(duration)
        if self._duration_ns <= 0:
            raise ValueError("Timer duration must be positive.")
        self.duration = duration
        self._elapsed_ns = 0

    @property
    def elapsed(self) -> float:
        """Seconds accumulated towards the next period."""
        return self._elapsed_ns / _NS_PER_SECOND

    def tick(self, dt: float) -> bool:
        """Advance by *dt* seconds and report whether the timer fired."""
        if dt < 0:
            raise ValueError("Frame delta must be non-negative.")
        self._elapsed_ns += _to_ns(dt)
        if self._elapsed_ns < self._duration_ns:
            return False
        self._elapsed_ns %= self._duration_ns
        return True

    def reset(self) -> None:
        self._elapsed_ns = 0
