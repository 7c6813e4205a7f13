"""Fixed-period tick scheduling on top of a monotonic clock."""
from __future__ import annotations

import time
from typing import Callable

Clock = Callable[[], float]


class TickTimer:
    """Tracks when the next passive tick is due.

    The timer never sleeps; callers poll it once per loop iteration with the
    current time and receive ``True`` when at least one full period has
    elapsed since the previous tick.
    """

    def __init__(self, period: float, clock: Clock = time.monotonic) -> None:
        if period <= 0:
            raise ValueError("Tick period must be positive.")
        self._period = period
        self._clock = clock
        self._last_tick = clock()

    @property
    def period(self) -> float:
        return self._period

    def reset(self, now: float | None = None) -> None:
        """Restart the period from ``now`` (defaults to the clock)."""
        self._last_tick = self._clock() if now is None else now

    def poll(self, now: float | None = None) -> bool:
        """Return True and restart the period if a tick is due."""
        current = self._clock() if now is None else now
        if current - self._last_tick >= self._period:
            self._last_tick = current
            return True
        return False

    def remaining(self, now: float | None = None) -> float:
        """Return seconds until the next tick is due (never negative)."""
        current = self._clock() if now is None else now
        return max(0.0, self._period - (current - self._last_tick))
