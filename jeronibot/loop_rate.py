"""Fixed-rate loop pacing."""

from __future__ import annotations

import time

_ONE_SECOND_MS = 1000


class LoopRate:
    """Sleep just long enough to keep a loop running at a given frequency."""

    def __init__(self, frequency: float) -> None:
        hertz = int(frequency)
        if hertz <= 0:
            raise ValueError("LoopRate: invalid frequency specified")
        self.period = (_ONE_SECOND_MS // hertz) / _ONE_SECOND_MS
        self._prev = time.monotonic()

    def sleep(self) -> None:
        """Sleep for what remains of the period since the previous call."""
        now = time.monotonic()
        work_time = now - self._prev
        if work_time < self.period:
            time.sleep(self.period - work_time)
        self._prev = time.monotonic()