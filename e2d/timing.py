"""Frame clock for the game loop."""

from __future__ import annotations

import time
from typing import Callable, Optional

_FRAME_INTERVAL_MS = 15
_SLEEP_TARGET_MS = 16


def _ms(us: int) -> int:
    return int(us / 1000)


class Clock:
    """Tracks game start, current and previous frame times at microsecond resolution.

    ``now`` is a callable returning seconds; it defaults to ``time.monotonic``.
    """

    def __init__(self, now: Optional[Callable[[], float]] = None):
        self._source = now or time.monotonic
        self._start = 0
        self._now = 0
        self._last = 0
        self._fixed = 0
        self._interval_ms = _FRAME_INTERVAL_MS

    def _read(self) -> int:
        return int(round(self._source() * 1_000_000))

    def total_time(self) -> float:
        """Seconds since the clock was started."""
        return (self._now - self._start) / 1_000_000

    def total_time_ms(self) -> int:
        return _ms(self._now - self._start)

    def delta_time(self) -> float:
        """Seconds between the previous frame and now."""
        return (self._now - self._last) / 1_000_000

    def delta_time_ms(self) -> int:
        return _ms(self._now - self._last)

    def start(self) -> None:
        self._start = self._fixed = self._last = self._now = self._read()
        self._interval_ms = _FRAME_INTERVAL_MS

    def is_ready(self) -> bool:
        """True once more than one frame interval has passed."""
        return self._interval_ms < _ms(self._now - self._fixed)

    def update_now(self) -> None:
        self._now = self._read()

    def update_last(self) -> None:
        self._fixed += self._interval_ms * 1000
        self._last = self._now
        self._now = self._read()

    def reset(self) -> None:
        self._last = self._fixed = self._now = self._read()

    def sleep_duration(self) -> float:
        """Seconds the loop should sleep before the next frame, or 0."""
        wait_ms = _SLEEP_TARGET_MS - _ms(self._now - self._fixed)
        return wait_ms / 1000 if wait_ms > 1 else 0.0

    def sleep(self) -> None:
        duration = self.sleep_duration()
        if duration > 0:
            time.sleep(duration)


_DEFAULT_CLOCK = Clock()


def default_clock() -> Clock:
    """The process-wide clock."""
    return _DEFAULT_CLOCK