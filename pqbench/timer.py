"""Wall-clock stopwatch with whole-unit readings."""

from __future__ import annotations

import time
from enum import Enum
from typing import Callable

_NANOS_PER = {
    "seconds": 1_000_000_000,
    "millis": 1_000_000,
    "micros": 1_000,
}


class TimeUnit(Enum):
    """Unit in which an elapsed time is reported."""

    SECONDS = "seconds"
    MILLISECONDS = "millis"
    MICROSECONDS = "micros"


def _truncate(nanos: int, scale: int) -> float:
    whole = abs(nanos) // scale
    return float(whole if nanos >= 0 else -whole)


class Timer:
    """Stopwatch started on creation; readings are truncated to whole units.

    ``clock`` must return a monotonic time in integer nanoseconds.
    """

    def __init__(self, clock: Callable[[], int] = time.perf_counter_ns) -> None:
        self._clock = clock
        self._start = clock()
        self._end = self._start

    def reset(self) -> None:
        """Start timing again from now."""
        self._start = self._clock()
        self._end = self._start

    def stop(self) -> None:
        """Record the end of the measured interval."""
        self._end = self._clock()

    def stop_and_measure(self, unit: TimeUnit) -> float:
        """Stop the timer and return the elapsed time in ``unit``."""
        self.stop()
        return _truncate(self._end - self._start, _NANOS_PER[TimeUnit(unit).value])

    def millis(self) -> float:
        """Elapsed whole milliseconds between the last reset and stop."""
        return _truncate(self._end - self._start, _NANOS_PER["millis"])

    def micros(self) -> float:
        """Elapsed whole microseconds between the last reset and stop."""
        return _truncate(self._end - self._start, _NANOS_PER["micros"])

    def seconds(self) -> float:
        """Elapsed whole seconds between the last reset and stop."""
        return _truncate(self._end - self._start, _NANOS_PER["seconds"])

    def __enter__(self) -> Timer:
        self.reset()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()