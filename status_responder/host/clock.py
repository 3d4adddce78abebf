"""Wall-clock source."""

import time

from .interfaces import ClockPort


class SystemClockService(ClockPort):
    """Clock reading the system wall time at nanosecond resolution."""

    def clock_now_ns(self) -> int:
        return time.time_ns()
