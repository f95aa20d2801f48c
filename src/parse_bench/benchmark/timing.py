"""Wall clock and CPU time measurement.

CPU time is read in clock ticks and converted to nanoseconds with the
clock's tick rate. A clock that reports no tick rate yields zero CPU time
instead of an error.
"""

import os
import time
from typing import Callable, TypeVar

from parse_bench.models import NANOS_PER_SECOND, TimingSample

T = TypeVar("T")

CPU_CLOCKS = ("process", "ticks")


def clock_ticks_per_second() -> int:
    """Return the rate of the ``os.times`` process clock, or 0 if unknown."""
    try:
        ticks = os.sysconf("SC_CLK_TCK")
    except (AttributeError, ValueError, OSError):
        return 0
    return max(ticks, 0)


def os_times_clock(ticks_per_second: int) -> Callable[[], int]:
    """Return a clock reading process CPU time (user + system) in ticks.

    The tick rate is fixed when the clock is created, so reading the clock
    does not query the system.
    """
    def read() -> int:
        times = os.times()
        return round((times.user + times.system) * ticks_per_second)
    return read


class Measurer:
    """Time a unit of work with a monotonic wall clock and a CPU clock.

    Args:
        wall_clock: Monotonic clock returning nanoseconds.
        cpu_clock: Process CPU clock returning ticks.
        cpu_ticks_per_second: Tick rate of ``cpu_clock``; 0 if unknown.
    """

    def __init__(
        self,
        wall_clock: Callable[[], int] = time.perf_counter_ns,
        cpu_clock: Callable[[], int] = time.process_time_ns,
        cpu_ticks_per_second: int = NANOS_PER_SECOND,
    ):
        self.wall_clock = wall_clock
        self.cpu_clock = cpu_clock
        self.cpu_ticks_per_second = cpu_ticks_per_second

    @classmethod
    def from_name(cls, name: str) -> "Measurer":
        """Create a measurer for one of ``CPU_CLOCKS``.

        ``process`` reads ``time.process_time_ns``. ``ticks`` reads the
        coarse ``os.times`` clock scaled by ``SC_CLK_TCK``.
        """
        if name == "process":
            return cls()
        if name == "ticks":
            rate = clock_ticks_per_second()
            return cls(cpu_clock=os_times_clock(rate), cpu_ticks_per_second=rate)
        raise ValueError(f"Unknown CPU clock '{name}', expected one of {CPU_CLOCKS}")

    def measure(self, work: Callable[[], T]) -> tuple[T, TimingSample]:
        """Run ``work`` once and time it.

        Args:
            work: Callable to time. Failures should be reported through its
                return value so the elapsed time is still captured.

        Returns:
            Tuple of (value returned by work, TimingSample).
        """
        cpu_start = self.cpu_clock()
        wall_start = self.wall_clock()
        value = work()
        cpu_end = self.cpu_clock()
        wall_end = self.wall_clock()

        return value, TimingSample(
            wall_nanos=max(wall_end - wall_start, 0),
            cpu_nanos=self._ticks_to_nanos(max(cpu_end - cpu_start, 0)),
        )

    def _ticks_to_nanos(self, ticks: int) -> int:
        if self.cpu_ticks_per_second <= 0:
            return 0
        return ticks * NANOS_PER_SECOND // self.cpu_ticks_per_second
