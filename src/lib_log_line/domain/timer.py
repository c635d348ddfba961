"""Monotonic application timer feeding elapsed prefixes and annotations."""

from __future__ import annotations

import time
from dataclasses import dataclass

Microseconds = float
Milliseconds = float


@dataclass(slots=True, frozen=True)
class TimerReading:
    """Elapsed milliseconds since start (``total``) and since the last reset."""

    total: Milliseconds
    interval: Milliseconds


@dataclass(slots=True, frozen=True)
class TimerStrings:
    """:class:`TimerReading` rendered with three decimals."""

    total: str
    interval: str


def format_milliseconds(value: Milliseconds) -> str:
    """Render ``value`` with exactly three decimals.

    Examples
    --------
    >>> format_milliseconds(1.2344)
    '1.234'
    """

    return f"{value:.3f}"


class AppTimer:
    """Measure elapsed time against a monotonic microsecond clock.

    Subclasses may override :meth:`now` to drive the timer deterministically.

    Examples
    --------
    >>> timer = AppTimer()
    >>> reading = timer.measure()
    >>> reading.total >= 0 and reading.interval >= 0
    True
    """

    def __init__(self) -> None:
        self._start_time: Microseconds = self.now()
        self._last_measurement: Microseconds = self._start_time

    def now(self) -> Microseconds:
        """Return the current monotonic time in microseconds."""

        return time.perf_counter_ns() / 1000

    @property
    def start_time(self) -> Microseconds:
        return self._start_time

    def reset_all(self) -> "AppTimer":
        """Restart both the total and interval measurements."""

        self._start_time = self.now()
        self._last_measurement = self._start_time
        return self

    def reset_interval(self) -> "AppTimer":
        """Restart only the interval measurement."""

        self._last_measurement = self.now()
        return self

    def measure(self, *, reset_interval: bool = True) -> TimerReading:
        """Return the current reading, restarting the interval unless told not to."""

        now = self.now()
        reading = TimerReading(
            total=(now - self._start_time) / 1000,
            interval=(now - self._last_measurement) / 1000,
        )
        if reset_interval:
            self._last_measurement = now
        return reading

    def measure_formatted(self, *, reset_interval: bool = True) -> TimerStrings:
        """Return :meth:`measure` rendered through :func:`format_milliseconds`."""

        reading = self.measure(reset_interval=reset_interval)
        return TimerStrings(total=format_milliseconds(reading.total), interval=format_milliseconds(reading.interval))


__all__ = ["AppTimer", "Microseconds", "Milliseconds", "TimerReading", "TimerStrings", "format_milliseconds"]
