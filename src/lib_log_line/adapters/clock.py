"""System clock adapter implementing :class:`ClockPort`."""

from __future__ import annotations

from datetime import datetime, timezone

from lib_log_line.application.ports.time import ClockPort


class SystemClock(ClockPort):
    """Return timezone-aware UTC timestamps from the host clock."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


__all__ = ["SystemClock"]
