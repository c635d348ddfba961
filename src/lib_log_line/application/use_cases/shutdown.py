"""Shutdown orchestration for the destination set.

Purpose
-------
Provide a unified shutdown routine that drains the pending queue, flushes
every destination, and then stops them.
"""

from __future__ import annotations

from typing import Awaitable, Callable, Iterable

from lib_log_line.application.ports import DestinationPort


def create_shutdown(
    *,
    destinations: Callable[[], Iterable[DestinationPort]],
    flush_queue: Callable[[], None] | None = None,
) -> Callable[[], Awaitable[None]]:
    """Return an async callable performing the shutdown sequence.

    ``destinations`` is evaluated when the shutdown runs so destinations added
    after wiring are included.
    """

    async def shutdown() -> None:
        """Drain pending lines, flush destinations, and stop them."""
        if flush_queue is not None:
            flush_queue()
        active = list(destinations())
        for destination in active:
            await destination.flush()
        for destination in active:
            await destination.stop()

    return shutdown


__all__ = ["create_shutdown"]
