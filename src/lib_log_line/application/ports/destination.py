"""Destination port describing where finalized lines go.

Purpose
-------
Define the capability set shared by every destination (console, buffer,
file, custom) so the line builder and manager depend on a narrow protocol
rather than on concrete adapters.

Contents
--------
* :class:`DestinationPort` - runtime-checkable protocol covering readiness,
  threshold filtering, writing, and teardown.

System Role
-----------
Referenced (not owned) by line builders during fan-out; owned by the
:class:`~lib_log_line.manager.LogManager`.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from lib_log_line.domain.levels import LogLevel
from lib_log_line.domain.parts import FinalizedLine


@runtime_checkable
class DestinationPort(Protocol):
    """Sink receiving fully composed lines."""

    @property
    def id(self) -> str: ...

    @property
    def name(self) -> str: ...

    @property
    def level_threshold(self) -> LogLevel: ...

    @property
    def supports_color(self) -> bool: ...

    @property
    def colorize(self) -> bool:
        """Return ``True`` when styled fragments should carry ANSI codes."""

    @property
    def ready(self) -> bool: ...

    def set_level_threshold(self, level: object) -> None:
        """Change the threshold; invalid input leaves it unchanged."""

    def accepts(self, level: LogLevel) -> bool: ...

    async def open(self) -> None:
        """Acquire the underlying resource and mark the destination ready."""

    def clear(self) -> None: ...

    def write(self, line: FinalizedLine | str) -> None:
        """Render ``line`` for this destination and deliver it."""

    async def flush(self) -> None: ...

    async def stop(self) -> None: ...

    async def end(self) -> None: ...


__all__ = ["DestinationPort"]
