"""Port used by line builders to hand finished lines to a destination."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from lib_log_line.domain.parts import FinalizedLine

from .destination import DestinationPort


@runtime_checkable
class LineDispatcher(Protocol):
    """Deliver ``line`` to ``destination`` now or once it becomes ready."""

    def dispatch(self, destination: DestinationPort, line: FinalizedLine) -> None: ...


__all__ = ["LineDispatcher"]
