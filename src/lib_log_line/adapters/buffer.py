"""In-memory destination collecting rendered lines.

The buffer is the read interface for tests and for hosts that want to
inspect output (``keep_lines``). It renders with colour when the style table
is enabled so callers can replay the lines on a terminal later.
"""

from __future__ import annotations

from lib_log_line.adapters.base import BaseDestination
from lib_log_line.domain.options import DestinationConfig


class BufferDestination(BaseDestination):
    """Append every written line to an ordered list.

    Examples
    --------
    >>> sink = BufferDestination()
    >>> sink.write("one")
    >>> sink.write("two")
    >>> sink.lines
    ['one', 'two']
    >>> sink.clear()
    >>> sink.lines
    []
    """

    kind = "buffer"
    color_capable = True

    def __init__(self, config: DestinationConfig | None = None) -> None:
        super().__init__(config)
        self._lines: list[str] = []

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    def clear(self) -> None:
        self._lines.clear()

    def _write_text(self, text: str) -> None:
        self._lines.append(text)


__all__ = ["BufferDestination"]
