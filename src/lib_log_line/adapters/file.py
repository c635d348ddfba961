"""Append-mode file destination.

Purpose
-------
Persist one rendered, newline-terminated line per write to a configured
path, creating parent directories on open.

Contents
--------
* :class:`FileDestination` - buffers lines written before :meth:`open`
  completes or while the stream is not writable. Every later write and
  every :meth:`flush` retries them in order.

System Role
-----------
The only destination owning an OS resource; its :meth:`open` is the
suspension point the manager awaits during startup. Errors raised while
opening propagate to the manager, which drops the destination. Errors raised
while writing are logged and the affected lines stay buffered.
"""

from __future__ import annotations

import asyncio
import logging
from collections import deque
from pathlib import Path
from typing import TextIO

from lib_log_line.adapters.base import BaseDestination
from lib_log_line.domain.options import DestinationConfig

logger = logging.getLogger(__name__)


class FileDestination(BaseDestination):
    """Write plain-text lines to ``filename`` in append mode."""

    kind = "file"
    color_capable = False

    def __init__(self, config: DestinationConfig | None = None, *, filename: str | Path | None = None) -> None:
        if config is None:
            config = DestinationConfig(name=self.kind, filename=Path(filename) if filename else None)
        path = Path(filename) if filename else config.filename
        if path is None:
            raise ValueError("File destination requires a filename")
        super().__init__(config)
        self._path = path
        self._stream: TextIO | None = None
        self._writable = False
        self._pending: deque[str] = deque()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def writable(self) -> bool:
        return self._stream is not None and self._writable

    @property
    def pending(self) -> int:
        """Return the number of lines waiting for the stream."""

        return len(self._pending)

    async def open(self) -> None:
        """Create parent directories and open the file for appending.

        ``OSError`` raised here propagates to the caller.
        """

        self._stream = await asyncio.to_thread(self._open_stream)
        self._writable = True
        self._ready = True
        self._drain()

    def _open_stream(self) -> TextIO:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        return self._path.open("a", encoding="utf-8")

    def _write_text(self, text: str) -> None:
        self._pending.append(text)
        if self._stream is not None:
            self._writable = True
            self._drain()

    def _drain(self) -> None:
        stream = self._stream
        if stream is None:
            return
        while self._pending:
            try:
                stream.write(self._pending[0] + "\n")
            except OSError as exc:
                self._writable = False
                logger.warning("Writing to %s failed; %d line(s) buffered", self._path, len(self._pending), exc_info=exc)
                return
            self._pending.popleft()
        try:
            stream.flush()
        except OSError as exc:
            self._writable = False
            logger.warning("Flushing %s failed", self._path, exc_info=exc)

    async def flush(self) -> None:
        """Retry buffered lines and flush the stream."""

        if self._stream is None:
            return
        self._writable = True
        self._drain()

    async def end(self) -> None:
        """Flush what can be flushed, then close the stream."""

        await self.flush()
        stream, self._stream = self._stream, None
        if stream is not None:
            try:
                stream.close()
            except OSError as exc:
                logger.warning("Closing %s failed", self._path, exc_info=exc)
        if self._pending:
            logger.warning("Dropping %d unwritten line(s) for %s", len(self._pending), self._path)
            self._pending.clear()
        self._writable = False
        self._ready = False

    close = end


__all__ = ["FileDestination"]
