"""Shared behaviour for destinations implementing :class:`DestinationPort`.

Purpose
-------
Hold the state every destination carries (identifier, threshold, readiness,
colour preference) so concrete adapters only implement how rendered text
reaches their sink.

Contents
--------
* :class:`BaseDestination` - template-method base; subclasses override
  :meth:`BaseDestination._write_text` and, when they own a resource,
  :meth:`BaseDestination.open` / :meth:`BaseDestination.end`.
"""

from __future__ import annotations

import itertools
from typing import Any, ClassVar

from lib_log_line.application.ports.destination import DestinationPort
from lib_log_line.domain.levels import LogLevel, is_enabled, to_rank
from lib_log_line.domain.options import DestinationConfig
from lib_log_line.domain.parts import FinalizedLine

_COUNTER = itertools.count(1)


class BaseDestination(DestinationPort):
    """Template for destinations; renders lines and tracks readiness."""

    kind: ClassVar[str] = "base"
    color_capable: ClassVar[bool] = False

    def __init__(self, config: DestinationConfig | None = None) -> None:
        self._config = config or DestinationConfig(name=self.kind)
        self._id = f"{self._config.name}:{next(_COUNTER)}"
        self._level_threshold = self._config.level_threshold
        self._ready = False

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._config.name

    @property
    def config(self) -> DestinationConfig:
        return self._config

    @property
    def level_threshold(self) -> LogLevel:
        return self._level_threshold

    @property
    def supports_color(self) -> bool:
        return self.color_capable

    @property
    def colorize(self) -> bool:
        return self.color_capable and self._config.stylize

    @property
    def ready(self) -> bool:
        return self._ready

    def set_level_threshold(self, level: Any) -> None:
        resolved = to_rank(level)
        if resolved is not None:
            self._level_threshold = resolved

    def accepts(self, level: LogLevel) -> bool:
        """Return ``True`` when ``level`` meets this destination's threshold."""

        return level is not LogLevel.SKIP and is_enabled(level, self._level_threshold)

    async def open(self) -> None:
        self._ready = True

    def clear(self) -> None:
        """Nothing to clear by default."""

    def render(self, line: FinalizedLine | str) -> str:
        """Return ``line`` as text, coloured when this destination colourises."""

        if isinstance(line, str):
            return line
        return line.render(colorize=self.colorize)

    def write(self, line: FinalizedLine | str) -> None:
        self._write_text(self.render(line))

    def _write_text(self, text: str) -> None:
        raise NotImplementedError

    async def flush(self) -> None:
        """Nothing buffered by default."""

    async def end(self) -> None:
        self._ready = False

    async def stop(self) -> None:
        await self.end()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id!r}, level_threshold={self._level_threshold.name}, ready={self._ready})"


__all__ = ["BaseDestination"]
