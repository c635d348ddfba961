"""Per-emitter logger façade.

Purpose
-------
Expose one method per severity that starts a new line and returns the
:class:`~lib_log_line.line.LoggerLine` for chaining, while enforcing that a
line is emitted before the next one starts.

Contents
--------
* :class:`Logger` - the façade application code calls.

System Role
-----------
Loggers are normally handed out by :meth:`LogManager.get_logger`, which
wires them to the manager's destinations and queue. A logger constructed
directly owns a single console (or buffer, with ``keep_lines``) destination
and writes to it without queueing.

Examples
--------
>>> log = Logger(keep_lines=True, level_prefix=True)
>>> log.info().h2("Header").emit("Styled message")
>>> log.lines
['[INFO]    Header Styled message']
>>> log.debug("suppressed").emit()
>>> len(log.lines)
1
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Sequence

from lib_log_line.adapters.buffer import BufferDestination
from lib_log_line.adapters.clock import SystemClock
from lib_log_line.adapters.console import ConsoleDestination
from lib_log_line.application.ports import ClockPort, DestinationPort, LineDispatcher
from lib_log_line.application.use_cases.transport_line import (
    DEFAULT_TAB_SIZE,
    TransportLine,
    TransportLineConfig,
)
from lib_log_line.domain.errors import LineNotEmittedError
from lib_log_line.domain.levels import LogLevel, is_enabled, to_rank
from lib_log_line.domain.options import ShowOptions, TimePrefix, is_valid_time_prefix
from lib_log_line.domain.parts import FinalizedLine
from lib_log_line.domain.styles import StyleRule, StyleTable
from lib_log_line.domain.timer import AppTimer
from lib_log_line.line import LoggerLine


class _DirectDispatcher(LineDispatcher):
    """Write straight to the destination; used by standalone loggers."""

    def dispatch(self, destination: DestinationPort, line: FinalizedLine) -> None:
        destination.write(line)


class Logger:
    """Start lines at a severity and guard the one-open-line rule.

    Parameters
    ----------
    level:
        Initial threshold as name, rank, or numeric string; invalid values
        fall back to ``info``.
    level_prefix:
        Prepend the padded ``[LEVEL]`` column.
    time_prefix:
        ``"local"``, ``"utc"``, ``"elapsed"`` or ``False``.
    tab_size:
        Indentation unit for :meth:`LoggerLine.tab`.
    keep_lines:
        Standalone loggers write to a :class:`BufferDestination` instead of
        the console.
    colorize:
        Enable ANSI styling on the style table this logger creates.
    styles:
        Overrides merged over the default style set.
    style:
        Pre-built style table shared with other loggers; ``styles`` and
        ``colorize`` are ignored when given.
    destinations:
        Destinations to fan out to; defaults to one console or buffer.
    dispatcher:
        Hand-off used on emit; defaults to writing directly.
    show:
        Full decoration set; overrides ``level_prefix`` and ``time_prefix``.
    """

    def __init__(
        self,
        *,
        level: Any = LogLevel.INFO,
        level_prefix: bool = False,
        time_prefix: TimePrefix = False,
        tab_size: int = DEFAULT_TAB_SIZE,
        keep_lines: bool = False,
        colorize: bool = False,
        styles: Mapping[str, StyleRule | Mapping[str, Any]] | None = None,
        style: StyleTable | None = None,
        timer: AppTimer | None = None,
        clock: ClockPort | None = None,
        emitter: str | None = None,
        req_id: str | None = None,
        sid: str | None = None,
        destinations: Sequence[DestinationPort] | None = None,
        dispatcher: LineDispatcher | None = None,
        show: ShowOptions | None = None,
    ) -> None:
        resolved = to_rank(level)
        self._threshold = resolved if resolved is not None else LogLevel.INFO
        self._style = style if style is not None else StyleTable(styles, enabled=colorize)
        self._timer = timer if timer is not None else AppTimer()
        self._clock = clock if clock is not None else SystemClock()
        if show is None:
            show = ShowOptions(
                timestamp=time_prefix if is_valid_time_prefix(time_prefix) else False,
                level=bool(level_prefix),
            )
        self._show = show
        self._tab_size = tab_size if tab_size >= 1 else DEFAULT_TAB_SIZE
        if destinations is None:
            destinations = [BufferDestination() if keep_lines else ConsoleDestination()]
        self._destinations: tuple[DestinationPort, ...] = tuple(destinations)
        self._dispatcher = dispatcher if dispatcher is not None else _DirectDispatcher()
        transports = [
            TransportLine(
                TransportLineConfig(
                    destination=destination,
                    style=self._style,
                    show=self._show,
                    level_threshold=self._threshold,
                    tab_size=self._tab_size,
                ),
                timer=self._timer,
                clock=self._clock,
                dispatcher=self._dispatcher,
            )
            for destination in self._destinations
        ]
        self._line = LoggerLine(transports, emitter=emitter, req_id=req_id, sid=sid)

    @property
    def style(self) -> StyleTable:
        return self._style

    @property
    def timer(self) -> AppTimer:
        return self._timer

    @property
    def show(self) -> ShowOptions:
        return self._show

    @property
    def destinations(self) -> tuple[DestinationPort, ...]:
        return self._destinations

    @property
    def line(self) -> LoggerLine:
        """Return the line handle without starting a new line."""

        return self._line

    @property
    def emitter(self) -> str | None:
        return self._line.context.emitter

    @property
    def level_threshold(self) -> LogLevel:
        return self._threshold

    def set_level_threshold(self, level: Any) -> "Logger":
        """Change the threshold; invalid input keeps the previous one."""

        resolved = to_rank(level)
        if resolved is not None:
            self._threshold = resolved
            self._line.set_level_threshold(resolved)
        return self

    def is_enabled_for(self, level: Any) -> bool:
        """Return ``True`` when a line at ``level`` would reach any destination."""

        resolved = to_rank(level)
        if resolved is None or resolved is LogLevel.SKIP:
            return False
        if not is_enabled(resolved, self._threshold):
            return False
        return any(destination.accepts(resolved) for destination in self._destinations)

    def trace(self, *args: Any) -> LoggerLine:
        return self._start(LogLevel.TRACE, args)

    def debug(self, *args: Any) -> LoggerLine:
        return self._start(LogLevel.DEBUG, args)

    def verbose(self, *args: Any) -> LoggerLine:
        return self._start(LogLevel.VERBOSE, args)

    def info(self, *args: Any) -> LoggerLine:
        return self._start(LogLevel.INFO, args)

    def warn(self, *args: Any) -> LoggerLine:
        return self._start(LogLevel.WARN, args)

    def error(self, *args: Any) -> LoggerLine:
        return self._start(LogLevel.ERROR, args)

    def skip(self, *args: Any) -> LoggerLine:
        """Start a line that is never written."""

        return self._start(LogLevel.SKIP, args)

    def _start(self, level: LogLevel, args: Iterable[Any]) -> LoggerLine:
        if not self._line.is_empty():
            raise LineNotEmittedError(self._line.parts_as_string())
        self._line.clear()
        self._line.set_level(level)
        self._line.set_initial_string(*args)
        return self._line

    @property
    def lines(self) -> list[str]:
        """Return the lines captured by the first buffer destination."""

        buffer = self._buffer()
        return buffer.lines if buffer is not None else []

    def clear_lines(self) -> None:
        buffer = self._buffer()
        if buffer is not None:
            buffer.clear()

    def _buffer(self) -> BufferDestination | None:
        for destination in self._destinations:
            if isinstance(destination, BufferDestination):
                return destination
        return None


__all__ = ["Logger"]
