"""Per-destination line builder: the state machine behind every log line.

Purpose
-------
Accumulate the fragments of one logical line for a single destination,
decide whether the line is enabled against that destination's threshold,
assemble prefixes and suffixes on :meth:`TransportLine.emit`, and hand the
finalized line to a :class:`~lib_log_line.application.ports.LineDispatcher`.

Contents
--------
* :data:`DEFAULT_TAB_SIZE` - indentation unit used when none is configured.
* :class:`TransportLineConfig` - immutable wiring for one builder.
* :class:`LineContext` - request/session/emitter/action columns.
* :class:`TransportLine` - the builder itself.

System Role
-----------
:class:`~lib_log_line.line.LoggerLine` owns one builder per destination and
forwards every chained call to each of them, so suppressed destinations pay
nothing for formatting while enabled ones retain their fragments.

States
------
``Idle`` (no level, nothing retained) → ``Open/Disabled`` (level below the
effective threshold; appends are dropped) or ``Open/Enabled`` (appends are
retained) → ``Idle`` again after :meth:`TransportLine.emit`, whether or not
anything was written.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from datetime import timezone
from typing import Any

from lib_log_line.application.ports import ClockPort, DestinationPort, LineDispatcher
from lib_log_line.domain.levels import LogLevel, is_enabled, to_rank
from lib_log_line.domain.options import ShowOptions
from lib_log_line.domain.parts import FinalizedLine, MessagePart, level_prefix_part
from lib_log_line.domain.styles import StyleTable
from lib_log_line.domain.timer import AppTimer

logger = logging.getLogger(__name__)

DEFAULT_TAB_SIZE = 2

_CLOCK_FORMAT = "%H:%M:%S"


@dataclass(slots=True, frozen=True)
class TransportLineConfig:
    """Wiring for one :class:`TransportLine`.

    Attributes
    ----------
    destination:
        Destination receiving the finalized line; its own threshold is read
        live so :meth:`DestinationPort.set_level_threshold` takes effect on
        the next line.
    style:
        Style table shared by reference with the owning logger.
    show:
        Decorations added around the fragments.
    level_threshold:
        Logger-side threshold; the stricter of this and the destination
        threshold gates the line.
    tab_size:
        Indentation unit for :meth:`TransportLine.tab`.
    """

    destination: DestinationPort
    style: StyleTable
    show: ShowOptions = field(default_factory=ShowOptions)
    level_threshold: LogLevel = LogLevel.INFO
    tab_size: int = DEFAULT_TAB_SIZE


@dataclass(slots=True)
class LineContext:
    """Optional columns appended after the message when shown."""

    req_id: str | None = None
    sid: str | None = None
    emitter: str | None = None
    action: str | None = None


class TransportLine:
    """Builder for the line currently being composed for one destination.

    Examples
    --------
    >>> from lib_log_line.adapters import BufferDestination
    >>> from lib_log_line.domain import ShowOptions
    >>> sink = BufferDestination()
    >>> class Direct:
    ...     def dispatch(self, destination, line):
    ...         destination.write(line)
    >>> config = TransportLineConfig(destination=sink, style=StyleTable(), show=ShowOptions(level=True))
    >>> builder = TransportLine(config, timer=AppTimer(), clock=None, dispatcher=Direct())
    >>> builder.set_level("info")
    True
    >>> _ = builder.stylize("h2", "Header").plain("Styled message").emit()
    >>> sink.lines
    ['[INFO]    Header Styled message']
    """

    def __init__(
        self,
        config: TransportLineConfig,
        *,
        timer: AppTimer,
        clock: ClockPort | None,
        dispatcher: LineDispatcher,
    ) -> None:
        self._config = config
        self._timer = timer
        self._clock = clock
        self._dispatcher = dispatcher
        self._threshold = config.level_threshold
        self._level: LogLevel | None = None
        self._enabled = False
        self._indent: str | None = None
        self._parts: list[MessagePart] = []
        self._suffix: list[MessagePart] = []
        self._show_elapsed = False

    @property
    def destination(self) -> DestinationPort:
        return self._config.destination

    @property
    def level(self) -> LogLevel | None:
        return self._level

    @property
    def level_threshold(self) -> LogLevel:
        return self._threshold

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def tab_size(self) -> int:
        return self._config.tab_size

    def set_level(self, level: Any) -> bool:
        """Assign the line's severity and re-evaluate enablement.

        Invalid input leaves the current level untouched and returns ``False``.
        """

        resolved = to_rank(level)
        if resolved is None:
            return False
        self._level = resolved
        self._enabled = self._is_enabled(resolved)
        return True

    def set_level_threshold(self, level: Any) -> bool:
        resolved = to_rank(level)
        if resolved is None:
            return False
        self._threshold = resolved
        if self._level is not None:
            self._enabled = self._is_enabled(self._level)
        return True

    def _is_enabled(self, level: LogLevel) -> bool:
        if level is LogLevel.SKIP:
            return False
        destination_threshold = self._config.destination.level_threshold
        return is_enabled(level, self._threshold) and is_enabled(level, destination_threshold)

    def is_empty(self) -> bool:
        """Return ``True`` while no message fragment is retained."""

        return not self._parts

    def clear(self) -> "TransportLine":
        """Return to ``Idle``: drop fragments, suffixes, indent and level."""

        self._level = None
        self._enabled = False
        self._indent = None
        self._parts = []
        self._suffix = []
        self._show_elapsed = False
        return self

    def request_elapsed(self) -> "TransportLine":
        """Append the ``total (interval)`` annotation when the line is emitted."""

        if self._enabled:
            self._show_elapsed = True
        return self

    def tab(self, count: int = 1) -> "TransportLine":
        """Indent by ``count * tab_size - 1`` spaces; the join adds the last one."""

        if not self._enabled:
            return self
        if count <= 0:
            self._indent = None
            return self
        self._indent = " " * (count * self._config.tab_size - 1)
        return self

    def indent(self, value: int | str | None = None) -> "TransportLine":
        """Indent by ``value`` columns or by the literal string ``value``."""

        if not self._enabled:
            return self
        if isinstance(value, str):
            self._indent = value or None
            return self
        width = self._config.tab_size if value is None else int(value)
        self._indent = " " * (width - 1) if width > 0 else None
        return self

    def stylize(self, style: str | None, *args: Any) -> "TransportLine":
        """Append ``args`` as one fragment rendered with ``style``."""

        if self._enabled and args:
            self._parts.append(MessagePart(self._join(args), style))
        return self

    def plain(self, *args: Any) -> "TransportLine":
        return self.stylize(None, *args)

    def data(self, payload: Any) -> "TransportLine":
        """Append ``payload`` pretty-printed as JSON."""

        if self._enabled:
            self._parts.append(MessagePart(json.dumps(payload, indent=2, default=str)))
        return self

    def append_suffix(self, *args: Any) -> "TransportLine":
        if self._enabled and args:
            self._suffix.append(MessagePart(self._join(args), "_suffix"))
        return self

    def parts_as_string(self) -> str:
        """Return the retained fragments as plain text, indent included."""

        pieces = [] if self._indent is None else [self._indent]
        pieces.extend(part.text for part in self._parts)
        return " ".join(pieces)

    def emit(self, *args: Any, context: LineContext | None = None) -> FinalizedLine | None:
        """Finalize the line, hand it to the dispatcher, and return to ``Idle``.

        Returns the dispatched :class:`FinalizedLine`, or ``None`` when the
        line was disabled for this destination.
        """

        line: FinalizedLine | None = None
        if self._enabled and self._level is not None:
            self.plain(*args)
            line = self._finalize(self._level, context or LineContext())
            self._dispatcher.dispatch(self._config.destination, line)
        self.clear()
        return line

    def _finalize(self, level: LogLevel, context: LineContext) -> FinalizedLine:
        show = self._config.show
        style = self._config.style
        parts: list[MessagePart] = []
        time_prefix = self._time_prefix(show)
        if time_prefix is not None:
            parts.append(MessagePart(time_prefix, "_time_prefix"))
        if show.level:
            parts.append(level_prefix_part(level, style))
        if self._indent is not None:
            parts.append(MessagePart(self._indent))
        parts.extend(self._parts)
        for enabled, value, style_name in (
            (show.req_id, context.req_id, "_req_id"),
            (show.sid, context.sid, "_sid"),
            (show.emitter, context.emitter, "_emitter"),
            (show.action, context.action, "_action"),
        ):
            if enabled and value:
                parts.append(MessagePart(str(value), style_name))
        parts.extend(self._suffix)
        if self._show_elapsed:
            reading = self._timer.measure_formatted()
            parts.append(MessagePart(f"{reading.total} ({reading.interval})", "_elapsed"))
        return FinalizedLine(level=level, parts=tuple(parts), style=style, emitter=context.emitter)

    def _time_prefix(self, show: ShowOptions) -> str | None:
        mode = show.timestamp
        if mode == "elapsed":
            return self._timer.measure_formatted(reset_interval=False).total
        if mode not in ("local", "utc"):
            return None
        if self._clock is None:
            logger.debug("No clock configured; skipping %s time prefix", mode)
            return None
        stamp = self._clock.now()
        if mode == "utc":
            stamp = stamp.astimezone(timezone.utc)
        else:
            stamp = stamp.astimezone()
        return stamp.strftime(_CLOCK_FORMAT)

    def _join(self, args: tuple[Any, ...]) -> str:
        to_text = self._config.style.to_text
        return " ".join(to_text(arg) for arg in args)


__all__ = ["DEFAULT_TAB_SIZE", "LineContext", "TransportLine", "TransportLineConfig"]
