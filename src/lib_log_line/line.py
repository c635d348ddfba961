"""Fluent handle over the per-destination line builders.

Purpose
-------
Give application code a single chainable object for the line in flight.
Every call is forwarded to one :class:`TransportLine` per destination, so a
destination whose threshold suppresses the line drops fragments without
formatting them.

Contents
--------
* :class:`LoggerLine` - context columns, composition calls, named style
  wrappers for the built-in style set, and the terminal ``emit`` calls.

System Role
-----------
Created once per :class:`~lib_log_line.logger.Logger` and reused for every
line; the logger guards the one-open-line rule around it.
"""

from __future__ import annotations

from typing import Any, Sequence

from lib_log_line.application.use_cases.transport_line import LineContext, TransportLine
from lib_log_line.domain.levels import LogLevel
from lib_log_line.domain.parts import FinalizedLine


class LoggerLine:
    """Chainable line composed across every configured destination.

    Custom styles are reached through :meth:`stylize`; the named methods only
    cover the built-in style names.

    Examples
    --------
    >>> from lib_log_line import Logger
    >>> log = Logger(keep_lines=True)
    >>> log.info().tab(1).h2("hello").emit()
    >>> log.lines
    ['  hello']
    """

    def __init__(
        self,
        transports: Sequence[TransportLine],
        *,
        emitter: str | None = None,
        req_id: str | None = None,
        sid: str | None = None,
    ) -> None:
        self._transports = tuple(transports)
        self._context = LineContext(req_id=req_id, sid=sid, emitter=emitter)

    @property
    def transports(self) -> tuple[TransportLine, ...]:
        return self._transports

    @property
    def context(self) -> LineContext:
        return self._context

    @property
    def enabled(self) -> bool:
        """Return ``True`` when at least one destination retains fragments."""

        return any(transport.enabled for transport in self._transports)

    def req_id(self, value: str | None) -> "LoggerLine":
        self._context.req_id = value
        return self

    def sid(self, value: str | None) -> "LoggerLine":
        self._context.sid = value
        return self

    def emitter(self, value: str | None) -> "LoggerLine":
        self._context.emitter = value
        return self

    def action(self, value: str | None) -> "LoggerLine":
        """Set the action column for this line; reset after :meth:`emit`."""

        self._context.action = value
        return self

    def set_level(self, level: Any) -> "LoggerLine":
        for transport in self._transports:
            transport.set_level(level)
        return self

    def set_level_threshold(self, level: Any) -> "LoggerLine":
        for transport in self._transports:
            transport.set_level_threshold(level)
        return self

    @property
    def level(self) -> LogLevel | None:
        for transport in self._transports:
            if transport.level is not None:
                return transport.level
        return None

    def clear(self) -> "LoggerLine":
        """Drop the line in flight; request id, session id and emitter stay."""

        for transport in self._transports:
            transport.clear()
        self._context.action = None
        return self

    def set_initial_string(self, *args: Any) -> "LoggerLine":
        """Append the level call's arguments, turning leading tabs into :meth:`tab`.

        Examples
        --------
        >>> from lib_log_line import Logger
        >>> log = Logger(keep_lines=True)
        >>> log.info("\\t\\tnested").emit()
        >>> log.lines
        ['    nested']
        """

        if args and isinstance(args[0], str):
            first = args[0]
            stripped = first.lstrip("\t")
            count = len(first) - len(stripped)
            if count:
                self.tab(count)
                args = ((stripped,) if stripped else ()) + tuple(args[1:])
        if args:
            self.stylize("text", *args)
        return self

    def elapsed(self) -> "LoggerLine":
        """Request the ``total (interval)`` timer annotation for this line."""

        for transport in self._transports:
            transport.request_elapsed()
        return self

    def indent(self, value: int | str | None = None) -> "LoggerLine":
        for transport in self._transports:
            transport.indent(value)
        return self

    def tab(self, count: int = 1) -> "LoggerLine":
        for transport in self._transports:
            transport.tab(count)
        return self

    def data(self, payload: Any) -> "LoggerLine":
        for transport in self._transports:
            transport.data(payload)
        return self

    def comment(self, *args: Any) -> "LoggerLine":
        """Append ``args`` to the suffix shown after the context columns."""

        for transport in self._transports:
            transport.append_suffix(*args)
        return self

    def stylize(self, style: str, *args: Any) -> "LoggerLine":
        """Append ``args`` rendered with the named ``style``.

        Unknown style names are kept and render as plain text.
        """

        for transport in self._transports:
            transport.stylize(style, *args)
        return self

    def plain(self, *args: Any) -> "LoggerLine":
        for transport in self._transports:
            transport.plain(*args)
        return self

    def text(self, *args: Any) -> "LoggerLine":
        return self.stylize("text", *args)

    def h1(self, *args: Any) -> "LoggerLine":
        return self.stylize("h1", *args)

    def h2(self, *args: Any) -> "LoggerLine":
        return self.stylize("h2", *args)

    def h3(self, *args: Any) -> "LoggerLine":
        return self.stylize("h3", *args)

    def label(self, *args: Any) -> "LoggerLine":
        return self.stylize("label", *args)

    def highlight(self, *args: Any) -> "LoggerLine":
        return self.stylize("highlight", *args)

    def value(self, *args: Any) -> "LoggerLine":
        return self.stylize("value", *args)

    def path(self, *args: Any) -> "LoggerLine":
        return self.stylize("path", *args)

    def date(self, *args: Any) -> "LoggerLine":
        return self.stylize("date", *args)

    def warn(self, *args: Any) -> "LoggerLine":
        return self.stylize("warn", *args)

    def error(self, *args: Any) -> "LoggerLine":
        return self.stylize("error", *args)

    def strikethru(self, *args: Any) -> "LoggerLine":
        return self.stylize("strikethru", *args)

    def is_empty(self) -> bool:
        return all(transport.is_empty() for transport in self._transports)

    def parts_as_string(self) -> str:
        """Return the plain text retained so far by the first enabled destination."""

        for transport in self._transports:
            if not transport.is_empty():
                return transport.parts_as_string()
        return ""

    def emit_lines(self, *args: Any) -> list[FinalizedLine]:
        """Emit the line and return what was dispatched, one entry per destination."""

        lines = []
        for transport in self._transports:
            line = transport.emit(*args, context=self._context)
            if line is not None:
                lines.append(line)
        self._context.action = None
        return lines

    def emit(self, *args: Any) -> None:
        """Append ``args`` as plain text, dispatch the line, and clear it."""

        self.emit_lines(*args)

    def emit_with_time(self, *args: Any) -> None:
        """Like :meth:`emit`, with the elapsed-time annotation appended."""

        self.elapsed()
        self.emit_lines(*args)

    ewt = emit_with_time


__all__ = ["LoggerLine"]
