"""Raw log events written through the manager's own message path.

Purpose
-------
Represent messages that do not originate from a composed logger line, such
as the manager's warning when a destination fails to start.

Contents
--------
* :class:`LogMessage` dataclass and its conversion into a
  :class:`~lib_log_line.domain.parts.FinalizedLine`.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Mapping

from .levels import LogLevel
from .parts import FinalizedLine, MessagePart, level_prefix_part
from .styles import StyleTable


@dataclass(slots=True, frozen=True)
class LogMessage:
    """Immutable raw log event.

    Attributes
    ----------
    level:
        Severity used for per-destination filtering.
    message:
        Human readable text.
    emitter:
        Optional component name shown ahead of the message.
    action:
        Optional verb describing what the emitter was doing.
    data:
        Optional structured payload appended as JSON.
    """

    level: LogLevel
    message: str
    emitter: str | None = None
    action: str | None = None
    data: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.message.strip():
            raise ValueError("message must not be empty")
        object.__setattr__(self, "data", dict(self.data))

    def to_line(self, style: StyleTable) -> FinalizedLine:
        """Compose the event into a line using the default decorations.

        Examples
        --------
        >>> event = LogMessage(LogLevel.WARN, "disk low", emitter="mgr", data={"free": 3})
        >>> event.to_line(StyleTable()).plain_text()
        '[WARN]    mgr disk low {"free": 3}'
        """

        parts = [level_prefix_part(self.level, style)]
        if self.emitter:
            parts.append(MessagePart(self.emitter, "_emitter"))
        if self.action:
            parts.append(MessagePart(self.action, "_action"))
        parts.append(MessagePart(self.message, "text"))
        if self.data:
            parts.append(MessagePart(json.dumps(self.data, sort_keys=True, default=str), "_plain"))
        return FinalizedLine(level=self.level, parts=tuple(parts), style=style, emitter=self.emitter)


__all__ = ["LogMessage"]
