"""Message fragments and the finalized line handed to destinations."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .levels import LogLevel
from .styles import StyleTable

logger = logging.getLogger(__name__)

LEVEL_PREFIX_WIDTH = 9


@dataclass(slots=True, frozen=True)
class MessagePart:
    """One fragment of a line with an optional style name."""

    text: str
    style: str | None = None


@dataclass(slots=True, frozen=True)
class FinalizedLine:
    """Composed line ready for rendering by one or more destinations.

    Attributes
    ----------
    level:
        Severity the line was emitted at.
    parts:
        Ordered fragments, prefixes and suffixes included.
    style:
        Style table used to colourise styled fragments.
    emitter:
        Optional logical name of the emitting component.
    """

    level: LogLevel
    parts: tuple[MessagePart, ...]
    style: StyleTable = field(compare=False, repr=False)
    emitter: str | None = None

    def render(self, *, colorize: bool) -> str:
        """Join the fragments with single spaces, styling them when asked.

        Examples
        --------
        >>> line = FinalizedLine(LogLevel.INFO, (MessagePart(" "), MessagePart("hello", "h2")), StyleTable())
        >>> line.render(colorize=False)
        '  hello'
        """

        return " ".join(self._render_part(part, colorize) for part in self.parts)

    def plain_text(self) -> str:
        """Return the line without any ANSI sequences."""

        return self.render(colorize=False)

    def _render_part(self, part: MessagePart, colorize: bool) -> str:
        if not colorize or part.style is None:
            return part.text
        try:
            return self.style.format(part.text, part.style, colorize=True)
        except (TypeError, ValueError):
            logger.debug("Style %r could not be applied; rendering plain text", part.style, exc_info=True)
            return part.text

    def __str__(self) -> str:
        return self.plain_text()


def right_pad_and_truncate(text: str, width: int, char: str = " ") -> str:
    """Pad ``text`` to ``width`` columns, cutting it when longer.

    Examples
    --------
    >>> right_pad_and_truncate("[INFO]", 9)
    '[INFO]   '
    >>> right_pad_and_truncate("[EXTRALONG]", 9)
    '[EXTRALON'
    """

    if len(text) > width:
        return text[:width]
    return text + char * (width - len(text))


def level_prefix_part(level: LogLevel, style: StyleTable) -> MessagePart:
    """Return the padded ``[LEVEL]`` fragment with its per-level style name."""

    style_name = f"_{level.severity}_prefix"
    if style_name not in style:
        style_name = "_level_prefix"
    return MessagePart(right_pad_and_truncate(level.prefix, LEVEL_PREFIX_WIDTH), style_name)


__all__ = ["FinalizedLine", "LEVEL_PREFIX_WIDTH", "MessagePart", "level_prefix_part", "right_pad_and_truncate"]
