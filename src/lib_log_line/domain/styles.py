"""Style table mapping style names to ANSI colour rules.

Purpose
-------
Turn values into display text and, when colourisation is enabled, wrap that
text in ANSI start/reset sequences according to a named :class:`StyleRule`.

Contents
--------
* :class:`Color` - the fixed palette of ANSI colour codes.
* :class:`StyleRule` - optional foreground/background pair.
* :data:`DEFAULT_STYLES` - built-in style names; names with a leading
  underscore are reserved for line decorations (prefixes, suffixes, columns).
* :class:`StyleTable` - mutable mapping plus the formatting routine.

System Role
-----------
Shared by reference between loggers, line builders, and finalized lines.
Destinations decide whether a rendered line is colourised; the table only
knows how.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import date, datetime
from enum import IntEnum
from typing import Any, Iterator, Mapping

DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_RESET = "\x1b[0m"


class Color(IntEnum):
    """ANSI SGR codes; backgrounds are derived by adding 10."""

    ITALIC = 3
    UNDERLINE = 4
    INVERSE = 7
    BLACK = 30
    DARK_RED = 31
    DARK_GREEN = 32
    YELLOW = 33
    DARK_BLUE = 34
    PURPLE = 35
    TEAL = 36
    GRAY = 37
    DARK_GRAY = 90
    RED = 91
    GREEN = 92
    ORANGE = 93
    BLUE = 94
    MAGENTA = 95
    CYAN = 96
    WHITE = 97


def is_valid_color(value: Any) -> bool:
    """Return ``True`` for integers inside the ``BLACK``..``WHITE`` range.

    Examples
    --------
    >>> is_valid_color(Color.GREEN)
    True
    >>> is_valid_color(Color.INVERSE)
    False
    >>> is_valid_color("green")
    False
    """

    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return Color.BLACK <= value <= Color.WHITE


@dataclass(slots=True, frozen=True)
class StyleRule:
    """Foreground/background pair; a rule without colours renders plain."""

    fg: int | None = None
    bg: int | None = None

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "StyleRule":
        """Build a rule from ``{"fg": ..., "bg": ...}`` style dictionaries."""

        return cls(fg=payload.get("fg"), bg=payload.get("bg"))


DEFAULT_STYLES: Mapping[str, StyleRule] = {
    "text": StyleRule(fg=Color.WHITE),
    "h1": StyleRule(fg=Color.MAGENTA),
    "h2": StyleRule(fg=Color.MAGENTA),
    "h3": StyleRule(fg=Color.GREEN),
    "action": StyleRule(fg=Color.BLACK, bg=Color.ORANGE),
    "label": StyleRule(fg=Color.TEAL),
    "highlight": StyleRule(fg=Color.PURPLE),
    "value": StyleRule(fg=Color.BLUE),
    "path": StyleRule(fg=Color.DARK_BLUE),
    "date": StyleRule(fg=Color.PURPLE),
    "warn": StyleRule(fg=Color.CYAN),
    "error": StyleRule(fg=Color.DARK_RED),
    "strikethru": StyleRule(fg=Color.INVERSE),
    "_req_id": StyleRule(fg=Color.ORANGE),
    "_sid": StyleRule(fg=Color.YELLOW),
    "_emitter": StyleRule(fg=Color.GREEN),
    "_action": StyleRule(fg=Color.BLUE),
    "_plain": StyleRule(fg=Color.WHITE),
    "_suffix": StyleRule(fg=Color.DARK_GRAY),
    "_elapsed": StyleRule(fg=Color.DARK_GRAY),
    "_error_prefix": StyleRule(fg=Color.DARK_RED),
    "_warn_prefix": StyleRule(fg=Color.CYAN),
    "_level_prefix": StyleRule(fg=Color.DARK_GRAY),
    "_time_prefix": StyleRule(fg=Color.DARK_GRAY),
}


def _coerce_rule(rule: StyleRule | Mapping[str, Any]) -> StyleRule:
    if isinstance(rule, StyleRule):
        return rule
    return StyleRule.from_mapping(rule)


class StyleTable:
    """Named style rules plus the value-to-text formatter.

    Examples
    --------
    >>> table = StyleTable()
    >>> table.format("Hello", "text")
    'Hello'
    >>> table.enable(True)
    >>> table.format("Hello", StyleRule(fg=Color.GREEN))
    '\\x1b[92mHello\\x1b[0m'
    """

    def __init__(
        self,
        styles: Mapping[str, StyleRule | Mapping[str, Any]] | None = None,
        *,
        enabled: bool = False,
        date_format: str = DEFAULT_DATE_FORMAT,
    ) -> None:
        self._styles: dict[str, StyleRule] = dict(DEFAULT_STYLES)
        if styles:
            for name, rule in styles.items():
                self._styles[name] = _coerce_rule(rule)
        self._enabled = enabled
        self._date_format = date_format

    @property
    def enabled(self) -> bool:
        """Return ``True`` when :meth:`format` emits ANSI sequences."""

        return self._enabled

    def enable(self, flag: bool = True) -> None:
        """Switch colourisation on (``True``) or off (``False``)."""

        if flag is True:
            self._enabled = True
        elif flag is False:
            self._enabled = False

    def add_style(self, name: str, rule: StyleRule | Mapping[str, Any]) -> None:
        """Insert or overwrite the rule registered under ``name``."""

        self._styles[name] = _coerce_rule(rule)

    def get(self, name: str) -> StyleRule | None:
        return self._styles.get(name)

    @property
    def styles(self) -> Mapping[str, StyleRule]:
        return dict(self._styles)

    @property
    def public_names(self) -> tuple[str, ...]:
        """Return style names intended for callers (no leading underscore)."""

        return tuple(name for name in self._styles if not name.startswith("_"))

    def __contains__(self, name: object) -> bool:
        return name in self._styles

    def __iter__(self) -> Iterator[str]:
        return iter(self._styles)

    def to_text(self, value: Any) -> str:
        """Convert ``value`` to plain text.

        Mappings and sequences are dumped as compact JSON, dates use the
        configured date format, everything else goes through :class:`str`.

        Examples
        --------
        >>> StyleTable().to_text({"key": "value"})
        '{"key":"value"}'
        >>> from datetime import datetime
        >>> StyleTable().to_text(datetime(2024, 1, 2, 3, 4, 5))
        '2024-01-02 03:04:05'
        """

        if isinstance(value, str):
            return value
        if isinstance(value, (Mapping, list, tuple)):
            return json.dumps(value, separators=(",", ":"), default=str)
        if isinstance(value, (datetime, date)):
            return value.strftime(self._date_format)
        return str(value)

    def format(
        self,
        value: Any,
        style: str | StyleRule | Mapping[str, Any] | None = None,
        *,
        colorize: bool | None = None,
    ) -> str:
        """Return ``value`` as text, wrapped in ANSI codes when enabled.

        ``colorize`` narrows the table-wide switch for a single call; it can
        never turn colour on while the table is disabled. Unknown style names
        render as plain text.
        """

        text = self.to_text(value)
        if not self._enabled or colorize is False:
            return text
        if style is None:
            return text
        if isinstance(style, str):
            rule = self._styles.get(style)
        else:
            rule = _coerce_rule(style)
        if rule is None:
            return text
        pre = ""
        post = ""
        if is_valid_color(rule.fg):
            pre += f"\x1b[{int(rule.fg)}m"  # type: ignore[arg-type]
            post = _RESET
        if is_valid_color(rule.bg):
            pre += f"\x1b[{int(rule.bg) + 10}m"  # type: ignore[arg-type]
            post += _RESET
        return f"{pre}{text}{post}"


__all__ = ["Color", "DEFAULT_DATE_FORMAT", "DEFAULT_STYLES", "StyleRule", "StyleTable", "is_valid_color"]
