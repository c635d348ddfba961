"""Log level ordering shared by loggers, lines, and destinations.

Purpose
-------
Provide the fixed, totally ordered set of severities together with the
conversion helpers used wherever a threshold is configured or compared.

Contents
--------
* :class:`LogLevel` enum with presentation helpers.
* :func:`to_rank` - lenient conversion from names, ranks, or numeric strings.
* :func:`is_enabled` - the single threshold comparison used for gating.
* :func:`rank_to_name` - reverse lookup for diagnostics and prefixes.

System Role
-----------
Every other layer depends on this module; it has no dependencies itself.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class LogLevel(Enum):
    """Enumerated severities; a higher value is more severe."""

    SKIP = 0
    TRACE = 1
    DEBUG = 3
    VERBOSE = 5
    INFO = 7
    WARN = 8
    ERROR = 9

    @property
    def rank(self) -> int:
        """Return the numeric rank used for threshold comparisons."""

        return self.value

    @property
    def severity(self) -> str:
        """Return the lowercase level name (``"info"``, ``"warn"``, ...)."""

        return self.name.lower()

    @property
    def prefix(self) -> str:
        """Return the bracketed label shown as the level prefix.

        Examples
        --------
        >>> LogLevel.VERBOSE.prefix
        '[VERBOSE]'
        """

        return f"[{self.name}]"

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        normalized = name.strip().upper()
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown log level: {name!r}") from exc

    @classmethod
    def from_numeric(cls, level: int) -> "LogLevel":
        """Return the :class:`LogLevel` whose rank equals ``level``."""
        try:
            return cls(level)
        except ValueError as exc:
            raise ValueError(f"Unsupported log level numeric: {level}") from exc


def to_rank(value: Any) -> LogLevel | None:
    """Convert a level name, rank, or numeric string to a :class:`LogLevel`.

    Returns ``None`` for anything outside the fixed rank set so callers can
    keep their previous value instead of failing.

    Examples
    --------
    >>> to_rank("debug") is LogLevel.DEBUG
    True
    >>> to_rank(7) is LogLevel.INFO
    True
    >>> to_rank("8") is LogLevel.WARN
    True
    >>> to_rank("bogus") is None
    True
    >>> to_rank(4) is None
    True
    """

    if isinstance(value, LogLevel):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        try:
            return LogLevel.from_numeric(value)
        except ValueError:
            return None
    if isinstance(value, str):
        text = value.strip()
        if text.isdecimal():
            return to_rank(int(text))
        try:
            return LogLevel.from_name(text)
        except ValueError:
            return None
    return None


def is_enabled(candidate: LogLevel, threshold: LogLevel) -> bool:
    """Return ``True`` when ``candidate`` meets ``threshold``.

    Examples
    --------
    >>> is_enabled(LogLevel.WARN, LogLevel.INFO)
    True
    >>> is_enabled(LogLevel.DEBUG, LogLevel.INFO)
    False
    """

    return candidate.rank >= threshold.rank


def rank_to_name(rank: Any) -> str | None:
    """Return the lowercase level name for ``rank`` or ``None`` when invalid."""

    if isinstance(rank, str) and not rank.strip().isdigit():
        return None
    level = to_rank(rank)
    return level.severity if level is not None else None


__all__ = ["LogLevel", "is_enabled", "rank_to_name", "to_rank"]
