"""Configuration value objects for lines and destinations."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Mapping, Union

from .levels import LogLevel, to_rank

TimePrefix = Union[Literal["local", "utc", "elapsed"], Literal[False]]

TIME_PREFIX_CHOICES: tuple[str, ...] = ("local", "utc", "elapsed")


def is_valid_time_prefix(value: Any) -> bool:
    """Return ``True`` for ``"local"``, ``"utc"``, ``"elapsed"`` or ``False``.

    Examples
    --------
    >>> is_valid_time_prefix("utc"), is_valid_time_prefix(False), is_valid_time_prefix("iso")
    (True, True, False)
    """

    return value is False or value in TIME_PREFIX_CHOICES


@dataclass(slots=True, frozen=True)
class ShowOptions:
    """Which decorations a destination adds around the message fragments."""

    timestamp: TimePrefix = False
    level: bool = False
    req_id: bool = False
    sid: bool = False
    emitter: bool = False
    action: bool = False


@dataclass(slots=True, frozen=True)
class DestinationConfig:
    """Declarative description of a destination created by the factory.

    ``name`` selects the destination kind (``console``, ``buffer``, ``file``
    or any registered custom name). ``options`` carries kind-specific extras.
    """

    name: str = "console"
    level_threshold: LogLevel = LogLevel.TRACE
    filename: Path | None = None
    stylize: bool = True
    options: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "DestinationConfig":
        """Build a config from a plain dictionary, ignoring invalid levels.

        Examples
        --------
        >>> DestinationConfig.from_mapping({"name": "file", "filename": "app.log", "level_threshold": "warn"}).level_threshold
        <LogLevel.WARN: 8>
        >>> DestinationConfig.from_mapping({"name": "buffer", "level_threshold": "bogus"}).level_threshold
        <LogLevel.TRACE: 1>
        """

        known = {"name", "level_threshold", "filename", "stylize"}
        level = to_rank(payload.get("level_threshold", LogLevel.TRACE))
        if level is None:
            level = LogLevel.TRACE
        filename = payload.get("filename")
        return cls(
            name=str(payload.get("name", "console")),
            level_threshold=level,
            filename=Path(filename) if filename else None,
            stylize=bool(payload.get("stylize", True)),
            options={key: value for key, value in payload.items() if key not in known},
        )


__all__ = ["DestinationConfig", "ShowOptions", "TIME_PREFIX_CHOICES", "TimePrefix", "is_valid_time_prefix"]
