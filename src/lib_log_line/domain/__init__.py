"""Domain value objects used by the line-composition pipeline."""

from __future__ import annotations

from .errors import LineNotEmittedError, UnknownDestinationError
from .events import LogMessage
from .levels import LogLevel, is_enabled, rank_to_name, to_rank
from .options import DestinationConfig, ShowOptions, TimePrefix, is_valid_time_prefix
from .parts import FinalizedLine, MessagePart
from .styles import Color, StyleRule, StyleTable
from .timer import AppTimer, TimerReading, TimerStrings

__all__ = [
    "AppTimer",
    "Color",
    "DestinationConfig",
    "FinalizedLine",
    "LineNotEmittedError",
    "LogLevel",
    "LogMessage",
    "MessagePart",
    "ShowOptions",
    "StyleRule",
    "StyleTable",
    "TimePrefix",
    "TimerReading",
    "TimerStrings",
    "UnknownDestinationError",
    "is_enabled",
    "is_valid_time_prefix",
    "rank_to_name",
    "to_rank",
]
