"""Leveled, styled line logger with console, buffer and file destinations.

A level method starts a line, style methods decorate it, and ``emit`` writes
it to every destination whose threshold admits the level::

    >>> from lib_log_line import Logger
    >>> log = Logger(keep_lines=True)
    >>> log.info().tab(2).h1("big header").emit()
    >>> log.lines
    ['    big header']

Hosts that want one configured manager per process use :func:`init`,
:func:`get` and :func:`shutdown`.
"""

from __future__ import annotations

from .__init__conf__ import print_info, summary_info
from .adapters import (
    BaseDestination,
    BufferDestination,
    ConsoleDestination,
    DestinationFactory,
    FileDestination,
    SystemClock,
)
from .application.ports import ClockPort, DestinationPort, LineDispatcher
from .domain import (
    AppTimer,
    Color,
    DestinationConfig,
    FinalizedLine,
    LineNotEmittedError,
    LogLevel,
    LogMessage,
    MessagePart,
    ShowOptions,
    StyleRule,
    StyleTable,
    TimerReading,
    UnknownDestinationError,
    is_enabled,
    rank_to_name,
    to_rank,
)
from .line import LoggerLine
from .logger import Logger
from .manager import LogManager
from .runtime import RuntimeSnapshot, get, get_manager, init, inspect_runtime, is_initialised, shutdown, shutdown_async

__all__ = [
    "AppTimer",
    "BaseDestination",
    "BufferDestination",
    "ClockPort",
    "Color",
    "ConsoleDestination",
    "DestinationConfig",
    "DestinationFactory",
    "DestinationPort",
    "FileDestination",
    "FinalizedLine",
    "LineDispatcher",
    "LineNotEmittedError",
    "LogLevel",
    "LogManager",
    "LogMessage",
    "Logger",
    "LoggerLine",
    "MessagePart",
    "RuntimeSnapshot",
    "ShowOptions",
    "StyleRule",
    "StyleTable",
    "SystemClock",
    "TimerReading",
    "UnknownDestinationError",
    "get",
    "get_manager",
    "init",
    "inspect_runtime",
    "is_enabled",
    "is_initialised",
    "print_info",
    "rank_to_name",
    "shutdown",
    "shutdown_async",
    "summary_info",
    "to_rank",
]
