"""Runtime composition: translate :class:`LoggerSettings` into a manager.

Purpose
-------
Keep the wiring from resolved settings to destinations and the
:class:`~lib_log_line.manager.LogManager` small, declarative, and testable.
"""

from __future__ import annotations

from typing import Any

from rich.console import Console

from lib_log_line.adapters.console import ConsoleDestination
from lib_log_line.config import LoggerSettings
from lib_log_line.domain.options import DestinationConfig, ShowOptions
from lib_log_line.manager import DiagnosticHook, LogManager


def build_destination_specs(settings: LoggerSettings, *, console: Console | None = None) -> list[Any]:
    """Return the destinations implied by ``settings``.

    Examples
    --------
    >>> from pathlib import Path
    >>> specs = build_destination_specs(LoggerSettings(keep_lines=True, log_file=Path("app.log")))
    >>> [spec.name for spec in specs]
    ['buffer', 'file']
    """

    specs: list[Any] = []
    if settings.keep_lines:
        specs.append(DestinationConfig(name="buffer", stylize=settings.colorize))
    elif console is not None:
        specs.append(ConsoleDestination(DestinationConfig(name="console", stylize=settings.colorize), console=console))
    else:
        specs.append(DestinationConfig(name="console", stylize=settings.colorize))
    if settings.log_file is not None:
        specs.append(DestinationConfig(name="file", filename=settings.log_file))
    return specs


def build_manager(
    settings: LoggerSettings,
    *,
    console: Console | None = None,
    diagnostic_hook: DiagnosticHook | None = None,
    auto_run: bool = True,
) -> LogManager:
    """Assemble a manager from resolved settings and start it when asked."""

    show = ShowOptions(timestamp=settings.time_prefix, level=settings.level_prefix)
    return LogManager(
        build_destination_specs(settings, console=console),
        level=settings.level,
        show=show,
        tab_size=settings.tab_size,
        colorize=settings.colorize,
        styles=settings.styles,
        auto_run=auto_run,
        diagnostic_hook=diagnostic_hook,
    )


__all__ = ["build_destination_specs", "build_manager"]
