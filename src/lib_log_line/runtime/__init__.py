"""Process-level façade over one :class:`~lib_log_line.manager.LogManager`.

Purpose
-------
Expose a stable entry point (``init``, ``get``, ``shutdown``) for hosts that
want one configured manager per process instead of wiring the layers
themselves.

Contents
--------
* ``init`` - resolve settings (arguments + ``LOG_*`` overrides) and start the
  manager.
* ``get`` - hand out loggers wired to the running manager.
* ``shutdown`` / ``shutdown_async`` - flush and stop destinations, then clear
  the runtime.
* ``inspect_runtime`` - read-only snapshot for diagnostics and tests.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from rich.console import Console

from lib_log_line.config import load_settings
from lib_log_line.domain.levels import LogLevel
from lib_log_line.domain.options import TimePrefix
from lib_log_line.logger import Logger
from lib_log_line.manager import DiagnosticHook, LogManager

from ._composition import build_manager
from ._state import LoggingRuntime, clear_runtime, current_runtime, is_initialised, set_runtime


@dataclass(frozen=True)
class RuntimeSnapshot:
    """Immutable view over the active runtime."""

    level: LogLevel
    level_prefix: bool
    time_prefix: TimePrefix
    tab_size: int
    colorize: bool
    destinations: tuple[str, ...]
    running: bool
    pending: int
    log_file: Path | None


def init(
    *,
    level: Any = LogLevel.INFO,
    level_prefix: bool = False,
    time_prefix: TimePrefix = False,
    tab_size: int = 2,
    colorize: bool = False,
    keep_lines: bool = False,
    log_file: str | Path | None = None,
    styles: Mapping[str, Any] | None = None,
    console: Console | None = None,
    diagnostic_hook: DiagnosticHook | None = None,
) -> LogManager:
    """Compose and start the process-wide manager.

    Environment variables (``LOG_LEVEL``, ``LOG_TIME_PREFIX``, ...) override
    the arguments. Inside a running event loop the destinations are opened
    by a scheduled task; lines emitted meanwhile are queued.

    Raises
    ------
    RuntimeError
        When a runtime is already active.
    """

    if is_initialised():
        raise RuntimeError(
            "lib_log_line.init() cannot be called twice without shutdown(); call lib_log_line.shutdown() first",
        )
    settings = load_settings(
        level=level,
        level_prefix=level_prefix,
        time_prefix=time_prefix,
        tab_size=tab_size,
        colorize=colorize,
        keep_lines=keep_lines,
        log_file=log_file,
        styles=styles,
    )
    manager = build_manager(settings, console=console, diagnostic_hook=diagnostic_hook)
    set_runtime(LoggingRuntime(manager=manager, settings=settings))
    return manager


def get(emitter: str | None = None, **options: Any) -> Logger:
    """Return a logger wired to the active manager.

    ``options`` are forwarded to :meth:`LogManager.get_logger`.
    """

    return current_runtime().manager.get_logger(emitter, **options)


def get_manager() -> LogManager:
    return current_runtime().manager


def inspect_runtime() -> RuntimeSnapshot:
    """Return a read-only snapshot of the current runtime state."""

    runtime = current_runtime()
    settings = runtime.settings
    manager = runtime.manager
    return RuntimeSnapshot(
        level=manager.level_threshold,
        level_prefix=settings.level_prefix,
        time_prefix=settings.time_prefix,
        tab_size=settings.tab_size,
        colorize=manager.style.enabled,
        destinations=tuple(destination.name for destination in manager.destinations),
        running=manager.running,
        pending=manager.pending,
        log_file=settings.log_file,
    )


def shutdown() -> None:
    """Flush and stop destinations, then clear the runtime synchronously.

    Raises
    ------
    RuntimeError
        When invoked inside a running loop; await :func:`shutdown_async`.
    """

    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        loop = None
    else:
        if loop.is_running():
            raise RuntimeError(
                "lib_log_line.shutdown() cannot run inside an active event loop; await lib_log_line.shutdown_async() instead",
            )
    asyncio.run(shutdown_async())


async def shutdown_async() -> None:
    """Flush and stop destinations, then clear the runtime."""

    runtime = current_runtime()
    await runtime.manager.stop_async()
    clear_runtime()


__all__ = [
    "RuntimeSnapshot",
    "get",
    "get_manager",
    "init",
    "inspect_runtime",
    "is_initialised",
    "shutdown",
    "shutdown_async",
]
