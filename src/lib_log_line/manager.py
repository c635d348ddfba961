"""Log manager owning destinations, defaults, and the pending-line queue.

Purpose
-------
Create destinations from configuration, open and close them, hand out
pre-wired :class:`~lib_log_line.logger.Logger` instances, and buffer every
emitted line until the destinations are ready.

Contents
--------
* :class:`LogManager` - destination registry, FIFO queue, and lifecycle.

System Role
-----------
Acts as the :class:`~lib_log_line.application.ports.LineDispatcher` for every
logger it creates. Lines queue in emit order and flush in FIFO order once the
manager runs and (by default) every destination reports ready; each line is
filtered by the receiving destination's own threshold.

Alignment Notes
---------------
Failures inside destinations never reach logging callers. A destination that
cannot open is removed and reported as a ``WARN`` line through
:meth:`LogManager.log_message`, to the stdlib ``logging`` module, and to the
optional diagnostic hook.
"""

from __future__ import annotations

import asyncio
import logging
from collections import deque
from typing import Any, Callable, Iterable, Mapping

from lib_log_line.adapters.clock import SystemClock
from lib_log_line.adapters.factory import DestinationFactory
from lib_log_line.application.ports import ClockPort, DestinationPort, LineDispatcher
from lib_log_line.application.use_cases.shutdown import create_shutdown
from lib_log_line.application.use_cases.transport_line import DEFAULT_TAB_SIZE
from lib_log_line.domain.events import LogMessage
from lib_log_line.domain.levels import LogLevel, to_rank
from lib_log_line.domain.options import DestinationConfig, ShowOptions
from lib_log_line.domain.parts import FinalizedLine
from lib_log_line.domain.styles import StyleRule, StyleTable
from lib_log_line.domain.timer import AppTimer
from lib_log_line.logger import Logger

logger = logging.getLogger(__name__)

DiagnosticHook = Callable[[str, dict[str, Any]], None]
DestinationSpec = DestinationConfig | Mapping[str, Any] | DestinationPort

_MANAGER_EMITTER = "LogManager"


class LogManager(LineDispatcher):
    """Own the destination set and deliver queued lines in FIFO order.

    Parameters
    ----------
    destinations:
        Destination configs (or mappings, or ready-made destinations) added
        on construction.
    level:
        Default threshold for loggers handed out by :meth:`get_logger`.
    show:
        Default decorations for those loggers.
    tab_size:
        Default indentation unit.
    colorize / styles / style:
        Style table shared by every logger of this manager.
    timer / clock:
        Shared time sources.
    all_destinations_ready:
        When ``True`` (default) the queue only flushes once every destination
        is ready; when ``False`` it flushes as soon as the manager runs.
    auto_run:
        Start destinations during construction.
    factory:
        Factory used for configs; defaults to :class:`DestinationFactory`.
    diagnostic_hook:
        Optional callback receiving ``(event_name, payload)`` for destination
        failures.

    Examples
    --------
    >>> manager = LogManager([{"name": "buffer"}])
    >>> log = manager.get_logger("app")
    >>> log.info("queued").emit()
    >>> manager.pending
    1
    >>> manager.start()
    >>> log.lines
    ['queued']
    >>> manager.stop()
    """

    def __init__(
        self,
        destinations: Iterable[DestinationSpec] | None = None,
        *,
        level: Any = LogLevel.INFO,
        show: ShowOptions | None = None,
        tab_size: int = DEFAULT_TAB_SIZE,
        colorize: bool = False,
        styles: Mapping[str, StyleRule | Mapping[str, Any]] | None = None,
        style: StyleTable | None = None,
        timer: AppTimer | None = None,
        clock: ClockPort | None = None,
        all_destinations_ready: bool = True,
        auto_run: bool = False,
        factory: DestinationFactory | None = None,
        diagnostic_hook: DiagnosticHook | None = None,
    ) -> None:
        resolved = to_rank(level)
        self._level = resolved if resolved is not None else LogLevel.INFO
        self._show = show if show is not None else ShowOptions()
        self._tab_size = tab_size if tab_size >= 1 else DEFAULT_TAB_SIZE
        self._style = style if style is not None else StyleTable(styles, enabled=colorize)
        self._timer = timer if timer is not None else AppTimer()
        self._clock = clock if clock is not None else SystemClock()
        self._all_destinations_ready = all_destinations_ready
        self._factory = factory if factory is not None else DestinationFactory()
        self._diagnostic_hook = diagnostic_hook
        self._destinations: dict[str, DestinationPort] = {}
        self._pending: deque[tuple[FinalizedLine, str | None]] = deque()
        self._running = False
        self._flushing = False
        self._start_task: asyncio.Task[None] | None = None
        for spec in destinations or ():
            self.add_destination(spec)
        if auto_run:
            self._auto_start()

    @property
    def destinations(self) -> tuple[DestinationPort, ...]:
        return tuple(self._destinations.values())

    @property
    def style(self) -> StyleTable:
        return self._style

    @property
    def timer(self) -> AppTimer:
        return self._timer

    @property
    def show(self) -> ShowOptions:
        return self._show

    @property
    def level_threshold(self) -> LogLevel:
        return self._level

    def set_level_threshold(self, level: Any) -> None:
        """Change the default threshold for loggers created afterwards."""

        resolved = to_rank(level)
        if resolved is not None:
            self._level = resolved

    @property
    def running(self) -> bool:
        return self._running

    @property
    def pending(self) -> int:
        """Return the number of queued deliveries.

        A logger line counts once per destination it targets; a
        :meth:`log_message` counts once.
        """

        return len(self._pending)

    @property
    def all_destinations_ready(self) -> bool:
        return all(destination.ready for destination in self._destinations.values())

    def add_destination(self, spec: DestinationSpec) -> DestinationPort:
        """Create (or adopt) a destination and add it to the active set.

        Destinations added while running are opened by the next
        :meth:`start` / :meth:`start_async`; until then their lines queue.
        """

        if isinstance(spec, (DestinationConfig, Mapping)):
            destination = self._factory.create(spec)
        else:
            destination = spec
        self._destinations[destination.id] = destination
        return destination

    async def remove_destination(self, destination: DestinationPort | str) -> DestinationPort | None:
        """Flush and stop ``destination``, then drop it from the active set."""

        key = destination if isinstance(destination, str) else destination.id
        removed = self._destinations.pop(key, None)
        if removed is not None:
            await removed.flush()
            await removed.stop()
            self.flush()
        return removed

    def get_logger(
        self,
        emitter: str | None = None,
        *,
        level: Any = None,
        req_id: str | None = None,
        sid: str | None = None,
        show: ShowOptions | None = None,
        tab_size: int | None = None,
    ) -> Logger:
        """Return a logger wired to every current destination and this queue.

        A console destination is added when none is configured.
        """

        if not self._destinations:
            self.add_destination(DestinationConfig(name="console"))
        threshold = to_rank(level) if level is not None else None
        return Logger(
            level=threshold if threshold is not None else self._level,
            style=self._style,
            timer=self._timer,
            clock=self._clock,
            emitter=emitter,
            req_id=req_id,
            sid=sid,
            destinations=list(self._destinations.values()),
            dispatcher=self,
            show=show if show is not None else self._show,
            tab_size=tab_size if tab_size is not None else self._tab_size,
        )

    def dispatch(self, destination: DestinationPort, line: FinalizedLine) -> None:
        """Queue ``line`` for ``destination`` and flush what is deliverable."""

        self._pending.append((line, destination.id))
        self.flush()

    def log_message(
        self,
        level: Any,
        message: str,
        *,
        emitter: str | None = None,
        action: str | None = None,
        data: Mapping[str, Any] | None = None,
    ) -> None:
        """Queue a raw message for every destination whose threshold admits it.

        Invalid levels and ``skip`` are ignored.
        """

        resolved = to_rank(level)
        if resolved is None or resolved is LogLevel.SKIP:
            return
        event = LogMessage(level=resolved, message=message, emitter=emitter, action=action, data=data or {})
        self._pending.append((event.to_line(self._style), None))
        self.flush()

    def flush(self) -> None:
        """Deliver queued lines in FIFO order when the manager may flush."""

        if self._flushing or not self._can_flush():
            return
        self._flushing = True
        try:
            while self._pending and self._can_flush():
                line, target = self._pending.popleft()
                self._deliver(line, target)
        finally:
            self._flushing = False

    def _can_flush(self) -> bool:
        if not self._running:
            return False
        if self._all_destinations_ready:
            return self.all_destinations_ready
        return True

    def _deliver(self, line: FinalizedLine, target: str | None) -> None:
        if target is None:
            targets = list(self._destinations.values())
        else:
            destination = self._destinations.get(target)
            if destination is None:
                logger.debug("Dropping line for removed destination %s", target)
                return
            targets = [destination]
        for destination in targets:
            if not destination.accepts(line.level):
                continue
            try:
                destination.write(line)
            except Exception as exc:  # noqa: BLE001
                logger.error("Destination %s failed to write a line", destination.id, exc_info=exc)
                self._emit_diagnostic(
                    "destination_write_failed",
                    {"destination": destination.id, "error": str(exc)},
                )

    async def start_async(self) -> None:
        """Open every destination that is not ready, then flush the queue.

        Destinations that fail to open are removed; the others continue.
        """

        for destination in list(self._destinations.values()):
            if destination.ready:
                continue
            try:
                await destination.open()
            except Exception as exc:  # noqa: BLE001
                self._destination_failed(destination, exc)
        self._running = True
        self.flush()

    def start(self) -> None:
        """Synchronous wrapper around :meth:`start_async`.

        Raises
        ------
        RuntimeError
            When called from inside a running event loop.
        """

        if _loop_running():
            raise RuntimeError("LogManager.start() cannot run inside an active event loop; await start_async() instead")
        asyncio.run(self.start_async())

    def _auto_start(self) -> None:
        if _loop_running():
            self._start_task = asyncio.get_running_loop().create_task(self.start_async())
        else:
            asyncio.run(self.start_async())

    async def stop_async(self) -> None:
        """Flush the queue, flush each destination, then stop them all."""

        if self._start_task is not None:
            await self._start_task
            self._start_task = None
        shutdown = create_shutdown(destinations=lambda: list(self._destinations.values()), flush_queue=self.flush)
        await shutdown()
        self._running = False
        if self._pending:
            logger.warning("Discarding %d undelivered line(s) on stop", len(self._pending))
            self._pending.clear()

    def stop(self) -> None:
        """Synchronous wrapper around :meth:`stop_async`.

        Raises
        ------
        RuntimeError
            When called from inside a running event loop.
        """

        if _loop_running():
            raise RuntimeError("LogManager.stop() cannot run inside an active event loop; await stop_async() instead")
        asyncio.run(self.stop_async())

    def _destination_failed(self, destination: DestinationPort, exc: Exception) -> None:
        self._destinations.pop(destination.id, None)
        logger.warning("Destination %s failed to start and was removed", destination.id, exc_info=exc)
        payload = {"destination": destination.id, "name": destination.name, "error": str(exc)}
        self._emit_diagnostic("destination_start_failed", payload)
        self.log_message(
            LogLevel.WARN,
            f"Destination {destination.name} failed to start: {exc}",
            emitter=_MANAGER_EMITTER,
            action="start",
            data=payload,
        )

    def _emit_diagnostic(self, event: str, payload: dict[str, Any]) -> None:
        if self._diagnostic_hook is None:
            return
        try:
            self._diagnostic_hook(event, payload)
        except Exception as exc:  # noqa: BLE001
            logger.warning("Diagnostic hook raised while handling %s", event, exc_info=exc)


def _loop_running() -> bool:
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return False
    return True


__all__ = ["DiagnosticHook", "LogManager"]
