from __future__ import annotations

import asyncio
import logging

import pytest

from lib_log_line import (
    BufferDestination,
    ConsoleDestination,
    DestinationConfig,
    FileDestination,
    LogLevel,
    LogManager,
    ShowOptions,
)
from lib_log_line.adapters.base import BaseDestination


class _FailingDestination(BaseDestination):
    kind = "failing"

    async def open(self) -> None:
        raise OSError("cannot open")

    def _write_text(self, text: str) -> None:
        raise AssertionError("never written")


class _SlowDestination(BufferDestination):
    """Buffer that only becomes ready when told to."""

    kind = "slow"

    def __init__(self) -> None:
        super().__init__(DestinationConfig(name="slow"))
        self.allow_open = False

    async def open(self) -> None:
        if self.allow_open:
            await super().open()


class _ExplodingDestination(BufferDestination):
    def _write_text(self, text: str) -> None:
        raise RuntimeError("write exploded")


def test_lines_queue_until_started_then_flush_in_order() -> None:
    manager = LogManager([{"name": "buffer"}])
    log = manager.get_logger("app")
    log.info("one").emit()
    log.info("two").emit()
    assert manager.pending == 2
    assert log.lines == []

    manager.start()
    assert manager.pending == 0
    assert log.lines == ["one", "two"]

    log.info("three").emit()
    assert log.lines == ["one", "two", "three"]
    manager.stop()


def test_get_logger_adds_console_when_no_destination() -> None:
    manager = LogManager()
    manager.get_logger()
    assert [destination.name for destination in manager.destinations] == ["console"]


def test_get_logger_applies_defaults_and_overrides() -> None:
    manager = LogManager([{"name": "buffer"}], level="warn", show=ShowOptions(level=True), tab_size=4)
    default = manager.get_logger("a")
    verbose = manager.get_logger("b", level="verbose", show=ShowOptions())
    assert default.level_threshold is LogLevel.WARN
    assert default.show.level
    assert verbose.level_threshold is LogLevel.VERBOSE
    assert not verbose.show.level
    assert default.style is manager.style is verbose.style


def test_waits_for_all_destinations_by_default() -> None:
    slow = _SlowDestination()
    manager = LogManager([{"name": "buffer"}, slow])
    log = manager.get_logger()
    manager.start()
    log.info("held").emit()
    assert manager.pending == 2

    slow.allow_open = True
    manager.start()
    assert manager.pending == 0
    assert slow.lines == ["held"]
    manager.stop()


def test_flushes_without_waiting_when_not_all_ready_required() -> None:
    slow = _SlowDestination()
    manager = LogManager([{"name": "buffer"}, slow], all_destinations_ready=False)
    log = manager.get_logger()
    manager.start()
    log.info("sent").emit()
    assert manager.pending == 0
    assert log.lines == ["sent"]
    manager.stop()


def test_failed_destination_is_removed_and_reported(caplog: pytest.LogCaptureFixture) -> None:
    events: list[tuple[str, dict]] = []
    failing = _FailingDestination(DestinationConfig(name="failing"))
    manager = LogManager(
        [{"name": "buffer"}, failing],
        diagnostic_hook=lambda name, payload: events.append((name, payload)),
    )
    buffer = manager.destinations[0]

    with caplog.at_level(logging.WARNING, logger="lib_log_line.manager"):
        manager.start()

    assert failing not in manager.destinations
    assert [name for name, _ in events] == ["destination_start_failed"]
    assert events[0][1]["error"] == "cannot open"
    assert any("failed to start" in record.getMessage() for record in caplog.records)
    assert isinstance(buffer, BufferDestination)
    payload = f'{{"destination": "{failing.id}", "error": "cannot open", "name": "failing"}}'
    assert buffer.lines == [f"[WARN]    LogManager start Destination failing failed to start: cannot open {payload}"]
    manager.stop()


def test_lines_for_removed_destination_are_dropped() -> None:
    failing = _FailingDestination(DestinationConfig(name="failing"))
    manager = LogManager([{"name": "buffer"}, failing])
    log = manager.get_logger()
    log.info("before start").emit()
    manager.start()
    assert "before start" in log.lines
    log.info("after start").emit()
    assert log.lines[-1] == "after start"
    manager.stop()


def test_log_message_filters_per_destination() -> None:
    manager = LogManager(
        [{"name": "buffer"}, {"name": "buffer", "level_threshold": "error"}],
    )
    manager.start()
    manager.log_message("warn", "disk low", emitter="monitor", data={"free": 3})
    manager.log_message("bogus", "ignored")
    manager.log_message(LogLevel.SKIP, "ignored")
    first, second = manager.destinations
    assert first.lines == ['[WARN]    monitor disk low {"free": 3}']
    assert second.lines == []
    manager.stop()


def test_write_errors_are_logged_and_reported(caplog: pytest.LogCaptureFixture) -> None:
    events: list[str] = []
    exploding = _ExplodingDestination()
    healthy = BufferDestination()
    manager = LogManager([exploding, healthy], diagnostic_hook=lambda name, payload: events.append(name))
    log = manager.get_logger()
    manager.start()

    with caplog.at_level(logging.ERROR, logger="lib_log_line.manager"):
        log.info("still delivered").emit()

    assert healthy.lines == ["still delivered"]
    assert events == ["destination_write_failed"]
    assert caplog.records
    manager.stop()


def test_diagnostic_hook_errors_are_swallowed(caplog: pytest.LogCaptureFixture) -> None:
    def broken_hook(name: str, payload: dict) -> None:
        raise RuntimeError("hook failed")

    manager = LogManager([_FailingDestination(DestinationConfig(name="failing"))], diagnostic_hook=broken_hook)
    with caplog.at_level(logging.WARNING, logger="lib_log_line.manager"):
        manager.start()
    assert any("Diagnostic hook raised" in record.getMessage() for record in caplog.records)
    manager.stop()


def test_auto_run_starts_destinations() -> None:
    manager = LogManager([{"name": "buffer"}], auto_run=True)
    assert manager.running
    assert manager.all_destinations_ready
    manager.stop()
    assert not manager.running
    assert not manager.destinations[0].ready


def test_remove_destination_stops_it() -> None:
    manager = LogManager([{"name": "buffer"}, {"name": "buffer"}])
    manager.start()
    first, second = manager.destinations
    removed = asyncio.run(manager.remove_destination(first.id))
    assert removed is first
    assert not first.ready
    assert manager.destinations == (second,)
    manager.stop()


def test_sync_start_inside_running_loop_raises() -> None:
    manager = LogManager([{"name": "buffer"}])

    async def scenario() -> None:
        with pytest.raises(RuntimeError, match="await start_async"):
            manager.start()
        with pytest.raises(RuntimeError, match="await stop_async"):
            manager.stop()

    asyncio.run(scenario())


@pytest.mark.asyncio
async def test_async_lifecycle() -> None:
    manager = LogManager([{"name": "buffer"}])
    log = manager.get_logger("async")
    log.info("queued").emit()
    await manager.start_async()
    assert log.lines == ["queued"]
    await manager.stop_async()
    assert not manager.running


@pytest.mark.asyncio
async def test_auto_run_inside_loop_schedules_start() -> None:
    manager = LogManager([{"name": "buffer"}], auto_run=True)
    log = manager.get_logger()
    log.info("early").emit()
    await manager.stop_async()
    assert log.lines == ["early"]


def test_file_destination_through_manager(tmp_path) -> None:
    target = tmp_path / "logs" / "app.log"
    manager = LogManager([{"name": "file", "filename": str(target)}], show=ShowOptions(level=True))
    log = manager.get_logger()
    log.info("persisted").emit()
    manager.start()
    manager.stop()
    assert target.read_text(encoding="utf-8") == "[INFO]    persisted\n"


def test_console_destination_through_manager(record_console) -> None:
    manager = LogManager([ConsoleDestination(console=record_console)])
    manager.start()
    manager.get_logger().info("to the terminal").emit()
    manager.stop()
    assert record_console.export_text() == "to the terminal\n"


class _FailOnceStream:
    """Wrap a real stream and fail the first write only."""

    def __init__(self, stream) -> None:
        self._stream = stream
        self.failed = False

    def write(self, text: str) -> int:
        if not self.failed:
            self.failed = True
            raise OSError("disk full")
        return self._stream.write(text)

    def flush(self) -> None:
        self._stream.flush()

    def close(self) -> None:
        self._stream.close()


def test_file_destination_recovers_while_running(tmp_path, caplog: pytest.LogCaptureFixture) -> None:
    target = tmp_path / "app.log"
    manager = LogManager([{"name": "file", "filename": str(target)}])
    manager.start()
    destination = manager.destinations[0]
    assert isinstance(destination, FileDestination)
    destination._stream = _FailOnceStream(destination._stream)  # type: ignore[assignment]
    log = manager.get_logger()

    with caplog.at_level(logging.WARNING, logger="lib_log_line.adapters.file"):
        log.info("one").emit()
    assert destination.pending == 1
    assert any("buffered" in record.getMessage() for record in caplog.records)

    log.info("two").emit()
    log.info("three").emit()
    assert destination.pending == 0
    assert target.read_text(encoding="utf-8") == "one\ntwo\nthree\n"
    manager.stop()
