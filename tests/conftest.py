from __future__ import annotations

from datetime import datetime, timezone
from io import StringIO

import pytest
from rich.console import Console

from lib_log_line import runtime
from lib_log_line.domain.timer import AppTimer


class MockAppTimer(AppTimer):
    """Timer driven by :meth:`advance` instead of the monotonic clock."""

    def __init__(self, start: float = 0.0) -> None:
        self._now = start
        super().__init__()

    def now(self) -> float:
        return self._now

    def advance(self, microseconds: float) -> None:
        self._now += microseconds


class FixedClock:
    def __init__(self, moment: datetime) -> None:
        self.moment = moment

    def now(self) -> datetime:
        return self.moment


@pytest.fixture
def record_console() -> Console:
    return Console(file=StringIO(), record=True, width=120, color_system=None)


@pytest.fixture
def mock_timer() -> MockAppTimer:
    return MockAppTimer()


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock(datetime(2024, 5, 6, 7, 8, 9, tzinfo=timezone.utc))


@pytest.fixture(autouse=True)
def _clean_log_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "LOG_LEVEL",
        "LOG_LEVEL_PREFIX",
        "LOG_TIME_PREFIX",
        "LOG_TAB_SIZE",
        "LOG_COLORIZE",
        "LOG_NO_COLOR",
        "LOG_KEEP_LINES",
        "LOG_FILE",
        "LOG_USE_DOTENV",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def reset_runtime():
    try:
        yield
    finally:
        if runtime.is_initialised():
            runtime.shutdown()
