from __future__ import annotations

from datetime import datetime, timezone
from io import StringIO

import pytest
from rich.console import Console

from lib_log_to.domain import EventId, LogEvent, LogLevel


class FixedClock:
    """Clock returning the same instant on every call."""

    def __init__(self, moment: datetime) -> None:
        self.moment = moment
        self.calls = 0

    def now(self) -> datetime:
        self.calls += 1
        return self.moment


@pytest.fixture
def fixed_moment() -> datetime:
    return datetime(2026, 10, 19, 8, 30, 5, 123456, tzinfo=timezone.utc)


@pytest.fixture
def fixed_clock(fixed_moment: datetime) -> FixedClock:
    return FixedClock(fixed_moment)


@pytest.fixture
def record_console() -> Console:
    return Console(file=StringIO(), record=True, width=40, color_system=None)


@pytest.fixture
def make_event():
    def _make(
        message: str = "hello",
        *,
        level: LogLevel = LogLevel.INFORMATION,
        event_id: int = 10403,
        name: str = "Infrastructure.ContextInitialized",
        code: str | None = None,
    ) -> LogEvent:
        return LogEvent(level, EventId(event_id, name), message, code)

    return _make
