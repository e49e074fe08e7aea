from __future__ import annotations

from lib_log_to.application.use_cases.dispatch import create_dispatch
from lib_log_to.domain import EventId, LogEvent, LogLevel


class _FakeLogTo:
    def __init__(self, allow: bool) -> None:
        self.allow = allow
        self.asked: list[tuple[EventId, LogLevel]] = []
        self.logged: list[LogEvent] = []

    def should_log(self, event_id: EventId, level: LogLevel) -> bool:
        self.asked.append((event_id, level))
        return self.allow

    def log(self, event: LogEvent) -> None:
        self.logged.append(event)


def test_dispatch_skips_event_construction_when_filtered() -> None:
    fake = _FakeLogTo(allow=False)
    built: list[int] = []

    def build() -> LogEvent:
        built.append(1)
        return LogEvent(LogLevel.DEBUG, EventId(1), "never")

    dispatch = create_dispatch(fake)

    assert dispatch(EventId(1), LogLevel.DEBUG, build) is False
    assert built == []
    assert fake.logged == []
    assert fake.asked == [(EventId(1), LogLevel.DEBUG)]


def test_dispatch_builds_and_logs_when_allowed() -> None:
    fake = _FakeLogTo(allow=True)
    event = LogEvent(LogLevel.ERROR, EventId(2, "A.B"), "kept")

    dispatch = create_dispatch(fake)

    assert dispatch(EventId(2, "A.B"), LogLevel.ERROR, lambda: event) is True
    assert fake.logged == [event]
