"""Filter port deciding whether an event is worth formatting."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from lib_log_to.domain.events import EventId
from lib_log_to.domain.levels import LogLevel


@runtime_checkable
class EventFilterPort(Protocol):
    """Return ``True`` when events with this identity and level should be logged.

    Filters are called once per candidate event, before the event is built,
    so they should be cheap and free of side effects.
    """

    def __call__(self, event_id: EventId, level: LogLevel) -> bool: ...


__all__ = ["EventFilterPort"]
