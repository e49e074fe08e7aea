"""Port implemented by components that turn events into text output.

Purpose
-------
Capture the two-step contract used by event producers: ask first, then hand
over the event. Producers that depend on this protocol can skip building an
event entirely when :meth:`LogToPort.should_log` answers ``False``.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from lib_log_to.domain.events import EventId, LogEvent
from lib_log_to.domain.levels import LogLevel


@runtime_checkable
class LogToPort(Protocol):
    """Decide about and emit structured events."""

    def should_log(self, event_id: EventId, level: LogLevel) -> bool:
        """Return ``True`` when an event with this identity should be emitted."""

    def log(self, event: LogEvent) -> None:
        """Emit ``event``."""


__all__ = ["LogToPort"]
