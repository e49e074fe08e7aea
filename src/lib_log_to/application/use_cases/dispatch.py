"""Use case asking before building and logging an event.

Purpose
-------
Honour the contract of :class:`~lib_log_to.application.ports.LogToPort`:
the filter is consulted with the cheap ``(event_id, level)`` pair first, and
the event itself is only built when it will actually be logged.
"""

from __future__ import annotations

from collections.abc import Callable

from lib_log_to.application.ports import LogToPort
from lib_log_to.domain import EventId, LogEvent, LogLevel

DispatchCallable = Callable[[EventId, LogLevel, Callable[[], LogEvent]], bool]


def create_dispatch(log_to: LogToPort) -> DispatchCallable:
    """Return a callable that filters, builds and logs one event.

    Examples
    --------
    >>> from lib_log_to.domain import FormatOptions
    >>> from lib_log_to.application.use_cases.format_event import LogFormatter
    >>> lines = []
    >>> formatter = LogFormatter(lines.append, lambda _id, level: level >= LogLevel.WARNING, FormatOptions.NONE)
    >>> dispatch = create_dispatch(formatter)
    >>> dispatch(EventId(1), LogLevel.DEBUG, lambda: LogEvent(LogLevel.DEBUG, EventId(1), "skipped"))
    False
    >>> dispatch(EventId(2), LogLevel.ERROR, lambda: LogEvent(LogLevel.ERROR, EventId(2), "kept"))
    True
    >>> lines
    ['kept']
    """

    def dispatch(event_id: EventId, level: LogLevel, build_event: Callable[[], LogEvent]) -> bool:
        """Log the event produced by ``build_event`` when the filter allows it."""
        if not log_to.should_log(event_id, level):
            return False
        log_to.log(build_event())
        return True

    return dispatch


__all__ = ["DispatchCallable", "create_dispatch"]
