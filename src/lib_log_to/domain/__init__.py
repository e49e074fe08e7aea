"""Domain value objects shared by the formatter, filters and sinks."""

from __future__ import annotations

from .events import EventId, LogEvent, category_of
from .levels import LogLevel
from .options import FormatOptions

__all__ = [
    "EventId",
    "FormatOptions",
    "LogEvent",
    "LogLevel",
    "category_of",
]
