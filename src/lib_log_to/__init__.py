"""Public package surface for formatting structured events as text.

Exposes the domain types, the :class:`LogFormatter` use case, the ready-made
sinks and filters, and the :func:`log_to` convenience constructor.
"""

from __future__ import annotations

from .adapters import (
    RichConsoleSink,
    StreamSink,
    TextFileSink,
    category_filter,
    event_id_filter,
    minimum_level_filter,
)
from .application.use_cases import LogFormatter, create_dispatch
from .domain import EventId, FormatOptions, LogEvent, LogLevel
from .lib_log_to import log_to, summary_info

__all__ = [
    "EventId",
    "FormatOptions",
    "LogEvent",
    "LogFormatter",
    "LogLevel",
    "RichConsoleSink",
    "StreamSink",
    "TextFileSink",
    "category_filter",
    "create_dispatch",
    "event_id_filter",
    "log_to",
    "minimum_level_filter",
    "summary_info",
]
