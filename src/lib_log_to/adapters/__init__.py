"""Adapters: concrete sinks and filters for the formatter."""

from __future__ import annotations

from .console.rich_console import RichConsoleSink
from .filters import category_filter, event_id_filter, minimum_level_filter
from .stream import StreamSink
from .text_file import TextFileSink

__all__ = [
    "RichConsoleSink",
    "StreamSink",
    "TextFileSink",
    "category_filter",
    "event_id_filter",
    "minimum_level_filter",
]
