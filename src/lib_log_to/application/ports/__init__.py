"""Protocols describing the collaborators of the formatting use cases."""

from __future__ import annotations

from .filter import EventFilterPort
from .log_to import LogToPort
from .sink import TextSinkPort
from .time import ClockPort

__all__ = [
    "ClockPort",
    "EventFilterPort",
    "LogToPort",
    "TextSinkPort",
]
