"""Use cases formatting and dispatching structured events."""

from __future__ import annotations

from .dispatch import DispatchCallable, create_dispatch
from .format_event import LogFormatter, SystemClock, build_preamble, render

__all__ = [
    "DispatchCallable",
    "LogFormatter",
    "SystemClock",
    "build_preamble",
    "create_dispatch",
    "render",
]
