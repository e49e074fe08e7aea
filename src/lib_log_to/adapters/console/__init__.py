"""Console sinks."""

from __future__ import annotations

from .rich_console import RichConsoleSink

__all__ = ["RichConsoleSink"]
