"""Severity levels understood by the text formatter.

Purpose
-------
Model the ordered severities attached to structured events and the short
display tags printed ahead of formatted lines.

Contents
--------
* :class:`LogLevel` enum with conversion helpers and the tag table.
* ``_TAG_TABLE`` constant mapping levels to six-character tags.

System Role
-----------
Shared by the domain events, the filters in :mod:`lib_log_to.adapters.filters`
and the formatting use case, which only relies on :attr:`LogLevel.tag`.
"""

from __future__ import annotations

import logging
from enum import Enum
from functools import total_ordering


@total_ordering
class LogLevel(Enum):
    """Ordered severities from ``TRACE`` to ``CRITICAL`` plus ``NONE``."""

    TRACE = 0
    DEBUG = 1
    INFORMATION = 2
    WARNING = 3
    ERROR = 4
    CRITICAL = 5
    NONE = 6

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.value < other.value

    @property
    def tag(self) -> str:
        """Return the display tag rendered when levels are shown.

        Examples
        --------
        >>> LogLevel.WARNING.tag
        'warn: '
        >>> LogLevel.NONE.tag
        'none'
        """

        return _TAG_TABLE.get(self, _UNKNOWN_TAG)

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        """Resolve a case-insensitive level name such as ``"info"``."""
        normalized = name.strip().upper()
        normalized = _ALIASES.get(normalized, normalized)
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown log level: {name!r}") from exc

    @classmethod
    def from_python_level(cls, level: int) -> "LogLevel":
        """Translate a stdlib :mod:`logging` level into :class:`LogLevel`.

        Values between the stdlib constants round down to the closest level.
        """
        if level >= logging.CRITICAL:
            return cls.CRITICAL
        if level >= logging.ERROR:
            return cls.ERROR
        if level >= logging.WARNING:
            return cls.WARNING
        if level >= logging.INFO:
            return cls.INFORMATION
        if level >= logging.DEBUG:
            return cls.DEBUG
        return cls.TRACE


_TAG_TABLE = {
    LogLevel.TRACE: "trce: ",
    LogLevel.DEBUG: "dbug: ",
    LogLevel.INFORMATION: "info: ",
    LogLevel.WARNING: "warn: ",
    LogLevel.ERROR: "fail: ",
    LogLevel.CRITICAL: "crit: ",
}
# Levels outside the table render as this literal, without the trailing space.
_UNKNOWN_TAG = "none"

_ALIASES = {
    "INFO": "INFORMATION",
    "WARN": "WARNING",
    "FATAL": "CRITICAL",
}


__all__ = ["LogLevel"]
