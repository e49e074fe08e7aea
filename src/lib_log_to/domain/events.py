"""Structured event types consumed by the text formatter.

Purpose
-------
Provide immutable representations of an event's identity and of the event
itself so formatters and filters operate on pure data objects.

Contents
--------
* :class:`EventId` - numeric id plus dotted hierarchical name.
* :class:`LogEvent` - level, identity, rendered message and display code.

System Role
-----------
Sits in the domain layer. Events are produced by the surrounding logging
pipeline; the formatter reads them exactly once and never stores them.
"""

from __future__ import annotations

from dataclasses import dataclass

from .levels import LogLevel


def category_of(name: str) -> str | None:
    """Return everything before the last ``.`` in ``name``.

    ``None`` when ``name`` has no separator or starts with it.
    """
    last_dot = name.rfind(".")
    if last_dot > 0:
        return name[:last_dot]
    return None


@dataclass(slots=True, frozen=True)
class EventId:
    """Identity of a kind of event, e.g. ``EventId(20100, "Database.Command")``.

    Attributes
    ----------
    id:
        Stable numeric code.
    name:
        Dotted hierarchical name; the last segment names the event, the rest
        is its category.
    """

    id: int
    name: str = ""

    @property
    def category(self) -> str | None:
        """Return the category part of :attr:`name` (see :func:`category_of`).

        Examples
        --------
        >>> EventId(1, "Database.Command.Created").category
        'Database.Command'
        >>> EventId(2, "Startup").category is None
        True
        """

        return category_of(self.name)

    def __str__(self) -> str:
        return self.name or str(self.id)


@dataclass(slots=True, frozen=True)
class LogEvent:
    """Immutable event handed to a formatter.

    Attributes
    ----------
    level:
        :class:`LogLevel` severity.
    event_id:
        :class:`EventId` identifying the kind of event.
    message:
        Fully rendered message; may span several lines.
    event_id_code:
        Display code printed ahead of ``[id]``. Falls back to
        ``event_id.name`` when not given.
    """

    level: LogLevel
    event_id: EventId
    message: str
    event_id_code: str | None = None

    def __post_init__(self) -> None:
        if self.event_id_code is None:
            object.__setattr__(self, "event_id_code", self.event_id.name)

    def __str__(self) -> str:
        return self.message


__all__ = ["EventId", "LogEvent", "category_of"]
