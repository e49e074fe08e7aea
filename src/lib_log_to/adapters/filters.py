"""Ready-made filter predicates for :class:`LogFormatter`.

Purpose
-------
Cover the common ways of choosing which events reach a text sink: by minimum
level, by a set of event ids, or by category name prefixes. Each factory
returns a plain callable matching
:class:`~lib_log_to.application.ports.EventFilterPort`.
"""

from __future__ import annotations

from collections.abc import Iterable

from lib_log_to.application.ports import EventFilterPort
from lib_log_to.domain import EventId, LogLevel


def minimum_level_filter(minimum_level: LogLevel = LogLevel.DEBUG) -> EventFilterPort:
    """Accept every event at ``minimum_level`` or above.

    Examples
    --------
    >>> accept = minimum_level_filter(LogLevel.WARNING)
    >>> accept(EventId(1), LogLevel.ERROR), accept(EventId(1), LogLevel.INFORMATION)
    (True, False)
    """

    def accept(event_id: EventId, level: LogLevel) -> bool:
        return level >= minimum_level

    return accept


def event_id_filter(
    event_ids: Iterable[EventId | int],
    minimum_level: LogLevel = LogLevel.DEBUG,
) -> EventFilterPort:
    """Accept only the listed events, compared by numeric id."""
    wanted = frozenset(item.id if isinstance(item, EventId) else int(item) for item in event_ids)

    def accept(event_id: EventId, level: LogLevel) -> bool:
        return level >= minimum_level and event_id.id in wanted

    return accept


def category_filter(
    categories: str | Iterable[str],
    minimum_level: LogLevel = LogLevel.DEBUG,
) -> EventFilterPort:
    """Accept events whose name starts with one of ``categories``.

    A single string is treated as one category.

    Examples
    --------
    >>> accept = category_filter(["Database.Command"])
    >>> accept(EventId(20100, "Database.Command.Executing"), LogLevel.DEBUG)
    True
    >>> accept(EventId(10403, "Infrastructure.ContextInitialized"), LogLevel.DEBUG)
    False
    """
    if isinstance(categories, str):
        categories = (categories,)
    prefixes = tuple(categories)

    def accept(event_id: EventId, level: LogLevel) -> bool:
        return level >= minimum_level and event_id.name.startswith(prefixes)

    return accept


__all__ = ["category_filter", "event_id_filter", "minimum_level_filter"]
