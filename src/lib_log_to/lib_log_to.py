"""Façade assembling a ready-to-use text formatter.

Purpose
-------
Offer one call that covers the usual ways of sending structured events to a
text destination: everything above a level, a fixed set of event ids, a set
of categories, or a caller-supplied predicate.

Contents
--------
* :func:`log_to` - build a :class:`LogFormatter` from a sink and a filter choice.
* :func:`summary_info` - metadata banner used by the CLI.

System Role
-----------
Composition point between the domain, the formatting use case and the
adapters. No global state is created; callers keep the returned formatter.
"""

from __future__ import annotations

from collections.abc import Iterable

from .adapters import StreamSink, category_filter, event_id_filter, minimum_level_filter
from .application.ports import ClockPort, EventFilterPort, TextSinkPort
from .application.use_cases.format_event import LogFormatter
from .domain import EventId, FormatOptions, LogLevel


def log_to(
    sink: TextSinkPort | None = None,
    *,
    options: FormatOptions = FormatOptions.DEFAULT,
    minimum_level: LogLevel = LogLevel.DEBUG,
    events: Iterable[EventId | int] | None = None,
    categories: Iterable[str] | None = None,
    event_filter: EventFilterPort | None = None,
    clock: ClockPort | None = None,
) -> LogFormatter:
    """Return a :class:`LogFormatter` writing to ``sink``.

    Parameters
    ----------
    sink:
        Destination for formatted records; defaults to :class:`StreamSink`
        on stdout.
    options:
        Display options; defaults to every prefix field with multi-line bodies.
    minimum_level:
        Lowest level let through by the ``events``/``categories`` filters and
        by the default level filter. Ignored with ``event_filter``.
    events:
        Only log these event ids.
    categories:
        Only log events whose name starts with one of these categories.
    event_filter:
        Custom predicate replacing the built-in filters.
    clock:
        Timestamp source, mainly for tests.

    Raises
    ------
    ValueError
        When more than one of ``events``, ``categories`` and ``event_filter``
        is given.

    Examples
    --------
    >>> lines = []
    >>> formatter = log_to(lines.append, options=FormatOptions.LEVEL | FormatOptions.SINGLE_LINE,
    ...                    minimum_level=LogLevel.INFORMATION)
    >>> formatter.should_log(EventId(1), LogLevel.DEBUG)
    False
    """
    selectors = [value for value in (events, categories, event_filter) if value is not None]
    if len(selectors) > 1:
        raise ValueError("Pass only one of events, categories or event_filter")

    if event_filter is not None:
        chosen = event_filter
    elif events is not None:
        chosen = event_id_filter(events, minimum_level)
    elif categories is not None:
        chosen = category_filter(categories, minimum_level)
    else:
        chosen = minimum_level_filter(minimum_level)

    return LogFormatter(
        sink if sink is not None else StreamSink(),
        chosen,
        options,
        clock=clock,
    )


def summary_info() -> str:
    """Return the metadata banner printed by ``lib_log_to info``.

    Examples
    --------
    >>> "version" in summary_info()
    True
    """
    from . import __init__conf__

    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    return "".join(lines)


__all__ = ["log_to", "summary_info"]
