"""Use case turning one structured event into one line of text.

Purpose
-------
Compose the optional prefix (level tag, local time, UTC time, event id,
category) ahead of an event's message, fold multi-line messages according to
:class:`~lib_log_to.domain.options.FormatOptions`, and hand the result to a
sink when the configured filter lets the event through.

Contents
--------
* :func:`level_tag`, :func:`format_local_time`, :func:`format_utc_time` -
  field renderers.
* :func:`build_preamble` / :func:`render` - pure formatting functions.
* :class:`SystemClock` - default :class:`ClockPort`.
* :class:`LogFormatter` - :class:`LogToPort` implementation wiring a sink,
  a filter and the display options together.

System Role
-----------
The only component with real logic. It holds no mutable state and takes no
locks, so concurrent callers are safe as long as the sink and filter are.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, timezone

from lib_log_to.application.ports import ClockPort, EventFilterPort, LogToPort, TextSinkPort
from lib_log_to.domain import EventId, FormatOptions, LogEvent, LogLevel, category_of

logger = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r"\r\n|\r|\n")
_PADDING = "      "
_SINGLE_LINE_MARKER = "-> "
_TIME_FIELDS = FormatOptions.LOCAL_TIME | FormatOptions.UTC_TIME


def level_tag(level: object) -> str:
    """Return the six-character tag for ``level``.

    Anything that is not a :class:`LogLevel` renders like ``LogLevel.NONE``.

    Examples
    --------
    >>> level_tag(LogLevel.ERROR)
    'fail: '
    >>> level_tag(42)
    'none'
    """
    if isinstance(level, LogLevel):
        return level.tag
    return LogLevel.NONE.tag


def format_local_time(moment: datetime) -> str:
    """Render ``moment`` as local short date plus ``HH:MM:SS.fff``.

    The date part follows the active locale (``%x``).
    """
    local = moment.astimezone()
    return f"{local:%x} {local:%H:%M:%S}.{local.microsecond // 1000:03d}"


def format_utc_time(moment: datetime) -> str:
    """Render ``moment`` as an ISO 8601 UTC timestamp ending in ``Z``.

    Examples
    --------
    >>> format_utc_time(datetime(2026, 10, 19, 8, 30, 5, 123456, tzinfo=timezone.utc))
    '2026-10-19T08:30:05.123456Z'
    """
    utc = moment.astimezone(timezone.utc)
    return f"{utc:%Y-%m-%dT%H:%M:%S.%f}Z"


def build_preamble(event: LogEvent, options: FormatOptions, moment: datetime | None = None) -> str:
    """Return the prefix selected by ``options`` for ``event``.

    Fields appear in a fixed order: level, local time, UTC time, id, category.
    ``moment`` is required only when a time field is enabled.
    """
    parts: list[str] = []

    if options & FormatOptions.LEVEL:
        parts.append(level_tag(event.level))

    if options & _TIME_FIELDS and moment is None:
        raise ValueError("moment is required when time fields are enabled")

    if options & FormatOptions.LOCAL_TIME:
        parts.extend((format_local_time(moment), " "))  # type: ignore[arg-type]

    if options & FormatOptions.UTC_TIME:
        parts.extend((format_utc_time(moment), " "))  # type: ignore[arg-type]

    if options & FormatOptions.ID:
        parts.extend((str(event.event_id_code), "[", str(event.event_id.id), "] "))

    if options & FormatOptions.CATEGORY:
        category = category_of(event.event_id.name)
        if category is not None:
            parts.extend(("(", category, ") "))

    return "".join(parts)


def render(event: LogEvent, options: FormatOptions, moment: datetime | None = None) -> str:
    """Return the complete text for ``event``.

    Examples
    --------
    >>> event = LogEvent(LogLevel.INFORMATION, EventId(1, "App.Start"), "one\\ntwo")
    >>> render(event, FormatOptions.NONE)
    'one\\ntwo'
    >>> render(event, FormatOptions.SINGLE_LINE)
    'onetwo'
    >>> render(event, FormatOptions.LEVEL | FormatOptions.SINGLE_LINE)
    'info: -> onetwo'
    >>> render(event, FormatOptions.LEVEL | FormatOptions.CATEGORY)
    'info: (App) \\n      one\\n      two'
    """
    message = str(event)
    if options == FormatOptions.NONE:
        return message

    preamble = build_preamble(event, options, moment)

    if options == FormatOptions.SINGLE_LINE:
        return _LINE_BREAK.sub("", preamble + message)

    if options & FormatOptions.SINGLE_LINE:
        return preamble + _LINE_BREAK.sub("", _SINGLE_LINE_MARKER + message)

    return preamble + _LINE_BREAK.sub("\n" + _PADDING, "\n" + message)


class SystemClock(ClockPort):
    """Clock returning timezone-aware UTC timestamps."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class LogFormatter(LogToPort):
    """Format events as text and forward them to a sink.

    Parameters
    ----------
    sink:
        Callable receiving each formatted record.
    event_filter:
        Callable deciding from ``(event_id, level)`` whether to log.
    options:
        :class:`FormatOptions` fixed for the lifetime of the formatter.
    clock:
        Source of timestamps for the time fields; defaults to
        :class:`SystemClock`.

    Examples
    --------
    >>> lines = []
    >>> formatter = LogFormatter(lines.append, lambda event_id, level: True, FormatOptions.ID)
    >>> formatter.log(LogEvent(LogLevel.DEBUG, EventId(7, "Db.Open"), "opened", "DbEventId.Open"))
    >>> lines
    ['DbEventId.Open[7] \\n      opened']
    """

    def __init__(
        self,
        sink: TextSinkPort,
        event_filter: EventFilterPort,
        options: FormatOptions,
        *,
        clock: ClockPort | None = None,
    ) -> None:
        if not callable(sink):
            raise TypeError("sink must be callable")
        if not callable(event_filter):
            raise TypeError("event_filter must be callable")
        self._sink = sink
        self._filter = event_filter
        self._options = FormatOptions(options)
        self._clock = clock if clock is not None else SystemClock()
        logger.debug("LogFormatter created with options %s", self._options)

    @property
    def options(self) -> FormatOptions:
        return self._options

    @property
    def sink(self) -> TextSinkPort:
        return self._sink

    @property
    def event_filter(self) -> EventFilterPort:
        return self._filter

    def should_log(self, event_id: EventId, level: LogLevel) -> bool:
        """Return the filter's verdict for ``event_id`` at ``level``."""
        return self._filter(event_id, level)

    def log(self, event: LogEvent) -> None:
        """Format ``event`` and pass the text to the sink.

        Raises
        ------
        ValueError
            When ``event`` is ``None``; the sink is not called.
        """
        if event is None:
            raise ValueError("event must not be None")

        moment = self._clock.now() if self._options & _TIME_FIELDS else None
        self._sink(render(event, self._options, moment))


__all__ = [
    "LogFormatter",
    "SystemClock",
    "build_preamble",
    "format_local_time",
    "format_utc_time",
    "level_tag",
    "render",
]
