"""Display toggles controlling how events are rendered as text.

Purpose
-------
Express the independent prefix fields and the single-line mode as a bit set
so callers combine them with ``|`` and the formatter tests them with ``&``.

Contents
--------
* :class:`FormatOptions` - :class:`enum.IntFlag` of display toggles plus the
  ``DEFAULT`` composites and a text parser for configuration input.
"""

from __future__ import annotations

import re
from enum import IntFlag

_SEPARATORS = re.compile(r"[,|+\s]+")


class FormatOptions(IntFlag):
    """Bit set of prefix fields and line-folding behaviour.

    Examples
    --------
    >>> opts = FormatOptions.LEVEL | FormatOptions.SINGLE_LINE
    >>> bool(opts & FormatOptions.LEVEL), opts == FormatOptions.SINGLE_LINE
    (True, False)
    >>> FormatOptions.DEFAULT & FormatOptions.SINGLE_LINE
    <FormatOptions.NONE: 0>
    """

    NONE = 0
    LEVEL = 1
    LOCAL_TIME = 2
    UTC_TIME = 4
    ID = 8
    CATEGORY = 16
    SINGLE_LINE = 32

    DEFAULT_WITH_LOCAL_TIME = LEVEL | LOCAL_TIME | ID | CATEGORY
    DEFAULT_WITH_UTC_TIME = LEVEL | UTC_TIME | ID | CATEGORY
    # Every field, multi-line bodies kept.
    DEFAULT = LEVEL | LOCAL_TIME | UTC_TIME | ID | CATEGORY

    @classmethod
    def parse(cls, text: str) -> "FormatOptions":
        """Combine flag names from ``text`` such as ``"level,id|single-line"``.

        An empty string or ``"none"`` yields :attr:`NONE`.

        Examples
        --------
        >>> FormatOptions.parse("Level, single-line") == FormatOptions.LEVEL | FormatOptions.SINGLE_LINE
        True
        >>> FormatOptions.parse("")
        <FormatOptions.NONE: 0>
        """

        result = cls.NONE
        for token in _SEPARATORS.split(text.strip()):
            if not token:
                continue
            key = token.upper().replace("-", "_")
            try:
                result |= cls[key]
            except KeyError as exc:
                raise ValueError(f"Unknown format option: {token!r}") from exc
        return result


__all__ = ["FormatOptions"]
