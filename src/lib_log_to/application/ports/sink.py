"""Sink port describing where formatted lines go.

Purpose
-------
Define the single-method contract the formatter uses to hand over finished
text, so consoles, files and test doubles plug in interchangeably.

Contents
--------
* :class:`TextSinkPort` - runtime-checkable callable protocol.

System Role
-----------
Outer boundary of the formatter. Implementations may block or raise; the
formatter neither retries nor translates their failures.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class TextSinkPort(Protocol):
    """Accept one fully formatted text record."""

    def __call__(self, text: str) -> None:
        """Write ``text`` to the destination."""


__all__ = ["TextSinkPort"]
