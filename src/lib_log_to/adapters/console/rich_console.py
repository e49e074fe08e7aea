"""Rich-powered console sink implementing :class:`TextSinkPort`.

Purpose
-------
Print formatted records through a :class:`rich.console.Console` so they share
the terminal handling (colour detection, ``NO_COLOR``, capture) of the rest of
a Rich application.

Contents
--------
* :class:`RichConsoleSink` - sink used by the CLI and by :func:`lib_log_to.log_to`.

System Role
-----------
Human-facing destination. Markup, highlighting and wrapping are disabled so
the text produced by the formatter reaches the terminal unchanged, including
its indented continuation lines.
"""

from __future__ import annotations

from rich.console import Console

from lib_log_to.application.ports.sink import TextSinkPort


class RichConsoleSink(TextSinkPort):
    """Write each record as one console entry."""

    def __init__(
        self,
        console: Console | None = None,
        *,
        style: str | None = None,
        stderr: bool = False,
        no_color: bool = False,
    ) -> None:
        """Use ``console`` or build one targeting stdout/stderr."""
        if console is not None:
            self._console = console
        else:
            self._console = Console(stderr=stderr, no_color=no_color)
        self._style = style

    @property
    def console(self) -> Console:
        return self._console

    def __call__(self, text: str) -> None:
        """Print ``text`` verbatim.

        Examples
        --------
        >>> from io import StringIO
        >>> console = Console(file=StringIO(), record=True, width=20)
        >>> sink = RichConsoleSink(console)
        >>> sink("info: [bold]not markup[/bold] that is longer than twenty")
        >>> console.export_text()
        'info: [bold]not markup[/bold] that is longer than twenty\\n'
        """
        self._console.print(
            text,
            style=self._style,
            markup=False,
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )


__all__ = ["RichConsoleSink"]
