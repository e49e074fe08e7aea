"""Static package metadata surfaced by the CLI ``info`` command."""

from __future__ import annotations

from collections.abc import Callable

name = "lib_log_to"
title = "Format structured log events as indented or single-line text records"
version = "0.1.0"
homepage = "https://github.com/bitranox/lib_log_to"
author = "bitranox"
author_email = "bitranox@gmail.com"
shell_command = "lib_log_to"


def print_info(writer: Callable[[str], object] = print) -> None:
    """Send a multi-line metadata banner to ``writer``.

    Examples
    --------
    >>> lines = []
    >>> print_info(writer=lines.append)
    >>> lines[0]
    'Info for lib_log_to:\\n'
    """

    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    writer(f"Info for {name}:\n")
    writer("\n")
    for label, value in fields:
        writer(f"    {label:<{pad}} = {value}\n")
