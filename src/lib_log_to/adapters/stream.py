"""Plain text-stream sink writing one record per call."""

from __future__ import annotations

import sys
from typing import TextIO

from lib_log_to.application.ports.sink import TextSinkPort


class StreamSink(TextSinkPort):
    """Write records to ``stream`` followed by a newline.

    When no stream is given, :data:`sys.stdout` is looked up on every call so
    redirection (e.g. pytest's ``capsys``) is honoured.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def __call__(self, text: str) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(text + "\n")
        stream.flush()


__all__ = ["StreamSink"]
