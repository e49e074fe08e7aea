"""File sink appending formatted records to a text file.

Purpose
-------
Provide a ready-made line-oriented destination for formatted events. The
formatter itself is lock-free; this adapter serialises its own writes so a
single instance can be shared between threads.

Contents
--------
* :class:`TextFileSink` - lazily opened, thread-safe file appender.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from types import TracebackType
from typing import TextIO

from lib_log_to.application.ports.sink import TextSinkPort

logger = logging.getLogger(__name__)


class TextFileSink(TextSinkPort):
    """Append each record plus a newline to ``path``.

    Parameters
    ----------
    path:
        Target file; parent directories are created on first write.
    encoding:
        Text encoding used for the file.
    append:
        ``False`` truncates an existing file when it is first opened.
    """

    def __init__(self, path: str | Path, *, encoding: str = "utf-8", append: bool = True) -> None:
        self._path = Path(path)
        self._encoding = encoding
        self._append = append
        self._handle: TextIO | None = None
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    def __call__(self, text: str) -> None:
        with self._lock:
            handle = self._open()
            handle.write(text + "\n")
            handle.flush()

    def close(self) -> None:
        """Close the underlying file; a later write reopens it for appending."""
        with self._lock:
            if self._handle is not None:
                self._handle.close()
                self._handle = None
                self._append = True

    def __enter__(self) -> "TextFileSink":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _open(self) -> TextIO:
        if self._handle is None:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            mode = "a" if self._append else "w"
            logger.debug("Opening %s in mode %r", self._path, mode)
            self._handle = self._path.open(mode, encoding=self._encoding)
        return self._handle


__all__ = ["TextFileSink"]
