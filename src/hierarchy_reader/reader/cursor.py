"""Synchronized line source shared by all readers."""

import threading
from typing import TextIO

from hierarchy_reader.reader.types import BUFFER_SIZE


class HierarchyOpenError(OSError):
    """Raised when the hierarchy file cannot be opened."""


class SharedCursor:
    """
    Hands out the lines of one file to concurrent callers.

    Only reading a line and advancing the position happen under the lock.
    Each line goes to exactly one caller; once the end of the file is seen,
    every later call returns None.
    """

    def __init__(self, path: str):
        self._path = path
        self._lock = threading.Lock()
        self._lines_read = 0
        try:
            self._handle: TextIO | None = open(  # noqa: SIM115
                path,
                "r",
                encoding="utf-8",
                errors="surrogateescape",
                newline="\n",
                buffering=BUFFER_SIZE,
            )
        except OSError as exc:
            raise HierarchyOpenError(f"Failed to open file {path}: {exc.strerror or exc}") from exc

    @property
    def path(self) -> str:
        return self._path

    @property
    def lines_read(self) -> int:
        """Number of lines handed out so far."""
        return self._lines_read

    def take_next_line(self) -> str | None:
        """Return the next line without its terminator, or None at end of stream."""
        with self._lock:
            if self._handle is None:
                return None
            line = self._handle.readline()
            if not line:
                self._handle.close()
                self._handle = None
                return None
            self._lines_read += 1
        return line.rstrip("\r\n")

    def close(self) -> None:
        with self._lock:
            if self._handle is not None:
                self._handle.close()
                self._handle = None

    def __enter__(self) -> "SharedCursor":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
