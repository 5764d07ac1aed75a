"""Reading text one line at a time through a fixed-size chunk buffer."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import TextIO

BUFFER_SIZE = 21


class LineReader:
    """Yields the lines of a text stream, each with its trailing newline."""

    def __init__(self, stream: TextIO, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending = ""
        self._eof = False

    def read_line(self) -> str | None:
        """Return the next line, or ``None`` once the stream is exhausted."""
        while True:
            newline = self._pending.find("\n")
            if newline >= 0:
                line = self._pending[: newline + 1]
                self._pending = self._pending[newline + 1 :]
                return line
            if self._eof:
                if self._pending:
                    line, self._pending = self._pending, ""
                    return line
                return None
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                self._eof = True
            else:
                self._pending += chunk

    def __iter__(self) -> Iterator[str]:
        return iter(self.read_line, None)


def read_lines(path: str | os.PathLike[str]) -> Iterator[str]:
    """Yield the lines of the file at ``path``, line endings kept as they are."""
    with open(path, encoding="utf-8", newline="") as handle:
        yield from LineReader(handle)