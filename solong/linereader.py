"""Reading a stream one line at a time through a fixed-size chunk buffer."""

from __future__ import annotations

import os
from typing import IO, Iterator, Optional, Union

BUFFER_SIZE = 10

Source = Union[int, IO[str], IO[bytes]]
Line = Union[str, bytes]


def _newline(data: Line) -> Line:
    return "\n" if isinstance(data, str) else b"\n"


class LineReader:
    """Return successive lines of a stream, each with its newline if it has one.

    ``source`` is a file object opened in text or binary mode, or an OS file
    descriptor. Data is read ``buffer_size`` units at a time; whatever follows
    a returned line is kept for the next call.
    """

    def __init__(self, source: Source, buffer_size: int = BUFFER_SIZE) -> None:
        if isinstance(buffer_size, bool) or not isinstance(buffer_size, int):
            raise TypeError(f"buffer_size must be an integer, got {buffer_size!r}")
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        if isinstance(source, int) and source < 0:
            raise ValueError(f"invalid file descriptor {source}")
        self._source = source
        self.buffer_size = buffer_size
        self._pending: Optional[Line] = None

    def _read_chunk(self) -> Line:
        if isinstance(self._source, int):
            return os.read(self._source, self.buffer_size)
        return self._source.read(self.buffer_size)

    def read_line(self) -> Optional[Line]:
        """The next line, or None once the stream is exhausted."""
        data = self._pending
        self._pending = None
        try:
            while data is None or _newline(data) not in data:
                chunk = self._read_chunk()
                if not chunk:
                    break
                data = chunk if data is None else data + chunk
        except OSError:
            self._pending = None
            raise
        if not data:
            return None
        end = data.find(_newline(data)) + 1
        if end == 0 or end == len(data):
            return data
        self._pending = data[end:]
        return data[:end]

    def reset(self) -> None:
        """Discard anything read ahead but not yet returned."""
        self._pending = None

    def __iter__(self) -> Iterator[Line]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line