"""Line-by-line reading from a file descriptor or stream with a fixed read size."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import IO, AnyStr, Generic

BUFFER_SIZE = 100


class LineReader(Generic[AnyStr]):
    """Read lines, newline included, from an integer file descriptor or a stream.

    Data is fetched *buffer_size* units at a time; what follows a returned
    line is kept for the next call. Lines are bytes for descriptors and
    binary streams, str for text streams.
    """

    def __init__(self, stream: int | IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        if isinstance(stream, int) and stream < 0:
            raise ValueError(f"invalid file descriptor {stream}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None

    def _read_chunk(self) -> AnyStr:
        if isinstance(self._stream, int):
            return os.read(self._stream, self._buffer_size)
        return self._stream.read(self._buffer_size)

    def read_line(self) -> AnyStr | None:
        """Return the next line, the unterminated tail at end of input, or None."""
        buf = self._pending
        searched = 0
        while True:
            if buf:
                newline = "\n" if isinstance(buf, str) else b"\n"
                index = buf.find(newline, searched)
                if index != -1:
                    self._pending = buf[index + 1:]
                    return buf[:index + 1]
                searched = len(buf)
            try:
                chunk = self._read_chunk()
            except OSError:
                self._pending = None
                raise
            if not chunk:
                self._pending = None
                return buf if buf else None
            buf = chunk if buf is None else buf + chunk

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line