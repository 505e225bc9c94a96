"""Reading a stream one line at a time through a fixed-size buffer.

Each line keeps its trailing newline; the last line of a stream may lack
one. When the stream is exhausted the reader returns ``None``.
"""

from __future__ import annotations

import os
from typing import Any, Iterator, Optional, Union

__all__ = ["BUFFER_SIZE", "MAX_FD", "LineReader", "get_next_line"]

BUFFER_SIZE = 42
MAX_FD = 1024

Chunk = Union[str, bytes]


class LineReader:
    """Read lines from any object with a ``read(size)`` method.

    Text streams give ``str`` lines, binary streams ``bytes`` lines.
    """

    def __init__(self, stream: Any, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._keeper: Optional[Chunk] = None

    @staticmethod
    def _newline(sample: Chunk) -> Chunk:
        return b"\n" if isinstance(sample, (bytes, bytearray)) else "\n"

    def _fill(self) -> Optional[Chunk]:
        keeper = self._keeper
        while keeper is None or self._newline(keeper) not in keeper:
            try:
                chunk = self._stream.read(self._buffer_size)
            except Exception:
                self._keeper = None
                raise
            if chunk is None:
                chunk = keeper[:0] if keeper is not None else ""
            if isinstance(chunk, bytearray):
                chunk = bytes(chunk)
            keeper = chunk if keeper is None else keeper + chunk
            if not chunk:
                break
        return keeper

    def read_line(self) -> Optional[Chunk]:
        """The next line, or ``None`` once the stream has nothing left."""
        keeper = self._fill()
        if not keeper:
            self._keeper = None
            return None
        end = keeper.find(self._newline(keeper))
        cut = len(keeper) if end < 0 else end + 1
        line, rest = keeper[:cut], keeper[cut:]
        self._keeper = rest if rest else None
        return line

    def __iter__(self) -> Iterator[Chunk]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line


class _FdStream:
    def __init__(self, fd: int) -> None:
        self._fd = fd

    def read(self, size: int) -> bytes:
        return os.read(self._fd, size)


_readers: dict[int, LineReader] = {}


def get_next_line(fd: int) -> Optional[str]:
    """The next line read from file descriptor ``fd``, decoded as UTF-8.

    Unread data is kept per descriptor between calls. Returns ``None`` at
    end of input. Raises ValueError for a descriptor outside 0 to 1023.
    """
    if not 0 <= fd < MAX_FD:
        raise ValueError(f"file descriptor {fd} out of range")
    reader = _readers.get(fd)
    if reader is None:
        reader = _readers[fd] = LineReader(_FdStream(fd))
    try:
        line = reader.read_line()
    except OSError:
        _readers.pop(fd, None)
        raise
    if line is None:
        _readers.pop(fd, None)
        return None
    return line.decode("utf-8", errors="replace")