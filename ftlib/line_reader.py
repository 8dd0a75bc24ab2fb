"""Read a file descriptor one line at a time.

Lines keep their terminating newline; the last line of the input may lack
one. When the input is exhausted, None is returned.
"""

from __future__ import annotations

import os
from typing import Dict, Iterator, Optional

BUFFER_SIZE = 42
"""Number of bytes requested from the descriptor per read."""

_NEWLINE = b"\n"


class LineReader:
    """Buffered line reader over a raw file descriptor.

    Bytes are read ``buffer_size`` at a time and kept between calls, so a
    read that goes past the end of one line leaves the rest for the next.
    Lines are decoded as UTF-8; undecodable bytes are kept as surrogate
    escapes so that encoding the line back gives the original bytes.
    """

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError(f"file descriptor must not be negative, got {fd}")
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = b""

    def _fill(self) -> None:
        """Read until a newline is buffered or the descriptor reports end of input."""
        while _NEWLINE not in self._pending:
            try:
                chunk = os.read(self.fd, self.buffer_size)
            except OSError:
                self._pending = b""
                raise
            if not chunk:
                return
            self._pending += chunk

    def read_line(self) -> Optional[str]:
        """Return the next line, newline included, or None at end of input."""
        self._fill()
        if not self._pending:
            return None
        line, sep, rest = self._pending.partition(_NEWLINE)
        self._pending = rest
        return (line + sep).decode("utf-8", "surrogateescape")

    def __iter__(self) -> Iterator[str]:
        return iter(self.read_line, None)


_readers: Dict[int, LineReader] = {}


def get_next_line(fd: int) -> Optional[str]:
    """Return the next line from ``fd``, or None at end of input.

    State is kept separately for each descriptor, so several descriptors
    may be read in turns. The state of a descriptor is dropped once it
    reaches end of input or fails to read.
    """
    reader = _readers.get(fd)
    if reader is None:
        reader = LineReader(fd)
        _readers[fd] = reader
    try:
        line = reader.read_line()
    except OSError:
        del _readers[fd]
        raise
    if line is None:
        del _readers[fd]
    return line