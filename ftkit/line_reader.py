"""Reading a file descriptor one line at a time.

State is kept per descriptor, so several descriptors can be read in
alternation without their lines mixing.
"""

from __future__ import annotations

import os
from typing import Dict, Iterator, List, Optional

BUFFER_SIZE = 1024


class LineReader:
    """Reads lines from file descriptors in chunks of ``buffer_size`` bytes."""

    def __init__(self, buffer_size: int = BUFFER_SIZE) -> None:
        self.buffer_size = buffer_size
        self._pending: Dict[int, bytes] = {}

    def _read_until_newline(self, fd: int) -> bytes:
        chunks: List[bytes] = []
        while True:
            try:
                chunk = os.read(fd, self.buffer_size)
            except OSError:
                break
            if not chunk:
                break
            chunks.append(chunk)
            if b"\n" in chunk:
                break
        return b"".join(chunks)

    @staticmethod
    def _decode(data: bytes) -> str:
        return data.decode("utf-8", errors="surrogateescape")

    def next_line(self, fd: int) -> Optional[str]:
        """Return the next line from ``fd``, newline included, or None at the end.

        None is also returned for an invalid descriptor or a non-positive
        buffer size.
        """
        if fd < 0 or self.buffer_size <= 0:
            return None
        try:
            os.read(fd, 0)
        except OSError:
            return None
        data = self._read_until_newline(fd)
        pending = self._pending.pop(fd, None)
        if pending is not None:
            data = pending + data
        if not data:
            return None
        line, newline, rest = data.partition(b"\n")
        if newline:
            self._pending[fd] = rest
            return self._decode(line + newline)
        return self._decode(data)

    def lines(self, fd: int) -> Iterator[str]:
        """Yield the remaining lines of ``fd``."""
        while (line := self.next_line(fd)) is not None:
            yield line


_default_reader = LineReader()


def get_next_line(fd: int) -> Optional[str]:
    """Return the next line of ``fd`` using a shared reader, or None at the end."""
    return _default_reader.next_line(fd)