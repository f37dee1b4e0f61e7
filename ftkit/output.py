"""Writing characters, strings and numbers to file descriptors.

Write failures are ignored, as with a fire-and-forget ``write``.
"""

from __future__ import annotations

import contextlib
import os
from typing import Optional, Union


def _write(fd: int, data: bytes) -> None:
    with contextlib.suppress(OSError):
        os.write(fd, data)


def putchar_fd(c: Union[str, int], fd: int) -> None:
    """Write one character (or one byte given as an integer) to ``fd``."""
    if isinstance(c, int) and not isinstance(c, bool):
        _write(fd, bytes([c & 0xFF]))
        return
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _write(fd, c.encode())


def putstr_fd(s: Optional[str], fd: int) -> None:
    """Write ``s`` to ``fd``; None writes nothing."""
    if s is None:
        return
    _write(fd, s.encode())


def putendl_fd(s: Optional[str], fd: int) -> None:
    """Write ``s`` followed by a newline to ``fd``; None writes nothing."""
    if s is None:
        return
    _write(fd, (s + "\n").encode())


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal form of ``n`` to ``fd``."""
    _write(fd, str(n).encode())