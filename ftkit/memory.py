"""Byte-buffer operations: fill, copy, move, search, compare and allocate.

Buffers are ``bytearray`` objects (any mutable buffer supporting slice
assignment works); read-only inputs may be any bytes-like object.
Requests that reach past the end of a buffer raise ``IndexError``.
"""

from __future__ import annotations

import sys
from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]


def _check_span(buffer_len: int, offset: int, n: int, what: str) -> None:
    if n < 0:
        raise ValueError(f"byte count must be non-negative, got {n}")
    if offset < 0 or offset + n > buffer_len:
        raise IndexError(
            f"{what}: range [{offset}, {offset + n}) exceeds buffer of length {buffer_len}"
        )


def memset(buffer: bytearray, value: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buffer`` to ``value`` (taken modulo 256)."""
    _check_span(len(buffer), 0, n, "memset")
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> bytearray:
    """Zero the first ``n`` bytes of ``buffer``."""
    return memset(buffer, 0, n)


def memcpy(dest: bytearray, src: BytesLike, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dest``."""
    _check_span(len(dest), 0, n, "memcpy destination")
    _check_span(len(src), 0, n, "memcpy source")
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes within ``buffer`` from offset ``src`` to offset ``dest``.

    Overlapping regions are handled: the result is as if the source bytes
    were first copied aside.
    """
    _check_span(len(buffer), dest, n, "memmove destination")
    _check_span(len(buffer), src, n, "memmove source")
    if dest != src:
        buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def memchr(data: BytesLike, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c`` within the first ``n``, or None."""
    _check_span(len(data), 0, n, "memchr")
    target = c & 0xFF
    return next((i for i, byte in enumerate(bytes(data[:n])) if byte == target), None)


def memcmp(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare the first ``n`` bytes of ``a`` and ``b``.

    Returns the difference of the first differing pair of bytes, or 0.
    """
    _check_span(len(a), 0, n, "memcmp first operand")
    _check_span(len(b), 0, n, "memcmp second operand")
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Allocate ``count * size`` zeroed bytes.

    Raises ``OverflowError`` when the total size cannot be represented.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must be non-negative")
    if count == 0 or size == 0:
        return bytearray()
    if size > sys.maxsize // count:
        raise OverflowError(f"allocation of {count} x {size} bytes overflows")
    return bytearray(count * size)