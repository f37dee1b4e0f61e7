"""Operations on NUL-terminated character strings.

Python strings carry their own length, but these functions keep the
terminated-string contract: a ``"\\0"`` inside a string ends it, and
everything after it is ignored. Searches return an index into the string
rather than a pointer, or None when nothing is found. Comparisons treat
the end of a string as a character with code 0.
"""

from __future__ import annotations

from typing import Optional, Tuple, Union

CharLike = Union[str, int]

_WHITESPACE = frozenset(" \t\n\v\f\r")


def _text(s: str) -> str:
    """Return ``s`` up to, not including, its first NUL character."""
    end = s.find("\0")
    return s if end < 0 else s[:end]


def _target(c: CharLike) -> int:
    """Return the character code searched for, reduced to one byte."""
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code, not bool")
    if isinstance(c, int):
        return c & 0xFF
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    raise TypeError(f"expected a character or an integer code, not {type(c).__name__}")


def _code_at(s: str, index: int) -> int:
    """Code of ``s[index]``, or 0 past the end of the string."""
    return ord(s[index]) if 0 <= index < len(s) else 0


def strlen(s: str) -> int:
    """Number of characters before the terminating NUL."""
    return len(_text(s))


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the copied text (at most ``size - 1`` characters) and the full
    length of ``src``, so truncation shows as ``result[1] >= size``.
    """
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")
    text = _text(src)
    if size == 0:
        return "", len(text)
    return text[: size - 1], len(text)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full concatenation would
    have had. When ``dst`` already fills the buffer, it is returned
    unchanged with ``size + len(src)``.
    """
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")
    head = _text(dst)
    tail = _text(src)
    if size == 0:
        return head, len(tail)
    if len(head) >= size:
        return head, size + len(tail)
    room = size - len(head) - 1
    return head + tail[:room], len(head) + len(tail)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters from the start.

    Returns the difference of the first differing character codes, or 0.
    """
    a, b = _text(s1), _text(s2)
    for i in range(n):
        x, y = _code_at(a, i), _code_at(b, i)
        if x != y or x == 0:
            return x - y
    return 0


def strrncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters from the end of each string.

    At most ``len(s1)`` characters are compared, and nothing is compared
    when ``s2`` is empty. Useful for checking a suffix such as a file
    extension: ``strrncmp(name, ".txt", 4) == 0``.
    """
    a, b = _text(s1), _text(s2)
    if not b:
        return 0
    for i in range(min(n, len(a))):
        x = ord(a[len(a) - 1 - i])
        y = _code_at(b, len(b) - 1 - i)
        if x != y:
            return x - y
    return 0


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of ``c``, or None.

    Searching for NUL finds the terminator at ``strlen(s)``.
    """
    target = _target(c)
    text = _text(s)
    if target == 0:
        return len(text)
    return next((i for i, ch in enumerate(text) if ord(ch) == target), None)


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of ``c``, or None.

    Searching for NUL finds the terminator at ``strlen(s)``.
    """
    target = _target(c)
    text = _text(s)
    if target == 0:
        return len(text)
    return next(
        (i for i in reversed(range(len(text))) if ord(text[i]) == target), None
    )


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of the first ``little`` lying wholly within the first ``length`` characters of ``big``.

    An empty ``little`` matches at index 0.
    """
    needle = _text(little)
    if not needle:
        return 0
    if length <= 0:
        return None
    haystack = _text(big)[:length]
    index = haystack.find(needle)
    return index if index >= 0 else None


def atoi(s: str) -> int:
    """Parse a leading decimal integer.

    Skips leading whitespace, accepts one optional sign, then reads digits
    until the first non-digit. Returns 0 when no digits follow.
    """
    text = _text(s)
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    total = 0
    while pos < len(text) and "0" <= text[pos] <= "9":
        total = total * 10 + (ord(text[pos]) - ord("0"))
        pos += 1
    return sign * total