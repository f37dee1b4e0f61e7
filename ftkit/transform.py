"""Building new strings from existing ones: slicing, joining, trimming,
splitting, number formatting and per-character mapping.

Input strings follow the NUL-terminated contract of :mod:`ftkit.strings`:
a ``"\\0"`` ends the string and anything after it is ignored.
"""

from __future__ import annotations

from typing import Callable, List, MutableSequence, TypeVar, Union

from ftkit.strings import strlen

_T = TypeVar("_T", str, int)


def _text(s: str) -> str:
    return s[: strlen(s)]


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A ``start`` at or past the end of the string gives an empty string.
    """
    if start < 0:
        raise ValueError(f"start must be non-negative, got {start}")
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")
    text = _text(s)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return _text(s1) + _text(s2)


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    chars = _text(charset)
    text = _text(s)
    if not chars:
        return text
    return text.strip(chars)


def split(s: str, sep: str) -> List[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    text = _text(s)
    if sep == "\0":
        return [text] if text else []
    return [piece for piece in text.split(sep) if piece]


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(n)


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character of ``s``."""
    return "".join(func(index, ch) for index, ch in enumerate(_text(s)))


def striteri(
    buffer: Union[MutableSequence[str], bytearray],
    func: Callable[[int, _T], _T],
) -> None:
    """Replace each element of ``buffer`` in place with ``func(index, element)``.

    Works on a list of characters or a ``bytearray``; iteration stops at
    the first terminator (``"\\0"`` or byte 0).
    """
    for index, value in enumerate(buffer):
        if (isinstance(value, str) and value == "\0") or (
            isinstance(value, int) and value == 0
        ):
            break
        buffer[index] = func(index, value)