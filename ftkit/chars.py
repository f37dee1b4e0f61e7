"""Character classification and case conversion for the ASCII range.

Every function accepts either a one-character string or an integer code.
Predicates return a bool; the case converters return a value of the same
kind they were given.
"""

from __future__ import annotations

from typing import TypeVar, Union

CharLike = Union[str, int]
_C = TypeVar("_C", str, int)

_CASE_OFFSET = ord("a") - ord("A")


def _code(c: CharLike) -> int:
    """Return the integer code of ``c``."""
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code, not bool")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    raise TypeError(f"expected a character or an integer code, not {type(c).__name__}")


def _same_kind(original: _C, code: int) -> _C:
    if isinstance(original, str):
        return chr(code)  # type: ignore[return-value]
    return code  # type: ignore[return-value]


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: CharLike) -> bool:
    """True for the decimal digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for printable ASCII, space (32) through tilde (126)."""
    return 32 <= _code(c) <= 126


def to_upper(c: _C) -> _C:
    """Map a lower-case ASCII letter to upper case; leave anything else alone."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        return _same_kind(c, code - _CASE_OFFSET)
    return c


def to_lower(c: _C) -> _C:
    """Map an upper-case ASCII letter to lower case; leave anything else alone."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        return _same_kind(c, code + _CASE_OFFSET)
    return c