"""Formatted output with a small set of conversions.

Supported conversions:

* ``%c``: one character, given as a one-character string or an integer code
* ``%s``: a string; ``None`` prints ``(null)``
* ``%p``: an address in hexadecimal with a ``0x`` prefix; a null address prints ``(nil)``
* ``%d``, ``%i``: a signed 32-bit decimal integer
* ``%u``: an unsigned 32-bit decimal integer
* ``%x``, ``%X``: an unsigned 32-bit integer in lower- or upper-case hexadecimal
* ``%%``: a literal percent sign

A ``%`` followed by anything else, or at the end of the format, is
copied as it is. Integers outside the 32-bit range wrap around, as they
would when passed through a C ``int``.
"""

from __future__ import annotations

from typing import Any, Iterator, List

from ftkit.output import putstr_fd
from ftkit.strings import strlen

_CONVERSIONS = frozenset("cspdiuxX%")
_UINT32 = 1 << 32
_INT32_MIN = -(1 << 31)
_ADDRESS_MODULUS = 1 << 64
_STDOUT = 1


def _as_int(value: Any, conversion: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            f"%{conversion} expects an integer, got {type(value).__name__}"
        )
    return value


def _to_int32(value: int) -> int:
    return (value - _INT32_MIN) % _UINT32 + _INT32_MIN


def _to_uint32(value: int) -> int:
    return value % _UINT32


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_as_int(value, "c") & 0xFF)


def _format_string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string, got {type(value).__name__}")
    return value[: strlen(value)]


def _format_pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    if isinstance(value, int) and not isinstance(value, bool):
        address = value % _ADDRESS_MODULUS
    else:
        address = id(value) % _ADDRESS_MODULUS
    if address == 0:
        return "(nil)"
    return f"0x{address:x}"


def _convert(conversion: str, args: Iterator[Any]) -> str:
    if conversion == "%":
        return "%"
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(
            f"not enough arguments for format conversion %{conversion}"
        ) from None
    if conversion == "c":
        return _format_char(value)
    if conversion == "s":
        return _format_string(value)
    if conversion == "p":
        return _format_pointer(value)
    if conversion in "di":
        return str(_to_int32(_as_int(value, conversion)))
    if conversion == "u":
        return str(_to_uint32(_as_int(value, conversion)))
    if conversion == "x":
        return f"{_to_uint32(_as_int(value, conversion)):x}"
    return f"{_to_uint32(_as_int(value, conversion)):X}"


def format_string(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by ``args`` in order.

    Extra arguments are ignored; too few raise ``TypeError``.
    """
    text = fmt[: strlen(fmt)]
    remaining = iter(args)
    pieces: List[str] = []
    pos = 0
    while pos < len(text):
        ch = text[pos]
        if ch == "%" and pos + 1 < len(text) and text[pos + 1] in _CONVERSIONS:
            pieces.append(_convert(text[pos + 1], remaining))
            pos += 2
        else:
            pieces.append(ch)
            pos += 1
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = format_string(fmt, *args)
    putstr_fd(text, _STDOUT)
    return len(text)