"""Helpers for ASCII characters, byte buffers, terminated strings, line reading, linked lists and printf-style formatting."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "memory",
    "strings",
    "output",
    "transform",
    "line_reader",
    "linkedlist",
    "printf",
]