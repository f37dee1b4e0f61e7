# ftkit

A small library of everyday helpers with precise, low-level semantics:
ASCII character tests, byte-buffer operations, NUL-terminated string
handling, line-by-line reading of file descriptors, a doubly linked list
and a compact printf-style formatter. It has no dependencies beyond the
standard library.

## Modules

- `ftkit.chars` – ASCII classification and case conversion:
  `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`,
  `to_lower`. Each accepts a one-character string or an integer code;
  the case converters return the same kind they were given.
- `ftkit.memory` – operations on `bytearray` buffers: `memset`, `bzero`,
  `memcpy`, `memmove` (within one buffer, by offsets, overlap-safe),
  `memchr` (returns an index or `None`), `memcmp` and `calloc`.
  Ranges that reach past the end of a buffer raise `IndexError`;
  `calloc` raises `OverflowError` when the total size is too large.
- `ftkit.strings` – `strlen`, `strlcpy`, `strlcat`, `strncmp`,
  `strrncmp` (compares from the end, handy for suffix checks), `strchr`,
  `strrchr`, `strnstr` and `atoi`. A `"\0"` inside a string ends it.
  Searches return an index or `None`; `strlcpy` and `strlcat` return a
  `(text, full_length)` pair.
- `ftkit.transform` – `substr`, `strjoin`, `strtrim`, `split` (drops
  empty pieces), `itoa`, `strmapi` and `striteri` (in place, on a list of
  characters or a `bytearray`).
- `ftkit.output` – `putchar_fd`, `putstr_fd`, `putendl_fd` and
  `putnbr_fd` write to a file descriptor; write errors are ignored.
- `ftkit.line_reader` – `LineReader` reads lines from file descriptors
  in chunks of `buffer_size` bytes (default 1024), keeping separate
  state per descriptor. `next_line(fd)` returns the next line with its
  newline, or `None` at the end; `lines(fd)` yields the rest.
  `get_next_line(fd)` uses one shared reader.
- `ftkit.linkedlist` – `LinkedList` with `append`, `prepend`, `len()`,
  iteration over contents, `nodes`, `first`, `last`, `clear`,
  `for_each`, `map` and `copy`. Each `Node` has `content`, `prev`,
  `next`, `first()` and `last()`.
- `ftkit.printf` – `format_string(fmt, *args)` supports `%c %s %p %d %i
  %u %x %X %%`; `printf(fmt, *args)` writes the result to standard
  output and returns its length. Integers wrap to 32 bits, `%s` of
  `None` gives `(null)`, and too few arguments raise `TypeError`.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from ftkit.strings import atoi, strrncmp
from ftkit.transform import split, itoa
from ftkit.printf import format_string

atoi("   -42abc")                 # -42
strrncmp("map.ber", ".ber", 4)    # 0
split("  hello  world ", " ")     # ["hello", "world"]
itoa(-2147483648)                 # "-2147483648"
format_string("%s has %d items (%x)", "box", 255, 255)
# "box has 255 items (ff)"
```

Reading lines from a file descriptor:

```python
import os
from ftkit.line_reader import LineReader

fd = os.open("map.txt", os.O_RDONLY)
reader = LineReader(buffer_size=64)
for line in reader.lines(fd):
    print(line, end="")
os.close(fd)
```

A doubly linked list:

```python
from ftkit.linkedlist import LinkedList

items = LinkedList(["a", "b"])
items.append("c")
items.prepend("z")
list(items)                  # ["z", "a", "b", "c"]
len(items)                   # 4
upper = items.map(str.upper)
list(upper)                  # ["Z", "A", "B", "C"]
```

## Scope

This is a library only: it installs no command-line programs.