import os

import pytest

from ftkit.output import putchar_fd, putendl_fd, putnbr_fd, putstr_fd


class _Pipe:
    def __init__(self):
        self.read_fd, self.write_fd = os.pipe()

    def collect(self):
        os.close(self.write_fd)
        self.write_fd = -1
        chunks = []
        while True:
            chunk = os.read(self.read_fd, 4096)
            if not chunk:
                break
            chunks.append(chunk)
        return b"".join(chunks)

    def close(self):
        os.close(self.read_fd)
        if self.write_fd >= 0:
            os.close(self.write_fd)


@pytest.fixture
def pipe():
    p = _Pipe()
    try:
        yield p
    finally:
        p.close()


@pytest.mark.parametrize("c", ["g", "H", "\n", "0"])
def test_putchar_fd(pipe, c):
    putchar_fd(c, pipe.write_fd)
    assert pipe.collect() == c.encode()


def test_putchar_fd_integer_code(pipe):
    putchar_fd(ord("A"), pipe.write_fd)
    assert pipe.collect() == b"A"


def test_putchar_fd_rejects_long_string():
    with pytest.raises(ValueError):
        putchar_fd("ab", 1)


def test_putstr_fd(pipe):
    putstr_fd("Hello World\n", pipe.write_fd)
    assert pipe.collect() == b"Hello World\n"


def test_putstr_fd_none_writes_nothing(pipe):
    putstr_fd(None, pipe.write_fd)
    assert pipe.collect() == b""


@pytest.mark.parametrize("s", ["Hello, ", "World", ""])
def test_putendl_fd(pipe, s):
    putendl_fd(s, pipe.write_fd)
    assert pipe.collect() == s.encode() + b"\n"


def test_putendl_fd_none_writes_nothing(pipe):
    putendl_fd(None, pipe.write_fd)
    assert pipe.collect() == b""


@pytest.mark.parametrize("n", [12121212, 0, -7, 2147483647])
def test_putnbr_fd(pipe, n):
    putnbr_fd(n, pipe.write_fd)
    assert pipe.collect() == str(n).encode()


def test_putnbr_fd_min_int(pipe):
    putnbr_fd(-2147483648, pipe.write_fd)
    assert pipe.collect() == b"-2147483648"