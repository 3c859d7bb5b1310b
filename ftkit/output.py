"""Write characters, strings and integers to raw file descriptors."""

from __future__ import annotations

import os

from ftkit.numbers import itoa

__all__ = ["putchar_fd", "putstr_fd", "putendl_fd", "putnbr_fd"]


def _write_all(fd: int, data: bytes) -> None:
    """Write all of ``data`` to ``fd``, retrying after partial writes."""
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def putchar_fd(c: int | str, fd: int) -> None:
    """Write one character to ``fd``.

    ``c`` is a one-character string (written UTF-8 encoded) or a byte
    value in the range 0..255.
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        data = c.encode("utf-8")
    elif isinstance(c, int) and not isinstance(c, bool):
        if not 0 <= c <= 255:
            raise ValueError(f"byte value out of range: {c}")
        data = bytes([c])
    else:
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    _write_all(fd, data)


def putstr_fd(s: str, fd: int) -> None:
    """Write the string ``s`` to ``fd``."""
    _write_all(fd, s.encode("utf-8"))


def putendl_fd(s: str, fd: int) -> None:
    """Write the string ``s`` followed by a newline to ``fd``."""
    _write_all(fd, s.encode("utf-8") + b"\n")


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal text of the 32-bit signed integer ``n`` to ``fd``."""
    _write_all(fd, itoa(n).encode("ascii"))