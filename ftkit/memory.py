"""Byte-buffer helpers working on writable bytes-like objects."""

from __future__ import annotations

import sys

__all__ = ["memset", "bzero", "memcpy", "memmove", "memchr", "memcmp", "calloc", "SIZE_MAX"]

SIZE_MAX = sys.maxsize * 2 + 1


def _check_count(n: int, *buffers) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def memset(buffer, value: int, n: int):
    """Set the first ``n`` bytes of ``buffer`` to ``value`` (taken modulo 256)."""
    _check_count(n, buffer)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer, n: int) -> None:
    """Zero the first ``n`` bytes of ``buffer``."""
    memset(buffer, 0, n)


def memcpy(dest, src, n: int):
    """Copy the first ``n`` bytes of ``src`` into ``dest`` and return ``dest``."""
    _check_count(n, dest, src)
    dest[:n] = src[:n]
    return dest


def memmove(dest, src, n: int):
    """Copy ``n`` bytes from ``src`` to ``dest``; the regions may overlap."""
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memchr(data, value: int, n: int) -> int | None:
    """Index of the first byte equal to ``value`` among the first ``n``, or None."""
    _check_count(n, data)
    target = value & 0xFF
    index = bytes(data[:n]).find(target)
    return None if index < 0 else index


def memcmp(a, b, n: int) -> int:
    """Compare the first ``n`` bytes of ``a`` and ``b``: -1, 0 or 1."""
    _check_count(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return -1 if x < y else 1
    return 0


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``nmemb * size`` bytes."""
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    if size and nmemb > SIZE_MAX // size:
        raise OverflowError("requested allocation size overflows")
    return bytearray(nmemb * size)