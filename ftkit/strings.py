"""String helpers that follow the classic C string routines.

Positions are returned as indices into the string (or ``None`` when
nothing is found) instead of pointers. Bounded copy functions return the
text they produce together with the length they were trying to create.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Any

__all__ = [
    "strlen",
    "strlcpy",
    "strlcat",
    "strchr",
    "strrchr",
    "strncmp",
    "strnstr",
    "strdup",
    "substr",
    "strjoin",
    "strtrim",
    "split",
    "strmapi",
    "striteri",
]


def _char(c: int | str) -> str:
    """Normalise a character given as an int code or a one-char str."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    if c < 0:
        raise ValueError(f"character code must not be negative, got {c}")
    return chr(c)


def _check_size(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strlen(s: str) -> int:
    """Number of characters in ``s``."""
    return len(s)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a destination of ``size`` slots, terminator included.

    Returns the copied text (at most ``size - 1`` characters) and the full
    length of ``src``. A size of 0 copies nothing.
    """
    _check_size(size, "size")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a destination of ``size`` slots.

    Returns the resulting text and the length it tried to create:
    ``min(len(dst), size) + len(src)``. Nothing is appended when ``dst``
    already fills the destination.
    """
    _check_size(size, "size")
    dst_len = len(dst)
    result = dst
    if size > 0 and dst_len < size - 1:
        result = dst + src[: size - 1 - dst_len]
    return result, min(dst_len, size) + len(src)


def strchr(s: str, c: int | str) -> int | None:
    """Index of the first occurrence of ``c`` in ``s``, or None.

    Searching for the NUL character yields ``len(s)``, the terminator.
    """
    ch = _char(c)
    if ch == "\0":
        index = s.find(ch)
        return len(s) if index < 0 else index
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: int | str) -> int | None:
    """Index of the last occurrence of ``c`` in ``s``, or None.

    Searching for the NUL character yields ``len(s)``, the terminator.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of ``s1`` and ``s2``.

    Returns the difference of the character codes at the first position
    that differs, or 0. The end of a string compares as code 0.
    """
    _check_size(n, "n")
    for i in range(n):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(big: str, little: str, length: int) -> int | None:
    """Index of ``little`` lying wholly within the first ``length`` chars of ``big``.

    An empty ``little`` is found at 0; otherwise None when absent.
    """
    _check_size(length, "length")
    if not little:
        return 0
    index = big[:length].find(little)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    return str(s)


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` beginning at ``start``.

    A start at or beyond the end yields an empty string.
    """
    _check_size(start, "start")
    _check_size(length, "length")
    if start >= len(s):
        return ""
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """Concatenation of ``s1`` and ``s2``."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    if not charset:
        return s
    return s.strip(charset)


def split(s: str, sep: int | str) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    ch = _char(sep)
    return [word for word in s.split(ch) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` for each character of ``s``."""
    return "".join(f(i, ch) for i, ch in enumerate(s))


def striteri(buffer: MutableSequence[Any], f: Callable[[int, Any], Any]) -> None:
    """Replace each element of ``buffer`` in place by ``f(index, element)``."""
    for i, item in enumerate(list(buffer)):
        buffer[i] = f(i, item)