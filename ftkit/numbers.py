"""Conversion between decimal text and integers."""

from __future__ import annotations

__all__ = ["atoi", "itoa", "INT_MIN", "INT_MAX"]

INT_MIN = -2147483648
INT_MAX = 2147483647

_WHITESPACE = " \f\n\r\t\v"
_DIGITS = "0123456789"


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading whitespace is skipped, one optional ``+`` or ``-`` is accepted,
    and digits are read until the first non-digit. Text without digits
    yields 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] == "-":
        sign = -1
        rest = rest[1:]
    elif rest[:1] == "+":
        rest = rest[1:]
    value = 0
    for ch in rest:
        if ch not in _DIGITS:
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return sign * value


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    digits = []
    magnitude = abs(n)
    while True:
        magnitude, remainder = divmod(magnitude, 10)
        digits.append(_DIGITS[remainder])
        if magnitude == 0:
            break
    if n < 0:
        digits.append("-")
    return "".join(reversed(digits))