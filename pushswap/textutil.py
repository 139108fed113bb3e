"""String helpers: integer conversion, splitting, trimming and slicing."""

from __future__ import annotations

import re

_WHITESPACE = " \f\n\r\t\v"
_LEADING_DIGITS = re.compile(r"[0-9]*")


def _to_int32(value: int) -> int:
    """Wrap ``value`` into the signed 32-bit range."""
    return (value + 2**31) % 2**32 - 2**31


def atoi(text: str) -> int:
    """Read a leading signed integer, stopping at the first non-digit.

    Leading whitespace is skipped, one sign is accepted, and a result that
    does not fit in 32 bits wraps around. Returns 0 if no digits are found.
    """
    body = text.lstrip(_WHITESPACE)
    sign = 1
    if body[:1] in ("+", "-"):
        sign = -1 if body[0] == "-" else 1
        body = body[1:]
    digits = _LEADING_DIGITS.match(body).group()
    if not digits:
        return 0
    return _to_int32(sign * int(digits))


def itoa(number: int) -> str:
    """Decimal text of ``number``, with a leading minus sign if negative."""
    return str(number)


def split(text: str, separator: str) -> list[str]:
    """Non-empty pieces of ``text`` between runs of ``separator``."""
    if len(separator) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(separator) if word]


def strtrim(text: str, charset: str) -> str:
    """``text`` without the characters of ``charset`` at either end."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` from index ``start``.

    A start beyond the end of ``text`` gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def strjoin(first: str, second: str) -> str:
    """``first`` followed by ``second``."""
    return first + second