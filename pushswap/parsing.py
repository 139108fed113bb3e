"""Reading the command-line numbers and replacing them by their ranks."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

INT_MIN = -2147483648
INT_MAX = 2147483647

_WHITESPACE = " \f\n\r\t\v"
_DIGITS = frozenset("0123456789")
_LEADING_DIGITS = re.compile(r"[0-9]*")


class InputError(ValueError):
    """The arguments are not a list of distinct 32-bit integers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def _strip_sign(text: str) -> tuple[int, str]:
    body = text.lstrip(_WHITESPACE)
    if body[:1] in ("+", "-"):
        return (-1 if body[0] == "-" else 1), body[1:]
    return 1, body


def is_integer_token(text: str) -> bool:
    """True if ``text`` is optional whitespace, an optional sign and digits only."""
    _, body = _strip_sign(text)
    return bool(body) and all(char in _DIGITS for char in body)


def parse_long(text: str) -> int:
    """Read a leading signed integer, ignoring whatever follows; 0 if none."""
    sign, body = _strip_sign(text)
    digits = _LEADING_DIGITS.match(body).group()
    return sign * int(digits) if digits else 0


def _in_range(value: int) -> bool:
    return INT_MIN <= value <= INT_MAX


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Turn argument strings into integers, raising InputError on bad input."""
    tokens = list(args)
    if not tokens:
        return []
    if len(tokens) == 1:
        token = tokens[0]
        value = parse_long(token)
        if not _in_range(value) or not is_integer_token(token):
            raise InputError()
        return [value]
    if not all(is_integer_token(token) for token in reversed(tokens)):
        raise InputError()
    values = [parse_long(token) for token in tokens]
    if len(set(values)) != len(values):
        raise InputError()
    if not all(_in_range(value) for value in values):
        raise InputError()
    return values


def normalize(values: Sequence[int]) -> list[int]:
    """Replace each value by its rank among all values, starting at 0."""
    ranks = {value: rank for rank, value in enumerate(sorted(values))}
    if len(ranks) != len(values):
        raise ValueError("values must be distinct")
    return [ranks[value] for value in values]