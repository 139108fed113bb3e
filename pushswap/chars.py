"""Classification and case mapping of ASCII character codes."""

from __future__ import annotations


def _code(value: int | str) -> int:
    """Accept a code point or a one-character string."""
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("expected a single character")
        return ord(value)
    return value


def is_alpha(code: int | str) -> bool:
    """True for the ASCII letters A-Z and a-z."""
    value = _code(code)
    return 65 <= value <= 90 or 97 <= value <= 122


def is_digit(code: int | str) -> bool:
    """True for the ASCII digits 0-9."""
    return 48 <= _code(code) <= 57


def is_alnum(code: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(code) or is_digit(code)


def is_ascii(code: int | str) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(code) <= 127


def is_print(code: int | str) -> bool:
    """True for printable ASCII, space (32) to tilde (126)."""
    return 32 <= _code(code) <= 126


def to_upper(code: int | str) -> int:
    """Code of the upper-case letter for a-z; any other code is returned as is."""
    value = _code(code)
    if ord("a") <= value <= ord("z"):
        return value - 32
    return value


def to_lower(code: int | str) -> int:
    """Code of the lower-case letter for A-Z; any other code is returned as is."""
    value = _code(code)
    if ord("A") <= value <= ord("Z"):
        return value + 32
    return value