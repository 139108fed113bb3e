"""A small printf: %c %s %d %i %u %x %X %p %%, plus plain writers."""

from __future__ import annotations

import sys
from typing import TextIO

_LOWER_HEX = "0123456789abcdef"
_UPPER_HEX = "0123456789ABCDEF"


def _to_int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def _to_base16(value: int, digits: str) -> str:
    if value == 0:
        return digits[0]
    out: list[str] = []
    while value:
        value, remainder = divmod(value, 16)
        out.append(digits[remainder])
    return "".join(reversed(out))


def _as_char(value: int | str) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c expects a single character")
        return value
    return chr(value & 0xFF)


def _pointer(value: int | None) -> str:
    address = 0 if value is None else value & 0xFFFFFFFFFFFFFFFF
    if address == 0:
        return "(nil)"
    return "0x" + _to_base16(address, _LOWER_HEX)


_CONVERSIONS = {
    "c": _as_char,
    "d": lambda value: str(_to_int32(value)),
    "i": lambda value: str(_to_int32(value)),
    "s": lambda value: "(null)" if value is None else str(value),
    "p": _pointer,
    "u": lambda value: str(value & 0xFFFFFFFF),
    "x": lambda value: _to_base16(value & 0xFFFFFFFF, _LOWER_HEX),
    "X": lambda value: _to_base16(value & 0xFFFFFFFF, _UPPER_HEX),
}


def format_printf(template: str, *args: object) -> str:
    """Expand the conversions in ``template`` with ``args``.

    An unknown conversion letter produces nothing and takes no argument;
    a lone ``%`` at the very end is dropped. Raises ValueError when there
    are fewer arguments than conversions.
    """
    pieces: list[str] = []
    remaining = iter(args)
    chars = iter(template)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            pieces.append("%")
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            continue
        try:
            value = next(remaining)
        except StopIteration:
            raise ValueError(f"missing argument for %{spec}") from None
        pieces.append(convert(value))
    return "".join(pieces)


def _stream(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def print_formatted(template: str, *args: object) -> int:
    """Write the expanded ``template`` to standard output; return its length."""
    text = format_printf(template, *args)
    sys.stdout.write(text)
    return len(text)


def put_char(char: str, stream: TextIO | None = None) -> int:
    """Write one character; return 1."""
    if len(char) != 1:
        raise ValueError("expected a single character")
    _stream(stream).write(char)
    return 1


def put_str(text: str | None, stream: TextIO | None = None) -> int:
    """Write ``text`` (``(null)`` for None); return the number of characters."""
    out = "(null)" if text is None else text
    _stream(stream).write(out)
    return len(out)


def put_endl(text: str | None, stream: TextIO | None = None) -> int:
    """Write ``text`` and a newline; None writes only the newline."""
    out = ("" if text is None else text) + "\n"
    _stream(stream).write(out)
    return len(out)


def put_number(number: int, stream: TextIO | None = None) -> int:
    """Write ``number`` as a signed 32-bit decimal; return the characters written."""
    out = str(_to_int32(number))
    _stream(stream).write(out)
    return len(out)