"""Searching, comparing and copying text, with C-string rules where they matter."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence


def _single_char(char: str) -> str:
    if len(char) != 1:
        raise ValueError("expected a single character")
    return char


def strchr(text: str, char: str) -> int | None:
    """Index of the first ``char`` in ``text``, or None.

    Searching for ``"\\0"`` gives the index just past the end of ``text``.
    """
    if _single_char(char) == "\0":
        return len(text)
    index = text.find(char)
    return index if index >= 0 else None


def strrchr(text: str, char: str) -> int | None:
    """Index of the last ``char`` in ``text``, or None.

    Searching for ``"\\0"`` gives the index just past the end of ``text``.
    """
    if _single_char(char) == "\0":
        return len(text)
    index = text.rfind(char)
    return index if index >= 0 else None


def _code_at(text: str, index: int) -> int:
    return ord(text[index]) if index < len(text) else 0


def strncmp(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` characters; -1, 0 or 1.

    Both strings end at their first ``"\\0"`` or at their real end.
    """
    if count < 0:
        raise ValueError("count must not be negative")
    for index in range(count):
        left = _code_at(first, index)
        right = _code_at(second, index)
        if left != right:
            return 1 if left > right else -1
        if left == 0:
            break
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty ``needle`` is found at index 0.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return index if index >= 0 else None


def _c_length(buffer: bytes | bytearray) -> int:
    """Length of the NUL-terminated string held in ``buffer``."""
    end = buffer.find(0)
    return end if end >= 0 else len(buffer)


def _check_size(dest: bytearray, size: int) -> None:
    if size > len(dest):
        raise IndexError("size exceeds the destination buffer")


def strlcpy(dest: bytearray, src: bytes | bytearray, size: int) -> int:
    """Copy ``src`` into ``dest`` holding ``size`` bytes, NUL-terminated.

    At most ``size - 1`` bytes are copied. Returns the length of ``src``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    src_length = _c_length(src)
    if size == 0:
        return src_length
    _check_size(dest, size)
    copied = min(src_length, size - 1)
    dest[:copied] = src[:copied]
    dest[copied] = 0
    return src_length


def strlcat(dest: bytearray, src: bytes | bytearray, size: int) -> int:
    """Append ``src`` to the string in ``dest`` without passing ``size`` bytes.

    Returns the length of ``src`` plus ``size`` when ``size`` is below the
    length of ``dest``'s string (or is 0), else the sum of both lengths.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    dest_length = _c_length(dest)
    src_length = _c_length(src)
    if size < 1:
        return src_length + size
    _check_size(dest, size)
    end = dest_length
    if dest_length < size - 1:
        copied = min(src_length, size - 1 - dest_length)
        dest[dest_length:dest_length + copied] = src[:copied]
        end += copied
    if end < len(dest):
        dest[end] = 0
    if size < dest_length:
        return src_length + size
    return dest_length + src_length


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """New string of ``func(index, char)`` for each character of ``text``."""
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(buffer: MutableSequence, func: Callable[[int, object], object]) -> None:
    """Replace each item of ``buffer`` in place by ``func(index, item)``."""
    for index, item in enumerate(buffer):
        buffer[index] = func(index, item)