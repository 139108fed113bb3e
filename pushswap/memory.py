"""Byte-buffer helpers: fill, search, compare and copy."""

from __future__ import annotations


def _check_count(count: int, *buffers: bytes | bytearray) -> None:
    if count < 0:
        raise ValueError("count must not be negative")
    if any(count > len(buffer) for buffer in buffers):
        raise IndexError("count exceeds the buffer")


def memset(buffer: bytearray, value: int, length: int) -> bytearray:
    """Set the first ``length`` bytes of ``buffer`` to ``value`` (mod 256)."""
    _check_count(length, buffer)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: bytearray, length: int) -> None:
    """Zero the first ``length`` bytes of ``buffer``."""
    memset(buffer, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """A zeroed buffer of ``count`` items of ``size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(buffer: bytes | bytearray, value: int, length: int) -> int | None:
    """Index of the first byte equal to ``value`` (mod 256) among ``length`` bytes."""
    _check_count(length, buffer)
    index = buffer.find(value & 0xFF, 0, length)
    return index if index >= 0 else None


def memcmp(first: bytes | bytearray, second: bytes | bytearray, count: int) -> int:
    """Difference of the first differing bytes within ``count``, or 0."""
    _check_count(count, first, second)
    for left, right in zip(first[:count], second[:count]):
        if left != right:
            return left - right
    return 0


def memcpy(
    dest: bytearray | None, src: bytes | bytearray | None, count: int
) -> bytearray | None:
    """Copy ``count`` bytes of ``src`` to the start of ``dest``; returns ``dest``."""
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise ValueError("both buffers are required")
    _check_count(count, dest, src)
    dest[:count] = src[:count]
    return dest


def memmove(buffer: bytearray, dest: int, src: int, count: int) -> bytearray:
    """Copy ``count`` bytes from offset ``src`` to ``dest`` in ``buffer``; overlap is safe."""
    if min(dest, src, count) < 0:
        raise ValueError("offsets and count must not be negative")
    if max(dest, src) + count > len(buffer):
        raise IndexError("range exceeds the buffer")
    buffer[dest:dest + count] = buffer[src:src + count]
    return buffer