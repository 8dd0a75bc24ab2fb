"""Byte buffer primitives: fill, copy, move, search and compare."""

from __future__ import annotations

from typing import Optional


def _check_count(n: int, *lengths: int) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for length in lengths:
        if n > length:
            raise ValueError(f"byte count {n} exceeds buffer length {length}")


def memset(buffer: bytearray, value: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buffer`` to ``value`` truncated to a byte."""
    _check_count(n, len(buffer))
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> None:
    """Zero the first ``n`` bytes of ``buffer``."""
    memset(buffer, 0, n)


def memcpy(dest: Optional[bytearray], src: Optional[bytes], n: int) -> Optional[bytearray]:
    """Copy the first ``n`` bytes of ``src`` into ``dest`` and return ``dest``.

    When both buffers are None there is nothing to copy and None is returned.
    """
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise TypeError("memcpy needs both a destination and a source buffer")
    _check_count(n, len(dest), len(src))
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes from offset ``src`` to offset ``dest`` within ``buffer``.

    The regions may overlap; the result is as if the source were copied to a
    temporary first.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_count(n, len(buffer) - dest, len(buffer) - src)
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def memchr(data: bytes, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c`` among the first ``n``.

    ``c`` is truncated to a byte. None is returned when it is not found.
    """
    _check_count(n, len(data))
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Compare the first ``n`` bytes of ``a`` and ``b`` as unsigned values.

    Returns the difference of the first pair of bytes that differ, or 0.
    """
    _check_count(n, len(a), len(b))
    for left, right in zip(a[:n], b[:n]):
        if left != right:
            return left - right
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)