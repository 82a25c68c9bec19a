"""Byte-buffer operations on ``bytearray`` and other mutable buffers.

Counts that reach past the end of a buffer raise ``ValueError``.
"""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
ByteData = Union[bytes, bytearray, memoryview]


def _check_count(n: int, *buffers: ByteData) -> None:
    if n < 0:
        raise ValueError("count must not be negative")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"count {n} exceeds buffer length {len(buf)}")


def bzero(buffer: Buffer, n: int) -> None:
    """Set the first ``n`` bytes of ``buffer`` to zero."""
    if n < 1:
        return
    _check_count(n, buffer)
    buffer[:n] = bytes(n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(data: Optional[ByteData], c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c`` in the first ``n`` bytes."""
    if data is None:
        return None
    _check_count(n, data)
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: ByteData, b: ByteData, n: int) -> int:
    """Compare the first ``n`` bytes as unsigned values.

    Returns the difference of the first differing pair, or 0.
    """
    _check_count(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def memcpy(dest: Buffer, src: ByteData, n: int) -> Buffer:
    """Copy ``n`` bytes from ``src`` to the start of ``dest``; return ``dest``."""
    if n == 0 or dest is src:
        return dest
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: Buffer, dest: int, src: int, n: int) -> Buffer:
    """Copy ``n`` bytes within ``buffer`` from offset ``src`` to offset ``dest``.

    Overlapping regions are handled correctly. Returns ``buffer``.
    """
    if n == 0 or dest == src:
        return buffer
    if n < 0 or dest < 0 or src < 0:
        raise ValueError("offsets and count must not be negative")
    if dest + n > len(buffer) or src + n > len(buffer):
        raise ValueError("region extends past the end of the buffer")
    buffer[dest : dest + n] = bytes(buffer[src : src + n])
    return buffer


def memset(buffer: Optional[Buffer], c: int, n: int) -> Optional[Buffer]:
    """Fill the first ``n`` bytes of ``buffer`` with ``c``; return ``buffer``."""
    if buffer is None:
        return None
    _check_count(n, buffer)
    buffer[:n] = bytes([c & 0xFF]) * n
    return buffer