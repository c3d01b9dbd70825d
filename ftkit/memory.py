"""Byte-buffer routines with the semantics of the classic C memory functions.

Buffers are ``bytearray`` objects, or writable ``memoryview`` slices of one,
for destinations. Any bytes-like object works as a source. Byte values are
reduced to their low eight bits, as a C ``unsigned char`` would be.
Positions are returned as indices into the buffer, and ``None`` means "not
found". A count larger than a buffer raises ``ValueError``.
"""

from __future__ import annotations

from typing import Optional, Union

__all__ = [
    "memccpy",
    "memchr",
    "memcmp",
    "memcpy",
    "memmove",
    "memset",
    "bzero",
    "calloc",
]

Writable = Union[bytearray, memoryview]
Readable = Union[bytes, bytearray, memoryview]


def _check_count(n: int, *buffers: Readable) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer of {len(buf)} bytes")


def memset(buf: Writable, c: int, n: int) -> Writable:
    """Fill the first ``n`` bytes of ``buf`` with the low byte of ``c``."""
    _check_count(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: Writable, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memcpy(dst: Writable, src: Readable, n: int) -> Writable:
    """Copy ``n`` bytes from ``src`` to the start of ``dst``."""
    _check_count(n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def memmove(dst: Writable, src: Readable, n: int) -> Writable:
    """Copy ``n`` bytes from ``src`` to ``dst``; the regions may overlap."""
    _check_count(n, dst, src)
    # Taking a copy of the source first makes overlapping regions safe.
    dst[:n] = bytes(src[:n])
    return dst


def memccpy(dst: Writable, src: Readable, c: int, n: int) -> Optional[int]:
    """Copy from ``src`` to ``dst`` up to and including the byte ``c``.

    At most ``n`` bytes are copied. Returns the index in ``dst`` just past the
    copied ``c``, or ``None`` when ``c`` was not met within ``n`` bytes.
    """
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    window = bytes(src[:n])
    position = window.find(bytes([c & 0xFF]))
    if position == -1:
        _check_count(n, src)
        count = n
    else:
        count = position + 1
    _check_count(count, dst)
    dst[:count] = window[:count]
    return None if position == -1 else count


def memchr(buf: Readable, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte ``c`` in the first ``n`` bytes."""
    _check_count(n, buf)
    position = bytes(buf[:n]).find(bytes([c & 0xFF]))
    return None if position == -1 else position


def memcmp(a: Readable, b: Readable, n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first unequal pair."""
    _check_count(n, a, b)
    for left, right in zip(bytes(a[:n]), bytes(b[:n])):
        if left != right:
            return left - right
    return 0