"""Byte-buffer helpers.

Functions that read accept any bytes-like object; functions that write
change a ``bytearray`` in place and return it. A count larger than a
buffer raises ValueError rather than running past its end.
"""

from __future__ import annotations

from typing import Optional, Union

__all__ = ["memchr", "memcmp", "memcpy", "memmove", "memset", "bzero", "calloc"]

BytesLike = Union[bytes, bytearray, memoryview]


def _byte(c: Union[int, bytes]) -> int:
    """A byte value from an int (truncated to 8 bits) or a one-byte bytes."""
    if isinstance(c, (bytes, bytearray)):
        if len(c) != 1:
            raise ValueError(f"expected a single byte, got {c!r}")
        return c[0]
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a byte, got {type(c).__name__}")
    return c & 0xFF


def _check_count(n: int, *buffers: BytesLike) -> None:
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"count {n} exceeds buffer of {len(buf)} bytes")


def memchr(data: BytesLike, c: Union[int, bytes], n: int) -> Optional[int]:
    """Index of the first byte equal to ``c`` among the first ``n`` bytes."""
    target = _byte(c)
    _check_count(n, data)
    index = bytes(memoryview(data)[:n]).find(target)
    return index if index >= 0 else None


def memcmp(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first mismatch, else 0."""
    _check_count(n, a, b)
    for x, y in zip(bytes(memoryview(a)[:n]), bytes(memoryview(b)[:n])):
        if x != y:
            return x - y
    return 0


def memcpy(dest: bytearray, src: BytesLike, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dest``."""
    _check_count(n, dest, src)
    dest[:n] = bytes(memoryview(src)[:n])
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes within ``buf`` from offset ``src`` to offset ``dest``.

    The regions may overlap.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_count(n)
    if max(dest, src) + n > len(buf):
        raise ValueError(f"region of {n} bytes runs past buffer of {len(buf)} bytes")
    if n and dest != src:
        buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf


def memset(buf: bytearray, c: Union[int, bytes], n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buf`` to ``c``."""
    value = _byte(c)
    _check_count(n, buf)
    buf[:n] = bytes([value]) * n
    return buf


def bzero(buf: bytearray, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    return memset(buf, 0, n)


def calloc(nmemb: int, size: int) -> bytearray:
    """A zero-filled buffer of ``nmemb * size`` bytes."""
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    return bytearray(nmemb * size)