"""Byte-buffer helpers working on mutable byte sequences."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
Bytes = Union[bytes, bytearray, memoryview]


def _check_count(n: int, *sizes: int) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for size in sizes:
        if n > size:
            raise ValueError(f"byte count {n} exceeds buffer length {size}")


def bzero(buf: Buffer, n: int) -> None:
    """Set the first n bytes of buf to zero."""
    _check_count(n, len(buf))
    buf[:n] = bytes(n)


def memset(buf: Buffer, value: int, count: int) -> Buffer:
    """Fill the first count bytes of buf with the low byte of value."""
    _check_count(count, len(buf))
    buf[:count] = bytes([value & 0xFF]) * count
    return buf


def memcpy(dest: Buffer, src: Bytes, n: int) -> Buffer:
    """Copy the first n bytes of src into the start of dest."""
    _check_count(n, len(dest), len(src))
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: Buffer, dest: int, src: int, n: int) -> Buffer:
    """Copy n bytes inside buf from offset src to offset dest; overlap is safe."""
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_count(n, len(buf) - dest, len(buf) - src)
    buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf


def memchr(data: Bytes, value: int, num: int) -> Optional[int]:
    """Return the offset of the first byte equal to value within num bytes, or None."""
    _check_count(num, len(data))
    offset = bytes(data[:num]).find(value & 0xFF)
    return None if offset < 0 else offset


def memcmp(first: Bytes, second: Bytes, num: int) -> int:
    """Compare num bytes; return the difference of the first unequal pair, or 0."""
    _check_count(num, len(first), len(second))
    for left, right in zip(bytes(first[:num]), bytes(second[:num])):
        if left != right:
            return left - right
    return 0


def calloc(num: int, size: int) -> bytearray:
    """Return a zero-filled buffer of num elements of size bytes each."""
    if num < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    return bytearray(num * size)