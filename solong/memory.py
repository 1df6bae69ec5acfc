"""Byte-buffer helpers: filling, zeroing, searching, comparing and copying."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]
MutableBuffer = Union[bytearray, memoryview]


def _check_count(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def _check_length(length: int, *buffers: Buffer) -> int:
    _check_count(length, "length")
    for buf in buffers:
        if length > len(buf):
            raise ValueError(
                f"length {length} exceeds a buffer of {len(buf)} bytes"
            )
    return length


def memset(buf: MutableBuffer, value: int, length: int) -> MutableBuffer:
    """Set the first ``length`` bytes of ``buf`` to ``value`` (taken modulo 256)."""
    _check_length(length, buf)
    buf[:length] = bytes([value & 0xFF]) * length
    return buf


def bzero(buf: MutableBuffer, length: int) -> MutableBuffer:
    """Zero the first ``length`` bytes of ``buf``."""
    return memset(buf, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of ``count`` elements of ``size`` bytes each."""
    _check_count(count, "count")
    _check_count(size, "size")
    return bytearray(count * size)


def memchr(buf: Buffer, value: int, length: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` within ``length`` bytes, or None."""
    _check_length(length, buf)
    index = bytes(buf[:length]).find(value & 0xFF)
    return index if index >= 0 else None


def memcmp(first: Buffer, second: Buffer, length: int) -> int:
    """Compare ``length`` bytes.

    Returns the difference of the first differing bytes, or 0 when equal.
    """
    _check_length(length, first, second)
    for a, b in zip(bytes(first[:length]), bytes(second[:length])):
        if a != b:
            return a - b
    return 0


def memcpy(dst: MutableBuffer, src: Buffer, length: int) -> MutableBuffer:
    """Copy ``length`` bytes from ``src`` to the start of ``dst``."""
    _check_length(length, dst, src)
    dst[:length] = bytes(src[:length])
    return dst


def memmove(
    buf: MutableBuffer, dst_offset: int, src_offset: int, length: int
) -> MutableBuffer:
    """Copy ``length`` bytes within ``buf`` from one offset to another.

    The regions may overlap; the result is as if the source were copied
    aside first.
    """
    _check_count(dst_offset, "dst_offset")
    _check_count(src_offset, "src_offset")
    _check_count(length, "length")
    if max(dst_offset, src_offset) + length > len(buf):
        raise ValueError("region lies outside the buffer")
    chunk = bytes(buf[src_offset:src_offset + length])
    buf[dst_offset:dst_offset + length] = chunk
    return buf