"""Byte-buffer helpers: filling, copying, moving, searching and comparing."""

from __future__ import annotations

from typing import Optional, Union

Bytes = Union[bytes, bytearray, memoryview]


def _check_count(count: int, *lengths: int) -> None:
    if count < 0:
        raise ValueError("count must not be negative")
    if any(count > length for length in lengths):
        raise ValueError("count exceeds the buffer")


def fill_bytes(buffer: bytearray, value: int, count: int) -> bytearray:
    """Set the first ``count`` bytes to ``value`` (taken modulo 256)."""
    _check_count(count, len(buffer))
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def zero(buffer: bytearray, count: int) -> None:
    """Set the first ``count`` bytes to zero."""
    fill_bytes(buffer, 0, count)


def allocate_zeroed(count: int, size: int) -> bytearray:
    """A new zero-filled buffer of ``count`` items of ``size`` bytes each."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def find_byte(data: Bytes, value: int, count: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` (mod 256) among ``count``."""
    _check_count(count, len(data))
    target = value & 0xFF
    for index, byte in enumerate(bytes(data[:count])):
        if byte == target:
            return index
    return None


def compare_bytes(first: Bytes, second: Bytes, count: int) -> int:
    """0 if the first ``count`` bytes agree, else the difference where they part."""
    _check_count(count, len(first), len(second))
    for a, b in zip(bytes(first[:count]), bytes(second[:count])):
        if a != b:
            return a - b
    return 0


def copy_bytes(destination: bytearray, source: Bytes, count: int) -> bytearray:
    """Copy the first ``count`` bytes of ``source`` to the start of ``destination``."""
    _check_count(count, len(destination), len(source))
    destination[:count] = bytes(source[:count])
    return destination


def move_bytes(buffer: bytearray, destination: int, source: int, count: int) -> bytearray:
    """Copy ``count`` bytes from offset ``source`` to offset ``destination``.

    The two regions may overlap; the result is as if the bytes were first
    copied aside.
    """
    if destination < 0 or source < 0:
        raise ValueError("offsets must not be negative")
    _check_count(count, len(buffer) - destination, len(buffer) - source)
    buffer[destination:destination + count] = bytes(buffer[source:source + count])
    return buffer