"""Byte-buffer helpers: search, compare, copy, fill and allocate."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence


def _check_length(length: int, *buffers: Sequence[int]) -> None:
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    for buffer in buffers:
        if length > len(buffer):
            raise ValueError(
                f"length {length} runs past a buffer of {len(buffer)} bytes"
            )


def memchr(data: Sequence[int], c: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``c`` in the first ``n``.

    Only the low eight bits of ``c`` are compared. Returns None when no byte
    matches.
    """
    _check_length(n, data)
    target = c & 0xFF
    for index, byte in enumerate(data[:n]):
        if byte == target:
            return index
    return None


def memcmp(a: Sequence[int], b: Sequence[int], n: int) -> int:
    """Compare the first ``n`` bytes as unsigned values.

    Returns the difference of the first pair that differs, or 0.
    """
    _check_length(n, a, b)
    for left, right in zip(a[:n], b[:n]):
        if left != right:
            return (left & 0xFF) - (right & 0xFF)
    return 0


def memcpy(
    dst: MutableSequence[int], src: Sequence[int], n: int
) -> MutableSequence[int]:
    """Copy the first ``n`` bytes of ``src`` into ``dst`` and return ``dst``."""
    _check_length(n, dst, src)
    dst[:n] = src[:n]
    return dst


def memmove(
    buffer: MutableSequence[int], dst: int, src: int, length: int
) -> MutableSequence[int]:
    """Move ``length`` bytes inside ``buffer`` from offset ``src`` to ``dst``.

    Overlapping ranges are handled; the buffer is returned.
    """
    if length < 0 or dst < 0 or src < 0:
        raise ValueError("offsets and length must not be negative")
    if max(dst, src) + length > len(buffer):
        raise ValueError("the move runs past the end of the buffer")
    if dst != src and length:
        buffer[dst:dst + length] = buffer[src:src + length]
    return buffer


def memset(
    buffer: MutableSequence[int], value: int, length: int
) -> MutableSequence[int]:
    """Fill the first ``length`` bytes with the low eight bits of ``value``."""
    _check_length(length, buffer)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: MutableSequence[int], length: int) -> None:
    """Zero the first ``length`` bytes of ``buffer``."""
    memset(buffer, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)