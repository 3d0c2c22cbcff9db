"""Byte-buffer operations: filling, copying, searching and comparing."""

from __future__ import annotations

from typing import MutableSequence


def _check_count(value: int, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int {name}, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def _check_fits(size: int, needed: int, what: str) -> None:
    if needed > size:
        raise IndexError(f"{what} holds {size} bytes, {needed} needed")


def _ordinal(c: str | int) -> int:
    """Return the character code of *c*, a one-character string or an int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an int, got {type(c).__name__}")
    return c


def _byte(value: str | int) -> int:
    """Return *value* reduced to an unsigned byte, as C does."""
    return _ordinal(value) & 0xFF


def memset(buffer: bytearray, value: str | int, length: int) -> bytearray:
    """Fill the first *length* bytes of *buffer* with *value* and return it."""
    _check_count(length, "length")
    _check_fits(len(buffer), length, "buffer")
    buffer[:length] = bytes([_byte(value)]) * length
    return buffer


def bzero(buffer: bytearray, length: int) -> bytearray:
    """Set the first *length* bytes of *buffer* to zero and return it."""
    return memset(buffer, 0, length)


def memcpy(dst: bytearray, src: bytes, n: int) -> bytearray:
    """Copy the first *n* bytes of *src* into *dst* and return *dst*."""
    _check_count(n, "count")
    _check_fits(len(src), n, "source")
    _check_fits(len(dst), n, "destination")
    dst[:n] = src[:n]
    return dst


def memccpy(dst: bytearray, src: bytes, c: str | int, n: int) -> int | None:
    """Copy bytes from *src* to *dst*, stopping after the first byte *c*.

    At most *n* bytes are copied. Returns the index in *dst* just past the
    copied *c*, or ``None`` when *c* is not among the first *n* bytes.
    """
    _check_count(n, "count")
    stop = _byte(c)
    found = bytes(src[:n]).find(stop)
    count = n if found < 0 else found + 1
    _check_fits(len(src), count, "source")
    _check_fits(len(dst), count, "destination")
    dst[:count] = src[:count]
    return None if found < 0 else count


def memchr(data: bytes, c: str | int, n: int) -> int | None:
    """Return the index of the first byte *c* in the first *n* bytes, or ``None``."""
    _check_count(n, "count")
    index = bytes(data[:n]).find(_byte(c))
    if index >= 0:
        return index
    _check_fits(len(data), n, "data")
    return None


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Compare the first *n* bytes of *a* and *b*.

    Returns the difference of the first differing pair of bytes, or ``0``.
    """
    _check_count(n, "count")
    for left, right in zip(a[:n], b[:n]):
        if left != right:
            return left - right
    _check_fits(len(a), n, "first operand")
    _check_fits(len(b), n, "second operand")
    return 0


def memmove(
    buffer: bytearray, dst_offset: int, src_offset: int, length: int
) -> bytearray:
    """Move *length* bytes within *buffer*; the regions may overlap."""
    _check_count(length, "length")
    _check_count(dst_offset, "offset")
    _check_count(src_offset, "offset")
    _check_fits(len(buffer), src_offset + length, "buffer")
    _check_fits(len(buffer), dst_offset + length, "buffer")
    buffer[dst_offset:dst_offset + length] = bytes(
        buffer[src_offset:src_offset + length]
    )
    return buffer


def chrswap(buffer: MutableSequence, i: int, j: int) -> None:
    """Swap the items at positions *i* and *j* of *buffer* in place."""
    buffer[i], buffer[j] = buffer[j], buffer[i]