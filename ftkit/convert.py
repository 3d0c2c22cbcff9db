"""Conversions between decimal text and integers."""

from __future__ import annotations

_WHITESPACE = frozenset("\t\n\v\f\r ")
_DIGITS = "0123456789"
_LONG_MAX = 9223372036854775807
_ULONG_MASK = (1 << 64) - 1


def _c_string(text: str) -> str:
    """Return the part of *text* before the first NUL character."""
    return text.split("\0", 1)[0]


def _parse(text: str) -> tuple[bool, int | None]:
    """Parse leading decimal digits the way the C conversions do.

    Returns ``(negative, magnitude)``; the magnitude is ``None`` when the
    digits ran past the largest signed 64-bit value.
    """
    text = _c_string(text)
    stripped = text.lstrip("".join(_WHITESPACE))
    negative = stripped.startswith("-")
    if stripped[:1] in ("-", "+"):
        stripped = stripped[1:]
    result = 0
    for char in stripped:
        if char not in _DIGITS:
            break
        # The accumulator is an unsigned 64-bit value and wraps like one.
        result = (result * 10 + _DIGITS.index(char)) & _ULONG_MASK
        if result > _LONG_MAX:
            return negative, None
    return negative, result


def _to_signed(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def atoli(text: str) -> int:
    """Parse *text* as a signed 64-bit integer.

    Leading whitespace and one sign are skipped, then digits are read until
    the first non-digit. When the value overflows, the result is ``-1`` for
    positive input and ``0`` for negative input.
    """
    negative, magnitude = _parse(text)
    if magnitude is None:
        return 0 if negative else -1
    return -magnitude if negative else magnitude


def atoi(text: str) -> int:
    """Parse *text* like :func:`atoli`, truncating the result to 32 bits."""
    return _to_signed(atoli(text), 32)


def itoa(number: int) -> str:
    """Return the decimal representation of *number*."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an int, got {type(number).__name__}")
    return f"{number:d}"