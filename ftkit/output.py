"""Writing characters, strings and numbers to text streams."""

from __future__ import annotations

import sys
from typing import TextIO

from ftkit.chars import _c_string
from ftkit.convert import itoa


def _stream(file: TextIO | None) -> TextIO:
    return sys.stdout if file is None else file


def _ordinal(c: str | int) -> int:
    """Return the character code of *c*, a one-character string or an int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an int, got {type(c).__name__}")
    return c


def putchar(c: str | int, file: TextIO | None = None) -> None:
    """Write the single character *c* to *file* (standard output by default)."""
    _stream(file).write(chr(_ordinal(c)))


def putstr(text: str | None, file: TextIO | None = None) -> None:
    """Write *text* up to its first NUL; ``None`` writes nothing."""
    if text is None:
        return
    _stream(file).write(_c_string(text))


def putendl(text: str | None, file: TextIO | None = None) -> None:
    """Write *text* followed by a newline; ``None`` writes nothing."""
    if text is None:
        return
    stream = _stream(file)
    stream.write(_c_string(text))
    stream.write("\n")


def putnbr(number: int, file: TextIO | None = None) -> None:
    """Write the decimal representation of *number*."""
    _stream(file).write(itoa(number))


def putnstr(text: str | None, size: int, file: TextIO | None = None) -> None:
    """Write exactly the first *size* characters of *text*, NULs included.

    ``None`` text writes nothing.
    """
    if isinstance(size, bool) or not isinstance(size, int):
        raise TypeError(f"expected an int size, got {type(size).__name__}")
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if text is None:
        return
    if size > len(text):
        raise IndexError(f"text holds {len(text)} characters, {size} requested")
    _stream(file).write(text[:size])