"""Searching for characters and substrings in C-style strings."""

from __future__ import annotations

from ftkit.chars import _c_string


def _ordinal(c: str | int) -> int:
    """Return the character code of *c*, a one-character string or an int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an int, got {type(c).__name__}")
    return c


def strchri(text: str | None, c: str | int) -> int:
    """Return the index of the first *c* in *text*, or ``-1``.

    Searching for NUL finds the terminator, at the end of the string.
    """
    wanted = _ordinal(c)
    if text is None:
        return -1
    text = _c_string(text)
    if wanted == 0:
        return len(text)
    return next((i for i, char in enumerate(text) if ord(char) == wanted), -1)


def strchr(text: str | None, c: str | int) -> str | None:
    """Return the rest of *text* from the first *c*, or ``None`` if absent."""
    index = strchri(text, c)
    if index < 0 or text is None:
        return None
    return _c_string(text)[index:]


def strrchr(text: str | None, c: str | int) -> str | None:
    """Return the rest of *text* from the last *c*, or ``None`` if absent."""
    wanted = _ordinal(c)
    if text is None:
        return None
    text = _c_string(text)
    if wanted == 0:
        return ""
    index = text.rfind(chr(wanted))
    if index < 0:
        return None
    return text[index:]


def strnstr(haystack: str, needle: str, length: int) -> str | None:
    """Find *needle* within the first *length* characters of *haystack*.

    Returns the rest of *haystack* from the match, or ``None``. An empty
    needle matches at the start, except when *length* is zero and the
    haystack is not empty.
    """
    if isinstance(length, bool) or not isinstance(length, int):
        raise TypeError(f"expected an int length, got {type(length).__name__}")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    haystack = _c_string(haystack)
    needle = _c_string(needle)
    if not needle:
        if length > 0 or not haystack:
            return haystack
        return None
    index = haystack.find(needle, 0, length)
    if index < 0:
        return None
    return haystack[index:]