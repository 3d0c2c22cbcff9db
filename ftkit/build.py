"""Building, copying and transforming C-style strings."""

from __future__ import annotations

from typing import Callable, Iterable

from ftkit.chars import _c_string


def _check_count(value: int, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int {name}, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def _ordinal(c: str | int) -> int:
    """Return the character code of *c*, a one-character string or an int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an int, got {type(c).__name__}")
    return c


def _char(c: str | int) -> str:
    return chr(_ordinal(c))


def strlen(text: str | None) -> int:
    """Return the length of *text* up to its first NUL; ``None`` has length 0."""
    if text is None:
        return 0
    return len(_c_string(text))


def strcat(s1: str, s2: str) -> str:
    """Return *s2* appended to *s1*, each taken up to its first NUL."""
    return _c_string(s1) + _c_string(s2)


def strncat(s1: str, s2: str, n: int) -> str:
    """Return at most *n* characters of *s2* appended to *s1*."""
    _check_count(n, "count")
    return _c_string(s1) + _c_string(s2)[:n]


def strncpy(src: str, length: int) -> str:
    """Return a buffer of exactly *length* characters copied from *src*.

    The copy stops at the first NUL of *src*; a shorter source is padded
    with NUL characters, a longer one is cut without a terminator.
    """
    _check_count(length, "length")
    return _c_string(src)[:length].ljust(length, "\0")


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append *src* to *dst* within a buffer of *size* characters.

    Returns ``(result, total)``. The result holds at most ``size - 1``
    characters; *total* is the length the full concatenation would have.
    When *dst* is already longer than *size*, it is left unchanged and
    *total* is ``len(src) + size``. A *size* of zero places no limit.
    """
    _check_count(size, "size")
    dst = _c_string(dst)
    src = _c_string(src)
    if len(dst) > size:
        return dst, len(src) + size
    total = len(dst) + len(src)
    if size == 0:
        return dst + src, total
    room = max(0, size - 1 - len(dst))
    return dst + src[:room], total


def strjoin(s1: str | None, s2: str | None) -> str | None:
    """Return *s1* followed by *s2*, or ``None`` if either is missing."""
    if s1 is None or s2 is None:
        return None
    return strcat(s1, s2)


def strnjoin(s1: str | None, s2: str | None, l1: int, l2: int) -> str | None:
    """Join the first *l1* characters of *s1* and the first *l2* of *s2*.

    The result has exactly ``l1 + l2`` characters: *s1* is copied up to its
    first NUL and padded with NULs to *l1*; *s2* is copied as is, NULs
    included, and padded with NULs to *l2*. ``None`` if either is missing.
    """
    _check_count(l1, "length")
    _check_count(l2, "length")
    if s1 is None or s2 is None:
        return None
    return strncpy(s1, l1) + s2[:l2].ljust(l2, "\0")


def strarcat(parts: Iterable[str] | None, delimiter: str | int) -> str | None:
    """Join *parts* with the single character *delimiter*.

    A NUL delimiter joins the parts with nothing between them.
    ``None`` parts give ``None``.
    """
    delim = _char(delimiter)
    if parts is None:
        return None
    if delim == "\0":
        delim = ""
    return delim.join(_c_string(part) for part in parts)


def strfill(size: int, c: str | int) -> str:
    """Return a string of *size* copies of the character *c*."""
    _check_count(size, "size")
    return _char(c) * size


def strmap(text: str | None, func: Callable[[str], str] | None) -> str | None:
    """Return *text* with *func* applied to each character.

    A NUL produced by *func* ends the result. ``None`` if either argument
    is missing.
    """
    if text is None or func is None:
        return None
    return _c_string("".join(func(char) for char in _c_string(text)))


def strmapi(
    text: str | None, func: Callable[[int, str], str] | None
) -> str | None:
    """Like :func:`strmap`, but *func* also receives each character's index."""
    if text is None or func is None:
        return None
    return _c_string(
        "".join(func(index, char) for index, char in enumerate(_c_string(text)))
    )


def striter(text: str | None, func: Callable[[str], object] | None) -> None:
    """Call *func* on each character of *text*; missing arguments do nothing."""
    if text is None or func is None:
        return
    for char in _c_string(text):
        func(char)


def striteri(
    text: str | None, func: Callable[[int, str], object] | None
) -> None:
    """Call *func* with the index and value of each character of *text*."""
    if text is None or func is None:
        return
    for index, char in enumerate(_c_string(text)):
        func(index, char)