"""Character classification and counting."""

from __future__ import annotations


def _code(c: str | int) -> int:
    """Return the character code of *c*, given as a one-character string or an int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or int, got {type(c).__name__}")
    return c


def _c_string(text: str) -> str:
    return text.split("\0", 1)[0]


def isalpha(c: str | int) -> bool:
    """Return whether *c* is an ASCII letter."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def isdigit(c: str | int) -> bool:
    """Return whether *c* is an ASCII decimal digit."""
    return 48 <= _code(c) <= 57


def isalnum(c: str | int) -> bool:
    """Return whether *c* is an ASCII letter or digit."""
    return isdigit(c) or isalpha(c)


def isascii(c: str | int) -> bool:
    """Return whether *c* lies in the ASCII range 0-127."""
    return 0 <= _code(c) < 128


def isprint(c: str | int) -> bool:
    """Return whether *c* is a printable ASCII character."""
    return 32 <= _code(c) <= 126


def isallequal(text: str | None, c: str | int) -> bool:
    """Return whether every character of *text* equals *c*.

    ``None`` text or a NUL *c* gives ``False``; empty text gives ``True``.
    """
    code = _code(c)
    if text is None or code == 0:
        return False
    return all(ord(char) == code for char in _c_string(text))


def chrcount(text: str | None, c: str | int) -> int:
    """Count occurrences of *c* in *text*; ``None`` text counts as empty."""
    code = _code(c)
    if text is None:
        return 0
    return sum(1 for char in _c_string(text) if ord(char) == code)