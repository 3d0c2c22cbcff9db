"""Comparison and ordering of C-style strings."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Iterable

from ftkit.chars import _c_string


def _check_count(n: int) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int count, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")


def strcmp(s1: str, s2: str) -> int:
    """Compare *s1* and *s2* up to their first NUL.

    Returns the difference between the codes of the first pair of differing
    characters, the end of a string counting as code 0; ``0`` when equal.
    """
    return strncmp(s1, s2, None)


def strncmp(s1: str, s2: str, n: int | None) -> int:
    """Compare at most *n* characters of *s1* and *s2* like :func:`strcmp`.

    ``None`` for *n* compares the whole strings.
    """
    if n is not None:
        _check_count(n)
    first = _c_string(s1)
    second = _c_string(s2)
    if n is not None:
        first, second = first[:n], second[:n]
    for a, b in zip(first, second):
        if a != b:
            return ord(a) - ord(b)
    if len(first) > len(second):
        return ord(first[len(second)])
    if len(second) > len(first):
        return -ord(second[len(first)])
    return 0


def strequ(s1: str | None, s2: str | None) -> bool:
    """Return whether both strings are given and compare equal."""
    return s1 is not None and s2 is not None and strcmp(s1, s2) == 0


def strnequ(s1: str | None, s2: str | None, n: int) -> bool:
    """Return whether both strings are given and their first *n* characters match."""
    return s1 is not None and s2 is not None and strncmp(s1, s2, n) == 0


def sort_strings(strings: Iterable[str]) -> list[str]:
    """Return *strings* in ascending :func:`strcmp` order.

    The sort is stable: strings that compare equal keep their order.
    """
    return sorted(strings, key=cmp_to_key(strcmp))