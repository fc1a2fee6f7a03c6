"""Searching and comparing NUL-terminated style strings."""

from __future__ import annotations


def _text(s: str) -> str:
    """The part of a string before its first NUL."""
    return s.split("\0", 1)[0]


def _char(c: int | str) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int) and not isinstance(c, bool):
        return chr(c & 0xFF)
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _bytes(s: str | bytes) -> bytes:
    data = s.encode("utf-8") if isinstance(s, str) else bytes(s)
    return data.split(b"\0", 1)[0]


def find_char(s: str, c: int | str) -> int | None:
    """Index of the first occurrence of c in s, or None.

    Searching for NUL finds the end of the string.
    """
    text = _text(s)
    target = _char(c)
    if target == "\0":
        return len(text)
    index = text.find(target)
    return None if index < 0 else index


def rfind_char(s: str, c: int | str) -> int | None:
    """Index of the last occurrence of c in s, or None.

    Searching for NUL finds the end of the string.
    """
    text = _text(s)
    target = _char(c)
    if target == "\0":
        return len(text)
    index = text.rfind(target)
    return None if index < 0 else index


def compare(s1: str | bytes, s2: str | bytes) -> int:
    """Difference of the first differing bytes, or 0 if equal."""
    return compare_n(s1, s2, None)


def compare_n(s1: str | bytes, s2: str | bytes, n: int | None) -> int:
    """Like compare, looking at no more than n bytes; None means no limit."""
    if n is not None and n <= 0:
        return 0
    a = _bytes(s1)
    b = _bytes(s2)
    limit = max(len(a), len(b)) + 1 if n is None else n
    for pos in range(limit):
        x = a[pos] if pos < len(a) else 0
        y = b[pos] if pos < len(b) else 0
        if x != y or x == 0 or pos == limit - 1:
            return x - y
    return 0


def find_substring(big: str, little: str, length: int | None) -> int | None:
    """Index of little within the first length characters of big, or None.

    An empty needle matches at 0. A length of None means no limit.
    """
    haystack = _text(big)
    needle = _text(little)
    if not needle:
        return 0
    if not haystack:
        return None
    limit = len(haystack) if length is None else min(length, len(haystack))
    index = haystack.find(needle, 0, limit)
    return None if index < 0 else index