"""String building, bounded copying, trimming and splitting."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Any


def _check_size(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def bounded_copy(src: str, size: int) -> tuple[str, int]:
    """Copy at most size - 1 characters of src.

    Returns the copied text and the full length of src, so a caller can
    detect truncation by comparing the length with size.
    """
    _check_size("size", size)
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def bounded_concat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dst so that the result holds at most size - 1 characters.

    Returns the resulting text and the length the full concatenation would
    have had. When size is 0 that length is len(src); when size is smaller
    than dst it is len(src) + size, and dst is left unchanged.
    """
    _check_size("size", size)
    if size == 0:
        return dst, len(src)
    if size < len(dst):
        return dst, len(src) + size
    room = max(0, size - 1 - len(dst))
    return dst + src[:room], len(src) + len(dst)


def substr(s: str, start: int, length: int) -> str:
    """At most length characters of s beginning at start.

    A start at or past the end yields an empty string.
    """
    _check_size("start", start)
    _check_size("length", length)
    if start >= len(s):
        return ""
    return s[start : start + length]


def join(s1: str, s2: str) -> str:
    """The concatenation of s1 and s2."""
    return f"{s1}{s2}"


def trim(s: str, charset: str) -> str:
    """Strip every character found in charset from both ends of s."""
    if not charset:
        return s
    return s.strip(charset)


def split(s: str, sep: str) -> list[str]:
    """Split s on the single character sep, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in s.split(sep) if word]


def map_indexed(s: str, f: Callable[[int, str], str]) -> str:
    """A new string made of f(index, char) for each character of s."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def iter_indexed(chars: MutableSequence[Any], f: Callable[[int, Any], Any]) -> None:
    """Call f(index, item) for each item and store a non-None result in place."""
    for index, item in enumerate(chars):
        result = f(index, item)
        if result is not None:
            chars[index] = result