"""Formatting and writing diagnostic messages."""

from __future__ import annotations

import sys
from typing import TextIO


def format_message(template: str, value: str | None) -> str:
    """Replace each '%' directive in template with value.

    A '%' and the character after it are replaced together, so "%s" and any
    other two-character directive give the same result. A missing value is
    shown as "(null)".
    """
    text = "(null)" if value is None else value
    parts = []
    chars = iter(template)
    for ch in chars:
        if ch == "%":
            parts.append(text)
            next(chars, None)
        else:
            parts.append(ch)
    return "".join(parts)


def report(template: str, value: str | None = None, stream: TextIO | None = None) -> str:
    """Write the formatted message to stream (standard error by default).

    Returns the text that was written.
    """
    message = format_message(template, value)
    target = sys.stderr if stream is None else stream
    target.write(message)
    target.flush()
    return message