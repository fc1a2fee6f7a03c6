"""Turning a command line argument into an executable path."""

from __future__ import annotations

import errno
import os
from collections.abc import Iterable

from pipex.report import format_message
from pipex.strops import split

DEFAULT_PREFIXES = ("/bin/", "/usr/bin/")


class CommandNotFoundError(LookupError):
    """No executable for a command was found under any prefix."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(format_message("Error: command not found: %s: ", name) + reason)


def split_command(arg: str) -> list[str]:
    """Split a command argument on spaces into its words."""
    return split(arg, " ")


def find_executable(name: str, prefixes: Iterable[str] = DEFAULT_PREFIXES) -> str:
    """The first prefix + name that is executable.

    The name is appended to each prefix as it is, without a search of PATH.
    Raises CommandNotFoundError when no candidate is executable.
    """
    if not name:
        raise CommandNotFoundError(name, os.strerror(errno.ENOENT))
    code = errno.ENOENT
    for prefix in prefixes:
        candidate = f"{prefix}{name}"
        if os.access(candidate, os.X_OK):
            return candidate
        code = errno.EACCES if os.path.exists(candidate) else errno.ENOENT
    raise CommandNotFoundError(name, os.strerror(code))