"""Running two commands joined by a pipe between an input and an output file."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Mapping, Sequence
from typing import IO, Any, BinaryIO

from pipex.report import format_message, report
from pipex.resolve import CommandNotFoundError, find_executable, split_command

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
USAGE = "Error: usage: infile cmd1 cmd2 outfile"


class PipexError(Exception):
    """A failure that stops the pipeline before any command runs."""


class UsageError(PipexError):
    """The wrong number of arguments was given."""


def check_args(args: Sequence[str]) -> None:
    """Require exactly four arguments: infile, cmd1, cmd2, outfile."""
    if len(args) != 4:
        raise UsageError(USAGE)


def open_infile(path: str) -> BinaryIO:
    """Open the input file for reading."""
    try:
        return open(path, "rb")
    except OSError as exc:
        reason = exc.strerror or str(exc)
        message = format_message("Error: %s:", reason) + format_message(" %s \n", path)
        raise PipexError(message) from exc


def open_outfile(path: str) -> BinaryIO:
    """Create or truncate the output file with mode 0644."""
    try:
        fd = os.open(path, os.O_CREAT | os.O_WRONLY | os.O_TRUNC, 0o644)
    except OSError as exc:
        reason = exc.strerror or str(exc)
        message = format_message("Error: %s:", reason) + format_message(" %s\n: ", path)
        raise PipexError(message) from exc
    return os.fdopen(fd, "wb")


def _start(
    command: str,
    stdin: IO[Any] | int,
    stdout: IO[Any] | int,
    env: Mapping[str, str] | None,
) -> subprocess.Popen | None:
    """Start one command; report and return None when it cannot run."""
    words = split_command(command)
    try:
        path = find_executable(words[0] if words else "")
    except CommandNotFoundError as exc:
        report("%s", str(exc))
        return None
    try:
        return subprocess.Popen(
            words,
            executable=path,
            stdin=stdin,
            stdout=stdout,
            env=None if env is None else dict(env),
        )
    except OSError as exc:
        report("Error execve for %s:", command)
        report("%s", exc.strerror or str(exc))
        return None


def run_pipeline(
    infile: str,
    cmd1: str,
    cmd2: str,
    outfile: str,
    env: Mapping[str, str] | None = None,
) -> tuple[int, int]:
    """Run cmd1 < infile | cmd2 > outfile.

    Returns the exit status of each command; a command that could not be
    started counts as EXIT_FAILURE. Raises PipexError if a file cannot be
    opened, in which case no command runs.
    """
    with open_infile(infile) as source, open_outfile(outfile) as sink:
        first = _start(cmd1, source, subprocess.PIPE, env)
        second_stdin: IO[Any] | int = (
            first.stdout if first is not None and first.stdout is not None else subprocess.DEVNULL
        )
        second = _start(cmd2, second_stdin, sink, env)
        if first is not None and first.stdout is not None:
            first.stdout.close()
        status1 = first.wait() if first is not None else EXIT_FAILURE
        status2 = second.wait() if second is not None else EXIT_FAILURE
    return status1, status2


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: pipex infile cmd1 cmd2 outfile."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        check_args(args)
        run_pipeline(*args)
    except PipexError as exc:
        report("%s", str(exc))
        return EXIT_FAILURE
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())