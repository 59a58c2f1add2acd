"""Opening the files a command's input and output are redirected to."""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass
from typing import BinaryIO, Iterator, Optional

from .command import Command


class RedirectError(Exception):
    """Raised when a redirection file cannot be opened."""

    def __init__(self, filename: str, reason: str) -> None:
        super().__init__(filename, reason)
        self.filename = filename
        self.reason = reason

    def __str__(self) -> str:
        return f"{self.filename}: {self.reason}"


@dataclass
class Redirections:
    """Open files for standard input and output; None leaves the stream as is."""

    stdin: Optional[BinaryIO] = None
    stdout: Optional[BinaryIO] = None


def _open_input(path: str) -> BinaryIO:
    try:
        return open(path, "rb")
    except OSError as exc:
        raise RedirectError(path, exc.strerror or str(exc)) from exc


def _open_output(path: str, append: bool) -> BinaryIO:
    flags = os.O_WRONLY | os.O_CREAT | (os.O_APPEND if append else os.O_TRUNC)
    try:
        fd = os.open(path, flags, 0o644)
    except OSError as exc:
        raise RedirectError(path, exc.strerror or str(exc)) from exc
    return os.fdopen(fd, "ab" if append else "wb")


@contextmanager
def open_redirections(command: Command) -> Iterator[Redirections]:
    """Open the input file, then the output file, of ``command``.

    The output file is created with mode 0644 and truncated unless
    ``command.append`` is set. If the input file cannot be opened the output
    file is left untouched. Raises :class:`RedirectError`. Files are closed
    when the block ends.
    """
    with ExitStack() as stack:
        redirections = Redirections()
        if command.infile:
            redirections.stdin = stack.enter_context(_open_input(command.infile))
        if command.outfile:
            redirections.stdout = stack.enter_context(
                _open_output(command.outfile, command.append)
            )
        yield redirections