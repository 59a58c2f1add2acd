"""Writing characters, strings and numbers to a stream or file descriptor."""

from __future__ import annotations

import os
from typing import IO, Union

Stream = Union[int, IO[str]]


def _write(stream: Stream, text: str) -> None:
    if isinstance(stream, int):
        data = text.encode()
        while data:
            written = os.write(stream, data)
            data = data[written:]
    else:
        stream.write(text)


def put_char(c: str, stream: Stream) -> None:
    """Write the single character ``c``."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _write(stream, c)


def put_str(s: str, stream: Stream) -> None:
    """Write ``s``."""
    _write(stream, s)


def put_endl(s: str, stream: Stream) -> None:
    """Write ``s`` followed by a newline."""
    _write(stream, s + "\n")


def put_nbr(n: int, stream: Stream) -> None:
    """Write the decimal form of ``n``."""
    _write(stream, str(int(n)))