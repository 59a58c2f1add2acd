"""Reading a file descriptor one line at a time, with state kept per descriptor."""

from __future__ import annotations

import os
from typing import Dict, Iterator, Optional

BUFFER_SIZE = 42
MAX_FD = 1024


class LineReader:
    """Returns successive lines from file descriptors.

    Text read past the end of a line is kept for the next call on the same
    descriptor. Each call reads from the descriptor at least once before
    looking for the end of a line in what was just read.
    """

    def __init__(self, buffer_size: int = BUFFER_SIZE, max_fd: int = MAX_FD) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.buffer_size = buffer_size
        self.max_fd = max_fd
        self._remaining: Dict[int, bytes] = {}

    def _check_fd(self, fd: int) -> None:
        if not 0 <= fd < self.max_fd:
            raise ValueError(f"file descriptor {fd} out of range 0..{self.max_fd - 1}")

    def read_line(self, fd: int) -> Optional[str]:
        """Return the next line of ``fd`` with its newline, or None at end of input.

        A read error discards what was kept for ``fd`` and is raised.
        """
        self._check_fd(fd)
        pending = self._remaining.pop(fd, None)
        try:
            pending = self._fill(fd, pending)
        except OSError:
            raise
        if pending is None:
            return None
        end = pending.find(b"\n")
        if end >= 0:
            rest = pending[end + 1:]
            if rest:
                self._remaining[fd] = rest
            pending = pending[: end + 1]
        return pending.decode("utf-8", errors="surrogateescape")

    def _fill(self, fd: int, pending: Optional[bytes]) -> Optional[bytes]:
        while True:
            chunk = os.read(fd, self.buffer_size)
            if not chunk:
                return pending
            pending = (pending or b"") + chunk
            if b"\n" in chunk:
                return pending

    def forget(self, fd: int) -> None:
        """Discard whatever was kept for ``fd``."""
        self._check_fd(fd)
        self._remaining.pop(fd, None)


def read_lines(fd: int, buffer_size: int = BUFFER_SIZE) -> Iterator[str]:
    """Yield every remaining line of ``fd``."""
    reader = LineReader(buffer_size)
    while True:
        line = reader.read_line(fd)
        if line is None:
            return
        yield line