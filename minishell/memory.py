"""Byte-buffer operations over mutable buffers such as ``bytearray``."""

from __future__ import annotations

import sys
from typing import Optional

from .collector import Collector


def _check_length(n: int, *buffers) -> None:
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"length {n} exceeds buffer of {len(buf)} bytes")


def memset(buf, value: int, n: int):
    """Fill the first ``n`` bytes of ``buf`` with ``value`` (low 8 bits); return ``buf``."""
    _check_length(n, buf)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def memcpy(dest, src, n: int):
    """Copy ``n`` bytes from ``src`` into the start of ``dest``; return ``dest``.

    When both buffers are ``None`` nothing is done and ``None`` is returned.
    """
    if dest is None and src is None:
        return None
    _check_length(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf, dest: int, src: int, n: int):
    """Copy ``n`` bytes inside ``buf`` from offset ``src`` to offset ``dest``.

    The ranges may overlap. Returns ``buf``.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    if max(dest, src) + n > len(buf):
        raise ValueError("range exceeds buffer")
    buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf


def memchr(data, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c`` in the first ``n`` bytes, or None."""
    _check_length(n, data)
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a, b, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference at the first mismatch, else 0."""
    _check_length(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int, collector: Optional[Collector] = None) -> bytearray:
    """Return a zeroed buffer for ``count`` items of ``size`` bytes.

    A request for zero items or zero-sized items yields a one-byte buffer.
    The buffer is tracked by ``collector`` when one is given.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    total = 1 if count == 0 or size == 0 else count * size
    if total > sys.maxsize:
        raise OverflowError(f"{count} * {size} bytes is too large")
    if collector is not None:
        return collector.alloc(total)
    return bytearray(total)