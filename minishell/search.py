"""String measuring, searching, comparing and bounded copying.

Strings are ordinary Python ``str`` values. The terminating position of a
string is taken to be ``len(s)``, so looking for the NUL character finds the
end of the string. Search functions return indexes, or ``None`` when nothing
is found.
"""

from __future__ import annotations

import operator
from typing import Optional, Tuple, Union

from .chars import is_digit

CharLike = Union[int, str]

_NUL = "\0"
_WHITESPACE = frozenset(" \t\n\v\f\r")


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(operator.index(c) & 0xFF)


def _code_at(s: str, index: int) -> int:
    return ord(s[index]) if index < len(s) else 0


def strlen(s: str) -> int:
    """Return the number of characters in ``s``."""
    return len(s)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for the NUL character returns ``len(s)``.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for the NUL character returns ``len(s)``.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strcmp(a: str, b: str) -> int:
    """Compare two strings.

    Returns the difference of the character codes at the first position where
    they differ, the end of a string counting as code 0; 0 if they are equal.
    """
    for index in range(max(len(a), len(b))):
        x, y = _code_at(a, index), _code_at(b, index)
        if x != y:
            return x - y
    return 0


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most the first ``n`` characters of two strings, like :func:`strcmp`."""
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    for index in range(n):
        x, y = _code_at(a, index), _code_at(b, index)
        if x != y or x == 0:
            return x - y
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Find ``little`` within the first ``length`` characters of ``big``.

    Returns the index where it starts, 0 when ``little`` is empty, or None.
    A match may only start before the first ``'0'`` character of ``big``:
    scanning for a starting position stops there.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if not little:
        return 0
    limit = min(length, len(big))
    for start in range(limit):
        if big[start] == "0":
            break
        if big[start] != little[0]:
            continue
        matched = 0
        while (
            matched < len(little)
            and start + matched < limit
            and big[start + matched] == little[matched]
        ):
            matched += 1
        if matched == len(little):
            return start
    return None


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the copied text, at most ``size - 1`` characters, and ``len(src)``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dest: str, src: str, limit: int) -> Tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``limit`` characters.

    Returns the resulting text and the length it tried to create. When
    ``limit`` does not exceed ``len(dest)``, ``dest`` is returned unchanged
    with ``limit + len(src)``.
    """
    if limit < 0:
        raise ValueError(f"limit must not be negative, got {limit}")
    if limit <= len(dest):
        return dest, limit + len(src)
    room = limit - len(dest) - 1
    return dest + src[:room], len(dest) + len(src)


def atoi(text: str) -> int:
    """Convert the leading decimal number in ``text`` to an integer.

    Leading whitespace is skipped and one optional sign is accepted. Parsing
    stops at the first non-digit; no digits give 0. The result wraps around
    as a signed 32-bit integer.
    """
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    total = 0
    while pos < len(text) and is_digit(text[pos]):
        total = total * 10 + (ord(text[pos]) - ord("0"))
        pos += 1
    value = (total * sign) & 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value