"""Building new strings from existing ones: conversion, splitting, trimming, mapping."""

from __future__ import annotations

import operator
from typing import Callable, MutableSequence, Optional, TypeVar

_INT_MIN = -(1 << 31)
_INT_MAX = (1 << 31) - 1

T = TypeVar("T")


def itoa(n: int) -> str:
    """Return the decimal form of the signed 32-bit integer ``n``."""
    value = operator.index(n)
    if not _INT_MIN <= value <= _INT_MAX:
        raise OverflowError(f"{value} does not fit in a signed 32-bit integer")
    return str(value)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty words."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in text.split(sep) if word]


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start at or past the end of ``text``, or a zero length, gives ``""``.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text) or length == 0:
        return ""
    return text[start:start + length]


def strjoin(a: str, b: str) -> str:
    """Return ``a`` followed by ``b``."""
    return a + b


def strtrim(text: str, chars: str) -> str:
    """Remove every leading and trailing character of ``text`` that is in ``chars``."""
    if not chars:
        return text
    return text.strip(chars)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Return a new string made of ``func(index, char)`` for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(
    text: MutableSequence[T], func: Callable[[int, T], Optional[T]]
) -> None:
    """Call ``func(index, item)`` on each item of ``text``, updating it in place.

    When ``func`` returns something other than ``None`` the item at that
    index is replaced with it.
    """
    for index, item in enumerate(list(text)):
        result = func(index, item)
        if result is not None:
            text[index] = result