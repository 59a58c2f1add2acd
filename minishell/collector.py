"""A registry that keeps track of allocations so they can be released together."""

from __future__ import annotations

from typing import Any, Iterator, List, Optional


class Collector:
    """Tracks objects and releases them on demand or all at once.

    Objects are compared by identity, so unhashable values such as
    ``bytearray`` buffers can be tracked. The most recent object is held first.
    Used as a context manager, everything still tracked is released on exit.
    """

    def __init__(self) -> None:
        self._items: List[Any] = []

    def alloc(self, size: int) -> bytearray:
        """Return a new buffer of ``size`` bytes and track it."""
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        buf = bytearray(size)
        self.add(buf)
        return buf

    def add(self, obj: Optional[Any]) -> None:
        """Track ``obj``; ``None`` is ignored."""
        if obj is None:
            return
        self._items.insert(0, obj)

    def free(self, obj: Optional[Any]) -> bool:
        """Stop tracking ``obj``; return whether it was tracked."""
        if obj is None:
            return False
        for index, item in enumerate(self._items):
            if item is obj:
                del self._items[index]
                return True
        return False

    def clear(self) -> None:
        """Release every tracked object."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, obj: object) -> bool:
        return any(item is obj for item in self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __enter__(self) -> "Collector":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.clear()