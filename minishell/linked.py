"""A singly linked list of arbitrary values."""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class _Node(Generic[T]):
    __slots__ = ("value", "next")

    def __init__(self, value: T, next_node: "Optional[_Node[T]]" = None) -> None:
        self.value = value
        self.next = next_node


class LinkedList(Generic[T]):
    """A singly linked list that can grow at either end.

    Any value, ``None`` included, may be stored. Callbacks given to the
    removing methods are called once for each value that leaves the list.
    """

    def __init__(self, values: Optional[Iterable[T]] = None) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._size = 0
        if values is not None:
            for value in values:
                self.push_back(value)

    def push_front(self, value: T) -> None:
        """Insert ``value`` at the front."""
        node = _Node(value, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def push_back(self, value: T) -> None:
        """Append ``value`` at the back."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def last(self) -> T:
        """Return the last value; raise IndexError when the list is empty."""
        if self._tail is None:
            raise IndexError("last() on an empty list")
        return self._tail.value

    def pop_front(self, delete: Optional[Callable[[T], Any]] = None) -> T:
        """Remove and return the first value, passing it to ``delete`` first if given."""
        node = self._head
        if node is None:
            raise IndexError("pop_front() on an empty list")
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        if delete is not None:
            delete(node.value)
        return node.value

    def clear(self, delete: Optional[Callable[[T], Any]] = None) -> None:
        """Remove every value, front to back, passing each to ``delete`` if given."""
        while self._head is not None:
            self.pop_front(delete)

    def for_each(self, func: Callable[[T], Any]) -> None:
        """Call ``func`` on each value, front to back."""
        for value in self:
            func(value)

    def map(
        self,
        func: Callable[[T], U],
        delete: Optional[Callable[[U], Any]] = None,
    ) -> "LinkedList[U]":
        """Return a new list of ``func(value)`` for each value.

        If ``func`` raises, the values already produced are removed from the
        new list and passed to ``delete``, and the exception propagates.
        """
        result: LinkedList[U] = LinkedList()
        try:
            for value in self:
                result.push_back(func(value))
        except BaseException:
            result.clear(delete)
            raise
        return result

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"