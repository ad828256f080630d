"""A singly linked list with front and back insertion."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass
class _Node(Generic[T]):
    data: T
    next: Optional["_Node[T]"] = None


class LinkedList(Generic[T]):
    """Singly linked list holding values in insertion order."""

    def __init__(self, values: Any = ()) -> None:
        self._head: Optional[_Node[T]] = None
        for value in values:
            self.push_back(value)

    def push_back(self, value: T) -> None:
        """Append a value at the end of the list."""
        node = _Node(value)
        if self._head is None:
            self._head = node
            return
        current = self._head
        while current.next is not None:
            current = current.next
        current.next = node

    def push_front(self, value: T) -> None:
        """Insert a value at the start of the list."""
        self._head = _Node(value, self._head)

    def pop_front(self) -> None:
        """Remove the first value; does nothing on an empty list."""
        if self._head is not None:
            self._head = self._head.next

    def is_empty(self) -> bool:
        """Return True when the list holds no values."""
        return self._head is None

    def front(self) -> T:
        """Return the first value, raising IndexError on an empty list."""
        if self._head is None:
            raise IndexError("List is empty")
        return self._head.data

    def clear(self) -> None:
        """Remove every value."""
        while not self.is_empty():
            self.pop_front()

    def __iter__(self) -> Iterator[T]:
        current = self._head
        while current is not None:
            yield current.data
            current = current.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"