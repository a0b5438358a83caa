"""A singly linked list of integers with front insertion and removal."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass
class _Node:
    item: int
    next: _Node | None = None


class IntList:
    """Singly linked list that grows and shrinks at its front."""

    def __init__(self) -> None:
        self._first: _Node | None = None
        self._last: _Node | None = None
        self._length = 0

    def prepend(self, value: int) -> None:
        """Put ``value`` at the beginning of the list."""
        node = _Node(value, self._first)
        if self._first is None:
            self._last = node
        self._first = node
        self._length += 1

    def remove(self) -> int:
        """Take the first item off the list and return it."""
        if self._first is None:
            raise IndexError("remove from empty list")
        node = self._first
        if node is self._last:
            self._first = self._last = None
        else:
            self._first = node.next
        self._length -= 1
        return node.item

    def is_empty(self) -> bool:
        """Return True if the list holds no items."""
        return self._first is None

    def __len__(self) -> int:
        return self._length

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __iter__(self) -> Iterator[int]:
        node = self._first
        while node is not None:
            yield node.item
            node = node.next

    def __repr__(self) -> str:
        return f"IntList({list(self)!r})"