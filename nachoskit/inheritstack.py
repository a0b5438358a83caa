"""Two interchangeable integer stacks sharing one abstract interface."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from collections.abc import Sequence

from nachoskit.linkedlist import IntList
from nachoskit.stacks import StackOverflowError, StackUnderflowError

__all__ = [
    "Stack",
    "ArrayStack",
    "ListStack",
    "StackOverflowError",
    "StackUnderflowError",
    "main",
]


class Stack(ABC):
    """Abstract last-in, first-out stack of integers."""

    @abstractmethod
    def push(self, value: int) -> None:
        """Put ``value`` on top of the stack."""

    @abstractmethod
    def pop(self) -> int:
        """Remove and return the top value."""

    @abstractmethod
    def is_full(self) -> bool:
        """Return True if no more values fit."""

    @abstractmethod
    def is_empty(self) -> bool:
        """Return True if the stack holds nothing."""

    def self_test(self, num_to_push: int) -> list[str]:
        """Push ``num_to_push`` values counting up from 17, then drain the stack.

        Returns the lines describing each push and pop, in order.
        """
        lines = []
        count = 17
        for _ in range(num_to_push):
            if self.is_full():
                raise StackOverflowError("push onto full stack")
            lines.append(f"pushing {count}")
            self.push(count)
            count += 1
        while not self.is_empty():
            lines.append(f"popping {self.pop()}")
        return lines


class ArrayStack(Stack):
    """Stack with a fixed capacity."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("stack size must be at least 1")
        self.size = size
        self._items: list[int] = []

    def push(self, value: int) -> None:
        if self.is_full():
            raise StackOverflowError("push onto full stack")
        self._items.append(value)

    def pop(self) -> int:
        if self.is_empty():
            raise StackUnderflowError("pop from empty stack")
        return self._items.pop()

    def is_full(self) -> bool:
        return len(self._items) == self.size

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


class ListStack(Stack):
    """Stack backed by a linked list; it never fills up."""

    def __init__(self) -> None:
        self._list = IntList()

    def push(self, value: int) -> None:
        self._list.prepend(value)

    def pop(self) -> int:
        if self.is_empty():
            raise StackUnderflowError("pop from empty stack")
        return self._list.remove()

    def is_full(self) -> bool:
        return False

    def is_empty(self) -> bool:
        return self._list.is_empty()

    def __len__(self) -> int:
        return len(self._list)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the shared self test on both stack kinds."""
    out = sys.stdout
    for title, stack in (
        ("Testing ArrayStack", ArrayStack(10)),
        ("Testing ListStack", ListStack()),
    ):
        out.write(title + "\n")
        for line in stack.self_test(10):
            out.write(line + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())