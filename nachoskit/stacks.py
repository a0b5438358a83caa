"""A fixed-capacity last-in, first-out stack."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Any


class StackOverflowError(OverflowError):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(IndexError):
    """Raised when popping from an empty stack."""


def _successor(value: Any) -> Any:
    if isinstance(value, str) and len(value) == 1:
        return chr(ord(value) + 1)
    return value + 1


class BoundedStack:
    """Stack holding at most ``size`` items."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("stack size must be at least 1")
        self.size = size
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        if self.is_full():
            raise StackOverflowError("push onto full stack")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top item."""
        if self.is_empty():
            raise StackUnderflowError("pop from empty stack")
        return self._items.pop()

    def is_full(self) -> bool:
        """Return True if the stack has no more room."""
        return len(self._items) == self.size

    def is_empty(self) -> bool:
        """Return True if the stack holds nothing."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def self_test(self, start: Any) -> list[str]:
        """Fill the stack with successive values from ``start``, then drain it.

        Returns the lines describing each push and pop, in order.
        """
        lines = []
        count = start
        while not self.is_full():
            lines.append(f"pushing {count}")
            self.push(count)
            count = _successor(count)
        while not self.is_empty():
            lines.append(f"popping {self.pop()}")
        return lines


def main(argv: Sequence[str] | None = None) -> int:
    """Exercise an integer stack and a character stack."""
    out = sys.stdout
    out.write("Testing Stack<int>\n")
    for line in BoundedStack(10).self_test(17):
        out.write(line + "\n")
    out.write("Testing Stack<char>\n")
    for line in BoundedStack(10).self_test("a"):
        out.write(line + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())