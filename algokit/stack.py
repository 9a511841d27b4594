"""A stack with a fixed maximum size."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class StackOverflowError(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(Exception):
    """Raised when reading from an empty stack."""


class BoundedStack:
    """A LIFO stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int = 5) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: list[Any] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from top to bottom."""
        return reversed(list(self._items))

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def is_empty(self) -> bool:
        return not self._items

    def push(self, item: Any) -> None:
        if self.is_full():
            raise StackOverflowError(f"cannot push {item!r}: the stack is full")
        self._items.append(item)

    def pop(self) -> Any:
        if self.is_empty():
            raise StackUnderflowError("pop from an empty stack")
        return self._items.pop()

    def peek(self) -> Any:
        if self.is_empty():
            raise StackUnderflowError("peek at an empty stack")
        return self._items[-1]