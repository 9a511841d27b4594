"""A fixed-capacity circular queue and an age-ordered priority selection."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


class QueueFullError(Exception):
    """Raised when adding to a queue that has no free slot."""


class QueueEmptyError(Exception):
    """Raised when removing from an empty queue."""


class CircularQueue:
    """A FIFO queue stored in a fixed ring of ``capacity`` slots."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._buffer: list[Any] = [None] * capacity
        self._front = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._buffer)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Iterate from front to back."""
        for offset in range(self._size):
            yield self._buffer[(self._front + offset) % self.capacity]

    def is_full(self) -> bool:
        return self._size == self.capacity

    def is_empty(self) -> bool:
        return self._size == 0

    def enqueue(self, value: Any) -> None:
        if self.is_full():
            raise QueueFullError(f"cannot add {value!r}: the queue is full")
        self._buffer[(self._front + self._size) % self.capacity] = value
        self._size += 1

    def dequeue(self) -> Any:
        if self.is_empty():
            raise QueueEmptyError("the queue is empty")
        value = self._buffer[self._front]
        self._buffer[self._front] = None
        self._front = (self._front + 1) % self.capacity
        self._size -= 1
        return value


@dataclass(frozen=True)
class Person:
    name: str
    age: int


def oldest(people: Iterable[Person], k: int = 3) -> list[Person]:
    """The ``k`` oldest people, oldest first."""
    crowd = list(people)
    if not 0 <= k <= len(crowd):
        raise ValueError(f"cannot take {k} people from {len(crowd)}")
    return heapq.nlargest(k, crowd, key=lambda person: person.age)