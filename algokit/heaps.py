"""Binary heaps over Python lists: heapify, heap sort, max- and min-heaps."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableSequence
from typing import Any


def heapify(values: MutableSequence[Any], size: int, index: int) -> None:
    """Sift ``values[index]`` down so the subtree within ``size`` is a max-heap."""
    if not 0 <= size <= len(values):
        raise ValueError("heap size exceeds the sequence length")
    while True:
        largest = index
        left = 2 * index + 1
        right = left + 1
        if left < size and values[left] > values[largest]:
            largest = left
        if right < size and values[right] > values[largest]:
            largest = right
        if largest == index:
            return
        values[index], values[largest] = values[largest], values[index]
        index = largest


def build_max_heap(values: Iterable[Any]) -> list[Any]:
    """Return the values arranged as an array-backed max-heap."""
    items = list(values)
    for index in range(len(items) // 2 - 1, -1, -1):
        heapify(items, len(items), index)
    return items


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values in ascending order using heap sort."""
    items = build_max_heap(values)
    for end in range(len(items) - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        heapify(items, end, 0)
    return items


class MaxHeap:
    """A max-heap whose largest element sits at the root."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items = build_max_heap(values)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate in array order."""
        return iter(list(self._items))

    def peek(self) -> Any:
        if not self._items:
            raise IndexError("peek at an empty heap")
        return self._items[0]

    def insert(self, key: Any) -> None:
        items = self._items
        items.append(key)
        index = len(items) - 1
        while index > 0:
            parent = (index - 1) // 2
            if items[parent] >= items[index]:
                break
            items[parent], items[index] = items[index], items[parent]
            index = parent

    def delete_root(self) -> Any:
        """Remove and return the largest element."""
        if not self._items:
            raise IndexError("delete from an empty heap")
        root = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            heapify(self._items, len(self._items), 0)
        return root


class MinHeap:
    """A min-heap that also supports removing an arbitrary value."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items: list[Any] = []
        for value in values:
            self.insert(value)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate in array order."""
        return iter(list(self._items))

    def peek(self) -> Any:
        if not self._items:
            raise IndexError("peek at an empty heap")
        return self._items[0]

    def _sift_up(self, index: int) -> None:
        items = self._items
        while index > 0:
            parent = (index - 1) // 2
            if items[parent] <= items[index]:
                break
            items[parent], items[index] = items[index], items[parent]
            index = parent

    def _sift_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while True:
            smallest = index
            left = 2 * index + 1
            right = left + 1
            if left < size and items[left] < items[smallest]:
                smallest = left
            if right < size and items[right] < items[smallest]:
                smallest = right
            if smallest == index:
                return
            items[index], items[smallest] = items[smallest], items[index]
            index = smallest

    def insert(self, key: Any) -> None:
        self._items.append(key)
        self._sift_up(len(self._items) - 1)

    def delete(self, key: Any) -> None:
        """Remove one occurrence of ``key``; raise ValueError if it is absent."""
        try:
            index = self._items.index(key)
        except ValueError:
            raise ValueError(f"{key!r} is not in the heap") from None
        last = self._items.pop()
        if index == len(self._items):
            return
        self._items[index] = last
        if index > 0 and last < self._items[(index - 1) // 2]:
            self._sift_up(index)
        else:
            self._sift_down(index)