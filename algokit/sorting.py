"""Comparison sorts, the Dutch national flag partition and inversion counting."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

_Partition = Callable[[list[Any], int, int], int]


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted list, built by repeatedly swapping adjacent pairs."""
    items = list(values)
    for limit in range(len(items) - 1, 0, -1):
        for i in range(limit):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted list, bringing the smallest remaining value forward each pass."""
    items = list(values)
    for i in range(len(items)):
        for j in range(i + 1, len(items)):
            if items[j] < items[i]:
                items[i], items[j] = items[j], items[i]
    return items


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted list, inserting each value into the sorted prefix."""
    items = list(values)
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items


def _merge_counting(left: list[Any], right: list[Any]) -> tuple[list[Any], int]:
    """Merge two sorted lists stably; also count pairs taken out of order."""
    merged: list[Any] = []
    i = j = 0
    crossed = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
            crossed += len(left) - i
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, crossed


def _sort_and_count(items: list[Any]) -> tuple[list[Any], int]:
    if len(items) <= 1:
        return items, 0
    middle = (len(items) + 1) // 2
    left, left_count = _sort_and_count(items[:middle])
    right, right_count = _sort_and_count(items[middle:])
    merged, crossed = _merge_counting(left, right)
    return merged, left_count + right_count + crossed


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted list by stable top-down merge sort."""
    return _sort_and_count(list(values))[0]


def inversion_count(values: Iterable[Any]) -> int:
    """Number of pairs ``i < j`` with ``values[i] > values[j]``."""
    return _sort_and_count(list(values))[1]


def _partition_first_pivot(items: list[Any], low: int, high: int) -> int:
    pivot = items[low]
    left, right = low, high
    while left < right:
        while items[left] <= pivot and left < high:
            left += 1
        while right > low and items[right] > pivot:
            right -= 1
        if left < right:
            items[left], items[right] = items[right], items[left]
    items[low], items[right] = items[right], items[low]
    return right


def _partition_last_pivot(items: list[Any], low: int, high: int) -> int:
    pivot = items[high]
    boundary = low - 1
    for j in range(low, high):
        if items[j] <= pivot:
            boundary += 1
            items[boundary], items[j] = items[j], items[boundary]
    items[boundary + 1], items[high] = items[high], items[boundary + 1]
    return boundary + 1


def _quick_sort(values: Iterable[Any], partition: _Partition) -> list[Any]:
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            split = partition(items, low, high)
            pending.append((split + 1, high))
            pending.append((low, split - 1))
    return items


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted list by quicksort, pivoting on the first element of each range."""
    return _quick_sort(values, _partition_first_pivot)


def quick_sort_lomuto(values: Iterable[Any]) -> list[Any]:
    """Return a sorted list by quicksort, pivoting on the last element of each range."""
    return _quick_sort(values, _partition_last_pivot)


def dutch_flag_sort(values: Iterable[int]) -> list[int]:
    """Partition into zeros, then ones, then everything else, in one pass."""
    items = list(values)
    low = mid = 0
    high = len(items) - 1
    while mid <= high:
        if items[mid] == 0:
            items[low], items[mid] = items[mid], items[low]
            low += 1
            mid += 1
        elif items[mid] == 1:
            mid += 1
        else:
            items[mid], items[high] = items[high], items[mid]
            high -= 1
    return items