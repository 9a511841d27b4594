"""Linear and binary search over sequences."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Sequence
from typing import Any


def linear_search(values: Sequence[Any], key: Any) -> int | None:
    """Index of the first element equal to ``key``, or ``None`` if absent."""
    for index, value in enumerate(values):
        if value == key:
            return index
    return None


def lower_bound(values: Sequence[Any], key: Any) -> int:
    """Index of the first element not less than ``key`` in sorted ``values``."""
    return bisect_left(values, key)


def upper_bound(values: Sequence[Any], key: Any) -> int:
    """Index of the first element greater than ``key`` in sorted ``values``."""
    return bisect_right(values, key)


def binary_search(values: Sequence[Any], key: Any) -> bool:
    """Whether ``key`` occurs in sorted ``values``."""
    index = bisect_left(values, key)
    return index < len(values) and values[index] == key


def count_occurrences(values: Sequence[Any], key: Any) -> int:
    """Number of elements equal to ``key`` in sorted ``values``."""
    return upper_bound(values, key) - lower_bound(values, key)