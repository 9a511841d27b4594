"""Dynamic programming and exhaustive search over tours."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise, permutations


def knapsack_01(profits: Sequence[int], weights: Sequence[int], capacity: int) -> int:
    """Best total profit of a subset of items whose weights fit ``capacity``.

    Returns 0 for a non-positive capacity, no items, or mismatched lists.
    """
    if capacity <= 0 or not profits or len(weights) != len(profits):
        return 0
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must not be negative")

    first_profit, first_weight = profits[0], weights[0]
    row = [first_profit if first_weight <= c else 0 for c in range(capacity + 1)]

    for profit, weight in zip(profits[1:], weights[1:]):
        row = [0] + [
            max(profit + row[c - weight] if weight <= c else 0, row[c])
            for c in range(1, capacity + 1)
        ]

    return row[capacity]


def travelling_salesman(graph: Sequence[Sequence[int]], source: int = 0) -> int:
    """Cost of the cheapest tour from ``source`` through every vertex and back.

    Every ordering of the other vertices is tried.
    """
    if not 0 <= source < len(graph):
        raise ValueError(f"source vertex {source} is outside the graph")
    others = [v for v in range(len(graph)) if v != source]
    return min(
        sum(graph[a][b] for a, b in pairwise((source, *order, source)))
        for order in permutations(others)
    )