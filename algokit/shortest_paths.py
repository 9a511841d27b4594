"""Single-source and all-pairs shortest paths."""

from __future__ import annotations

import heapq
import math
from collections.abc import Hashable, Iterable, Sequence
from itertools import count
from typing import Any


class NegativeCycleError(Exception):
    """Raised when a negative-weight cycle is reachable from the source."""


def bellman_ford(
    vertex_count: int, edges: Iterable[tuple[int, int, Any]], source: int = 0
) -> list[Any]:
    """Distances from ``source`` over directed ``(src, dst, weight)`` edges.

    Unreachable vertices get ``math.inf``. Raises NegativeCycleError when a
    reachable negative cycle exists.
    """
    if not 0 <= source < vertex_count:
        raise ValueError(f"source vertex {source} is outside the graph")
    edge_list = list(edges)
    for u, v, _ in edge_list:
        if not (0 <= u < vertex_count and 0 <= v < vertex_count):
            raise ValueError(f"edge ({u}, {v}) is outside the graph")

    distance: list[Any] = [math.inf] * vertex_count
    distance[source] = 0

    def relax() -> bool:
        changed = False
        for u, v, weight in edge_list:
            if distance[u] != math.inf and distance[u] + weight < distance[v]:
                distance[v] = distance[u] + weight
                changed = True
        return changed

    changed = True
    for _ in range(vertex_count - 1):
        changed = relax()
        if not changed:
            break

    if changed and any(
        distance[u] != math.inf and distance[u] + weight < distance[v]
        for u, v, weight in edge_list
    ):
        raise NegativeCycleError("graph has a negative-weight cycle")
    return distance


def dijkstra(
    edges: Iterable[tuple[Hashable, Hashable, Any]], source: Hashable
) -> dict[Hashable, Any]:
    """Distances from ``source`` over undirected ``(u, v, weight)`` edges.

    Every vertex named by an edge appears in the result, ordered by vertex;
    unreachable ones get ``math.inf``.
    """
    graph: dict[Hashable, list[tuple[Hashable, Any]]] = {}
    for u, v, weight in edges:
        if weight < 0:
            raise ValueError("edge weights must not be negative")
        graph.setdefault(u, []).append((v, weight))
        graph.setdefault(v, []).append((u, weight))

    distance: dict[Hashable, Any] = {vertex: math.inf for vertex in graph}
    distance[source] = 0
    tiebreak = count()
    pending = [(0, next(tiebreak), source)]
    while pending:
        current, _, node = heapq.heappop(pending)
        if current > distance[node]:
            continue
        for neighbour, weight in graph.get(node, ()):
            candidate = current + weight
            if candidate < distance[neighbour]:
                distance[neighbour] = candidate
                heapq.heappush(pending, (candidate, next(tiebreak), neighbour))

    return dict(sorted(distance.items(), key=lambda item: item[0]))


def floyd_warshall(matrix: Sequence[Sequence[Any]]) -> list[list[Any]]:
    """All-pairs shortest distances; ``math.inf`` marks a missing edge.

    The input is left unchanged.
    """
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("distance matrix must be square")
    distance = [list(row) for row in matrix]
    for k in range(size):
        through = distance[k]
        distance = [
            [min(direct, row[k] + onward) for direct, onward in zip(row, through)]
            for row in distance
        ]
    return distance