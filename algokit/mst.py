"""Minimum spanning trees by Kruskal's and Prim's algorithms."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable, Sequence
from typing import Any

from .dsu import UnionFind


def _check_count(vertex_count: int) -> None:
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")


def kruskal(
    vertex_count: int, edges: Iterable[tuple[int, int, Any]]
) -> list[tuple[int, int, Any]]:
    """Edges of a minimum spanning tree over vertices ``0 .. vertex_count-1``.

    ``edges`` are ``(src, dest, weight)``. The tree edges come back in the
    order they were chosen (lightest first), each written with the smaller
    endpoint first. Raises ValueError when the graph is not connected.
    """
    _check_count(vertex_count)
    sets = UnionFind(vertex_count)
    tree: list[tuple[int, int, Any]] = []
    for src, dest, weight in sorted(edges, key=lambda edge: edge[2]):
        if len(tree) == vertex_count - 1:
            break
        if sets.union(src, dest):
            tree.append((min(src, dest), max(src, dest), weight))
    if vertex_count > 0 and len(tree) < vertex_count - 1:
        raise ValueError("graph is not connected")
    return tree


def kruskal_weight(vertex_count: int, edges: Iterable[tuple[int, int, Any]]) -> Any:
    """Total weight of a minimum spanning forest over ``(x, y, weight)`` edges."""
    _check_count(vertex_count)
    sets = UnionFind(vertex_count)
    total = 0
    for x, y, weight in sorted(edges, key=lambda edge: (edge[2], edge[0], edge[1])):
        if sets.union(x, y):
            total += weight
    return total


def prim(matrix: Sequence[Sequence[Any]]) -> list[tuple[int, int, Any]]:
    """Minimum spanning tree of a graph given as a weight matrix, rooted at 0.

    A zero entry means no edge. Returns ``(parent, vertex, weight)`` for each
    vertex from 1 upwards. Raises ValueError when the graph is not connected.
    """
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("weight matrix must be square")
    if size == 0:
        return []

    distance: list[Any] = [math.inf] * size
    parent = [-1] * size
    in_tree = [False] * size
    distance[0] = 0

    for _ in range(size):
        nearest = min(
            (v for v in range(size) if not in_tree[v]), key=distance.__getitem__
        )
        if distance[nearest] == math.inf:
            raise ValueError("graph is not connected")
        in_tree[nearest] = True
        for v, weight in enumerate(matrix[nearest]):
            if weight and not in_tree[v] and weight < distance[v]:
                distance[v] = weight
                parent[v] = nearest

    return [(parent[v], v, matrix[v][parent[v]]) for v in range(1, size)]


def prim_weight(vertex_count: int, edges: Iterable[tuple[int, int, Any]]) -> Any:
    """Weight of the minimum spanning tree of the component holding vertex 0.

    ``edges`` are undirected ``(x, y, weight)`` with 0-based vertices.
    """
    _check_count(vertex_count)
    if vertex_count == 0:
        return 0
    neighbours: list[list[tuple[int, Any]]] = [[] for _ in range(vertex_count)]
    for x, y, weight in edges:
        if not (0 <= x < vertex_count and 0 <= y < vertex_count):
            raise ValueError(f"edge ({x}, {y}) is outside the graph")
        neighbours[x].append((y, weight))
        neighbours[y].append((x, weight))

    visited = [False] * vertex_count
    total = 0
    pending: list[tuple[Any, int]] = [(0, 0)]
    while pending:
        weight, vertex = heapq.heappop(pending)
        if visited[vertex]:
            continue
        visited[vertex] = True
        total += weight
        for other, edge_weight in neighbours[vertex]:
            if not visited[other]:
                heapq.heappush(pending, (edge_weight, other))
    return total