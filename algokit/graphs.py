"""Adjacency-list graphs, traversals, articulation points and greedy colouring."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Iterable, Iterator, Mapping
from itertools import count
from typing import Any, NamedTuple


class Graph:
    """A weighted graph stored as adjacency lists keyed by vertex."""

    def __init__(self, vertices: Iterable[Hashable] = ()) -> None:
        self._adjacency: dict[Hashable, list[tuple[Hashable, Any]]] = {}
        for vertex in vertices:
            self._adjacency.setdefault(vertex, [])

    def __len__(self) -> int:
        return len(self._adjacency)

    def __iter__(self) -> Iterator[Hashable]:
        """Iterate over vertices in the order they were first seen."""
        return iter(list(self._adjacency))

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adjacency

    def add_edge(
        self, x: Hashable, y: Hashable, weight: Any = 1, bidirectional: bool = True
    ) -> None:
        """Add an edge from ``x`` to ``y``, and back again when bidirectional."""
        self._adjacency.setdefault(x, []).append((y, weight))
        reverse = self._adjacency.setdefault(y, [])
        if bidirectional:
            reverse.append((x, weight))

    def neighbours(self, vertex: Hashable) -> list[tuple[Hashable, Any]]:
        """The ``(neighbour, weight)`` pairs leaving ``vertex``, in insertion order."""
        return list(self._adjacency.get(vertex, ()))

    @property
    def adjacency(self) -> dict[Hashable, list[Hashable]]:
        """Unweighted view: each vertex mapped to its neighbours."""
        return {
            vertex: [neighbour for neighbour, _ in edges]
            for vertex, edges in self._adjacency.items()
        }


def bfs(adjacency: Mapping[Hashable, Iterable[Hashable]], source: Hashable) -> list[Hashable]:
    """Vertices reachable from ``source`` in breadth-first order."""
    visited = {source}
    order: list[Hashable] = []
    pending = deque([source])
    while pending:
        node = pending.popleft()
        order.append(node)
        for neighbour in adjacency.get(node, ()):
            if neighbour not in visited:
                visited.add(neighbour)
                pending.append(neighbour)
    return order


def dfs(adjacency: Mapping[Hashable, Iterable[Hashable]], source: Hashable) -> list[Hashable]:
    """Vertices reachable from ``source`` in depth-first (preorder) order."""
    visited = {source}
    order = [source]
    stack = [iter(adjacency.get(source, ()))]
    while stack:
        for neighbour in stack[-1]:
            if neighbour not in visited:
                visited.add(neighbour)
                order.append(neighbour)
                stack.append(iter(adjacency.get(neighbour, ())))
                break
        else:
            stack.pop()
    return order


def articulation_points(
    adjacency: Mapping[int, Iterable[int]], vertex_count: int
) -> list[int]:
    """Vertices ``0 .. vertex_count-1`` whose removal disconnects the graph.

    Uses Tarjan's discovery/low-link method; the result is in ascending order.
    """
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    discovered = [-1] * vertex_count
    low = [-1] * vertex_count
    parent = [-1] * vertex_count
    is_point = [False] * vertex_count
    clock = count()

    def visit(u: int) -> None:
        discovered[u] = low[u] = next(clock)
        children = 0
        for v in adjacency.get(u, ()):
            if discovered[v] == -1:
                children += 1
                parent[v] = u
                visit(v)
                low[u] = min(low[u], low[v])
                if parent[u] == -1 and children > 1:
                    is_point[u] = True
                if parent[u] != -1 and low[v] >= discovered[u]:
                    is_point[u] = True
            elif v != parent[u]:
                low[u] = min(low[u], discovered[v])

    for vertex in range(vertex_count):
        if discovered[vertex] == -1:
            visit(vertex)

    return [vertex for vertex, flagged in enumerate(is_point) if flagged]


class Coloring(NamedTuple):
    """Number of colours used and the colour given to each vertex."""

    chromatic_number: int
    colors: list[int]


def greedy_coloring(vertex_count: int, edges: Iterable[tuple[int, int]]) -> Coloring:
    """Colour vertices in index order with the smallest colour no neighbour has."""
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    if vertex_count == 0:
        return Coloring(0, [])

    neighbours: list[list[int]] = [[] for _ in range(vertex_count)]
    for x, y in edges:
        if not (0 <= x < vertex_count and 0 <= y < vertex_count):
            raise ValueError(f"edge ({x}, {y}) is outside the graph")
        neighbours[x].append(y)
        neighbours[y].append(x)

    colors = [-1] * vertex_count
    colors[0] = 0
    for vertex in range(1, vertex_count):
        taken = {colors[other] for other in neighbours[vertex] if colors[other] != -1}
        colors[vertex] = next(color for color in count() if color not in taken)

    return Coloring(max(colors) + 1, colors)