"""Maximum flow by the Ford-Fulkerson method with breadth-first augmenting paths."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class FlowResult:
    """The maximum flow value and the augmenting paths used to reach it."""

    max_flow: Any
    augmenting_paths: list[list[int]] = field(default_factory=list)


def _augmenting_path(
    residual: list[list[Any]], source: int, sink: int
) -> tuple[Any, dict[int, int | None]]:
    """Find the first BFS path to ``sink``; return its bottleneck and parents."""
    parent: dict[int, int | None] = {source: None}
    pending: deque[tuple[int, Any]] = deque([(source, math.inf)])
    while pending:
        node, capacity = pending.popleft()
        for dest, available in enumerate(residual[node]):
            if dest != node and dest not in parent and available > 0:
                parent[dest] = node
                bottleneck = min(capacity, available)
                if dest == sink:
                    return bottleneck, parent
                pending.append((dest, bottleneck))
    return 0, parent


def ford_fulkerson(graph: Sequence[Sequence[Any]], source: int, sink: int) -> FlowResult:
    """Maximum flow from ``source`` to ``sink`` in a capacity matrix.

    The input matrix is left unchanged.
    """
    size = len(graph)
    if any(len(row) != size for row in graph):
        raise ValueError("capacity matrix must be square")
    for vertex in (source, sink):
        if not 0 <= vertex < size:
            raise ValueError(f"vertex {vertex} is outside the graph")
    if any(capacity < 0 for row in graph for capacity in row):
        raise ValueError("capacities must not be negative")

    residual = [list(row) for row in graph]
    max_flow: Any = 0
    paths: list[list[int]] = []

    while True:
        bottleneck, parent = _augmenting_path(residual, source, sink)
        if not bottleneck:
            break
        max_flow += bottleneck
        path = [sink]
        node = sink
        while node != source:
            previous = parent[node]
            assert previous is not None
            residual[node][previous] += bottleneck
            residual[previous][node] -= bottleneck
            path.append(previous)
            node = previous
        path.reverse()
        paths.append(path)

    return FlowResult(max_flow, paths)