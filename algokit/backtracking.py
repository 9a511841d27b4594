"""Backtracking searches: Hamiltonian cycles, N queens and maze paths."""

from __future__ import annotations

from collections.abc import Iterator, Sequence


def hamiltonian_cycles(
    adjacency: Sequence[Sequence[int]], start: int = 0
) -> Iterator[list[int]]:
    """Yield every Hamiltonian cycle that begins and ends at ``start``.

    ``adjacency`` is a square matrix in which a truthy entry marks an edge.
    Each cycle is a list of vertex indices whose first and last entries are
    ``start``. Neighbours are tried in ascending index order.
    """
    size = len(adjacency)
    if not 0 <= start < size:
        raise ValueError(f"start vertex {start} is outside the graph")

    visited = [False] * size
    cycle = [start]

    def solve(vertex: int) -> Iterator[list[int]]:
        if vertex == start and len(cycle) == size + 1:
            yield list(cycle)
            return
        for neighbour, linked in enumerate(adjacency[vertex]):
            if linked and not visited[neighbour]:
                visited[neighbour] = True
                cycle.append(neighbour)
                yield from solve(neighbour)
                visited[neighbour] = False
                cycle.pop()

    yield from solve(start)


def n_queens(n: int) -> list[list[int]] | None:
    """Place ``n`` non-attacking queens column by column.

    Returns the first board found as rows of 0/1 values, or ``None`` when
    no placement exists.
    """
    if n < 0:
        raise ValueError("board size must not be negative")

    used_rows: set[int] = set()
    left_diagonals: set[int] = set()
    right_diagonals: set[int] = set()
    placement: list[int] = []

    def place(col: int) -> bool:
        if col >= n:
            return True
        for row in range(n):
            if (
                row in used_rows
                or row - col in left_diagonals
                or row + col in right_diagonals
            ):
                continue
            used_rows.add(row)
            left_diagonals.add(row - col)
            right_diagonals.add(row + col)
            placement.append(row)
            if place(col + 1):
                return True
            placement.pop()
            used_rows.discard(row)
            left_diagonals.discard(row - col)
            right_diagonals.discard(row + col)
        return False

    if not place(0):
        return None
    return [[int(queen_row == row) for queen_row in placement] for row in range(n)]


def maze_paths(maze: Sequence[str], blocked: str = "X") -> Iterator[list[list[int]]]:
    """Yield every right/down path from the top-left to the bottom-right cell.

    Each path is a grid of 0/1 values marking the cells it passes through.
    Cells equal to ``blocked`` cannot be entered, except the destination,
    which is accepted as soon as it is reached.
    """
    if not maze or not maze[0]:
        raise ValueError("maze must have at least one cell")

    last_row = len(maze) - 1
    last_col = len(maze[0]) - 1
    path = [[0] * (last_col + 1) for _ in maze]

    def walk(row: int, col: int) -> Iterator[list[list[int]]]:
        if row == last_row and col == last_col:
            path[row][col] = 1
            yield [list(line) for line in path]
            return
        if row > last_row or col > last_col:
            return
        if maze[row][col] == blocked:
            return
        path[row][col] = 1
        yield from walk(row, col + 1)
        yield from walk(row + 1, col)
        path[row][col] = 0

    yield from walk(0, 0)