"""Disjoint-set union with union by rank and path compression."""

from __future__ import annotations

from collections.abc import Iterable


class UnionFind:
    """A partition of the elements ``0 .. n-1`` into disjoint sets."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("number of elements must not be negative")
        self._parent = list(range(n))
        self._rank = [0] * n
        self._size = [1] * n
        self._sets = n

    def __len__(self) -> int:
        return len(self._parent)

    @property
    def set_count(self) -> int:
        """Number of disjoint sets currently maintained."""
        return self._sets

    def _check(self, i: int) -> None:
        if not 0 <= i < len(self._parent):
            raise IndexError(f"element {i} is outside the structure")

    def find(self, i: int) -> int:
        """Representative of the set holding ``i``, compressing the path to it."""
        self._check(i)
        root = i
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[i] != root:
            self._parent[i], i = root, self._parent[i]
        return root

    def same_set(self, i: int, j: int) -> bool:
        """Whether ``i`` and ``j`` belong to the same set."""
        return self.find(i) == self.find(j)

    def set_size(self, i: int) -> int:
        """Number of elements in the set holding ``i``."""
        return self._size[self.find(i)]

    def union(self, i: int, j: int) -> bool:
        """Merge the sets of ``i`` and ``j``; return False if already joined."""
        x, y = self.find(i), self.find(j)
        if x == y:
            return False
        if self._rank[x] > self._rank[y]:
            x, y = y, x
        self._parent[x] = y
        if self._rank[x] == self._rank[y]:
            self._rank[y] += 1
        self._size[y] += self._size[x]
        self._sets -= 1
        return True


def process_commands(n: int, commands: Iterable[tuple[str, int, int]]) -> list[bool]:
    """Run ``("union", x, y)`` commands and answer every other command as a query.

    Elements are numbered ``0 .. n``. Each query yields whether its two
    elements share a set, in the order the queries appear.
    """
    sets = UnionFind(n + 1)
    answers: list[bool] = []
    for operation, x, y in commands:
        if operation == "union":
            sets.union(x, y)
        else:
            answers.append(sets.same_set(x, y))
    return answers