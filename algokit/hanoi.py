"""Tower of Hanoi move generation."""

from __future__ import annotations

from collections.abc import Iterator


def tower_of_hanoi(
    n: int, source: str = "A", helper: str = "B", target: str = "C"
) -> Iterator[tuple[int, str, str]]:
    """Yield ``(disk, from_peg, to_peg)`` moves that carry ``n`` disks to ``target``.

    Disk 1 is the smallest.
    """
    if n < 0:
        raise ValueError("number of disks must not be negative")
    if n == 0:
        return
    yield from tower_of_hanoi(n - 1, source, target, helper)
    yield (n, source, target)
    yield from tower_of_hanoi(n - 1, helper, source, target)