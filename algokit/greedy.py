"""Greedy algorithms: activity selection, fractional knapsack, job sequencing."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass


def max_activities(intervals: Iterable[tuple[int, int]]) -> int:
    """Largest number of non-overlapping (start, end) activities.

    An activity may start at the moment the previous one ends.
    """
    ordered = sorted(intervals, key=lambda interval: interval[1])
    if not ordered:
        return 0
    count = 1
    finish = ordered[0][1]
    for start, end in ordered[1:]:
        if start >= finish:
            finish = end
            count += 1
    return count


@dataclass(frozen=True)
class Item:
    """An item that may be taken whole or in part."""

    profit: float
    weight: float

    def __post_init__(self) -> None:
        if self.weight <= 0:
            raise ValueError("item weight must be positive")

    @property
    def ratio(self) -> float:
        return self.profit / self.weight


def fractional_knapsack(items: Iterable[Item], capacity: float) -> float:
    """Greatest profit when items may be split, best ratio first."""
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    remaining = float(capacity)
    total = 0.0
    for item in sorted(items, key=lambda it: it.ratio, reverse=True):
        if item.weight <= remaining:
            total += item.profit
            remaining -= item.weight
        elif remaining != 0:
            total += remaining / item.weight * item.profit
            remaining = 0.0
    return total


@dataclass(frozen=True)
class Job:
    """A unit-time job with a profit and a deadline in time slots."""

    name: str
    profit: int
    deadline: int


def job_sequencing(jobs: Sequence[Job]) -> tuple[list[Job], int]:
    """Schedule jobs for the most profit, each in the latest free slot.

    Returns the scheduled jobs in slot order and their total profit.
    """
    slots: list[Job | None] = [None] * len(jobs)
    total = 0
    for job in sorted(jobs, key=lambda j: j.profit, reverse=True):
        for slot in range(min(len(jobs), job.deadline) - 1, -1, -1):
            if slots[slot] is None:
                slots[slot] = job
                total += job.profit
                break
    return [job for job in slots if job is not None], total