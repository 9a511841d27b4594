import random

import pytest

from algokit.heaps import MaxHeap, MinHeap, build_max_heap, heap_sort, heapify

_rng = random.Random(99)


def is_max_heap(items):
    return all(items[(i - 1) // 2] >= items[i] for i in range(1, len(items)))


def is_min_heap(items):
    return all(items[(i - 1) // 2] <= items[i] for i in range(1, len(items)))


def test_heapify_moves_largest_child_up():
    values = [1, 5, 3]
    heapify(values, 3, 0)
    assert values[0] == 5
    assert is_max_heap(values)


def test_heapify_respects_size():
    values = [1, 2, 9]
    heapify(values, 2, 0)
    assert values[2] == 9
    assert values[0] == 2


def test_heapify_rejects_oversized_heap():
    with pytest.raises(ValueError):
        heapify([1, 2], 3, 0)


@pytest.mark.parametrize("size", [0, 1, 2, 7, 64])
def test_build_max_heap_is_heap_and_permutation(size):
    sample = [_rng.randint(-100, 100) for _ in range(size)]
    result = build_max_heap(sample)
    assert is_max_heap(result)
    assert sorted(result) == sorted(sample)


@pytest.mark.parametrize("size", [0, 1, 5, 50, 101])
def test_heap_sort_agrees_with_builtin(size):
    sample = [_rng.randint(-100, 100) for _ in range(size)]
    assert heap_sort(sample) == sorted(sample)


def test_max_heap_drains_in_descending_order():
    sample = [_rng.randint(0, 500) for _ in range(40)]
    heap = MaxHeap(sample)
    drained = [heap.delete_root() for _ in range(len(sample))]
    assert drained == sorted(sample, reverse=True)
    assert len(heap) == 0


def test_max_heap_insert_keeps_property():
    heap = MaxHeap([3, 1, 2])
    for value in (10, 0, 7, 7):
        heap.insert(value)
        assert is_max_heap(list(heap))
    assert heap.peek() == 10
    assert len(heap) == 7


def test_max_heap_empty_errors():
    heap = MaxHeap()
    with pytest.raises(IndexError):
        heap.delete_root()
    with pytest.raises(IndexError):
        heap.peek()


def test_min_heap_insert_keeps_property():
    heap = MinHeap()
    sample = [_rng.randint(0, 100) for _ in range(30)]
    for value in sample:
        heap.insert(value)
        assert is_min_heap(list(heap))
    assert heap.peek() == min(sample)


def test_min_heap_delete_arbitrary_values():
    sample = _rng.sample(range(200), 40)
    heap = MinHeap(sample)
    remaining = list(sample)
    for value in sample[::3]:
        heap.delete(value)
        remaining.remove(value)
        assert is_min_heap(list(heap))
        assert sorted(heap) == sorted(remaining)


def test_min_heap_delete_root_repeatedly_yields_ascending():
    sample = [_rng.randint(0, 50) for _ in range(25)]
    heap = MinHeap(sample)
    drained = []
    while len(heap):
        smallest = heap.peek()
        heap.delete(smallest)
        drained.append(smallest)
    assert drained == sorted(sample)


def test_min_heap_delete_missing_raises():
    heap = MinHeap([1, 2, 3])
    with pytest.raises(ValueError):
        heap.delete(4)
    assert sorted(heap) == [1, 2, 3]