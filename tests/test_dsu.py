import pytest

from algokit.dsu import UnionFind, process_commands


def test_initially_all_singletons():
    sets = UnionFind(5)
    assert sets.set_count == 5
    assert len(sets) == 5
    assert all(sets.find(i) == i for i in range(5))
    assert all(sets.set_size(i) == 1 for i in range(5))


def test_union_merges_and_counts():
    sets = UnionFind(6)
    assert sets.union(0, 1) is True
    assert sets.union(2, 3) is True
    assert sets.union(1, 3) is True
    assert sets.set_count == 3
    assert sets.same_set(0, 2)
    assert not sets.same_set(0, 4)
    assert sets.set_size(3) == 4
    assert sets.set_size(5) == 1


def test_union_of_joined_elements_is_noop():
    sets = UnionFind(3)
    sets.union(0, 1)
    assert sets.union(1, 0) is False
    assert sets.set_count == 2
    assert sets.set_size(0) == 2


def test_sizes_sum_to_element_count():
    sets = UnionFind(10)
    for a, b in [(0, 1), (2, 3), (4, 5), (1, 5), (7, 9)]:
        sets.union(a, b)
    roots = {sets.find(i) for i in range(10)}
    assert len(roots) == sets.set_count
    assert sum(sets.set_size(r) for r in roots) == 10


def test_out_of_range_raises():
    sets = UnionFind(3)
    with pytest.raises(IndexError):
        sets.find(3)
    with pytest.raises(IndexError):
        sets.find(-1)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        UnionFind(-1)


def test_process_commands():
    commands = [
        ("union", 1, 2),
        ("find", 1, 2),
        ("find", 1, 3),
        ("union", 3, 2),
        ("find", 1, 3),
    ]
    assert process_commands(3, commands) == [True, False, True]