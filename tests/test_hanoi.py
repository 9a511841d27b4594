import pytest

from algokit.hanoi import tower_of_hanoi


def test_no_disks_no_moves():
    assert list(tower_of_hanoi(0)) == []


def test_single_disk():
    assert list(tower_of_hanoi(1)) == [(1, "A", "C")]


def test_two_disks():
    assert list(tower_of_hanoi(2)) == [(1, "A", "B"), (2, "A", "C"), (1, "B", "C")]


@pytest.mark.parametrize("n", range(1, 9))
def test_move_count(n):
    assert sum(1 for _ in tower_of_hanoi(n)) == 2**n - 1


@pytest.mark.parametrize("n", [1, 3, 6])
def test_moves_are_legal_and_finish_on_target(n):
    pegs = {"S": list(range(n, 0, -1)), "H": [], "T": []}
    for disk, src, dst in tower_of_hanoi(n, "S", "H", "T"):
        assert pegs[src][-1] == disk
        pegs[src].pop()
        assert not pegs[dst] or pegs[dst][-1] > disk
        pegs[dst].append(disk)
    assert pegs == {"S": [], "H": [], "T": list(range(n, 0, -1))}


def test_negative_disks_rejected():
    with pytest.raises(ValueError):
        list(tower_of_hanoi(-1))