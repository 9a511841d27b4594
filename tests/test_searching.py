import pytest

from algokit.searching import (
    binary_search,
    count_occurrences,
    linear_search,
    lower_bound,
    upper_bound,
)

LINEAR = [10, 20, 40, 70, 100]
SORTED = [10, 20, 40, 40, 40, 70, 100, 130, 560]


@pytest.mark.parametrize("key", LINEAR)
def test_linear_search_finds_present_keys(key):
    index = linear_search(LINEAR, key)
    assert LINEAR[index] == key


def test_linear_search_returns_first_match():
    values = [5, 1, 5, 1]
    assert linear_search(values, 1) == values.index(1)


@pytest.mark.parametrize("key", [0, 15, 1000])
def test_linear_search_missing(key):
    assert linear_search(LINEAR, key) is None


@pytest.mark.parametrize("key", SORTED)
def test_binary_search_present(key):
    assert binary_search(SORTED, key) is True


@pytest.mark.parametrize("key", [0, 11, 41, 561])
def test_binary_search_absent(key):
    assert binary_search(SORTED, key) is False


def test_binary_search_empty():
    assert binary_search([], 1) is False


def test_bounds_of_source_example():
    assert lower_bound(SORTED, 40) == 2
    assert upper_bound(SORTED, 40) == 5
    assert count_occurrences(SORTED, 40) == 3


@pytest.mark.parametrize("key", [0, 10, 25, 40, 100, 600])
def test_bounds_partition_the_sequence(key):
    low = lower_bound(SORTED, key)
    high = upper_bound(SORTED, key)
    assert all(v < key for v in SORTED[:low])
    assert all(v == key for v in SORTED[low:high])
    assert all(v > key for v in SORTED[high:])


@pytest.mark.parametrize("key", [10, 40, 55, 560])
def test_count_matches_list_count(key):
    assert count_occurrences(SORTED, key) == SORTED.count(key)