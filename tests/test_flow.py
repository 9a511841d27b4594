import pytest

from algokit.flow import FlowResult, ford_fulkerson


def _network():
    graph = [[0] * 6 for _ in range(6)]
    for src, dest, cap in [
        (0, 1, 4),
        (0, 3, 3),
        (1, 2, 4),
        (2, 3, 3),
        (2, 5, 2),
        (3, 4, 6),
        (4, 5, 6),
    ]:
        graph[src][dest] = cap
    return graph


def test_source_example_flow():
    result = ford_fulkerson(_network(), 0, 5)
    assert result.max_flow == 7


def test_paths_start_at_source_and_end_at_sink():
    result = ford_fulkerson(_network(), 0, 5)
    assert result.augmenting_paths
    for path in result.augmenting_paths:
        assert path[0] == 0
        assert path[-1] == 5
        assert len(set(path)) == len(path)


def test_flow_bounded_by_cuts():
    graph = _network()
    result = ford_fulkerson(graph, 0, 5)
    assert result.max_flow <= sum(graph[0])
    assert result.max_flow <= sum(row[5] for row in graph)


def test_reversed_network_has_same_flow():
    graph = _network()
    transposed = [list(column) for column in zip(*graph)]
    assert ford_fulkerson(transposed, 5, 0).max_flow == ford_fulkerson(graph, 0, 5).max_flow


def test_input_not_modified():
    graph = _network()
    snapshot = [list(row) for row in graph]
    ford_fulkerson(graph, 0, 5)
    assert graph == snapshot


def test_single_edge():
    result = ford_fulkerson([[0, 9], [0, 0]], 0, 1)
    assert result == FlowResult(9, [[0, 1]])


def test_no_path_gives_zero():
    result = ford_fulkerson([[0, 0], [5, 0]], 0, 1)
    assert result.max_flow == 0
    assert result.augmenting_paths == []


def test_source_equal_to_sink_gives_zero():
    assert ford_fulkerson(_network(), 2, 2).max_flow == 0


def test_vertex_out_of_range_raises():
    with pytest.raises(ValueError):
        ford_fulkerson(_network(), 0, 6)


def test_negative_capacity_raises():
    with pytest.raises(ValueError):
        ford_fulkerson([[0, -1], [0, 0]], 0, 1)


def test_non_square_raises():
    with pytest.raises(ValueError):
        ford_fulkerson([[0, 1, 2], [0, 0]], 0, 1)