import numpy as np
import pytest
from scipy.sparse.csgraph import shortest_path

from separation_graph import (
    IndexSpaceMismatchError,
    SeparationGraph,
    bfs_levels,
    build_adjacency,
    find_distance,
)

# neighbor lists taken as given: node 1 loops onto itself, 2 and 3 are linked
LISTS = [[], [1], [3], [2]]


def test_self_connection_is_zero() -> None:
    assert find_distance(LISTS, 1, 1) == 0
    assert find_distance(LISTS, 0, 0) == 0


def test_one_degree() -> None:
    assert find_distance(LISTS, 2, 3) == 1


def test_no_connection() -> None:
    assert find_distance(LISTS, 0, 1) is None


def test_path_distances(path_adjacency) -> None:
    assert find_distance(path_adjacency, 1, 3) == 2
    assert find_distance(path_adjacency, 3, 1) == 2
    assert find_distance(path_adjacency, 0, 3) is None


def test_out_of_range_node(path_adjacency) -> None:
    with pytest.raises(IndexError):
        find_distance(path_adjacency, 0, 4)


def test_bfs_levels(path_adjacency) -> None:
    assert bfs_levels(path_adjacency, 1).tolist() == [-1, 0, 1, 2]


def test_matches_scipy_shortest_path(random_edges) -> None:
    n_nodes, nodes, edges = random_edges
    adjacency = build_adjacency(n_nodes, nodes, edges)
    expected = shortest_path(adjacency.to_csr(), directed=False, unweighted=True)

    for start in range(n_nodes):
        levels = bfs_levels(adjacency, start)
        for end in range(n_nodes):
            distance = find_distance(adjacency, start, end)
            if np.isinf(expected[start, end]):
                assert distance is None
                assert levels[end] == -1
            else:
                assert distance == int(expected[start, end])
                assert levels[end] == distance


def test_graph_from_raw_columns(raw_columns) -> None:
    graph = SeparationGraph.from_columns(*raw_columns)
    assert graph.n_nodes == 5
    assert graph.n_edges == 4
    assert graph.index_space.tolist() == [3, 5, 10, 42, 878]

    # 3 - 10 - 878 - 42, and 5 only loops onto itself
    assert graph.find_distance_between_ids(3, 42) == 3
    assert graph.find_distance_between_ids(5, 3) is None
    assert graph.find_distance(2, 4) == 1

    assert graph.original_id(4) == 878
    assert graph.compact_index(42) == 3
    assert graph.get_degree(1) == 2
    assert graph.get_neighbors(2) == [4, 0]

    with pytest.raises(IndexSpaceMismatchError):
        graph.compact_index(7)


def test_compute_components(raw_columns) -> None:
    graph = SeparationGraph.from_columns(*raw_columns)
    labels = graph.compute_components()
    assert graph.n_components == 2
    assert sorted(graph.component_sizes.tolist()) == [1, 4]
    assert labels[0] == labels[2] == labels[3] == labels[4]
    assert labels[1] != labels[0]


def test_graph_rejects_mismatched_index_space(path_adjacency) -> None:
    with pytest.raises(ValueError):
        SeparationGraph(path_adjacency, index_space=[1, 2, 3])


def test_graph_str(path_adjacency) -> None:
    assert str(SeparationGraph(path_adjacency)) == "SeparationGraph with 4 nodes, 2 edges"
