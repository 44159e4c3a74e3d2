import math
import random

import pytest

from simplegraph.graph import SimpleGraph
from simplegraph.paths import INFINITY, BellmanFord, NegativeCycleError, PathInfo


def chain(dense=False):
    graph = SimpleGraph(3, 0, True, dense)
    graph.insert_edge(0, 1, 2)
    graph.insert_edge(1, 2, 3)
    graph.insert_edge(0, 2, 10)
    return graph


def negative_cycle_graph():
    graph = SimpleGraph(3, 0, True, False)
    graph.insert_edge(0, 1, 1)
    graph.insert_edge(1, 0, -3)
    return graph


@pytest.mark.parametrize("dense", [False, True])
def test_shortest_path_prefers_cheaper_route(dense):
    finder = BellmanFord(chain(dense))
    assert finder.distance(0, 2) == 5
    assert finder.path(0, 2) == [0, 1, 2]
    assert finder.distance(0, 1) == 2


@pytest.mark.parametrize("dense", [False, True])
def test_self_distance_is_zero(dense):
    finder = BellmanFord(chain(dense))
    for i in range(3):
        assert finder.distance(i, i) == 0
        assert finder.path(i, i) == [i]


def test_unreachable_pairs():
    finder = BellmanFord(chain())
    assert finder.distance(2, 0) == INFINITY
    assert math.isinf(finder.distance(1, 0))
    assert finder.path(2, 0) == []


def test_negative_cycle_detected():
    finder = BellmanFord(negative_cycle_graph())
    assert finder.contains_negative_cycle()
    with pytest.raises(NegativeCycleError):
        finder.distance(0, 1)
    with pytest.raises(NegativeCycleError):
        finder.path(0, 1)
    with pytest.raises(NegativeCycleError):
        finder.all_paths()
    with pytest.raises(NegativeCycleError, match="negative cycle"):
        finder.result()


def test_undirected_negative_edge_is_a_cycle():
    graph = SimpleGraph(2, 0, False, False)
    graph.insert_edge(0, 1, -1)
    assert BellmanFord(graph).contains_negative_cycle()


@pytest.mark.parametrize("pair", [(-1, 0), (0, 3), (3, 3), (0, -2)])
def test_invalid_indices(pair):
    finder = BellmanFord(chain())
    with pytest.raises(IndexError):
        finder.distance(*pair)
    with pytest.raises(IndexError):
        finder.path(*pair)


def test_all_paths_matches_queries():
    finder = BellmanFord(chain())
    table = finder.all_paths()
    assert len(table) == 3
    for i, row in enumerate(table):
        assert len(row) == 3
        for j, info in enumerate(row):
            assert info == PathInfo(finder.path(i, j), finder.distance(i, j))


def test_result_matches_distances():
    finder = BellmanFord(chain())
    matrix = finder.result()
    assert [[finder.distance(i, j) for j in range(3)] for i in range(3)] == matrix
    matrix[0][0] = 99
    assert finder.distance(0, 0) == 0


def test_set_graph_clears_negative_cycle():
    finder = BellmanFord(negative_cycle_graph())
    finder.set_graph(chain())
    assert not finder.contains_negative_cycle()
    assert finder.path(0, 2) == [0, 1, 2]


def test_restart_sees_new_edges():
    graph = chain()
    finder = BellmanFord(graph)
    graph.insert_edge(2, 0, 1)
    finder.restart()
    assert finder.path(2, 1) == [2, 0, 1]
    assert finder.distance(2, 1) == 1 + 2


def test_path_weight_sums_to_distance():
    graph = chain()
    finder = BellmanFord(graph)
    for i in range(3):
        for j in range(3):
            path = finder.path(i, j)
            if len(path) > 1:
                total = sum(graph.get_edge(a, b).weight for a, b in zip(path, path[1:]))
                assert total == finder.distance(i, j)


@pytest.mark.parametrize("seed", [1, 2, 3, 4])
def test_unit_weights_distance_is_hop_count(seed):
    graph = SimpleGraph(6, 10, True, False, random.Random(seed))
    finder = BellmanFord(graph)
    for i in range(6):
        for j in range(6):
            distance = finder.distance(i, j)
            path = finder.path(i, j)
            if distance != INFINITY:
                assert distance == len(path) - 1
                assert path[0] == i and path[-1] == j


@pytest.mark.parametrize("seed", [5, 6])
def test_list_and_matrix_agree(seed):
    graph = SimpleGraph(5, 7, True, False, random.Random(seed))
    listed = BellmanFord(graph).result()
    graph.to_matrix()
    assert BellmanFord(graph).result() == listed


def test_undirected_distances_are_symmetric():
    graph = SimpleGraph(4, 0, False, False)
    graph.insert_edge(0, 1, 4)
    graph.insert_edge(1, 2, 1)
    graph.insert_edge(2, 3, 2)
    finder = BellmanFord(graph)
    for i in range(4):
        for j in range(4):
            assert finder.distance(i, j) == finder.distance(j, i)


def test_no_graph_has_no_vertices():
    finder = BellmanFord(None)
    assert finder.all_paths() == []
    with pytest.raises(IndexError):
        finder.distance(0, 0)