import random

import pytest

from simplegraph.graph import SimpleGraph


def _edge_set(graph):
    return {(e.v1.index, e.v2.index, e.weight) for e in graph.edges()}


def _directed_triangle(dense=False):
    graph = SimpleGraph(3, directed=True, dense=dense)
    graph.insert_edge(0, 1, 5)
    graph.insert_edge(1, 2, 7)
    graph.insert_edge(0, 2, 9)
    return graph


def test_empty_graph_defaults():
    graph = SimpleGraph()
    assert (graph.vertex_count, graph.edge_count, graph.directed, graph.dense) == (
        0,
        0,
        False,
        False,
    )
    assert graph.render() == "LIST\n"


def test_fresh_vertices_are_named_and_numbered():
    graph = SimpleGraph(3)
    vertices = list(graph.vertices())
    assert [v.name for v in vertices] == ["0", "1", "2"]
    assert [v.data for v in vertices] == [10, 11, 12]
    assert [v.index for v in vertices] == [0, 1, 2]


@pytest.mark.parametrize("dense, header", [(False, "LIST"), (True, "MATRIX")])
def test_form_follows_dense_flag(dense, header):
    graph = SimpleGraph(2, dense=dense)
    assert graph.render().splitlines()[0] == header
    assert graph.dense is dense


@pytest.mark.parametrize("dense", [False, True])
def test_random_directed_fill_is_capped(dense):
    graph = SimpleGraph(4, 100, directed=True, dense=dense, rng=random.Random(7))
    edges = list(graph.edges())
    assert graph.edge_count == 4 * 3
    assert len(edges) == graph.edge_count
    assert all(e.v1.index != e.v2.index for e in edges)


@pytest.mark.parametrize("dense", [False, True])
def test_random_undirected_fill_stores_both_directions(dense):
    graph = SimpleGraph(5, 4, dense=dense, rng=random.Random(3))
    pairs = {(e.v1.index, e.v2.index) for e in graph.edges()}
    assert graph.edge_count == 4
    assert len(pairs) == 2 * graph.edge_count
    assert all((b, a) in pairs for a, b in pairs)


def test_random_fill_is_reproducible_with_seed():
    first = SimpleGraph(6, 7, directed=True, rng=random.Random(11))
    second = SimpleGraph(6, 7, directed=True, rng=random.Random(11))
    assert _edge_set(first) == _edge_set(second)


@pytest.mark.parametrize("dense", [False, True])
def test_insert_edge_returns_stored_edge(dense):
    graph = SimpleGraph(3, directed=True, dense=dense)
    edge = graph.insert_edge(0, 1, 5)
    assert edge.weight == 5
    assert graph.get_edge(0, 1) is edge
    assert graph.get_edge(1, 0) is None
    assert graph.edge_count == 1


def test_list_form_rejects_duplicate_edge():
    graph = SimpleGraph(3, directed=True)
    graph.insert_edge(0, 1, 5)
    assert graph.insert_edge(0, 1, 6) is None
    assert graph.edge_count == 1
    assert graph.get_edge(0, 1).weight == 5


@pytest.mark.parametrize("dense", [False, True])
def test_undirected_insert_adds_reverse(dense):
    graph = SimpleGraph(3, dense=dense)
    graph.insert_edge(0, 1, 4)
    assert graph.get_edge(1, 0).weight == 4
    assert graph.edge_count == 1


def test_insert_edge_out_of_range_is_refused():
    graph = SimpleGraph(2, directed=True)
    assert graph.insert_edge(0, 5) is None
    assert graph.edge_count == 0


@pytest.mark.parametrize("dense", [False, True])
def test_delete_edge(dense):
    graph = _directed_triangle(dense)
    edge = graph.get_edge(0, 1)
    assert graph.delete_edge(edge) is True
    assert graph.edge_count == 2
    assert graph.get_edge(0, 1) is None
    assert graph.delete_edge(edge) is False
    assert graph.edge_count == 2


@pytest.mark.parametrize("dense", [False, True])
def test_delete_vertex_directed_renumbers(dense):
    graph = _directed_triangle(dense)
    assert graph.delete_vertex(1) is True
    assert graph.vertex_count == 2
    assert graph.edge_count == 1
    assert [v.name for v in graph.vertices()] == ["0", "2"]
    assert [v.index for v in graph.vertices()] == [0, 1]
    assert _edge_set(graph) == {(0, 1, 9)}


@pytest.mark.parametrize("dense", [False, True])
def test_delete_vertex_undirected(dense):
    graph = SimpleGraph(3, dense=dense)
    graph.insert_edge(0, 1, 2)
    graph.insert_edge(1, 2, 3)
    assert graph.delete_vertex(0) is True
    assert graph.edge_count == 1
    assert _edge_set(graph) == {(0, 1, 3), (1, 0, 3)}


def test_delete_vertex_out_of_range():
    graph = _directed_triangle()
    assert graph.delete_vertex(7) is False
    assert graph.vertex_count == 3
    assert graph.edge_count == 3


@pytest.mark.parametrize("dense", [False, True])
def test_insert_vertex_then_connect(dense):
    graph = SimpleGraph(3, directed=True, dense=dense)
    vertex = graph.insert_vertex("x")
    assert vertex.index == 3
    assert [v.name for v in graph.vertices()][-1] == "x"
    assert graph.insert_edge(vertex, 0, 2) is not None
    assert graph.get_edge(3, 0).weight == 2
    assert graph.vertex_count == 4


def test_switch_forms_keeps_edges():
    graph = _directed_triangle()
    before = _edge_set(graph)
    graph.to_matrix()
    assert graph.dense is True
    assert graph.render().startswith("MATRIX")
    assert _edge_set(graph) == before
    graph.to_list()
    assert graph.dense is False
    assert _edge_set(graph) == before
    assert graph.edge_count == len(before)


def test_switch_forms_keeps_vertex_names_and_data():
    graph = SimpleGraph(3, directed=True)
    graph.insert_vertex("extra")
    names = [v.name for v in graph.vertices()]
    data = [v.data for v in graph.vertices()]
    graph.to_matrix()
    assert [v.name for v in graph.vertices()] == names
    assert [v.data for v in graph.vertices()] == data


def test_copy_is_independent():
    graph = _directed_triangle()
    clone = graph.copy()
    assert _edge_set(clone) == _edge_set(graph)
    clone.delete_edge(clone.get_edge(0, 1))
    clone.insert_vertex("new")
    assert graph.edge_count == 3
    assert graph.vertex_count == 3
    assert graph.get_edge(0, 1) is not None


def test_saturation():
    assert SimpleGraph(4).saturation() == 6
    full = SimpleGraph(3, directed=True)
    for i in range(3):
        for j in range(3):
            if i != j:
                full.insert_edge(i, j)
    assert full.saturation() == 1
    with pytest.raises(ZeroDivisionError):
        SimpleGraph(1, directed=True).saturation()


@pytest.mark.parametrize("dense", [False, True])
def test_adjacent_edges_leave_the_vertex(dense):
    graph = _directed_triangle(dense)
    adjacent = list(graph.adjacent_edges(0))
    assert all(e.v1.index == 0 for e in adjacent)
    assert {e.v2.index for e in adjacent} == {1, 2}


def test_matrix_get_edge_out_of_range_raises():
    graph = SimpleGraph(2, dense=True)
    with pytest.raises(IndexError):
        graph.get_edge(0, 5)