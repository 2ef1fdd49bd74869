import numpy as np
import pytest

from dijkstrax import ConfigError, Graph, GraphFormatError, VertexRangeError


def test_add_edge_inserts_both_half_edges():
    g = Graph(3)
    g.add_edge(1, 3, 4)
    assert g.adj == ([(2, 4)], [], [(0, 4)])
    assert list(g.neighbors(1)) == [(3, 4)]
    assert list(g.neighbors(3)) == [(1, 4)]
    assert g.edge_count == 1


def test_every_edge_appears_in_both_endpoint_rows(demo_graph):
    for u, v, w in demo_graph.edges():
        assert (v, w) in list(demo_graph.neighbors(u))
        assert (u, w) in list(demo_graph.neighbors(v))
    assert sum(len(row) for row in demo_graph.adj) == 2 * demo_graph.edge_count


def test_parallel_edges_and_self_loops_are_kept():
    g = Graph(2)
    g.add_edge(1, 2, 5)
    g.add_edge(1, 2, 3)
    g.add_edge(2, 2, 1)
    assert g.degree(1) == 2
    assert g.degree(2) == 4
    assert list(g.edges()) == [(1, 2, 5), (1, 2, 3), (2, 2, 1)]


@pytest.mark.parametrize("u, v", [(0, 1), (1, 0), (4, 1), (1, 4), (-1, 2)])
def test_out_of_range_vertex_is_rejected(u, v):
    g = Graph(3)
    with pytest.raises(VertexRangeError) as info:
        g.add_edge(u, v, 1)
    bad = u if not 1 <= u <= 3 else v
    assert info.value.vertex == bad
    assert str(bad) in str(info.value)
    assert g.edge_count == 0
    assert all(row == [] for row in g.adj)


def test_out_of_range_is_an_index_error():
    with pytest.raises(IndexError):
        Graph(1).add_edge(1, 2, 0)


def test_from_vertex_message_names_endpoint():
    with pytest.raises(VertexRangeError, match="Cannot add edge from vertex: 0"):
        Graph(2).add_edge(0, 1, 1)
    with pytest.raises(VertexRangeError, match="Cannot add edge to vertex: 3"):
        Graph(2).add_edge(1, 3, 1)


@pytest.mark.parametrize("w", [-1, 1.5, "3", True, None])
def test_invalid_weight_is_rejected(w):
    g = Graph(2)
    with pytest.raises(GraphFormatError):
        g.add_edge(1, 2, w)


def test_numpy_integer_weight_is_accepted():
    g = Graph(2)
    g.add_edge(np.int64(1), 2, np.int32(8))
    assert g.adj[0] == [(1, 8)]
    assert type(g.adj[0][0][1]) is int


def test_zero_vertex_graph_is_allowed():
    g = Graph(0)
    assert g.adj == ()
    with pytest.raises(VertexRangeError):
        g.add_edge(1, 1, 0)


def test_negative_vertex_count_is_a_config_error():
    with pytest.raises(ConfigError):
        Graph(-1)


def test_capacity_is_fixed():
    g = Graph(2)
    with pytest.raises(AttributeError):
        g.vertex_count = 5  # type: ignore[misc]
