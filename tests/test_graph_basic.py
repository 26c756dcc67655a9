import copy
import io
from typing import Any, cast

import pytest

from wgraph import Graph
from helpers import assert_mirrored, canonical_graph


@pytest.mark.parametrize("n", [0, 1, 5, 100])
def test_vertex_count(n):
    g = Graph(n)
    assert g.vertex_count() == n
    assert len(g) == n
    assert g.edge_count() == 0


def test_add_edge_mirrors_both_ends():
    g = Graph(3)
    g.add_edge(0, 1, 10)
    assert g.neighbors(0) == (1,)
    assert g.weights(0) == (10,)
    assert g.neighbors(1) == (0,)
    assert g.weights(1) == (10,)
    assert g.neighbor_count(2) == 0
    assert g.has_edge(0, 1) and g.has_edge(1, 0)


def test_default_weight_is_one():
    g = Graph(2)
    g.add_edge(0, 1)
    assert g.edge_weight(0, 1) == 1
    assert g.edge_weight(1, 0) == 1


def test_duplicate_add_is_noop_and_keeps_weight():
    g = Graph(3)
    g.add_edge(1, 2, 5)
    g.add_edge(1, 2, 5)
    g.add_edge(2, 1, 99)
    assert g.neighbor_count(1) == 1
    assert g.neighbor_count(2) == 1
    assert g.edge_weight(1, 2) == 5
    assert g.edge_weight(2, 1) == 5
    assert g.edges() == ((1, 2, 5),)


def test_size_scenario():
    g = Graph(3)
    g.add_edge(0, 1, 10)
    g.add_edge(1, 2, 5)
    assert [g.get_size(v) for v in range(3)] == [1, 2, 1]
    g.remove_edge(1, 2)
    assert g.get_size(1) == 1
    assert g.get_size(2) == 0
    assert g.get_size(0) == 1


def test_remove_restores_counts():
    g = Graph(4)
    g.add_edge(0, 1, 3)
    before = [g.neighbor_count(v) for v in range(4)]
    g.add_edge(1, 3, 7)
    g.remove_edge(3, 1)
    assert [g.neighbor_count(v) for v in range(4)] == before
    assert not g.has_edge(1, 3)


def test_remove_preserves_neighbor_order():
    g = Graph(5)
    for v, w in [(1, 10), (2, 20), (3, 30), (4, 40)]:
        g.add_edge(0, v, w)
    g.remove_edge(0, 2)
    assert g.neighbors(0) == (1, 3, 4)
    assert g.weights(0) == (10, 30, 40)


def test_adjacency_keeps_insertion_order():
    g = Graph(4)
    g.add_edge(0, 3)
    g.add_edge(0, 1)
    g.add_edge(2, 0)
    assert g.neighbors(0) == (3, 1, 2)


def test_getter_immutability():
    g = Graph(2)
    g.add_edge(0, 1)
    adj = g.neighbors(0)
    with pytest.raises((AttributeError, TypeError)):
        cast(Any, adj).append(5)
    assert g.neighbors(0) == (1,)


def test_edges_listed_once_from_lower_endpoint():
    g = canonical_graph()
    assert g.edge_count() == 7
    for u, v, _ in g.edges():
        assert u < v
    assert g.total_weight() == 18
    assert_mirrored(g)


def test_copy_is_independent():
    g = Graph(3)
    g.add_edge(0, 1, 10)
    for g2 in (g.copy(), copy.copy(g), copy.deepcopy(g)):
        assert g2 == g
        g2.add_edge(1, 2, 5)
        g2.remove_edge(0, 1)
        assert g.neighbor_count(1) == 1
        assert not g.has_edge(1, 2)
        assert g.edge_weight(0, 1) == 10


def test_contains_and_equality():
    g = Graph(3)
    assert 0 in g and 2 in g
    assert 3 not in g and -1 not in g and "0" not in g
    h = Graph(3)
    assert g == h
    g.add_edge(0, 1)
    assert g != h
    h.add_edge(1, 0)
    # same edge, different insertion side -> same adjacency
    assert g == h


def test_print_graph_format():
    g = Graph(3)
    g.add_edge(0, 1, 10)
    g.add_edge(0, 2, 4)
    buf = io.StringIO()
    g.print_graph(file=buf)
    assert buf.getvalue().splitlines() == [
        "Vertex 0: {1 (10),  2 (4)}",
        "Vertex 1: {0 (10)}",
        "Vertex 2: {0 (4)}",
    ]
    assert str(g) == buf.getvalue().rstrip("\n")


def test_print_graph_defaults_to_stdout(capsys):
    Graph(1).print_graph()
    assert capsys.readouterr().out == "Vertex 0: {}\n"
