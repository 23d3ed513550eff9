"""
Unit tests for the adjacency-list Graph.
"""

import numpy as np
import pytest

from sptree.exceptions import InputError
from sptree.graph import Edge, Graph


def test_create_empty_graph():
    g = Graph.create(4)

    assert g.order == 4
    assert g.size == 0
    assert all(list(g.adjacent(v)) == [] for v in range(4))


def test_order_zero_is_allowed():
    g = Graph.create(0)
    assert g.order == 0
    assert list(g.edges()) == []


@pytest.mark.parametrize("order", [-1, 2.5, "3", True])
def test_invalid_order_rejected(order):
    with pytest.raises(InputError):
        Graph(order)


def test_insert_edge_appends_to_both_endpoints():
    g = Graph(3)
    g.insert_edge(0, 2, 7)

    (e0,) = list(g.adjacent(0))
    (e2,) = list(g.adjacent(2))
    # the very same edge object is shared by both endpoints
    assert e0 is e2
    assert e0 == Edge(0, 2, 7)
    assert list(g.adjacent(1)) == []


def test_self_loop_listed_twice():
    g = Graph(2)
    g.insert_edge(1, 1, 3)

    assert g.degree(1) == 2
    assert g.size == 1
    assert g.has_edge(1, 1)


def test_duplicates_are_kept():
    g = Graph(2)
    g.insert_edge(0, 1, 4)
    g.insert_edge(1, 0, 2)

    assert g.size == 2
    assert g.degree(0) == 2
    assert g.weight(0, 1) == 2


def test_has_edge_either_orientation(triangle):
    assert triangle.has_edge(0, 1)
    assert triangle.has_edge(1, 0)
    assert triangle.has_edge(2, 0)
    assert not Graph(3).has_edge(0, 1)


def test_weight_missing_pair():
    g = Graph.from_edges(3, [(0, 1, 1)])
    assert g.weight(0, 2) is None


def test_adjacent_is_restartable(triangle):
    first = list(triangle.adjacent(0))
    second = list(triangle.adjacent(0))

    assert first == second
    assert [e.weight for e in first] == [1, 5]


def test_edges_in_insertion_order(triangle):
    assert [(e.u, e.v, e.weight) for e in triangle.edges()] == [(0, 1, 1), (1, 2, 1), (0, 2, 5)]


def test_edge_other_endpoint():
    e = Edge(3, 5, 1)
    assert e.other(3) == 5
    assert e.other(5) == 3
    assert Edge(2, 2, 0).other(2) == 2


@pytest.mark.parametrize("u, v", [(-1, 0), (0, 3), (3, 3)])
def test_insert_edge_out_of_range(u, v):
    g = Graph(3)
    with pytest.raises(InputError, match="out of range"):
        g.insert_edge(u, v, 1)


def test_insert_edge_negative_weight_names_edge():
    g = Graph(2)
    with pytest.raises(InputError, match=r"negative weight -4 on edge \(0, 1\)"):
        g.insert_edge(0, 1, -4)
    assert g.size == 0


def test_insert_edge_rejects_float_weight():
    g = Graph(2)
    with pytest.raises(InputError):
        g.insert_edge(0, 1, 1.5)


def test_queries_reject_bad_vertices(triangle):
    with pytest.raises(InputError):
        triangle.has_edge(0, 9)
    with pytest.raises(InputError):
        triangle.adjacent(-1)


def test_str_lists_adjacency(triangle):
    text = str(triangle)
    assert text.splitlines()[0] == "Order: 3"
    assert "Edge{u: 0, v: 1, weight: 1}" in text


def test_numpy_integer_order():
    g = Graph(np.int64(3))

    assert g.order == 3
    assert type(g.order) is int
    g.insert_edge(np.int64(0), np.int64(2), np.int64(4))
    assert g.weight(0, 2) == 4
