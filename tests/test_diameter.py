"""
Tests for the all-roots diameter search.
"""

import networkx as nx
import pytest

from sptree.exceptions import ConfigError, InputError
from sptree.generator import grid_graph, random_graph
from sptree.graph import Graph
from sptree.solver import Diameter, SolverConfig, SPTSolver, diameter
from sptree.visualize import to_networkx


def test_triangle_diameter_uses_shortest_paths(triangle):
    assert triangle.diameter() == (0, 2, 2)


def test_single_vertex_diameter():
    d = Graph(1).diameter()
    assert d == Diameter(start=0, end=0, distance=0)


def test_empty_graph_has_no_diameter():
    with pytest.raises(InputError):
        Graph(0).diameter()


def test_ties_resolve_to_lowest_root():
    # path 0 - 1 - 2: roots 0 and 2 both have eccentricity 2
    g = Graph.from_edges(3, [(0, 1, 1), (1, 2, 1)])
    assert g.diameter() == (0, 2, 2)


def test_disconnected_graph_uses_reachable_eccentricity():
    g = Graph.from_edges(5, [(0, 1, 1), (2, 3, 4), (3, 4, 4)])
    assert g.diameter() == (2, 4, 8)


def test_isolated_vertices_only():
    assert Graph(3).diameter() == (0, 0, 0)


def test_grid_diameter():
    start, end, dist = grid_graph(4, 5).diameter()
    assert dist == 7
    assert (start, end) == (0, 19)


@pytest.mark.parametrize("seed", [0, 4, 8])
def test_diameter_is_maximal_eccentricity(seed):
    g = random_graph(20, 45, w_max=30, seed=seed)
    start, end, dist = g.diameter()

    assert g.shortest_path_tree(start).distance(end) == dist
    for v in range(g.order):
        assert g.shortest_path_tree(v).max_distance <= dist


def test_matches_networkx_diameter():
    g = random_graph(30, 70, w_max=25, seed=21)
    G = to_networkx(g)
    lengths = dict(nx.all_pairs_dijkstra_path_length(G))
    expected = max(max(row.values()) for row in lengths.values())

    assert g.diameter().distance == expected


def test_solve_in_diameter_mode_returns_start_tree(triangle):
    solver = SPTSolver(triangle, SolverConfig(mode="diameter"))
    res = solver.solve()

    assert res.diameter == (0, 2, 2)
    assert res.table.root == 0
    assert res.table.path_to(2) == [0, 1, 2]
    # one traversal per root plus the tree of the start vertex
    assert solver.summary()["traversals"] == 4


def test_solve_in_tree_mode(triangle):
    res = SPTSolver(triangle, SolverConfig(root=2)).solve()
    assert res.diameter is None
    assert res.table.distances() == [2, 1, 0]


def test_eccentricities(triangle):
    assert SPTSolver(triangle).eccentricities() == [2, 1, 2]


@pytest.mark.parametrize("kwargs", [{"mode": "all-pairs"}, {"root": -1}, {"root": "0"}])
def test_invalid_config(kwargs):
    with pytest.raises(ConfigError):
        SolverConfig(**kwargs)


def test_metrics_snapshot(triangle):
    solver = SPTSolver(triangle, SolverConfig(mode="diameter"))
    diameter_result = solver.diameter()
    m = solver.metrics(wall_ms=1.5)

    assert diameter_result.distance == 2
    assert m.order == 3
    assert m.size == 3
    assert m.mode == "diameter"
    assert m.counters["traversals"] == 3
    assert m.peak_mib is None


def test_module_helper(triangle):
    assert diameter(triangle) == triangle.diameter()
