"""
Tests for shortest-path tree exports.
"""

import json
import xml.etree.ElementTree as ET

from sptree.export import export_tree_graphml, export_tree_json, tree_edges
from sptree.graph import Graph

NS = "{http://graphml.graphdrawing.org/xmlns}"


def test_tree_edges(triangle):
    t = triangle.shortest_path_tree(0)
    assert tree_edges(t) == [(0, 1, 1), (1, 2, 2)]


def test_tree_edges_skip_unreached():
    g = Graph.from_edges(4, [(0, 1, 3)])
    assert tree_edges(g.shortest_path_tree(1)) == [(1, 0, 3)]


def test_export_json(triangle):
    data = json.loads(export_tree_json(triangle, triangle.shortest_path_tree(0)))

    assert data["root"] == 0
    assert data["max_distance"] == 2
    assert data["furthest_vertex"] == 2
    assert data["nodes"][2] == {"id": 2, "visited": True, "distance": 2, "parent": 1}
    assert data["edges"] == [
        {"source": 0, "target": 1, "weight": 1},
        {"source": 1, "target": 2, "weight": 1},
    ]


def test_export_json_unreachable_is_null():
    g = Graph(2)
    data = json.loads(export_tree_json(g, g.shortest_path_tree(0)))
    assert data["nodes"][1]["distance"] is None
    assert data["edges"] == []


def test_export_graphml_parses(triangle):
    text = export_tree_graphml(triangle, triangle.shortest_path_tree(0))
    root = ET.fromstring(text)

    nodes = root.findall(f".//{NS}node")
    edges = root.findall(f".//{NS}edge")
    assert len(nodes) == 3
    assert [(e.attrib["source"], e.attrib["target"]) for e in edges] == [
        ("n0", "n1"),
        ("n1", "n2"),
    ]
    assert nodes[2].find(f"{NS}data").text == "2"
