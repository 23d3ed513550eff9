"""Export utilities for shortest-path trees."""

from __future__ import annotations

import json
from typing import List, Tuple

from .graph import Graph
from .table import ShortestPathTable


def tree_edges(table: ShortestPathTable) -> List[Tuple[int, int, int]]:
    """Return the edges of the shortest-path tree.

    Args:
        table: Completed table of one traversal.

    Returns:
        ``(parent, child, distance)`` for every reached vertex other than the
        root, ordered by child id.
    """
    edges: List[Tuple[int, int, int]] = []
    for v in range(table.order):
        p = table.parent(v)
        d = table.distance(v)
        if p is not None and d is not None:
            edges.append((p, v, d))
    return edges


def export_tree_json(G: Graph, table: ShortestPathTable) -> str:
    """Return a JSON string with per-vertex state and tree edges."""
    data = {
        "root": table.root,
        "max_distance": table.max_distance,
        "furthest_vertex": table.furthest_vertex,
        "nodes": [
            {
                "id": i,
                "visited": table.visited(i),
                "distance": table.distance(i),
                "parent": table.parent(i),
            }
            for i in range(G.order)
        ],
        "edges": [
            {"source": p, "target": v, "weight": G.weight(p, v)}
            for (p, v, _) in tree_edges(table)
        ],
    }
    return json.dumps(data)


def export_tree_graphml(G: Graph, table: ShortestPathTable) -> str:
    """Return a minimal GraphML string for the shortest-path tree.

    Tree edges are written parent to child; unreached vertices are kept as
    isolated nodes without a ``distance`` value.
    """
    lines: List[str] = []
    lines.append('<?xml version="1.0" encoding="UTF-8"?>')
    lines.append('<graphml xmlns="http://graphml.graphdrawing.org/xmlns">')
    lines.append('  <key id="d" for="node" attr.name="distance" attr.type="long"/>')
    lines.append('  <key id="w" for="edge" attr.name="weight" attr.type="long"/>')
    lines.append(f'  <graph id="T{table.root}" edgedefault="directed">')
    for i in range(G.order):
        d = table.distance(i)
        if d is None:
            lines.append(f'    <node id="n{i}"/>')
        else:
            lines.append(f'    <node id="n{i}"><data key="d">{d}</data></node>')
    for p, v, _ in tree_edges(table):
        lines.append(
            f'    <edge source="n{p}" target="n{v}"><data key="w">{G.weight(p, v)}</data></edge>'
        )
    lines.append("  </graph>")
    lines.append("</graphml>")
    return "\n".join(lines)
