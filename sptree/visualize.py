"""
Graph visualization for shortest-path trees and diameter paths.

Features:
- Converts a :class:`~sptree.graph.Graph` to a NetworkX multigraph
- Draws tree edges of a traversal on top of the full graph
- Highlights the root and an optional vertex path (e.g. the diameter)
"""

from __future__ import annotations

from typing import Optional, Sequence

import matplotlib.pyplot as plt
import networkx as nx

from .graph import Graph
from .table import ShortestPathTable


def to_networkx(g: Graph) -> nx.MultiGraph:
    """Return a ``MultiGraph`` keeping duplicate edges and self-loops."""
    G = nx.MultiGraph()
    G.add_nodes_from(range(g.order))
    for e in g.edges():
        G.add_edge(e.u, e.v, weight=e.weight)
    return G


def _layout(G: nx.MultiGraph, layout: str) -> dict:
    if layout == "spring":
        return nx.spring_layout(G, seed=42)
    if layout == "kamada_kawai":
        return nx.kamada_kawai_layout(nx.Graph(G))
    if layout == "shell":
        return nx.shell_layout(G)
    if layout == "circular":
        return nx.circular_layout(G)
    raise ValueError(f"Unknown layout: {layout}")


def draw_graph(
    g: Graph,
    table: Optional[ShortestPathTable] = None,
    highlight_path: Optional[Sequence[int]] = None,
    *,
    ax: Optional[plt.Axes] = None,
    layout: str = "spring",
    show_weights: bool = False,
    node_size: int = 300,
    title: Optional[str] = None,
) -> plt.Axes:
    """
    Render ``g`` with NetworkX + Matplotlib and return the axes used.

    Tree edges of ``table`` are drawn solid, the remaining edges faint, and
    consecutive vertices of ``highlight_path`` in red.
    """
    G = to_networkx(g)
    pos = _layout(G, layout)
    if ax is None:
        _, ax = plt.subplots(figsize=(10, 8))

    root = table.root if table is not None else None
    node_colors = ["tab:red" if node == root else "tab:blue" for node in G.nodes]
    nx.draw_networkx_nodes(G, pos, ax=ax, node_color=node_colors, node_size=node_size, alpha=0.9)
    nx.draw_networkx_labels(G, pos, ax=ax, font_size=8)

    simple = nx.Graph(G)
    nx.draw_networkx_edges(simple, pos, ax=ax, width=1.0, alpha=0.25)

    if table is not None:
        tree = [(table.parent(v), v) for v in range(g.order) if table.parent(v) is not None]
        nx.draw_networkx_edges(simple, pos, ax=ax, edgelist=tree, width=1.8, alpha=0.8)

    if highlight_path and len(highlight_path) > 1:
        hops = list(zip(highlight_path, highlight_path[1:]))
        nx.draw_networkx_edges(
            simple, pos, ax=ax, edgelist=hops, width=3.0, edge_color="tab:red"
        )

    if show_weights:
        labels = {(e.u, e.v): e.weight for e in g.edges() if e.u != e.v}
        nx.draw_networkx_edge_labels(simple, pos, ax=ax, edge_labels=labels, font_size=7)

    ax.set_title(title or "Shortest-path tree")
    ax.axis("off")
    return ax


def save_plot(
    g: Graph,
    path: str,
    table: Optional[ShortestPathTable] = None,
    highlight_path: Optional[Sequence[int]] = None,
    **kwargs,
) -> None:
    """Draw ``g`` and write the figure to ``path``."""
    fig, ax = plt.subplots(figsize=(10, 8))
    try:
        draw_graph(g, table, highlight_path, ax=ax, **kwargs)
        fig.tight_layout()
        fig.savefig(path)
    finally:
        plt.close(fig)
