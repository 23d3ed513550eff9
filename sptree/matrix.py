"""NumPy views of a graph and of its all-pairs shortest distances."""

from __future__ import annotations

from typing import Optional

import numpy as np
import numpy.typing as npt

from .graph import Graph
from .logger import Logger
from .solver import SPTSolver


def adjacency_matrix(G: Graph) -> npt.NDArray[np.float64]:
    """Return the symmetric matrix of smallest edge weights.

    Entry ``[u, v]`` holds the lightest weight among edges joining ``u`` and
    ``v``, ``inf`` where there is none and ``0`` on the diagonal.
    """
    mat = np.full((G.order, G.order), np.inf, dtype=np.float64)
    np.fill_diagonal(mat, 0.0)
    for e in G.edges():
        if e.u == e.v:
            continue
        w = min(mat[e.u, e.v], float(e.weight))
        mat[e.u, e.v] = w
        mat[e.v, e.u] = w
    return mat


def distance_matrix(
    G: Graph,
    solver: Optional[SPTSolver] = None,
    logger: Logger | None = None,
) -> npt.NDArray[np.float64]:
    """Return all-pairs shortest distances, one traversal per row.

    Unreachable pairs are ``inf``.
    """
    solver = solver or SPTSolver(G, logger=logger)
    out = np.full((G.order, G.order), np.inf, dtype=np.float64)
    for root in range(G.order):
        table = solver.shortest_path_tree(root)
        row = np.array(
            [np.inf if d is None else d for d in table.distances()],
            dtype=np.float64,
        )
        out[root] = row
    return out


def eccentricities(G: Graph, solver: Optional[SPTSolver] = None) -> npt.NDArray[np.int64]:
    """Return the eccentricity of every vertex over the vertices it reaches."""
    solver = solver or SPTSolver(G)
    return np.asarray(solver.eccentricities(), dtype=np.int64)


__all__ = ["adjacency_matrix", "distance_matrix", "eccentricities"]
