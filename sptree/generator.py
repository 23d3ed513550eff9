"""
Undirected weighted graph generator for experiments and tests.

SUPPORTED GRAPH TYPES
---------------------
1. random_graph
   Uniformly sampled edges on top of an optional backbone path.
   Use for:
     - Average-case behaviour of the traversal and the diameter search
     - Cross-checking against an independent shortest-path implementation

2. grid_graph
   Rectangular grids with edges between horizontal and vertical neighbours.
   Use for:
     - Many equal-length shortest paths (tie handling)
     - Known diameters: with unit weights it is ``rows + cols - 2``

WEIGHT DISTRIBUTIONS
--------------------
- uniform: evenly distributed integer weights in ``[w_min, w_max]``
- small_int: weights squeezed into ``[w_min, w_min + 3]``, many ties
- exp: many small weights, occasional large ones

All weights are non-negative integers.
"""

from __future__ import annotations

import random
from typing import List, Literal, Optional, Set, Tuple

from .exceptions import InputError
from .graph import Graph

WeightDist = Literal["uniform", "small_int", "exp"]


def _sample_weight(rng: random.Random, dist: WeightDist, w_min: int, w_max: int) -> int:
    if w_min < 0:
        raise InputError("w_min must be >= 0.")
    if w_max < w_min:
        raise InputError("w_max must be >= w_min.")

    if dist == "uniform":
        return rng.randint(w_min, w_max)

    if dist == "small_int":
        return rng.randint(w_min, min(w_max, w_min + 3))

    if dist == "exp":
        if w_max == w_min:
            return w_min
        lam = 1.0 / max(1.0, (w_max - w_min) / 4.0)
        return int(w_min + min(w_max - w_min, round(rng.expovariate(lam))))

    raise InputError(f"unknown weight distribution: {dist}")


def random_graph(
    order: int,
    size: int,
    *,
    weight_dist: WeightDist = "uniform",
    w_min: int = 1,
    w_max: int = 100,
    seed: Optional[int] = 0,
    ensure_connected: bool = True,
    allow_self_loops: bool = False,
) -> Graph:
    """
    Generate an undirected graph with ``size`` distinct edges.

    Notes:
    - If ensure_connected=True, the path 0-1-...-(order-1) is laid first, so the
      graph is connected; those edges count towards ``size``.
    - ``size`` is capped at the number of distinct vertex pairs.
    """
    if order < 0:
        raise InputError("order must be >= 0.")
    if size < 0:
        raise InputError("size must be >= 0.")

    rng = random.Random(seed)
    g = Graph(order)
    seen: Set[Tuple[int, int]] = set()

    def add(u: int, v: int) -> None:
        if u == v and not allow_self_loops:
            return
        key = (min(u, v), max(u, v))
        if key in seen:
            return
        seen.add(key)
        g.insert_edge(u, v, _sample_weight(rng, weight_dist, w_min, w_max))

    if ensure_connected:
        for i in range(order - 1):
            add(i, i + 1)

    pairs = order * (order - 1) // 2 + (order if allow_self_loops else 0)
    target = min(size, pairs)
    while len(seen) < target:
        add(rng.randrange(order), rng.randrange(order))
    return g


def grid_graph(
    rows: int,
    cols: int,
    *,
    weight_dist: WeightDist = "uniform",
    w_min: int = 1,
    w_max: int = 1,
    seed: Optional[int] = 0,
) -> Graph:
    """Generate a ``rows x cols`` grid; vertex ``r * cols + c`` sits at ``(r, c)``."""
    if rows < 0 or cols < 0:
        raise InputError("rows and cols must be >= 0.")
    rng = random.Random(seed)
    g = Graph(rows * cols)
    for r in range(rows):
        for c in range(cols):
            u = r * cols + c
            if c + 1 < cols:
                g.insert_edge(u, u + 1, _sample_weight(rng, weight_dist, w_min, w_max))
            if r + 1 < rows:
                g.insert_edge(u, u + cols, _sample_weight(rng, weight_dist, w_min, w_max))
    return g


def edge_tuples(g: Graph) -> List[Tuple[int, int, int]]:
    """Return the inserted edges of ``g`` as ``(u, v, weight)`` tuples."""
    return [(e.u, e.v, e.weight) for e in g.edges()]
