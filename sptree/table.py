"""Per-traversal bookkeeping for the shortest-path tree algorithm."""

from __future__ import annotations

import numbers
from typing import List, Optional

from .exceptions import InputError
from .path import reconstruct_path

Vertex = int


class ShortestPathTable:
    """Progress and outcome of one shortest-path tree traversal.

    A table is created fresh for every traversal and only that traversal
    writes to it. Distances of vertices the traversal has not reached are
    ``None``. ``max_distance`` and ``furthest_vertex`` follow the largest
    distance among finalized vertices and are only meaningful once the
    traversal has completed.

    Attributes:
        root: Vertex the traversal started from.
        max_distance: Largest finalized distance (the root's eccentricity).
        furthest_vertex: Vertex realizing ``max_distance``.
    """

    def __init__(self, order: int, root: Vertex) -> None:
        self.order = order
        self._check(root)
        self.root = root
        self.max_distance = 0
        self.furthest_vertex = root
        self._visited: List[bool] = [False] * order
        self._distance: List[Optional[int]] = [None] * order
        self._parent: List[Optional[Vertex]] = [None] * order

    def _check(self, vertex: Vertex) -> None:
        if isinstance(vertex, bool) or not isinstance(vertex, numbers.Integral):
            raise InputError(f"vertex id must be an integer, got {vertex!r}")
        if not 0 <= vertex < self.order:
            raise InputError(f"vertex {vertex} out of range [0, {self.order})")

    def visited(self, vertex: Vertex) -> bool:
        """Return whether ``vertex`` has been finalized."""
        self._check(vertex)
        return self._visited[vertex]

    def distance(self, vertex: Vertex) -> Optional[int]:
        """Return the best known distance to ``vertex``, ``None`` if unreached."""
        self._check(vertex)
        return self._distance[vertex]

    def parent(self, vertex: Vertex) -> Optional[Vertex]:
        """Return the tree parent of ``vertex``; ``None`` for the root and unreached vertices."""
        self._check(vertex)
        return self._parent[vertex]

    def set(self, vertex: Vertex, distance: int, parent: Optional[Vertex]) -> None:
        """Record a new best ``distance`` and ``parent`` for ``vertex``."""
        self._check(vertex)
        self._distance[vertex] = distance
        self._parent[vertex] = parent

    def visit(self, vertex: Vertex) -> None:
        """Finalize ``vertex`` and update the running eccentricity."""
        self._check(vertex)
        dist = self._distance[vertex]
        if dist is not None and dist > self.max_distance:
            self.max_distance = dist
            self.furthest_vertex = vertex
        self._visited[vertex] = True

    def is_reachable(self, vertex: Vertex) -> bool:
        return self.distance(vertex) is not None

    def distances(self) -> List[Optional[int]]:
        """Return a copy of the distance column."""
        return list(self._distance)

    def parents(self) -> List[Optional[Vertex]]:
        """Return a copy of the parent column."""
        return list(self._parent)

    def reached(self) -> int:
        """Number of finalized vertices."""
        return sum(self._visited)

    def path_to(self, target: Vertex) -> List[Vertex]:
        """Return the tree path from the root to ``target`` (empty if unreachable)."""
        self._check(target)
        return reconstruct_path(self._parent, self.root, target)

    def to_dict(self) -> dict:
        return {
            "root": self.root,
            "max_distance": self.max_distance,
            "furthest_vertex": self.furthest_vertex,
            "visited": list(self._visited),
            "distances": self.distances(),
            "parents": self.parents(),
        }

    def __str__(self) -> str:
        rows = [f"{'Vertex':>8} {'Visited':>8} {'Distance':>8} {'Parent':>8}"]
        for i in range(self.order):
            dist = "-" if self._distance[i] is None else str(self._distance[i])
            par = "-" if self._parent[i] is None else str(self._parent[i])
            rows.append(f"{i:>8} {str(self._visited[i]).lower():>8} {dist:>8} {par:>8}")
        return "\n".join(rows)


__all__ = ["ShortestPathTable"]
