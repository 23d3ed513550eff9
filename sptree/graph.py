"""Undirected weighted graph stored as adjacency lists of shared edges."""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Iterator, List, Optional, Tuple

from .exceptions import InputError

if TYPE_CHECKING:  # pragma: no cover
    from .solver import Diameter
    from .table import ShortestPathTable

Vertex = int
Weight = int
EdgeTuple = Tuple[Vertex, Vertex, Weight]


@dataclass(frozen=True)
class Edge:
    """Undirected weighted connection between ``u`` and ``v``."""

    u: Vertex
    v: Vertex
    weight: Weight

    def other(self, vertex: Vertex) -> Vertex:
        """Return the endpoint opposite to ``vertex``.

        The orientation of the stored edge is irrelevant: for ``vertex == u``
        this returns ``v`` and vice versa. A self-loop returns ``vertex``.
        """
        return self.v if vertex == self.u else self.u

    def connects(self, a: Vertex, b: Vertex) -> bool:
        """Return ``True`` if the edge joins ``a`` and ``b`` in either orientation."""
        return (self.u == a and self.v == b) or (self.u == b and self.v == a)

    def __str__(self) -> str:
        return f"Edge{{u: {self.u}, v: {self.v}, weight: {self.weight}}}"


@dataclass(eq=False)
class Graph:
    """Undirected graph with non-negative integer edge weights.

    Every inserted edge is appended to the adjacency lists of both of its
    endpoints; a self-loop therefore appears twice in its vertex's list.
    Duplicate edges are kept as inserted.

    Attributes:
        order: Number of vertices, identified ``0`` .. ``order-1``.
        adj: Incident edges of each vertex in insertion order.
    """

    order: int

    def __post_init__(self) -> None:
        """Validate the vertex count and allocate adjacency lists."""
        if isinstance(self.order, bool) or not isinstance(self.order, numbers.Integral):
            raise InputError(f"graph order must be an integer, got {self.order!r}")
        if self.order < 0:
            raise InputError(f"graph order must be non-negative, got {self.order}")
        self.order = int(self.order)
        self.adj: List[List[Edge]] = [[] for _ in range(self.order)]
        self._edges: List[Edge] = []

    @classmethod
    def create(cls, order: int) -> "Graph":
        """Return an empty graph with ``order`` vertices."""
        return cls(order)

    @classmethod
    def from_edges(cls, order: int, edges: Iterable[EdgeTuple]) -> "Graph":
        """Create a graph from an iterable of ``(u, v, weight)`` tuples.

        Examples:
            ```python
            >>> g = Graph.from_edges(3, [(0, 1, 1), (1, 2, 1)])
            >>> g.has_edge(2, 1)
            True
            ```
        """
        g = cls(order)
        for u, v, w in edges:
            g.insert_edge(u, v, w)
        return g

    def check_vertex(self, vertex: Vertex) -> None:
        """Raise :class:`InputError` unless ``vertex`` is a valid id."""
        if isinstance(vertex, bool) or not isinstance(vertex, numbers.Integral):
            raise InputError(f"vertex id must be an integer, got {vertex!r}")
        if not 0 <= vertex < self.order:
            raise InputError(f"vertex {vertex} out of range [0, {self.order})")

    def insert_edge(self, u: Vertex, v: Vertex, weight: Weight) -> None:
        """Add an undirected edge between ``u`` and ``v``.

        Args:
            u: First endpoint.
            v: Second endpoint.
            weight: Non-negative integer weight.

        Raises:
            InputError: If an endpoint is out of range or ``weight`` is not a
                non-negative integer.
        """
        self.check_vertex(u)
        self.check_vertex(v)
        if isinstance(weight, bool) or not isinstance(weight, numbers.Integral):
            raise InputError(f"non-integer weight {weight!r} on edge ({u}, {v})")
        if weight < 0:
            raise InputError(f"negative weight {weight} on edge ({u}, {v})")
        edge = Edge(int(u), int(v), int(weight))
        self._edges.append(edge)
        self.adj[edge.u].append(edge)
        self.adj[edge.v].append(edge)

    def has_edge(self, u: Vertex, v: Vertex) -> bool:
        """Return ``True`` if some inserted edge joins ``u`` and ``v``."""
        self.check_vertex(u)
        self.check_vertex(v)
        return any(edge.connects(u, v) for edge in self.adj[u])

    def weight(self, u: Vertex, v: Vertex) -> Optional[Weight]:
        """Return the smallest weight among edges joining ``u`` and ``v``, if any."""
        self.check_vertex(u)
        self.check_vertex(v)
        weights = [edge.weight for edge in self.adj[u] if edge.connects(u, v)]
        return min(weights) if weights else None

    def adjacent(self, vertex: Vertex) -> Iterator[Edge]:
        """Iterate over the edges incident to ``vertex`` in insertion order."""
        self.check_vertex(vertex)
        return iter(self.adj[vertex])

    def degree(self, vertex: Vertex) -> int:
        """Return the number of adjacency entries of ``vertex``."""
        self.check_vertex(vertex)
        return len(self.adj[vertex])

    def edges(self) -> Iterator[Edge]:
        """Iterate over every inserted edge once, in insertion order."""
        return iter(self._edges)

    @property
    def size(self) -> int:
        """Number of inserted edges."""
        return len(self._edges)

    def shortest_path_tree(self, root: Vertex) -> "ShortestPathTable":
        """Return the shortest-path table of a traversal from ``root``."""
        from .solver import shortest_path_tree

        return shortest_path_tree(self, root)

    def diameter(self) -> "Diameter":
        """Return ``(start, end, distance)`` of the longest shortest path."""
        from .solver import diameter

        return diameter(self)

    def __str__(self) -> str:
        lines = [f"Order: {self.order}"]
        for vertex, edges in enumerate(self.adj):
            lines.append(f"\t{vertex}: " + " ".join(str(e) for e in edges))
        return "\n".join(lines)
