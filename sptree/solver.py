"""Shortest-path tree and diameter computations over a :class:`Graph`."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, NamedTuple, Optional

from .exceptions import AlgorithmError, ConfigError, InputError
from .graph import Graph, Vertex
from .logger import Logger, NoopLogger
from .pqueue import PriorityQueue
from .table import ShortestPathTable

MODES = ("tree", "diameter")


class Diameter(NamedTuple):
    """Endpoints and length of the longest shortest path in a graph."""

    start: Vertex
    end: Vertex
    distance: int


@dataclass(frozen=True)
class SolveResult:
    """Outcome of :meth:`SPTSolver.solve`.

    ``table`` is the tree rooted at the configured root in ``"tree"`` mode and
    the tree rooted at the diameter's start vertex in ``"diameter"`` mode.
    """

    table: ShortestPathTable
    diameter: Optional[Diameter] = None


@dataclass(frozen=True)
class SolverMetrics:
    """Performance metrics collected from a solver run."""

    order: int
    size: int
    mode: str
    counters: Dict[str, int] = field(default_factory=dict)
    wall_ms: float = 0.0
    peak_mib: float | None = None


@dataclass(frozen=True)
class SolverConfig:
    """Configuration knobs for the solver.

    Attributes:
        mode: ``"tree"`` computes one shortest-path tree from ``root``;
            ``"diameter"`` runs a traversal from every vertex.
        root: Root vertex used in ``"tree"`` mode.
    """

    mode: str = "tree"
    root: Vertex = 0

    def __post_init__(self) -> None:
        if self.mode not in MODES:
            raise ConfigError(f"unknown mode {self.mode!r}; expected one of {MODES}")
        if isinstance(self.root, bool) or not isinstance(self.root, int) or self.root < 0:
            raise ConfigError(f"root must be a non-negative integer, got {self.root!r}")


class SPTSolver:
    """Dijkstra-style shortest-path trees with lazy deletion of stale entries.

    The graph is only read. Every traversal builds its own
    :class:`ShortestPathTable` and :class:`PriorityQueue`; the solver keeps
    nothing between traversals except aggregate counters.
    """

    def __init__(
        self,
        graph: Graph,
        config: Optional[SolverConfig] = None,
        logger: Logger | None = None,
    ) -> None:
        self.graph = graph
        self.cfg = config or SolverConfig()
        self.logger = logger or NoopLogger()
        self.counters: Dict[str, int] = {
            "traversals": 0,
            "pops": 0,
            "stale_pops": 0,
            "edges_scanned": 0,
            "relaxations": 0,
            "max_queue_size": 0,
        }
        self._last: Optional[ShortestPathTable] = None

    # ---------- single source ---------------------------------------------

    def shortest_path_tree(self, root: Vertex) -> ShortestPathTable:
        """Run one traversal from ``root`` and return its completed table.

        Raises:
            InputError: If ``root`` is not a vertex of the graph.
        """
        G = self.graph
        G.check_vertex(root)
        root = int(root)
        table = ShortestPathTable(G.order, root)
        queue = PriorityQueue()
        table.set(root, 0, None)
        queue.enqueue(root, 0)

        while not queue.is_empty():
            current = queue.dequeue_min().vertex
            self.counters["pops"] += 1
            if table.visited(current):
                # superseded by a shorter entry that was already processed
                self.counters["stale_pops"] += 1
                continue
            base = table.distance(current)
            for edge in G.adjacent(current):
                self.counters["edges_scanned"] += 1
                other = edge.other(current)
                if table.visited(other):
                    continue
                cand = base + edge.weight
                known = table.distance(other)
                if known is None or cand < known:
                    table.set(other, cand, current)
                    queue.enqueue(other, cand)
                    self.counters["relaxations"] += 1
            table.visit(current)

        self.counters["traversals"] += 1
        self.counters["max_queue_size"] = max(self.counters["max_queue_size"], queue.max_size)
        self.logger.debug(
            "traversal",
            root=root,
            reached=table.reached(),
            max_distance=table.max_distance,
            furthest_vertex=table.furthest_vertex,
        )
        self._last = table
        return table

    # ---------- all sources -----------------------------------------------

    def eccentricities(self) -> List[int]:
        """Return the eccentricity (over reachable vertices) of every vertex."""
        return [self.shortest_path_tree(v).max_distance for v in range(self.graph.order)]

    def diameter(self) -> Diameter:
        """Return the triple with the largest eccentricity over all roots.

        Roots are tried in ascending order and only a strictly larger
        eccentricity replaces the current best, so ties go to the smallest
        root. Unreachable vertices do not contribute.

        Raises:
            InputError: If the graph has no vertices.
        """
        if self.graph.order == 0:
            raise InputError("diameter of a graph with no vertices is undefined")
        best: Optional[Diameter] = None
        for root in range(self.graph.order):
            table = self.shortest_path_tree(root)
            if best is None or table.max_distance > best.distance:
                best = Diameter(table.root, table.furthest_vertex, table.max_distance)
        assert best is not None
        self.logger.info(
            "diameter",
            start=best.start,
            end=best.end,
            distance=best.distance,
            traversals=self.graph.order,
        )
        return best

    # ---------- configured run --------------------------------------------

    def solve(self) -> SolveResult:
        """Run the computation selected by ``config.mode``."""
        if self.cfg.mode == "diameter":
            result = self.diameter()
            table = self.shortest_path_tree(result.start)
            return SolveResult(table=table, diameter=result)
        return SolveResult(table=self.shortest_path_tree(self.cfg.root))

    def path(self, target: Vertex) -> List[Vertex]:
        """Return the path to ``target`` in the most recently computed tree."""
        if self._last is None:
            raise AlgorithmError("call shortest_path_tree() or solve() before requesting paths")
        return self._last.path_to(target)

    def summary(self) -> Dict[str, int]:
        return dict(self.counters)

    def metrics(self, wall_ms: float, peak_mib: float | None = None) -> SolverMetrics:
        return SolverMetrics(
            order=self.graph.order,
            size=self.graph.size,
            mode=self.cfg.mode,
            counters=self.summary(),
            wall_ms=wall_ms,
            peak_mib=peak_mib,
        )


def shortest_path_tree(graph: Graph, root: Vertex, logger: Logger | None = None) -> ShortestPathTable:
    """Return the shortest-path table of a traversal of ``graph`` from ``root``."""
    return SPTSolver(graph, logger=logger).shortest_path_tree(root)


def diameter(graph: Graph, logger: Logger | None = None) -> Diameter:
    """Return ``(start, end, distance)`` of the longest shortest path in ``graph``."""
    return SPTSolver(graph, SolverConfig(mode="diameter"), logger=logger).diameter()


__all__ = [
    "Diameter",
    "SolveResult",
    "SolverConfig",
    "SolverMetrics",
    "SPTSolver",
    "shortest_path_tree",
    "diameter",
]
