"""Public package exports for :mod:`sptree`."""

from __future__ import annotations

from .exceptions import (
    AlgorithmError,
    ConfigError,
    GraphFormatError,
    InputError,
    QueueUnderflowError,
    SPTreeError,
)
from .graph import Edge, Graph
from .io import parse_edge_list, read_graph, write_graph
from .logger import Logger, NoopLogger, StdLogger, make_logger
from .matrix import adjacency_matrix, distance_matrix, eccentricities
from .pqueue import PriorityQueue, QueueEntry
from .solver import (
    Diameter,
    SolveResult,
    SolverConfig,
    SolverMetrics,
    SPTSolver,
    diameter,
    shortest_path_tree,
)
from .table import ShortestPathTable

__version__ = "0.1.0"

__all__ = [
    "Edge",
    "Graph",
    "PriorityQueue",
    "QueueEntry",
    "ShortestPathTable",
    "SPTSolver",
    "SolverConfig",
    "SolverMetrics",
    "SolveResult",
    "Diameter",
    "shortest_path_tree",
    "diameter",
    "adjacency_matrix",
    "distance_matrix",
    "eccentricities",
    "Logger",
    "NoopLogger",
    "StdLogger",
    "make_logger",
    "parse_edge_list",
    "read_graph",
    "write_graph",
    "SPTreeError",
    "InputError",
    "GraphFormatError",
    "ConfigError",
    "AlgorithmError",
    "QueueUnderflowError",
]
