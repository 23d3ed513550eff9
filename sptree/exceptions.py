"""Custom exception types used across :mod:`sptree`."""

from __future__ import annotations


class SPTreeError(Exception):
    """Base class for all package-specific errors."""


class InputError(SPTreeError, ValueError):
    """Raised for invalid arguments such as out-of-range vertex ids."""


class GraphFormatError(InputError):
    """Raised when parsing a graph file fails."""


class ConfigError(SPTreeError, ValueError):
    """Raised for invalid configuration options."""


class AlgorithmError(SPTreeError, RuntimeError):
    """Raised when algorithm invariants are violated at runtime."""


class QueueUnderflowError(AlgorithmError):
    """Raised when the minimum is requested from an empty priority queue."""


__all__ = [
    "SPTreeError",
    "InputError",
    "GraphFormatError",
    "ConfigError",
    "AlgorithmError",
    "QueueUnderflowError",
]
