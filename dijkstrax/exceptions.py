"""Custom exception types used across :mod:`dijkstrax`."""

from __future__ import annotations


class DijkstraxError(Exception):
    """Base class for all package-specific errors."""


class InputError(DijkstraxError, ValueError):
    """Raised for invalid caller input such as malformed edges."""


class VertexRangeError(InputError, IndexError):
    """Raised when a 1-based vertex index falls outside ``[1, vertex_count]``.

    Attributes:
        vertex: The offending index as supplied by the caller.
        vertex_count: Capacity of the graph the index was checked against.
    """

    def __init__(self, message: str, vertex: object, vertex_count: int) -> None:
        super().__init__(message)
        self.vertex = vertex
        self.vertex_count = vertex_count


class GraphFormatError(InputError):
    """Raised when parsing a graph file fails or an edge weight is invalid."""


class ConfigError(DijkstraxError, ValueError):
    """Raised for invalid construction options."""


class AlgorithmError(DijkstraxError, RuntimeError):
    """Raised when algorithm invariants are violated at runtime."""


__all__ = [
    "DijkstraxError",
    "InputError",
    "VertexRangeError",
    "GraphFormatError",
    "ConfigError",
    "AlgorithmError",
]
