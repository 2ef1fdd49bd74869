"""Public package exports for :mod:`dijkstrax`."""

from __future__ import annotations

from .exceptions import (
    AlgorithmError,
    ConfigError,
    DijkstraxError,
    GraphFormatError,
    InputError,
    VertexRangeError,
)
from .graph import Graph
from .graph_numpy import NumpyGraph
from .io import read_graph, write_graph
from .logger import Logger, NoopLogger, StdLogger
from .path import reconstruct_path
from .reporter import print_improvement, print_paths
from .solver import (
    UNREACHABLE,
    ShortestPathResult,
    ShortestPathSolver,
    SolverMetrics,
    find_shortest_paths,
)

__version__ = "0.1.0"

__all__ = [
    "Graph",
    "NumpyGraph",
    "ShortestPathSolver",
    "ShortestPathResult",
    "SolverMetrics",
    "UNREACHABLE",
    "find_shortest_paths",
    "print_paths",
    "print_improvement",
    "reconstruct_path",
    "Logger",
    "NoopLogger",
    "StdLogger",
    "read_graph",
    "write_graph",
    "DijkstraxError",
    "InputError",
    "VertexRangeError",
    "GraphFormatError",
    "ConfigError",
    "AlgorithmError",
]
