"""NumPy-backed graph representation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List

import numpy as np
import numpy.typing as npt

from .exceptions import ConfigError, GraphFormatError
from .graph import Edge, Graph, HalfEdge, Vertex, Weight, check_vertex, check_weight, is_integer

_MAX_WEIGHT = int(np.iinfo(np.int64).max)


@dataclass(frozen=True, eq=False)
class NumpyGraph:
    """Undirected multigraph storing each adjacency row as an ``(k, 2)`` array.

    Column 0 holds the 0-based neighbor, column 1 the weight. Same insertion
    contract as :class:`~dijkstrax.graph.Graph`. Negative weights and weights
    beyond int64 range raise :class:`~dijkstrax.exceptions.GraphFormatError`.
    """

    vertex_count: int
    adj: List[npt.NDArray[np.int64]] = field(init=False, repr=False, compare=False)
    _edges: List[Edge] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate the capacity and allocate adjacency storage."""
        if not is_integer(self.vertex_count) or self.vertex_count < 0:
            raise ConfigError("NumpyGraph.vertex_count must be a non-negative integer.")
        object.__setattr__(
            self,
            "adj",
            [np.zeros((0, 2), dtype=np.int64) for _ in range(self.vertex_count)],
        )
        object.__setattr__(self, "_edges", [])

    def _append(self, u_ix: int, v_ix: int, w: int) -> None:
        row = np.array([[v_ix, w]], dtype=np.int64)
        self.adj[u_ix] = np.vstack([self.adj[u_ix], row])

    def add_edge(self, u: Vertex, v: Vertex, w: Weight) -> None:
        """Connect 1-based vertices ``u`` and ``v`` with weight ``w``."""
        u_ix = check_vertex(u, self.vertex_count, "Cannot add edge from vertex")
        v_ix = check_vertex(v, self.vertex_count, "Cannot add edge to vertex")
        weight = check_weight(u, v, w)
        if weight > _MAX_WEIGHT:
            raise GraphFormatError(f"weight {weight} on edge ({u}, {v}) exceeds int64 storage")
        self._append(u_ix, v_ix, weight)
        self._append(v_ix, u_ix, weight)
        self._edges.append((u_ix + 1, v_ix + 1, weight))

    @classmethod
    def from_edges(cls, vertex_count: int, edges: Iterable[Edge]) -> "NumpyGraph":
        """Construct a graph from an iterable of 1-based ``(u, v, w)`` edges."""
        g = cls(vertex_count)
        for u, v, w in edges:
            g.add_edge(u, v, w)
        return g

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    def edges(self) -> Iterator[Edge]:
        return iter(list(self._edges))

    def neighbors(self, u: Vertex) -> Iterator[HalfEdge]:
        """Yield ``(neighbor, weight)`` pairs of vertex ``u`` (both 1-based)."""
        u_ix = check_vertex(u, self.vertex_count, "Invalid vertex provided")
        return iter([(int(v) + 1, int(w)) for v, w in self.adj[u_ix]])

    def degree(self, u: Vertex) -> int:
        u_ix = check_vertex(u, self.vertex_count, "Invalid vertex provided")
        return int(self.adj[u_ix].shape[0])

    # Utility for tests: convert to standard Graph
    def to_graph(self) -> Graph:
        """Return a list-backed :class:`~dijkstrax.graph.Graph` copy of this graph."""
        return Graph.from_edges(self.vertex_count, self._edges)


__all__ = ["NumpyGraph"]
