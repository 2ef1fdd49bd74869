"""Fixed-capacity undirected graph used by the solver."""

from __future__ import annotations

import numbers
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Tuple

from .exceptions import ConfigError, GraphFormatError, VertexRangeError

Vertex = int
Weight = int
HalfEdge = Tuple[Vertex, Weight]
Edge = Tuple[Vertex, Vertex, Weight]


def is_integer(value: object) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def check_vertex(vertex: object, vertex_count: int, message: str) -> int:
    """Validate a 1-based vertex index and return its 0-based slot.

    Args:
        vertex: Index supplied by the caller.
        vertex_count: Number of vertices in the graph.
        message: Diagnostic prefix; the offending index is appended.

    Raises:
        VertexRangeError: If ``vertex`` is not an integer in
            ``[1, vertex_count]``.
    """
    if not is_integer(vertex) or not (1 <= vertex <= vertex_count):  # type: ignore[operator]
        raise VertexRangeError(f"{message}: {vertex}", vertex, vertex_count)
    return int(vertex) - 1  # type: ignore[call-overload]


def check_weight(u: object, v: object, w: object) -> int:
    """Return ``w`` as ``int`` or raise :class:`GraphFormatError` citing the edge."""
    if not is_integer(w):
        raise GraphFormatError(f"non-integer weight {w!r} on edge ({u}, {v})")
    if w < 0:  # type: ignore[operator]
        raise GraphFormatError(f"negative weight {w} on edge ({u}, {v})")
    return int(w)  # type: ignore[call-overload]


@dataclass(frozen=True, eq=False)
class Graph:
    """Undirected multigraph with a fixed number of vertices.

    Vertices are addressed ``1`` .. ``vertex_count`` by callers and stored
    0-based. Every call to :meth:`add_edge` appends one half-edge to each
    endpoint, so ``adj[u]`` holds ``(v, w)`` exactly when ``adj[v]`` holds
    ``(u, w)``. Self-loops and parallel edges are kept as given.

    Attributes:
        vertex_count: Number of vertices, fixed at construction.
        adj: 0-based adjacency rows of ``(neighbor, weight)`` half-edges.
    """

    vertex_count: int
    adj: Tuple[List[HalfEdge], ...] = field(init=False, repr=False, compare=False)
    _edges: List[Edge] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate the capacity and allocate one empty row per vertex."""
        if not is_integer(self.vertex_count) or self.vertex_count < 0:
            raise ConfigError("Graph.vertex_count must be a non-negative integer.")
        object.__setattr__(self, "adj", tuple([] for _ in range(self.vertex_count)))
        object.__setattr__(self, "_edges", [])

    def add_edge(self, u: Vertex, v: Vertex, w: Weight) -> None:
        """Connect ``u`` and ``v`` with an edge of weight ``w``.

        Args:
            u: First endpoint (1-based).
            v: Second endpoint (1-based).
            w: Non-negative integer weight.

        Raises:
            VertexRangeError: If ``u`` or ``v`` is outside ``[1, vertex_count]``.
            GraphFormatError: If ``w`` is negative or not an integer.

        Examples:
            ```python
            >>> g = Graph(2)
            >>> g.add_edge(1, 2, 5)
            >>> g.adj
            ([(1, 5)], [(0, 5)])
            ```
        """
        u_ix = check_vertex(u, self.vertex_count, "Cannot add edge from vertex")
        v_ix = check_vertex(v, self.vertex_count, "Cannot add edge to vertex")
        weight = check_weight(u, v, w)
        self.adj[u_ix].append((v_ix, weight))
        self.adj[v_ix].append((u_ix, weight))
        self._edges.append((u_ix + 1, v_ix + 1, weight))

    @classmethod
    def from_edges(cls, vertex_count: int, edges: Iterable[Edge]) -> "Graph":
        """Create a graph from an iterable of 1-based ``(u, v, w)`` edges."""
        g = cls(vertex_count)
        for u, v, w in edges:
            g.add_edge(u, v, w)
        return g

    @property
    def edge_count(self) -> int:
        """Number of undirected edges inserted so far."""
        return len(self._edges)

    def edges(self) -> Iterator[Edge]:
        """Yield each inserted edge once, 1-based, in insertion order."""
        return iter(list(self._edges))

    def neighbors(self, u: Vertex) -> Iterator[HalfEdge]:
        """Yield ``(neighbor, weight)`` pairs of vertex ``u`` (both 1-based)."""
        u_ix = check_vertex(u, self.vertex_count, "Invalid vertex provided")
        return iter([(v_ix + 1, w) for v_ix, w in self.adj[u_ix]])

    def degree(self, u: Vertex) -> int:
        """Return the number of half-edges stored for vertex ``u``.

        A self-loop counts twice.
        """
        return len(self.adj[check_vertex(u, self.vertex_count, "Invalid vertex provided")])
