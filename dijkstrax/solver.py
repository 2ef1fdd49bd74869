"""Single-source shortest paths with Dijkstra's algorithm (binary heap, lazy deletion)."""

from __future__ import annotations

import heapq
import math
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Protocol, Sequence, Tuple, Union

from .graph import Vertex, check_vertex
from .logger import Logger, NoopLogger
from .path import reconstruct_path

Distance = Union[int, float]
ImprovementListener = Callable[[Vertex, Vertex, int], None]

UNREACHABLE: float = math.inf
"""Distance reported for vertices with no path from the source."""


class GraphLike(Protocol):
    """What the solver reads from a graph: its capacity and 0-based rows."""

    vertex_count: int
    adj: Sequence[Any]


@dataclass(frozen=True)
class ShortestPathResult:
    """Distances and predecessors produced by one solver run.

    Slot ``i`` of both tables describes vertex ``i + 1``. Predecessor values
    are 1-based vertices, ``None`` for the source and unreached vertices.
    """

    source: Vertex
    distances: List[Distance]
    predecessors: List[Optional[Vertex]]


@dataclass(frozen=True)
class SolverMetrics:
    """Performance metrics collected from a solver run."""

    n: int
    m: int
    counters: Dict[str, int]
    wall_ms: float


class ShortestPathSolver:
    """Dijkstra over an undirected graph with non-negative integer weights.

    The priority queue holds ``(distance, vertex)`` pairs. Improving a vertex
    pushes a new pair without removing the old one; when an outdated pair is
    popped its distance no longer matches the table and it is skipped.
    """

    def __init__(
        self,
        G: GraphLike,
        source: Vertex,
        logger: Logger | None = None,
        on_improve: Optional[ImprovementListener] = None,
    ) -> None:
        """Initialize the solver.

        Args:
            G: Input graph; it is only read.
            source: 1-based source vertex.
            logger: Optional structured logger.
            on_improve: Called as ``on_improve(source, vertex, distance)``
                each time a vertex's distance is lowered.

        Raises:
            VertexRangeError: If ``source`` is outside ``[1, G.vertex_count]``.
        """
        self._s = check_vertex(source, G.vertex_count, "Invalid vertex provided")
        self.G = G
        self.source = self._s + 1
        self.logger = logger or NoopLogger()
        self.on_improve = on_improve
        self.counters: Dict[str, int] = {}
        self._result: Optional[ShortestPathResult] = None

    def _reset_counters(self) -> None:
        self.counters = {
            "edges_relaxed": 0,
            "improvements": 0,
            "pushes": 0,
            "pops": 0,
            "stale_pops": 0,
        }

    def solve(self) -> ShortestPathResult:
        """Run Dijkstra from the source and return fresh distance tables."""
        self._reset_counters()
        n = self.G.vertex_count
        dist: List[Distance] = [UNREACHABLE] * n
        pred: List[Optional[Vertex]] = [None] * n
        dist[self._s] = 0

        pq: List[Tuple[Distance, int]] = [(0, self._s)]
        self.counters["pushes"] += 1
        while pq:
            d_u, u = heapq.heappop(pq)
            self.counters["pops"] += 1
            # lazy deletion
            if d_u != dist[u]:
                self.counters["stale_pops"] += 1
                continue
            for v, w in self.G.adj[u]:
                v = int(v)
                self.counters["edges_relaxed"] += 1
                nd = d_u + int(w)
                if nd < dist[v]:
                    dist[v] = nd
                    pred[v] = u + 1
                    self._notify(v + 1, nd)
                    heapq.heappush(pq, (nd, v))
                    self.counters["pushes"] += 1

        self.logger.info("solve", source=self.source, n=n, **self.counters)
        self._result = ShortestPathResult(source=self.source, distances=dist, predecessors=pred)
        return self._result

    def _notify(self, vertex: Vertex, distance: int) -> None:
        self.counters["improvements"] += 1
        self.logger.debug("relax", source=self.source, vertex=vertex, distance=distance)
        if self.on_improve is not None:
            self.on_improve(self.source, vertex, distance)

    def path(self, target: Vertex) -> List[Vertex]:
        """Return a shortest 1-based vertex sequence from the source to ``target``.

        Runs :meth:`solve` first if it has not been called. Returns ``[]`` when
        ``target`` is unreachable.
        """
        check_vertex(target, self.G.vertex_count, "Invalid vertex provided")
        if self._result is None:
            self.solve()
        assert self._result is not None
        return reconstruct_path(self._result.predecessors, self.source, target)

    def summary(self) -> Dict[str, int]:
        """Return a copy of the counters from the last :meth:`solve`."""
        return dict(self.counters)

    def metrics(self, wall_ms: float) -> SolverMetrics:
        """Bundle the counters with graph size and a caller-measured wall time."""
        m = sum(len(row) for row in self.G.adj) // 2
        return SolverMetrics(n=self.G.vertex_count, m=m, counters=self.summary(), wall_ms=wall_ms)


def find_shortest_paths(
    graph: GraphLike,
    source_vertex: Vertex,
    on_improve: Optional[ImprovementListener] = None,
    logger: Logger | None = None,
) -> List[Distance]:
    """Return the distance from ``source_vertex`` to every vertex.

    Slot ``i`` holds the distance to vertex ``i + 1``, or :data:`UNREACHABLE`.

    Raises:
        VertexRangeError: If ``source_vertex`` is outside ``[1, vertex_count]``.
    """
    solver = ShortestPathSolver(graph, source_vertex, logger=logger, on_improve=on_improve)
    return solver.solve().distances
