"""Utilities for reconstructing paths from predecessor tables."""

from __future__ import annotations

from typing import List, Optional, Set

from .exceptions import AlgorithmError

Vertex = int


def reconstruct_path(
    predecessors: List[Optional[Vertex]],
    source: Vertex,
    target: Vertex,
) -> List[Vertex]:
    """Return the 1-based vertex sequence from ``source`` to ``target``.

    Args:
        predecessors: Slot ``i`` holds the 1-based predecessor of vertex
            ``i + 1`` on its shortest path, or ``None`` for the source and
            for unreached vertices.
        source: 1-based source vertex.
        target: 1-based target vertex.

    Returns:
        Vertices from source to target (inclusive), or an empty list when
        ``target`` was never reached.

    Raises:
        AlgorithmError: If the table contains a cycle.
    """
    chain: List[Vertex] = []
    seen: Set[Vertex] = set()
    cur: Optional[Vertex] = target
    while cur is not None:
        if cur in seen:
            raise AlgorithmError(f"predecessor cycle through vertex {cur}")
        seen.add(cur)
        chain.append(cur)
        if cur == source:
            chain.reverse()
            return chain
        cur = predecessors[cur - 1]
    return []
