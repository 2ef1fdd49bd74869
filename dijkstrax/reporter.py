"""Console output for solver runs."""

from __future__ import annotations

import sys
from typing import Sequence, TextIO

from .graph import Vertex
from .solver import UNREACHABLE, Distance


def format_improvement(source: Vertex, vertex: Vertex, distance: int) -> str:
    return f"Found shortest path from {source} to {vertex} with weight = {distance}"


def print_improvement(
    source: Vertex, vertex: Vertex, distance: int, stream: TextIO | None = None
) -> None:
    """Print one improvement notification; usable as a solver ``on_improve`` hook."""
    out = stream or sys.stdout
    out.write(format_improvement(source, vertex, distance) + "\n")


def format_paths(source: Vertex, distances: Sequence[Distance]) -> str:
    """Render the ``Shortest paths:`` block, skipping unreachable vertices.

    The source itself is listed with distance ``0``.
    """
    lines = ["Shortest paths:"]
    for i, distance in enumerate(distances):
        if distance != UNREACHABLE:
            lines.append(f"{source}->{i + 1} = {distance}")
    return "\n".join(lines) + "\n"


def print_paths(source: Vertex, distances: Sequence[Distance], stream: TextIO | None = None) -> None:
    """Write the distance table for ``source`` to ``stream`` (stdout by default)."""
    (stream or sys.stdout).write(format_paths(source, distances))


def format_path(path: Sequence[Vertex]) -> str:
    if not path:
        return "Path: unreachable"
    return "Path: " + " -> ".join(str(v) for v in path)
