"""Edge-list input/output helpers.

Both formats store 1-based vertex ids and list every undirected edge once:

* CSV: ``u,v,w`` rows (tabs also accepted as separators). Lines starting
  with ``#`` are comments; a ``# vertices: N`` comment fixes the vertex
  count so isolated trailing vertices survive a round trip.
* JSONL: one ``{"u": .., "v": .., "w": ..}`` object per line, preceded by
  a ``{"vertices": N}`` record that plays the same role as the CSV header.
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple, Type, Union

from .exceptions import GraphFormatError
from .graph import Edge, Graph
from .graph_numpy import NumpyGraph

AnyGraph = Union[Graph, NumpyGraph]
EdgeList = List[Edge]
ParsedEdges = Tuple[Optional[int], EdgeList]

_VERTICES_RE = re.compile(r"^#\s*vertices\s*[:=]\s*(\d+)\s*$", re.IGNORECASE)


def _parse_int(token: str, path: Path, lineno: int) -> int:
    try:
        return int(token.strip())
    except ValueError as exc:
        raise GraphFormatError(f"{path}:{lineno}: expected an integer, got {token.strip()!r}") from exc


def _read_csv(path: Path) -> ParsedEdges:
    """Read ``u,v,w`` rows, returning the declared vertex count (if any) and edges."""
    edges: EdgeList = []
    declared: Optional[int] = None
    with path.open("r", encoding="utf-8") as fh:
        for lineno, raw in enumerate(fh, start=1):
            row = raw.strip()
            if not row:
                continue
            if row.startswith("#"):
                match = _VERTICES_RE.match(row)
                if match:
                    declared = int(match.group(1))
                continue
            parts = row.replace("\t", ",").split(",")
            if len(parts) != 3:
                raise GraphFormatError(f"{path}:{lineno}: expected 3 columns, got {len(parts)}")
            u, v, w = (_parse_int(p, path, lineno) for p in parts)
            edges.append((u, v, w))
    return declared, edges


def _write_csv(path: Path, G: AnyGraph) -> None:
    with path.open("w", encoding="utf-8") as fh:
        fh.write(f"# vertices: {G.vertex_count}\n")
        fh.write("# u,v,w\n")
        for u, v, w in G.edges():
            fh.write(f"{u},{v},{w}\n")


def _read_jsonl(path: Path) -> ParsedEdges:
    """Read one JSON edge object per line, plus an optional ``{"vertices": N}`` record."""
    edges: EdgeList = []
    declared: Optional[int] = None
    with path.open("r", encoding="utf-8") as fh:
        for lineno, raw in enumerate(fh, start=1):
            row = raw.strip()
            if not row:
                continue
            try:
                obj = json.loads(row)
            except ValueError as exc:
                raise GraphFormatError(f"{path}:{lineno}: invalid JSON") from exc
            if isinstance(obj, dict) and set(obj) == {"vertices"}:
                declared = obj["vertices"]
                if type(declared) is not int or declared < 0:
                    raise GraphFormatError(f"{path}:{lineno}: invalid vertex count")
                continue
            try:
                u, v, w = obj["u"], obj["v"], obj["w"]
            except (KeyError, TypeError) as exc:
                raise GraphFormatError(f"{path}:{lineno}: malformed edge record") from exc
            if not all(type(x) is int for x in (u, v, w)):
                raise GraphFormatError(f"{path}:{lineno}: edge fields must be integers")
            edges.append((u, v, w))
    return declared, edges


def _write_jsonl(path: Path, G: AnyGraph) -> None:
    with path.open("w", encoding="utf-8") as fh:
        fh.write(json.dumps({"vertices": G.vertex_count}) + "\n")
        for u, v, w in G.edges():
            fh.write(json.dumps({"u": u, "v": v, "w": w}) + "\n")


_FMT_READERS: Dict[str, Callable[[Path], ParsedEdges]] = {
    "csv": _read_csv,
    "jsonl": _read_jsonl,
}

_FMT_WRITERS: Dict[str, Callable[[Path, AnyGraph], None]] = {
    "csv": _write_csv,
    "jsonl": _write_jsonl,
}


def _detect_format(path: Path) -> Optional[str]:
    ext = path.suffix.lower()
    if ext in {".csv", ".tsv", ".txt"}:
        return "csv"
    if ext in {".jsonl", ".json"}:
        return "jsonl"
    return None


def read_graph(
    path: Union[str, Path],
    fmt: Optional[str] = None,
    vertex_count: Optional[int] = None,
    graph_cls: Type[AnyGraph] = Graph,
) -> AnyGraph:
    """Read an undirected graph from an edge-list file.

    Args:
        path: The path to the graph file.
        fmt: ``"csv"`` or ``"jsonl"``; auto-detected from the extension when
            omitted.
        vertex_count: Graph capacity. Defaults to the count declared in the
            file, else the largest vertex id seen.
        graph_cls: :class:`Graph` or :class:`NumpyGraph`.

    Raises:
        GraphFormatError: If the format is unknown, a record is malformed,
            or an edge has an invalid weight.
        VertexRangeError: If an edge references a vertex beyond
            ``vertex_count``.
    """
    p = Path(path)
    fmt = fmt or _detect_format(p)
    if fmt is None or fmt not in _FMT_READERS:
        raise GraphFormatError(f"unknown graph format for {p}")
    try:
        declared, edges = _FMT_READERS[fmt](p)
    except UnicodeDecodeError as exc:
        raise GraphFormatError(f"{p}: not valid UTF-8 text") from exc
    if vertex_count is None:
        vertex_count = declared
    if vertex_count is None:
        if not edges:
            raise GraphFormatError("no edges parsed from file")
        vertex_count = max(max(u, v) for u, v, _ in edges)
    return graph_cls.from_edges(vertex_count, edges)


def write_graph(G: AnyGraph, path: Union[str, Path], fmt: Optional[str] = None) -> None:
    """Write ``G`` as an edge list, each undirected edge once.

    Raises:
        GraphFormatError: If the format is unknown or unsupported.
    """
    p = Path(path)
    fmt = fmt or _detect_format(p)
    if fmt is None or fmt not in _FMT_WRITERS:
        raise GraphFormatError(f"unknown graph format for {p}")
    _FMT_WRITERS[fmt](p, G)
