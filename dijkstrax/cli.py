"""Command-line interface for running the solver."""

from __future__ import annotations

import argparse
import json
import sys
import time
import traceback
from dataclasses import asdict
from pathlib import Path
from typing import List, Optional, Tuple, Type, Union

from .exceptions import ConfigError, DijkstraxError, GraphFormatError, InputError
from .graph import Edge, Graph, check_vertex
from .graph_numpy import NumpyGraph
from .io import read_graph
from .logger import StdLogger
from .reporter import format_path, print_improvement, print_paths
from .solver import ShortestPathSolver

AnyGraph = Union[Graph, NumpyGraph]

DEMO_VERTEX_COUNT = 6
DEMO_EDGES: List[Edge] = [
    (1, 2, 7),
    (1, 6, 14),
    (1, 3, 9),
    (2, 3, 10),
    (2, 4, 15),
    (3, 6, 2),
    (3, 4, 11),
    (4, 5, 6),
    (5, 6, 9),
]

EXAMPLE_CSV = """# vertices: 4
# u,v,w
1,2,1
2,3,2
1,3,4
3,4,1
"""

_BACKENDS = {"list": Graph, "numpy": NumpyGraph}


def _build_graph(
    edges: Optional[str], fmt: Optional[str], n: Optional[int], backend: str
) -> Tuple[AnyGraph, str]:
    """Load the graph named on the command line, or the built-in demo graph."""
    graph_cls: Type[AnyGraph] = _BACKENDS[backend]
    if edges is None:
        return graph_cls.from_edges(DEMO_VERTEX_COUNT, DEMO_EDGES), "demo"
    p = Path(edges)
    if not p.exists():
        raise InputError(f"edges file not found: {edges}")
    return read_graph(p, fmt, vertex_count=n, graph_cls=graph_cls), str(p)


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``dijkstrax`` command-line tool."""
    examples = (
        "Examples:\n"
        "  dijkstrax\n"
        "  dijkstrax --edges graph.csv --source 2 --target 5\n"
        "  dijkstrax --example > graph.csv\n"
    )
    p = argparse.ArgumentParser(
        prog="dijkstrax",
        description="Single-source shortest paths on an undirected weighted graph",
        epilog=examples,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    p.add_argument("--verbose", action="store_true", help="Show full tracebacks")
    p.add_argument("--log-json", action="store_true", help="Emit log events as JSON lines")
    p.add_argument(
        "--log-level",
        choices=["debug", "info", "warning"],
        default="warning",
        help="Log verbosity (logs go to stderr)",
    )
    p.add_argument("--edges", type=str, default=None, help="Path to a 1-based edge list")
    p.add_argument(
        "--example",
        action="store_true",
        help="Print a sample edges CSV to stdout and exit",
    )
    p.add_argument(
        "--format",
        choices=["csv", "jsonl"],
        default=None,
        help="Edge file format (auto-detected from extension)",
    )
    p.add_argument("--n", type=int, default=None, help="Vertex count (default: from file)")
    p.add_argument("--backend", choices=sorted(_BACKENDS), default="list")
    p.add_argument("--source", type=int, default=1, help="1-based source vertex")
    p.add_argument("--target", type=int, default=None, help="Also print a shortest path to this vertex")
    p.add_argument("--quiet", action="store_true", help="Do not print improvement notifications")
    p.add_argument(
        "--metrics-out",
        type=str,
        default=None,
        help="Write run metrics to this JSON file",
    )

    args = p.parse_args(argv)

    if args.example:
        sys.stdout.write(EXAMPLE_CSV)
        return 0

    try:
        logger = StdLogger(level=args.log_level, json_fmt=args.log_json, stream=sys.stderr)
        G, origin = _build_graph(args.edges, args.format, args.n, args.backend)
        if args.verbose:
            sys.stderr.write(
                f"config: graph={origin} n={G.vertex_count} m={G.edge_count} "
                f"backend={args.backend} source={args.source}\n"
            )
        if args.target is not None:
            check_vertex(args.target, G.vertex_count, "Invalid vertex provided")

        solver = ShortestPathSolver(
            G,
            args.source,
            logger=logger,
            on_improve=None if args.quiet else print_improvement,
        )
        t0 = time.perf_counter()
        res = solver.solve()
        wall_ms = (time.perf_counter() - t0) * 1000.0

        print_paths(res.source, res.distances)
        if args.target is not None:
            print(format_path(solver.path(args.target)))

        if args.metrics_out:
            with open(args.metrics_out, "w", encoding="utf-8") as fh:
                json.dump(asdict(solver.metrics(wall_ms=wall_ms)), fh)
        return 0

    except (InputError, ConfigError, GraphFormatError) as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"error: {exc}\n")
        return 64
    except DijkstraxError as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"internal error: {exc}\n")
        return 70
    except Exception as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"internal error: {exc}\n")
        return 70


if __name__ == "__main__":
    sys.exit(main())
