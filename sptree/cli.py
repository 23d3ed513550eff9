"""Command-line interface for shortest-path trees and graph diameters."""

from __future__ import annotations

import argparse
import json
import sys
import time
import traceback
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from .exceptions import ConfigError, InputError, SPTreeError
from .export import export_tree_graphml, export_tree_json
from .generator import random_graph
from .graph import Graph
from .io import FORMATS, read_graph
from .logger import StdLogger
from .solver import SolveResult, SolverConfig, SPTSolver

EXAMPLE_EDGES = """3
0 1 1
1 2 1
0 2 5
"""


def _render_table(G: Graph, res: SolveResult) -> str:
    lines: List[str] = []
    if res.diameter is not None:
        start, end, dist = res.diameter
        lines.append(f"Diameter: {dist} (from {start} to {end})")
        lines.append("Path: " + " -> ".join(str(v) for v in res.table.path_to(end)))
        lines.append("")
    lines.append(f"Root: {res.table.root}")
    lines.append(str(res.table))
    lines.append(
        f"Eccentricity: {res.table.max_distance} (furthest vertex {res.table.furthest_vertex})"
    )
    return "\n".join(lines)


def _render_json(res: SolveResult) -> Dict[str, Any]:
    out: Dict[str, Any] = res.table.to_dict()
    if res.diameter is not None:
        out["diameter"] = {
            "start": res.diameter.start,
            "end": res.diameter.end,
            "distance": res.diameter.distance,
            "path": res.table.path_to(res.diameter.end),
        }
    return out


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``sptree`` command-line tool."""
    examples = (
        "Examples:\n"
        "  sptree --edges graph.txt --root 2\n"
        "  sptree --edges graph.txt --diameter --output json\n"
        "  sptree --random --n 50 --m 120 --diameter --plot diameter.png\n"
    )
    p = argparse.ArgumentParser(
        prog="sptree",
        description="Shortest-path trees and diameters of undirected weighted graphs",
        epilog=examples,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    p.add_argument("--verbose", action="store_true", help="Show full tracebacks")
    p.add_argument("--log-json", action="store_true", help="Emit structured log lines as JSON")
    p.add_argument(
        "--log-level",
        choices=["debug", "info", "warning"],
        default="warning",
        help="Log verbosity",
    )
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("--edges", type=str, help="Path to graph file ('-' for stdin)")
    src.add_argument("--random", action="store_true", help="Use a random connected graph")
    src.add_argument(
        "--example",
        action="store_true",
        help="Print a sample edge-list file to stdout and exit",
    )
    p.add_argument(
        "--format",
        choices=FORMATS,
        default=None,
        help="Graph file format (detected from the extension)",
    )

    p.add_argument("--n", type=int, default=10, help="Vertices (random mode)")
    p.add_argument("--m", type=int, default=20, help="Edges (random mode)")
    p.add_argument("--seed", type=int, default=0, help="Seed for random graph generation")
    p.add_argument("--w-max", type=int, default=10, help="Largest edge weight (random mode)")

    p.add_argument("--root", type=int, default=0, help="Root vertex of the shortest-path tree")
    p.add_argument("--diameter", action="store_true", help="Report the graph diameter")
    p.add_argument("--output", choices=["table", "json"], default="table")
    p.add_argument("--print-graph", action="store_true", help="Print the adjacency lists")

    p.add_argument("--export-json", type=str, default=None, help="Write the tree as JSON")
    p.add_argument("--export-graphml", type=str, default=None, help="Write the tree as GraphML")
    p.add_argument("--plot", type=str, default=None, help="Render the tree to an image file")
    p.add_argument("--metrics-out", type=str, default=None, help="Write run metrics as JSON")

    args = p.parse_args(argv)

    if args.example:
        sys.stdout.write(EXAMPLE_EDGES)
        return 0

    try:
        # stdout carries the JSON report alone when one is requested
        stream = sys.stdout if args.log_json and args.output != "json" else sys.stderr
        logger = StdLogger(level=args.log_level, json_fmt=args.log_json, stream=stream)

        if args.random:
            G = random_graph(args.n, args.m, w_min=1, w_max=args.w_max, seed=args.seed)
        else:
            G = read_graph(args.edges, args.format)
        logger.info("graph", order=G.order, size=G.size)

        cfg = SolverConfig(mode="diameter" if args.diameter else "tree", root=args.root)
        if args.verbose and not args.log_json:
            sys.stderr.write(
                f"config: order={G.order} size={G.size} mode={cfg.mode} root={cfg.root}\n"
            )

        solver = SPTSolver(G, config=cfg, logger=logger)
        if args.metrics_out:
            import tracemalloc

            tracemalloc.start()
            t0 = time.perf_counter()
            res = solver.solve()
            wall_ms = (time.perf_counter() - t0) * 1000.0
            _, peak = tracemalloc.get_traced_memory()
            tracemalloc.stop()
            with open(args.metrics_out, "w", encoding="utf-8") as fh:
                json.dump(asdict(solver.metrics(wall_ms, peak / (1024 * 1024))), fh)
        else:
            t0 = time.perf_counter()
            res = solver.solve()
            wall_ms = (time.perf_counter() - t0) * 1000.0

        if args.print_graph:
            print(G)
        if args.output == "json":
            print(json.dumps(_render_json(res)))
        else:
            print(_render_table(G, res))

        if args.export_json:
            with open(args.export_json, "w", encoding="utf-8") as fh:
                fh.write(export_tree_json(G, res.table))
        if args.export_graphml:
            with open(args.export_graphml, "w", encoding="utf-8") as fh:
                fh.write(export_tree_graphml(G, res.table))
        if args.plot:
            from .visualize import save_plot

            highlight = res.table.path_to(res.diameter.end) if res.diameter else None
            save_plot(G, args.plot, table=res.table, highlight_path=highlight)

        logger.info("run", mode=cfg.mode, wall_ms=round(wall_ms, 3), **solver.summary())
        return 0

    except (InputError, ConfigError) as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"error: {exc}\n")
        return 64
    except SPTreeError as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"internal error: {exc}\n")
        return 70
    except Exception as exc:  # pragma: no cover - unexpected
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"internal error: {exc}\n")
        return 70


if __name__ == "__main__":
    sys.exit(main())
