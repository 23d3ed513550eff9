"""Graph input/output helpers."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from .exceptions import GraphFormatError, InputError
from .graph import Graph

EdgeTriple = Tuple[int, int, int]
NumberedEdges = List[Tuple[int, EdgeTriple]]


def _parse_int(token: str, lineno: int, what: str) -> int:
    try:
        return int(token)
    except ValueError as exc:
        raise GraphFormatError(f"line {lineno}: {what} {token!r} is not an integer") from exc


def _build(order: int, edges: NumberedEdges) -> Graph:
    """Build a graph, attributing insertion failures to their source line."""
    try:
        g = Graph(order)
    except InputError as exc:
        raise GraphFormatError(f"invalid vertex count: {exc}") from exc
    for lineno, (u, v, w) in edges:
        try:
            g.insert_edge(u, v, w)
        except InputError as exc:
            raise GraphFormatError(f"line {lineno}: {exc}") from exc
    return g


def parse_edge_list(lines: Iterable[str]) -> Graph:
    """Parse the native edge-list format.

    The first meaningful line holds the vertex count; every following line
    holds one ``u v weight`` triple separated by whitespace. Blank lines and
    lines starting with ``#`` are ignored.

    Args:
        lines: Text lines, e.g. an open file.

    Returns:
        The populated graph.

    Raises:
        GraphFormatError: If the header is missing or a line is malformed,
            names an unknown vertex or carries a negative weight.

    Examples:
        ```python
        >>> g = parse_edge_list(["3", "0 1 1", "1 2 1", "0 2 5"])
        >>> g.size
        3
        ```
    """
    order: Optional[int] = None
    edges: NumberedEdges = []
    for lineno, raw in enumerate(lines, start=1):
        row = raw.strip()
        if not row or row.startswith("#"):
            continue
        parts = row.split()
        if order is None:
            if len(parts) != 1:
                raise GraphFormatError(f"line {lineno}: expected the vertex count, got {row!r}")
            order = _parse_int(parts[0], lineno, "vertex count")
            continue
        if len(parts) != 3:
            raise GraphFormatError(f"line {lineno}: expected 'u v weight', got {row!r}")
        u, v, w = (_parse_int(p, lineno, name) for p, name in zip(parts, ("u", "v", "weight")))
        edges.append((lineno, (u, v, w)))
    if order is None:
        raise GraphFormatError("missing vertex count")
    return _build(order, edges)


def _read_edgelist(path: Path) -> Graph:
    if str(path) == "-":
        return parse_edge_list(sys.stdin)
    with path.open("r", encoding="utf-8") as fh:
        return parse_edge_list(fh)


def _write_edgelist(path: Path, G: Graph) -> None:
    with path.open("w", encoding="utf-8") as fh:
        fh.write(f"{G.order}\n")
        for e in G.edges():
            fh.write(f"{e.u} {e.v} {e.weight}\n")


def _read_csv(path: Path) -> Graph:
    """Read ``u,v,w`` rows (comma or tab separated).

    The vertex count is inferred as the largest vertex id plus one.
    """
    edges: NumberedEdges = []
    max_id = -1
    with path.open("r", encoding="utf-8") as fh:
        for lineno, raw in enumerate(fh, start=1):
            row = raw.strip()
            if not row or row.startswith("#"):
                continue
            parts = [p.strip() for p in row.replace("\t", ",").split(",")]
            if len(parts) != 3:
                raise GraphFormatError(f"line {lineno}: expected 'u,v,w', got {row!r}")
            u, v, w = (_parse_int(p, lineno, name) for p, name in zip(parts, ("u", "v", "w")))
            edges.append((lineno, (u, v, w)))
            max_id = max(max_id, u, v)
    if not edges:
        raise GraphFormatError("no edges parsed from file")
    return _build(max_id + 1, edges)


def _write_csv(path: Path, G: Graph) -> None:
    with path.open("w", encoding="utf-8") as fh:
        fh.write("# u,v,w\n")
        for e in G.edges():
            fh.write(f"{e.u},{e.v},{e.weight}\n")


def _read_jsonl(path: Path) -> Graph:
    """Read one ``{"u": .., "v": .., "w": ..}`` object per line."""
    edges: NumberedEdges = []
    max_id = -1
    with path.open("r", encoding="utf-8") as fh:
        for lineno, raw in enumerate(fh, start=1):
            row = raw.strip()
            if not row:
                continue
            try:
                obj = json.loads(row)
                u, v, w = obj["u"], obj["v"], obj["w"]
            except (ValueError, KeyError, TypeError) as exc:
                raise GraphFormatError(f"line {lineno}: malformed edge record {row!r}") from exc
            if not all(isinstance(x, int) and not isinstance(x, bool) for x in (u, v, w)):
                raise GraphFormatError(f"line {lineno}: u, v and w must be integers")
            edges.append((lineno, (u, v, w)))
            max_id = max(max_id, u, v)
    if not edges:
        raise GraphFormatError("no edges parsed from file")
    return _build(max_id + 1, edges)


def _write_jsonl(path: Path, G: Graph) -> None:
    with path.open("w", encoding="utf-8") as fh:
        for e in G.edges():
            fh.write(json.dumps({"u": e.u, "v": e.v, "w": e.weight}) + "\n")


_FMT_READERS: Dict[str, Callable[[Path], Graph]] = {
    "edgelist": _read_edgelist,
    "csv": _read_csv,
    "jsonl": _read_jsonl,
}

_FMT_WRITERS: Dict[str, Callable[[Path, Graph], None]] = {
    "edgelist": _write_edgelist,
    "csv": _write_csv,
    "jsonl": _write_jsonl,
}

FORMATS = tuple(_FMT_READERS)


def detect_format(path: Path) -> str:
    """Return the format implied by the extension of ``path``.

    Unrecognized extensions are treated as the native edge-list format.
    """
    ext = path.suffix.lower()
    if ext in {".csv", ".tsv"}:
        return "csv"
    if ext in {".jsonl", ".ndjson"}:
        return "jsonl"
    return "edgelist"


def read_graph(path: str, fmt: Optional[str] = None) -> Graph:
    """Read a graph from ``path``.

    Args:
        path: Graph file, or ``-`` for the edge-list format on stdin.
        fmt: One of :data:`FORMATS`; detected from the extension if ``None``.

    Raises:
        InputError: If the file does not exist.
        GraphFormatError: If the format is unknown or the content is malformed
            or not valid UTF-8.
    """
    p = Path(path)
    fmt = fmt or detect_format(p)
    if fmt not in _FMT_READERS:
        raise GraphFormatError(f"unknown graph format {fmt!r}")
    if path == "-" and fmt != "edgelist":
        raise GraphFormatError("only the edgelist format can be read from stdin")
    if path != "-" and not p.exists():
        raise InputError(f"graph file not found: {path}")
    try:
        return _FMT_READERS[fmt](p)
    except UnicodeDecodeError as exc:
        raise GraphFormatError(f"{path}: not valid UTF-8 ({exc.reason} at byte {exc.start})") from exc


def write_graph(G: Graph, path: str, fmt: Optional[str] = None) -> None:
    """Write every inserted edge of ``G`` to ``path`` once."""
    p = Path(path)
    fmt = fmt or detect_format(p)
    if fmt not in _FMT_WRITERS:
        raise GraphFormatError(f"unknown graph format {fmt!r}")
    _FMT_WRITERS[fmt](p, G)


__all__ = ["FORMATS", "detect_format", "parse_edge_list", "read_graph", "write_graph"]
