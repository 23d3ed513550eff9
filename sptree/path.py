"""Utilities for reconstructing paths from parent arrays."""

from __future__ import annotations

from typing import List, Optional, Sequence

Vertex = int


def reconstruct_path(
    parents: Sequence[Optional[Vertex]],
    root: Vertex,
    target: Vertex,
) -> List[Vertex]:
    """Return the tree path from ``root`` to ``target``.

    Args:
        parents: Parent of each vertex, ``None`` for the root and for
            vertices the traversal never reached.
        root: Root of the shortest-path tree.
        target: Vertex to walk back from.

    Returns:
        Vertices from ``root`` to ``target`` inclusive, or an empty list if
        ``target`` is not connected to ``root`` through the parent pointers.

    Raises:
        ValueError: If ``root`` or ``target`` is outside ``parents``.
    """
    n = len(parents)
    if not (0 <= root < n and 0 <= target < n):
        raise ValueError("root/target out of range.")
    if root == target:
        return [root]

    chain: List[Vertex] = []
    cur: Optional[Vertex] = target
    # a tree path visits each vertex at most once
    for _ in range(n):
        if cur is None:
            break
        chain.append(cur)
        if cur == root:
            chain.reverse()
            return chain
        cur = parents[cur]
    return []
