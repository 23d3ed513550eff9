"""Min-priority queue of ``(distance, vertex)`` entries."""

from __future__ import annotations

import heapq
from typing import List, NamedTuple

from .exceptions import QueueUnderflowError

Vertex = int


class QueueEntry(NamedTuple):
    """Vertex paired with its distance at the time it was enqueued."""

    distance: int
    vertex: Vertex


class PriorityQueue:
    """Binary heap ordered by distance.

    There is no decrease-key: a vertex whose distance improves is simply
    enqueued again and the caller discards the outdated entries when they
    surface. Ties are broken by vertex id.
    """

    def __init__(self) -> None:
        self._heap: List[QueueEntry] = []
        self.max_size = 0

    def enqueue(self, vertex: Vertex, distance: int) -> None:
        """Insert ``vertex`` with priority ``distance``."""
        heapq.heappush(self._heap, QueueEntry(distance, vertex))
        if len(self._heap) > self.max_size:
            self.max_size = len(self._heap)

    def dequeue_min(self) -> QueueEntry:
        """Remove and return the entry with the smallest distance.

        Raises:
            QueueUnderflowError: If the queue is empty.
        """
        if not self._heap:
            raise QueueUnderflowError("dequeue_min called on an empty queue")
        return heapq.heappop(self._heap)

    def peek(self) -> QueueEntry:
        """Return the smallest entry without removing it."""
        if not self._heap:
            raise QueueUnderflowError("peek called on an empty queue")
        return self._heap[0]

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)


__all__ = ["PriorityQueue", "QueueEntry"]
