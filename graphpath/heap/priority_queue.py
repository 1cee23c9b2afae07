"""
Array-backed binary min-heap priority queue.

Holds (key, priority) entries ordered by ascending priority. The same key
may be inserted several times; callers that need decrease-key semantics
insert the new priority and skip stale entries on extraction (lazy deletion).

Equal priorities are extracted in insertion order, so keys never have to
be comparable with each other.
"""

from __future__ import annotations

from typing import Any, Generic, Hashable, TypeVar

from graphpath.errors import EmptyQueue

K = TypeVar("K", bound=Hashable)
P = TypeVar("P")

# Entry layout: [priority, sequence, key]
_PRIORITY = 0
_SEQUENCE = 1
_KEY = 2


class PriorityQueue(Generic[K, P]):
    """
    Binary min-heap keyed by priority.

    Attributes:
        max_size: Largest number of entries held at once (frontier high-water mark)
    """

    def __init__(self) -> None:
        self._heap: list[list[Any]] = []
        self._counter = 0
        self.max_size = 0

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={len(self._heap)})"

    def is_empty(self) -> bool:
        return not self._heap

    def size(self) -> int:
        return len(self._heap)

    def insert(self, key: K, priority: P) -> None:
        """Add an entry. O(log n)."""
        self._heap.append([priority, self._counter, key])
        self._counter += 1
        if len(self._heap) > self.max_size:
            self.max_size = len(self._heap)
        self._sift_up(len(self._heap) - 1)

    def peek(self) -> tuple[K, P]:
        """
        Return the minimum-priority entry without removing it.

        Raises:
            EmptyQueue: If the queue is empty
        """
        if not self._heap:
            raise EmptyQueue("peek")
        root = self._heap[0]
        return root[_KEY], root[_PRIORITY]

    def extract_min(self) -> tuple[K, P]:
        """
        Remove and return the minimum-priority entry. O(log n).

        Raises:
            EmptyQueue: If the queue is empty
        """
        if not self._heap:
            raise EmptyQueue("extract_min")

        heap = self._heap
        last = len(heap) - 1
        heap[0], heap[last] = heap[last], heap[0]
        entry = heap.pop()
        if heap:
            self._sift_down(0)
        return entry[_KEY], entry[_PRIORITY]

    def clear(self) -> None:
        """Drop all entries. The insertion counter keeps running."""
        self._heap.clear()

    # =========================================================================
    # Heap Maintenance
    # =========================================================================

    @staticmethod
    def _less(a: list[Any], b: list[Any]) -> bool:
        if a[_PRIORITY] != b[_PRIORITY]:
            return a[_PRIORITY] < b[_PRIORITY]
        return a[_SEQUENCE] < b[_SEQUENCE]

    def _sift_up(self, index: int) -> None:
        heap = self._heap
        while index > 0:
            parent = (index - 1) // 2
            if not self._less(heap[index], heap[parent]):
                break
            heap[index], heap[parent] = heap[parent], heap[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            left = 2 * index + 1
            if left >= size:
                break  # leaf

            smallest = left
            right = left + 1
            if right < size and self._less(heap[right], heap[left]):
                smallest = right

            if not self._less(heap[smallest], heap[index]):
                break
            heap[index], heap[smallest] = heap[smallest], heap[index]
            index = smallest

