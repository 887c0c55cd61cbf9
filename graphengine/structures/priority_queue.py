"""
Binary-heap min-priority queue.

There is no decrease-key: callers push an item again with a better priority
and skip entries for items they have already finalized when those stale
entries surface. Ties on priority are broken by insertion order, so items
never need to be comparable with each other (node ids may mix ints and
strings).
"""

import heapq
import itertools
from typing import Generic, Hashable, List, Tuple, TypeVar

T = TypeVar("T", bound=Hashable)


class PriorityQueue(Generic[T]):
    """
    Min-priority queue of ``(item, priority)`` entries.

    Complexity: O(log n) push and pop, O(1) peek.

    Example:
        >>> pq = PriorityQueue()
        >>> pq.push("b", 2.0)
        >>> pq.push("a", 1.0)
        >>> pq.pop()
        ('a', 1.0)
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[float, int, T]] = []
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def is_empty(self) -> bool:
        return not self._heap

    def push(self, item: T, priority: float) -> None:
        """Insert ``item`` with ``priority`` (lower comes out first)."""
        heapq.heappush(self._heap, (priority, next(self._counter), item))

    def pop(self) -> Tuple[T, float]:
        """
        Remove and return the ``(item, priority)`` with the lowest priority.

        Raises:
            IndexError: If the queue is empty.
        """
        if not self._heap:
            raise IndexError("pop from an empty priority queue")
        priority, _, item = heapq.heappop(self._heap)
        return item, priority

    def peek(self) -> Tuple[T, float]:
        """
        Return the lowest-priority entry without removing it.

        Raises:
            IndexError: If the queue is empty.
        """
        if not self._heap:
            raise IndexError("peek into an empty priority queue")
        priority, _, item = self._heap[0]
        return item, priority

    def clear(self) -> None:
        self._heap.clear()
