# algorithms/frontier.py
import heapq
from collections.abc import Hashable


class PriorityFrontier:
    """
    Min-priority work queue for the live search.

    Backed by a binary heap of (priority, seq, item). Equal priorities pop in
    insertion order. There is no decrease-key: pushing an item again with a
    smaller priority leaves the old entry in place, and the caller skips it
    when it surfaces (lazy deletion).
    """

    def __init__(self):
        self._heap: list[tuple[float, int, Hashable]] = []
        self._seq = 0

    def __len__(self) -> int:
        return len(self._heap)

    def push(self, item: Hashable, priority: float) -> None:
        self._seq += 1
        heapq.heappush(self._heap, (priority, self._seq, item))

    def pop_min(self) -> tuple[Hashable, float]:
        if not self._heap:
            raise IndexError("pop from empty frontier")
        priority, _, item = heapq.heappop(self._heap)
        return item, priority

    def is_empty(self) -> bool:
        return not self._heap
