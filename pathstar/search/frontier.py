import heapq
import itertools
from dataclasses import dataclass, field
from typing import Hashable, List


@dataclass(order=True)
class _FrontierNode:
    """
    Represents an open node in the A* search tree. Ordered by priority, then by
    insertion sequence.
    """

    priority: float
    sequence: int
    node: Hashable = field(compare=False)


class Frontier:
    """
    A binary-heap priority queue of open nodes. Entries with equal priority are
    popped first-in, first-out. The same node may be pushed more than once; it is
    up to the caller to skip stale entries.
    """

    def __init__(self) -> None:
        self._heap: List[_FrontierNode] = []
        self._counter = itertools.count()

    def push(self, node: Hashable, priority: float) -> None:
        heapq.heappush(self._heap, _FrontierNode(priority, next(self._counter), node))

    def pop(self) -> Hashable:
        if not self._heap:
            raise IndexError("pop from an empty frontier")
        return heapq.heappop(self._heap).node

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
