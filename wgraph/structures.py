
# wgraph/structures.py


from __future__ import annotations
import heapq
import itertools
from typing import Callable, List, NamedTuple, Optional, Tuple, Union

from . import config
from .errors import EmptyContainer, InvalidArgument

Priority = Union[int, float]


class Queue:
    """
    FIFO of ints on a circular buffer.
    - capacity doubles when full; growth keeps element order
    """

    def __init__(self, capacity: Optional[int] = None) -> None:
        cap = config.QUEUE_INITIAL_CAPACITY if capacity is None else capacity
        cap = max(1, cap)
        self._buf: List[int] = [0] * cap
        self._front = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._buf)

    def _grow(self) -> None:
        cap = len(self._buf)
        # unroll from front so the oldest item lands at index 0
        self._buf = [self._buf[(self._front + i) % cap] for i in range(self._size)] + [0] * cap
        self._front = 0

    def enqueue(self, x: int) -> None:
        if self._size == len(self._buf):
            self._grow()
        rear = (self._front + self._size) % len(self._buf)
        self._buf[rear] = x
        self._size += 1

    def dequeue(self) -> int:
        if self._size == 0:
            raise EmptyContainer("queue", "dequeue")
        item = self._buf[self._front]
        self._front = (self._front + 1) % len(self._buf)
        self._size -= 1
        return item

    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size


class PQItem(NamedTuple):
    vertex: int
    priority: Priority


class PriorityQueue:
    """
    Min-priority queue on an unordered list.

    extract_min scans every item (O(n)) and fills the hole with the last item,
    so equal priorities come out in storage order, not insertion order.
    The same vertex may be queued several times; consumers drop stale entries.
    """

    def __init__(self) -> None:
        self._items: List[PQItem] = []

    def insert(self, vertex: int, priority: Priority) -> None:
        self._items.append(PQItem(vertex, priority))

    def extract_min(self) -> PQItem:
        items = self._items
        if not items:
            raise EmptyContainer("priority queue", "extract_min")
        min_index = 0
        for i in range(1, len(items)):
            if items[i].priority < items[min_index].priority:
                min_index = i
        best = items[min_index]
        last = items.pop()
        if min_index < len(items):
            items[min_index] = last
        return best

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


class HeapPriorityQueue:
    """Drop-in PriorityQueue backed by heapq; ties go to the earliest insert."""

    def __init__(self) -> None:
        self._heap: List[Tuple[Priority, int, int]] = []
        self._seq = itertools.count()

    def insert(self, vertex: int, priority: Priority) -> None:
        heapq.heappush(self._heap, (priority, next(self._seq), vertex))

    def extract_min(self) -> PQItem:
        if not self._heap:
            raise EmptyContainer("priority queue", "extract_min")
        priority, _, vertex = heapq.heappop(self._heap)
        return PQItem(vertex, priority)

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)


PriorityQueueFactory = Callable[[], Union[PriorityQueue, HeapPriorityQueue]]

_BACKENDS = {
    "linear": PriorityQueue,
    "heap": HeapPriorityQueue,
}


def priority_queue_factory(backend: Optional[str] = None) -> PriorityQueueFactory:
    """Resolve a backend name ("linear" or "heap"); None means config.PRIORITY_QUEUE_BACKEND."""
    name = config.PRIORITY_QUEUE_BACKEND if backend is None else backend
    try:
        return _BACKENDS[name]
    except KeyError:
        allowed = ", ".join(config.PRIORITY_QUEUE_BACKENDS)
        raise InvalidArgument("priority queue backend", name, f"allowed: {allowed}") from None


class UnionFind:
    """
    Disjoint sets over 0..n-1 with path compression and union by rank.
    Indices are not validated; pass only vertices of the owning graph.
    """

    def __init__(self, n: int) -> None:
        self._size = n
        self.parent: List[int] = []
        self.rank: List[int] = []
        self._sets = 0
        self.make_set()

    def make_set(self) -> None:
        # every element becomes its own root again
        self.parent = list(range(self._size))
        self.rank = [0] * self._size
        self._sets = self._size

    @property
    def set_count(self) -> int:
        return self._sets

    def find(self, x: int) -> int:
        parent = self.parent
        root = x
        while parent[root] != root:
            root = parent[root]
        while parent[x] != root:
            parent[x], x = root, parent[x]
        return root

    def union_sets(self, x: int, y: int) -> bool:
        root_x = self.find(x)
        root_y = self.find(y)
        if root_x == root_y:
            return False
        if self.rank[root_x] < self.rank[root_y]:
            self.parent[root_x] = root_y
        elif self.rank[root_x] > self.rank[root_y]:
            self.parent[root_y] = root_x
        else:
            self.parent[root_y] = root_x
            self.rank[root_x] += 1
        self._sets -= 1
        return True

    def connected(self, x: int, y: int) -> bool:
        return self.find(x) == self.find(y)

    def __len__(self) -> int:
        return self._size
