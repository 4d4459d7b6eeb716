# search/frontier.py
"""Open and closed sets of an A* search.

Both sets hold non-owning references into the caller's collection. Membership
is decided by node identity (`==`), never by the `f` ordering key. Lookups scan
linearly unless a `key` callable is given, in which case a dict index keyed by
`key(node)` is kept alongside; `key` must agree with `==`.
"""

import heapq
from collections.abc import Callable, Hashable, Iterator
from dataclasses import dataclass, field
from typing import Any

IdentityKey = Callable[[Any], Hashable]


@dataclass(order=True)
class OpenEntry:
    f: float
    seq: int
    node: Any = field(compare=False)
    alive: bool = field(default=True, compare=False)


class OpenSet:
    """Min-`f` priority set; equal `f` pops FIFO by insertion sequence."""

    def __init__(self, key: IdentityKey | None = None):
        self._q: list[OpenEntry] = []
        self._seq = 0
        self._live = 0
        self._key = key
        self._index: dict[Hashable, OpenEntry] = {}

    def __len__(self) -> int:
        return self._live

    def __contains__(self, node) -> bool:
        return self.find(node) is not None

    def __iter__(self) -> Iterator:
        return (e.node for e in sorted(self._q) if e.alive)

    def clear(self) -> None:
        self._q.clear()
        self._index.clear()
        self._live = 0

    def push(self, node) -> OpenEntry:
        self._seq += 1
        entry = OpenEntry(node.f, self._seq, node)
        heapq.heappush(self._q, entry)
        if self._key is not None:
            self._index[self._key(node)] = entry
        self._live += 1
        return entry

    def find(self, node) -> OpenEntry | None:
        if self._key is not None:
            return self._index.get(self._key(node))
        for entry in self._q:
            if entry.alive and node == entry.node:
                return entry
        return None

    def erase(self, entry: OpenEntry) -> None:
        if not entry.alive:
            return
        entry.alive = False
        self._live -= 1
        if self._key is not None:
            self._index.pop(self._key(entry.node), None)

    def peek(self):
        self._prune()
        return self._q[0].node if self._q else None

    def pop(self):
        self._prune()
        if not self._q:
            raise IndexError("pop from empty open set")
        entry = heapq.heappop(self._q)
        self.erase(entry)
        return entry.node

    def _prune(self) -> None:
        # drop erased entries sitting on top of the heap
        while self._q and not self._q[0].alive:
            heapq.heappop(self._q)


class ClosedSet:
    """Finalized nodes. Membership is permanent for one search."""

    def __init__(self, key: IdentityKey | None = None):
        self._nodes: list = []
        self._key = key
        self._index: set[Hashable] = set()

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator:
        return iter(self._nodes)

    def __contains__(self, node) -> bool:
        if self._key is not None:
            return self._key(node) in self._index
        return any(node == closed for closed in self._nodes)

    def clear(self) -> None:
        self._nodes.clear()
        self._index.clear()

    def add(self, node) -> None:
        self._nodes.append(node)
        if self._key is not None:
            self._index.add(self._key(node))
