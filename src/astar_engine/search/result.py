# search/result.py
from collections.abc import Iterator

from astar_engine.search.protocols import SearchNode


class ResultView:
    """
    Read-only view of a finished search's path, goal first.

    Each iteration starts over at the goal and follows `prev` until the start
    (the node without a predecessor). Iterating never mutates the nodes, so the
    view can be consumed any number of times.
    """

    def __init__(self, goal: SearchNode | None = None):
        self._goal = goal

    def __iter__(self) -> Iterator:
        node = self._goal
        while node is not None:
            yield node
            node = node.prev

    def __bool__(self) -> bool:
        return self._goal is not None

    def __len__(self) -> int:
        return sum(1 for _ in self)
