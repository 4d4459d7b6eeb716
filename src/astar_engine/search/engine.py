# search/engine.py
import time
from collections.abc import Iterator, Mapping, Sequence
from enum import Enum

from astar_engine.config.models import SearchModel
from astar_engine.search.frontier import ClosedSet, IdentityKey, OpenSet
from astar_engine.search.hooks import NoopHooks, SearchHooks
from astar_engine.search.protocols import SearchNode
from astar_engine.search.result import ResultView


class SearchState(Enum):
    RUNNING = "running"
    FOUND = "found"
    EXHAUSTED = "exhausted"
    ABORTED = "aborted"  # max_expansions reached


class SearchError(RuntimeError):
    pass


class SearchNotSuccessful(SearchError):
    pass


class AStar:
    """
    A* search over a caller-owned node collection.

    The search runs to completion on construction. Nodes must satisfy
    `SearchNode`; the engine writes their g, f, h and prev fields and keeps
    only non-owning references to them in its open and closed sets.

    Availability gates transit through a node, not occupancy of the endpoints:
    the start is never checked and the finish is admitted even when blocked.
    A strict check on every successor would only find a blocked finish when
    it is also the start.
    """

    def __init__(
        self,
        collection: Sequence[SearchNode],
        start: SearchNode,
        finish: SearchNode,
        *,
        config: SearchModel | Mapping | None = None,
        hooks: SearchHooks | None = None,
        key: IdentityKey | None = None,
    ):
        self.collection = collection
        self.start, self.finish = start, finish
        self.cfg = config if isinstance(config, SearchModel) else SearchModel.model_validate(config or {})
        self.open = OpenSet(key)
        self.closed = ClosedSet(key)
        self.state = SearchState.RUNNING
        self._goal: SearchNode | None = None
        self._hooks = hooks or NoopHooks()
        self.run()

    @property
    def expanded(self) -> int:
        return len(self.closed)

    def run(self) -> SearchState:
        if self.state is not SearchState.RUNNING:
            return self.state

        t0 = time.perf_counter()
        self._hooks.run_start(start=self.start, finish=self.finish)
        self.open.clear()
        self.closed.clear()
        self.start.g = 0.0
        self.start.prev = None
        self.open.push(self.start)

        limit = self.cfg.max_expansions
        while self.open:
            current = self.open.peek()
            if current == self.finish:
                self._goal = current
                self.state = SearchState.FOUND
                break
            if limit is not None and len(self.closed) >= limit:
                self.state = SearchState.ABORTED
                break
            self.open.pop()
            self.closed.add(current)
            self._hooks.pop(current, open_size=len(self.open), closed_size=len(self.closed))
            for successor in current.successors(self.collection):
                self.expand(current, successor)
        else:
            self.state = SearchState.EXHAUSTED

        self._hooks.run_end(
            state=self.state,
            expanded=len(self.closed),
            weight=self._goal.g if self._goal is not None else None,
            wall_ms=(time.perf_counter() - t0) * 1000,
        )
        return self.state

    def expand(self, current: SearchNode, successor: SearchNode) -> None:
        if successor in self.closed:
            self._hooks.skip(current, successor, reason="closed")
            return
        if not successor.available and successor != self.finish:
            self._hooks.skip(current, successor, reason="blocked")
            return

        g = current.g + current.distance(successor)
        entry = self.open.find(successor)
        if entry is not None:
            successor = entry.node
            delta = g - successor.g
            if delta > 0 or abs(delta) < self.cfg.tolerance:
                self._hooks.skip(current, successor, reason="no_improvement")
                return
            self.open.erase(entry)

        successor.prev = current
        successor.g = g
        successor.h = successor.heuristic(self.finish)
        successor.f = successor.h + g
        self.open.push(successor)
        self._hooks.relax(current, successor, g=g, improved=entry is not None)

    # ------------- results --------------------------

    def successful(self) -> bool:
        return self.state is SearchState.FOUND

    def weight(self) -> float:
        self._require_success()
        return self._goal.g

    def steps(self) -> int:
        """Number of edges on the path."""
        self._require_success()
        return len(self.result()) - 1

    def result(self) -> ResultView:
        return ResultView(self._goal)

    def __iter__(self) -> Iterator:
        return iter(self.result())

    def path(self) -> list[SearchNode]:
        """Nodes from start to goal; empty when no path was found."""
        return list(self.result())[::-1]

    def _require_success(self) -> None:
        if not self.successful():
            raise SearchNotSuccessful(f"search ended {self.state.value}, no path to finish")
