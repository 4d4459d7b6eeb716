from collections.abc import Sequence
from typing import Protocol, runtime_checkable


@runtime_checkable
class SearchNode(Protocol):
    """
    Responsibilities:
      • Report the exact edge cost to an adjacent node.
      • Estimate the remaining cost to the goal (admissible, ideally consistent).
      • Enumerate the nodes it has edges to, looked up in the caller's collection.
      • Define node identity through __eq__ (tolerant for continuous positions).
    The engine reads `available` and owns the search-scoped fields g, f, h, prev.
    """

    g: float
    f: float
    h: float
    available: bool
    prev: "SearchNode | None"

    def distance(self, other: "SearchNode") -> float: ...
    def heuristic(self, other: "SearchNode") -> float: ...
    def successors(self, collection: Sequence["SearchNode"]) -> Sequence["SearchNode"]:
        """Every node this node has an edge to. Never contains self."""
