# astar_engine/search/node.py
from collections.abc import Iterable


class NodeBase:
    """Default search-scoped fields for node types.

    Subclasses supply distance, heuristic, successors and __eq__.
    """

    def __init__(self, *, available: bool = True):
        self.available = available
        self.g = 0.0
        self.f = 0.0
        self.h = -1.0  # not yet estimated
        self.prev: NodeBase | None = None


def reset_nodes(collection: Iterable) -> None:
    """Clear g/f/h/prev on every node so the collection can be searched again."""
    for node in collection:
        node.g, node.f, node.h, node.prev = 0.0, 0.0, -1.0, None
