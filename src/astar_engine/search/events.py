"""Trace records emitted while a search runs (see io/search_logging.py)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NodeExpanded:
    node: str
    g: float
    f: float
    open_size: int
    closed_size: int


@dataclass(frozen=True)
class NodeRelaxed:
    current: str
    successor: str
    g: float
    f: float
    improved: bool  # a stale open entry was replaced


@dataclass(frozen=True)
class SearchFinished:
    state: str
    expanded: int
    weight: float | None
