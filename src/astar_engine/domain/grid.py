"""Rectangular tile world used by the demo driver and the tests.

Nodes are laid out row-major (`x + width * y`) so a node can compute the
positions of its neighbours without holding references to them.
"""

from __future__ import annotations

import math
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

import numpy as np

from astar_engine.config.models import GridModel, Tile
from astar_engine.search.node import NodeBase

# E, W, S, N
_ORTHOGONAL = ((1, 0), (-1, 0), (0, 1), (0, -1))
_DIAGONAL = ((1, 1), (-1, 1), (1, -1), (-1, -1))


@dataclass(frozen=True)
class GridShape:
    width: int
    height: int
    diagonal: bool = False
    tolerance: float = sys.float_info.epsilon

    def index(self, x: int, y: int) -> int:
        return x + self.width * y


class GridNode(NodeBase):
    def __init__(self, x: float, y: float, shape: GridShape, *, blocked: bool = False):
        super().__init__(available=not blocked)
        self.x, self.y = float(x), float(y)
        self.shape = shape

    @property
    def pos(self) -> Tile:
        return round(self.x), round(self.y)

    def distance(self, other: GridNode) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def heuristic(self, other: GridNode) -> float:
        # straight-line distance never overestimates a walk between tiles
        return self.distance(other)

    def successors(self, collection: Sequence[GridNode]) -> list[GridNode]:
        s = self.shape
        x, y = self.pos
        moves = _ORTHOGONAL + _DIAGONAL if s.diagonal else _ORTHOGONAL
        out = []
        for dx, dy in moves:
            nx, ny = x + dx, y + dy
            if 0 <= nx < s.width and 0 <= ny < s.height:
                out.append(collection[s.index(nx, ny)])
        return out

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GridNode):
            return NotImplemented
        tol = self.shape.tolerance
        return abs(self.x - other.x) < tol and abs(self.y - other.y) < tol

    __hash__ = None

    def __repr__(self) -> str:
        return f"GridNode({self.x:g}, {self.y:g})"

    def describe(self) -> str:
        return f"{self.x:.2f} {self.y:.2f} g({self.g:.2f}) f({self.f:.2f})"


class GridWorld:
    def __init__(self, shape: GridShape, blocked: Iterable[Tile] = ()):
        self.shape = shape
        walls = {tuple(t) for t in blocked}
        self.nodes: list[GridNode] = [
            GridNode(x, y, shape, blocked=(x, y) in walls)
            for y in range(shape.height)
            for x in range(shape.width)
        ]

    # ---------------- constructors ---------------------

    @classmethod
    def from_model(cls, cfg: GridModel) -> GridWorld:
        shape = GridShape(cfg.width, cfg.height, diagonal=cfg.diagonal, tolerance=cfg.tolerance)
        return cls(shape, cfg.blocked)

    @classmethod
    def from_layout(cls, text: str, *, diagonal: bool = False) -> GridWorld:
        """Parse rows of characters; `#` marks a blocked tile, anything else is open."""
        rows = [line.strip() for line in text.strip().splitlines() if line.strip()]
        if not rows:
            raise ValueError("empty layout")
        width = len(rows[0])
        if any(len(r) != width for r in rows):
            raise ValueError("layout rows must all have the same width")
        blocked = [(x, y) for y, row in enumerate(rows) for x, ch in enumerate(row) if ch == "#"]
        return cls(GridShape(width, len(rows), diagonal=diagonal), blocked)

    @classmethod
    def from_occupancy(cls, occupancy: np.ndarray, *, diagonal: bool = False) -> GridWorld:
        """occupancy[y, x] == True => tile blocked"""
        occ = np.asarray(occupancy, dtype=bool)
        height, width = occ.shape
        blocked = [(int(x), int(y)) for y, x in np.argwhere(occ)]
        return cls(GridShape(width, height, diagonal=diagonal), blocked)

    @classmethod
    def random(
        cls,
        width: int,
        height: int,
        density: float,
        rng: np.random.Generator,
        *,
        diagonal: bool = False,
    ) -> GridWorld:
        return cls.from_occupancy(rng.random((height, width)) < density, diagonal=diagonal)

    # ---------------------------------------------------

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self):
        return iter(self.nodes)

    def node(self, x: int, y: int) -> GridNode:
        if not (0 <= x < self.shape.width and 0 <= y < self.shape.height):
            raise IndexError(f"tile ({x}, {y}) outside {self.shape.width}x{self.shape.height} grid")
        return self.nodes[self.shape.index(x, y)]

    def render(self, path: Sequence[GridNode] = ()) -> str:
        """Draw the grid; `o` start, `x` finish, `*` path, `#` blocked, `.` open."""
        marks = {n.pos: "*" for n in path}
        if path:
            marks[path[-1].pos] = "x"
            marks[path[0].pos] = "o"
        lines = []
        for y in range(self.shape.height):
            row = []
            for x in range(self.shape.width):
                n = self.node(x, y)
                row.append(marks.get((x, y), "." if n.available else "#"))
            lines.append("".join(row))
        return "\n".join(lines)
