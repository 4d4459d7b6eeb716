import sys
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator

Tile = tuple[int, int]


class SearchModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    # relaxations whose cost delta is within this band keep the recorded path
    tolerance: float = sys.float_info.epsilon
    max_expansions: int | None = None

    @field_validator("tolerance")
    @classmethod
    def _nonneg(cls, v: float) -> float:
        if v < 0:
            raise ValueError("tolerance must be >= 0")
        return v

    @field_validator("max_expansions")
    @classmethod
    def _positive(cls, v: int | None) -> int | None:
        if v is not None and v <= 0:
            raise ValueError("max_expansions must be > 0")
        return v


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    sample_every: int = 1


# ----------------- GRID ---------------------


class GridModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    width: int
    height: int
    blocked: list[Tile] = Field(default_factory=list)
    diagonal: bool = False
    tolerance: float = sys.float_info.epsilon  # coordinate equality

    @field_validator("width", "height")
    @classmethod
    def _dims(cls, v: int, info: ValidationInfo) -> int:
        if v <= 0:
            raise ValueError(f"{info.field_name} must be > 0")
        return v

    @model_validator(mode="after")
    def _check_blocked(self):
        for tile in self.blocked:
            if not self.contains(tile):
                raise ValueError(f"blocked tile {tile} outside {self.width}x{self.height} grid")
        return self

    def contains(self, tile: Tile) -> bool:
        x, y = tile
        return 0 <= x < self.width and 0 <= y < self.height


# ------------------------------------------------------------------


class ScenarioModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    run_id: str = "local"
    grid: GridModel
    start: Tile = (0, 0)
    finish: Tile
    search: SearchModel = SearchModel()
    log: LogModel = LogModel()

    @model_validator(mode="after")
    def _check_endpoints(self):
        for label, tile in (("start", self.start), ("finish", self.finish)):
            if not self.grid.contains(tile):
                raise ValueError(
                    f"{label} {tile} outside {self.grid.width}x{self.grid.height} grid"
                )
        return self
