# src/astar_engine/io/config.py
from pathlib import Path

from astar_engine.config.models import GridModel, ScenarioModel

# 5 wide x 10 tall; shortest path from (0,0) to (4,9) has weight 15
REFERENCE_BLOCKED = [
    (2, 0), (4, 0),
    (0, 1), (2, 1),
    (0, 2), (3, 2), (4, 2),
    (0, 3), (1, 3), (4, 3),
    (1, 5), (2, 5),
    (4, 7),
    (1, 8), (3, 8),
    (1, 9),
]  # fmt: skip


def reference_scenario() -> ScenarioModel:
    return ScenarioModel(
        name="reference",
        grid=GridModel(width=5, height=10, blocked=REFERENCE_BLOCKED),
        start=(0, 0),
        finish=(4, 9),
    )


def load_scenario(path: str | Path) -> ScenarioModel:
    return ScenarioModel.model_validate_json(Path(path).read_text())
