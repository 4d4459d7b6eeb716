# astar_engine/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from astar_engine.config.models import ScenarioModel
from astar_engine.domain.grid import GridNode, GridWorld
from astar_engine.io.recorder import Recorder
from astar_engine.io.search_logging import SearchLogging  # JSON logs
from astar_engine.search.engine import AStar
from astar_engine.search.hooks import NoopHooks, SearchHooks


@dataclass
class App:
    scenario: ScenarioModel
    world: GridWorld
    start: GridNode
    finish: GridNode
    hooks: SearchHooks
    search: AStar


def build(
    cfg: ScenarioModel | Mapping,
    *,
    use_logging: bool = True,
    recorder: Recorder | None = None,
    indexed: bool = False,
) -> App:
    # 0) Validate config
    model = cfg if isinstance(cfg, ScenarioModel) else ScenarioModel.model_validate(cfg)

    # 1) World
    world = GridWorld.from_model(model.grid)
    start, finish = world.node(*model.start), world.node(*model.finish)

    # 2) Hooks
    hooks = (
        SearchLogging(
            run_id=model.run_id,
            recorder=recorder,
            level=model.log.level,
            debug=model.log.debug,
            sample_every=model.log.sample_every,
        )
        if use_logging
        else NoopHooks()
    )

    # 3) Search (runs to completion)
    search = AStar(
        world.nodes,
        start,
        finish,
        config=model.search,
        hooks=hooks,
        key=(lambda n: n.pos) if indexed else None,
    )
    return App(model, world, start, finish, hooks, search)
