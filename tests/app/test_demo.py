# tests/app/test_demo.py
import json

import pytest
from pydantic import ValidationError

from astar_engine.app.build import build
from astar_engine.app.demo import main
from astar_engine.config.models import ScenarioModel
from astar_engine.io.config import REFERENCE_BLOCKED, load_scenario, reference_scenario
from astar_engine.io.recorder import MemorySink, Recorder
from astar_engine.search.events import SearchFinished


def test_build_runs_reference_scenario():
    app = build(reference_scenario(), use_logging=False)
    assert app.search.successful()
    assert app.search.weight() == pytest.approx(15.0)
    assert app.start.pos == (0, 0) and app.finish.pos == (4, 9)


def test_build_accepts_mapping_and_indexed_frontier():
    cfg = {
        "name": "small",
        "grid": {"width": 4, "height": 3, "blocked": [(1, 0), (1, 1)]},
        "start": (0, 0),
        "finish": (3, 0),
        "search": {"max_expansions": 100},
    }
    app = build(cfg, use_logging=False, indexed=True)
    assert app.search.weight() == pytest.approx(7.0)


def test_build_with_recorder_collects_trace():
    sink = MemorySink()
    app = build(reference_scenario(), recorder=Recorder(sink))
    assert isinstance(sink.events[-1], SearchFinished)
    assert sink.events[-1].state == "found"
    assert sink.events[-1].weight == pytest.approx(app.search.weight())


def test_demo_prints_reference_path(capsys):
    assert main(["--quiet"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "4.00 9.00 g(15.00) f(15.00)"
    assert out[15] == "0.00 0.00 g(0.00) f(0.00)"
    assert out[16] == "Shortest path found with 15 weight."


def test_demo_debug_flag_logs_pops_and_relaxations(caplog):
    assert main(["--debug"]) == 0
    msgs = [r.getMessage() for r in caplog.records if r.name == "astar_engine"]
    assert "pop" in msgs and "relax" in msgs
    assert msgs[0] == "run_start" and msgs[-1] == "run_end"


def test_demo_renders_grid(capsys):
    assert main(["--quiet", "--render"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[-10][0] == "o" and out[-1][-1] == "x"


def test_demo_reports_missing_path(tmp_path, capsys):
    cfg = {
        "name": "walled",
        "grid": {"width": 3, "height": 3, "blocked": [[1, 0], [0, 1], [1, 1]]},
        "finish": [2, 2],
    }
    path = tmp_path / "walled.json"
    path.write_text(json.dumps(cfg))
    assert main(["--quiet", "--config", str(path)]) == 1
    assert capsys.readouterr().out.strip() == "No existing path."


def test_load_scenario_round_trips_reference(tmp_path):
    path = tmp_path / "ref.json"
    path.write_text(reference_scenario().model_dump_json())
    loaded = load_scenario(path)
    assert loaded.grid.blocked == REFERENCE_BLOCKED
    assert loaded.finish == (4, 9)


def test_scenario_rejects_out_of_bounds():
    with pytest.raises(ValidationError):
        ScenarioModel.model_validate(
            {"name": "bad", "grid": {"width": 2, "height": 2}, "finish": (2, 0)}
        )
    with pytest.raises(ValidationError):
        ScenarioModel.model_validate(
            {"name": "bad", "grid": {"width": 2, "height": 2, "blocked": [(5, 5)]}, "finish": (1, 1)}
        )
    with pytest.raises(ValidationError):
        ScenarioModel.model_validate({"name": "bad", "grid": {"width": 0, "height": 2}, "finish": (0, 0)})
    with pytest.raises(ValidationError):
        ScenarioModel.model_validate(
            {"name": "bad", "grid": {"width": 2, "height": 2}, "finish": (1, 1), "extra": 1}
        )
