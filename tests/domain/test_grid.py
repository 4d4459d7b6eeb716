import numpy as np
import pytest

from astar_engine.config.models import GridModel
from astar_engine.domain.grid import GridNode, GridShape, GridWorld
from astar_engine.io.config import reference_scenario
from astar_engine.search.engine import AStar


def test_layout_parsing_marks_blocked_tiles():
    w = GridWorld.from_layout(
        """
        .#.
        ..#
        """
    )
    assert (w.shape.width, w.shape.height) == (3, 2)
    assert [n.pos for n in w if not n.available] == [(1, 0), (2, 1)]
    assert w.nodes[w.shape.index(2, 1)] is w.node(2, 1)


def test_ragged_layout_is_rejected():
    with pytest.raises(ValueError):
        GridWorld.from_layout("...\n..")
    with pytest.raises(ValueError):
        GridWorld.from_layout("   ")


def test_successors_east_west_south_north():
    w = GridWorld.from_layout("...\n...\n...")
    centre = w.node(1, 1)
    assert [n.pos for n in centre.successors(w.nodes)] == [(2, 1), (0, 1), (1, 2), (1, 0)]


def test_corner_successors_stay_in_bounds():
    w = GridWorld.from_layout("...\n...")
    assert [n.pos for n in w.node(0, 0).successors(w.nodes)] == [(1, 0), (0, 1)]
    assert [n.pos for n in w.node(2, 1).successors(w.nodes)] == [(1, 1), (2, 0)]


def test_diagonal_successors():
    w = GridWorld.from_layout("..\n..", diagonal=True)
    assert [n.pos for n in w.node(0, 0).successors(w.nodes)] == [(1, 0), (0, 1), (1, 1)]


def test_successors_include_blocked_neighbours():
    # availability is the engine's concern, not the node's
    w = GridWorld.from_layout(".#")
    assert [n.pos for n in w.node(0, 0).successors(w.nodes)] == [(1, 0)]


def test_equality_is_positional_with_tolerance():
    shape = GridShape(3, 3, tolerance=1e-9)
    a = GridNode(1.0, 2.0, shape)
    assert a == GridNode(1.0 + 1e-12, 2.0, shape)
    assert a != GridNode(1.0, 2.1, shape)
    assert a != "GridNode(1, 2)"


def test_distance_and_heuristic_are_euclidean():
    shape = GridShape(5, 5)
    a, b = GridNode(0, 0, shape), GridNode(3, 4, shape)
    assert a.distance(b) == pytest.approx(5.0)
    assert a.heuristic(b) == a.distance(b)


def test_from_model_and_occupancy_agree():
    cfg = GridModel(width=3, height=2, blocked=[(1, 0)])
    occ = np.array([[False, True, False], [False, False, False]])
    a, b = GridWorld.from_model(cfg), GridWorld.from_occupancy(occ)
    assert [n.available for n in a] == [n.available for n in b]


def test_random_grid_is_seeded():
    a = GridWorld.random(6, 4, 0.4, np.random.default_rng(7))
    b = GridWorld.random(6, 4, 0.4, np.random.default_rng(7))
    assert [n.available for n in a] == [n.available for n in b]
    assert len(a) == 24


def test_node_lookup_out_of_bounds():
    w = GridWorld.from_layout("..")
    with pytest.raises(IndexError):
        w.node(2, 0)


def test_describe_formats_position_and_costs():
    w = GridWorld.from_layout("...")
    AStar(w.nodes, w.node(0, 0), w.node(2, 0))
    assert w.node(1, 0).describe() == "1.00 0.00 g(1.00) f(2.00)"


def test_render_reference_path():
    world = GridWorld.from_model(reference_scenario().grid)
    search = AStar(world.nodes, world.node(0, 0), world.node(4, 9))
    rows = world.render(search.path()).splitlines()
    assert len(rows) == 10 and all(len(r) == 5 for r in rows)
    assert rows[0][0] == "o" and rows[9][4] == "x"
    assert rows[0][2] == "#"
    assert sum(r.count("*") for r in rows) == 14
    assert world.render().splitlines()[0] == "..#.#"


def test_render_single_node_path_marks_start():
    world = GridWorld.from_layout("..")
    search = AStar(world.nodes, world.node(0, 0), world.node(0, 0))
    assert world.render(search.path()) == "o."
