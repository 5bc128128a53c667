#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import pytest

from cli import DEFAULT_SESSION_CONFIG, PlannerSession, SessionConfig
from grids import parse_grid
from planners import SearchMode


def test_default_config_matches_classic_layout():
    cfg = DEFAULT_SESSION_CONFIG
    assert (cfg.grid_width, cfg.grid_height, cfg.cell_size) == (15, 15, 40)
    assert cfg.obstacle_probability == pytest.approx(0.2)
    assert cfg.mode == "a_star"


def test_config_validation():
    with pytest.raises(ValueError):
        SessionConfig(grid_width=0)
    with pytest.raises(ValueError):
        SessionConfig(obstacle_probability=2.0)
    with pytest.raises(ValueError):
        SessionConfig(cell_size=0)
    with pytest.raises(ValueError):
        SessionConfig(mode="bfs")
    assert SessionConfig(mode="ucs").mode == "dijkstra"


def test_seeded_session_is_reproducible():
    a = PlannerSession(SessionConfig(grid_width=12, grid_height=9, seed=4))
    b = PlannerSession(SessionConfig(grid_width=12, grid_height=9, seed=4))
    assert a.grid == b.grid
    assert a.seed == 4
    assert (a.width, a.height) == (12, 9)


def test_unseeded_regenerate_records_time_seed():
    s = PlannerSession(SessionConfig(grid_width=5, grid_height=5))
    assert isinstance(s.seed, int)
    assert s.grid.settings["seed"] == s.seed


def test_find_path_before_endpoints_is_empty():
    s = PlannerSession(SessionConfig(seed=0))
    assert s.find_path() == []
    assert s.last_result.status == "unconfigured"
    s.set_start((0, 0))
    assert s.find_path() == []


def test_set_endpoints_ignores_off_grid_cells():
    s = PlannerSession(SessionConfig(grid_width=6, grid_height=4, seed=1))
    assert s.set_start((2, 3))
    assert not s.set_start((6, 0))
    assert not s.set_end((0, 4))
    assert not s.set_end(None)
    assert s.start == (2, 3) and s.end is None


def test_cell_at_maps_pixels_to_cells():
    s = PlannerSession(SessionConfig(grid_width=15, grid_height=15, cell_size=40, seed=0))
    assert s.cell_at(0, 0) == (0, 0)
    assert s.cell_at(39, 41) == (0, 1)
    assert s.cell_at(599, 599) == (14, 14)
    assert s.cell_at(600, 10) is None      # beyond the grid, e.g. the button panel
    assert s.cell_at(-1, 10) is None


def test_session_flow_on_loaded_grid():
    grid = parse_grid("""
.....
.###.
.....
""")
    s = PlannerSession(grid=grid)
    assert (s.config.grid_width, s.config.grid_height) == (5, 3)
    s.set_start((0, 1))
    s.set_end((4, 1))
    for mode in ("a_star", "dijkstra"):
        assert s.use_mode(mode) is SearchMode.parse(mode)
        path = s.find_path()
        assert len(path) == 7
        assert s.path == path
        assert s.last_result.success


def test_regenerate_clears_path_but_keeps_endpoints():
    s = PlannerSession(SessionConfig(grid_width=8, grid_height=8, obstacle_probability=0.0, seed=0))
    s.set_start((0, 0))
    s.set_end((7, 7))
    assert len(s.find_path()) == 15
    old = s.grid
    s.regenerate(seed=99)
    assert s.path == [] and s.last_result is None
    assert s.start == (0, 0) and s.end == (7, 7)
    assert s.grid is not old
    assert s.seed == 99


def test_clear_resets_state():
    s = PlannerSession(SessionConfig(obstacle_probability=0.0, seed=0))
    s.set_start((0, 0)); s.set_end((1, 0))
    s.find_path()
    s.clear()
    assert s.start is None and s.end is None and s.path == []


def test_regenerate_without_argument_reuses_config_seed():
    s = PlannerSession(SessionConfig(grid_width=20, grid_height=20, seed=4))
    first = s.grid
    s.regenerate()
    assert s.seed == 4
    assert s.grid == first
    s.regenerate(seed=5)
    assert s.seed == 5
