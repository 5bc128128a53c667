#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
PlannerSession: the state a front-end keeps between user actions.

Mirrors the buttons of an interactive grid editor:
  Generate Grid -> regenerate()
  Set Start     -> set_start(cell) / set_start(session.cell_at(px, py))
  Set End       -> set_end(...)
  Use A*        -> use_mode("a_star")
  Use Dijkstra  -> use_mode("dijkstra")
  Find Path     -> find_path()

The grid and search engine stay stateless; everything mutable lives here.
"""

from __future__ import annotations

import logging
import time
from dataclasses import replace
from typing import List, Optional

from grids import Cell, OccupancyGrid, generate_grid, is_within_bounds
from planners import SearchMode, SearchResult, search

from .config import DEFAULT_SESSION_CONFIG, SessionConfig

logger = logging.getLogger(__name__)


def _time_seed() -> int:
    return time.time_ns() % 2**32


class PlannerSession:
    def __init__(self, config: Optional[SessionConfig] = None, grid: Optional[OccupancyGrid] = None):
        self.config = replace(config or DEFAULT_SESSION_CONFIG)
        self.start: Optional[Cell] = None   # Will be set by user
        self.end: Optional[Cell] = None     # Will be set by user
        self.mode = SearchMode.parse(self.config.mode)
        self.path: List[Cell] = []
        self.last_result: Optional[SearchResult] = None
        self.seed: Optional[int] = None
        if grid is not None:
            self.grid = grid
            self.config.grid_width, self.config.grid_height = grid.width, grid.height
        else:
            self.regenerate(self.config.seed)

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    def regenerate(self, seed: Optional[int] = None) -> OccupancyGrid:
        """
        Replace the grid wholesale and drop the stale path; start/end are kept.
        Seed precedence: argument, then config.seed, then a time-derived seed.
        """
        if seed is None:
            seed = self.config.seed
        self.seed = _time_seed() if seed is None else int(seed)
        self.grid = generate_grid(
            self.config.grid_width,
            self.config.grid_height,
            self.config.obstacle_probability,
            seed=self.seed,
        )
        self.path = []
        self.last_result = None
        logger.info("New %dx%d grid (seed=%d, %d blocked)",
                    self.grid.width, self.grid.height, self.seed, self.grid.blocked_count)
        return self.grid

    def cell_at(self, px: int, py: int) -> Optional[Cell]:
        """Map a pixel position to the grid cell under it, or None if off the grid."""
        if px < 0 or py < 0:
            return None
        cell = (int(px) // self.config.cell_size, int(py) // self.config.cell_size)
        return cell if is_within_bounds(cell, self.width, self.height) else None

    def set_start(self, cell: Optional[Cell]) -> bool:
        if cell is None or not is_within_bounds(cell, self.width, self.height):
            logger.debug("Ignoring start outside grid: %s", cell)
            return False
        self.start = (int(cell[0]), int(cell[1]))
        return True

    def set_end(self, cell: Optional[Cell]) -> bool:
        if cell is None or not is_within_bounds(cell, self.width, self.height):
            logger.debug("Ignoring end outside grid: %s", cell)
            return False
        self.end = (int(cell[0]), int(cell[1]))
        return True

    def use_mode(self, mode) -> SearchMode:
        self.mode = SearchMode.parse(mode)
        return self.mode

    def find_path(self) -> List[Cell]:
        self.last_result = search(self.grid, self.start, self.end, self.mode)
        self.path = self.last_result.path
        logger.info("%s %s -> %s: %s (%d cells)", self.mode.value, self.start, self.end,
                    self.last_result.status, len(self.path))
        return self.path

    def clear(self) -> None:
        self.start = None
        self.end = None
        self.path = []
        self.last_result = None
