#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Configuration defaults for the interactive session and command-line tools.
"""

from dataclasses import dataclass
from typing import Optional

from grids import DEFAULT_OBSTACLE_PROBABILITY
from planners import SearchMode


@dataclass
class SessionConfig:
    """Grid size, obstacle density and display scale for a PlannerSession."""
    grid_width: int = 15
    grid_height: int = 15
    obstacle_probability: float = DEFAULT_OBSTACLE_PROBABILITY
    cell_size: int = 40               # pixels per cell when mapping clicks
    mode: str = SearchMode.HEURISTIC.value
    seed: Optional[int] = None        # None = pick a time-derived seed per regenerate()

    def __post_init__(self):
        if self.grid_width <= 0 or self.grid_height <= 0:
            raise ValueError(f"Grid size must be positive, got {self.grid_width}x{self.grid_height}")
        if not (0.0 <= self.obstacle_probability <= 1.0):
            raise ValueError(f"obstacle_probability must be in [0, 1], got {self.obstacle_probability}")
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")
        self.mode = SearchMode.parse(self.mode).value


DEFAULT_SESSION_CONFIG = SessionConfig()
