# -*- coding: utf-8 -*-
"""Shared helpers for planner classes."""

from __future__ import annotations

from grids import OccupancyGrid


def as_grid(grid) -> OccupancyGrid:
    """Accept an OccupancyGrid or any 2D array-like (non-zero = blocked)."""
    if isinstance(grid, OccupancyGrid):
        return grid
    return OccupancyGrid.from_array(grid)
