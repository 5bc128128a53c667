# -*- coding: utf-8 -*-
"""
Path metrics and sanity checks for 4-connected grid paths.
"""

from __future__ import annotations
from typing import Dict, List, Optional, Sequence

from grids import Cell, OccupancyGrid, is_free


def path_metrics(path: Optional[Sequence[Cell]]) -> Dict[str, int]:
    """Hops, cell count and number of direction changes of a (col,row) path."""
    if not path:
        return {"hops": 0, "cells": 0, "turns": 0}
    turns = 0
    prev_step = None
    for (x0, y0), (x1, y1) in zip(path[:-1], path[1:]):
        step = (x1 - x0, y1 - y0)
        if prev_step is not None and step != prev_step:
            turns += 1
        prev_step = step
    return {"hops": len(path) - 1, "cells": len(path), "turns": turns}


def path_problems(grid: OccupancyGrid,
                  path: Sequence[Cell],
                  start: Optional[Cell] = None,
                  end: Optional[Cell] = None) -> List[str]:
    """
    List everything wrong with `path` on `grid`; empty list means valid.

    Checks: each step is one orthogonal move, no blocked or out-of-bounds
    cell (the start cell is exempt, it is never tested for occupancy),
    no repeated cell, and the endpoints match `start`/`end` when given.
    """
    problems: List[str] = []
    if not path:
        return ["path is empty"]

    if start is not None and tuple(path[0]) != tuple(start):
        problems.append(f"path starts at {path[0]}, expected {start}")
    if end is not None and tuple(path[-1]) != tuple(end):
        problems.append(f"path ends at {path[-1]}, expected {end}")

    seen = set()
    for i, cell in enumerate(path):
        cell = tuple(cell)
        if cell in seen:
            problems.append(f"cell {cell} repeated at index {i}")
        seen.add(cell)
        if i > 0 and not is_free(grid, cell):
            problems.append(f"cell {cell} at index {i} is blocked or out of bounds")

    for i, ((x0, y0), (x1, y1)) in enumerate(zip(path[:-1], path[1:])):
        if abs(x1 - x0) + abs(y1 - y0) != 1:
            problems.append(f"step {i} from {(x0, y0)} to {(x1, y1)} is not an orthogonal unit move")
    return problems


def is_valid_path(grid: OccupancyGrid,
                  path: Sequence[Cell],
                  start: Optional[Cell] = None,
                  end: Optional[Cell] = None) -> bool:
    return not path_problems(grid, path, start, end)
