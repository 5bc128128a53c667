#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
A* path planner for 4-connected grid maps.
- Obstacles are True in `grid`; free space is False.
- Heuristic: Manhattan distance (admissible and consistent for unit moves).
- Edge costs: 1 per orthogonal move.

Returns {'success': bool, 'path': list[(col,row)] or None}.
"""

from __future__ import annotations
from typing import Dict, Optional

from grids import Cell
from .grid_search import SearchMode, SearchResult, search
from .base import as_grid


class AStarPlanner:
    mode = SearchMode.HEURISTIC

    def search(self, grid, start: Optional[Cell], goal: Optional[Cell]) -> SearchResult:
        return search(as_grid(grid), start, goal, self.mode)

    def plan(self, grid, start: Optional[Cell], goal: Optional[Cell]) -> Dict:
        return self.search(grid, start, goal).as_dict()
