#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Dijkstra planner for 4-connected grid maps.
- Uniform edge relaxation, no heuristic (A* with h=0).
- With unit costs this expands cells in breadth-first order.
"""

from __future__ import annotations
from typing import Dict, Optional

from grids import Cell
from .grid_search import SearchMode, SearchResult, search
from .base import as_grid


class DijkstraPlanner:
    mode = SearchMode.UNIFORM

    def search(self, grid, start: Optional[Cell], goal: Optional[Cell]) -> SearchResult:
        return search(as_grid(grid), start, goal, self.mode)

    def plan(self, grid, start: Optional[Cell], goal: Optional[Cell]) -> Dict:
        return self.search(grid, start, goal).as_dict()
