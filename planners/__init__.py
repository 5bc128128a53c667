# -*- coding: utf-8 -*-
"""
Planners on grid maps with a unified API:
planner.plan(grid: OccupancyGrid | np.ndarray[bool], start: (col,row), goal: (col,row))
  -> {'success': bool, 'path': List[(col,row)] or None}

The functional entry point is find_path(grid, start, end, mode) -> List[(col,row)].
"""

from __future__ import annotations
from typing import Dict, Type

from .grid_search import (
    NO_PARENT,
    SearchMode,
    SearchNode,
    SearchResult,
    find_path,
    manhattan,
    search,
)
from .a_star import AStarPlanner
from .dijkstra import DijkstraPlanner

# Mapping used by factories/CLIs
PLANNERS: Dict[str, Type] = {
    SearchMode.HEURISTIC.value: AStarPlanner,
    SearchMode.UNIFORM.value: DijkstraPlanner,
}


def make_planner(name):
    """Instantiate a planner by mode name or alias ('a_star', 'astar', 'dijkstra', 'ucs', ...)."""
    return PLANNERS[SearchMode.parse(name).value]()


__all__ = [
    "AStarPlanner",
    "DijkstraPlanner",
    "PLANNERS",
    "make_planner",
    "NO_PARENT",
    "SearchMode",
    "SearchNode",
    "SearchResult",
    "find_path",
    "manhattan",
    "search",
]
