#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Best-first search on 4-connected occupancy grids, shared by A* and Dijkstra.

- Unit step cost; moves are right, left, down, up (in that order).
- Priority is g + h in HEURISTIC mode (h = Manhattan distance to the goal),
  and g alone in UNIFORM mode (h forced to 0).
- Ties on priority are broken FIFO by insertion order.
- Nodes are never re-prioritised: a better route to a queued cell is pushed
  as a new entry, and stale entries are dropped when popped.
- Search nodes live in a per-call list; `parent` is an index into it.

Returns a SearchResult; `find_path` returns just the path (empty = no path).
"""

from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

import numpy as np

from grids import Cell, OccupancyGrid, is_free, is_within_bounds

logger = logging.getLogger(__name__)

NO_PARENT = -1

# (dx, dy) neighbour order
MOVES_4: Tuple[Tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))

STATUS_UNCONFIGURED = "unconfigured"
STATUS_UNREACHABLE = "unreachable"
STATUS_SUCCESS = "success"


class SearchMode(str, Enum):
    HEURISTIC = "a_star"
    UNIFORM = "dijkstra"

    @classmethod
    def parse(cls, value) -> "SearchMode":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            if key in _MODE_ALIASES:
                return _MODE_ALIASES[key]
        raise ValueError(f"Unknown search mode {value!r}; expected one of {sorted(_MODE_ALIASES)}")


_MODE_ALIASES: Dict[str, SearchMode] = {
    "a_star": SearchMode.HEURISTIC,
    "astar": SearchMode.HEURISTIC,
    "a*": SearchMode.HEURISTIC,
    "heuristic": SearchMode.HEURISTIC,
    "dijkstra": SearchMode.UNIFORM,
    "uniform": SearchMode.UNIFORM,
    "ucs": SearchMode.UNIFORM,
}


@dataclass
class SearchNode:
    cell: Cell
    cost: int
    heuristic: int
    parent: int = NO_PARENT

    @property
    def priority(self) -> int:
        return self.cost + self.heuristic


@dataclass
class SearchResult:
    status: str                       # "unconfigured" | "unreachable" | "success"
    path: List[Cell] = field(default_factory=list)
    mode: Optional[SearchMode] = None
    expanded: int = 0                 # cells finalized
    pushed: int = 0                   # frontier insertions, duplicates included

    @property
    def success(self) -> bool:
        return self.status == STATUS_SUCCESS

    @property
    def cost(self) -> int:
        return len(self.path) - 1 if self.path else 0

    def as_dict(self) -> Dict:
        return {"success": self.success, "path": list(self.path) if self.success else None}


def manhattan(a: Cell, b: Cell) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def _check_cell(name: str, cell, grid: OccupancyGrid) -> Cell:
    if not isinstance(cell, (tuple, list)) or len(cell) != 2:
        raise ValueError(f"{name} must be a (col, row) pair, got {cell!r}")
    x, y = cell
    if isinstance(x, bool) or isinstance(y, bool) \
            or not isinstance(x, (int, np.integer)) or not isinstance(y, (int, np.integer)):
        raise ValueError(f"{name} must hold integers, got {cell!r}")
    cell = (int(x), int(y))
    if not is_within_bounds(cell, grid.width, grid.height):
        raise ValueError(f"{name} {cell} outside {grid.width}x{grid.height} grid")
    return cell


def _reconstruct(nodes: List[SearchNode], idx: int) -> List[Cell]:
    path: List[Cell] = []
    while idx != NO_PARENT:
        node = nodes[idx]
        path.append(node.cell)
        idx = node.parent
    path.reverse()
    return path


def search(grid: OccupancyGrid,
           start: Optional[Cell],
           end: Optional[Cell],
           mode=SearchMode.HEURISTIC) -> SearchResult:
    mode = SearchMode.parse(mode)
    if start is None or end is None:
        return SearchResult(status=STATUS_UNCONFIGURED, mode=mode)
    start = _check_cell("start", start, grid)
    end = _check_cell("end", end, grid)

    use_h = mode is SearchMode.HEURISTIC

    def h(cell: Cell) -> int:
        return manhattan(cell, end) if use_h else 0

    nodes: List[SearchNode] = [SearchNode(start, 0, h(start))]
    visited = np.zeros(grid.shape, dtype=bool)
    seq = 0
    frontier: List[Tuple[int, int, int]] = [(nodes[0].priority, seq, 0)]  # (priority, seq, node index)
    expanded = 0

    while frontier:
        _, _, idx = heapq.heappop(frontier)
        current = nodes[idx]
        x, y = current.cell

        if current.cell == end:
            path = _reconstruct(nodes, idx)
            logger.debug("%s: reached %s from %s in %d steps (expanded=%d, pushed=%d)",
                         mode.value, end, start, len(path) - 1, expanded, len(nodes))
            return SearchResult(status=STATUS_SUCCESS, path=path, mode=mode,
                                expanded=expanded, pushed=len(nodes))

        # Stale duplicate
        if visited[y, x]:
            continue
        visited[y, x] = True
        expanded += 1

        for dx, dy in MOVES_4:
            n = (x + dx, y + dy)
            if not is_free(grid, n) or visited[n[1], n[0]]:
                continue
            nodes.append(SearchNode(n, current.cost + 1, h(n), idx))
            seq += 1
            heapq.heappush(frontier, (nodes[-1].priority, seq, len(nodes) - 1))

    logger.debug("%s: no path from %s to %s (expanded=%d, pushed=%d)",
                 mode.value, start, end, expanded, len(nodes))
    return SearchResult(status=STATUS_UNREACHABLE, mode=mode, expanded=expanded, pushed=len(nodes))


def find_path(grid: OccupancyGrid,
              start: Optional[Cell],
              end: Optional[Cell],
              mode=SearchMode.HEURISTIC) -> List[Cell]:
    """Shortest 4-connected path start..end inclusive, or [] if unset/unreachable."""
    return search(grid, start, end, mode).path
