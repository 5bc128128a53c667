#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
generator.py
------------
2D occupancy grids for the search engine.

- Cells are addressed as (col, row) pairs, 0-indexed.
- The backing array is (H, W) bool: True = blocked, False = free,
  indexed cells[row, col].
- Grids are read-only once built; "regenerating" always produces a fresh
  array, never edits an existing one.
- Reproducibility: explicit np.random.Generator, or a seed to build one.

Usage (quick smoke test):
    python3 -m grids.generator
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional, Tuple

import numpy as np

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]  # (col, row)

# Sentinel for "start/end not chosen yet"
UNSET: Optional[Cell] = None

DEFAULT_OBSTACLE_PROBABILITY = 0.2

BLOCKED_CHAR = "#"
FREE_CHAR = "."
# Markers accepted (and read as free) when parsing hand-drawn layouts
FREE_MARKERS = frozenset(".SG*o ")


# ------------------------------- Data classes ------------------------------- #

@dataclass(frozen=True)
class OccupancyGrid:
    """Immutable occupancy map: True = blocked, False = free."""
    cells: np.ndarray           # (H, W) read-only bool array
    settings: Dict = field(default_factory=dict, compare=False)

    def __post_init__(self):
        # Private copy; the caller's array stays writeable
        cells = np.array(self.cells, copy=True)
        if cells.ndim != 2 or cells.size == 0:
            raise ValueError(f"Grid must be a non-empty 2D array, got shape {cells.shape}")
        if cells.dtype != bool:
            raise TypeError(f"Grid cells must be bool, got {cells.dtype}")
        cells.setflags(write=False)
        object.__setattr__(self, "cells", cells)

    @classmethod
    def from_array(cls, array: Iterable, settings: Optional[Dict] = None) -> "OccupancyGrid":
        """Copy any 2D array-like (non-zero = blocked) into a read-only grid."""
        cells = np.asarray(array, dtype=bool)
        return cls(cells=cells, settings=dict(settings or {}))

    @property
    def shape(self) -> Tuple[int, int]:
        return self.cells.shape

    @property
    def width(self) -> int:
        return int(self.cells.shape[1])

    @property
    def height(self) -> int:
        return int(self.cells.shape[0])

    @property
    def blocked_count(self) -> int:
        return int(self.cells.sum())

    @property
    def free_count(self) -> int:
        return int(self.cells.size - self.cells.sum())

    @property
    def density(self) -> float:
        return self.blocked_count / float(self.cells.size)

    def in_bounds(self, cell: Cell) -> bool:
        return is_within_bounds(cell, self.width, self.height)

    def is_free(self, cell: Cell) -> bool:
        return is_free(self, cell)

    def is_blocked(self, cell: Cell) -> bool:
        x, y = cell
        return bool(self.cells[y, x])

    def to_text(self) -> str:
        rows = []
        for row in self.cells:
            rows.append("".join(BLOCKED_CHAR if v else FREE_CHAR for v in row))
        return "\n".join(rows)

    def __eq__(self, other) -> bool:
        if not isinstance(other, OccupancyGrid):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self.cells, other.cells))


# ------------------------------ Predicates --------------------------------- #

def is_within_bounds(cell: Cell, width: int, height: int) -> bool:
    x, y = cell
    return (0 <= x < width) and (0 <= y < height)


def is_free(grid: OccupancyGrid, cell: Cell) -> bool:
    """False for out-of-bounds or blocked cells."""
    if not is_within_bounds(cell, grid.width, grid.height):
        return False
    x, y = cell
    return not grid.cells[y, x]


# ------------------------------ Generation --------------------------------- #

def _check_dimension(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return int(value)


def generate_grid(
    width: int,
    height: int,
    obstacle_probability: float = DEFAULT_OBSTACLE_PROBABILITY,
    seed: Optional[int] = None,
    *,
    rng: Optional[np.random.Generator] = None,
) -> OccupancyGrid:
    """
    Create a random occupancy grid.

    Every cell is blocked independently with probability `obstacle_probability`.
    Nothing is reserved for start/goal and connectivity is not guaranteed;
    an unreachable goal is a normal search outcome.

    Either pass `seed` (deterministic) or an existing `rng`; with neither the
    result is non-deterministic.
    """
    width = _check_dimension("width", width)
    height = _check_dimension("height", height)
    p = float(obstacle_probability)
    if not (0.0 <= p <= 1.0):
        raise ValueError(f"obstacle_probability must be in [0, 1], got {obstacle_probability}")
    if seed is not None and rng is not None:
        raise ValueError("Pass either seed or rng, not both")

    rng = rng or np.random.default_rng(seed)
    cells = rng.random((height, width)) < p

    grid = OccupancyGrid(
        cells=cells,
        settings=dict(width=width, height=height, obstacle_probability=p, seed=seed),
    )
    logger.debug("Generated %dx%d grid (p=%.3f): %d blocked cells",
                 width, height, p, grid.blocked_count)
    return grid


def parse_grid(text: str) -> OccupancyGrid:
    """
    Build a grid from an ASCII layout, one row per line.
    '#' is blocked; '.', 'S', 'G', '*', 'o' and spaces are free.
    Blank leading/trailing lines are ignored; an empty line inside the
    layout is a ragged row.
    """
    lines = text.strip("\n").splitlines()
    if not lines:
        raise ValueError("Empty grid layout")
    width = len(lines[0])
    rows = []
    for i, ln in enumerate(lines):
        if len(ln) != width:
            raise ValueError(f"Row {i} has length {len(ln)}, expected {width}")
        row = []
        for ch in ln:
            if ch == BLOCKED_CHAR:
                row.append(True)
            elif ch in FREE_MARKERS:
                row.append(False)
            else:
                raise ValueError(f"Unknown cell character {ch!r} in row {i}")
        rows.append(row)
    return OccupancyGrid.from_array(rows, settings=dict(width=width, height=len(rows), source="text"))


# ---------------------------------- Demo ------------------------------------ #

if __name__ == "__main__":
    grid = generate_grid(15, 15, DEFAULT_OBSTACLE_PROBABILITY, seed=123)
    print("Grid:", grid.shape, "blocked:", grid.blocked_count, f"density: {grid.density:.2f}")
    print(grid.to_text())
