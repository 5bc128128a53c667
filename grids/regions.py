#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Connected regions of free space.

Independent of the search engine: labels 4-connected free components with
scipy.ndimage so callers can tell "unreachable" apart from a planner bug.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

try:
    from scipy.ndimage import label as cc_label
except Exception as e:
    raise ImportError(
        "scipy.ndimage is required. Install with: pip install scipy"
    ) from e

from .generator import Cell, OccupancyGrid, is_within_bounds

# 4-connected structuring element (no diagonal moves)
STRUCTURE_4 = np.array([[0, 1, 0],
                        [1, 1, 1],
                        [0, 1, 0]], dtype=bool)


def label_free_regions(grid: OccupancyGrid) -> Tuple[np.ndarray, int]:
    """
    Returns (labels, n): labels is (H, W) int32, 0 on blocked cells and
    1..n on free cells, one id per 4-connected component.
    """
    labels, n = cc_label(~grid.cells, structure=STRUCTURE_4)
    return labels.astype(np.int32), int(n)


def same_region(grid: OccupancyGrid, a: Cell, b: Cell) -> bool:
    """
    True if a and b are free and joined by a 4-connected free path.
    a == b is always True, blocked or not, matching the search engine's
    start == end shortcut.
    """
    for cell in (a, b):
        if not is_within_bounds(cell, grid.width, grid.height):
            raise ValueError(f"Cell {cell} outside {grid.width}x{grid.height} grid")
    if a == b:
        return True
    labels, _ = label_free_regions(grid)
    la = labels[a[1], a[0]]
    lb = labels[b[1], b[0]]
    return bool(la > 0 and la == lb)
