# -*- coding: utf-8 -*-
"""
Grid model.
Exposes:
- OccupancyGrid (read-only dataclass from generator.py)
- generate_grid(...), parse_grid(...)
- is_within_bounds(...), is_free(...)
- label_free_regions(...), same_region(...)  (from regions.py)
"""

from __future__ import annotations

from .generator import (
    UNSET,
    Cell,
    DEFAULT_OBSTACLE_PROBABILITY,
    OccupancyGrid,
    generate_grid,
    is_free,
    is_within_bounds,
    parse_grid,
)
from .regions import label_free_regions, same_region

__all__ = [
    "UNSET",
    "Cell",
    "DEFAULT_OBSTACLE_PROBABILITY",
    "OccupancyGrid",
    "generate_grid",
    "parse_grid",
    "is_within_bounds",
    "is_free",
    "label_free_regions",
    "same_region",
]
