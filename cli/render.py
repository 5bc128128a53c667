#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Rendering of grids, endpoints and paths.

- format_ascii(): terminal view ('#' blocked, '.' free, 'S'/'G' endpoints, '*' path)
- render_grid(): matplotlib view, safe for servers (Agg backend)
"""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from grids import Cell, OccupancyGrid

# --- Colors ------------------------------------------------------------------
FREE_RGB = (0.86, 0.86, 0.86)
BLOCKED_RGB = (0.31, 0.31, 0.31)
PATH_RGB = (0.39, 0.78, 1.0)


def format_ascii(grid: OccupancyGrid,
                 start: Optional[Cell] = None,
                 end: Optional[Cell] = None,
                 path: Optional[Sequence[Cell]] = None) -> str:
    chars = [["#" if v else "." for v in row] for row in grid.cells]
    for x, y in path or ():
        chars[y][x] = "*"
    if start is not None:
        chars[start[1]][start[0]] = "S"
    if end is not None:
        chars[end[1]][end[0]] = "G"
    return "\n".join("".join(row) for row in chars)


def render_grid(grid: OccupancyGrid,
                start: Optional[Cell] = None,
                end: Optional[Cell] = None,
                path: Optional[Sequence[Cell]] = None,
                ax=None,
                title: Optional[str] = None):
    """
    Draw the grid on `ax` (a new figure if None) and return the axes.

    Layers:
      - free (light grey) / blocked (dark grey) cells
      - path cells (light blue) and a line through their centres
      - start (green star), goal (red star)
    """
    H, W = grid.shape
    if ax is None:
        _, ax = plt.subplots(figsize=(max(W / 3, 3), max(H / 3, 3)), dpi=120)

    rgb = np.empty((H, W, 3), dtype=float)
    rgb[:] = FREE_RGB
    rgb[grid.cells] = BLOCKED_RGB
    if path:
        xs, ys = zip(*path)
        rgb[list(ys), list(xs)] = PATH_RGB

    ax.imshow(rgb, interpolation="nearest", origin="upper")
    ax.set_xticks([]); ax.set_yticks([])

    if path and len(path) > 1:
        ax.plot(xs, ys, color="tab:blue", lw=2, alpha=0.8)
    if start is not None:
        ax.plot(start[0], start[1], marker="*", markersize=10, markeredgecolor="k", markerfacecolor="lime", lw=0)
    if end is not None:
        ax.plot(end[0], end[1], marker="*", markersize=10, markeredgecolor="k", markerfacecolor="red", lw=0)
    if title:
        ax.set_title(title, fontsize=9)
    return ax


def save_grid_figure(path_out: str, grid: OccupancyGrid, start=None, end=None, path=None, title=None) -> str:
    fig, ax = plt.subplots(figsize=(max(grid.width / 3, 3), max(grid.height / 3, 3)), dpi=120)
    render_grid(grid, start, end, path, ax=ax, title=title)
    fig.tight_layout()
    fig.savefig(path_out, bbox_inches="tight")
    plt.close(fig)
    return path_out
