#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
run_search.py
-------------
Generate (or load) one grid, search it with A* and/or Dijkstra, print the
result as ASCII and optionally save a figure.

Example:
    python -m cli.run_search --size 15x15 --density 0.2 --seed 7 \
        --start 0,0 --end 14,14 --mode both --out path.png

Exit status: 0 when a path was found, 1 when not, 2 on bad arguments.
Cells are given as col,row.
"""

from __future__ import annotations
import argparse
import logging
import sys
from dataclasses import replace
from typing import List, Optional, Tuple

from grids import Cell, parse_grid, same_region
from planners import SearchMode
from planners.metrics import path_metrics

from .config import DEFAULT_SESSION_CONFIG
from .session import PlannerSession

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


# -------------------- helpers -------------------- #

def parse_size(s: str) -> Tuple[int, int]:
    """'WxH' -> (width, height)."""
    token = s.strip().lower()
    if "x" not in token:
        raise argparse.ArgumentTypeError(f"Bad size '{s}', expected like 15x15")
    w, h = token.split("x", 1)
    try:
        width, height = int(w), int(h)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Bad size '{s}', expected like 15x15")
    if width <= 0 or height <= 0:
        raise argparse.ArgumentTypeError(f"Size must be positive, got '{s}'")
    return width, height


def parse_cell(s: str) -> Cell:
    """'col,row' -> (col, row)."""
    parts = s.split(",")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"Bad cell '{s}', expected like 3,4")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        raise argparse.ArgumentTypeError(f"Bad cell '{s}', expected like 3,4")


def parse_density(s: str) -> float:
    token = s.strip()
    try:
        val = float(token[:-1]) / 100.0 if token.endswith("%") else float(token)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Bad density '{s}'")
    if not (0.0 <= val <= 1.0):
        raise argparse.ArgumentTypeError(f"Density must be in [0, 1], got '{s}'")
    return val


def _modes(arg: str) -> List[SearchMode]:
    if arg == "both":
        return [SearchMode.HEURISTIC, SearchMode.UNIFORM]
    return [SearchMode.parse(arg)]


def build_parser() -> argparse.ArgumentParser:
    cfg = DEFAULT_SESSION_CONFIG
    ap = argparse.ArgumentParser(description="Find a shortest 4-connected path on an occupancy grid.")
    ap.add_argument("--size", type=parse_size, default=(cfg.grid_width, cfg.grid_height),
                    help="Grid size as WIDTHxHEIGHT (default %(default)s)")
    ap.add_argument("--density", type=parse_density, default=cfg.obstacle_probability,
                    help="Obstacle probability per cell (0-1 or %%, e.g. 20%%)")
    ap.add_argument("--seed", type=int, default=None, help="RNG seed (default: time-derived)")
    ap.add_argument("--grid-file", type=str, default=None,
                    help="Read the grid from an ASCII file ('#' blocked, '.' free) instead of generating")
    ap.add_argument("--start", type=parse_cell, default=None, help="Start cell col,row (default 0,0)")
    ap.add_argument("--end", type=parse_cell, default=None, help="End cell col,row (default: bottom-right)")
    ap.add_argument("--mode", type=str, default=cfg.mode,
                    choices=["a_star", "dijkstra", "both"], help="Search strategy")
    ap.add_argument("--out", type=str, default=None, help="Save a PNG of the grid and path here")
    ap.add_argument("--no-ascii", action="store_true", help="Don't print the grid")
    ap.add_argument("--log-level", type=str, default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return ap


# -------------------- main -------------------- #

def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)

    if args.grid_file:
        try:
            with open(args.grid_file, "r") as f:
                grid = parse_grid(f.read())
        except (OSError, ValueError) as e:
            ap.error(f"Could not read grid from {args.grid_file}: {e}")
        logger.info("Loaded %dx%d grid from %s", grid.width, grid.height, args.grid_file)
        session = PlannerSession(grid=grid)
    else:
        width, height = args.size
        cfg = replace(DEFAULT_SESSION_CONFIG, grid_width=width, grid_height=height,
                      obstacle_probability=args.density, seed=args.seed)
        session = PlannerSession(cfg)

    start = args.start if args.start is not None else (0, 0)
    end = args.end if args.end is not None else (session.width - 1, session.height - 1)
    if not session.set_start(start):
        ap.error(f"--start {start} outside {session.width}x{session.height} grid")
    if not session.set_end(end):
        ap.error(f"--end {end} outside {session.width}x{session.height} grid")

    print(f"Grid {session.width}x{session.height}, {session.grid.blocked_count} blocked"
          + (f", seed {session.seed}" if session.seed is not None else ""))
    print(f"Start {session.start}  End {session.end}  "
          f"connected: {same_region(session.grid, session.start, session.end)}")

    found = False
    shown_path: List[Cell] = []
    for mode in _modes(args.mode):
        session.use_mode(mode)
        path = session.find_path()
        res = session.last_result
        m = path_metrics(path)
        print(f"{mode.value:9} {res.status:11} hops={m['hops']:4d} turns={m['turns']:3d} "
              f"expanded={res.expanded:5d} pushed={res.pushed:5d}")
        if res.success and not found:
            shown_path = path
        found = found or res.success

    if not args.no_ascii:
        from .render import format_ascii
        print(format_ascii(session.grid, session.start, session.end, shown_path))

    if args.out:
        from .render import save_grid_figure
        title = f"{args.mode}: {'success' if found else 'no path'}"
        save_grid_figure(args.out, session.grid, session.start, session.end, shown_path, title=title)
        print(f"Saved: {args.out}")

    return 0 if found else 1


if __name__ == "__main__":
    sys.exit(main())
