# -*- coding: utf-8 -*-
"""
Front-end layer and command-line entry points (run with `python -m cli.<name>`):

- run_search : generate/load one grid, search it, print ASCII, optional PNG
- benchmark  : A* vs Dijkstra over random grids, CSV + summary table
- plot_bench : bar charts from a benchmark CSV

PlannerSession (session.py) holds start/end/mode/path between user actions.
"""

from .config import DEFAULT_SESSION_CONFIG, SessionConfig
from .session import PlannerSession

__all__ = [
    "SessionConfig",
    "DEFAULT_SESSION_CONFIG",
    "PlannerSession",
    "run_search",
    "benchmark",
    "plot_bench",
]
