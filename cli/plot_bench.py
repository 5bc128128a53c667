#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Summarise a benchmark CSV (from cli.benchmark) into two bar charts:
expanded cells and runtime per planner and grid size.

Example:
    python -m cli.plot_bench results/csv/bench_s0_20260101_120000.csv
"""

import os
import sys

import pandas as pd
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt


def summarise(df: pd.DataFrame) -> pd.DataFrame:
    df = df.copy()
    df["size"] = df["W"].astype(str) + "x" + df["H"].astype(str)
    return (df.groupby(["planner", "size"])
              .agg(success=("success", "mean"),
                   expanded=("expanded", "mean"),
                   expanded_std=("expanded", "std"),
                   time_s=("time_s", "mean"),
                   time_std=("time_s", "std"))
              .reset_index())


def _bar(summary: pd.DataFrame, col: str, err: str, ylabel: str, title: str, out: str):
    pivot = summary.pivot(index="size", columns="planner", values=col)
    errs = summary.pivot(index="size", columns="planner", values=err).fillna(0.0)
    ax = pivot.plot.bar(yerr=errs, figsize=(7, 4), rot=0)
    ax.set_title(title)
    ax.set_xlabel("Grid size")
    ax.set_ylabel(ylabel)
    plt.tight_layout(); plt.savefig(out, bbox_inches="tight"); plt.close()
    print("Saved:", out)


def main(p):
    df = pd.read_csv(p)
    summary = summarise(df)
    print(summary.to_string(index=False))

    base = os.path.dirname(p)
    out1 = os.path.join(base, "bench_expanded_bar.png")
    _bar(summary, "expanded", "expanded_std", "Cells expanded", "Average cells expanded by planner", out1)
    out2 = os.path.join(base, "bench_time_bar.png")
    _bar(summary, "time_s", "time_std", "Time (s)", "Average runtime by planner", out2)
    return summary


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python -m cli.plot_bench <path/to/bench.csv>")
        raise SystemExit(1)
    main(sys.argv[1])
