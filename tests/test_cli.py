#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import csv
import os

import pytest

from cli import benchmark, plot_bench, run_search
from cli.render import format_ascii, render_grid
from grids import parse_grid


def test_run_search_open_grid(capsys, tmp_path):
    out = tmp_path / "path.png"
    rc = run_search.main(["--size", "6x4", "--density", "0", "--seed", "3",
                          "--mode", "both", "--out", str(out)])
    assert rc == 0
    text = capsys.readouterr().out
    assert "a_star" in text and "dijkstra" in text
    assert "hops=   8" in text
    assert "seed 3" in text
    assert out.exists() and out.stat().st_size > 0


def test_run_search_grid_file_without_path(capsys, tmp_path):
    f = tmp_path / "grid.txt"
    f.write_text("..#..\n..#..\n..#..\n")
    rc = run_search.main(["--grid-file", str(f), "--start", "0,0", "--end", "4,2"])
    assert rc == 1
    text = capsys.readouterr().out
    assert "unreachable" in text
    assert "connected: False" in text


def test_run_search_rejects_bad_arguments(tmp_path):
    with pytest.raises(SystemExit) as e:
        run_search.main(["--size", "5x5", "--seed", "0", "--start", "9,9"])
    assert e.value.code == 2
    with pytest.raises(SystemExit) as e:
        run_search.main(["--size", "0x5"])
    assert e.value.code == 2
    with pytest.raises(SystemExit) as e:
        run_search.main(["--density", "1.5"])
    assert e.value.code == 2
    with pytest.raises(SystemExit) as e:
        run_search.main(["--grid-file", str(tmp_path / "missing.txt")])
    assert e.value.code == 2


def test_parse_helpers():
    assert run_search.parse_size("20x10") == (20, 10)
    assert run_search.parse_cell("3,4") == (3, 4)
    assert run_search.parse_density("25%") == pytest.approx(0.25)


def test_format_ascii_marks_endpoints_and_path():
    grid = parse_grid("...\n.#.")
    text = format_ascii(grid, (0, 0), (2, 1), [(0, 0), (1, 0), (2, 0), (2, 1)])
    assert text == "S**\n.#G"


def test_render_grid_returns_axes():
    grid = parse_grid("..\n#.")
    ax = render_grid(grid, (0, 0), (1, 1), [(0, 0), (1, 0), (1, 1)], title="t")
    assert ax.get_title() == "t"


def test_benchmark_and_plot(tmp_path, capsys):
    rc = benchmark.main(["--sizes", "8x6", "--densities", "0.0,0.3", "--num-grids", "3",
                         "--seed", "1", "--outdir", str(tmp_path), "--no-progress"])
    assert rc == 0
    csvs = [p for p in os.listdir(tmp_path) if p.endswith(".csv")]
    assert len(csvs) == 1
    with open(tmp_path / csvs[0], newline="") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 1 * 2 * 3 * 2
    assert all(r["agrees"] == "1" for r in rows)
    open_rows = [r for r in rows if float(r["density"]) == 0.0]
    assert all(r["success"] == "1" and r["path_hops"] == "12" for r in open_rows)

    summary = plot_bench.main(str(tmp_path / csvs[0]))
    assert set(summary["planner"]) == {"a_star", "dijkstra"}
    assert (tmp_path / "bench_expanded_bar.png").exists()
    assert (tmp_path / "bench_time_bar.png").exists()


def test_benchmark_rejects_unknown_planner(tmp_path):
    with pytest.raises(SystemExit) as e:
        benchmark.main(["--planners", "a_star,bfs", "--outdir", str(tmp_path)])
    assert e.value.code == 2
