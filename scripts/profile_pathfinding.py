#!/usr/bin/env python3
"""Pathfinder profiler.

Usage:
    python scripts/profile_pathfinding.py --queries 500 --seed 42
    python scripts/profile_pathfinding.py --width 40 --height 40 --cprofile profile.prof
    python scripts/profile_pathfinding.py --heuristic octile

Reports:
    - Per-query timing statistics (min, max, mean, p50, p95, p99)
    - Found / not-found counts, mean route length and expanded-cell count
    - Throughput (queries/sec)
    - Optional: cProfile dump for flame graph generation
"""

from __future__ import annotations

import argparse
import cProfile
import io
import os
import pstats
import statistics
import sys
import time

# Ensure project root is on path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from gridpath.config import GridConfig
from gridpath.core.enums import Domain
from gridpath.pathfinding.astar import Pathfinder
from gridpath.systems.rng import DeterministicRNG
from gridpath.systems.seeding import initialize_grid


def _run_queries(cfg: GridConfig, num_queries: int) -> dict:
    """Build one grid and time *num_queries* random passable-to-passable searches."""
    grid, _ = initialize_grid(cfg)
    pf = Pathfinder(grid, cfg.heuristic)
    rng = DeterministicRNG(cfg.seed + 1)
    free = [c.coord for c in grid.cells() if c.passable]

    times: list[float] = []
    route_lens: list[int] = []
    expanded: list[int] = []
    found = 0
    for i in range(num_queries):
        a = free[rng.next_int(Domain.AGENT, i, 0, 0, len(free) - 1)]
        b = free[rng.next_int(Domain.AGENT, i, 1, 0, len(free) - 1)]
        t0 = time.perf_counter()
        result = pf.search(a, b)
        times.append(time.perf_counter() - t0)
        expanded.append(len(result.expanded))
        if result.found:
            found += 1
            route_lens.append(len(result.route))

    return {
        "cells": len(grid),
        "times": times,
        "found": found,
        "route_lens": route_lens,
        "expanded": expanded,
    }


def _pct(data: list[float], p: float) -> float:
    ordered = sorted(data)
    idx = min(len(ordered) - 1, int(len(ordered) * p))
    return ordered[idx]


def _report(stats: dict) -> None:
    times_ms = [t * 1000 for t in stats["times"]]
    total = sum(stats["times"])
    n = len(times_ms)
    print(f"\n=== Pathfinding profile ({stats['cells']} cells, {n} queries) ===")
    print(f"  min   {min(times_ms):8.3f} ms")
    print(f"  mean  {statistics.mean(times_ms):8.3f} ms")
    print(f"  p50   {_pct(times_ms, 0.50):8.3f} ms")
    print(f"  p95   {_pct(times_ms, 0.95):8.3f} ms")
    print(f"  p99   {_pct(times_ms, 0.99):8.3f} ms")
    print(f"  max   {max(times_ms):8.3f} ms")
    print(f"  found {stats['found']}/{n}")
    if stats["route_lens"]:
        print(f"  mean route length  {statistics.mean(stats['route_lens']):.1f}")
    print(f"  mean expanded      {statistics.mean(stats['expanded']):.1f}")
    print(f"  throughput         {n / total if total else 0:.0f} queries/sec")


def main() -> None:
    parser = argparse.ArgumentParser(description="Profile the A* pathfinder")
    parser.add_argument("--queries", type=int, default=200)
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--width", type=int, default=20)
    parser.add_argument("--height", type=int, default=20)
    parser.add_argument("--walls", type=float, default=20.0)
    parser.add_argument("--water", type=float, default=10.0)
    parser.add_argument("--heuristic", type=str, default="manhattan_weighted",
                        choices=["manhattan_weighted", "octile"])
    parser.add_argument("--cprofile", type=str, default=None, help="Write cProfile stats to this file")
    args = parser.parse_args()

    cfg = GridConfig(
        seed=args.seed, grid_width=args.width, grid_height=args.height,
        wall_percent=args.walls, water_percent=args.water,
        heuristic=args.heuristic, log_level="WARNING",
    )

    if args.cprofile:
        profiler = cProfile.Profile()
        profiler.enable()
        stats = _run_queries(cfg, args.queries)
        profiler.disable()
        profiler.dump_stats(args.cprofile)
        buf = io.StringIO()
        pstats.Stats(profiler, stream=buf).sort_stats("cumulative").print_stats(15)
        print(buf.getvalue())
    else:
        stats = _run_queries(cfg, args.queries)

    _report(stats)


if __name__ == "__main__":
    main()
