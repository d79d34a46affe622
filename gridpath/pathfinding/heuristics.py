"""Heuristic estimates of the remaining cost to the goal.

Each heuristic is paired with a neighbour model in ``Pathfinder``:

- MANHATTAN_WEIGHTED: 4-directional. Lattice distance scaled by the movement
  cost of the cell the estimate is taken from. This is a coarse
  approximation, not a true weighted distance: it ignores the terrain
  between the cell and the goal, and over-estimates from expensive cells.
- OCTILE: 8-directional, unweighted. Diagonal step ~ 10 * sqrt(2) -> 14.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from gridpath.core.enums import HeuristicMode

if TYPE_CHECKING:
    from gridpath.core.grid import Grid
    from gridpath.core.models import Vector2

STRAIGHT_COST = 10
DIAGONAL_COST = 14

Heuristic = Callable[["Grid", "Vector2", "Vector2"], int]


def _steps(grid: Grid, a: Vector2, b: Vector2) -> tuple[int, int]:
    return abs(a.x - b.x) // grid.pitch, abs(a.y - b.y) // grid.pitch


def manhattan_weighted(grid: Grid, a: Vector2, b: Vector2) -> int:
    dx, dy = _steps(grid, a, b)
    return (dx + dy) * grid.movement_cost(a)


def octile(grid: Grid, a: Vector2, b: Vector2) -> int:
    dx, dy = _steps(grid, a, b)
    lo, hi = min(dx, dy), max(dx, dy)
    return lo * DIAGONAL_COST + (hi - lo) * STRAIGHT_COST


HEURISTICS: dict[HeuristicMode, Heuristic] = {
    HeuristicMode.MANHATTAN_WEIGHTED: manhattan_weighted,
    HeuristicMode.OCTILE: octile,
}


def uses_diagonals(mode: HeuristicMode) -> bool:
    """Whether the neighbour model paired with *mode* expands diagonals."""
    return mode is HeuristicMode.OCTILE
