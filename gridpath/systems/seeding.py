"""Random terrain seeding and agent spawning for a fresh grid.

Walls are drawn first, without replacement, from every non-reserved cell.
Water is then drawn, again without replacement, from the cells the wall
pass left over, so a wall is never turned into water.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from gridpath.core.enums import Domain, TerrainKind
from gridpath.core.grid import Grid
from gridpath.core.models import Vector2
from gridpath.systems.rng import DeterministicRNG

if TYPE_CHECKING:
    from gridpath.config import GridConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SeedRules:
    """Percentages of candidate cells to convert (0-100)."""

    wall_percent: float = 0.0
    water_percent: float = 0.0

    def __post_init__(self) -> None:
        for name in ("wall_percent", "water_percent"):
            value = getattr(self, name)
            if not 0.0 <= value <= 100.0:
                raise ValueError(f"{name} must be within [0, 100], got {value}")


@dataclass(frozen=True)
class SeedReport:
    """Cells converted by one seeding pass, in draw order."""

    walls: tuple[Vector2, ...]
    water: tuple[Vector2, ...]


def _draw(
    available: list[Vector2],
    count: int,
    rng: DeterministicRNG,
    domain: Domain,
) -> list[Vector2]:
    """Remove and return *count* coordinates from *available*, without replacement."""
    picked: list[Vector2] = []
    for i in range(count):
        idx = rng.next_int(domain, i, len(available), 0, len(available) - 1)
        # swap-remove keeps the draw O(1)
        picked.append(available[idx])
        available[idx] = available[-1]
        available.pop()
    return picked


def seed_terrain(
    grid: Grid,
    rng: DeterministicRNG,
    rules: SeedRules,
    reserved: Iterable[Vector2] = (),
) -> SeedReport:
    """Convert a share of the grid's cells to WALL, then a share of the rest to WATER."""
    reserved_set = set(reserved)
    for pos in reserved_set:
        grid.cell_at(pos)  # OutOfBounds for a bad reservation
    available = [pos for pos in grid.coords() if pos not in reserved_set]
    candidates = len(available)

    wall_count = math.floor(len(available) * rules.wall_percent / 100.0)
    walls = _draw(available, wall_count, rng, Domain.WALLS)
    for pos in walls:
        grid.set_terrain(pos, TerrainKind.WALL)

    water_count = math.floor(len(available) * rules.water_percent / 100.0)
    water: list[Vector2] = []
    for pos in _draw(available, water_count, rng, Domain.WATER):
        if grid.get(pos) == TerrainKind.WALL:
            continue
        grid.set_terrain(pos, TerrainKind.WATER)
        water.append(pos)

    logger.debug(
        "Seeded %d walls and %d water cells (%d candidates, %d reserved)",
        len(walls), len(water), candidates, len(reserved_set),
    )
    return SeedReport(walls=tuple(walls), water=tuple(water))


def spawn_agent(grid: Grid, rng: DeterministicRNG) -> Vector2 | None:
    """Pick a random passable cell for the agent marker, or None if there is none."""
    free = [c.coord for c in grid.cells() if c.passable]
    if not free:
        return None
    return free[rng.next_int(Domain.AGENT, 0, len(free), 0, len(free) - 1)]


def initialize_grid(
    config: GridConfig,
    rng: DeterministicRNG | None = None,
) -> tuple[Grid, Vector2 | None]:
    """Build the configured grid at FLOOR, seed it, and place the agent marker."""
    rng = rng or DeterministicRNG(config.seed)
    grid = Grid.centered(config.grid_width, config.grid_height, config.cell_pitch, config.catalog())

    reserved: tuple[Vector2, ...] = ()
    if config.agent_start is not None:
        reserved = (Vector2(*config.agent_start),)

    report = seed_terrain(grid, rng, config.seed_rules(), reserved)

    agent = reserved[0] if reserved else spawn_agent(grid, rng)
    logger.info(
        "Built %d-cell grid (seed=%d): %d walls, %d water, agent at %s",
        len(grid), rng.seed, len(report.walls), len(report.water), agent,
    )
    return grid, agent
