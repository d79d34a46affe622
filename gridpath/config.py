"""Grid configuration with sensible defaults."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from gridpath.core.enums import HeuristicMode
from gridpath.core.terrain import TerrainCatalog
from gridpath.systems.rng import SEED_MAX, SEED_MIN

if TYPE_CHECKING:
    from gridpath.systems.seeding import SeedRules


@dataclass(frozen=True)
class GridConfig:
    """Immutable configuration for building a grid and querying it."""

    # World
    seed: int = 42
    grid_width: int = 10        # extent is [-grid_width, +grid_width]
    grid_height: int = 10       # extent is [-grid_height, +grid_height]
    cell_pitch: int = 1

    # Seeding (percent of candidate cells)
    wall_percent: float = 20.0
    water_percent: float = 10.0

    # Terrain costs
    floor_cost: int = 10
    water_cost: int = 30
    bridge_cost: int = 10

    # Search
    heuristic: HeuristicMode = HeuristicMode.MANHATTAN_WEIGHTED

    # Agent marker: fixed spawn cell, or None for a random passable cell
    agent_start: tuple[int, int] | None = None

    # Logging
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if not SEED_MIN <= self.seed <= SEED_MAX:
            raise ValueError("seed must fit in a signed 64-bit integer")
        if not 0.0 <= self.wall_percent <= 100.0:
            raise ValueError("wall_percent must be within [0, 100]")
        if not 0.0 <= self.water_percent <= 100.0:
            raise ValueError("water_percent must be within [0, 100]")
        if self.cell_pitch < 1:
            raise ValueError("cell_pitch must be a positive integer")
        for name in ("floor_cost", "water_cost", "bridge_cost"):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} must be a positive integer")
        # Accept the plain string form from CLI flags / JSON.
        object.__setattr__(self, "heuristic", HeuristicMode(self.heuristic))

    def catalog(self) -> TerrainCatalog:
        return TerrainCatalog.from_costs(
            floor=self.floor_cost,
            water=self.water_cost,
            bridge=self.bridge_cost,
        )

    def seed_rules(self) -> SeedRules:
        from gridpath.systems.seeding import SeedRules

        return SeedRules(wall_percent=self.wall_percent, water_percent=self.water_percent)
