"""Grid systems: RNG, seeding, editing, agent movement."""

from gridpath.systems.rng import DeterministicRNG
from gridpath.systems.seeding import SeedReport, SeedRules, initialize_grid, seed_terrain
from gridpath.systems.editor import GridEditor
from gridpath.systems.agent import AgentWalker

__all__ = [
    "AgentWalker",
    "DeterministicRNG",
    "GridEditor",
    "SeedReport",
    "SeedRules",
    "initialize_grid",
    "seed_terrain",
]
