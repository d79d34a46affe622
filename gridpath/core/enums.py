"""Enumerations used throughout the pathfinder."""

from __future__ import annotations

from enum import Enum, IntEnum, unique

from gridpath.core.errors import InvalidTerrainKind


@unique
class TerrainKind(IntEnum):
    """Tile terrain on the grid."""

    FLOOR = 0
    WATER = 1
    WALL = 2
    BRIDGE = 4

    @classmethod
    def parse(cls, value: TerrainKind | int | str) -> TerrainKind:
        """Resolve a member, its int value or its (case-insensitive) name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise InvalidTerrainKind(value)
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError:
                raise InvalidTerrainKind(value) from None
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                raise InvalidTerrainKind(value) from None
        raise InvalidTerrainKind(value)


@unique
class HeuristicMode(str, Enum):
    """Heuristic / neighbour-model pairings supported by the pathfinder."""

    MANHATTAN_WEIGHTED = "manhattan_weighted"  # 4-directional
    OCTILE = "octile"                          # 8-directional


@unique
class Domain(IntEnum):
    """RNG domains for deterministic randomness isolation."""

    WALLS = 0
    WATER = 1
    AGENT = 2
