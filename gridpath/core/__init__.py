"""Core data models and grid representation."""

from gridpath.core.enums import Domain, HeuristicMode, TerrainKind
from gridpath.core.errors import BlockedCell, GridError, InvalidTerrainKind, OutOfBounds
from gridpath.core.models import Bounds, Cell, Vector2
from gridpath.core.terrain import TerrainCatalog, TerrainSpec
from gridpath.core.grid import Grid

__all__ = [
    "BlockedCell",
    "Bounds",
    "Cell",
    "Domain",
    "Grid",
    "GridError",
    "HeuristicMode",
    "InvalidTerrainKind",
    "OutOfBounds",
    "TerrainCatalog",
    "TerrainKind",
    "TerrainSpec",
    "Vector2",
]
