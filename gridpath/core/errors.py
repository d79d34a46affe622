"""Error types raised by the grid model, editor and pathfinder.

"No path exists" is not an error: the pathfinder returns an empty route.
"""

from __future__ import annotations

from typing import Any


class GridError(Exception):
    """Base class for all gridpath errors."""


class OutOfBounds(GridError, KeyError):
    """A coordinate does not name a cell of the grid."""

    def __init__(self, coord: Any) -> None:
        self.coord = coord
        super().__init__(coord)

    def __str__(self) -> str:
        return f"{self.coord} is outside the grid"


class InvalidTerrainKind(GridError, ValueError):
    """A terrain kind is unknown to the enum or the catalog."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(value)

    def __str__(self) -> str:
        return f"Unknown terrain kind: {self.value!r}"


class BlockedCell(GridError, ValueError):
    """The agent marker cannot be placed on an impassable cell."""

    def __init__(self, coord: Any) -> None:
        self.coord = coord
        super().__init__(coord)

    def __str__(self) -> str:
        return f"{self.coord} is not passable"
