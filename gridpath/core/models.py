"""Core data models: Vector2, Bounds, Cell."""

from __future__ import annotations

from dataclasses import dataclass

from gridpath.core.enums import TerrainKind


@dataclass(frozen=True, slots=True)
class Vector2:
    """Immutable 2D integer coordinate."""

    x: int = 0
    y: int = 0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def manhattan(self, other: Vector2) -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)

    def scaled(self, factor: int) -> Vector2:
        return Vector2(self.x * factor, self.y * factor)

    def __repr__(self) -> str:
        return f"({self.x}, {self.y})"


# Axis-aligned unit offsets: up, down, left, right
CARDINAL_OFFSETS: tuple[Vector2, ...] = (
    Vector2(0, 1),
    Vector2(0, -1),
    Vector2(-1, 0),
    Vector2(1, 0),
)

DIAGONAL_OFFSETS: tuple[Vector2, ...] = (
    Vector2(-1, 1),
    Vector2(1, 1),
    Vector2(-1, -1),
    Vector2(1, -1),
)


@dataclass(frozen=True, slots=True)
class Bounds:
    """Inclusive rectangular extent of a grid, in world coordinates."""

    min_x: int
    min_y: int
    max_x: int
    max_y: int

    def __post_init__(self) -> None:
        if self.min_x > self.max_x or self.min_y > self.max_y:
            raise ValueError(f"Empty bounds: {self}")

    @classmethod
    def centered(cls, width: int, height: int) -> Bounds:
        """``[-width, +width] x [-height, +height]``."""
        if width < 0 or height < 0:
            raise ValueError("width and height must be non-negative")
        return cls(-width, -height, width, height)

    @classmethod
    def sized(cls, cols: int, rows: int) -> Bounds:
        """``0..cols-1 x 0..rows-1``."""
        if cols < 1 or rows < 1:
            raise ValueError("cols and rows must be positive")
        return cls(0, 0, cols - 1, rows - 1)

    def contains(self, x: int, y: int) -> bool:
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y


@dataclass(slots=True)
class Cell:
    """One grid cell. Derived fields are refreshed by the grid on terrain change."""

    coord: Vector2
    terrain: TerrainKind = TerrainKind.FLOOR
    movement_cost: int = 10
    passable: bool = True
