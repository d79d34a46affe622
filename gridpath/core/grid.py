"""Grid model: the fixed set of cells, their terrain and neighbour queries."""

from __future__ import annotations

from collections.abc import Iterator

from gridpath.core.enums import TerrainKind
from gridpath.core.errors import OutOfBounds
from gridpath.core.models import CARDINAL_OFFSETS, DIAGONAL_OFFSETS, Bounds, Cell, Vector2
from gridpath.core.terrain import TerrainCatalog


class Grid:
    """Rectangular grid of cells keyed by coordinate.

    Cells are created once, at construction, for every lattice point of
    *bounds* stepped by *pitch*; afterwards only their terrain changes.
    """

    __slots__ = ("bounds", "pitch", "catalog", "_cells")

    def __init__(
        self,
        bounds: Bounds,
        pitch: int = 1,
        catalog: TerrainCatalog | None = None,
        default: TerrainKind = TerrainKind.FLOOR,
    ) -> None:
        if pitch < 1:
            raise ValueError("pitch must be a positive integer")
        self.bounds = bounds
        self.pitch = pitch
        self.catalog = catalog if catalog is not None else TerrainCatalog.default()
        spec = self.catalog.spec(default)
        self._cells: dict[Vector2, Cell] = {}
        for x in range(bounds.min_x, bounds.max_x + 1, pitch):
            for y in range(bounds.min_y, bounds.max_y + 1, pitch):
                pos = Vector2(x, y)
                self._cells[pos] = Cell(pos, spec.kind, spec.movement_cost, spec.passable)

    @classmethod
    def centered(
        cls,
        width: int,
        height: int,
        pitch: int = 1,
        catalog: TerrainCatalog | None = None,
    ) -> Grid:
        """Grid covering ``[-width, +width] x [-height, +height]``."""
        return cls(Bounds.centered(width, height), pitch, catalog)

    # -- access --

    def in_bounds(self, pos: Vector2) -> bool:
        return pos in self._cells

    def cell_at(self, pos: Vector2) -> Cell:
        try:
            return self._cells[pos]
        except KeyError:
            raise OutOfBounds(pos) from None

    def get(self, pos: Vector2) -> TerrainKind:
        return self.cell_at(pos).terrain

    def is_walkable(self, pos: Vector2) -> bool:
        return self.cell_at(pos).passable

    def movement_cost(self, pos: Vector2) -> int:
        return self.cell_at(pos).movement_cost

    # -- mutation --

    def set_terrain(self, pos: Vector2, kind: TerrainKind | int | str) -> Cell:
        """Overwrite a cell's terrain and its derived cost / passability."""
        cell = self.cell_at(pos)
        spec = self.catalog.spec(kind)
        cell.terrain = spec.kind
        cell.movement_cost = spec.movement_cost
        cell.passable = spec.passable
        return cell

    def fill(self, kind: TerrainKind | int | str) -> None:
        spec = self.catalog.spec(kind)
        for cell in self._cells.values():
            cell.terrain = spec.kind
            cell.movement_cost = spec.movement_cost
            cell.passable = spec.passable

    # -- neighbours --

    def neighbors_of(self, pos: Vector2, diagonal: bool = False) -> list[Vector2]:
        """In-grid neighbours: up, down, left, right, then (optionally) diagonals."""
        if pos not in self._cells:
            raise OutOfBounds(pos)
        offsets = CARDINAL_OFFSETS + DIAGONAL_OFFSETS if diagonal else CARDINAL_OFFSETS
        result: list[Vector2] = []
        for d in offsets:
            npos = Vector2(pos.x + d.x * self.pitch, pos.y + d.y * self.pitch)
            if npos in self._cells:
                result.append(npos)
        return result

    # -- iteration --

    def coords(self) -> list[Vector2]:
        return list(self._cells)

    def cells(self) -> Iterator[Cell]:
        return iter(self._cells.values())

    def count(self, kind: TerrainKind) -> int:
        return sum(1 for c in self._cells.values() if c.terrain == kind)

    def __len__(self) -> int:
        return len(self._cells)

    def __contains__(self, pos: object) -> bool:
        return pos in self._cells

    # -- copy --

    def copy(self) -> Grid:
        new = Grid.__new__(Grid)
        new.bounds = self.bounds
        new.pitch = self.pitch
        new.catalog = self.catalog
        new._cells = {
            pos: Cell(c.coord, c.terrain, c.movement_cost, c.passable)
            for pos, c in self._cells.items()
        }
        return new
