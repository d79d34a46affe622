"""Terrain catalog: maps each terrain kind to a movement cost and passability.

The catalog is pure data. Cost balancing is a matter of building a different
catalog (see ``TerrainCatalog.from_costs`` and ``GridConfig.catalog``), not of
editing code.

Key types:
  TerrainSpec    : immutable cost/passability record for one kind
  TerrainCatalog : lookup table over TerrainSpec, keyed by TerrainKind
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from pydantic import PositiveInt
from pydantic.dataclasses import dataclass as pydantic_dataclass

from gridpath.core.enums import TerrainKind
from gridpath.core.errors import InvalidTerrainKind

# Cost 10 = baseline floor step. Wall cost is never charged.
DEFAULT_FLOOR_COST = 10
DEFAULT_WATER_COST = 30
DEFAULT_BRIDGE_COST = 10


@pydantic_dataclass(frozen=True)
class TerrainSpec:
    """Immutable movement rules for one terrain kind."""

    kind: TerrainKind
    movement_cost: PositiveInt
    passable: bool = True


class TerrainCatalog:
    """Stateless lookup from TerrainKind to its TerrainSpec."""

    __slots__ = ("_specs",)

    def __init__(self, specs: Iterable[TerrainSpec]) -> None:
        table: dict[TerrainKind, TerrainSpec] = {}
        for spec in specs:
            if spec.kind in table:
                raise ValueError(f"Duplicate terrain spec for {spec.kind.name}")
            table[spec.kind] = spec
        wall = table.get(TerrainKind.WALL)
        if wall is not None and wall.passable:
            raise ValueError("WALL terrain must be impassable")
        self._specs: Mapping[TerrainKind, TerrainSpec] = table

    @classmethod
    def from_costs(
        cls,
        floor: int = DEFAULT_FLOOR_COST,
        water: int = DEFAULT_WATER_COST,
        bridge: int = DEFAULT_BRIDGE_COST,
    ) -> TerrainCatalog:
        return cls(
            [
                TerrainSpec(TerrainKind.FLOOR, floor),
                TerrainSpec(TerrainKind.WATER, water),
                TerrainSpec(TerrainKind.BRIDGE, bridge),
                TerrainSpec(TerrainKind.WALL, floor, passable=False),
            ]
        )

    @classmethod
    def default(cls) -> TerrainCatalog:
        return cls.from_costs()

    # -- lookups --

    def spec(self, kind: TerrainKind | int | str) -> TerrainSpec:
        terrain = TerrainKind.parse(kind)
        spec = self._specs.get(terrain)
        if spec is None:
            raise InvalidTerrainKind(kind)
        return spec

    def cost_of(self, kind: TerrainKind | int | str) -> int:
        return self.spec(kind).movement_cost

    def is_passable(self, kind: TerrainKind | int | str) -> bool:
        return self.spec(kind).passable

    def kinds(self) -> tuple[TerrainKind, ...]:
        return tuple(self._specs)

    def __contains__(self, kind: object) -> bool:
        return kind in self._specs

    def __iter__(self):
        return iter(self._specs.values())

    def __len__(self) -> int:
        return len(self._specs)
