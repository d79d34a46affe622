"""Pydantic request / response models for the REST API."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from gridpath.core.models import Vector2
from gridpath.systems.rng import SEED_MAX, SEED_MIN

if TYPE_CHECKING:
    from gridpath.systems.agent import AgentWalker


class CoordSchema(BaseModel):
    x: int
    y: int

    @classmethod
    def of(cls, pos: Vector2) -> CoordSchema:
        return cls(x=pos.x, y=pos.y)

    def to_vector(self) -> Vector2:
        return Vector2(self.x, self.y)


# --- Grid ---

class GridResponse(BaseModel):
    seed: int
    min_x: int
    min_y: int
    max_x: int
    max_y: int
    pitch: int
    cols: int
    rows: int
    # RLE of terrain ids, row by row from min_y, each row from min_x:
    # [value, count, value, count, ...]
    grid: list[int]
    agent: CoordSchema | None = None


class PaintRequest(BaseModel):
    terrain: str | int = Field(..., description="Terrain name (floor, water, bridge, wall) or id")


class PaintResponse(BaseModel):
    x: int
    y: int
    terrain: str
    movement_cost: int
    passable: bool
    changed: bool


class ResetRequest(BaseModel):
    terrain: str | int = "floor"


class RegenerateRequest(BaseModel):
    seed: int | None = Field(None, ge=SEED_MIN, le=SEED_MAX)


# --- Search ---

class PathRequest(BaseModel):
    start: CoordSchema | None = Field(None, description="Defaults to the agent marker")
    goal: CoordSchema
    include_costs: bool = False


class NodeCostSchema(BaseModel):
    x: int
    y: int
    f: int
    g: int
    h: int


class PathResponse(BaseModel):
    found: bool
    route: list[CoordSchema] = Field(default_factory=list)
    trace: list[CoordSchema] = Field(default_factory=list)
    expanded: int = 0
    cost: int = 0
    nodes: list[NodeCostSchema] = Field(default_factory=list)


# --- Agent ---

class AgentResponse(BaseModel):
    agent: CoordSchema | None = None
    walking: bool = False
    halted: bool = False
    remaining: list[CoordSchema] = Field(default_factory=list)


# --- Misc ---

class StatusResponse(BaseModel):
    status: str
    message: str = ""


class GridConfigResponse(BaseModel):
    seed: int
    grid_width: int
    grid_height: int
    cell_pitch: int
    wall_percent: float
    water_percent: float
    floor_cost: int
    water_cost: int
    bridge_cost: int
    heuristic: str


class TerrainEntry(BaseModel):
    id: int
    name: str
    movement_cost: int
    passable: bool


def agent_response(walker: AgentWalker | None) -> AgentResponse:
    if walker is None:
        return AgentResponse()
    return AgentResponse(
        agent=CoordSchema.of(walker.position),
        walking=walker.walking,
        halted=walker.halted,
        remaining=[CoordSchema.of(p) for p in walker.remaining],
    )
