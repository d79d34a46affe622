"""Metadata endpoints: terrain catalog, so clients hold no hardcoded costs."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from gridpath.api.dependencies import get_grid_session
from gridpath.api.schemas import TerrainEntry
from gridpath.api.session import GridSession

router = APIRouter(prefix="/metadata", tags=["Metadata"])


@router.get("/terrain", response_model=list[TerrainEntry])
def get_terrain(session: GridSession = Depends(get_grid_session)) -> list[TerrainEntry]:
    return [
        TerrainEntry(
            id=int(spec.kind),
            name=spec.kind.name.lower(),
            movement_cost=spec.movement_cost,
            passable=spec.passable,
        )
        for spec in session.grid.catalog
    ]
