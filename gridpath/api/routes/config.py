"""GET /api/v1/config: expose grid configuration."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from gridpath.api.dependencies import get_grid_session
from gridpath.api.schemas import GridConfigResponse
from gridpath.api.session import GridSession

router = APIRouter()


@router.get("/config", response_model=GridConfigResponse)
def get_config(session: GridSession = Depends(get_grid_session)) -> GridConfigResponse:
    cfg = session.config
    return GridConfigResponse(
        seed=session.seed,
        grid_width=cfg.grid_width,
        grid_height=cfg.grid_height,
        cell_pitch=cfg.cell_pitch,
        wall_percent=cfg.wall_percent,
        water_percent=cfg.water_percent,
        floor_cost=cfg.floor_cost,
        water_cost=cfg.water_cost,
        bridge_cost=cfg.bridge_cost,
        heuristic=cfg.heuristic.value,
    )
