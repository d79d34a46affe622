"""Grid endpoints: terrain data, painting, board reset and regeneration."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from gridpath.api.dependencies import get_grid_session
from gridpath.api.schemas import (
    CoordSchema,
    GridResponse,
    PaintRequest,
    PaintResponse,
    RegenerateRequest,
    ResetRequest,
    StatusResponse,
)
from gridpath.api.session import GridSession
from gridpath.core.models import Vector2

router = APIRouter()


def _rle(values: list[int]) -> list[int]:
    """RLE encode: [value, count, value, count, ...]."""
    rle: list[int] = []
    if not values:
        return rle
    cur_val = values[0]
    cur_count = 1
    for v in values[1:]:
        if v == cur_val:
            cur_count += 1
        else:
            rle.append(cur_val)
            rle.append(cur_count)
            cur_val = v
            cur_count = 1
    rle.append(cur_val)
    rle.append(cur_count)
    return rle


@router.get("/grid", response_model=GridResponse)
def get_grid(session: GridSession = Depends(get_grid_session)) -> GridResponse:
    with session.lock:
        grid = session.grid
        b, pitch = grid.bounds, grid.pitch
        xs = range(b.min_x, b.max_x + 1, pitch)
        ys = range(b.min_y, b.max_y + 1, pitch)
        tiles = [int(grid.get(Vector2(x, y))) for y in ys for x in xs]
        agent = session.editor.agent

    return GridResponse(
        seed=session.seed,
        min_x=b.min_x, min_y=b.min_y, max_x=b.max_x, max_y=b.max_y,
        pitch=pitch, cols=len(xs), rows=len(ys),
        grid=_rle(tiles),
        agent=CoordSchema.of(agent) if agent is not None else None,
    )


@router.put("/cells/{x}/{y}", response_model=PaintResponse)
def paint_cell(
    x: int,
    y: int,
    body: PaintRequest,
    session: GridSession = Depends(get_grid_session),
) -> PaintResponse:
    pos = Vector2(x, y)
    changed, cell = session.paint(pos, body.terrain)
    return PaintResponse(
        x=x, y=y,
        terrain=cell.terrain.name.lower(),
        movement_cost=cell.movement_cost,
        passable=cell.passable,
        changed=changed,
    )


@router.post("/grid/reset", response_model=StatusResponse)
def reset_grid(
    body: ResetRequest | None = None,
    session: GridSession = Depends(get_grid_session),
) -> StatusResponse:
    terrain = body.terrain if body is not None else "floor"
    session.reset_all(terrain)
    return StatusResponse(status="ok", message=f"All cells set to {terrain}.")


@router.post("/grid/regenerate", response_model=StatusResponse)
def regenerate_grid(
    body: RegenerateRequest | None = None,
    session: GridSession = Depends(get_grid_session),
) -> StatusResponse:
    session.regenerate(body.seed if body is not None else None)
    return StatusResponse(status="ok", message=f"Grid regenerated (seed={session.seed}).")
