"""POST /api/v1/path: run a search and return route, trace and costs."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from gridpath.api.dependencies import get_grid_session
from gridpath.api.schemas import CoordSchema, NodeCostSchema, PathRequest, PathResponse
from gridpath.api.session import GridSession
from gridpath.pathfinding.result import SearchResult

router = APIRouter()


def serialize_result(result: SearchResult, include_costs: bool = False) -> PathResponse:
    nodes: list[NodeCostSchema] = []
    if include_costs:
        nodes = [
            NodeCostSchema(x=pos.x, y=pos.y, f=int(n.f_cost), g=int(n.g_cost), h=int(n.h_cost))
            for pos, n in result.nodes.items()
        ]
    return PathResponse(
        found=result.found,
        route=[CoordSchema.of(p) for p in result.route],
        trace=[CoordSchema.of(p) for p in result.trace],
        expanded=len(result.expanded),
        cost=int(result.cost),
        nodes=nodes,
    )


@router.post("/path", response_model=PathResponse)
def find_path(
    body: PathRequest,
    session: GridSession = Depends(get_grid_session),
) -> PathResponse:
    start = body.start.to_vector() if body.start is not None else None
    result = session.search(start, body.goal.to_vector())
    return serialize_result(result, body.include_costs)
