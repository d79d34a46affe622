"""Agent marker endpoints: place, plan a walk, step along it."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from gridpath.api.dependencies import get_grid_session
from gridpath.api.routes.path import serialize_result
from gridpath.api.schemas import AgentResponse, CoordSchema, PathResponse, agent_response
from gridpath.api.session import GridSession

router = APIRouter(prefix="/agent")


@router.get("", response_model=AgentResponse)
def get_agent(session: GridSession = Depends(get_grid_session)) -> AgentResponse:
    with session.lock:
        return agent_response(session.editor.walker)


@router.post("", response_model=AgentResponse)
def place_agent(
    body: CoordSchema,
    session: GridSession = Depends(get_grid_session),
) -> AgentResponse:
    session.move_agent(body.to_vector())
    with session.lock:
        return agent_response(session.editor.walker)


@router.post("/walk", response_model=PathResponse)
def walk_to(
    body: CoordSchema,
    session: GridSession = Depends(get_grid_session),
) -> PathResponse:
    return serialize_result(session.walk_to(body.to_vector()))


@router.post("/step", response_model=AgentResponse)
def step_agent(session: GridSession = Depends(get_grid_session)) -> AgentResponse:
    session.step_agent()
    with session.lock:
        return agent_response(session.editor.walker)
