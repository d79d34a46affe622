"""Versioned API route modules."""

from fastapi import APIRouter

from gridpath.api.routes.agent import router as agent_router
from gridpath.api.routes.config import router as config_router
from gridpath.api.routes.grid import router as grid_router
from gridpath.api.routes.metadata import router as metadata_router
from gridpath.api.routes.path import router as path_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(grid_router, tags=["Grid"])
api_router.include_router(path_router, tags=["Path"])
api_router.include_router(agent_router, tags=["Agent"])
api_router.include_router(config_router, tags=["Config"])
api_router.include_router(metadata_router)

__all__ = ["api_router"]
