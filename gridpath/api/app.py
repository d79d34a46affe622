"""FastAPI application factory with lifespan management."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from gridpath.api.dependencies import set_grid_session
from gridpath.api.routes import api_router
from gridpath.api.session import GridSession, NoAgent
from gridpath.config import GridConfig
from gridpath.core.errors import BlockedCell, InvalidTerrainKind, OutOfBounds
from gridpath.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def _error_handler(status_code: int):
    async def handler(request: Request, exc: Exception) -> JSONResponse:
        return JSONResponse(status_code=status_code, content={"detail": str(exc)})
    return handler


def create_app(config: GridConfig | None = None) -> FastAPI:
    """Build and return the fully-configured FastAPI application."""
    if config is None:
        config = GridConfig()

    _config = config

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        setup_logging(_config.log_level)
        set_grid_session(GridSession(_config))
        logger.info("API server started: grid ready.")
        yield
        set_grid_session(None)
        logger.info("API server shutting down.")

    app = FastAPI(
        title="Grid Pathfinder",
        description=(
            "Weighted A* over an editable terrain grid.\n\n"
            "## API Groups\n\n"
            "- **Grid**: Terrain data, painting, reset and regeneration\n"
            "- **Path**: Route queries with search trace and per-cell costs\n"
            "- **Agent**: Agent marker placement and step-by-step walking\n"
            "- **Config**: Read-only grid configuration\n"
            "- **Metadata**: Terrain catalog\n"
        ),
        version="0.1.0",
        lifespan=lifespan,
    )

    # CORS: allow any origin in dev
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(OutOfBounds, _error_handler(404))
    app.add_exception_handler(InvalidTerrainKind, _error_handler(422))
    app.add_exception_handler(BlockedCell, _error_handler(422))
    app.add_exception_handler(NoAgent, _error_handler(409))

    app.include_router(api_router)

    return app
