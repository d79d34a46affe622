"""GridSession: the single grid served by the API.

The core is not thread-safe; FastAPI runs sync endpoints on a thread pool.
Every read-modify or search goes through ``self.lock`` so at most one edit
or search touches the grid at a time.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import replace
from typing import TYPE_CHECKING

from gridpath.core.enums import TerrainKind
from gridpath.pathfinding.astar import Pathfinder
from gridpath.pathfinding.heuristics import uses_diagonals
from gridpath.systems.editor import GridEditor
from gridpath.systems.rng import DeterministicRNG
from gridpath.systems.seeding import initialize_grid

if TYPE_CHECKING:
    from gridpath.config import GridConfig
    from gridpath.core.grid import Grid
    from gridpath.core.models import Cell, Vector2
    from gridpath.pathfinding.result import SearchResult

logger = logging.getLogger(__name__)


class NoAgent(RuntimeError):
    """The request needs the agent marker but the board has none."""


class GridSession:
    """Owns the grid, its editor and its pathfinder; serialises access."""

    def __init__(self, config: GridConfig) -> None:
        self.config = config
        self.lock = threading.Lock()
        self._seed = config.seed
        self._grid: Grid | None = None
        self._editor: GridEditor | None = None
        self._pathfinder: Pathfinder | None = None
        self._build(self._seed)

    # -- public properties --

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def grid(self) -> Grid:
        assert self._grid is not None
        return self._grid

    @property
    def editor(self) -> GridEditor:
        assert self._editor is not None
        return self._editor

    @property
    def pathfinder(self) -> Pathfinder:
        assert self._pathfinder is not None
        return self._pathfinder

    # -- lifecycle --

    def regenerate(self, seed: int | None = None) -> None:
        """Throw the board away and seed a new one."""
        with self.lock:
            self._build(self._seed if seed is None else seed)
        logger.info("GridSession regenerated (seed=%d).", self._seed)

    def _build(self, seed: int) -> None:
        grid, agent = initialize_grid(self.config, DeterministicRNG(seed))
        self._seed = seed
        self._grid = grid
        self._editor = GridEditor(grid, agent, uses_diagonals(self.config.heuristic))
        self._pathfinder = Pathfinder(grid, self.config.heuristic)

    # -- queries / edits --

    def search(self, start: Vector2 | None, goal: Vector2) -> SearchResult:
        """Search from *start*, or from the agent marker when *start* is None."""
        with self.lock:
            origin = start if start is not None else self.editor.agent
            if origin is None:
                raise NoAgent("No start given and no agent on the grid.")
            return self.pathfinder.search(origin, goal)

    def paint(self, pos: Vector2, kind: TerrainKind | int | str) -> tuple[bool, Cell]:
        """Paint *pos*; return whether it changed and a snapshot of the cell."""
        with self.lock:
            changed = self.editor.paint(pos, kind)
            return changed, replace(self.grid.cell_at(pos))

    def reset_all(self, kind: TerrainKind | int | str = TerrainKind.FLOOR) -> None:
        with self.lock:
            self.editor.reset_all(kind)

    def move_agent(self, pos: Vector2) -> Vector2:
        with self.lock:
            return self.editor.move_agent(pos)

    def walk_to(self, goal: Vector2) -> SearchResult:
        """Plan from the agent to *goal* and load the route into the walker."""
        with self.lock:
            walker = self.editor.walker
            if walker is None:
                raise NoAgent("No agent on the grid.")
            result = self.pathfinder.search(walker.position, goal)
            walker.follow(result.route)
            return result

    def step_agent(self) -> Vector2 | None:
        with self.lock:
            walker = self.editor.walker
            if walker is None:
                raise NoAgent("No agent on the grid.")
            return walker.advance()
