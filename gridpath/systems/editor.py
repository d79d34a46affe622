"""Grid editor: the mutation surface used by brush / UI collaborators."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gridpath.core.enums import TerrainKind
from gridpath.core.errors import BlockedCell
from gridpath.systems.agent import AgentWalker

if TYPE_CHECKING:
    from gridpath.core.grid import Grid
    from gridpath.core.models import Vector2

logger = logging.getLogger(__name__)


class GridEditor:
    """Applies terrain paint, board resets and agent-marker moves to a Grid.

    Editing never touches search state. A route computed before an edit may
    be stale afterwards; callers re-query (or rely on ``AgentWalker``'s
    per-step check) before moving along it.
    """

    __slots__ = ("_grid", "_walker", "_diagonal")

    def __init__(self, grid: Grid, agent: Vector2 | None = None, diagonal: bool = False) -> None:
        self._grid = grid
        self._diagonal = diagonal
        self._walker = AgentWalker(grid, agent, diagonal) if agent is not None else None

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def agent(self) -> Vector2 | None:
        return self._walker.position if self._walker else None

    @property
    def walker(self) -> AgentWalker | None:
        return self._walker

    def paint(self, pos: Vector2, kind: TerrainKind | int | str) -> bool:
        """Set *pos* to *kind*. Returns True if the terrain actually changed."""
        terrain = TerrainKind.parse(kind)
        before = self._grid.get(pos)
        self._grid.set_terrain(pos, terrain)
        if before == terrain:
            return False
        logger.debug("Painted %s: %s -> %s", pos, before.name, terrain.name)
        return True

    def reset_all(self, kind: TerrainKind | int | str = TerrainKind.FLOOR) -> None:
        terrain = TerrainKind.parse(kind)
        self._grid.fill(terrain)
        logger.info("Reset all %d cells to %s", len(self._grid), terrain.name)

    def move_agent(self, pos: Vector2) -> Vector2:
        """Agent brush: move the marker onto a passable cell, dropping any walk."""
        if not self._grid.is_walkable(pos):
            raise BlockedCell(pos)
        if self._walker is None:
            self._walker = AgentWalker(self._grid, pos, self._diagonal)
        else:
            self._walker.place(pos)
        logger.debug("Agent moved to %s", pos)
        return pos
