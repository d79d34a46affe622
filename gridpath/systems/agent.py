"""Agent walker: advances the agent marker along a computed route.

Routes are not invalidated when terrain changes. Instead the walker checks
every step just before taking it: the next cell must still be in the grid,
passable, and adjacent to the current position under the same neighbour
model the pathfinder uses. If any check fails the walk halts where it
stands and the rest of the route is dropped. The walker never replans;
the caller asks the pathfinder again.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable
from typing import TYPE_CHECKING

from gridpath.core.models import Vector2

if TYPE_CHECKING:
    from gridpath.core.grid import Grid

logger = logging.getLogger(__name__)


class AgentWalker:
    """Moves one agent marker step by step along a route."""

    __slots__ = ("_grid", "_position", "_route", "_halted_at", "_diagonal")

    def __init__(self, grid: Grid, position: Vector2, diagonal: bool = False) -> None:
        grid.cell_at(position)  # OutOfBounds
        self._grid = grid
        self._diagonal = diagonal
        self._position = position
        self._route: deque[Vector2] = deque()
        self._halted_at: Vector2 | None = None

    # -- public properties --

    @property
    def position(self) -> Vector2:
        return self._position

    @property
    def remaining(self) -> tuple[Vector2, ...]:
        return tuple(self._route)

    @property
    def walking(self) -> bool:
        return bool(self._route)

    @property
    def halted(self) -> bool:
        """True if the last walk stopped at a blocked step."""
        return self._halted_at is not None

    @property
    def diagonal(self) -> bool:
        return self._diagonal

    @property
    def blocked_step(self) -> Vector2 | None:
        return self._halted_at

    # -- control --

    def place(self, position: Vector2) -> None:
        """Teleport the marker (editor brush); drops any route in progress."""
        self._grid.cell_at(position)
        self._position = position
        self._route.clear()
        self._halted_at = None

    def follow(self, route: Iterable[Vector2]) -> None:
        self._route = deque(route)
        self._halted_at = None

    def _can_enter(self, step: Vector2) -> bool:
        grid = self._grid
        if step not in grid or not grid.is_walkable(step):
            return False
        pos = self._position
        dx = abs(step.x - pos.x)
        dy = abs(step.y - pos.y)
        if max(dx, dy) != grid.pitch:
            return False
        if dx and dy:
            # Same rule as the pathfinder: no diagonals in 4-way mode, no corner cutting
            return (
                self._diagonal
                and grid.is_walkable(Vector2(step.x, pos.y))
                and grid.is_walkable(Vector2(pos.x, step.y))
            )
        return True

    def advance(self) -> Vector2 | None:
        """Take one step. Returns the new position, or None if done or blocked."""
        if not self._route:
            return None
        step = self._route[0]
        if not self._can_enter(step):
            logger.info(
                "Agent at %s halted: next step %s is no longer enterable (%d steps dropped)",
                self._position, step, len(self._route),
            )
            self._halted_at = step
            self._route.clear()
            return None
        self._route.popleft()
        self._position = step
        return step

    def walk_all(self) -> list[Vector2]:
        """Advance until the route is finished or blocked; return the cells entered."""
        visited: list[Vector2] = []
        while self._route:
            step = self.advance()
            if step is None:
                break
            visited.append(step)
        return visited
