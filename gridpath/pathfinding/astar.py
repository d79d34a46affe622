"""Weighted A* pathfinding over the Grid.

Provides a `Pathfinder` class that computes minimum-cost routes through the
grid, charging each step the movement cost of the cell being entered.

Usage:
    pf = Pathfinder(grid)
    result = pf.search(start, goal)           # SearchResult (route + trace)
    path = pf.find_path(start, goal)          # list[Vector2], [] if none
    next_step = pf.next_step(start, goal)     # Vector2 or None

Frontier selection is by lowest f-cost, ties broken by lowest h-cost and
then by insertion order, so results are reproducible.
"""

from __future__ import annotations

import heapq
import logging
from typing import TYPE_CHECKING

from gridpath.core.enums import HeuristicMode
from gridpath.core.errors import OutOfBounds
from gridpath.core.models import Vector2
from gridpath.pathfinding.heuristics import (
    DIAGONAL_COST,
    HEURISTICS,
    STRAIGHT_COST,
    uses_diagonals,
)
from gridpath.pathfinding.result import SearchNode, SearchResult

if TYPE_CHECKING:
    from collections.abc import Sequence

    from gridpath.core.grid import Grid

logger = logging.getLogger(__name__)


class Pathfinder:
    """A* pathfinder operating on a Grid.

    Reads the grid only. All search state lives in a mapping created per
    call, so repeated and interleaved searches never see each other's state.
    """

    __slots__ = ("_grid", "_mode", "_heuristic", "_diagonal")

    def __init__(
        self,
        grid: Grid,
        heuristic: HeuristicMode | str = HeuristicMode.MANHATTAN_WEIGHTED,
    ) -> None:
        self._grid = grid
        self._mode = HeuristicMode(heuristic)
        self._heuristic = HEURISTICS[self._mode]
        self._diagonal = uses_diagonals(self._mode)

    @property
    def heuristic_mode(self) -> HeuristicMode:
        return self._mode

    # -- costs --

    def estimate(self, pos: Vector2, goal: Vector2) -> int:
        return self._heuristic(self._grid, pos, goal)

    def step_cost(self, src: Vector2, dst: Vector2) -> int:
        """Cost of moving from *src* into the adjacent cell *dst*."""
        cost = self._grid.movement_cost(dst)
        if src.x != dst.x and src.y != dst.y:
            return cost * DIAGONAL_COST // STRAIGHT_COST
        return cost

    def route_cost(self, start: Vector2, route: Sequence[Vector2]) -> int:
        """Total cost of walking *route* from *start*."""
        total = 0
        prev = start
        for step in route:
            total += self.step_cost(prev, step)
            prev = step
        return total

    # -- neighbours --

    def _neighbors(self, pos: Vector2) -> list[Vector2]:
        grid = self._grid
        if not self._diagonal:
            return grid.neighbors_of(pos)
        result: list[Vector2] = []
        for npos in grid.neighbors_of(pos, diagonal=True):
            if npos.x != pos.x and npos.y != pos.y:
                # No corner cutting past an impassable orthogonal cell
                side_a = Vector2(npos.x, pos.y)
                side_b = Vector2(pos.x, npos.y)
                if not (grid.is_walkable(side_a) and grid.is_walkable(side_b)):
                    continue
            result.append(npos)
        return result

    # -- search --

    def search(self, start: Vector2, goal: Vector2) -> SearchResult:
        """Run A* from *start* to *goal*.

        Raises OutOfBounds if either endpoint is not a grid cell. An
        impassable endpoint, ``start == goal`` or an unreachable goal all
        yield an empty result.
        """
        grid = self._grid
        if start not in grid:
            raise OutOfBounds(start)
        if goal not in grid:
            raise OutOfBounds(goal)

        if start == goal:
            return SearchResult()
        if not grid.is_walkable(start) or not grid.is_walkable(goal):
            logger.debug("Search %s -> %s rejected: impassable endpoint", start, goal)
            return SearchResult()

        h0 = self.estimate(start, goal)
        nodes: dict[Vector2, SearchNode] = {start: SearchNode(0, h0, h0, None)}

        # A* open set: (f_cost, h_cost, counter, pos)
        counter = 0
        open_heap: list[tuple[float, float, int, Vector2]] = [(h0, h0, counter, start)]
        open_members: set[Vector2] = {start}
        closed: set[Vector2] = set()
        expanded: list[Vector2] = []
        trace: dict[Vector2, None] = {}

        while open_heap:
            f, _, _, current = heapq.heappop(open_heap)
            if current in closed:
                continue
            node = nodes[current]
            if f != node.f_cost:
                continue  # superseded by a cheaper entry

            if current == goal:
                route = self._reconstruct(nodes, start, goal)
                logger.debug(
                    "Path %s -> %s: %d steps, cost %s, %d expanded",
                    start, goal, len(route), node.g_cost, len(expanded),
                )
                return SearchResult(
                    route=tuple(route),
                    trace=tuple(trace),
                    expanded=tuple(expanded),
                    cost=node.g_cost,
                    nodes=nodes,
                )

            open_members.discard(current)
            closed.add(current)
            expanded.append(current)

            for neighbor in self._neighbors(current):
                if neighbor in closed or not grid.is_walkable(neighbor):
                    continue

                tentative_g = node.g_cost + self.step_cost(current, neighbor)
                known = neighbor in open_members
                if not known or tentative_g < nodes[neighbor].g_cost:
                    h = self.estimate(neighbor, goal)
                    f_new = tentative_g + h
                    nodes[neighbor] = SearchNode(tentative_g, h, f_new, current)
                    open_members.add(neighbor)
                    counter += 1
                    heapq.heappush(open_heap, (f_new, h, counter, neighbor))
                    trace[neighbor] = None

        logger.debug("No path %s -> %s (%d expanded)", start, goal, len(expanded))
        return SearchResult(trace=tuple(trace), expanded=tuple(expanded), nodes=nodes)

    def find_path(self, start: Vector2, goal: Vector2) -> list[Vector2]:
        """Return the route (excluding *start*, including *goal*), or [] if none."""
        return list(self.search(start, goal).route)

    def next_step(self, start: Vector2, goal: Vector2) -> Vector2 | None:
        """Return the first step of the route, or None if no path exists."""
        route = self.search(start, goal).route
        return route[0] if route else None

    @staticmethod
    def _reconstruct(
        nodes: dict[Vector2, SearchNode],
        start: Vector2,
        goal: Vector2,
    ) -> list[Vector2]:
        """Walk back through came_from links to build the route."""
        path: list[Vector2] = []
        current = goal
        while current != start:
            path.append(current)
            prev = nodes[current].came_from
            assert prev is not None
            current = prev
        path.reverse()
        return path
