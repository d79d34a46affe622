"""Tests for AgentWalker: walking a route and the per-step revalidation policy."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from gridpath.core.enums import TerrainKind
from gridpath.core.errors import OutOfBounds
from gridpath.core.grid import Grid
from gridpath.core.models import Bounds, Vector2
from gridpath.pathfinding.astar import Pathfinder
from gridpath.systems.agent import AgentWalker

V = Vector2


def _setup(cols: int = 5, rows: int = 1):
    grid = Grid(Bounds.sized(cols, rows))
    return grid, Pathfinder(grid), AgentWalker(grid, V(0, 0))


class TestWalking:
    def test_walks_whole_route(self):
        grid, pf, walker = _setup()
        walker.follow(pf.find_path(V(0, 0), V(4, 0)))
        visited = walker.walk_all()
        assert visited == [V(1, 0), V(2, 0), V(3, 0), V(4, 0)]
        assert walker.position == V(4, 0)
        assert not walker.walking
        assert not walker.halted

    def test_advance_one_step(self):
        grid, pf, walker = _setup()
        walker.follow(pf.find_path(V(0, 0), V(2, 0)))
        assert walker.advance() == V(1, 0)
        assert walker.remaining == (V(2, 0),)
        assert walker.walking

    def test_advance_without_route(self):
        _, _, walker = _setup()
        assert walker.advance() is None
        assert walker.position == V(0, 0)

    def test_start_must_be_in_grid(self):
        grid = Grid(Bounds.sized(2, 2))
        with pytest.raises(OutOfBounds):
            AgentWalker(grid, V(5, 5))


class TestStaleRoute:
    def test_halts_before_newly_walled_cell(self):
        grid, pf, walker = _setup()
        walker.follow(pf.find_path(V(0, 0), V(4, 0)))
        grid.set_terrain(V(3, 0), TerrainKind.WALL)
        visited = walker.walk_all()
        assert visited == [V(1, 0), V(2, 0)]
        assert walker.position == V(2, 0)
        assert walker.halted
        assert walker.blocked_step == V(3, 0)
        assert walker.remaining == ()

    def test_checks_terrain_at_step_time(self):
        grid, pf, walker = _setup()
        walker.follow(pf.find_path(V(0, 0), V(4, 0)))
        grid.set_terrain(V(2, 0), TerrainKind.WALL)
        walker.advance()
        grid.set_terrain(V(2, 0), TerrainKind.FLOOR)
        assert walker.walk_all() == [V(2, 0), V(3, 0), V(4, 0)]

    def test_water_painted_on_route_is_still_walked(self):
        grid, pf, walker = _setup()
        walker.follow(pf.find_path(V(0, 0), V(4, 0)))
        grid.set_terrain(V(2, 0), TerrainKind.WATER)
        assert walker.walk_all()[-1] == V(4, 0)

    def test_non_adjacent_step_halts(self):
        _, _, walker = _setup()
        walker.follow([V(2, 0)])
        assert walker.advance() is None
        assert walker.halted
        assert walker.position == V(0, 0)

    def test_replan_after_halt(self):
        grid, pf, walker = _setup(5, 2)
        walker.follow(pf.find_path(V(0, 0), V(4, 0)))
        grid.set_terrain(V(2, 0), TerrainKind.WALL)
        walker.walk_all()
        assert walker.halted
        walker.follow(pf.find_path(walker.position, V(4, 0)))
        walker.walk_all()
        assert walker.position == V(4, 0)
        assert not walker.halted

    def test_place_resets_walk(self):
        grid, pf, walker = _setup()
        walker.follow(pf.find_path(V(0, 0), V(4, 0)))
        walker.place(V(3, 0))
        assert walker.position == V(3, 0)
        assert not walker.walking


class TestNeighbourModel:
    def test_diagonal_step_halts_in_four_way_mode(self):
        grid = Grid(Bounds.sized(3, 3))
        walker = AgentWalker(grid, V(0, 0))
        walker.follow([V(1, 1)])
        assert walker.advance() is None
        assert walker.halted
        assert walker.blocked_step == V(1, 1)

    def test_diagonal_step_allowed_in_eight_way_mode(self):
        grid = Grid(Bounds.sized(3, 3))
        walker = AgentWalker(grid, V(0, 0), diagonal=True)
        walker.follow([V(1, 1), V(2, 2)])
        assert walker.walk_all() == [V(1, 1), V(2, 2)]

    def test_no_corner_cutting_past_wall(self):
        grid = Grid(Bounds.sized(3, 3))
        walker = AgentWalker(grid, V(0, 0), diagonal=True)
        walker.follow([V(1, 1)])
        grid.set_terrain(V(1, 0), TerrainKind.WALL)
        assert walker.advance() is None
        assert walker.halted

    def test_octile_route_walks_to_goal(self):
        grid = Grid(Bounds.sized(4, 4))
        grid.set_terrain(V(1, 1), TerrainKind.WALL)
        pf = Pathfinder(grid, "octile")
        walker = AgentWalker(grid, V(0, 0), diagonal=True)
        walker.follow(pf.find_path(V(0, 0), V(3, 3)))
        walker.walk_all()
        assert walker.position == V(3, 3)
        assert not walker.halted
