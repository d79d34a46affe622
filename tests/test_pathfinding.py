"""Unit tests for weighted A* pathfinding."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from itertools import permutations

import pytest

from gridpath.core.enums import HeuristicMode, TerrainKind
from gridpath.core.errors import OutOfBounds
from gridpath.core.grid import Grid
from gridpath.core.models import Bounds, Vector2
from gridpath.pathfinding.astar import Pathfinder
from gridpath.pathfinding.heuristics import manhattan_weighted, octile

V = Vector2


def _grid(cols: int = 3, rows: int = 3) -> Grid:
    return Grid(Bounds.sized(cols, rows))


def _assert_valid_route(grid: Grid, start: Vector2, route, diagonal: bool = False):
    assert len(route) == len(set(route)), "route revisits a cell"
    assert start not in route
    prev = start
    for step in route:
        assert grid.is_walkable(step), f"Step {step} is impassable"
        dx, dy = abs(step.x - prev.x), abs(step.y - prev.y)
        if diagonal:
            assert max(dx, dy) == grid.pitch
        else:
            assert dx + dy == grid.pitch
        prev = step


# ---------------------------------------------------------------------------
# Basic A* tests
# ---------------------------------------------------------------------------

class TestAStarBasic:
    def test_open_3x3_corner_to_corner(self):
        g = _grid()
        pf = Pathfinder(g)
        result = pf.search(V(0, 0), V(2, 2))
        assert len(result.route) == 4
        assert result.route[-1] == V(2, 2)
        assert result.cost == 40
        _assert_valid_route(g, V(0, 0), result.route)

    def test_same_start_and_goal(self):
        pf = Pathfinder(_grid())
        result = pf.search(V(1, 1), V(1, 1))
        assert result.route == ()
        assert not result.found
        assert pf.find_path(V(1, 1), V(1, 1)) == []

    def test_adjacent_goal(self):
        pf = Pathfinder(_grid())
        assert pf.find_path(V(1, 1), V(2, 1)) == [V(2, 1)]

    def test_route_excludes_start(self):
        pf = Pathfinder(_grid())
        path = pf.find_path(V(0, 0), V(2, 0))
        assert V(0, 0) not in path
        assert path == [V(1, 0), V(2, 0)]

    def test_next_step(self):
        pf = Pathfinder(_grid())
        assert pf.next_step(V(0, 0), V(2, 0)) == V(1, 0)
        assert pf.next_step(V(0, 0), V(0, 0)) is None

    def test_every_pair_connected_without_walls(self):
        g = _grid(4, 4)
        pf = Pathfinder(g)
        for a, b in permutations(g.coords(), 2):
            result = pf.search(a, b)
            assert result.found, f"no route {a} -> {b}"
            assert len(result.route) == a.manhattan(b)
            _assert_valid_route(g, a, result.route)

    def test_centered_grid_with_pitch(self):
        g = Grid.centered(2, 2, pitch=2)
        pf = Pathfinder(g)
        result = pf.search(V(-2, -2), V(2, 2))
        assert len(result.route) == 4
        assert result.cost == 40
        _assert_valid_route(g, V(-2, -2), result.route)


# ---------------------------------------------------------------------------
# Walls
# ---------------------------------------------------------------------------

class TestWalls:
    def test_routes_through_single_gap(self):
        g = _grid()
        g.set_terrain(V(1, 0), TerrainKind.WALL)
        g.set_terrain(V(1, 1), TerrainKind.WALL)
        result = Pathfinder(g).search(V(0, 0), V(2, 0))
        assert V(1, 2) in result.route
        assert result.route == (V(0, 1), V(0, 2), V(1, 2), V(2, 2), V(2, 1), V(2, 0))
        assert result.cost == 60
        _assert_valid_route(g, V(0, 0), result.route)

    def test_sealed_wall_column_gives_empty_route(self):
        g = _grid()
        for y in range(3):
            g.set_terrain(V(1, y), TerrainKind.WALL)
        result = Pathfinder(g).search(V(0, 0), V(2, 0))
        assert result.route == ()
        assert result.cost == 0
        assert set(result.expanded) == {V(0, 0), V(0, 1), V(0, 2)}

    def test_enclosed_goal(self):
        g = _grid(5, 5)
        for pos in (V(1, 2), V(3, 2), V(2, 1), V(2, 3)):
            g.set_terrain(pos, TerrainKind.WALL)
        assert Pathfinder(g).find_path(V(0, 0), V(2, 2)) == []

    def test_wall_goal_returns_empty(self):
        g = _grid()
        g.set_terrain(V(2, 2), TerrainKind.WALL)
        assert Pathfinder(g).search(V(0, 0), V(2, 2)).route == ()

    def test_wall_start_returns_empty(self):
        g = _grid()
        g.set_terrain(V(0, 0), TerrainKind.WALL)
        assert Pathfinder(g).search(V(0, 0), V(2, 2)).route == ()


# ---------------------------------------------------------------------------
# Bounds
# ---------------------------------------------------------------------------

class TestOutOfBounds:
    def test_goal_outside_grid_raises(self):
        with pytest.raises(OutOfBounds):
            Pathfinder(_grid()).search(V(0, 0), V(5, 5))

    def test_start_outside_grid_raises(self):
        with pytest.raises(OutOfBounds):
            Pathfinder(_grid()).find_path(V(-1, 0), V(1, 1))


# ---------------------------------------------------------------------------
# Terrain cost awareness
# ---------------------------------------------------------------------------

class TestTerrainCosts:
    def test_avoids_water_when_detour_is_cheaper(self):
        g = _grid(5, 3)
        for x in range(1, 4):
            g.set_terrain(V(x, 1), TerrainKind.WATER)
        # straight: 3 water + floor = 100; detour through a floor row = 60
        result = Pathfinder(g).search(V(0, 1), V(4, 1))
        assert result.cost == 60
        for step in result.route:
            assert g.get(step) != TerrainKind.WATER

    def test_crosses_water_when_only_way(self):
        g = _grid(3, 1)
        g.set_terrain(V(1, 0), TerrainKind.WATER)
        result = Pathfinder(g).search(V(0, 0), V(2, 0))
        assert result.route == (V(1, 0), V(2, 0))
        assert result.cost == 40

    def test_uses_bridge_over_water(self):
        g = _grid()
        for y in range(3):
            g.set_terrain(V(1, y), TerrainKind.WATER)
        g.set_terrain(V(1, 2), TerrainKind.BRIDGE)
        result = Pathfinder(g).search(V(0, 2), V(2, 2))
        assert result.route == (V(1, 2), V(2, 2))
        assert result.cost == 20

    def test_cost_charged_on_entering_cell(self):
        g = _grid(2, 1)
        g.set_terrain(V(0, 0), TerrainKind.WATER)
        pf = Pathfinder(g)
        # leaving water costs nothing extra; entering it costs 30
        assert pf.search(V(0, 0), V(1, 0)).cost == 10
        assert pf.search(V(1, 0), V(0, 0)).cost == 30

    def test_route_cost_matches_goal_g_cost(self):
        g = _grid(6, 6)
        for pos in (V(1, 1), V(2, 1), V(3, 3), V(4, 2)):
            g.set_terrain(pos, TerrainKind.WATER)
        for pos in (V(2, 3), V(2, 4), V(4, 4)):
            g.set_terrain(pos, TerrainKind.WALL)
        pf = Pathfinder(g)
        result = pf.search(V(0, 0), V(5, 5))
        assert result.found
        assert pf.route_cost(V(0, 0), result.route) == result.cost
        assert result.nodes[V(5, 5)].g_cost == result.cost
        assert sum(g.movement_cost(p) for p in result.route) == result.cost


# ---------------------------------------------------------------------------
# Tie-breaking
# ---------------------------------------------------------------------------

class TestTieBreak:
    def test_equal_detours_pick_lower_h_first(self):
        """Wall in the middle: top and bottom detours both cost 40."""
        g = _grid()
        g.set_terrain(V(1, 1), TerrainKind.WALL)
        pf = Pathfinder(g)
        result = pf.search(V(0, 1), V(2, 1))
        # (0,0) ties (0,2)'s successor on f but has higher h, so it is never expanded
        assert result.route == (V(0, 2), V(1, 2), V(2, 2), V(2, 1))
        assert result.expanded == (V(0, 1), V(0, 2), V(1, 2), V(2, 2))
        assert V(0, 0) not in result.expanded
        assert result.cost == 40

    def test_open_grid_goes_straight_for_goal(self):
        result = Pathfinder(_grid()).search(V(0, 0), V(2, 2))
        assert len(result.expanded) == 4
        assert V(1, 0) not in result.expanded

    def test_reproducible(self):
        g = _grid(5, 5)
        g.set_terrain(V(2, 2), TerrainKind.WALL)
        first = Pathfinder(g).search(V(0, 0), V(4, 4))
        second = Pathfinder(g).search(V(0, 0), V(4, 4))
        assert first == second


# ---------------------------------------------------------------------------
# Search state, trace and costs
# ---------------------------------------------------------------------------

class TestSearchState:
    def test_no_state_leak_between_runs(self):
        g = _grid(5, 5)
        g.set_terrain(V(2, 1), TerrainKind.WATER)
        pf = Pathfinder(g)
        baseline = Pathfinder(g).search(V(0, 0), V(4, 4))
        pf.search(V(4, 4), V(0, 0))
        pf.search(V(0, 4), V(4, 0))
        again = pf.search(V(0, 0), V(4, 4))
        assert again == baseline
        assert again.trace == baseline.trace

    def test_grid_cells_carry_no_search_state(self):
        g = _grid()
        Pathfinder(g).search(V(0, 0), V(2, 2))
        cell = g.cell_at(V(1, 1))
        assert not hasattr(cell, "g_cost")

    def test_trace_is_unique_and_excludes_start(self):
        result = Pathfinder(_grid(4, 4)).search(V(0, 0), V(3, 3))
        assert len(result.trace) == len(set(result.trace))
        assert V(0, 0) not in result.trace
        assert V(3, 3) in result.trace
        assert set(result.route) <= set(result.trace)

    def test_node_costs_consistent(self):
        result = Pathfinder(_grid()).search(V(0, 0), V(2, 2))
        start = result.nodes[V(0, 0)]
        assert start.g_cost == 0
        assert start.came_from is None
        for node in result.nodes.values():
            assert node.f_cost == node.g_cost + node.h_cost

    def test_edit_between_queries_changes_route(self):
        g = _grid()
        pf = Pathfinder(g)
        before = pf.search(V(0, 0), V(2, 0))
        g.set_terrain(V(1, 0), TerrainKind.WALL)
        after = pf.search(V(0, 0), V(2, 0))
        assert before.route == (V(1, 0), V(2, 0))
        assert V(1, 0) not in after.route
        assert after.cost == 40


# ---------------------------------------------------------------------------
# Heuristics
# ---------------------------------------------------------------------------

class TestHeuristics:
    def test_manhattan_weighted_scales_by_origin_cell(self):
        g = _grid()
        g.set_terrain(V(0, 0), TerrainKind.WATER)
        assert manhattan_weighted(g, V(0, 0), V(2, 1)) == 90
        assert manhattan_weighted(g, V(1, 0), V(2, 1)) == 20

    def test_octile(self):
        g = _grid(5, 5)
        assert octile(g, V(0, 0), V(2, 1)) == 24
        assert octile(g, V(0, 0), V(3, 3)) == 42
        assert octile(g, V(0, 0), V(0, 4)) == 40

    def test_octile_mode_moves_diagonally(self):
        g = _grid()
        pf = Pathfinder(g, HeuristicMode.OCTILE)
        result = pf.search(V(0, 0), V(2, 2))
        assert result.route == (V(1, 1), V(2, 2))
        assert result.cost == 28
        assert pf.route_cost(V(0, 0), result.route) == 28
        _assert_valid_route(g, V(0, 0), result.route, diagonal=True)

    def test_octile_mode_does_not_cut_corners(self):
        g = _grid(2, 2)
        g.set_terrain(V(1, 0), TerrainKind.WALL)
        result = Pathfinder(g, "octile").search(V(0, 0), V(1, 1))
        assert result.route == (V(0, 1), V(1, 1))
        assert result.cost == 20

    def test_default_mode_is_four_directional(self):
        g = _grid()
        pf = Pathfinder(g)
        assert pf.heuristic_mode is HeuristicMode.MANHATTAN_WEIGHTED
        _assert_valid_route(g, V(0, 0), pf.find_path(V(0, 0), V(2, 2)))
