"""Weighted A* search over the grid."""

from gridpath.pathfinding.astar import Pathfinder
from gridpath.pathfinding.heuristics import manhattan_weighted, octile
from gridpath.pathfinding.result import INFINITE_COST, SearchNode, SearchResult

__all__ = [
    "INFINITE_COST",
    "Pathfinder",
    "SearchNode",
    "SearchResult",
    "manhattan_weighted",
    "octile",
]
