"""Search state and search results."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gridpath.core.models import Vector2

INFINITE_COST = float("inf")


@dataclass(slots=True)
class SearchNode:
    """Per-run search state for one cell. Never stored on the grid."""

    g_cost: float = INFINITE_COST
    h_cost: float = INFINITE_COST
    f_cost: float = INFINITE_COST
    came_from: Vector2 | None = None


@dataclass(frozen=True)
class SearchResult:
    """Outcome of one A* run.

    ``route`` runs from the step after start through goal. ``trace`` holds
    every cell added to (or re-prioritised in) the frontier, first-seen
    order, for visualisation only. ``nodes`` is the run's search state,
    e.g. for F/G/H labels.
    """

    route: tuple[Vector2, ...] = ()
    trace: tuple[Vector2, ...] = ()
    expanded: tuple[Vector2, ...] = ()
    cost: float = 0
    nodes: Mapping[Vector2, SearchNode] = field(default_factory=dict, repr=False, compare=False)

    @property
    def found(self) -> bool:
        return bool(self.route)

    def __len__(self) -> int:
        return len(self.route)
