"""FastAPI dependency injection: provides the GridSession singleton."""

from __future__ import annotations

from gridpath.api.session import GridSession

_session: GridSession | None = None


def set_grid_session(session: GridSession | None) -> None:
    global _session
    _session = session


def get_grid_session() -> GridSession:
    if _session is None:
        raise RuntimeError("GridSession not initialized: server not started correctly.")
    return _session
