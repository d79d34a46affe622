"""Logging configuration shared by the CLI and the API server."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

# Per-request access lines drown out search logs below DEBUG.
_NOISY_LOGGERS = ("uvicorn.access",)


def setup_logging(level: str = "INFO", stream: TextIO | None = None) -> None:
    """Route all records through one handler on *stream* (stdout by default)."""
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(numeric_level)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)-5s] %(name)-25s | %(message)s",
            datefmt="%H:%M:%S",
        )
    )

    root = logging.getLogger()
    root.setLevel(numeric_level)
    root.handlers.clear()
    root.addHandler(handler)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))
