"""Entry point: ``python -m gridpath``.

Supports two modes:
  - ``python -m gridpath``                  → Launch FastAPI server
  - ``python -m gridpath cli --goal X Y``   → Headless: build a grid, search once, log the result
"""

from __future__ import annotations

import argparse
import logging

logger = logging.getLogger(__name__)

_HEURISTICS = ["manhattan_weighted", "octile"]


def _add_grid_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--width", type=int, default=10, help="Half-extent along x")
    parser.add_argument("--height", type=int, default=10, help="Half-extent along y")
    parser.add_argument("--pitch", type=int, default=1, help="Spacing between neighbouring cells")
    parser.add_argument("--walls", type=float, default=20.0, help="Percent of cells turned to wall")
    parser.add_argument("--water", type=float, default=10.0, help="Percent of remaining cells turned to water")
    parser.add_argument("--floor-cost", type=int, default=10)
    parser.add_argument("--water-cost", type=int, default=30)
    parser.add_argument("--bridge-cost", type=int, default=10)
    parser.add_argument("--heuristic", type=str, default="manhattan_weighted", choices=_HEURISTICS)
    parser.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Weighted grid pathfinder")
    sub = parser.add_subparsers(dest="command")

    # --- Server mode (default) ---
    srv = sub.add_parser("serve", help="Start the FastAPI server (default)")
    srv.add_argument("--host", type=str, default="127.0.0.1")
    srv.add_argument("--port", type=int, default=8000)
    _add_grid_args(srv)

    # --- Headless CLI mode ---
    cli = sub.add_parser("cli", help="Run one search headless")
    _add_grid_args(cli)
    cli.add_argument("--start", type=int, nargs=2, metavar=("X", "Y"), default=None,
                     help="Start cell (defaults to the spawned agent)")
    cli.add_argument("--goal", type=int, nargs=2, metavar=("X", "Y"), required=True)

    return parser


def _config_from_args(args: argparse.Namespace):
    from gridpath.config import GridConfig

    return GridConfig(
        seed=args.seed,
        grid_width=args.width,
        grid_height=args.height,
        cell_pitch=args.pitch,
        wall_percent=args.walls,
        water_percent=args.water,
        floor_cost=args.floor_cost,
        water_cost=args.water_cost,
        bridge_cost=args.bridge_cost,
        heuristic=args.heuristic,
        agent_start=tuple(args.start) if getattr(args, "start", None) else None,
        log_level=args.log_level,
    )


def _run_server(args: argparse.Namespace) -> None:
    import uvicorn

    from gridpath.api.app import create_app

    try:
        config = _config_from_args(args)
    except ValueError as exc:
        raise SystemExit(f"Invalid configuration: {exc}")
    app = create_app(config)
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower())


def _run_cli(args: argparse.Namespace) -> int:
    from gridpath.core.errors import GridError
    from gridpath.core.models import Vector2
    from gridpath.pathfinding.astar import Pathfinder
    from gridpath.systems.seeding import initialize_grid
    from gridpath.utils.logging import setup_logging

    setup_logging(args.log_level)
    try:
        config = _config_from_args(args)
    except ValueError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2

    try:
        grid, agent = initialize_grid(config)
        if agent is None:
            logger.warning("No passable cell to start from.")
            return 1
        goal = Vector2(*args.goal)
        result = Pathfinder(grid, config.heuristic).search(agent, goal)
    except GridError as exc:
        logger.error("%s", exc)
        return 2

    if not result.found:
        logger.info("No route from %s to %s (%d cells expanded).", agent, goal, len(result.expanded))
        return 1
    logger.info(
        "Route %s -> %s: %d steps, cost %d, %d cells expanded",
        agent, goal, len(result.route), int(result.cost), len(result.expanded),
    )
    logger.info("Steps: %s", " ".join(repr(p) for p in result.route))
    return 0


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    # Default to serve mode if no subcommand given
    if args.command is None or args.command == "serve":
        if args.command is None:
            args = parser.parse_args(["serve"])
        _run_server(args)
    elif args.command == "cli":
        raise SystemExit(_run_cli(args))


if __name__ == "__main__":
    main()
