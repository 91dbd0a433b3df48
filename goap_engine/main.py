"""Entry point for the GOAP demo simulation."""

from __future__ import annotations

import argparse
import logging
import sys
import time

from goap_engine.config import GoapConfig
from goap_engine.simulation.engine import SimulationEngine
from goap_engine.simulation.renderer import Renderer


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="goap-engine",
        description="Run agents planned by the GOAP engine in a small world.",
        epilog="Environment variables GOAP_* override any setting.",
    )
    parser.add_argument("--ticks", type=int, default=None, help="Ticks to simulate")
    parser.add_argument("--agents", type=int, default=None, help="Number of agents")
    parser.add_argument("--fires", type=int, default=None, help="Number of fires")
    parser.add_argument("--players", type=int, default=None, help="Number of players")
    parser.add_argument("--foragers", type=int, default=None, help="Number of firewood foragers")
    parser.add_argument("--branches", type=int, default=None, help="Number of branches")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--every", type=int, default=30, help="Render every N ticks")
    parser.add_argument("--delay", type=float, default=0.0, help="Seconds between rendered frames")
    parser.add_argument("--headless", action="store_true", help="Print summary only")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log planning decisions")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the simulation."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    overrides = {
        "max_ticks": args.ticks,
        "num_agents": args.agents,
        "num_fires": args.fires,
        "num_players": args.players,
        "num_foragers": args.foragers,
        "num_branches": args.branches,
        "seed": args.seed,
    }
    config = GoapConfig(**{k: v for k, v in overrides.items() if v is not None})

    engine = SimulationEngine(config)
    engine.setup()
    renderer = Renderer()

    for _ in range(config.max_ticks):
        record = engine.tick()
        if not args.headless and args.every > 0 and record.tick % args.every == 0:
            renderer.render_tick(record)
            if args.delay:
                time.sleep(args.delay)

    renderer.render_summary(engine)
    return 0


if __name__ == "__main__":
    sys.exit(main())
