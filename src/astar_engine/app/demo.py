# astar_engine/app/demo.py
"""Run A* on a grid scenario and print the shortest path.

Without --config the built-in 5x10 reference grid is searched from the upper
left to the lower right tile.
"""

import argparse
import sys

from astar_engine.app.build import build
from astar_engine.io.config import load_scenario, reference_scenario


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="astar-demo", description=__doc__)
    parser.add_argument("--config", help="JSON scenario file (default: reference grid)")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override the scenario's log level",
    )
    parser.add_argument("--debug", action="store_true", help="Log every pop and relaxation")
    parser.add_argument("--render", action="store_true", help="Draw the grid with the path")
    parser.add_argument(
        "--quiet", action="store_true", help="Disable structured logging, print results only"
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    scenario = load_scenario(args.config) if args.config else reference_scenario()

    log_updates = {}
    if args.log_level:
        log_updates["level"] = args.log_level
    if args.debug:
        log_updates["debug"] = True
        log_updates.setdefault("level", "DEBUG")
    if log_updates:
        scenario = scenario.model_copy(
            update={"log": scenario.log.model_copy(update=log_updates)}
        )

    app = build(scenario, use_logging=not args.quiet)
    search = app.search

    if not search.successful():
        print("No existing path.")
        return 1

    for node in search:
        print(node.describe())
    print(f"Shortest path found with {search.weight():g} weight.")
    if args.render:
        print(app.world.render(search.path()))
    return 0


if __name__ == "__main__":
    sys.exit(main())
