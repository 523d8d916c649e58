#!/usr/bin/env python3
"""
Console demo: prints example paths.

    python -m orthostar.app.demo                       built-in 6x7 scenario
    python -m orthostar.app.demo --map=orthostar/maps/02_corridors.json
    python -m orthostar.app.demo --penalty=5 --cost=10 --log=DEBUG
"""

import logging
import sys
from typing import List, Optional, TextIO

from orthostar import config
from orthostar.core.astar import AStarSearch
from orthostar.core.errors import InvalidEndpoint, OutOfBounds
from orthostar.core.maps import MapSpec, load_map
from orthostar.core.paths import count_turns, render
from orthostar.core.grid import Grid

log = logging.getLogger(__name__)

# search area
#      0   1   2   3   4   5   6
# 0    -   -   -   -   -   -   -
# 1    -   -   -   B   -   -   -
# 2    -   S   -   B   -   G   -
# 3    -   -   -   B   -   -   -
# 4    -   -   -   -   -   -   -
# 5    -   -   -   -   -   -   -
SCENARIO_ROWS, SCENARIO_COLS = 6, 7
SCENARIO_BLOCKS = [(1, 3), (2, 3), (3, 3)]
SCENARIO_GOAL = (2, 5)
SCENARIO_STARTS = [(2, 1), (2, 0)]


def report(search: AStarSearch, start, goal, out: TextIO) -> None:
    result = search.search(start, goal)
    out.write(f"=== {start} -> {goal}  ===========\n")
    if not result.found:
        out.write("no path\n")
        return
    for (r, c) in result.path:
        out.write(f"Cell [row={r}, col={c}]\n")
    out.write(f"cost={result.cost} steps={len(result.path) - 1} turns={count_turns(result.path)} "
              f"popped={result.popped}\n")
    out.write(render(search.grid, result.path, start, goal) + "\n")


def main(argv: Optional[List[str]] = None, out: TextIO = sys.stdout) -> int:
    argv = sys.argv[1:] if argv is None else argv
    config.setup_logging(argv)

    map_path = config.resolve_option("map", "ORTHOSTAR_MAP", None, argv)
    if map_path:
        try:
            jobs = [load_map(map_path)]
        except (OSError, ValueError, KeyError, IndexError) as ex:
            log.error("failed to load map %s: %s", map_path, ex)
            return 1
    else:
        grid = Grid(SCENARIO_ROWS, SCENARIO_COLS, SCENARIO_BLOCKS)
        jobs = [MapSpec(grid, s, SCENARIO_GOAL, name="scenario") for s in SCENARIO_STARTS]

    for spec in jobs:
        # --cost/--penalty (or env) override what the map file says
        try:
            move_cost = config.resolve_move_cost(argv, default=spec.move_cost)
            penalty = config.resolve_turn_penalty(argv, default=spec.turn_penalty)
        except ValueError as ex:
            log.error("bad option: %s", ex)
            return 2
        search = AStarSearch(spec.grid, move_cost=move_cost, turn_penalty=penalty)
        out.write(f"=== A Star Orthogonal [{spec.name}] (penalty={search.turn_penalty}) ===\n")
        try:
            report(search, spec.start, spec.goal, out)
        except (InvalidEndpoint, OutOfBounds) as ex:
            log.error("cannot search %s: %s", spec.name, ex)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
