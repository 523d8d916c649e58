#!/usr/bin/env python3
"""
JSON map loader.

    {
      "name": "blocked column",          optional
      "rows": 6, "cols": 7,
      "start": [2, 1], "goal": [2, 5],
      "blocks": [[1, 3], [2, 3], [3, 3]],   or  "cells": [[0, 0, 1, ...], ...]
      "move_cost": 10,                   optional
      "turn_penalty": 5                  optional
    }

"cells" is a full matrix, truthy = blocked; rows/cols may be omitted then.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

from orthostar.config import DEFAULT_MOVE_COST
from orthostar.core.grid import Grid
from orthostar.core.types import Position


@dataclass
class MapSpec:
    grid: Grid
    start: Position
    goal: Position
    move_cost: int = DEFAULT_MOVE_COST
    turn_penalty: Optional[int] = None
    name: str = "custom"


def parse_map(data: Dict[str, Any], name: str = "custom") -> MapSpec:
    if "cells" in data:
        cells = [[bool(v) for v in row] for row in data["cells"]]
        rows = int(data.get("rows", len(cells)))
        cols = int(data.get("cols", len(cells[0]) if cells else 0))
        if len(cells) != rows or any(len(r) != cols for r in cells):
            raise ValueError("cells size mismatch")
        grid = Grid(rows, cols, cells)
    else:
        grid = Grid(int(data["rows"]), int(data["cols"]),
                    [tuple(b) for b in data.get("blocks", [])])

    start = tuple(data["start"])
    goal = tuple(data["goal"])
    for label, pos in (("start", start), ("goal", goal)):
        if len(pos) != 2:
            raise ValueError(f"{label} must be [row, col], got {list(pos)}")
        grid.check_bounds(*pos)

    penalty = data.get("turn_penalty")
    return MapSpec(
        grid=grid,
        start=start,
        goal=goal,
        move_cost=int(data.get("move_cost", DEFAULT_MOVE_COST)),
        turn_penalty=int(penalty) if penalty else None,
        name=str(data.get("name", name)),
    )


def load_map(path: Union[str, Path]) -> MapSpec:
    path = Path(path)
    with open(path, "r") as f:
        data = json.load(f)
    return parse_map(data, name=path.stem)
