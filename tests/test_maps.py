import json
from pathlib import Path

import pytest

from orthostar import config
from orthostar.core.astar import AStarSearch
from orthostar.core.dijkstra import shortest_cost
from orthostar.core.errors import OutOfBounds
from orthostar.core.maps import load_map, parse_map


def test_sample_blocked_column():
    spec = load_map(config.MAP_DIR / "01_blocked_column.json")
    assert spec.name == "Blocked column"
    assert spec.grid.dimensions() == (6, 7)
    assert (spec.start, spec.goal) == ((2, 1), (2, 5))
    assert spec.turn_penalty is None
    assert AStarSearch(spec.grid, spec.move_cost).search(spec.start, spec.goal).cost == 80


def test_sample_corridors_from_cell_matrix():
    spec = load_map(config.MAP_DIR / "02_corridors.json")
    assert spec.grid.dimensions() == (9, 10)
    assert spec.turn_penalty == 5
    result = AStarSearch(spec.grid, spec.move_cost, spec.turn_penalty).search(spec.start, spec.goal)
    assert result.found
    assert result.cost == shortest_cost(spec.grid, spec.start, spec.goal, spec.move_cost, spec.turn_penalty)


def test_sample_walled_in_has_no_path():
    spec = load_map(config.MAP_DIR / "03_walled_in.json")
    assert spec.name == "Walled in"
    assert AStarSearch(spec.grid).find_path(spec.start, spec.goal) is None


def test_name_defaults_to_file_stem(tmp_path):
    path = tmp_path / "tiny.json"
    path.write_text(json.dumps({"rows": 2, "cols": 2, "start": [0, 0], "goal": [1, 1]}))
    spec = load_map(path)
    assert spec.name == "tiny"
    assert spec.move_cost == config.DEFAULT_MOVE_COST
    assert spec.grid.blocked_positions() == []


def test_cells_size_mismatch():
    with pytest.raises(ValueError):
        parse_map({"rows": 2, "cols": 2, "start": [0, 0], "goal": [0, 1], "cells": [[0, 0], [0]]})


def test_endpoint_out_of_bounds():
    with pytest.raises(OutOfBounds):
        parse_map({"rows": 2, "cols": 2, "start": [0, 0], "goal": [2, 0]})


def test_block_out_of_bounds():
    with pytest.raises(OutOfBounds):
        parse_map({"rows": 2, "cols": 2, "start": [0, 0], "goal": [1, 1], "blocks": [[5, 5]]})


def test_sample_maps_ship_inside_the_package():
    import orthostar
    assert config.MAP_DIR.parent == Path(orthostar.__file__).resolve().parent
    for name in ("01_blocked_column.json", "02_corridors.json", "03_walled_in.json"):
        assert (config.MAP_DIR / name).is_file()
