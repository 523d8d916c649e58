import random

import pytest

from orthostar.core.grid import Grid
from orthostar.core.paths import axis_between

SCENARIO_BLOCKS = [(1, 3), (2, 3), (3, 3)]


@pytest.fixture
def scenario_grid():
    return Grid(6, 7, SCENARIO_BLOCKS)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for var in ("ORTHOSTAR_MOVE_COST", "ORTHOSTAR_TURN_PENALTY", "ORTHOSTAR_LOG_LEVEL", "ORTHOSTAR_MAP"):
        monkeypatch.delenv(var, raising=False)


def _random_case(seed, rows=6, cols=6, density=0.3):
    rng = random.Random(seed)
    blocks = [(r, c) for r in range(rows) for c in range(cols) if rng.random() < density]
    grid = Grid(rows, cols, blocks)
    free = [(r, c) for r in range(rows) for c in range(cols) if not grid.is_blocked(r, c)]
    start, goal = rng.choice(free), rng.choice(free)
    return grid, start, goal


def _assert_valid_path(grid, path, start, goal):
    assert path[0] == start
    assert path[-1] == goal
    for r, c in path:
        assert not grid.is_blocked(r, c)
    for a, b in zip(path, path[1:]):
        axis_between(a, b)  # raises if not orthogonally adjacent
    assert len(set(path)) == len(path)


@pytest.fixture
def random_case():
    """Factory: deterministic grid plus an open start/goal pair for a seed."""
    return _random_case


@pytest.fixture
def assert_valid_path():
    return _assert_valid_path
