import pytest

from orthostar.core.astar import AStarSearch
from orthostar.core.dijkstra import shortest_cost
from orthostar.core.grid import Grid
from orthostar.core.paths import axis_between, count_turns, path_cost
from orthostar.core.types import Axis


def test_axis_between():
    assert axis_between((1, 1), (1, 2)) is Axis.HORIZONTAL
    assert axis_between((1, 1), (0, 1)) is Axis.VERTICAL
    with pytest.raises(ValueError):
        axis_between((1, 1), (2, 2))
    with pytest.raises(ValueError):
        axis_between((1, 1), (1, 3))


def test_count_turns_and_cost():
    path = [(0, 0), (0, 1), (1, 1), (2, 1), (2, 2)]
    assert count_turns(path) == 2
    assert path_cost(path, 10) == 40
    assert path_cost(path, 10, turn_penalty=5) == 50
    assert count_turns([(0, 0)]) == 0
    assert path_cost([(0, 0)], 10, turn_penalty=5) == 0


def test_scenario_minimises_steps_and_turns_jointly(scenario_grid, assert_valid_path):
    search = AStarSearch(scenario_grid, turn_penalty=5)
    result = search.search((2, 1), (2, 5))
    assert_valid_path(scenario_grid, result.path, (2, 1), (2, 5))
    assert len(result.path) == 9
    assert count_turns(result.path) == 2
    assert result.cost == 90


def test_large_penalty_scenario(scenario_grid):
    result = AStarSearch(scenario_grid, turn_penalty=100).search((2, 1), (2, 5))
    assert result.cost == 280
    assert count_turns(result.path) == 2


def test_first_move_is_not_penalised():
    straight = AStarSearch(Grid(1, 3), turn_penalty=5).search((0, 0), (0, 2))
    assert straight.cost == 20
    corner = AStarSearch(Grid(2, 2), turn_penalty=5).search((0, 0), (1, 1))
    assert corner.cost == 25
    open3 = AStarSearch(Grid(3, 3), turn_penalty=5).search((0, 0), (2, 2))
    assert open3.cost == 45
    assert count_turns(open3.path) == 1


def test_cost_is_steps_plus_k_penalties(random_case):
    for seed in range(30):
        grid, start, goal = random_case(seed, rows=7, cols=7, density=0.25)
        result = AStarSearch(grid, turn_penalty=7).search(start, goal)
        if result.path is None:
            continue
        steps_only = path_cost(result.path, 10)
        assert result.cost == steps_only + count_turns(result.path) * 7


@pytest.mark.parametrize("penalty", [1, 5, 15, 40])
def test_matches_heading_aware_baseline(penalty, random_case):
    for seed in range(40):
        grid, start, goal = random_case(seed)
        result = AStarSearch(grid, turn_penalty=penalty).search(start, goal)
        assert result.cost == shortest_cost(grid, start, goal, move_cost=10, turn_penalty=penalty), seed


def test_zero_penalty_means_disabled(scenario_grid):
    search = AStarSearch(scenario_grid, turn_penalty=0)
    assert not search.penalised
    assert search.search((2, 1), (2, 5)).cost == 80


def test_penalty_never_beats_plain_cost(scenario_grid):
    plain = AStarSearch(scenario_grid).search((2, 0), (2, 5))
    penalised = AStarSearch(scenario_grid, turn_penalty=5).search((2, 0), (2, 5))
    assert penalised.cost >= plain.cost
    assert penalised.cost <= path_cost(plain.path, 10, turn_penalty=5)
