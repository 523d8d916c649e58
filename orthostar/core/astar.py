#!/usr/bin/env python3
"""
A* on a 4-connected grid, one expansion per step() so it can be animated.

API:
- reset(start, goal) - step() -> StepResult - run() -> SearchResult
- search(start, goal) / find_path(start, goal) for one-shot use

Heuristic:
- Manhattan scaled by the step cost (admissible and consistent).

Direction-change penalty:
- When turn_penalty is set, a move along a different axis than the one the
  current cell was reached by costs move_cost + turn_penalty. The first
  move out of start is never penalised.
- The search then keeps one cell per (row, col, arrival axis) so that steps
  and turns are minimised jointly; without a penalty there is one cell per
  position.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Set
import logging

from orthostar.config import DEFAULT_MOVE_COST
from orthostar.core.errors import InvalidEndpoint
from orthostar.core.frontier import Frontier
from orthostar.core.grid import BlockSource, Grid
from orthostar.core.types import Axis, Cell, Position, SearchResult, StepResult

log = logging.getLogger(__name__)

TERMINAL = ("done", "exhausted")


@dataclass
class AStarSearch:
    grid: Grid
    move_cost: int = DEFAULT_MOVE_COST
    turn_penalty: Optional[int] = None
    name: str = "A*"

    # Per-search state, rebuilt by reset()
    frontier: Frontier = field(default_factory=Frontier, repr=False)
    visited: Set[Cell] = field(default_factory=set, repr=False)
    start: Optional[Position] = None
    goal: Optional[Position] = None
    status: str = "idle"
    popped_count: int = 0
    goal_cell: Optional[Cell] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.move_cost <= 0:
            raise ValueError(f"move cost must be positive, got {self.move_cost}")
        if self.turn_penalty is not None and self.turn_penalty < 0:
            raise ValueError(f"turn penalty must not be negative, got {self.turn_penalty}")

    @classmethod
    def from_blocks(cls, rows: int, cols: int, blocks: Optional[BlockSource] = None,
                    move_cost: int = DEFAULT_MOVE_COST,
                    turn_penalty: Optional[int] = None) -> "AStarSearch":
        return cls(Grid(rows, cols, blocks), move_cost=move_cost, turn_penalty=turn_penalty)

    @property
    def penalised(self) -> bool:
        return bool(self.turn_penalty)

    # -------------------- lifecycle --------------------

    def reset(self, start: Position, goal: Position) -> None:
        """Validate endpoints, rebuild every cell for `goal` and seed the frontier with `start`."""
        start, goal = tuple(start), tuple(goal)
        for which, (r, c) in (("start", start), ("goal", goal)):
            if self.grid.is_blocked(r, c):  # raises OutOfBounds
                raise InvalidEndpoint(which, (r, c))

        lanes: Sequence[Axis] = (Axis.NONE,)
        if self.penalised:
            lanes = (Axis.NONE, Axis.HORIZONTAL, Axis.VERTICAL)
        self.grid.reset_cells(goal, self.move_cost, lanes)

        self.frontier = Frontier()
        self.visited = set()
        self.start, self.goal = start, goal
        self.popped_count = 0
        self.goal_cell = None

        s = self.grid.cell(*start)
        s.g = 0
        s.f = s.h
        self.frontier.push(s)
        self.status = "ready"
        log.debug("%s: %s -> %s on %dx%d (cost=%d, penalty=%s)", self.name, start, goal,
                  self.grid.rows, self.grid.cols, self.move_cost, self.turn_penalty)

    # -------------------- helpers --------------------

    def _step_cost(self, current: Cell, axis: Axis) -> int:
        cost = self.move_cost
        if self.penalised and current.arrival is not Axis.NONE and current.arrival is not axis:
            cost += self.turn_penalty
        return cost

    def _reconstruct_path(self, end: Cell) -> List[Position]:
        path: List[Position] = []
        cur: Optional[Cell] = end
        while cur is not None:
            path.append(cur.position)
            cur = cur.parent
        path.reverse()
        return path

    def visited_positions(self) -> Set[Position]:
        return {c.position for c in self.visited}

    # -------------------- main stepping logic --------------------

    def step(self) -> StepResult:
        """
        Run ONE A* expansion:
          - Pop the lowest-f cell and close it.
          - If it is the goal, reconstruct and finish.
          - Else open or improve each unblocked, unvisited neighbour.
        """
        if self.status == "idle":
            return StepResult(status="idle", metrics={"algo": self.name})

        if self.status == "done":
            path = self._reconstruct_path(self.goal_cell)
            return StepResult(status="done", path=path, metrics=self.metrics(path_len=len(path)))

        if self.status == "exhausted":
            return StepResult(status="exhausted", metrics=self.metrics())

        if not self.frontier:
            self.status = "exhausted"
            log.debug("%s: frontier empty after %d pops, no path", self.name, self.popped_count)
            return StepResult(status="exhausted", metrics=self.metrics())

        self.status = "expanding"
        u = self.frontier.pop_min()
        self.popped_count += 1
        self.visited.add(u)

        if u.position == self.goal:
            self.status = "done"
            self.goal_cell = u
            path = self._reconstruct_path(u)
            log.debug("%s: reached %s, cost %d, %d pops", self.name, self.goal, u.g, self.popped_count)
            return StepResult(status="done", closed=[u.position], current=u.position, path=path,
                              metrics=self.metrics(path_len=len(path)))

        opened_now: List[Position] = []
        for v, axis in self.grid.neighbors_of(u):
            if v.blocked or v in self.visited:
                continue
            alt = u.g + self._step_cost(u, axis)
            if v not in self.frontier:
                self._relink(v, u, alt, axis)
                self.frontier.push(v)
                opened_now.append(v.position)
            elif alt < v.g:
                self._relink(v, u, alt, axis)
                self.frontier.decrease_and_reorder(v)

        return StepResult(status="expanding", opened=opened_now, closed=[u.position],
                          current=u.position, metrics=self.metrics())

    @staticmethod
    def _relink(v: Cell, parent: Cell, g: int, axis: Axis) -> None:
        v.parent = parent
        v.g = g
        v.arrival = axis
        v.f = v.g + v.h

    def run(self) -> SearchResult:
        """Step until DONE or EXHAUSTED."""
        if self.status == "idle":
            raise RuntimeError("call reset(start, goal) before run()")
        while self.status not in TERMINAL:
            self.step()
        if self.status == "done":
            path = self._reconstruct_path(self.goal_cell)
            cost = self.goal_cell.g
        else:
            path, cost = None, None
        return SearchResult(status=self.status, path=path, cost=cost,
                            visited=frozenset(self.visited_positions()),
                            popped=self.popped_count)

    def search(self, start: Position, goal: Position) -> SearchResult:
        self.reset(start, goal)
        return self.run()

    def find_path(self, start: Position, goal: Position) -> Optional[List[Position]]:
        """Ordered path start..goal inclusive, or None when goal is unreachable."""
        return self.search(start, goal).path

    # -------------------- metrics --------------------

    def metrics(self, path_len: int = 0) -> dict:
        return {
            "algo": self.name,
            "popped": self.popped_count,
            "open_size": len(self.frontier),
            "closed_count": len(self.visited),
            "path_len": path_len,
            "total_cost": self.goal_cell.g if self.goal_cell is not None else None,
        }


def find_path(rows: int, cols: int, blocks: Optional[BlockSource], start: Position, goal: Position,
              move_cost: int = DEFAULT_MOVE_COST,
              turn_penalty: Optional[int] = None) -> Optional[List[Position]]:
    """One-shot convenience wrapper around AStarSearch."""
    search = AStarSearch.from_blocks(rows, cols, blocks, move_cost=move_cost, turn_penalty=turn_penalty)
    return search.find_path(start, goal)

