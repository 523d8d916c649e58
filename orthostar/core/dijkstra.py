#!/usr/bin/env python3
"""
Exhaustive uniform-cost search used as a ground truth for A*.

States are (position, arrival axis), so the returned cost is the true
minimum of steps plus turns even when a turn penalty applies. No heuristic,
no early closing tricks; only meant for small grids.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple
import heapq
import itertools

from orthostar.config import DEFAULT_MOVE_COST
from orthostar.core.grid import MOVES, Grid
from orthostar.core.types import Axis, Position

State = Tuple[Position, Axis]


@dataclass
class DijkstraBaseline:
    grid: Grid
    move_cost: int = DEFAULT_MOVE_COST
    turn_penalty: Optional[int] = None

    dist: Dict[State, int] = field(default_factory=dict)

    def _neighbors4(self, state: State) -> List[Tuple[State, int]]:
        (r, c), arrival = state
        out: List[Tuple[State, int]] = []
        for dr, dc, axis in MOVES:
            nr, nc = r + dr, c + dc
            if not self.grid.in_bounds(nr, nc) or self.grid.is_blocked(nr, nc):
                continue
            cost = self.move_cost
            if self.turn_penalty and arrival is not Axis.NONE and arrival is not axis:
                cost += self.turn_penalty
            out.append((((nr, nc), axis), cost))
        return out

    def shortest_cost(self, start: Position, goal: Position) -> Optional[int]:
        self.dist = {}
        seq = itertools.count()
        s: State = (tuple(start), Axis.NONE)
        self.dist[s] = 0
        open_pq: List[Tuple[int, int, State]] = [(0, next(seq), s)]
        while open_pq:
            g_u, _, u = heapq.heappop(open_pq)
            if g_u != self.dist.get(u):
                continue  # stale
            if u[0] == tuple(goal):
                return g_u
            for v, step_cost in self._neighbors4(u):
                alt = g_u + step_cost
                if alt < self.dist.get(v, float("inf")):
                    self.dist[v] = alt
                    heapq.heappush(open_pq, (alt, next(seq), v))
        return None

    def reachable(self, start: Position) -> set:
        """Every position reachable from `start` (valid after an exhaustive run)."""
        self.shortest_cost(start, (-1, -1))
        return {pos for pos, _ in self.dist}


def shortest_cost(grid: Grid, start: Position, goal: Position,
                  move_cost: int = DEFAULT_MOVE_COST, turn_penalty: Optional[int] = None) -> Optional[int]:
    return DijkstraBaseline(grid, move_cost, turn_penalty).shortest_cost(start, goal)
