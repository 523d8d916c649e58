#!/usr/bin/env python3
"""Cost accounting and ASCII rendering for finished paths."""

from typing import List, Optional, Sequence

from orthostar.core.types import Axis, Position


def axis_between(a: Position, b: Position) -> Axis:
    (ar, ac), (br, bc) = a, b
    if ar == br and abs(ac - bc) == 1:
        return Axis.HORIZONTAL
    if ac == bc and abs(ar - br) == 1:
        return Axis.VERTICAL
    raise ValueError(f"{a} and {b} are not orthogonal neighbours")


def count_turns(path: Sequence[Position]) -> int:
    """Number of axis changes along `path`. The first move never counts."""
    turns = 0
    prev = Axis.NONE
    for a, b in zip(path, path[1:]):
        axis = axis_between(a, b)
        if prev is not Axis.NONE and axis is not prev:
            turns += 1
        prev = axis
    return turns


def path_cost(path: Sequence[Position], move_cost: int, turn_penalty: Optional[int] = None) -> int:
    steps = max(0, len(path) - 1)
    cost = steps * move_cost
    if turn_penalty:
        cost += count_turns(path) * turn_penalty
    return cost


def render(grid, path: Optional[Sequence[Position]], start: Position, goal: Position) -> str:
    """
    Plain-text picture of the grid, same legend as the original test output:
      B block, * path, S start, G goal, - open
    """
    on_path = set(path or ())
    rows, cols = grid.dimensions()
    lines: List[str] = ["     " + "".join(f"{c:<4}" for c in range(cols)).rstrip()]
    for r in range(rows):
        marks = []
        for c in range(cols):
            if (r, c) == start:
                m = "S"
            elif (r, c) == goal:
                m = "G"
            elif grid.is_blocked(r, c):
                m = "B"
            elif (r, c) in on_path:
                m = "*"
            else:
                m = "-"
            marks.append(f"{m:<4}")
        lines.append(f"{r:<5}" + "".join(marks).rstrip())
    return "\n".join(lines)
