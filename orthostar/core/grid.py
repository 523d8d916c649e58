#!/usr/bin/env python3
"""
Grid: static blocked map plus the per-search Cell matrix.

The blocked configuration persists across searches. The Cell matrix does not:
reset_cells() throws it away and rebuilds it (heuristics against the new
goal, blocks reapplied) at the start of every search.
"""

import logging
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

from orthostar.core.errors import OutOfBounds
from orthostar.core.types import Axis, Cell, Position

log = logging.getLogger(__name__)

BlockSource = Union[Iterable[Sequence[int]], Sequence[Sequence[bool]]]

# (d_row, d_col, axis): up, down, left, right
MOVES: Tuple[Tuple[int, int, Axis], ...] = (
    (-1, 0, Axis.VERTICAL),
    (1, 0, Axis.VERTICAL),
    (0, -1, Axis.HORIZONTAL),
    (0, 1, Axis.HORIZONTAL),
)


def manhattan(position: Position, goal: Position, move_cost: int) -> int:
    """Admissible heuristic for 4-connected grids: Manhattan * step cost."""
    (r, c) = position
    (gr, gc) = goal
    return (abs(gr - r) + abs(gc - c)) * move_cost


class Grid:
    def __init__(self, rows: int, cols: int, blocks: Optional[BlockSource] = None):
        if rows <= 0 or cols <= 0:
            raise ValueError(f"grid needs positive dimensions, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self._blocked: List[List[bool]] = [[False] * cols for _ in range(rows)]
        self._lanes: Dict[Axis, List[List[Cell]]] = {}
        if blocks is not None:
            self.apply_blocks(blocks)

    @classmethod
    def from_matrix(cls, matrix: Sequence[Sequence[bool]]) -> "Grid":
        """Build a grid whose size and blocks both come from a boolean matrix."""
        if len(matrix) == 0 or len(matrix[0]) == 0:
            raise ValueError("block matrix is empty")
        return cls(len(matrix), len(matrix[0]), [[bool(v) for v in row] for row in matrix])

    # -------------------- static queries --------------------

    def dimensions(self) -> Tuple[int, int]:
        return (self.rows, self.cols)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def check_bounds(self, row: int, col: int) -> None:
        if not self.in_bounds(row, col):
            raise OutOfBounds(row, col, self.rows, self.cols)

    def is_blocked(self, row: int, col: int) -> bool:
        self.check_bounds(row, col)
        return self._blocked[row][col]

    def blocked_positions(self) -> List[Position]:
        return [(r, c) for r in range(self.rows) for c in range(self.cols) if self._blocked[r][c]]

    # -------------------- block configuration --------------------

    def apply_blocks(self, source: BlockSource) -> None:
        """
        Replace the blocked configuration.

        `source` is either a list of (row, col) pairs or a full boolean matrix
        (True = blocked) of exactly rows x cols. Cells not named stay open.
        Nothing changes if any entry is out of bounds.
        """
        fresh = [[False] * self.cols for _ in range(self.rows)]
        items = list(source)
        if items and self._looks_like_matrix(items):
            if len(items) != self.rows:
                raise ValueError(f"block matrix has {len(items)} rows, grid has {self.rows}")
            for r, line in enumerate(items):
                if len(line) != self.cols:
                    raise ValueError(f"block matrix row {r} has {len(line)} cols, grid has {self.cols}")
                for c, v in enumerate(line):
                    fresh[r][c] = bool(v)
        else:
            for entry in items:
                if len(entry) != 2:
                    raise ValueError(f"block entry {entry!r} is not a (row, col) pair; "
                                     "pass int matrices through Grid.from_matrix")
                row, col = entry
                self.check_bounds(row, col)
                fresh[row][col] = True
        self._blocked = fresh
        log.debug("applied %d blocks to %dx%d grid",
                  sum(map(sum, fresh)), self.rows, self.cols)

    def set_block(self, row: int, col: int, blocked: bool = True) -> None:
        self.check_bounds(row, col)
        self._blocked[row][col] = blocked

    @staticmethod
    def _looks_like_matrix(items: list) -> bool:
        # Pairs hold ints, a matrix holds bools. 0/1 matrices go through from_matrix().
        return any(isinstance(v, bool) for line in items for v in line)

    # -------------------- per-search cells --------------------

    def reset_cells(self, goal: Position, move_cost: int,
                    lanes: Sequence[Axis] = (Axis.NONE,)) -> None:
        """Allocate a fresh Cell matrix per lane, heuristics against `goal`, blocks reapplied."""
        self._lanes = {}
        for lane in lanes:
            matrix: List[List[Cell]] = []
            for r in range(self.rows):
                line: List[Cell] = []
                for c in range(self.cols):
                    cell = Cell(r, c, lane=lane, blocked=self._blocked[r][c])
                    cell.h = manhattan((r, c), goal, move_cost)
                    cell.f = cell.h
                    line.append(cell)
                matrix.append(line)
            self._lanes[lane] = matrix

    def cell(self, row: int, col: int, lane: Axis = Axis.NONE) -> Cell:
        self.check_bounds(row, col)
        try:
            return self._lanes[lane][row][col]
        except KeyError:
            raise LookupError(f"lane {lane.name} not allocated; call reset_cells() first") from None

    def neighbors_of(self, cell: Cell) -> List[Tuple[Cell, Axis]]:
        """In-bounds cells above, below, left and right of `cell`, tagged with the move's axis."""
        out: List[Tuple[Cell, Axis]] = []
        for dr, dc, axis in MOVES:
            r, c = cell.row + dr, cell.col + dc
            if not self.in_bounds(r, c):
                continue
            lane = axis if axis in self._lanes else Axis.NONE
            out.append((self._lanes[lane][r][c], axis))
        return out
