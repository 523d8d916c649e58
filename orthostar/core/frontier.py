#!/usr/bin/env python3
"""
Open set for A*: a binary heap keyed on (f, h, seq).

Tie-breaking: lower f, then lower h, then FIFO by seq. heapq cannot lower
a key in place, so decrease_and_reorder() marks the old entry removed and
pushes a fresh one; stale entries are skipped on pop.
"""

import heapq
import itertools
from typing import Dict, Iterator, List

from orthostar.core.errors import EmptyFrontier
from orthostar.core.types import Cell, Position

_REMOVED = None  # placeholder for a cell whose entry went stale


class Frontier:
    def __init__(self) -> None:
        self._heap: List[list] = []            # [f, h, seq, cell]
        self._entries: Dict[Cell, list] = {}
        self._seq = itertools.count()

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __contains__(self, cell: Cell) -> bool:
        return cell in self._entries

    def contains(self, cell: Cell) -> bool:
        return cell in self._entries

    def push(self, cell: Cell) -> None:
        if cell in self._entries:
            raise ValueError(f"{cell!r} already in frontier; use decrease_and_reorder()")
        entry = [cell.f, cell.h, next(self._seq), cell]
        self._entries[cell] = entry
        heapq.heappush(self._heap, entry)

    def decrease_and_reorder(self, cell: Cell) -> None:
        """Re-key `cell` after its f dropped (remove + reinsert)."""
        entry = self._entries.pop(cell)
        entry[-1] = _REMOVED
        self.push(cell)

    def pop_min(self) -> Cell:
        while self._heap:
            *_, cell = heapq.heappop(self._heap)
            if cell is not _REMOVED:
                del self._entries[cell]
                return cell
        raise EmptyFrontier("pop from an empty frontier")

    def positions(self) -> Iterator[Position]:
        return (c.position for c in self._entries)
