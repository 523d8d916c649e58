#!/usr/bin/env python3
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple, Optional, Dict, Any, FrozenSet

Position = Tuple[int, int]  # (row, col)


class Axis(Enum):
    NONE = "none"
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass(eq=False)
class Cell:
    """
    One grid position plus the mutable search state of the current run.

    Identity is (row, col, lane); lane stays Axis.NONE unless the search
    keeps a separate cell per arrival axis (turn penalty active).
    """
    row: int
    col: int
    lane: Axis = Axis.NONE
    blocked: bool = False
    g: int = 0
    h: int = 0
    f: int = 0
    parent: Optional["Cell"] = field(default=None, repr=False)
    arrival: Axis = Axis.NONE

    @property
    def position(self) -> Position:
        return (self.row, self.col)

    @property
    def key(self) -> Tuple[int, int, Axis]:
        return (self.row, self.col, self.lane)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cell):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __repr__(self) -> str:
        if self.lane is Axis.NONE:
            return f"Cell [row={self.row}, col={self.col}]"
        return f"Cell [row={self.row}, col={self.col}, lane={self.lane.name}]"


@dataclass
class StepResult:
    status: str                   # "idle" | "ready" | "expanding" | "done" | "exhausted"
    opened: List[Position] = field(default_factory=list)
    closed: List[Position] = field(default_factory=list)
    current: Optional[Position] = None
    path: Optional[List[Position]] = None
    metrics: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class SearchResult:
    status: str                   # "done" | "exhausted"
    path: Optional[List[Position]]
    cost: Optional[int]
    visited: FrozenSet[Position]
    popped: int

    @property
    def found(self) -> bool:
        return self.path is not None
