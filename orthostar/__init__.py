"""Orthogonal (4-connected) A* pathfinding with an optional direction-change penalty."""

from orthostar.core import (
    AStarSearch,
    Axis,
    Cell,
    EmptyFrontier,
    Frontier,
    Grid,
    InvalidEndpoint,
    OutOfBounds,
    Position,
    SearchResult,
    StepResult,
    find_path,
    manhattan,
)

__version__ = "1.0.0"
