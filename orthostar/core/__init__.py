from orthostar.core.astar import AStarSearch, find_path
from orthostar.core.errors import EmptyFrontier, InvalidEndpoint, OutOfBounds
from orthostar.core.frontier import Frontier
from orthostar.core.grid import Grid, manhattan
from orthostar.core.types import Axis, Cell, Position, SearchResult, StepResult
