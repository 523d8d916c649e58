"""Error taxonomy for grid searches. An unreachable goal is not an error."""


class OutOfBounds(IndexError):
    """A coordinate lies outside the grid."""

    def __init__(self, row, col, rows, cols):
        super().__init__(f"({row}, {col}) is outside a {rows}x{cols} grid")
        self.row = row
        self.col = col


class InvalidEndpoint(ValueError):
    """Start or goal sits on a blocked cell."""

    def __init__(self, which, position):
        super().__init__(f"{which} {position} is blocked")
        self.which = which
        self.position = position


class EmptyFrontier(LookupError):
    """Popped from an empty frontier."""
