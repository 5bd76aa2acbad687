from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Position:
    """
    A position in a two-dimensional document of rows and columns.
    Both row and column are 1-based, and positions compare in
    row-major order.
    """

    row: int
    col: int

    def __str__(self):
        return f"{self.row}/{self.col}"


START_POSITION = Position(row=1, col=1)
