"""Grid access and rendering utilities."""

from typing import Iterable, List

from pydantic import BaseModel, Field

from .characters import NO_PATH_CHARACTER
from .models import Direction, Position, Step


class Grid(BaseModel):
    """
    A ragged table of characters, one string per row.

    Reads outside the stored rows or columns return the no-path character
    instead of raising, so running off an edge looks like a gap in the path.
    """
    rows: List[str] = Field(default_factory=list)

    def at(self, position: Position) -> str:
        x, y = position
        if y < 0 or y >= len(self.rows):
            return NO_PATH_CHARACTER
        row = self.rows[y]
        if x < 0 or x >= len(row):
            return NO_PATH_CHARACTER
        return row[x]

    def find(self, char: str) -> List[Position]:
        """All positions holding `char`, in row-major order."""
        return [
            Position(x, y)
            for y, row in enumerate(self.rows)
            for x, cell in enumerate(row)
            if cell == char
        ]

    @property
    def width(self) -> int:
        return max((len(row) for row in self.rows), default=0)

    @property
    def height(self) -> int:
        return len(self.rows)


def move(position: Position, direction: Direction) -> Position:
    """The neighbouring position one cell along `direction`."""
    x, y = position
    if direction is Direction.UP:
        return Position(x, y - 1)
    if direction is Direction.DOWN:
        return Position(x, y + 1)
    if direction is Direction.LEFT:
        return Position(x - 1, y)
    return Position(x + 1, y)


def render_trace(grid: Grid, steps: Iterable[Step]) -> str:
    """Render the grid showing only visited cells; everything else is '.'."""
    visited = {step.position for step in steps}

    lines = [
        ''.join(
            grid.at(Position(x, y)) if (x, y) in visited else '.'
            for x in range(grid.width)
        )
        for y in range(grid.height)
    ]

    return '\n'.join(lines)
