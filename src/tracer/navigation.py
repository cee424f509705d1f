"""
Decisions made at the ends and corners of a path.

Covers:
1. Locating the start (exactly one '@' and one 'x' must exist)
2. Choosing the only heading that leaves the start
3. Rejecting corners that do not actually turn
4. Choosing the only heading out of a corner
"""

from typing import AbstractSet, List, Optional

from .characters import (
    CORNER_CHARACTER,
    END_CHARACTER,
    NO_PATH_CHARACTER,
    START_CHARACTER,
    is_path_character,
)
from .errors import ErrorKind, PathError
from .grid import Grid, move
from .models import Direction, Position


def locate_start(grid: Grid) -> Position:
    """
    Return the position of the start mark.

    Both missing checks run before either multiplicity check, so a grid
    with no start and two ends reports MISSING_START.
    """
    starts = grid.find(START_CHARACTER)
    ends = grid.find(END_CHARACTER)

    if not starts:
        raise PathError(ErrorKind.MISSING_START)
    if not ends:
        raise PathError(ErrorKind.MISSING_END)
    if len(starts) > 1:
        raise PathError(ErrorKind.MULTIPLE_STARTS)
    if len(ends) > 1:
        raise PathError(ErrorKind.MULTIPLE_ENDS)

    return starts[0]


def open_directions(grid: Grid, position: Position) -> List[Direction]:
    """Directions whose neighbouring cell holds a path character."""
    return [
        direction
        for direction in Direction
        if is_path_character(grid.at(move(position, direction)))
    ]


def find_direction(grid: Grid, position: Position) -> Direction:
    """The single heading leading away from the start mark."""
    directions = open_directions(grid, position)

    if not directions:
        raise PathError(ErrorKind.BROKEN_PATH)
    if len(directions) > 1:
        raise PathError(ErrorKind.MULTIPLE_START_PATHS)

    return directions[0]


def is_fake_turn(
    grid: Grid,
    direction: Direction,
    position: Position,
    visited: AbstractSet[Position],
) -> bool:
    """A corner followed by unvisited path straight ahead does not turn."""
    if grid.at(position) != CORNER_CHARACTER:
        return False

    ahead = move(position, direction)
    return grid.at(ahead) != NO_PATH_CHARACTER and ahead not in visited


def perpendicular(direction: Direction) -> List[Direction]:
    if direction.is_horizontal:
        return [Direction.UP, Direction.DOWN]
    return [Direction.LEFT, Direction.RIGHT]


def change_direction(
    grid: Grid,
    direction: Direction,
    position: Position,
    previous: Optional[Position],
) -> Direction:
    """
    Pick the new heading at a corner or at a letter acting as one.

    Only the two perpendicular headings are candidates, and never the one
    leading back onto `previous`, the cell walked just before. With no
    candidate the heading is kept; with two the path forks.
    """
    candidates = [
        turn
        for turn in perpendicular(direction)
        if is_path_character(grid.at(move(position, turn)))
        and move(position, turn) != previous
    ]

    if len(candidates) > 1:
        raise PathError(ErrorKind.FORK_IN_PATH)
    if candidates:
        return candidates[0]
    return direction
