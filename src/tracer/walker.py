"""
Path walker: follows a path from '@' to 'x' one cell at a time.

`start` builds the first WalkerState, `advance` produces each next one, and
`walk` drives the loop and assembles the FinalPath. Any violation raises
PathError immediately.

States link their steps into a Trail instead of copying them, and all
states of one walk share a single visited set, so each step costs O(1).
"""

from typing import Callable, Optional

from .characters import (
    CORNER_CHARACTER,
    END_CHARACTER,
    NO_PATH_CHARACTER,
    START_CHARACTER,
    is_letter,
    is_path_character,
    is_synced_with_direction,
)
from .errors import ErrorKind, PathError
from .grid import Grid, move
from .models import FinalPath, Step, Trail, WalkerState
from .navigation import change_direction, find_direction, is_fake_turn, locate_start


StepCallback = Callable[[Step], None]


def start(grid: Grid) -> WalkerState:
    """Validate the endpoints and place the walker on the start mark."""
    position = locate_start(grid)
    heading = find_direction(grid, position)

    return WalkerState(
        position=position,
        heading=heading,
        trail=Trail(Step(START_CHARACTER, position, None)),
        visited={position},
    )


def needs_turn(grid: Grid, state: WalkerState) -> bool:
    """Corners always turn; letters turn only where the straight run ends."""
    char = grid.at(state.position)
    if char == CORNER_CHARACTER:
        return True
    return is_letter(char) and grid.at(move(state.position, state.heading)) == NO_PATH_CHARACTER


def advance(grid: Grid, state: WalkerState) -> WalkerState:
    """Move one cell along the current heading and return the new state."""
    heading = state.heading
    position = move(state.position, heading)
    char = grid.at(position)
    seen = position in state.visited

    if char == NO_PATH_CHARACTER:
        raise PathError(ErrorKind.BROKEN_PATH)
    if not is_path_character(char):
        raise PathError(ErrorKind.INVALID_CHARACTER)
    # A segment validated on an earlier pass may be crossed from a branch.
    if not is_synced_with_direction(char, heading) and not seen:
        raise PathError(ErrorKind.INVALID_DIRECTION, direction=heading)

    state.visited.add(position)
    state = state._replace(
        position=position,
        trail=state.trail.extend(Step(char, position, heading), first_visit=not seen),
    )

    if char == END_CHARACTER:
        return state._replace(heading=None)

    if needs_turn(grid, state):
        if is_fake_turn(grid, heading, position, state.visited):
            raise PathError(ErrorKind.FAKE_TURN)
        turn = change_direction(grid, heading, position, state.previous_position)
        state = state._replace(heading=turn)

    return state


def walk(grid: Grid, on_step: Optional[StepCallback] = None) -> FinalPath:
    """
    Walk the path from start to end.

    Args:
        grid: The grid to trace
        on_step: Optional callback called with every step, start included

    Returns:
        FinalPath with the letters collected and the full path walked

    Raises:
        PathError: on the first rule the grid breaks
    """
    state = start(grid)
    if on_step:
        on_step(state.trail.step)

    while not state.halted:
        state = advance(grid, state)
        if on_step:
            on_step(state.trail.step)

    return to_final_path(state)


def to_final_path(state: WalkerState) -> FinalPath:
    """Letters come only from steps that first reached their cell."""
    nodes = state.trail.nodes()
    return FinalPath(
        letters=''.join(
            node.step.char for node in nodes
            if node.first_visit and is_letter(node.step.char)
        ),
        path=''.join(node.step.char for node in nodes),
    )
