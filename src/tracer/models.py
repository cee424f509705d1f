"""Data models for path tracing."""

from enum import Enum
from typing import List, NamedTuple, Optional, Set
from pydantic import BaseModel


class Direction(str, Enum):
    """Heading of travel across the grid."""
    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"

    @property
    def is_horizontal(self) -> bool:
        return self in (Direction.LEFT, Direction.RIGHT)


class Position(NamedTuple):
    """A cell on the grid: x is the column, y is the row."""
    x: int
    y: int


class Step(NamedTuple):
    """One visited cell. The start step has no direction."""
    char: str
    position: Position
    direction: Optional[Direction]


class Trail:
    """
    Steps of a walk as a chain, newest first.

    Each node links to the one before it, so extending a trail never copies
    it. `first_visit` marks steps landing on a cell for the first time.
    """
    __slots__ = ("step", "previous", "first_visit", "length")

    def __init__(self, step: Step, previous: Optional["Trail"] = None, first_visit: bool = True):
        self.step = step
        self.previous = previous
        self.first_visit = first_visit
        self.length = previous.length + 1 if previous else 1

    def extend(self, step: Step, first_visit: bool) -> "Trail":
        return Trail(step, self, first_visit)

    def nodes(self) -> List["Trail"]:
        """All nodes, oldest first."""
        chain = []
        node = self
        while node is not None:
            chain.append(node)
            node = node.previous
        chain.reverse()
        return chain

    def steps(self) -> List[Step]:
        return [node.step for node in self.nodes()]


class WalkerState(NamedTuple):
    """
    Snapshot of an in-progress walk.

    A heading of None means the walk has halted. States of one walk share
    its visited set; advancing adds the new cell to it.
    """
    position: Position
    heading: Optional[Direction]
    trail: Trail
    visited: Set[Position]

    @property
    def halted(self) -> bool:
        return self.heading is None

    @property
    def previous_position(self) -> Optional[Position]:
        """Where the walker stood one step ago."""
        if self.trail.previous is None:
            return None
        return self.trail.previous.step.position


class FinalPath(BaseModel):
    """Letters collected and the full path rendered by a successful walk."""
    letters: str = ""
    path: str = ""


class TraceError(BaseModel):
    """A path failure in report form."""
    code: str
    message: str
    direction: Optional[Direction] = None


class TraceResult(BaseModel):
    """Result of tracing a grid."""
    valid: bool
    letters: str = ""
    path: str = ""
    steps: int = 0
    error: Optional[TraceError] = None
    grid: Optional[str] = None


class TracerConfig(BaseModel):
    """Configuration for a tracer run."""
    verbose: bool = False
    show_grid: bool = False
    output: Optional[str] = None
