"""Failure kinds raised while tracing a path."""

from enum import Enum
from typing import Optional

from .models import Direction, TraceError


class ErrorKind(str, Enum):
    """Every way a walk can fail."""
    MISSING_START = "MISSING_START"
    MISSING_END = "MISSING_END"
    MULTIPLE_STARTS = "MULTIPLE_STARTS"
    MULTIPLE_ENDS = "MULTIPLE_ENDS"
    BROKEN_PATH = "BROKEN_PATH"
    MULTIPLE_START_PATHS = "MULTIPLE_START_PATHS"
    INVALID_CHARACTER = "INVALID_CHARACTER"
    INVALID_DIRECTION = "INVALID_DIRECTION"
    FAKE_TURN = "FAKE_TURN"
    FORK_IN_PATH = "FORK_IN_PATH"


MESSAGES = {
    ErrorKind.MISSING_START: "Error - Missing start character.",
    ErrorKind.MISSING_END: "Error - Missing end character.",
    ErrorKind.MULTIPLE_STARTS: "Error - Multiple start characters found.",
    ErrorKind.MULTIPLE_ENDS: "Error - Multiple end characters found.",
    ErrorKind.BROKEN_PATH: "Error - Broken path.",
    ErrorKind.MULTIPLE_START_PATHS: "Error - Multiple starting paths.",
    ErrorKind.INVALID_CHARACTER: "Error - Invalid path character.",
    ErrorKind.INVALID_DIRECTION: "Error - Invalid character for direction {direction}.",
    ErrorKind.FAKE_TURN: "Error - Fake turn.",
    ErrorKind.FORK_IN_PATH: "Error - Fork in path.",
}


class PathError(Exception):
    """
    Raised when a grid cannot be walked.

    Only INVALID_DIRECTION carries a direction: the heading in effect
    when a straight segment was entered across its axis.
    """

    def __init__(self, kind: ErrorKind, direction: Optional[Direction] = None):
        self.kind = kind
        self.direction = direction
        super().__init__(self.message)

    @property
    def message(self) -> str:
        template = MESSAGES[self.kind]
        if self.direction is None:
            return template
        return template.format(direction=self.direction.value)

    def to_report(self) -> TraceError:
        """Convert to the serializable report form."""
        return TraceError(
            code=self.kind.value,
            message=self.message,
            direction=self.direction,
        )
