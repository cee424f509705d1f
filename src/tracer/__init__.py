"""Letter path tracing over character grids."""

from .verify import verify, trace_grid
from .walker import walk, start, advance
from .models import (
    Direction,
    Position,
    Step,
    WalkerState,
    Trail,
    FinalPath,
    TraceError,
    TraceResult,
    TracerConfig,
)
from .errors import ErrorKind, PathError
from .grid import Grid, move, render_trace
from .parsing import parse_grid, load_grid
from .characters import is_path_character, is_letter, is_synced_with_direction
from .navigation import locate_start, find_direction, is_fake_turn, change_direction

__all__ = [
    # Main tracing
    "verify",
    "trace_grid",
    "walk",
    "start",
    "advance",
    # Models
    "Direction",
    "Position",
    "Step",
    "WalkerState",
    "Trail",
    "FinalPath",
    "TraceError",
    "TraceResult",
    "TracerConfig",
    # Errors
    "ErrorKind",
    "PathError",
    # Grid utilities
    "Grid",
    "move",
    "render_trace",
    "parse_grid",
    "load_grid",
    # Classification
    "is_path_character",
    "is_letter",
    "is_synced_with_direction",
    # Navigation
    "locate_start",
    "find_direction",
    "is_fake_turn",
    "change_direction",
]
