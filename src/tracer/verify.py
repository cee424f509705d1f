"""
Trace verification: walks a grid and reports the outcome without raising.

Reports:
1. The letters collected and the full path, when the walk reaches 'x'
2. The error code and message of the first rule broken, otherwise
3. A rendering of the visited cells (successful walks only)
"""

from typing import List, Optional

from .errors import PathError
from .grid import Grid, render_trace
from .models import Step, TraceResult
from .parsing import parse_grid
from .walker import StepCallback, walk


def trace_grid(grid: Grid, on_step: Optional[StepCallback] = None) -> TraceResult:
    """Walk an already parsed grid and report the result."""
    steps: List[Step] = []

    def record(step: Step) -> None:
        steps.append(step)
        if on_step:
            on_step(step)

    try:
        final = walk(grid, on_step=record)
    except PathError as e:
        return TraceResult(
            valid=False,
            steps=len(steps),
            error=e.to_report(),
        )

    return TraceResult(
        valid=True,
        letters=final.letters,
        path=final.path,
        steps=len(steps),
        grid=render_trace(grid, steps),
    )


def verify(text: str) -> TraceResult:
    """
    Main verification function: traces the path drawn in `text`.

    Returns a TraceResult with:
    - valid: True if the walk reached the end mark
    - letters: Letters collected, in first-visit order
    - path: Every character walked, revisits included
    - steps: Number of steps taken before finishing or failing
    - error: The failure, if any
    - grid: Rendered trace (if valid)
    """
    return trace_grid(parse_grid(text))
