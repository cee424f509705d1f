"""Grid parsing utilities."""

from pathlib import Path

from .grid import Grid


def parse_grid(text: str) -> Grid:
    """
    Parse text into a grid, one row per line.

    Rows split on '\\n' only, with one trailing '\\r' dropped from each row
    so '\\r\\n' files read the same. Other control characters stay in the
    row and fail as invalid path characters. A final line break adds no
    empty row. Rows keep their own length; nothing is padded.
    """
    rows = [row[:-1] if row.endswith("\r") else row for row in text.split("\n")]
    if rows[-1] == "":
        rows.pop()
    return Grid(rows=rows)


def load_grid(path: str | Path) -> Grid:
    """Read a grid from a UTF-8 text file."""
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Grid file not found: {path}")

    with open(path, encoding="utf-8") as f:
        return parse_grid(f.read())
