"""Test non-raising trace reports and error messages."""

import json

import pytest

from src.tracer import Direction, ErrorKind, PathError, TraceResult, verify


class TestValidReports:
    """Test reports for grids that walk to the end."""

    def test_simple_report(self):
        result = verify("@-A+\n   |\n x-+")
        assert result.valid is True
        assert result.letters == "A"
        assert result.path == "@-A+|+-x"
        assert result.steps == 8
        assert result.error is None

    def test_report_grid_shows_visited_cells(self):
        result = verify("@-x\n  A")
        assert result.valid is True
        assert result.grid == "@-x\n..."

    def test_report_grid_after_turns(self):
        result = verify("  @-+\nB   |\n  x-+")
        assert result.path == "@-+|+-x"
        assert result.grid == "..@-+\n....|\n..x-+"

    def test_report_serializes(self):
        result = verify("@-B-x")
        data = json.loads(result.model_dump_json())
        assert data["valid"] is True
        assert data["letters"] == "B"
        assert TraceResult.model_validate(data) == result


class TestErrorReports:
    """Test reports for grids that fail."""

    def test_empty_text(self):
        result = verify("")
        assert result.valid is False
        assert result.error.code == "MISSING_START"
        assert result.error.message == "Error - Missing start character."
        assert result.grid is None

    def test_no_partial_path(self):
        """A failed walk reports no letters or path."""
        result = verify("@-A-#-x")
        assert result.valid is False
        assert result.error.code == "INVALID_CHARACTER"
        assert result.letters == ""
        assert result.path == ""
        assert result.steps == 4

    def test_form_feed_is_invalid_character(self):
        """Control characters stay in the row instead of splitting it."""
        result = verify("@-\x0c-x")
        assert result.error.code == "INVALID_CHARACTER"

    def test_invalid_direction_report(self):
        result = verify("@-A-+\n x-C-")
        assert result.error.code == "INVALID_DIRECTION"
        assert result.error.direction == Direction.DOWN
        assert result.error.message == "Error - Invalid character for direction DOWN."


class TestPathErrorMessages:
    """Test the canonical error messages."""

    @pytest.mark.parametrize("kind, message", [
        (ErrorKind.BROKEN_PATH, "Error - Broken path."),
        (ErrorKind.INVALID_CHARACTER, "Error - Invalid path character."),
        (ErrorKind.MISSING_START, "Error - Missing start character."),
        (ErrorKind.MISSING_END, "Error - Missing end character."),
        (ErrorKind.MULTIPLE_STARTS, "Error - Multiple start characters found."),
        (ErrorKind.MULTIPLE_ENDS, "Error - Multiple end characters found."),
        (ErrorKind.FAKE_TURN, "Error - Fake turn."),
        (ErrorKind.FORK_IN_PATH, "Error - Fork in path."),
        (ErrorKind.MULTIPLE_START_PATHS, "Error - Multiple starting paths."),
    ])
    def test_messages(self, kind, message):
        error = PathError(kind)
        assert str(error) == message
        assert error.direction is None

    @pytest.mark.parametrize("direction", list(Direction))
    def test_invalid_direction_message(self, direction):
        error = PathError(ErrorKind.INVALID_DIRECTION, direction=direction)
        assert str(error) == f"Error - Invalid character for direction {direction.value}."

    def test_to_report(self):
        report = PathError(ErrorKind.FAKE_TURN).to_report()
        assert report.code == "FAKE_TURN"
        assert report.message == "Error - Fake turn."
        assert report.direction is None
