"""Tests for maze_parser module."""

import pytest

from maze_parser import parse_maze, parse_mazes
from maze_types import MalformedMazeError, Maze


class TestParseMaze:
    """Tests for the single-maze parser."""

    def test_simple_maze(self) -> None:
        """Parse a small maze with every marker."""
        maze = parse_maze("#S\n.G")

        assert isinstance(maze, Maze)
        assert maze.cells == (("#", "S"), (".", "G"))
        assert maze.rows == 2
        assert maze.cols == 2

    def test_strips_indentation(self) -> None:
        """Leading and trailing whitespace on each line is ignored."""
        definition = """
            S.#
            ..G
        """
        maze = parse_maze(definition)

        assert maze.cells == (("S", ".", "#"), (".", ".", "G"))

    def test_blank_lines_dropped(self) -> None:
        """Whitespace-only lines are discarded before rows are indexed."""
        maze = parse_maze("\n\nS.\n   \n\n.G\n\n")

        assert maze.rows == 2
        assert maze.cells[1] == (".", "G")

    def test_carriage_returns_stripped(self) -> None:
        """Windows line endings do not leak into cells."""
        maze = parse_maze("S.\r\n.G\r\n")

        assert maze.cells == (("S", "."), (".", "G"))

    def test_ragged_rows_not_padded(self) -> None:
        """Rows keep their own lengths."""
        maze = parse_maze("S..\n.\n.G")

        assert maze.row_length(0) == 3
        assert maze.row_length(1) == 1
        assert maze.row_length(2) == 2
        assert maze.cols == 3

    def test_unknown_characters_kept(self) -> None:
        """Characters other than the known markers are kept verbatim."""
        maze = parse_maze("S~x\n?.G")

        assert maze.cells[0] == ("S", "~", "x")
        assert maze.cells[1][0] == "?"

    def test_interior_spaces_are_cells(self) -> None:
        """Only the ends of a line are trimmed."""
        maze = parse_maze("S G")

        assert maze.cells == (("S", " ", "G"),)

    def test_error_empty_string(self) -> None:
        """Error when the input is empty."""
        with pytest.raises(MalformedMazeError, match="Maze has no rows"):
            parse_maze("")

    def test_error_whitespace_only(self) -> None:
        """Error when every line is blank."""
        with pytest.raises(MalformedMazeError, match="Maze has no rows"):
            parse_maze("   \n\t\n  ")

    def test_malformed_is_value_error(self) -> None:
        """MalformedMazeError can be caught as ValueError."""
        with pytest.raises(ValueError):
            parse_maze("\n")


class TestParseMazes:
    """Tests for parsing several named mazes."""

    def test_multiple_mazes(self) -> None:
        """Parse a batch of named mazes."""
        store = parse_mazes({"a": "SG", "b": "S#\n.G"})

        assert len(store) == 2
        assert store["a"].cells == (("S", "G"),)
        assert store["b"].rows == 2

    def test_empty_definitions(self) -> None:
        """No definitions gives an empty store."""
        assert parse_mazes({}) == {}

    def test_error_names_maze(self) -> None:
        """A malformed entry is reported with its name."""
        with pytest.raises(MalformedMazeError, match="Invalid maze 'broken'"):
            parse_mazes({"ok": "SG", "broken": "  "})
