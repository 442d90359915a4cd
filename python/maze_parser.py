"""
Maze parsing utilities.

Mazes are written one row per line with a single character per cell:
- '#': Wall
- '.': Floor
- 'S': Start
- 'G': Goal
Any other character is walkable floor. Leading and trailing whitespace on
each line is ignored, as are blank lines, so mazes can be written as
indented triple-quoted strings.
"""

from __future__ import annotations

import logging

from maze_types import MalformedMazeError, Maze, MazeStore

__all__ = ["parse_maze", "parse_mazes"]

logger = logging.getLogger(__name__)


def parse_maze(text: str) -> Maze:
    """
    Parse a maze from a multi-line string.

    Example:
        \"\"\"
        #S#
        ..G
        \"\"\"

        Creates a 2-row maze: (("#", "S", "#"), (".", ".", "G"))

    Rows keep their own lengths; ragged input is not padded.

    Args:
        text: Maze as a multi-line string

    Returns:
        The parsed Maze

    Raises:
        MalformedMazeError: If no non-blank rows remain after trimming
    """
    lines = [line.strip() for line in text.split("\n")]
    rows = tuple(tuple(line) for line in lines if line)

    if not rows:
        raise MalformedMazeError(
            f"Maze has no rows\n"
            f"  Input: {text!r}\n"
            f"  Expected at least one non-blank line of cell characters"
        )

    maze = Maze(rows)
    logger.debug("parse_maze: %d rows, widest row %d", maze.rows, maze.cols)
    return maze


def parse_mazes(definitions: dict[str, str]) -> MazeStore:
    """
    Parse several named mazes at once.

    Args:
        definitions: Dict mapping maze name to maze text

    Returns:
        MazeStore mapping each name to its parsed Maze

    Raises:
        MalformedMazeError: If any definition is malformed; the message
            names the offending maze
    """
    store: MazeStore = {}

    for name, text in definitions.items():
        try:
            store[name] = parse_maze(text)
        except MalformedMazeError as e:
            raise MalformedMazeError(f"Invalid maze '{name}': {e}") from e

    return store
