"""
Shared type definitions for the maze solver.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import AbstractSet


class Direction(Enum):
    """Cardinal direction for a single step, valued by its (row, col) offset."""

    UP = (-1, 0)  # Decreasing row
    DOWN = (1, 0)  # Increasing row
    LEFT = (0, -1)  # Decreasing col
    RIGHT = (0, 1)  # Increasing col

    @property
    def d_row(self) -> int:
        return self.value[0]

    @property
    def d_col(self) -> int:
        return self.value[1]


# Order in which neighbours are expanded. Changing it changes route order.
DEFAULT_DIRECTIONS: tuple[Direction, ...] = (
    Direction.UP,
    Direction.DOWN,
    Direction.LEFT,
    Direction.RIGHT,
)

START = "S"
GOAL = "G"
WALL = "#"
FLOOR = "."


# =============================================================================
# Errors
# =============================================================================


class MalformedMazeError(ValueError):
    """The maze text has no usable rows."""


class MarkerNotFoundError(LookupError):
    """A marker such as the start or goal does not occur in the maze."""

    def __init__(self, marker: str) -> None:
        super().__init__(f"Marker '{marker}' not found in maze")
        self.marker = marker


# =============================================================================
# Maze Definition Types
# =============================================================================


@dataclass(frozen=True)
class MazeRules:
    """Markers and expansion order governing a search."""

    start_marker: str = START
    goal_marker: str = GOAL
    wall_marker: str = WALL
    directions: tuple[Direction, ...] = DEFAULT_DIRECTIONS


@dataclass(frozen=True, order=True)
class Cell:
    """A (row, col) coordinate in a maze."""

    row: int
    col: int

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"


@dataclass(frozen=True)
class Maze:
    """
    A read-only 2D table of single-character markers.

    Rows may have different lengths, so every bounds check uses the
    addressed row's own length.
    """

    cells: tuple[tuple[str, ...], ...]

    @property
    def rows(self) -> int:
        return len(self.cells)

    @property
    def cols(self) -> int:
        """Width of the widest row."""
        return max((len(row) for row in self.cells), default=0)

    def row_length(self, row: int) -> int:
        return len(self.cells[row])

    def in_bounds(self, cell: Cell) -> bool:
        if not 0 <= cell.row < self.rows:
            return False
        return 0 <= cell.col < self.row_length(cell.row)

    def marker_at(self, cell: Cell) -> str:
        """Raw lookup. Callers must check in_bounds first."""
        return self.cells[cell.row][cell.col]

    def is_wall(self, cell: Cell, rules: MazeRules = MazeRules()) -> bool:
        return self.marker_at(cell) == rules.wall_marker

    def neighbor(self, cell: Cell, direction: Direction) -> Cell:
        """The cell one step away. May lie outside the maze."""
        return Cell(cell.row + direction.d_row, cell.col + direction.d_col)

    def is_candidate(
        self,
        cell: Cell,
        visited: AbstractSet[Cell],
        rules: MazeRules = MazeRules(),
    ) -> bool:
        """True if the cell is inside the maze, not yet visited and not a wall."""
        return (
            self.in_bounds(cell)
            and cell not in visited
            and not self.is_wall(cell, rules)
        )

    def locate(self, marker: str) -> Cell:
        """
        Find the first cell holding marker, scanning rows top to bottom and
        columns left to right.

        Raises:
            MarkerNotFoundError: If no cell holds the marker
        """
        for r, row in enumerate(self.cells):
            for c, value in enumerate(row):
                if value == marker:
                    return Cell(r, c)
        raise MarkerNotFoundError(marker)

    def locate_start_goal(self, rules: MazeRules = MazeRules()) -> tuple[Cell, Cell]:
        return (self.locate(rules.start_marker), self.locate(rules.goal_marker))


Route = tuple[Cell, ...]

MazeStore = dict[str, Maze]
