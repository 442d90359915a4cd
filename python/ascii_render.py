"""
ASCII rendering for mazes and the routes found through them.
"""

from __future__ import annotations

import logging
from typing import Callable

import simple_chalk as chalk  # type: ignore[import-untyped]

from maze import NoRoute
from maze_types import Cell, Maze, MazeRules, Route

logger = logging.getLogger(__name__)

ROUTE_CHAR = "*"


def _plain(s: str) -> str:
    return s


def render_maze(
    maze: Maze,
    route: Route | None = None,
    rules: MazeRules = MazeRules(),
    color: bool = True,
) -> str:
    """
    Render a maze as text, optionally with a route drawn over it.

    Route cells between the start and the goal are drawn as '*'; the start
    and goal keep their own markers. Ragged rows are rendered at their own
    length.

    Args:
        maze: The maze to render
        route: Optional route to overlay
        rules: Markers used to pick colours
        color: If False, emit plain text without ANSI codes

    Returns:
        Rendered string, one line per maze row
    """
    on_route: set[Cell] = set(route[1:-1]) if route else set()

    def colorize(marker: str, cell: Cell) -> tuple[str, Callable[[str], str]]:
        if not color:
            return (ROUTE_CHAR if cell in on_route else marker, _plain)
        if marker == rules.start_marker:
            return (marker, chalk.greenBright)
        if marker == rules.goal_marker:
            return (marker, chalk.redBright)
        if cell in on_route:
            return (ROUTE_CHAR, chalk.yellowBright)
        if marker == rules.wall_marker:
            return (marker, chalk.blue)
        return (marker, _plain)

    lines: list[str] = []
    for r, row in enumerate(maze.cells):
        chars: list[str] = []
        for c, marker in enumerate(row):
            char, paint = colorize(marker, Cell(r, c))
            chars.append(paint(char))
        lines.append("".join(chars))

    logger.debug(
        "render_maze: %d rows, route cells=%d, color=%s",
        maze.rows,
        len(on_route),
        color,
    )
    return "\n".join(lines)


def format_result(result: int | NoRoute) -> str:
    """One-line description of a solve result."""
    if isinstance(result, NoRoute):
        return str(result)
    return f"{result} steps"
