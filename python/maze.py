"""
Route enumeration through a maze.

Breadth-first expansion over a queue of partial routes with one visited set
shared by every route in the search. A cell is claimed when a route standing
on it is taken off the queue, not when it is first seen as a neighbour, so
the same cell can sit at the end of several queued routes at once. Every
route that steps onto the goal is recorded; the shortest is picked out
afterwards.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Iterator

from maze_parser import parse_maze
from maze_types import Cell, Maze, MazeRules, Route

__all__ = [
    "NoRoute",
    "RouteSearch",
    "find_routes",
    "is_valid_route",
    "shortest_route_length",
    "solve",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NoRoute:
    """Result when the goal cannot be reached from the start."""

    reason: str
    start: Cell | None = None
    goal: Cell | None = None

    def __str__(self) -> str:
        if self.start is not None and self.goal is not None:
            return f"No route from {self.start} to {self.goal}: {self.reason}"
        return f"No route: {self.reason}"


# =============================================================================
# Enumeration
# =============================================================================


class RouteSearch:
    """
    Iterator over the routes from start to goal, in discovery order.

    Usage:
        search = RouteSearch(maze, start, goal)
        for route in search:
            print(route)
        print(search.expansions, len(search.visited))

    Stopping iteration early leaves the search half done; the statistics
    then describe only the part that ran.
    """

    def __init__(
        self,
        maze: Maze,
        start: Cell,
        goal: Cell,
        rules: MazeRules = MazeRules(),
    ) -> None:
        self.maze = maze
        self.start = start
        self.goal = goal
        self.rules = rules
        self.visited: set[Cell] = set()
        self.expansions = 0  # Routes taken off the queue
        self.peak_frontier = 0
        self.routes_found = 0
        self.finished = False
        self._iterator = self._search()

    def __iter__(self) -> Iterator[Route]:
        return self

    def __next__(self) -> Route:
        return next(self._iterator)

    def _search(self) -> Iterator[Route]:
        maze, rules = self.maze, self.rules
        frontier: deque[Route] = deque([(self.start,)])
        self.peak_frontier = len(frontier)

        while frontier:
            route = frontier.popleft()
            current = route[-1]
            self.visited.add(current)
            self.expansions += 1

            for direction in rules.directions:
                neighbor = maze.neighbor(current, direction)
                if not maze.is_candidate(neighbor, self.visited, rules):
                    continue

                extended = route + (neighbor,)
                if maze.marker_at(neighbor) == rules.goal_marker:
                    # Completed routes are never extended further
                    self.routes_found += 1
                    logger.debug(
                        "route %d found: %d steps via %s",
                        self.routes_found,
                        len(extended) - 1,
                        direction.name,
                    )
                    yield extended
                else:
                    frontier.append(extended)

            self.peak_frontier = max(self.peak_frontier, len(frontier))

        self.finished = True
        logger.info(
            "find_routes: %s -> %s, routes=%d, expansions=%d, visited=%d, peak_frontier=%d",
            self.start,
            self.goal,
            self.routes_found,
            self.expansions,
            len(self.visited),
            self.peak_frontier,
        )


def find_routes(
    maze: Maze,
    start: Cell,
    goal: Cell,
    rules: MazeRules = MazeRules(),
) -> list[Route]:
    """
    Enumerate every route from start to goal under the shared visited set.

    Args:
        maze: The maze to search
        start: Starting cell
        goal: Goal cell
        rules: Markers and neighbour expansion order

    Returns:
        Completed routes in the order they were discovered. Each route
        starts at start and ends on the goal. Empty if the goal is
        unreachable.
    """
    return list(RouteSearch(maze, start, goal, rules))


# =============================================================================
# Reduction
# =============================================================================


def shortest_route_length(
    routes: list[Route],
    start: Cell | None = None,
    goal: Cell | None = None,
) -> int | NoRoute:
    """
    Fewest steps over the given routes.

    A route of n cells takes n - 1 steps since the start cell is not a step.

    Returns:
        The step count, or NoRoute if routes is empty
    """
    if not routes:
        return NoRoute("goal is unreachable", start, goal)
    return min(len(route) for route in routes) - 1


def solve(text: str, rules: MazeRules = MazeRules()) -> int | NoRoute:
    """
    Parse a maze, search it and return the fewest steps from start to goal.

    Raises:
        MalformedMazeError: If the text has no rows
        MarkerNotFoundError: If the start or goal marker is missing
    """
    maze = parse_maze(text)
    start, goal = maze.locate_start_goal(rules)
    routes = find_routes(maze, start, goal, rules)
    return shortest_route_length(routes, start, goal)


def is_valid_route(
    maze: Maze,
    route: Route,
    start: Cell,
    goal: Cell,
    rules: MazeRules = MazeRules(),
) -> bool:
    """
    Check that route runs from start to goal in single cardinal steps,
    never leaves the maze and never touches a wall.
    """
    if not route or route[0] != start or route[-1] != goal:
        return False

    for cell in route:
        if not maze.in_bounds(cell) or maze.is_wall(cell, rules):
            return False

    for prev, cell in zip(route, route[1:]):
        if abs(prev.row - cell.row) + abs(prev.col - cell.col) != 1:
            return False

    return True
