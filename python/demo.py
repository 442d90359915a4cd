#!/usr/bin/env python3
"""
Demonstration script for the maze solver.
"""

import logging
import sys

from ascii_render import format_result, render_maze
from maze import RouteSearch, shortest_route_length
from maze_parser import parse_mazes
from maze_types import MalformedMazeError, MarkerNotFoundError

MAZES = dict(
    reference="""
        #S######.#
        ......#..#
        .#.##.##.#
        .#........
        ##.##.####
        ....#....#
        .#######.#
        ....#.....
        .####.###.
        ....#...G#
    """,
    trivial="SG",
    blocked="S#G",
    ragged="""
        S.
        .
        .G
    """,
)


def demo(name: str) -> int:
    """Solve one of the sample mazes and print the result."""
    print("=" * 40)
    print(f"Maze '{name}':")
    print("=" * 40)

    try:
        maze = parse_mazes({name: MAZES[name]})[name]
        start, goal = maze.locate_start_goal()
    except (MalformedMazeError, MarkerNotFoundError) as e:
        print(f"Error: {e}")
        return 1

    print(render_maze(maze))
    print()
    print(f"Start: {start}")
    print(f"Goal: {goal}")

    search = RouteSearch(maze, start, goal)
    routes = list(search)
    print(f"Routes found: {len(routes)} ({search.expansions} expansions)")

    result = shortest_route_length(routes, start, goal)
    if routes:
        shortest = min(routes, key=len)
        print()
        print(render_maze(maze, shortest))
    print()
    print(f"Shortest: {format_result(result)}")
    print()
    return 0


def main(argv: list[str]) -> int:
    logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')
    names = argv or list(MAZES)
    unknown = [n for n in names if n not in MAZES]
    if unknown:
        print(f"Unknown maze(s): {', '.join(unknown)}. Available: {', '.join(MAZES)}")
        return 1

    status = 0
    for name in names:
        status = max(status, demo(name))
    return status


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
