"""
Interactive route browser.
Display a maze and step through every route found to the goal.
"""

import logging
import sys

import readchar
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from ascii_render import format_result, render_maze
from demo import MAZES
from maze import find_routes, shortest_route_length
from maze_parser import parse_maze
from maze_types import Cell, MalformedMazeError, MarkerNotFoundError, Maze, Route


class RouteBrowser:
    """Interactive viewer for the routes through one maze."""

    def __init__(self, maze: Maze, start: Cell, goal: Cell) -> None:
        self.maze = maze
        self.start = start
        self.goal = goal
        self.routes: list[Route] = find_routes(maze, start, goal)
        self.index = 0
        self.console = Console()
        self.status_message = "Ready"

    @property
    def current_route(self) -> Route | None:
        if not self.routes:
            return None
        return self.routes[self.index]

    def generate_display(self) -> Panel:
        """Generate the current display with maze and status."""
        route = self.current_route
        maze_text = render_maze(self.maze, route)

        status = Text()
        status.append("Start: ", style="bold")
        status.append(f"{self.start}   ")
        status.append("Goal: ", style="bold")
        status.append(f"{self.goal}\n")
        status.append("Shortest: ", style="bold")
        status.append(f"{format_result(shortest_route_length(self.routes, self.start, self.goal))}\n\n")

        if route is None:
            status.append("No routes to show\n\n", style="bold red")
        else:
            status.append("Route: ", style="bold")
            status.append(f"{self.index + 1} of {len(self.routes)}, {len(route) - 1} steps\n\n")

        status.append(Text.from_ansi(maze_text))
        status.append("\n\n")
        status.append("Keys:\n", style="bold cyan")
        status.append("  N - Next route\n")
        status.append("  P - Previous route\n")
        status.append("  Q - Quit\n\n")

        status.append("─" * 40 + "\n", style="dim")
        status.append("Status: ", style="bold")
        status.append(self.status_message)

        border = "green" if self.routes else "red"
        return Panel(status, title="Maze Route Browser", border_style=border, width=60)

    def step(self, offset: int) -> None:
        """Move to another route, wrapping around at either end."""
        if not self.routes:
            self.status_message = "Nothing to browse"
            return
        self.index = (self.index + offset) % len(self.routes)
        self.status_message = f"Showing route {self.index + 1}"

    def run(self) -> None:
        """Run the browser until the user quits."""
        with Live(self.generate_display(), console=self.console, refresh_per_second=4) as live:
            try:
                while True:
                    live.update(self.generate_display())

                    key = readchar.readkey()

                    if key.lower() == 'q':
                        self.status_message = "Quitting..."
                        live.update(self.generate_display())
                        break
                    elif key.lower() == 'n':
                        self.step(1)
                    elif key.lower() == 'p':
                        self.step(-1)
                    else:
                        self.status_message = f"Unknown key: {repr(key)}"

            except KeyboardInterrupt:
                self.status_message = "Interrupted by user"
                live.update(self.generate_display())


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING, format='%(levelname)s: %(message)s')
    name = sys.argv[1] if len(sys.argv) > 1 else 'reference'
    try:
        maze = parse_maze(MAZES[name])
        start, goal = maze.locate_start_goal()
    except KeyError:
        print(f"Unknown maze '{name}'. Available: {', '.join(MAZES)}")
        sys.exit(1)
    except (MalformedMazeError, MarkerNotFoundError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    RouteBrowser(maze, start, goal).run()
