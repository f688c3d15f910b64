"""Restroom Redoubt: simulating robots that wrap around a rectangular room."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Iterator

from .utils import Coordinate

_ROBOT = re.compile(r"p=(-?\d+),(-?\d+)\s+v=(-?\d+),(-?\d+)")
_QUADRANT_SECONDS = 100
_TREE_RUN = "111"
_TREE_MIN_ROWS = 5


@dataclass(frozen=True)
class Robot:
    """A robot's position and its velocity per second."""

    position: Coordinate
    velocity: Coordinate

    def moved(self, rows: int, cols: int) -> Robot:
        """Return the robot one second later, wrapping at the room's edges."""
        pos = self.position + self.velocity
        return Robot(Coordinate(pos.row % rows, pos.col % cols), self.velocity)


def parse_robot(line: str) -> Robot:
    """Parse ``p=x,y v=dx,dy``; x is the column and y the row."""
    found = _ROBOT.search(line)
    if found is None:
        raise ValueError(f"malformed robot line {line!r}")
    x, y, dx, dy = (int(value) for value in found.groups())
    return Robot(Coordinate(y, x), Coordinate(dy, dx))


def part_one(lines: Iterable[str], rows: int, cols: int) -> int:
    """Safety factor: product of the robot counts per quadrant after 100 seconds."""
    middle_row = (rows - 1) // 2
    middle_col = (cols - 1) // 2
    quadrants = [0, 0, 0, 0]
    for line in lines:
        robot = parse_robot(line)
        for _ in range(_QUADRANT_SECONDS):
            robot = robot.moved(rows, cols)
        pos = robot.position
        if pos.row == middle_row or pos.col == middle_col:
            continue
        index = (0 if pos.row < rows // 2 else 2) + (0 if pos.col < cols // 2 else 1)
        quadrants[index] += 1
    top_left, top_right, bottom_left, bottom_right = quadrants
    return top_left * top_right * bottom_left * bottom_right


def render(positions: Iterable[Coordinate], rows: int, cols: int) -> list[str]:
    """Draw the room, marking occupied cells with ``1`` and empty ones with ``.``."""
    cells = [["."] * cols for _ in range(rows)]
    for pos in positions:
        cells[pos.row][pos.col] = "1"
    return ["".join(row) for row in cells]


def tree_candidates(
    lines: Iterable[str], rows: int, cols: int, seconds: int = 101 * 103 * 2
) -> Iterator[tuple[int, list[str]]]:
    """Yield ``(elapsed_seconds, picture)`` whenever more than five rows hold a run of three robots."""
    robots = [parse_robot(line) for line in lines]
    for elapsed in range(1, seconds + 1):
        robots = [robot.moved(rows, cols) for robot in robots]
        picture = render((robot.position for robot in robots), rows, cols)
        if sum(_TREE_RUN in row for row in picture) > _TREE_MIN_ROWS:
            yield elapsed, picture