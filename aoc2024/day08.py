"""Resonant Collinearity: locating antinodes of same-frequency antennas."""

from __future__ import annotations

from itertools import combinations
from typing import Iterable, Sequence

from .utils import Coordinate, inside_grid


def find_nodes(grid: Sequence[str], ignore: Iterable[str] = ".") -> dict[str, list[Coordinate]]:
    """Group antenna positions by frequency, skipping the characters in ``ignore``."""
    skipped = set(ignore)
    nodes: dict[str, list[Coordinate]] = {}
    for row, line in enumerate(grid):
        for col, char in enumerate(line):
            if char not in skipped:
                nodes.setdefault(char, []).append(Coordinate(row, col, char))
    return nodes


def antinode_pair(a: Coordinate, b: Coordinate) -> list[Coordinate]:
    """Return the two antinodes beyond ``b`` and before ``a`` on their line."""
    step = b - a
    return [
        Coordinate(b.row + step.row, b.col + step.col),
        Coordinate(a.row - step.row, a.col - step.col),
    ]


def resonant_antinodes(a: Coordinate, b: Coordinate, width: int, height: int) -> list[Coordinate]:
    """Return every in-bounds point on the line through ``a`` and ``b`` at whole steps."""
    d_row, d_col = b.row - a.row, b.col - a.col
    points: list[Coordinate] = []
    for origin, sign in ((b, 1), (a, -1)):
        row, col = origin.row, origin.col
        while 0 <= row < height and 0 <= col < width:
            points.append(Coordinate(row, col))
            row += sign * d_row
            col += sign * d_col
    return points


def part_one(grid: Sequence[str]) -> int:
    """Count distinct in-grid antinodes of antenna pairs."""
    antinodes = {
        Coordinate(point.row, point.col)
        for coords in find_nodes(grid, ".").values()
        for a, b in combinations(coords, 2)
        for point in antinode_pair(a, b)
        if inside_grid(grid, point)
    }
    return len(antinodes)


def part_two(grid: Sequence[str]) -> int:
    """Count distinct antinodes including resonant harmonics."""
    if not grid:
        return 0
    width, height = len(grid[0]), len(grid)
    antinodes = {
        point
        for coords in find_nodes(grid, ".#").values()
        for a, b in combinations(coords, 2)
        for point in resonant_antinodes(a, b, width, height)
    }
    return len(antinodes)