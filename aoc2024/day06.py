"""Guard Gallivant: following a patrolling guard around a lab map."""

from __future__ import annotations

from typing import Optional, Sequence

from .utils import Coordinate

_STEPS = {"^": (-1, 0), ">": (0, 1), "v": (1, 0), "<": (0, -1)}
_TURN_RIGHT = {"^": ">", ">": "v", "v": "<", "<": "^"}


def find_guard(grid: Sequence[str]) -> Coordinate:
    """Return the guard's position, with its facing direction as the symbol."""
    guard: Optional[Coordinate] = None
    for row, line in enumerate(grid):
        for col, char in enumerate(line):
            if char in _STEPS:
                guard = Coordinate(row, col, char)
    if guard is None:
        raise ValueError("no guard found in grid")
    return guard


def rotate(direction: str) -> str:
    """Return the direction after a 90 degree turn to the right."""
    try:
        return _TURN_RIGHT[direction]
    except KeyError:
        raise ValueError(f"invalid direction {direction!r}") from None


def _patrol(
    grid: Sequence[str],
    guard: Coordinate,
    extra_obstacle: Optional[tuple[int, int]] = None,
) -> tuple[set[tuple[int, int]], bool]:
    """Walk the guard; return the visited cells and whether the walk loops."""
    height = len(grid)
    width = len(grid[0]) if grid else 0
    row, col, direction = guard.row, guard.col, guard.symbol
    visited: set[tuple[int, int]] = set()
    states: set[tuple[int, int, str]] = set()
    while True:
        state = (row, col, direction)
        if state in states:
            return visited, True
        states.add(state)
        visited.add((row, col))
        d_row, d_col = _STEPS[direction]
        next_row, next_col = row + d_row, col + d_col
        if not (0 <= next_row < height and 0 <= next_col < width):
            return visited, False
        if grid[next_row][next_col] == "#" or (next_row, next_col) == extra_obstacle:
            direction = rotate(direction)
        else:
            row, col = next_row, next_col


def part_one(grid: Sequence[str]) -> int:
    """Count the distinct cells the guard visits before leaving the map."""
    visited, looped = _patrol(grid, find_guard(grid))
    if looped:
        raise ValueError("the guard never leaves the map")
    return len(visited)


def part_two(grid: Sequence[str]) -> int:
    """Count the cells where one new obstacle would trap the guard in a loop."""
    guard = find_guard(grid)
    visited, _ = _patrol(grid, guard)
    return sum(
        _patrol(grid, guard, (row, col))[1]
        for row, col in visited
        if grid[row][col] == "."
    )