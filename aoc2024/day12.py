"""Garden Groups: pricing fences around regions of garden plots."""

from __future__ import annotations

from typing import Sequence

Cell = tuple[int, int]
_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def regions(grid: Sequence[str]) -> list[set[Cell]]:
    """Split the grid into connected regions of equal plants, in row-major order."""
    seen: set[Cell] = set()
    found: list[set[Cell]] = []
    for row, line in enumerate(grid):
        for col, plant in enumerate(line):
            if (row, col) in seen:
                continue
            region: set[Cell] = set()
            stack = [(row, col)]
            seen.add((row, col))
            while stack:
                r, c = stack.pop()
                region.add((r, c))
                for dr, dc in _STEPS:
                    nr, nc = r + dr, c + dc
                    if (
                        (nr, nc) not in seen
                        and 0 <= nr < len(grid)
                        and 0 <= nc < len(grid[nr])
                        and grid[nr][nc] == plant
                    ):
                        seen.add((nr, nc))
                        stack.append((nr, nc))
            found.append(region)
    return found


def perimeter(region: set[Cell]) -> int:
    """Count the cell edges of the region that border something else."""
    return sum(
        (r + dr, c + dc) not in region for r, c in region for dr, dc in _STEPS
    )


def corner_count(region: set[Cell]) -> int:
    """Count the corners of the region, which equals its number of sides."""
    corners = 0
    for r, c in region:
        for dr, dc in ((-1, -1), (-1, 1), (1, -1), (1, 1)):
            vertical = (r + dr, c) in region
            horizontal = (r, c + dc) in region
            diagonal = (r + dr, c + dc) in region
            if not vertical and not horizontal:
                corners += 1
            if vertical and horizontal and not diagonal:
                corners += 1
    return corners


def part_one(grid: Sequence[str]) -> int:
    """Total fence price as area times perimeter."""
    return sum(len(region) * perimeter(region) for region in regions(grid))


def part_two(grid: Sequence[str]) -> int:
    """Total fence price as area times number of sides."""
    return sum(len(region) * corner_count(region) for region in regions(grid))