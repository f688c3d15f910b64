"""Hoof It: scoring and rating hiking trails on a topographic map."""

from __future__ import annotations

from typing import Mapping, Sequence

from .utils import Coordinate

_STEPS = (Coordinate(-1, 0), Coordinate(1, 0), Coordinate(0, -1), Coordinate(0, 1))
_HEIGHTS = "0123456789"


def parse_heights(grid: Sequence[str]) -> dict[Coordinate, str]:
    """Map every grid position to the character found there."""
    return {
        Coordinate(row, col): char
        for row, line in enumerate(grid)
        for col, char in enumerate(line)
    }


def _neighbours(pos: Coordinate) -> list[Coordinate]:
    return [pos + step for step in _STEPS]


def trailhead_score(heights: Mapping[Coordinate, str], start: Coordinate) -> int:
    """Count the distinct height-9 positions reachable from ``start`` by steps of +1."""
    positions = {start}
    for height in _HEIGHTS[1:]:
        if not positions:
            return 0
        positions = {
            nxt
            for pos in positions
            for nxt in _neighbours(pos)
            if heights.get(nxt) == height
        }
    return len(positions)


def trailhead_rating(heights: Mapping[Coordinate, str], start: Coordinate) -> int:
    """Count the distinct hiking trails from ``start`` up to any height-9 position."""

    def trails(pos: Coordinate, level: int) -> int:
        if heights.get(pos) != _HEIGHTS[level]:
            return 0
        if level == 9:
            return 1
        return sum(trails(nxt, level + 1) for nxt in _neighbours(pos))

    return trails(start, 0)


def _trailheads(heights: Mapping[Coordinate, str]) -> list[Coordinate]:
    return [pos for pos, char in heights.items() if char == "0"]


def part_one(grid: Sequence[str]) -> int:
    """Sum the scores of all trailheads."""
    heights = parse_heights(grid)
    return sum(trailhead_score(heights, start) for start in _trailheads(heights))


def part_two(grid: Sequence[str]) -> int:
    """Sum the ratings of all trailheads."""
    heights = parse_heights(grid)
    return sum(trailhead_rating(heights, start) for start in _trailheads(heights))