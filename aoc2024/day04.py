"""Ceres Search: finding XMAS in a word search grid."""

from __future__ import annotations

from typing import Sequence

_WORD = "XMAS"
_DIRECTIONS = [(dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1)]


def _letter_at(grid: Sequence[str], row: int, col: int, letter: str) -> bool:
    if row < 0 or col < 0 or row >= len(grid) or col >= len(grid[row]):
        return False
    return grid[row][col] == letter


def count_xmas_at(grid: Sequence[str], row: int, col: int) -> int:
    """Count the directions in which XMAS is spelled starting at ``(row, col)``."""
    return sum(
        all(
            _letter_at(grid, row + dr * k, col + dc * k, letter)
            for k, letter in enumerate(_WORD)
        )
        for dr, dc in _DIRECTIONS
    )


def is_x_mas(grid: Sequence[str], row: int, col: int) -> bool:
    """True if two diagonal MAS words cross at the ``A`` at ``(row, col)``."""
    if not _letter_at(grid, row, col, "A"):
        return False

    def diagonal(r1: int, c1: int, r2: int, c2: int) -> bool:
        return (
            _letter_at(grid, r1, c1, "M") and _letter_at(grid, r2, c2, "S")
        ) or (_letter_at(grid, r1, c1, "S") and _letter_at(grid, r2, c2, "M"))

    return diagonal(row + 1, col + 1, row - 1, col - 1) and diagonal(
        row + 1, col - 1, row - 1, col + 1
    )


def part_one(grid: Sequence[str]) -> int:
    """Count every occurrence of XMAS in any of the eight directions."""
    return sum(
        count_xmas_at(grid, row, col)
        for row, line in enumerate(grid)
        for col, char in enumerate(line)
        if char == "X"
    )


def part_two(grid: Sequence[str]) -> int:
    """Count the X-shaped pairs of MAS."""
    return sum(
        is_x_mas(grid, row, col)
        for row, line in enumerate(grid)
        for col, char in enumerate(line)
        if char == "A"
    )