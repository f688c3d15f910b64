"""Shared helpers: grid coordinates, text parsing and input reading."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence

_NON_DIGIT = re.compile(r"[^0-9]")


@dataclass(frozen=True)
class Coordinate:
    """A grid position; equality and hashing use row and column only."""

    row: int
    col: int
    symbol: str = field(default="", compare=False)

    def __add__(self, other: Coordinate) -> Coordinate:
        return Coordinate(self.row + other.row, self.col + other.col, self.symbol)

    def __sub__(self, other: Coordinate) -> Coordinate:
        return Coordinate(self.row - other.row, self.col - other.col, self.symbol)


@dataclass(frozen=True)
class Pair:
    """Two related strings, such as the sides of an ordering rule."""

    a: str
    b: str


def inside_grid(grid: Sequence[str], loc: Coordinate) -> bool:
    """Return True if ``loc`` lies within the rectangular grid."""
    if not 0 <= loc.row < len(grid):
        return False
    return 0 <= loc.col < len(grid[0])


def replace_char(text: str, replacement: str, index: int) -> str:
    """Return ``text`` with the character at ``index`` replaced."""
    if not 0 <= index < len(text):
        raise IndexError(f"index {index} out of range for string of length {len(text)}")
    return text[:index] + replacement + text[index + 1:]


def format_grid(grid: Sequence[str]) -> str:
    """Render grid rows one per line, followed by a blank separator line."""
    return "".join(f"{row}\n" for row in grid) + " \n"


def atoi_digits(text: str) -> int:
    """Parse the integer formed by the decimal digits in ``text``, ignoring all else."""
    digits = _NON_DIGIT.sub("", text)
    if not digits:
        raise ValueError(f"no digits in {text!r}")
    return int(digits)


def ints_in(text: str) -> list[int]:
    """Parse each whitespace-separated field of ``text`` as an integer of its digits."""
    return [atoi_digits(word) for word in text.split()]


def read_lines(path: str | Path) -> list[str]:
    """Read a text file and return its lines without line endings."""
    with open(path, encoding="utf-8") as handle:
        return handle.read().splitlines()