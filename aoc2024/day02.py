"""Red-Nosed Reports: checking reactor level reports for safety."""

from __future__ import annotations

from itertools import pairwise
from typing import Iterable, Sequence


def is_safe(levels: Sequence[int]) -> bool:
    """True if levels strictly increase or decrease by steps of 1 to 3."""
    diffs = [b - a for a, b in pairwise(levels)]
    return all(1 <= d <= 3 for d in diffs) or all(-3 <= d <= -1 for d in diffs)


def is_safe_dampened(levels: Sequence[int]) -> bool:
    """True if removing at most one level makes the report safe."""
    levels = list(levels)
    return any(
        is_safe(levels[:skip] + levels[skip + 1:]) for skip in range(len(levels))
    )


def _reports(lines: Iterable[str]) -> Iterable[list[int]]:
    for line in lines:
        fields = line.split()
        if not fields:
            raise ValueError("empty report line")
        yield [int(field) for field in fields]


def part_one(lines: Iterable[str]) -> int:
    """Count the safe reports."""
    return sum(1 for levels in _reports(lines) if is_safe(levels))


def part_two(lines: Iterable[str]) -> int:
    """Count the reports that are safe with the problem dampener."""
    return sum(1 for levels in _reports(lines) if is_safe_dampened(levels))