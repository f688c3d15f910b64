"""Historian Hysteria: comparing two lists of location IDs."""

from __future__ import annotations

from collections import Counter
from typing import Iterable


def parse_lists(lines: Iterable[str]) -> tuple[list[int], list[int]]:
    """Split lines of two numbers into a left and a right list."""
    left: list[int] = []
    right: list[int] = []
    for line in lines:
        fields = line.split()
        if len(fields) < 2:
            raise ValueError(f"expected two numbers in line {line!r}")
        left.append(int(fields[0]))
        right.append(int(fields[1]))
    return left, right


def part_one(lines: Iterable[str]) -> int:
    """Sum the distances between the lists paired in sorted order."""
    left, right = parse_lists(lines)
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def part_two(lines: Iterable[str]) -> int:
    """Sum each left number times how often it occurs in the right list."""
    left, right = parse_lists(lines)
    counts = Counter(right)
    return sum(number * counts[number] for number in left)