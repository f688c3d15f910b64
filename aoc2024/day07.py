"""Bridge Repair: finding operator combinations that produce calibration values."""

from __future__ import annotations

from typing import Iterable, Sequence

from .utils import ints_in


def concatenate(left: int, right: int) -> int:
    """Join the digits of ``left`` and ``right``; a non-positive ``right`` adds to ``left``."""
    if right <= 0:
        return left + right
    return left * 10 ** len(str(right)) + right


def can_calibrate(target: int, numbers: Sequence[int], with_concatenation: bool) -> bool:
    """True if some left-to-right mix of operators, starting from 0, yields ``target``."""
    values = {0}
    for number in numbers:
        step = set()
        for value in values:
            if value > target:
                continue
            step.add(value + number)
            step.add(value * number)
            if with_concatenation:
                step.add(concatenate(value, number))
        values = step
        if not values:
            return False
    return target in values


def _total(lines: Iterable[str], with_concatenation: bool) -> int:
    total = 0
    for line in lines:
        numbers = ints_in(line)
        if not numbers:
            raise ValueError("empty equation line")
        target, *operands = numbers
        if can_calibrate(target, operands, with_concatenation):
            total += target
    return total


def part_one(lines: Iterable[str]) -> int:
    """Sum the test values reachable with addition and multiplication."""
    return _total(lines, with_concatenation=False)


def part_two(lines: Iterable[str]) -> int:
    """Sum the test values reachable when concatenation is also allowed."""
    return _total(lines, with_concatenation=True)