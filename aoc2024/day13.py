"""Claw Contraption: winning prizes with two buttons for the fewest tokens."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

from .utils import Coordinate

PRIZE_OFFSET = 10_000_000_000_000
_COST_A = 3
_COST_B = 1
_PRESS_LIMIT = 100

_BUTTON = re.compile(r"X\+(\d+),\s*Y\+(\d+)")
_PRIZE = re.compile(r"X=(\d+),\s*Y=(\d+)")


@dataclass(frozen=True)
class Machine:
    """A claw machine; coordinates hold X as ``row`` and Y as ``col``."""

    button_a: Coordinate
    button_b: Coordinate
    prize: Coordinate


def _match(pattern: re.Pattern[str], line: str) -> Coordinate:
    found = pattern.search(line)
    if found is None:
        raise ValueError(f"malformed machine line {line!r}")
    return Coordinate(int(found[1]), int(found[2]))


def parse_machines(lines: Iterable[str], offset: int = 0) -> list[Machine]:
    """Parse blocks of button A, button B and prize lines; ``offset`` is added to the prize."""
    content = [line for line in lines if line.strip()]
    if len(content) % 3:
        raise ValueError("every machine needs two button lines and a prize line")
    machines = []
    for start in range(0, len(content), 3):
        line_a, line_b, line_prize = content[start:start + 3]
        prize = _match(_PRIZE, line_prize)
        machines.append(
            Machine(
                button_a=_match(_BUTTON, line_a),
                button_b=_match(_BUTTON, line_b),
                prize=Coordinate(prize.row + offset, prize.col + offset),
            )
        )
    return machines


def cheapest_by_search(machine: Machine) -> int:
    """Fewest tokens to win with at most 100 presses per button, or 0 if impossible."""
    a, b, prize = machine.button_a, machine.button_b, machine.prize
    return min(
        (
            presses_a * _COST_A + presses_b * _COST_B
            for presses_a in range(_PRESS_LIMIT + 1)
            for presses_b in range(_PRESS_LIMIT + 1)
            if presses_a * a.row + presses_b * b.row == prize.row
            and presses_a * a.col + presses_b * b.col == prize.col
        ),
        default=0,
    )


def cheapest_by_solving(machine: Machine) -> int:
    """Tokens for the exact whole-number solution of the button equations, or 0."""
    a, b, prize = machine.button_a, machine.button_b, machine.prize
    determinant = a.row * b.col - a.col * b.row
    if determinant == 0:
        raise ValueError("button movements are collinear")
    presses_b, remainder = divmod(a.row * prize.col - a.col * prize.row, determinant)
    if remainder or presses_b < 0:
        return 0
    if a.row:
        presses_a, remainder = divmod(prize.row - presses_b * b.row, a.row)
    else:
        presses_a, remainder = divmod(prize.col - presses_b * b.col, a.col)
    if remainder or presses_a < 0:
        return 0
    if presses_a * a.row + presses_b * b.row != prize.row:
        return 0
    if presses_a * a.col + presses_b * b.col != prize.col:
        return 0
    return presses_a * _COST_A + presses_b * _COST_B


def part_one(lines: Iterable[str]) -> int:
    """Total tokens for all winnable prizes within 100 presses per button."""
    return sum(cheapest_by_search(machine) for machine in parse_machines(lines))


def part_two(lines: Iterable[str], offset: int = PRIZE_OFFSET) -> int:
    """Total tokens for all winnable prizes moved by ``offset`` on both axes."""
    return sum(cheapest_by_solving(machine) for machine in parse_machines(lines, offset))