"""Mull It Over: summing the valid multiplication instructions in corrupted memory."""

from __future__ import annotations

import re
from typing import Iterable

_MUL = re.compile(r"mul\((\d{1,3}),(\d{1,3})\)")
_INSTRUCTION = re.compile(r"mul\((\d{1,3}),(\d{1,3})\)|do\(\)|don't\(\)")


def part_one(lines: Iterable[str]) -> int:
    """Sum the products of every well-formed ``mul(x,y)`` instruction."""
    return sum(
        int(match[1]) * int(match[2])
        for line in lines
        for match in _MUL.finditer(line)
    )


def part_two(lines: Iterable[str]) -> int:
    """Sum the products, honouring ``do()`` and ``don't()`` across all lines."""
    total = 0
    enabled = True
    for line in lines:
        for match in _INSTRUCTION.finditer(line):
            text = match[0]
            if text == "do()":
                enabled = True
            elif text == "don't()":
                enabled = False
            elif enabled:
                total += int(match[1]) * int(match[2])
    return total