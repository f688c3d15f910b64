"""Plutonian Pebbles: counting stones that change each time you blink."""

from __future__ import annotations

from collections import Counter
from typing import Mapping


def strip_leading_zeros(text: str) -> str:
    """Remove leading zeros, keeping a single ``0`` for all-zero text."""
    if len(text) <= 1:
        return text
    return text.lstrip("0") or "0"


def blink(counts: Mapping[str, int]) -> Counter[str]:
    """Apply one blink to a multiset of engraved stones."""
    result: Counter[str] = Counter()
    for stone, count in counts.items():
        if stone == "0":
            result["1"] += count
        elif len(stone) % 2 == 0:
            half = len(stone) // 2
            result[stone[:half]] += count
            result[strip_leading_zeros(stone[half:])] += count
        else:
            result[str(2024 * int(stone))] += count
    return result


def count_stones(stones: str, blinks: int) -> int:
    """Return how many stones there are after blinking ``blinks`` times."""
    counts: Counter[str] = Counter(stones.split())
    for _ in range(blinks):
        counts = blink(counts)
    return sum(counts.values())