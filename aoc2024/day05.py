"""Print Queue: checking and repairing page orders against ordering rules."""

from __future__ import annotations

from typing import Iterable, Sequence

from .utils import Pair


def parse_manual(lines: Iterable[str]) -> tuple[list[Pair], list[list[str]]]:
    """Split input into ordering rules ``a|b`` and comma-separated updates."""
    rules: list[Pair] = []
    updates: list[list[str]] = []
    in_rules = True
    for line in lines:
        if line == "":
            in_rules = False
            continue
        if in_rules:
            parts = line.split("|")
            if len(parts) < 2:
                raise ValueError(f"malformed ordering rule {line!r}")
            rules.append(Pair(parts[0], parts[1]))
        else:
            updates.append(line.split(","))
    return rules, updates


def is_correct_order(update: Sequence[str], rules: Iterable[Pair]) -> bool:
    """True if no page comes before a page of the update that must precede it."""
    pages = set(update)
    rules = list(rules)
    seen: set[str] = set()
    for page in update:
        for rule in rules:
            if rule.b == page and rule.a in pages and rule.a not in seen:
                return False
        seen.add(page)
    return True


def correct_order(update: Sequence[str], rules: Iterable[Pair]) -> list[str]:
    """Reorder the pages so that every applicable rule is satisfied."""
    rules = list(rules)
    remaining = list(update)
    ordered: list[str] = []
    while remaining:
        pending = set(remaining)
        for page in remaining:
            if not any(rule.b == page and rule.a in pending for rule in rules):
                break
        else:
            raise ValueError(f"no valid ordering for update {list(update)!r}")
        remaining.remove(page)
        ordered.append(page)
    return ordered


def _middle(pages: Sequence[str]) -> int:
    return int(pages[len(pages) // 2])


def part_one(lines: Iterable[str]) -> int:
    """Sum the middle pages of the updates already in the right order."""
    rules, updates = parse_manual(lines)
    return sum(_middle(update) for update in updates if is_correct_order(update, rules))


def part_two(lines: Iterable[str]) -> int:
    """Sum the middle pages of the wrongly ordered updates once corrected."""
    rules, updates = parse_manual(lines)
    return sum(
        _middle(correct_order(update, rules))
        for update in updates
        if not is_correct_order(update, rules)
    )