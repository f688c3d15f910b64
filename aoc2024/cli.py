"""Command line entry point: solve one puzzle part from an input file."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Sequence

from . import day01, day02, day03, day04, day05, day06, day07, day08
from . import day10, day11, day12, day13, day14
from .utils import format_grid, read_lines

Solver = Callable[[list[str]], int]


def _solvers(args: argparse.Namespace) -> dict[tuple[int, int], Solver]:
    return {
        (1, 1): day01.part_one,
        (1, 2): day01.part_two,
        (2, 1): day02.part_one,
        (2, 2): day02.part_two,
        (3, 1): day03.part_one,
        (3, 2): day03.part_two,
        (4, 1): day04.part_one,
        (4, 2): day04.part_two,
        (5, 1): day05.part_one,
        (5, 2): day05.part_two,
        (6, 1): day06.part_one,
        (6, 2): day06.part_two,
        (7, 1): day07.part_one,
        (7, 2): day07.part_two,
        (8, 1): day08.part_one,
        (8, 2): day08.part_two,
        (10, 1): day10.part_one,
        (10, 2): day10.part_two,
        (11, 1): lambda lines: day11.count_stones(" ".join(lines), 25),
        (11, 2): lambda lines: day11.count_stones(" ".join(lines), 75),
        (12, 1): day12.part_one,
        (12, 2): day12.part_two,
        (13, 1): day13.part_one,
        (13, 2): day13.part_two,
        (14, 1): lambda lines: day14.part_one(lines, args.rows, args.cols),
    }


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="aoc2024", description="Solve a puzzle part.")
    parser.add_argument("day", type=int, choices=[1, 2, 3, 4, 5, 6, 7, 8, 10, 11, 12, 13, 14])
    parser.add_argument("part", type=int, choices=[1, 2])
    parser.add_argument("input", nargs="?", default="input.txt", help="puzzle input file")
    parser.add_argument("--rows", type=int, default=103, help="room height for day 14")
    parser.add_argument("--cols", type=int, default=101, help="room width for day 14")
    parser.add_argument(
        "--seconds", type=int, default=101 * 103 * 2, help="seconds to simulate for day 14 part 2"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the solver for the chosen day and part and print its result."""
    args = _parser().parse_args(argv)
    try:
        lines = read_lines(args.input)
    except OSError as error:
        print(f"cannot read {args.input}: {error}", file=sys.stderr)
        return 1

    try:
        if (args.day, args.part) == (14, 2):
            for second, picture in day14.tree_candidates(lines, args.rows, args.cols, args.seconds):
                print(second, "\n")
                print(format_grid(picture), end="")
            return 0
        result = _solvers(args)[(args.day, args.part)](lines)
    except ValueError as error:
        print(f"invalid input: {error}", file=sys.stderr)
        return 1
    print("result: ", result)
    return 0


if __name__ == "__main__":
    sys.exit(main())