import pytest

from aoc2024.day13 import (
    Machine,
    cheapest_by_search,
    cheapest_by_solving,
    parse_machines,
    part_one,
    part_two,
)
from aoc2024.utils import Coordinate

EXAMPLE = """\
Button A: X+94, Y+34
Button B: X+22, Y+67
Prize: X=8400, Y=5400

Button A: X+26, Y+66
Button B: X+67, Y+21
Prize: X=12748, Y=12176

Button A: X+17, Y+86
Button B: X+84, Y+37
Prize: X=7870, Y=6450

Button A: X+69, Y+23
Button B: X+27, Y+71
Prize: X=18641, Y=10279
""".splitlines()


def test_part_one_example():
    assert part_one(EXAMPLE) == 480


def test_part_two_without_offset_matches_example():
    assert part_two(EXAMPLE, 0) == 480


def test_part_two_with_default_offset():
    assert part_two(EXAMPLE) == 875318608908


def test_parse_machines_reads_values():
    machines = parse_machines(EXAMPLE)
    assert len(machines) == 4
    first = machines[0]
    assert first.button_a == Coordinate(94, 34)
    assert first.button_b == Coordinate(22, 67)
    assert first.prize == Coordinate(8400, 5400)


def test_parse_machines_applies_offset():
    machines = parse_machines(EXAMPLE, 1000)
    assert machines[0].prize == Coordinate(9400, 6400)


def test_parse_machines_rejects_incomplete_block():
    with pytest.raises(ValueError):
        parse_machines(EXAMPLE[:2])


def test_parse_machines_rejects_malformed_line():
    with pytest.raises(ValueError):
        parse_machines(["Button A: nowhere", "Button B: X+1, Y+2", "Prize: X=1, Y=2"])


def test_search_per_machine():
    costs = [cheapest_by_search(machine) for machine in parse_machines(EXAMPLE)]
    assert costs == [280, 0, 200, 0]


def test_solving_agrees_with_search_on_example():
    for machine in parse_machines(EXAMPLE):
        assert cheapest_by_solving(machine) == cheapest_by_search(machine)


def test_solving_with_offset_wins_second_and_fourth():
    costs = [cheapest_by_solving(machine) for machine in parse_machines(EXAMPLE, 10_000_000_000_000)]
    assert costs[0] == 0
    assert costs[2] == 0
    assert costs[1] > 0
    assert costs[3] > 0


def test_solving_collinear_buttons_raises():
    machine = Machine(Coordinate(1, 1), Coordinate(2, 2), Coordinate(4, 4))
    with pytest.raises(ValueError):
        cheapest_by_solving(machine)