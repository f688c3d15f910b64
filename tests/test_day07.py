import pytest

from aoc2024.day07 import can_calibrate, concatenate, part_one, part_two

EXAMPLE = [
    "190: 10 19",
    "3267: 81 40 27",
    "83: 17 5",
    "156: 15 6",
    "7290: 6 8 6 15",
    "161011: 16 10 13",
    "192: 17 8 14",
    "21037: 9 7 18 13",
    "292: 11 6 16 20",
]


def test_part_one_example():
    assert part_one(EXAMPLE) == 3749


def test_part_two_example():
    assert part_two(EXAMPLE) == 11387


@pytest.mark.parametrize(
    "left, right, expected",
    [(12, 345, 12345), (15, 6, 156), (0, 7, 7), (12, 0, 12)],
)
def test_concatenate(left, right, expected):
    assert concatenate(left, right) == expected


def test_can_calibrate_addition_and_multiplication():
    assert can_calibrate(3267, [81, 40, 27], False) is True
    assert can_calibrate(83, [17, 5], False) is False


def test_can_calibrate_needs_concatenation():
    assert can_calibrate(7290, [6, 8, 6, 15], False) is False
    assert can_calibrate(7290, [6, 8, 6, 15], True) is True


def test_empty_line_raises():
    with pytest.raises(ValueError):
        part_one([""])