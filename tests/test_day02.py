import pytest

from aoc2024.day02 import is_safe, is_safe_dampened, part_one, part_two

EXAMPLE = [
    "7 6 4 2 1",
    "1 2 7 8 9",
    "9 7 6 2 1",
    "1 3 2 4 5",
    "8 6 4 4 1",
    "1 3 6 7 9",
]


def test_part_one_example():
    assert part_one(EXAMPLE) == 2


def test_part_two_example():
    assert part_two(EXAMPLE) == 4


@pytest.mark.parametrize(
    "levels,safe,dampened",
    [
        ([7, 6, 4, 2, 1], True, True),
        ([1, 2, 7, 8, 9], False, False),
        ([9, 7, 6, 2, 1], False, False),
        ([1, 3, 2, 4, 5], False, True),
        ([8, 6, 4, 4, 1], False, True),
        ([1, 3, 6, 7, 9], True, True),
    ],
)
def test_example_reports(levels, safe, dampened):
    assert is_safe(levels) is safe
    assert is_safe_dampened(levels) is dampened


def test_removing_first_level_can_make_safe():
    assert is_safe([9, 1, 2, 3]) is False
    assert is_safe_dampened([9, 1, 2, 3]) is True


def test_safe_report_stays_safe_when_reversed():
    assert is_safe(list(reversed([1, 3, 6, 7, 9]))) is True


def test_empty_line_raises():
    with pytest.raises(ValueError):
        part_one(["1 2 3", ""])


def test_non_numeric_level_raises():
    with pytest.raises(ValueError):
        part_two(["1 2 x"])