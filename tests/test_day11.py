import pytest

from aoc2024.day11 import blink, count_stones, strip_leading_zeros


@pytest.mark.parametrize(
    "text, expected",
    [("000123", "123"), ("000", "0"), ("123", "123"), ("0", "0"), ("", "")],
)
def test_strip_leading_zeros(text, expected):
    assert strip_leading_zeros(text) == expected


def test_example_twenty_five_blinks():
    assert count_stones("125 17", 25) == 55312


def test_example_six_blinks():
    assert count_stones("125 17", 6) == 22


@pytest.mark.parametrize("blinks, expected", [(0, 1), (1, 1), (2, 1), (3, 2), (4, 4)])
def test_zero_stone_growth(blinks, expected):
    assert count_stones("0", blinks) == expected


def test_blink_rules():
    assert blink({"0": 2, "1000": 1, "1": 3}) == {"1": 2, "10": 1, "0": 1, "2024": 3}


def test_blink_merges_equal_stones():
    assert blink({"11": 1}) == {"1": 2}


def test_blink_is_deterministic_example():
    assert blink({"125": 1, "17": 1}) == {"253000": 1, "1": 1, "7": 1}