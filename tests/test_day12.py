import pytest

from aoc2024.day12 import corner_count, part_one, part_two, perimeter, regions

NESTED = ["OOOOO", "OXOXO", "OOOOO", "OXOXO", "OOOOO"]
E_SHAPE = ["EEEEE", "EXXXX", "EEEEE", "EXXXX", "EEEEE"]
SMALL = ["AAAA", "BBCD", "BBCC", "EEEC"]


def test_part_one_nested_regions():
    assert part_one(NESTED) == 772


def test_part_one_small():
    assert part_one(SMALL) == 140


def test_part_two_nested_regions():
    assert part_two(NESTED) == 436


def test_part_two_e_shape():
    assert part_two(E_SHAPE) == 236


def test_part_two_small():
    assert part_two(SMALL) == 80


def test_regions_separate_disconnected_plants():
    found = regions(NESTED)
    assert len(found) == 5
    assert sorted(len(region) for region in found) == [1, 1, 1, 1, 21]


def test_regions_cover_grid():
    found = regions(SMALL)
    cells = set().union(*found)
    assert len(cells) == 16
    assert sum(len(region) for region in found) == 16


@pytest.mark.parametrize(
    "region, expected_perimeter, expected_corners",
    [
        ({(0, 0)}, 4, 4),
        ({(0, 0), (0, 1), (0, 2)}, 8, 4),
        ({(0, 0), (1, 0), (1, 1)}, 8, 6),
    ],
)
def test_region_measures(region, expected_perimeter, expected_corners):
    assert perimeter(region) == expected_perimeter
    assert corner_count(region) == expected_corners


def test_empty_grid():
    assert part_one([]) == 0
    assert part_two([]) == 0