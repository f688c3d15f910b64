# aoc2024

Solutions to the 2024 Advent of Code puzzles for days 1 to 8 and 10 to 14,
together with a small set of helpers for reading puzzle input and working
with character grids. The package has no dependencies beyond the standard
library.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Command line

Installing the package provides an `aoc2024` command that solves one part
of one day from an input file:

```
aoc2024 DAY PART [INPUT]
```

`DAY` is one of 1 to 8 or 10 to 14, `PART` is 1 or 2, and `INPUT` is the
puzzle input file (default `input.txt`). The answer is printed after
`result:`. For example:

```
aoc2024 1 1 input.txt
aoc2024 12 2 garden.txt
```

For day 11 the stones are read from the file; part 1 blinks 25 times and
part 2 blinks 75 times.

Day 14 uses a room of 103 rows by 101 columns unless told otherwise:

```
aoc2024 14 1 robots.txt --rows 7 --cols 11
```

Day 14 part 2 simulates the robots for `--seconds` seconds (default
41612) and, for every second at which more than five rows of the room
hold a run of three robots, prints the elapsed second and a picture of
the room, with `1` for a robot and `.` for an empty cell:

```
aoc2024 14 2 robots.txt --seconds 10000
```

If the input file cannot be read or its contents are malformed, the
command prints a message to standard error and exits with status 1.
See all options with `aoc2024 --help`.

## Using the solvers from Python

Each day lives in its own module (`aoc2024.day01` to `aoc2024.day08` and
`aoc2024.day10` to `aoc2024.day14`). Most expose `part_one` and
`part_two`, taking the puzzle input as a list of lines, which
`aoc2024.utils.read_lines` reads from a file:

```python
from aoc2024 import day01
from aoc2024.utils import read_lines

lines = read_lines("input.txt")
print(day01.part_one(lines))
print(day01.part_two(lines))
```

Grid puzzles take the grid as a list of strings:

```python
from aoc2024 import day12

garden = ["OOOOO", "OXOXO", "OOOOO", "OXOXO", "OOOOO"]
day12.part_one(garden)   # 772
day12.part_two(garden)   # 436
```

Some days take their parameters directly:

```python
from aoc2024 import day11, day13, day14
from aoc2024.utils import read_lines

day11.count_stones("125 17", 25)   # 55312

machines = read_lines("machines.txt")
day13.part_two(machines, offset=0)  # prizes without the default offset

robots = read_lines("robots.txt")
day14.part_one(robots, 103, 101)    # safety factor after 100 seconds
for second, picture in day14.tree_candidates(robots, 103, 101, 1000):
    print(second)
```

Smaller building blocks are public too, for instance
`day02.is_safe_dampened`, `day05.correct_order`, `day07.can_calibrate`,
`day08.resonant_antinodes`, `day10.trailhead_rating`, `day12.regions`,
`day13.cheapest_by_solving` and `day14.Robot.moved`.

Malformed input raises `ValueError`.

## Helpers

`aoc2024.utils` holds what the days share: the `Coordinate` and `Pair`
types, `inside_grid`, `replace_char` and `format_grid` for grids, and
`read_lines`, `ints_in` and `atoi_digits` for parsing input.

## What it does not do

There is no solver for day 9, and none for days after 14. The package
does not fetch puzzle input; it only reads files you supply.