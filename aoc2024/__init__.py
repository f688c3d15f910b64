"""Solutions to the 2024 Advent of Code puzzles (days 1-8 and 10-14) and shared helpers."""

__version__ = "0.1.0"