"""Solutions to a selection of Advent of Code puzzles, with grid and arithmetic helpers."""

__version__ = "0.1.0"