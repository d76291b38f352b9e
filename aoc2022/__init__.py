"""Solvers for Advent of Code 2022 puzzles, days 4 to 15 and 17."""

__version__ = "0.1.0"