"""Solvers for the 2023 Advent of Code puzzles, one module per day (day01 to day25)."""

__version__ = "1.0.0"