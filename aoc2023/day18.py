"""Lavaduct lagoon: area of a trench dug from a dig plan."""

import argparse
import re
from pathlib import Path

_INSTRUCTION = re.compile(r"(.) (.*?) \(#(.*?)(.)\)")

_LETTER_DIRECTIONS = {"U": (0, -1), "D": (0, 1), "L": (-1, 0), "R": (1, 0)}
_DIGIT_DIRECTIONS = {"0": (1, 0), "1": (0, 1), "2": (-1, 0), "3": (0, -1)}


def _half_towards_zero(value):
    half = abs(value) // 2
    return half if value >= 0 else -half


def _lagoon_size(moves):
    """Cells inside and on the trench, by the shoelace formula plus the boundary."""
    area = 0
    x, y = 0, 0
    for (dx, dy), length in moves:
        nx, ny = x + dx * length, y + dy * length
        area += x * ny - y * nx + length
        x, y = nx, ny
    return _half_towards_zero(area) + 1


def part1(text):
    """Lagoon size following the letter directions and step counts."""
    return _lagoon_size(
        (_LETTER_DIRECTIONS.get(direction, (0, 0)), int(length))
        for direction, length, _, _ in _INSTRUCTION.findall(text)
    )


def part2(text):
    """Lagoon size following the instructions hidden in the colour codes."""
    return _lagoon_size(
        (_DIGIT_DIRECTIONS.get(direction, (0, 0)), int(length, 16))
        for _, _, length, direction in _INSTRUCTION.findall(text)
    )


def main(argv=None):
    parser = argparse.ArgumentParser(description="Measure the lava lagoon.")
    parser.add_argument("input", nargs="?", default="day18/input.txt")
    args = parser.parse_args(argv)
    try:
        text = Path(args.input).read_text()
    except OSError as exc:
        print("Error opening file:", exc)
        return 1
    print("Part 1:", part1(text))
    print("Part 2:", part2(text))
    return 0