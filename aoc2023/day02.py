"""Cube conundrum: check games against a bag and compute their power."""

import argparse
import re
from pathlib import Path

_DRAW = re.compile(r"(\d+)\s+([a-zA-Z]+)")
_LIMITS = {"red": 12, "green": 13, "blue": 14}


def _draws(line):
    for subset in line.split(":")[1].split(";"):
        for number, color in _DRAW.findall(subset):
            yield int(number), color


def part1(line):
    """Whether the game fits a bag of 12 red, 13 green and 14 blue cubes."""
    return all(
        color not in _LIMITS or number <= _LIMITS[color]
        for number, color in _draws(line)
    )


def part2(line):
    """Product of the fewest red, blue and green cubes the game needs."""
    fewest = {"red": 0, "blue": 0, "green": 0}
    for number, color in _draws(line):
        if color in fewest:
            fewest[color] = max(fewest[color], number)
    return fewest["red"] * fewest["blue"] * fewest["green"]


def main(argv=None):
    parser = argparse.ArgumentParser(description="Evaluate cube games.")
    parser.add_argument("input", nargs="?", default="day02/input.txt")
    args = parser.parse_args(argv)
    try:
        lines = Path(args.input).read_text().splitlines()
    except OSError as exc:
        print("Error opening file:", exc)
        return 1
    possible = sum(number for number, line in enumerate(lines, 1) if part1(line))
    power = sum(part2(line) for line in lines)
    print(f"Part_1: {possible}")
    print(f"Part_2: {power}")
    return 0