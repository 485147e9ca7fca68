"""Boat races: count the ways to beat each record distance."""

import argparse
import math
import re
from pathlib import Path

_NUMBER = re.compile(r"-?\d+")


def _numbers(line):
    return [int(v) for v in _NUMBER.findall(line.split(":")[1].strip())]


def _ways_to_win(time, record):
    """Count hold times h in 1..time with h * (time - h) > record."""

    def beats(hold):
        return hold * (time - hold) > record

    if time < 1:
        return 0
    peak = time - time // 2
    if not beats(peak):
        return 0
    low, high = 0, peak
    while low < high:
        mid = (low + high) // 2
        if beats(mid):
            high = mid
        else:
            low = mid + 1
    return min(time - low, time) - max(low, 1) + 1


def part1(text):
    """Product of the number of winning strategies over all races."""
    lines = text.split("\n")
    times, distances = _numbers(lines[0]), _numbers(lines[1])
    return math.prod(
        _ways_to_win(time, record)
        for time, record in zip(times, distances, strict=True)
    )


def part2(text):
    """Winning strategies when the digits on each line form one race."""
    lines = text.split("\n")
    time = int("".join(lines[0].split()[1:]))
    record = int("".join(lines[1].split()[1:]))
    return _ways_to_win(time, record)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Count winning boat races.")
    parser.add_argument("input", nargs="?", default="day06/input.txt")
    args = parser.parse_args(argv)
    try:
        text = Path(args.input).read_text()
    except OSError as exc:
        print("Error opening file:", exc)
        return 1
    print(part1(text))
    print(part2(text))
    return 0