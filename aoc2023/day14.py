"""Parabolic reflector dish: roll rocks and weigh the load on the north beams."""

import argparse
from pathlib import Path

_CYCLES = 1_000_000_000


def _transpose(rows):
    return tuple("".join(column) for column in zip(*rows))


def _roll_to_front(line):
    return "#".join("".join(sorted(part, reverse=True)) for part in line.split("#"))


def _tilt_north(rows):
    return _transpose(_roll_to_front(column) for column in _transpose(rows))


def _rotate_clockwise(rows):
    return tuple("".join(column) for column in zip(*reversed(rows)))


def _spin(rows):
    for _ in range(4):
        rows = _rotate_clockwise(_tilt_north(rows))
    return rows


def _north_load(rows):
    height = len(rows)
    return sum((height - y) * row.count("O") for y, row in enumerate(rows))


def part1(text):
    """Load on the north beams after tilting the platform north."""
    return _north_load(_tilt_north(tuple(text.split())))


def part2(text):
    """Load on the north beams after a billion spin cycles."""
    rows = tuple(text.split())
    seen = {}
    history = []
    for cycle_index in range(_CYCLES):
        if rows in seen:
            first = seen[rows]
            rows = history[first + (_CYCLES - cycle_index) % (cycle_index - first)]
            break
        seen[rows] = cycle_index
        history.append(rows)
        rows = _spin(rows)
    return _north_load(rows)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Tilt the reflector dish.")
    parser.add_argument("input", nargs="?", default="day14/input.txt")
    args = parser.parse_args(argv)
    try:
        text = Path(args.input).read_text()
    except OSError as exc:
        print("Error opening file:", exc)
        return 1
    print("Part 1: ", part1(text))
    print("Part 2: ", part2(text))
    return 0