"""Cosmic expansion: sum distances between galaxies in an expanding image."""

import argparse
from pathlib import Path


def total_distance(text, expansion):
    """Sum of Manhattan distances over all galaxy pairs.

    Every row and column without a galaxy counts as ``expansion`` of them.
    """
    rows = text.split()
    if not rows:
        return 0
    empty_columns = {
        x for x in range(len(rows[0])) if all(row[x] != "#" for row in rows)
    }

    galaxies = []
    total = 0
    dy = 0
    for y, row in enumerate(rows):
        if "#" not in row:
            dy += expansion - 1
        dx = 0
        for x, ch in enumerate(row):
            if x in empty_columns:
                dx += expansion - 1
            if ch == "#":
                gx, gy = x + dx, y + dy
                total += sum(abs(gx - ox) + abs(gy - oy) for ox, oy in galaxies)
                galaxies.append((gx, gy))
    return total


def main(argv=None):
    parser = argparse.ArgumentParser(description="Measure galaxy distances.")
    parser.add_argument("input", nargs="?", default="day11/input.txt")
    args = parser.parse_args(argv)
    try:
        text = Path(args.input).read_text()
    except OSError as exc:
        print("Error opening file:", exc)
        return 1
    print("Part 1: ", total_distance(text, 2))
    print("Part 2: ", total_distance(text, 1000000))
    return 0