"""Gear ratios: find part numbers next to symbols on an engine schematic."""

import argparse
import re
from collections import defaultdict
from pathlib import Path

_NUMBER = re.compile(r"[0-9]+")
_NEIGHBOURS = [(-1, -1), (-1, 0), (-1, 1), (0, -1), (0, 1), (1, -1), (1, 0), (1, 1)]


def _symbols(rows):
    return {
        (x, y): ch
        for y, row in enumerate(rows)
        for x, ch in enumerate(row)
        if ch != "." and not ch.isdigit()
    }


def _engine_parts(rows, symbols):
    parts = defaultdict(list)
    for y, row in enumerate(rows):
        for match in _NUMBER.finditer(row):
            around = {
                (x + dx, y + dy)
                for x in range(match.start(), match.end())
                for dx, dy in _NEIGHBOURS
            }
            value = int(match.group())
            for point in around & symbols.keys():
                parts[point].append(value)
    return parts


def part1(text):
    """Sum of all numbers adjacent to a symbol, once per adjacent symbol."""
    rows = text.split()
    parts = _engine_parts(rows, _symbols(rows))
    return sum(sum(values) for values in parts.values())


def part2(text):
    """Sum of gear ratios: '*' symbols touching exactly two numbers."""
    rows = text.split()
    symbols = _symbols(rows)
    parts = _engine_parts(rows, symbols)
    return sum(
        values[0] * values[1]
        for point, values in parts.items()
        if symbols[point] == "*" and len(values) == 2
    )


def main(argv=None):
    parser = argparse.ArgumentParser(description="Analyse an engine schematic.")
    parser.add_argument("input", nargs="?", default="day03/input.txt")
    args = parser.parse_args(argv)
    try:
        text = Path(args.input).read_text()
    except OSError as exc:
        print("Error opening file:", exc)
        return 1
    print(part1(text))
    print(part2(text))
    return 0