"""Seed almanac: push seeds through a chain of range maps."""

import argparse
import re
from itertools import count
from pathlib import Path

_NUMBER = re.compile(r"-?\d+")


def _parse_map(block):
    rows = []
    for line in block.split("\n"):
        values = [int(v) for v in _NUMBER.findall(line)]
        if values:
            rows.append(values)
    return rows


def _parse(text):
    blocks = text.split("\n\n")
    seeds = [int(v) for v in _NUMBER.findall(blocks[0].split(":")[1].strip())]
    return seeds, [_parse_map(block) for block in blocks[1:]]


def _forward(value, mapping):
    for row in mapping:
        destination, start, length = row[:3]
        if start <= value < start + length:
            return destination + (value - start)
    return value


def _backward(value, mapping):
    for row in mapping:
        destination, start, length = row[:3]
        if destination <= value < destination + length:
            return start + (value - destination)
    return value


def part1(text):
    """Lowest location reached by any of the listed seeds."""
    seeds, maps = _parse(text)
    locations = []
    for seed in seeds:
        for mapping in maps:
            seed = _forward(seed, mapping)
        locations.append(seed)
    return min(locations)


def part2(text):
    """Lowest location whose seed lies in one of the seed ranges."""
    seeds, maps = _parse(text)
    if len(seeds) % 2:
        raise ValueError("seed ranges need an even number of values")
    ranges = list(zip(seeds[::2], seeds[1::2]))
    for location in count():
        value = location
        for mapping in reversed(maps):
            value = _backward(value, mapping)
        if any(start <= value < start + length for start, length in ranges):
            return location
    raise AssertionError("unreachable")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Map seeds to locations.")
    parser.add_argument("input", nargs="?", default="day05/input.txt")
    args = parser.parse_args(argv)
    try:
        text = Path(args.input).read_text()
    except OSError as exc:
        print("Error opening file:", exc)
        return 1
    print(part1(text))
    print(part2(text))
    return 0