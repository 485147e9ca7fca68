"""Hot springs: count the arrangements that fit damaged condition records."""

import argparse
from functools import lru_cache
from pathlib import Path


def count_arrangements(springs, groups):
    """Number of ways to fill the '?' in ``springs`` to match the group sizes."""
    record = springs + "."

    @lru_cache(maxsize=None)
    def count(position, group_index):
        if position == len(record):
            return 1 if group_index == len(groups) else 0
        head = record[position]
        total = 0
        if head in ".?":
            total += count(position + 1, group_index)
        if head in "#?" and group_index < len(groups):
            size = groups[group_index]
            end = position + size
            if (
                size >= 0
                and end < len(record)
                and "." not in record[position:end]
                and record[end] != "#"
            ):
                total += count(end + 1, group_index + 1)
        return total

    groups = tuple(groups)
    return count(0, 0)


def _records(text):
    for line in text.replace("\t", "").strip().split("\n"):
        springs, sizes = line.split()
        yield springs, [int(size) for size in sizes.split(",")]


def part1(text):
    """Sum of arrangement counts over all records."""
    return sum(count_arrangements(springs, groups) for springs, groups in _records(text))


def part2(text):
    """Sum of arrangement counts once every record is unfolded five times."""
    return sum(
        count_arrangements("?".join([springs] * 5), groups * 5)
        for springs, groups in _records(text)
    )


def main(argv=None):
    parser = argparse.ArgumentParser(description="Count spring arrangements.")
    parser.add_argument("input", nargs="?", default="day12/input.txt")
    args = parser.parse_args(argv)
    try:
        text = Path(args.input).read_text()
    except OSError as exc:
        print("Error opening file:", exc)
        return 1
    print(part1(text))
    print(part2(text))
    return 0