"""Scratchcards: score cards and count the copies they win."""

import argparse
import re
from collections import Counter, defaultdict
from pathlib import Path

_NUMBER = re.compile(r"\d+")


def _match_counts(text):
    counts = []
    for line in text.strip().splitlines():
        sides = line.split(":")[1].split("|")
        yours, winning = sides[0], sides[1]
        winning_numbers = Counter(_NUMBER.findall(winning))
        counts.append(sum(winning_numbers[n] for n in _NUMBER.findall(yours)))
    return counts


def part1(text):
    """Total points: each card scores 2**(matches - 1) if it has matches."""
    return sum(1 << (wins - 1) for wins in _match_counts(text) if wins > 0)


def part2(text):
    """Total number of cards once every won copy has been added."""
    copies = defaultdict(int)
    for index, wins in enumerate(_match_counts(text)):
        copies[index] += 1
        for offset in range(1, wins + 1):
            copies[index + offset] += copies[index]
    return sum(copies.values())


def main(argv=None):
    parser = argparse.ArgumentParser(description="Score scratchcards.")
    parser.add_argument("input", nargs="?", default="day04/input.txt")
    args = parser.parse_args(argv)
    try:
        text = Path(args.input).read_text()
    except OSError as exc:
        print("Error opening file:", exc)
        return 1
    print(part1(text))
    print(part2(text))
    return 0