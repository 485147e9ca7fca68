"""Trebuchet calibration: recover two-digit values from lines of text."""

import argparse
from pathlib import Path

_DIGIT_WORDS = (
    "zero",
    "one",
    "two",
    "three",
    "four",
    "five",
    "six",
    "seven",
    "eight",
    "nine",
)

# Each word keeps its own letters around the digit, so overlapping words
# such as "eightwo" still yield both digits once replaced.
_SPELLED_DIGITS = {
    word: f"{word}{value}{word}" for value, word in enumerate(_DIGIT_WORDS)
}


def part1(line):
    """Combine the first and last digit of a line; 0 if it holds none."""
    digits = [int(ch) for ch in line if "0" <= ch <= "9"]
    if not digits:
        return 0
    return digits[0] * 10 + digits[-1]


def part2(line):
    """Like part1, but spelled-out digit words count as digits too."""
    for word, replacement in _SPELLED_DIGITS.items():
        line = line.replace(word, replacement)
    return part1(line)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Sum calibration values.")
    parser.add_argument("input", nargs="?", default="day01/input.txt")
    args = parser.parse_args(argv)
    try:
        lines = Path(args.input).read_text().splitlines()
    except OSError as exc:
        print("Error opening file:", exc)
        return 1
    first_total = sum(part1(line) for line in lines)
    second_total = sum(part2(line) for line in lines)
    print(f"Sum of Part_1: {first_total}")
    print(f"Sum of part_2: {second_total}")
    return 0