"""Mirage maintenance: extrapolate sequences by repeated differences."""

import argparse
from pathlib import Path


def extrapolate(values):
    """Predict the value that follows the sequence."""
    values = list(values)
    differences = [b - a for a, b in zip(values, values[1:])]
    if not any(differences):
        return values[-1]
    return values[-1] + extrapolate(differences)


def solve(text):
    """Sums of the next values and of the previous values of every sequence."""
    forward = backward = 0
    for line in text.strip().split("\n"):
        sequence = [int(value) for value in line.split()]
        forward += extrapolate(sequence)
        backward += extrapolate(sequence[::-1])
    return forward, backward


def main(argv=None):
    parser = argparse.ArgumentParser(description="Extrapolate sensor readings.")
    parser.add_argument("input", nargs="?", default="day09/input.txt")
    args = parser.parse_args(argv)
    try:
        text = Path(args.input).read_text()
    except OSError as exc:
        print("Error opening file:", exc)
        return 1
    forward, backward = solve(text)
    print("Part 1: ", forward)
    print("Part 2: ", backward)
    return 0