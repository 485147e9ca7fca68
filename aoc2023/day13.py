"""Point of incidence: find lines of reflection in patterns of ash and rock."""

import argparse
from pathlib import Path


def _reflection(lines, smudge):
    for index in range(1, len(lines)):
        span = min(index, len(lines) - index)
        before = lines[index - span:index][::-1]
        after = lines[index:index + span]
        if smudge:
            differences = sum(
                a != b for left, right in zip(before, after) for a, b in zip(left, right)
            )
            if differences == 1:
                return index
        elif before == after:
            return index
    return 0


def _summary(rows, smudge):
    columns = ["".join(column) for column in zip(*rows)]
    return _reflection(rows, smudge) * 100 + _reflection(columns, smudge)


def solve(text):
    """Pattern summaries without and with a single smudge fixed."""
    clean = smudged = 0
    for block in text.replace("\t", "").strip().split("\n\n"):
        rows = block.split()
        clean += _summary(rows, False)
        smudged += _summary(rows, True)
    return clean, smudged


def main(argv=None):
    parser = argparse.ArgumentParser(description="Find mirror lines.")
    parser.add_argument("input", nargs="?", default="day13/input.txt")
    args = parser.parse_args(argv)
    try:
        text = Path(args.input).read_text()
    except OSError as exc:
        print("Error opening file:", exc)
        return 1
    clean, smudged = solve(text)
    print("Part 1: ", clean)
    print("Part 2: ", smudged)
    return 0