"""Sand slabs: let bricks settle and see which ones can be disintegrated."""

import argparse
import re
from pathlib import Path

_NUMBER = re.compile(r"\d+")


def _parse(text):
    bricks = []
    for line in text.replace("\t", "").strip().split("\n"):
        values = [int(v) for v in _NUMBER.findall(line)]
        if len(values) < 6:
            raise ValueError(f"malformed brick: {line!r}")
        x1, y1, z1, x2, y2, z2 = values[:6]
        bricks.append((x1, y1, z1, x2 + 1, y2 + 1, z2 + 1))
    bricks.sort(key=lambda brick: brick[2])
    return bricks


def _drop(bricks, skip=None):
    """Let bricks fall in order, leaving out ``skip``; return them and the fall count."""
    peaks = {}
    settled = []
    falls = 0
    for index, brick in enumerate(bricks):
        if index == skip:
            settled.append(brick)
            continue
        x1, y1, z1, x2, y2, z2 = brick
        cells = [(x, y) for x in range(x1, x2) for y in range(y1, y2)]
        peak = max([0, *(peaks.get(cell, 0) for cell in cells)])
        top = peak + z2 - z1
        for cell in cells:
            peaks[cell] = top
        settled.append((x1, y1, peak, x2, y2, top))
        if peak < z1:
            falls += 1
    return settled, falls


def solve(text):
    """Bricks safe to disintegrate, and the total of bricks that would fall."""
    settled, _ = _drop(_parse(text))
    safe = 0
    fallen = 0
    for index in range(len(settled)):
        _, falls = _drop(settled, index)
        if falls == 0:
            safe += 1
        fallen += falls
    return safe, fallen


def main(argv=None):
    parser = argparse.ArgumentParser(description="Settle falling bricks.")
    parser.add_argument("input", nargs="?", default="day22/input.txt")
    args = parser.parse_args(argv)
    try:
        text = Path(args.input).read_text()
    except OSError as exc:
        print("Error opening file:", exc)
        return 1
    safe, fallen = solve(text)
    print("Part 1: ", safe)
    print("Part 2: ", fallen)
    return 0