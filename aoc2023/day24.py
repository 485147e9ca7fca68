"""Never tell me the odds: hailstone paths and the rock that hits them all."""

import argparse
import math
from itertools import combinations
from pathlib import Path


def _div(numerator, denominator):
    """Floating division that yields infinities and NaN instead of raising."""
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _hailstones(text):
    stones = []
    for line in text.split("\n"):
        if line == "":
            continue
        stones.append([int(part.strip()) for part in line.replace("@", ",").split(",")])
    return stones


def part1(text, low, high):
    """Pairs of hailstone paths that cross ahead of both inside the test area.

    Only x and y are considered.  A pair on parallel paths is judged by the
    crossing point of the pair before it.
    """
    stones = _hailstones(text)
    low, high = float(low), float(high)
    x = y = 0.0
    count = 0
    for first, second in combinations(stones, 2):
        px, py, vx, vy = (float(v) for v in (first[0], first[1], first[3], first[4]))
        px2, py2, vx2, vy2 = (float(v) for v in (second[0], second[1], second[3], second[4]))

        slope1 = _div(vy, vx)
        offset1 = py - _div(px * vy, vx)
        slope2 = _div(vy2, vx2)
        offset2 = py2 - _div(px2 * vy2, vx2)
        if slope1 != slope2:
            x = _div(offset2 - offset1, slope1 - slope2)
            y = slope1 * x + offset1

        t1 = _div(x - px, vx)
        t2 = _div(x - px2, vx2)
        if t1 >= 0 and t2 >= 0 and low <= x <= high and low <= y <= high:
            count += 1
    return count


def _normalise(value, pivot):
    scaled = _div(value, pivot)
    return value if math.isnan(scaled) else scaled


def _solve_plane(stones, a, b, c, d):
    """Solve the linear system for one plane, built from the first five stones."""
    if len(stones) < 5:
        raise ValueError("at least five hailstones are needed")
    rows = [
        [s[c], -s[d], s[a], s[b], s[b] * s[c] - s[a] * s[d]] for s in stones
    ]
    matrix = [
        [float(value) - float(base) for value, base in zip(row, rows[4])]
        for row in rows[:4]
    ]

    for i in range(len(matrix)):
        pivot = matrix[i][i]
        matrix[i] = [_normalise(value, pivot) for value in matrix[i]]
        for j in range(i + 1, len(matrix)):
            factor = matrix[j][i]
            matrix[j] = [lower - upper * factor for lower, upper in zip(matrix[j], matrix[i])]
    for i in reversed(range(len(matrix))):
        for j in range(i):
            factor = matrix[j][i]
            matrix[j] = [upper - lower * factor for upper, lower in zip(matrix[j], matrix[i])]
    return [row[-1] for row in matrix]


def part2(text):
    """Sum of the starting coordinates of a rock that hits every hailstone."""
    stones = _hailstones(text)
    xy = _solve_plane(stones, 0, 1, 3, 4)
    yz = _solve_plane(stones, 1, 2, 4, 5)
    total = xy[0] + xy[1] + yz[0]
    if not math.isfinite(total):
        raise ValueError("the hailstone equations have no unique solution")
    return int(math.copysign(math.floor(abs(total) + 0.5), total))


def main(argv=None):
    parser = argparse.ArgumentParser(description="Analyse hailstone paths.")
    parser.add_argument("input", nargs="?", default="day24/input.txt")
    args = parser.parse_args(argv)
    try:
        text = Path(args.input).read_text()
    except OSError as exc:
        print("Error opening file:", exc)
        return 1
    print("Part 1: ", part1(text, 200000000000000.0, 400000000000000.0))
    print("Part 2: ", part2(text))
    return 0