"""Pipe maze: measure the main loop and the tiles it encloses."""

import argparse
from pathlib import Path

_PIPES = {
    "|": ((0, -1), (0, 1)),
    "-": ((1, 0), (-1, 0)),
    "L": ((0, -1), (1, 0)),
    "J": ((0, -1), (-1, 0)),
    "7": ((0, 1), (-1, 0)),
    "F": ((0, 1), (1, 0)),
}

_START_SHAPES = {
    (True, False, True, False): "|",
    (False, True, False, True): "-",
    (True, True, False, False): "L",
    (True, False, False, True): "J",
    (False, False, True, True): "7",
    (False, True, True, False): "F",
}


def _start_symbol(symbols, start, width, height):
    x, y = start

    def at(point):
        return symbols.get(point, "")

    key = (
        at((x, y - 1)) in "7F|" and y - 1 >= 0,
        at((x + 1, y)) in "-7J" and x + 1 <= width,
        at((x, y + 1)) in "JL|" and y + 1 <= height,
        at((x - 1, y)) in "-FL" and x - 1 >= 0,
    )
    try:
        return _START_SHAPES[key]
    except KeyError:
        raise ValueError("cannot determine the pipe under the start tile") from None


def solve(text):
    """Farthest distance along the loop and number of tiles it encloses."""
    lines = text.strip().split("\n")
    width = len(lines[0]) - 1
    height = len(lines) - 1

    symbols = {}
    start = (0, 0)
    for y, line in enumerate(lines):
        for x, ch in enumerate(line.strip()):
            symbols[(x, y)] = ch
            if ch == "S":
                start = (x, y)
    symbols[start] = _start_symbol(symbols, start, width, height)

    visited = set()
    length = 0
    area = 0
    current = following = start
    while not (current != start and following == start):
        visited.add(current)
        length += 1
        current, following = following, start
        for dx, dy in _PIPES.get(symbols.get(current, ""), ()):
            neighbour = (current[0] + dx, current[1] + dy)
            if neighbour not in visited:
                following = neighbour
        area += current[0] * following[1] - current[1] * following[0]

    farthest = length // 2
    enclosed = (abs(area) - length) // 2 + 1
    return farthest, enclosed


def main(argv=None):
    parser = argparse.ArgumentParser(description="Trace the pipe loop.")
    parser.add_argument("input", nargs="?", default="day10/input.txt")
    args = parser.parse_args(argv)
    try:
        text = Path(args.input).read_text()
    except OSError as exc:
        print("Error opening file:", exc)
        return 1
    farthest, enclosed = solve(text)
    print("Part 1: ", farthest)
    print("Part 2: ", enclosed)
    return 0