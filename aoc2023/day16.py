"""The floor will be lava: trace light beams through mirrors and splitters."""

import argparse
from collections import deque
from pathlib import Path

UP = (0, -1)
RIGHT = (1, 0)
DOWN = (0, 1)
LEFT = (-1, 0)

_BEAMS = {
    ".": {UP: (UP,), RIGHT: (RIGHT,), DOWN: (DOWN,), LEFT: (LEFT,)},
    "/": {UP: (RIGHT,), RIGHT: (UP,), DOWN: (LEFT,), LEFT: (DOWN,)},
    "\\": {UP: (LEFT,), RIGHT: (DOWN,), DOWN: (RIGHT,), LEFT: (UP,)},
    "|": {UP: (UP,), RIGHT: (UP, DOWN), DOWN: (DOWN,), LEFT: (UP, DOWN)},
    "-": {UP: (LEFT, RIGHT), RIGHT: (RIGHT,), DOWN: (LEFT, RIGHT), LEFT: (LEFT,)},
}


def energize(grid, position, direction):
    """Number of tiles a beam entering ``position`` heading ``direction`` lights up.

    ``grid`` maps (x, y) points to tile characters.
    """
    start = (tuple(position), tuple(direction))
    seen = {start}
    queue = deque([start])
    energized = set()
    while queue:
        pos, heading = queue.popleft()
        for turn in _BEAMS.get(grid.get(pos), {}).get(heading, ()):
            energized.add(pos)
            following = ((pos[0] + turn[0], pos[1] + turn[1]), turn)
            if following not in seen:
                seen.add(following)
                queue.append(following)
    return len(energized)


def _grid(rows):
    return {(x, y): ch for y, row in enumerate(rows) for x, ch in enumerate(row)}


def part1(text):
    """Energized tiles for a beam entering the top-left corner heading right."""
    return energize(_grid(text.split()), (0, 0), RIGHT)


def part2(text):
    """Largest number of energized tiles over every entry point on the border."""
    rows = text.split()
    if not rows:
        raise ValueError("empty grid")
    grid = _grid(rows)
    starts = []
    for y, row in enumerate(rows):
        starts.append(((0, y), RIGHT))
        starts.append(((len(row) - 1, y), LEFT))
    for x in range(len(rows[0])):
        starts.append(((x, 0), DOWN))
        starts.append(((x, len(rows) - 1), UP))
    return max((energize(grid, pos, heading) for pos, heading in starts), default=0)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Trace light through the contraption.")
    parser.add_argument("input", nargs="?", default="day16/input.txt")
    args = parser.parse_args(argv)
    try:
        text = Path(args.input).read_text()
    except OSError as exc:
        print("Error opening file:", exc)
        return 1
    print(part1(text))
    print(part2(text))
    return 0