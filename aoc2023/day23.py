"""A long walk: longest hike through a forest of paths and slopes."""

import argparse
import time
from pathlib import Path

_OPEN = ".v^><"
# (row, column) offsets: left, right, down, up.
_STEPS = ((0, -1), (0, 1), (1, 0), (-1, 0))
_SLOPES = {"v": (1, 0), "^": (-1, 0), ">": (0, 1), "<": (0, -1)}


def _lines(text):
    return text.replace("\t", "").strip().split("\n")


def _neighbours(lines, follow_slopes):
    height, width = len(lines), len(lines[0])
    start, end = (0, 1), (height - 1, width - 2)

    def inside(row, col):
        return 0 <= row < height and 0 <= col < width

    neighbours = {}
    junctions = {start, end}
    for i, line in enumerate(lines):
        for j, ch in enumerate(line):
            if ch not in _OPEN:
                continue
            if follow_slopes and ch in _SLOPES:
                di, dj = _SLOPES[ch]
                if inside(i + di, j + dj):
                    neighbours[(i, j)] = [(i + di, j + dj)]
                continue
            adjacent = [
                (i + di, j + dj)
                for di, dj in _STEPS
                if inside(i + di, j + dj) and lines[i + di][j + dj] != "#"
            ]
            neighbours[(i, j)] = adjacent
            if len(adjacent) > 2:
                junctions.add((i, j))
    return start, end, neighbours, junctions


def _walk(neighbours, junctions, origin, first):
    """Follow a corridor from ``origin`` to the next junction, or None at a dead end."""
    seen = {origin}
    current, distance = first, 1
    while current not in junctions:
        following = next(
            (tile for tile in neighbours.get(current, ()) if tile not in seen), None
        )
        if following is None:
            return None
        seen.add(current)
        current, distance = following, distance + 1
    return current, distance


def _longest_hike(text, follow_slopes):
    start, end, neighbours, junctions = _neighbours(_lines(text), follow_slopes)
    graph = {
        junction: [
            edge
            for first in neighbours.get(junction, ())
            if (edge := _walk(neighbours, junctions, junction, first)) is not None
        ]
        for junction in junctions
    }

    seen = {start}

    def explore(node, score):
        if node == end:
            return score
        best = None
        for target, distance in graph.get(node, ()):
            if target in seen:
                continue
            seen.add(target)
            found = explore(target, score + distance)
            seen.discard(target)
            if found is not None and (best is None or found > best):
                best = found
        return best

    longest = explore(start, 0)
    if longest is None:
        raise ValueError("no path from start to end")
    return longest


def part1(text):
    """Longest hike when slopes can only be walked downhill."""
    return _longest_hike(text, True)


def part2(text):
    """Longest hike when slopes are ordinary paths."""
    return _longest_hike(text, False)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Find the longest hike.")
    parser.add_argument("input", nargs="?", default="day23/input.txt")
    args = parser.parse_args(argv)
    try:
        text = Path(args.input).read_text()
    except OSError as exc:
        print("Error opening file:", exc)
        return 1
    started = time.perf_counter()
    slippery = part1(text)
    print("Part 1: ", slippery, "with total time: ", f"{time.perf_counter() - started:.3f}s")
    started = time.perf_counter()
    dry = part2(text)
    print("Part 2: ", dry, "with  total time: ", f"{time.perf_counter() - started:.3f}s")
    return 0