"""Clumsy crucible: least heat loss with limits on straight-line moves."""

import argparse
import heapq
from pathlib import Path


def shortest_path(heat_map, goal, min_steps, max_steps):
    """Least heat lost moving from (0, 0) to ``goal``; -1 if it cannot be reached.

    Each move goes between ``min_steps`` and ``max_steps`` tiles in a straight
    line and must then turn.
    """
    goal = tuple(goal)
    queue = [(0, (0, 0), (1, 0)), (0, (0, 0), (0, 1))]
    heapq.heapify(queue)
    visited = set()
    while queue:
        heat, pos, heading = heapq.heappop(queue)
        if pos == goal:
            return heat
        if (pos, heading) in visited:
            continue
        visited.add((pos, heading))
        turned = (heading[1], heading[0])
        for distance in range(-max_steps, max_steps + 1):
            if -min_steps < distance < min_steps:
                continue
            target = (pos[0] + heading[0] * distance, pos[1] + heading[1] * distance)
            if target not in heat_map:
                continue
            step = -1 if distance < 0 else 1
            cost = sum(
                heat_map.get((pos[0] + heading[0] * j, pos[1] + heading[1] * j), 0)
                for j in range(step, distance + step, step)
            )
            heapq.heappush(queue, (heat + cost, target, turned))
    return -1


def solve(text):
    """Least heat loss for the normal crucible and for the ultra crucible."""
    rows = text.split()
    if not rows:
        raise ValueError("empty heat map")
    heat_map = {
        (x, y): int(ch) for y, row in enumerate(rows) for x, ch in enumerate(row)
    }
    goal = (len(rows[0]) - 1, len(rows) - 1)
    return shortest_path(heat_map, goal, 1, 3), shortest_path(heat_map, goal, 4, 10)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Route the crucible.")
    parser.add_argument("input", nargs="?", default="day17/input.txt")
    args = parser.parse_args(argv)
    try:
        text = Path(args.input).read_text()
    except OSError as exc:
        print("Error opening file:", exc)
        return 1
    normal, ultra = solve(text)
    print("Part 1: ", normal)
    print("Part 2: ", ultra)
    return 0