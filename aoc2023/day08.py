"""Haunted wasteland: follow left/right instructions through a node network."""

import argparse
import math
import re
from itertools import cycle
from pathlib import Path

_NODE = re.compile(r"(.*) = \((.*), (.*)\)")


def _parse(text):
    blocks = text.strip().split("\n\n")
    if len(blocks) < 2:
        raise ValueError("expected instructions and a network separated by a blank line")
    directions = blocks[0]
    if not directions:
        raise ValueError("no instructions given")
    network = {
        match.group(1).strip(): (match.group(2).strip(), match.group(3).strip())
        for match in _NODE.finditer(blocks[1])
    }
    return network, directions


def _step(network, node, direction):
    left, right = network[node]
    return left if direction == "L" else right


def part1(text):
    """Number of steps needed to walk from AAA to ZZZ."""
    network, directions = _parse(text)
    node = "AAA"
    steps = 0
    turns = cycle(directions)
    while node != "ZZZ":
        node = _step(network, node, next(turns))
        steps += 1
    return steps


def part2(text):
    """Steps until every node ending in A stands on a node ending in Z at once."""
    network, directions = _parse(text)
    cycles = []
    for node in network:
        if not node.endswith("A"):
            continue
        steps = 0
        while not node.endswith("Z"):
            node = _step(network, node, directions[steps % len(directions)])
            steps += 1
        cycles.append(steps)
    if not cycles:
        raise ValueError("no starting node ends in 'A'")
    return math.lcm(*cycles)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Walk the desert network.")
    parser.add_argument("input", nargs="?", default="day08/input.txt")
    args = parser.parse_args(argv)
    try:
        text = Path(args.input).read_text()
    except OSError as exc:
        print("Error opening file:", exc)
        return 1
    print(part1(text))
    print(part2(text))
    return 0