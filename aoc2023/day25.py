"""Snowverload: cut three wires to split the components into two groups."""

import argparse
from collections import Counter, deque
from pathlib import Path

_CUTS = 3


def _parse(text):
    graph = {}
    for line in text.replace("\t", "").strip().split("\n"):
        node, separator, rest = line.partition(": ")
        if not separator:
            raise ValueError(f"malformed connection line: {line!r}")
        for other in rest.split(" "):
            graph.setdefault(node, []).append(other)
            graph.setdefault(other, []).append(node)
    return graph


def _edge_usage(graph):
    """How often each wire appears in a breadth-first tree from every component."""
    usage = Counter()
    for origin in graph:
        visited = set()
        queue = deque([origin])
        while queue:
            node = queue.popleft()
            for other in graph.get(node, ()):
                if other in visited:
                    continue
                queue.append(other)
                visited.add(other)
                usage[(min(node, other), max(node, other))] += 1
    return usage


def _disconnect(graph, node, other):
    if other in graph.get(node, []):
        graph[node].remove(other)


def part1(text):
    """Product of the sizes of the two groups left after cutting three wires."""
    graph = _parse(text)
    removed = []
    for _ in range(_CUTS):
        usage = _edge_usage(graph)
        if not usage:
            raise ValueError("not enough wires to cut")
        node, other = max(usage, key=usage.get)
        removed.append((node, other))
        _disconnect(graph, node, other)
        _disconnect(graph, other, node)

    visited = set()
    queue = deque([removed[0][0]])
    while queue:
        node = queue.popleft()
        for other in graph.get(node, ()):
            if other in visited:
                continue
            queue.append(other)
            visited.add(other)
    size = len(visited)
    return size * (len(graph) - size)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Split the wiring diagram.")
    parser.add_argument("input", nargs="?", default="day25/input.txt")
    args = parser.parse_args(argv)
    try:
        text = Path(args.input).read_text()
    except OSError as exc:
        print("Error opening file:", exc)
        return 1
    print("Part 1: ", part1(text))
    return 0