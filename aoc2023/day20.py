"""Pulse propagation: simulate flip-flops and conjunctions wired together."""

import argparse
import math
from collections import deque
from pathlib import Path

_PRESSES = 1000
_BROADCASTER = "broadcaster"


def _parse_modules(text):
    graph = {}
    flipflops = {}
    conjunctions = {}
    for line in text.replace("\t", "").strip().split("\n"):
        source, destinations = line.split(" -> ")
        targets = destinations.split(", ")
        name = source if source == _BROADCASTER else source[1:]
        graph[name] = targets
        if source.startswith("%"):
            flipflops[name] = False
        elif source.startswith("&"):
            conjunctions[name] = {}
    for source, targets in graph.items():
        for target in targets:
            if target in conjunctions:
                conjunctions[target][source] = False
    return graph, flipflops, conjunctions


def part1(text):
    """Product of low and high pulses sent over a thousand button presses."""
    graph, flipflops, conjunctions = _parse_modules(text)
    low = high = 0
    for _ in range(_PRESSES):
        queue = deque([("button", _BROADCASTER, False)])
        while queue:
            sender, node, pulse = queue.popleft()
            if pulse:
                high += 1
            else:
                low += 1
            if node in flipflops:
                if pulse:
                    continue
                flipflops[node] = not flipflops[node]
                outgoing = flipflops[node]
            elif node in conjunctions:
                memory = conjunctions[node]
                memory[sender] = pulse
                outgoing = not all(memory.values())
            elif node == _BROADCASTER:
                outgoing = pulse
            else:
                continue
            queue.extend((node, target, outgoing) for target in graph[node])
    return low * high


def _chain_period(graph, module):
    """Read a flip-flop chain as a binary counter and return its period."""
    bits = ""
    while True:
        targets = graph.get("%" + module, [])
        if not targets:
            raise ValueError(f"flip-flop {module!r} has no outputs")
        if len(targets) == 2 or "%" + targets[0] not in graph:
            bits = "1" + bits
        else:
            bits = "0" + bits
        following = [target for target in targets if "%" + target in graph]
        if not following:
            break
        module = following[0]
    return int(bits, 2)


def part2(text):
    """Fewest presses before the counters feeding the output all line up."""
    graph = {}
    for line in text.strip().split("\n"):
        source, destinations = line.split(" -> ")
        graph[source] = destinations.split(", ")
    periods = [_chain_period(graph, start) for start in graph.get(_BROADCASTER, [])]
    if not periods:
        raise ValueError("the broadcaster feeds no flip-flop chains")
    return math.lcm(*periods)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Simulate pulse modules.")
    parser.add_argument("input", nargs="?", default="day20/input.txt")
    args = parser.parse_args(argv)
    try:
        text = Path(args.input).read_text()
    except OSError as exc:
        print("Error opening file:", exc)
        return 1
    print("Part 1:", part1(text))
    print("Part 2:", part2(text))
    return 0