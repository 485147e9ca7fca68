"""Lens library: the HASH algorithm and the HASHMAP lens boxes."""

import argparse
import re
from pathlib import Path

_STEP = re.compile(r"(\w+)([-=])(\d*)", re.ASCII)
_BOX_COUNT = 256


def hash_step(step):
    """HASH value of a string: a number in 0..255."""
    value = 0
    for ch in step:
        value = (value + ord(ch)) * 17 % _BOX_COUNT
    return value


def part1(text):
    """Sum of the HASH values of every comma-separated step on the first line."""
    first_line = text.replace("\r\n", "\n").split("\n")[0]
    return sum(hash_step(step) for step in first_line.split(","))


def part2(text):
    """Focusing power of all lenses after running the initialisation sequence."""
    boxes = [[] for _ in range(_BOX_COUNT)]
    focal = {}
    for label, operation, digits in _STEP.findall(text):
        box = boxes[hash_step(label)]
        if operation == "-":
            if label in box:
                box.remove(label)
            continue
        if not digits:
            raise ValueError(f"lens {label!r} has no focal length")
        focal[label] = int(digits[0])
        if label not in box:
            box.append(label)
    return sum(
        box_number * slot * focal[label]
        for box_number, box in enumerate(boxes, 1)
        for slot, label in enumerate(box, 1)
    )


def main(argv=None):
    parser = argparse.ArgumentParser(description="Run the lens initialisation.")
    parser.add_argument("input", nargs="?", default="day15/input.txt")
    args = parser.parse_args(argv)
    try:
        text = Path(args.input).read_text()
    except OSError as exc:
        print("Error opening file:", exc)
        return 1
    print(part1(text))
    print(part2(text))
    return 0