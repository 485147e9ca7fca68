"""Aplenty: sort machine parts through workflows of rating rules."""

import argparse
import math
import re
from dataclasses import dataclass
from pathlib import Path

_WORKFLOW = re.compile(r"(\w+)\{(.*),(\w+)\}")
_CONDITION = re.compile(r"(\w+)(<|>)(\d+):(\w+)")
_RATING = re.compile(r"\{(.*)\}")
_RATING_RANGE = (1, 4000)


@dataclass(frozen=True)
class Rule:
    """A workflow step; a rule without a category always applies."""

    category: str = ""
    operator: str = ""
    value: int = 0
    target: str = ""


def _parse(text):
    blocks = text.replace("\t", "").strip().split("\n\n")
    if len(blocks) < 2:
        raise ValueError("expected workflows and ratings separated by a blank line")

    workflows = {}
    for name, conditions, fallback in _WORKFLOW.findall(blocks[0]):
        rules = workflows.setdefault(name, [])
        rules.extend(
            Rule(category, operator, int(value), target)
            for category, operator, value, target in _CONDITION.findall(conditions)
        )
        rules.append(Rule(target=fallback))

    parts = []
    for field in blocks[1].split():
        match = _RATING.search(field)
        if not match:
            continue
        rating = {}
        for pair in match.group(1).split(","):
            key_value = pair.split("=")
            if len(key_value) == 2:
                rating[key_value[0]] = int(key_value[1])
        parts.append(rating)
    return workflows, parts


def _applies(rule, part):
    if not rule.category:
        return True
    rating = part.get(rule.category, 0)
    if rule.operator == "<":
        return rating < rule.value
    if rule.operator == ">":
        return rating > rule.value
    return False


def _accepted(workflows, part):
    current = "in"
    while current not in ("A", "R"):
        try:
            rules = workflows[current]
        except KeyError:
            raise ValueError(f"unknown workflow {current!r}") from None
        current = next(rule.target for rule in rules if _applies(rule, part))
    return current == "A"


def part1(text):
    """Sum of all ratings of the parts that are accepted."""
    workflows, parts = _parse(text)
    return sum(sum(part.values()) for part in parts if _accepted(workflows, part))


def _combinations(workflows, current, ranges):
    if current == "R":
        return 0
    if current == "A":
        return math.prod(high - low + 1 for low, high in ranges.values())
    ranges = dict(ranges)
    total = 0
    for rule in workflows.get(current, ()):
        branch = dict(ranges)
        if rule.operator in ("<", ">"):
            low, high = ranges.get(rule.category, (0, 0))
            if rule.operator == "<":
                branch[rule.category] = (low, min(high, rule.value - 1))
                ranges[rule.category] = (max(low, rule.value), high)
            else:
                branch[rule.category] = (max(low, rule.value + 1), high)
                ranges[rule.category] = (low, min(high, rule.value))
        total += _combinations(workflows, rule.target, branch)
    return total


def part2(text):
    """Number of rating combinations from 1 to 4000 that are accepted."""
    workflows, _ = _parse(text)
    ranges = {category: _RATING_RANGE for category in "xmas"}
    return _combinations(workflows, "in", ranges)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Sort machine parts.")
    parser.add_argument("input", nargs="?", default="day19/input.txt")
    args = parser.parse_args(argv)
    try:
        text = Path(args.input).read_text()
    except OSError as exc:
        print("Error opening file:", exc)
        return 1
    print("Part 1: ", part1(text))
    print("Part 2: ", part2(text))
    return 0