import pytest

from aoc2023.day24 import part1, part2

EXAMPLE = """\
19, 13, 30 @ -2,  1, -2
18, 19, 22 @ -1, -1, -2
20, 25, 34 @ -2, -2, -4
12, 31, 28 @ -1, -2, -1
20, 19, 15 @  1, -5, -3
"""

ROCK_POSITION = (100, 200, 300)
ROCK_VELOCITY = (1, 2, 3)
HITS = [
    ((5, -3, 7), 2),
    ((-2, 4, 1), 3),
    ((3, 7, -4), 5),
    ((-6, -1, 5), 7),
    ((4, 9, -2), 11),
]


def _constructed_input():
    lines = []
    for velocity, moment in HITS:
        position = [
            start + (rock - own) * moment
            for start, rock, own in zip(ROCK_POSITION, ROCK_VELOCITY, velocity)
        ]
        lines.append(
            ", ".join(map(str, position)) + " @ " + ", ".join(map(str, velocity))
        )
    return "\n".join(lines) + "\n"


def test_example_crossings_in_test_area():
    assert part1(EXAMPLE, 7, 27) == 2


def test_wider_area_counts_at_least_as_many():
    narrow = part1(EXAMPLE, 7, 27)
    wide = part1(EXAMPLE, -1e6, 1e6)
    assert narrow <= wide <= 10


def test_blank_lines_are_skipped():
    spaced = EXAMPLE.replace("\n", "\n\n")
    assert part1(spaced, 7, 27) == part1(EXAMPLE, 7, 27)


def test_rock_position_recovered():
    assert part2(_constructed_input()) == sum(ROCK_POSITION)


def test_too_few_hailstones_raise():
    few = "\n".join(EXAMPLE.strip().splitlines()[:4])
    with pytest.raises(ValueError):
        part2(few)


def test_malformed_number_raises():
    with pytest.raises(ValueError):
        part1("1, 2, x @ 1, 1, 1\n", 0, 10)