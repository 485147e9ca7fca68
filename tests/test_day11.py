import pytest

from aoc2023 import day11

EXAMPLE = """...#......
\t\t.......#..
\t\t#.........
\t\t..........
\t\t......#...
\t\t.#........
\t\t.........#
\t\t..........
\t\t.......#..
\t\t#...#....."""


@pytest.mark.parametrize(
    "expansion, expected",
    [(2, 374), (10, 1030), (100, 8410)],
)
def test_example(expansion, expected):
    assert day11.total_distance(EXAMPLE, expansion) == expected


def test_single_galaxy_has_no_distance():
    assert day11.total_distance("..#..", 5) == 0


@pytest.mark.parametrize("expansion, expected", [(1, 2), (2, 3), (10, 11)])
def test_empty_column_between_two_galaxies(expansion, expected):
    assert day11.total_distance("#.#", expansion) == expected


def test_empty_input():
    assert day11.total_distance("", 2) == 0