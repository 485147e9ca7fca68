import pytest

from aoc2023.day23 import part1, part2

EXAMPLE = """\
#.#####################
#.......#########...###
#######.#########.#.###
###.....#.>.>.###.#.###
###v#####.#v#.###.#.###
###.>...#.#.#.....#...#
###v###.#.#.#########.#
###...#.#.#.......#...#
#####.#.#.#######.#.###
#.....#.#.#.......#...#
#.#####.#.#.#########v#
#.#...#...#...###...>.#
#.#.#v#######v###.###v#
#...#.>.#...>.>.#.###.#
#####v#.#.###v#.#.###.#
#.....#...#...#.#.#...#
#.#########.###.#.#.###
#...###...#...#...#.###
###.###.#.###v#####v###
#...#...#.#.>.>.#.>.###
#.###.###.#.###.#.#v###
#.....###...###...#...#
#####################.#
"""


def test_example_with_slopes():
    assert part1(EXAMPLE) == 94


def test_example_without_slopes():
    assert part2(EXAMPLE) == 154


def test_tab_indented_input():
    tabbed = "\n".join("\t\t" + line for line in EXAMPLE.splitlines())
    assert part1(tabbed) == 94


def test_straight_corridor():
    grid = "#.#\n#.#\n#.#"
    assert part1(grid) == 2
    assert part2(grid) == 2


def test_no_path_raises():
    with pytest.raises(ValueError):
        part1("#.#\n#.#\n###")


def test_ignoring_slopes_never_shortens_the_hike():
    assert part2(EXAMPLE) >= part1(EXAMPLE)