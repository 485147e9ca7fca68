from aoc2023.day21 import solution

EXAMPLE = """\
...........
.....###.#.
.###.##..#.
..#.#...#..
....#.#....
.##..S####.
.##..#...#.
.......##..
.##.#.####.
.##..##.##.
...........
"""


def test_example_six_steps():
    assert solution(EXAMPLE, 6)[0] == 16


def test_indented_lines_are_trimmed():
    indented = "\n".join("\t\t" + line for line in EXAMPLE.splitlines())
    assert solution(indented, 6)[0] == 16


def test_single_plot_map_one_step():
    assert solution("S", 1)[0] == 4


def test_single_plot_map_two_steps():
    assert solution("S", 2)[0] == 9


def test_sampling_stops_before_late_step_count():
    assert solution("S", 3)[0] == 0