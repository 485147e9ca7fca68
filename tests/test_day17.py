import pytest

from aoc2023.day17 import shortest_path, solve

EXAMPLE = """2413432311323
3215453535623
3255245654254
3446585845452
4546657867536
1438598798454
4457876987766
3637877979653
4654967986887
4564679986453
1224686865563
2546548887735
4322674655533"""

UNFAIR = """111111111111
999999999991
999999999991
999999999991
999999999991"""


def _heat_map(text):
    return {
        (x, y): int(ch)
        for y, row in enumerate(text.split())
        for x, ch in enumerate(row)
    }


def test_solve_example():
    assert solve(EXAMPLE) == (102, 94)


def test_ultra_crucible_must_move_four():
    assert shortest_path(_heat_map(UNFAIR), (11, 4), 4, 10) == 71


def test_goal_at_start_costs_nothing():
    assert shortest_path({(0, 0): 5}, (0, 0), 1, 3) == 0


def test_unreachable_goal():
    assert shortest_path({(0, 0): 1}, (5, 5), 1, 3) == -1


def test_solve_empty_input():
    with pytest.raises(ValueError):
        solve("")