import pytest

from aoc2023.day22 import solve

EXAMPLE = """\
1,0,1~1,2,1
0,0,2~2,0,2
0,2,3~2,2,3
0,0,4~0,2,4
2,0,5~2,2,5
0,1,6~2,1,6
1,1,8~1,1,9
"""


def test_example_safe_bricks():
    assert solve(EXAMPLE)[0] == 5


def test_example_falling_bricks():
    assert solve(EXAMPLE)[1] == 7


def test_tabs_are_ignored():
    tabbed = "\n".join("\t" + line for line in EXAMPLE.splitlines())
    assert solve(tabbed) == solve(EXAMPLE)


def test_single_brick():
    assert solve("0,0,1~0,0,1") == (1, 0)


def test_order_of_lines_does_not_matter():
    reordered = "\n".join(reversed(EXAMPLE.strip().splitlines()))
    assert solve(reordered) == solve(EXAMPLE)


def test_malformed_brick_raises():
    with pytest.raises(ValueError):
        solve("1,2,3~4,5")