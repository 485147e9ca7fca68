import pytest

from aoc2023.day20 import main, part1, part2

EXAMPLE = """broadcaster -> a, b, c
\t%a -> b
\t%b -> c
\t%c -> inv
\t&inv -> a"""

INTERESTING = """broadcaster -> a
%a -> inv, con
&inv -> b
%b -> con
&con -> output"""

COUNTERS = """broadcaster -> a, c
%a -> b, con
%b -> con
%c -> d
%d -> con2
&con -> rx
&con2 -> rx"""


def test_part1_example():
    assert part1(EXAMPLE) == 32000000


def test_part1_second_example():
    assert part1(INTERESTING) == 11687500


def test_part2_counter_periods():
    assert part2(COUNTERS) == 6


def test_part2_single_chain():
    assert part2("broadcaster -> a\n%a -> b, con\n%b -> con\n&con -> rx") == 3


def test_part2_without_broadcaster():
    with pytest.raises(ValueError):
        part2("%a -> b\n%b -> con")


def test_main_prints_answers(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(COUNTERS)
    assert main([str(path)]) == 0
    assert capsys.readouterr().out.splitlines()[1] == "Part 2: 6"