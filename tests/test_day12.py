import pytest

from aoc2023 import day12

EXAMPLE = """???.### 1,1,3
\t\t.??..??...?##. 1,1,3
\t\t?#?#?#?#?#?#?#? 1,3,1,6
\t\t????.#...#... 4,1,1
\t\t????.######..#####. 1,6,5
\t\t?###???????? 3,2,1"""


def test_part1_example():
    assert day12.part1(EXAMPLE) == 21


def test_part2_example():
    assert day12.part2(EXAMPLE) == 525152


@pytest.mark.parametrize(
    "springs, groups, expected",
    [
        ("???.###", [1, 1, 3], 1),
        (".??..??...?##.", [1, 1, 3], 4),
        ("?#?#?#?#?#?#?#?", [1, 3, 1, 6], 1),
        ("????.#...#...", [4, 1, 1], 1),
        ("????.######..#####.", [1, 6, 5], 4),
        ("?###????????", [3, 2, 1], 10),
    ],
)
def test_count_arrangements(springs, groups, expected):
    assert day12.count_arrangements(springs, groups) == expected


def test_impossible_record():
    assert day12.count_arrangements("#.#", [3]) == 0


def test_empty_record_without_groups():
    assert day12.count_arrangements("", []) == 1


def test_part2_single_line():
    assert day12.part2(".??..??...?##. 1,1,3") == 16384


def test_main_output(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("???.### 1,1,3\n")
    assert day12.main([str(path)]) == 0
    assert capsys.readouterr().out == "1\n1\n"