import pytest

from aoc2023.day04 import main, part1, part2

CARDS = """Card 1: 41 48 83 86 17 | 83 86  6 31 17  9 48 53
Card 2: 13 32 20 16 61 | 61 30 68 82 17 32 24 19
Card 3:  1 21 53 59 44 | 69 82 63 72 16 21 14  1
Card 4: 41 92 73 84 69 | 59 84 76 51 58  5 54 83
Card 5: 87 83 26 28 32 | 88 30 70 12 93 22 82 36
Card 6: 31 18 13 56 72 | 74 77 10 23 35 67 36 11"""


def test_part1_example():
    assert part1(CARDS) == 13


def test_part2_example():
    assert part2(CARDS) == 30


def test_card_without_matches():
    assert part1("Card 1: 1 2 | 3 4") == 0
    assert part2("Card 1: 1 2 | 3 4") == 1


def test_missing_separator_raises():
    with pytest.raises(IndexError):
        part1("Card 1: 1 2 3")


def test_main(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(CARDS + "\n")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out.split() == ["13", "30"]