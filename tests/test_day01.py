from aoc2023.day01 import main, part1, part2

EXAMPLE_1 = ["1abc2", "pqr3stu8vwx", "a1b2c3d4e5f", "treb7uchet"]
EXAMPLE_2 = [
    "two1nine",
    "eightwothree",
    "abcone2threexyz",
    "xtwone3four",
    "4nineeightseven2",
    "zoneight234",
    "7pqrstsixteen",
]


def test_part1_example():
    assert sum(part1(line) for line in EXAMPLE_1) == 142


def test_part2_example():
    assert sum(part2(line) for line in EXAMPLE_2) == 281


def test_part1_single_digit_repeats():
    assert part1("treb7uchet") == 77


def test_part1_no_digits():
    assert part1("abcdef") == 0


def test_part2_overlapping_words():
    assert part2("eightwothree") == 83
    assert part2("zoneight234") == 14


def test_main_prints_sums(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("\n".join(EXAMPLE_1) + "\n")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "Sum of Part_1: 142" in out
    assert "Sum of part_2: 142" in out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert "Error opening file" in capsys.readouterr().out