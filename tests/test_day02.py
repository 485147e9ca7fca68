import pytest

from aoc2023.day02 import main, part1, part2

GAMES = [
    "Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green",
    "Game 2: 1 blue, 2 green; 3 green, 4 blue, 1 red; 1 green, 1 blue",
    "Game 3: 8 green, 6 blue, 20 red; 5 blue, 4 red, 13 green; 5 green, 1 red",
    "Game 4: 1 green, 3 red, 6 blue; 3 green, 6 red; 3 green, 15 blue, 14 red",
    "Game 5: 6 red, 1 blue, 3 green; 2 blue, 1 red, 2 green",
]


def test_part1_example():
    assert sum(i for i, game in enumerate(GAMES, 1) if part1(game)) == 8


def test_part2_example():
    assert sum(part2(game) for game in GAMES) == 2286


@pytest.mark.parametrize(
    "game, power", list(zip(GAMES, [48, 12, 1560, 630, 36]))
)
def test_part2_each_game(game, power):
    assert part2(game) == power


def test_part1_rejects_over_limit():
    assert part1("Game 9: 13 red") is False
    assert part1("Game 9: 12 red, 13 green, 14 blue") is True


def test_missing_colon_raises():
    with pytest.raises(IndexError):
        part1("no game here")


def test_main(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("\n".join(GAMES) + "\n")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "Part_1: 8" in out
    assert "Part_2: 2286" in out