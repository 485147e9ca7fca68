import pytest

from aoc2023 import day10

COMPLEX_LOOP = """..F7.
\t\t.FJ|.
\t\tSJ.L7
\t\t|F--J
\t\tLJ..."""

ENCLOSING_LOOP = """...........
\t\t.S-------7.
\t\t.|F-----7|.
\t\t.||.....||.
\t\t.||.....||.
\t\t.|L-7.F-J|.
\t\t.|..|.|..|.
\t\t.L--J.L--J.
\t\t..........."""

SQUARE = """.....
.S-7.
.|.|.
.L-J.
....."""


def test_farthest_point():
    assert day10.solve(COMPLEX_LOOP)[0] == 8


def test_enclosed_tiles():
    assert day10.solve(ENCLOSING_LOOP)[1] == 4


def test_square_loop():
    assert day10.solve(SQUARE) == (4, 1)


def test_unresolvable_start_raises():
    with pytest.raises(ValueError):
        day10.solve("S")


def test_main_output(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(SQUARE)
    assert day10.main([str(path)]) == 0
    assert capsys.readouterr().out == "Part 1:  4\nPart 2:  1\n"