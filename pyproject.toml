[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aoc2023"
version = "1.0.0"
description = "Solutions to the 2023 Advent of Code puzzles, usable as a library or from the command line"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "aoc", "2023", "algorithms"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aoc2023-day01 = "aoc2023.day01:main"
aoc2023-day02 = "aoc2023.day02:main"
aoc2023-day03 = "aoc2023.day03:main"
aoc2023-day04 = "aoc2023.day04:main"
aoc2023-day05 = "aoc2023.day05:main"
aoc2023-day06 = "aoc2023.day06:main"
aoc2023-day07 = "aoc2023.day07:main"
aoc2023-day08 = "aoc2023.day08:main"
aoc2023-day09 = "aoc2023.day09:main"
aoc2023-day10 = "aoc2023.day10:main"
aoc2023-day11 = "aoc2023.day11:main"
aoc2023-day12 = "aoc2023.day12:main"
aoc2023-day13 = "aoc2023.day13:main"
aoc2023-day14 = "aoc2023.day14:main"
aoc2023-day15 = "aoc2023.day15:main"
aoc2023-day16 = "aoc2023.day16:main"
aoc2023-day17 = "aoc2023.day17:main"
aoc2023-day18 = "aoc2023.day18:main"
aoc2023-day19 = "aoc2023.day19:main"
aoc2023-day20 = "aoc2023.day20:main"
aoc2023-day21 = "aoc2023.day21:main"
aoc2023-day22 = "aoc2023.day22:main"
aoc2023-day23 = "aoc2023.day23:main"
aoc2023-day24 = "aoc2023.day24:main"
aoc2023-day25 = "aoc2023.day25:main"

[tool.hatch.build.targets.wheel]
packages = ["aoc2023"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
