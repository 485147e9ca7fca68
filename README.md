# aoc2023

Solvers for all twenty-five days of the 2023 Advent of Code puzzles.
Each day is its own module, `aoc2023.day01` to `aoc2023.day25`, and every
module works both as a library and as a command. There are no third-party
dependencies.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Command line

Every day has its own command, from `aoc2023-day01` to `aoc2023-day25`.
Each takes the path of your puzzle input as an optional argument and prints
the answers. Without an argument it reads `dayNN/input.txt` relative to the
current directory (for example `day07/input.txt`).

```
aoc2023-day01 input.txt
aoc2023-day17 input.txt
```

If the file cannot be read, the command prints `Error opening file:` with the
reason and exits with status 1.

A few commands have fixed settings:

- `aoc2023-day11` prints distances for expansion factors 2 and 1,000,000.
- `aoc2023-day21` counts the plots reached in 64 steps, then the
  extrapolated count for 26,501,365 steps.
- `aoc2023-day23` also prints how long each part took.
- `aoc2023-day24` tests crossings in the area from 200,000,000,000,000 to
  400,000,000,000,000.
- `aoc2023-day25` prints a single answer.

## Library use

The solvers take the puzzle text as a string and return integers.

```python
from pathlib import Path

from aoc2023 import day01, day06, day07, day11

# Day 1 (and day 2) work one line at a time.
day01.part1("1abc2")            # 12
day01.part2("two1nine")         # 29

# Most days take the whole input.
races = "Time:      7  15   30\nDistance:  9  40  200"
day06.part1(races)              # 288
day06.part2(races)              # 71503

# Day 7 scores hands with or without jokers.
hands = "32T3K 765\nT55J5 684\nKK677 28\nKTJJT 220\nQQQJA 483"
day07.total_winnings(hands, False)   # 6440
day07.total_winnings(hands, True)    # 5905
day07.hand_type("KTJJT", True)       # HandType.FOUR_OF_A_KIND

# Day 11 takes the expansion factor of empty rows and columns.
galaxy_map = Path("day11/input.txt").read_text()
day11.total_distance(galaxy_map, 2)
day11.total_distance(galaxy_map, 1_000_000)
```

Most days offer `part1(text)` and `part2(text)`. The exceptions:

- Days 9, 10, 13, 17 and 22 return both answers as a pair from `solve(text)`.
- Day 7 has `total_winnings(text, joker)` and `hand_type(cards, joker)`,
  which returns a `HandType`.
- Day 9 also exposes `extrapolate(values)`.
- Day 11 has `total_distance(text, expansion)`.
- Day 12 also exposes `count_arrangements(springs, groups)`.
- Day 15 also exposes `hash_step(step)`.
- Day 16 also exposes `energize(grid, position, direction)`, where `grid`
  maps `(x, y)` points to tile characters.
- Day 17 also exposes `shortest_path(heat_map, goal, min_steps, max_steps)`,
  which returns -1 when the goal cannot be reached.
- Day 19 defines the `Rule` dataclass used for workflow steps.
- Day 21 has `solution(text, total_steps)`, returning the plots reached after
  `total_steps` and the extrapolated count for 26,501,365 steps.
- Day 24 takes the bounds of the test area: `part1(text, low, high)`.
- Day 25 has only `part1(text)`.

Malformed input raises `ValueError` where a solver can detect it, for
example an odd number of seed values on day 5 or a missing blank line
between sections on days 8 and 19.

## Limitations

- The package does not fetch puzzle inputs; you supply the text yourself.
- Some second parts rely on the shape of real puzzle inputs rather than
  solving the general case: day 20 part 2 reads the flip-flop chains behind
  the broadcaster as binary counters, day 21 extrapolates from three samples
  on a repeating map, and day 24 part 2 solves linear systems built from the
  first five hailstones in floating point.