# aocsolutions

Solutions to a selection of Advent of Code puzzles from 2020 to 2024, together
with a few small helpers (grid points and directions, least common multiple).
The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

Each puzzle lives in its own module named `y<year>_day<NN>`. Every module has
`part_one(text)`, and all but `y2020_day25` also have `part_two(text)`. Both
take the whole puzzle input as a string and return the answer as an integer.
Malformed input raises `ValueError`.

```python
from pathlib import Path

from aocsolutions import y2020_day05, y2023_day04

text = Path("input.txt").read_text()
print(y2023_day04.part_one(text))
print(y2023_day04.part_two(text))

print(y2020_day05.seat_id("FBFBBFFRLR"))  # 357
```

The helpers underneath each answer are public as well, for example:

- `y2020_day13.earliest_timestamp(buses)`
- `y2020_day17.simulate(active, dimensions, cycles)`
- `y2020_day22.play(deck_one, deck_two, recursive)` and `score(deck)`
- `y2021_day12.count_paths(caves, allow_twice)`
- `y2021_day22.Range`, `Cuboid` and `CuboidSet`
- `y2022_day13.parse_packet(text)` and `compare_packets(left, right)`
- `y2023_day12.count_arrangements(pattern, groups)` and `unfold(pattern, groups)`
- `y2023_day22.settle(bricks)`, `count_removable(bricks)` and `count_chain_falls(bricks)`
- `y2024_day08.find_antinodes(antennas, rows, columns, resonant)`
- `y2024_day11.count_stones(numbers, blinks)`

### Available puzzles

- 2020: days 3, 5, 7, 10, 13, 17, 22, 25 (day 25 has one part)
- 2021: days 12, 22
- 2022: day 13
- 2023: days 2, 3, 4, 8, 12, 18, 22
- 2024: days 8, 11

### Helpers

- `aocsolutions.points`: `Point` (an immutable integer tuple with `+`, `-`,
  `*` by an integer and `simple_distance`), `Direction` (the eight grid
  directions, clockwise from up), `Directions` (their unit step vectors) and
  `iter_directions(start, basic_only, circular)`.
- `aocsolutions.arith`: `lcm(numbers)` over an iterable of integers.

## What this package does not do

There is no command-line program: the package does not read input files,
pick a puzzle by date or print answers. Load the input yourself and call the
module's functions as shown above.