# aoc2022

Solvers for days 1 to 14 of the 2022 advent puzzle calendar. It needs only the
Python standard library. Each day has its own module, from `aoc2022.day01` to
`aoc2022.day14`, and every module has the same entry points:

- `parse(text)` takes the puzzle input as a string and returns a `Day`. It
  raises `ValueError` when it finds the input malformed.
- `Day.solve_part_one()` and `Day.solve_part_two()` return the answers as
  strings. Some days raise `ValueError` when the puzzle has no answer. For
  example, day 6 raises it when no marker is found, and day 12 raises it when
  the end cannot be reached.

`Day` is a dataclass. You can also build one from data you already hold, for
example `day01.Day(elves=[[1000, 2000], [4000]])`.

## Installation

```
pip install .
```

## Usage

```python
from pathlib import Path

from aoc2022 import day01

day = day01.parse(Path("input.txt").read_text().rstrip("\n"))
print(day.solve_part_one())
print(day.solve_part_two())
```

Strip the trailing newline before you pass the input in. Most days read every
line as a record, so a final empty line counts as a record too and is
rejected as malformed.

Day 10, part two, returns the CRT image as a string. The string starts with a
newline and each of the six rows ends with one, so it can be printed as it is.

## Helpers

Some modules also expose the pieces the solvers are built from:

| Module  | Helpers |
|---------|---------|
| `day02` | `Shape`, `Round`, `decrypt_part_one`, `decrypt_part_two` |
| `day03` | `priority`, `Rucksack.common_item`, `find_badge` |
| `day04` | `SectionRange.fully_contains`, `SectionRange.overlaps`, `Assignment` |
| `day05` | `Step`, `move_crates`, `top_crates` |
| `day06` | `first_marker_end`, `start_of_packet_marker`, `start_of_message_marker` (each returns `None` when there is no marker) |
| `day07` | `Node`, `directory_sizes` |
| `day08` | `is_visible`, `scenic_score` |
| `day09` | `Direction`, `Motion`, `follow`, `RopeBridge` |
| `day10` | `Noop`, `AddX`, `parse_instruction`, `execute`, `render` |
| `day11` | `Operation`, `Test`, `Monkey`, `Day.monkey_business(rounds, relief)` |
| `day12` | `Day.starting_position`, `Day.starting_positions`, `Day.steps_to_end` |
| `day13` | `parse_packet`, `compare`, `Outcome`, `is_in_right_order`, `Day.decoder_key` |
| `day14` | `Material`, `fall` |

```python
from aoc2022 import day06, day13

day06.start_of_packet_marker("mjqjpqmgbljsphdztnvjfqwrcgsmlb")   # 7
day13.is_in_right_order(day13.parse_packet("[1,2]"), day13.parse_packet("[1,3]"))  # True
```

## What it does not do

The package has no command-line program. It does not fetch puzzle inputs or
read files itself. You read the input, pass the text to `parse`, and print
the answers yourself.

## Running the tests

```
pip install .[test]
pytest
```