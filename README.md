# puzzlebox

Solvers for a season of daily programming puzzles. Each puzzle has its own
module with a `part1` function and, where there is one, a `part2` function.
Both take the puzzle input as a list of lines and return the answer.

| Module        | Puzzle                                                      |
|---------------|-------------------------------------------------------------|
| `lanternfish` | lanternfish population after 80 and 256 days                |
| `day01`       | distance and similarity of two location lists               |
| `day02`       | safe reactor reports, with and without the dampener         |
| `day03`       | `mul(a,b)` instructions, with `do()`/`don't()` switching    |
| `day04`       | word search for `XMAS` and for crossed `MAS`                |
| `day05`       | page ordering rules, checking and fixing updates            |
| `day06`       | guard patrol and obstacles that trap the guard in a loop    |
| `day07`       | calibration equations with `+`, `*` and concatenation       |
| `day08`       | antenna antinodes                                           |
| `day09`       | disk compaction by block and by whole file                  |
| `day10`       | hiking trail scores and ratings                             |
| `day11`       | splitting stones after 25 and 75 blinks                     |
| `day12`       | garden region fencing by perimeter and by sides             |
| `day13`       | claw machine token counts                                   |
| `day14`       | robot quadrants, and frame rendering to PNG images          |
| `day15`       | warehouse box pushing, narrow and widened                   |
| `day16`       | cheapest route through the reindeer maze (part 1 only)      |
| `day17`       | three-bit computer and the self-printing register value     |
| `day18`       | falling bytes: the memory grid with dead ends filled in     |
| `day19`       | towel pattern arrangements                                  |
| `day20`       | race track walls worth cheating through (part 1 only)       |
| `day21`       | keypad robot chains, with 2 and with 20 directional pads    |

## Installation

```
pip install .
```

Pillow is installed with the package; day 14 uses it to write its frames.

## Command line

The `puzzlebox` command reads an input file and prints the answer:

```
puzzlebox 5 2 --input data.txt
```

- `puzzle` is a module name such as `day05` or `lanternfish`, or a plain
  day number (`5` means `day05`). The name `template` prints the number of
  input lines.
- `part` is `1` or `2` and defaults to `1`.
- `--input` names the input file and defaults to `data.txt`.

An unknown puzzle or part, an unreadable file or bad input prints an
`error:` message to standard error and exits with status 1.

For day 14 part 2 the command writes 10000 images `cycle<n>.png` into a
`pics` directory and prints `0`.

## Library use

```python
from puzzlebox import day01, day11
from puzzlebox.utility import load

lines = load("data.txt")
print(day01.part1(lines))
print(day01.part2(lines))

print(day11.count_stones([125, 17], 25))
```

`puzzlebox.utility.load(path)` reads a file into a list of lines without
their line endings, and `puzzlebox.utility.split(line, separator)` splits a
line on a separator, dropping empty pieces. `puzzlebox.cli.solve(puzzle,
part, lines)` runs a named puzzle part on already loaded lines and raises
`ValueError` for an unknown puzzle or part.

Many modules also expose their building blocks, for example
`day07.parse_equation`, `day09.compact_files`, `day12.find_regions`,
`day17.CPU` with `step()` and `run()`, and `day21.keypad_sequence`.

## What it does not do

- Day 14's second part is not solved: `day14.render_frames(lines,
  directory="pics", frames=10000)` saves one PNG per second and returns the
  paths, and the picture has to be found by looking at them.
- Day 18 does not compute an answer: `part1` and `part2` return the memory
  grid (after 1024 and 2915 bytes) with dead ends walled up, as text to be
  read by eye.
- Days 16 and 20 have a first part only. Day 16 returns `day16.NO_PATH`
  when the end cannot be reached.

## Tests

```
pip install .[test]
pytest
```