# adventkit

A small toolkit for solving daily programming puzzles, plus a runner that
runs each day's self-tests, times its two parts and prints a summary table.

## What is inside

- `adventkit.textutil`
  - `read_lines(path)`: the lines of a file without their newlines. A
    missing file gives an empty list.
  - `split(line, delimiter)`: splits on a single character and drops a
    trailing empty field.
  - `Replacement`, `replace_all(line, replacements)` and
    `replace_all_lines(lines, replacements)`: each replacement is applied
    again and again until its search text no longer occurs. An empty search
    text raises `ValueError`, and so does a replacement that would never
    stop.
  - `all_integers(line)`: every run of digits, as integers. Signs are
    ignored.
  - `extract_matches(pattern, line)`: the captured groups of every match.
  - `ends_with(value, ending)` and `abs_diff(a, b)`.
- `adventkit.vector2d`: `Vector2D`, a mutable `x`/`y` point with a
  `Facing` (`NORTH`, `EAST`, `SOUTH`, `WEST`).
  - It turns with `turn_left` and `turn_right`.
  - It steps with `go_forward` and `go_north`/`go_east`/`go_south`/`go_west`.
    North decreases `x`, east increases `y`.
  - `look_ahead()` gives the point one step ahead.
  - `facing_symbol()` gives the arrow for the heading.
  - `cord()` and `cord_rev()` format it as text.
- `adventkit.position`
  - `Position`, an immutable, ordered `(row, col)` point. It supports `+`,
    `-` and scalar `*`, and has `manhattan_to` and `all_dirs()`.
  - `DIRECTIONS`, the four unit steps in the order north, east, south, west.
  - `hash_combine(seed, value)`, for building 64-bit hash values.
- `adventkit.grid`: `Grid`, a fixed-size 2D grid stored row by row.
  - Reads outside the grid return its default value. Writes outside it are
    ignored.
  - Rows and columns come out as strings with `row_as_string` and
    `column_as_string`, rectangles with `sector_as_string`.
  - `find` returns a `Position` and raises `GridLookupError` when the value
    is absent. `find_all` and `count` also search the cells.
  - `reset`, `set_all`, `set_row` and `set_column` fill cells.
  - `render()` gives the grid as text. `render_with_overlays` draws
    temporary `Overlay`s on top and leaves the grid unchanged.
- `adventkit.puzzles`: pieces shared by several puzzle solutions.
  - `is_safe` and `calculate_difference`.
  - `concatenate`, which joins the decimal digits of two non-negative
    numbers.
  - `PrintOrder` with `get_prints`.
  - `MazeState` with `Heading`. `MazeState.next()` yields the forward move
    (cost 1) and the left and right turns (cost 1000 each).
- `adventkit.executor`
  - `Day`: the abstract base class with `part1`, `part2`, `test_part1` and
    `test_part2`.
  - `DayExecutor`: runs those methods and times the two parts.
  - `PartResult`: the answer plus the elapsed time in microseconds.
- `adventkit.runner`
  - `DAY_FACTORIES`: a dictionary from two-digit day names to day
    constructors.
  - `create_days()`, `find_day_by_name` (raises `DayNotFoundError`),
    `run_day`, `DayInfo`, `render_table` and `main`.

## Installing

```
pip install .
```

## Example

```python
from adventkit.textutil import all_integers
from adventkit.puzzles import calculate_difference, is_safe

report = all_integers("7 6 4 2 1")
print(is_safe(calculate_difference(report)))  # True
```

## Running days

```
adventkit
```

Without arguments, this runs every day registered in
`adventkit.runner.DAY_FACTORIES`. For each day it runs the two self-tests,
then both parts, and prints a table with Pass/Fail for the tests, the times
in microseconds and the answers.

```
adventkit 5
```

With arguments, it runs only the day named by the last argument. A
single-digit name gets a leading zero, so this runs day `05`. If no day has
that name, the command prints the error and exits with status 1.

To register your own days, add constructors to `DAY_FACTORIES` and call
`main()` from your own script:

```python
from adventkit.executor import Day
from adventkit.runner import DAY_FACTORIES, main

class Day01(Day):
    def part1(self): return "42"
    def part2(self): return "7"
    def test_part1(self): return True
    def test_part2(self): return True

DAY_FACTORIES["01"] = Day01
main()
```

## What it does not do

The package ships no puzzle solutions and no puzzle inputs. `DAY_FACTORIES`
starts empty, so the bare `adventkit` command prints an empty table until
you register days in your own script as shown above.

## Tests

```
pip install .[test]
pytest
```