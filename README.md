# puzzlebox

Small, exact solvers for a set of short programming puzzles. Each puzzle
is a plain Python function that takes ordinary values and returns the
answer. Each module can also read the puzzle's text input and produce
the matching text output, and a `puzzlebox` command does the same from
the shell.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Using the functions

The puzzles are grouped into three modules:

- `puzzlebox.arrays`: puzzles over lists of integers:
  `array_operations`, `balanced_lighting`, `tallest_brick`,
  `fence_colouring`, `outside_pair`, `larger_smaller_count`,
  `minimize_sum`.
- `puzzlebox.arithmetic`: puzzles over a few numbers:
  `cake_pieces`, `codemat`, `min_hunt_time`, `max_sixes`,
  `max_triangle`, `pizzas_needed`, `game_count`, `reachable_count`,
  `episodes_duration`, `third_angle`.
- `puzzlebox.strings`: puzzles that build or transform strings and
  grids: `huh_easy`, `maximum_ones`, `s_to_t`, `drawing_chances`,
  `grid_mex`.

```python
from puzzlebox.arithmetic import episodes_duration, pizzas_needed, third_angle
from puzzlebox.arrays import tallest_brick
from puzzlebox.strings import huh_easy

third_angle(60, 60)          # 60
pizzas_needed(3)             # 2
episodes_duration(5, 25)     # (2, 5), hours and minutes
tallest_brick([3, 7, 7])     # 2, the 1-based position of the first tallest
huh_easy(4, 2)               # ("ABCA", "ABAB")
```

Where a puzzle has no answer, the function returns `None`: for example
`max_triangle(3)`, `outside_pair([0, 0])`, `huh_easy(2, 5)` and
`s_to_t("0", "1")`. Input that a puzzle cannot take (an empty list, a
non-positive modulus, strings of different lengths, `game_count`
outside 1 to 1000) raises `ValueError`.

## Working with puzzle input text

Every module has `run(name, text)`: give it the name of one of that
module's puzzles and the whole input text, and it returns the whole
output text, one answer per case. Most puzzles expect a case count
first; `cake_pieces`, `codemat`, `max_sixes`, `pizzas_needed` and
`third_angle` read a single case with no count. A "no answer" result is
written as `-1`, and yes/no answers as `Yes` or `No`.

```python
from puzzlebox import arithmetic

arithmetic.run("episodes_duration", "2\n5 25\n3 20\n")   # "2 5\n1 0\n"
```

An unknown name or input that ends too soon raises `ValueError`.

## Command line

```
puzzlebox PUZZLE [INPUT]
```

`PUZZLE` is any of the puzzle names above. The input is read from the
file `INPUT`, or from standard input when it is left out, and the
answers are written to standard output. On bad input the command prints
the error to standard error and exits with status 1.

```
echo "1 5 25" | puzzlebox episodes_duration
puzzlebox --help
```