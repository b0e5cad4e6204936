# cfsolve

Short competitive-programming problems solved as ordinary Python functions.
Each function takes the data of one test case and returns the answer, so the
solutions can be called from code, combined, or checked in tests. A `cfsolve`
command reads a problem's input from standard input and prints the answers.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `cfsolve.games`: `alice_wins(s)` (01 deletion game), `buttons_winner(a, b, c)`
  (returns `"First"` or `"Second"`), `can_split_watermelon(weight)`.
- `cfsolve.arithmetic`: `min_operations(a, b)` (divide or increment the divisor
  until `a` is zero), `can_make_ap(a, b, c)`, `count_extremely_round(n)`
  (raises `ValueError` for `n < 1`).
- `cfsolve.strings`: `fix_expression(s)` (makes a `<`, `>` or `=` sign true),
  `count_ones_in_grid(s)`.
- `cfsolve.geometry`: `max_doubled_area(w, h, bottom, top, left, right)` (twice
  the largest triangle area; each side's points in ascending order),
  `target_score(grid)` (ten strings of ten cells, `X` for a hit).
- `cfsolve.arrays`: `make_beautiful(a)` (reordered list, or `None`),
  `smallest_balanced_split(a)` (smallest `k`, or `None`), `longest_zero_run(a)`,
  `unit_array_operations(a)`, `raspberries_operations(a, k)` (`k` from 2 to 5),
  `twice_score(a)`, `move_to_end_sums(a)`.

Functions raise `ValueError` on input outside what the problem allows.

## Example

```python
from cfsolve.games import alice_wins, can_split_watermelon
from cfsolve.strings import fix_expression

alice_wins("01")            # True: one 0/1 pair can be removed
can_split_watermelon(8)     # True
fix_expression("3>7")       # "3<7"
```

## Command line

```
cfsolve PROBLEM < input.txt
```

`PROBLEM` is one of the codes `1373B`, `1485A`, `1620B`, `1624B`, `1766A`,
`1783A`, `1788A`, `1829B`, `1834A`, `1858A`, `1873C`, `1883C`, `2037A`,
`2038N`, `2104B`, `2106A`, `4A`. The input is a count of test cases followed by
the cases in the problem's own format; `4A` takes a single number with no
count. One answer is printed per case (`YES`/`NO`, `DA`/`NET`, numbers, or the
fixed expression).

```
printf '3\n01\n1111\n0011\n' | cfsolve 1373B
```

prints `DA`, `NET`, `NET`. If the input ends early or holds a value the problem
does not allow, the command prints `cfsolve: error: ...` to standard error and
exits with status 1.