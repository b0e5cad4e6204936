"""Command line: solve one contest problem from standard input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator

from cfsolve.arithmetic import can_make_ap, count_extremely_round, min_operations
from cfsolve.arrays import (
    longest_zero_run,
    make_beautiful,
    move_to_end_sums,
    raspberries_operations,
    smallest_balanced_split,
    twice_score,
    unit_array_operations,
)
from cfsolve.games import alice_wins, buttons_winner, can_split_watermelon
from cfsolve.geometry import max_doubled_area, target_score
from cfsolve.strings import count_ones_in_grid, fix_expression

__all__ = ["main"]

_TARGET_ROWS = 10


class _InputError(Exception):
    """Raised when standard input does not match the problem's format."""


class _Tokens:
    """Whitespace-separated words of the input, read in order."""

    def __init__(self, text: str) -> None:
        self._words: Iterator[str] = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._words)
        except StopIteration:
            raise _InputError("unexpected end of input") from None

    def number(self) -> int:
        word = self.word()
        try:
            return int(word)
        except ValueError:
            raise _InputError(f"expected an integer, got {word!r}") from None

    def numbers(self, count: int) -> list[int]:
        return [self.number() for _ in range(count)]


def _yes_no(flag: bool) -> str:
    return "YES" if flag else "NO"


def _join(values: list[int]) -> str:
    return " ".join(map(str, values))


def _game(tokens: _Tokens) -> str:
    return "DA" if alice_wins(tokens.word()) else "NET"


def _add_and_divide(tokens: _Tokens) -> str:
    a, b = tokens.numbers(2)
    return str(min_operations(a, b))


def _triangles(tokens: _Tokens) -> str:
    w, h = tokens.numbers(2)
    sides = [tokens.numbers(tokens.number()) for _ in range(4)]
    return str(max_doubled_area(w, h, *sides))


def _make_ap(tokens: _Tokens) -> str:
    return _yes_no(can_make_ap(*tokens.numbers(3)))


def _extremely_round(tokens: _Tokens) -> str:
    return str(count_extremely_round(tokens.number()))


def _make_beautiful(tokens: _Tokens) -> str:
    result = make_beautiful(tokens.numbers(tokens.number()))
    if result is None:
        return "NO"
    return "YES\n" + _join(result)


def _one_and_two(tokens: _Tokens) -> str:
    k = smallest_balanced_split(tokens.numbers(tokens.number()))
    return "-1" if k is None else str(k)


def _blank_space(tokens: _Tokens) -> str:
    return str(longest_zero_run(tokens.numbers(tokens.number())))


def _unit_array(tokens: _Tokens) -> str:
    return str(unit_array_operations(tokens.numbers(tokens.number())))


def _buttons(tokens: _Tokens) -> str:
    return buttons_winner(*tokens.numbers(3))


def _target_practice(tokens: _Tokens) -> str:
    return str(target_score([tokens.word() for _ in range(_TARGET_ROWS)]))


def _raspberries(tokens: _Tokens) -> str:
    n, k = tokens.numbers(2)
    return str(raspberries_operations(tokens.numbers(n), k))


def _twice(tokens: _Tokens) -> str:
    return str(twice_score(tokens.numbers(tokens.number())))


def _fix_expression(tokens: _Tokens) -> str:
    return fix_expression(tokens.word())


def _move_to_end(tokens: _Tokens) -> str:
    return _join(move_to_end_sums(tokens.numbers(tokens.number())))


def _dr_tc(tokens: _Tokens) -> str:
    tokens.number()
    return str(count_ones_in_grid(tokens.word()))


def _watermelon(tokens: _Tokens) -> str:
    return _yes_no(can_split_watermelon(tokens.number()))


_SOLVERS: dict[str, Callable[[_Tokens], str]] = {
    "1373B": _game,
    "1485A": _add_and_divide,
    "1620B": _triangles,
    "1624B": _make_ap,
    "1766A": _extremely_round,
    "1783A": _make_beautiful,
    "1788A": _one_and_two,
    "1829B": _blank_space,
    "1834A": _unit_array,
    "1858A": _buttons,
    "1873C": _target_practice,
    "1883C": _raspberries,
    "2037A": _twice,
    "2038N": _fix_expression,
    "2104B": _move_to_end,
    "2106A": _dr_tc,
    "4A": _watermelon,
}

# Problems whose input is a single case with no leading case count.
_SINGLE_CASE = frozenset({"4A"})


def main(argv: list[str] | None = None) -> int:
    """Read a problem's input from standard input and print its answers."""
    parser = argparse.ArgumentParser(
        prog="cfsolve",
        description="Solve a contest problem, reading its input from standard input.",
    )
    parser.add_argument("problem", choices=sorted(_SOLVERS), help="problem code")
    args = parser.parse_args(argv)

    solve = _SOLVERS[args.problem]
    tokens = _Tokens(sys.stdin.read())
    try:
        if args.problem in _SINGLE_CASE:
            answers = [solve(tokens)]
        else:
            answers = [solve(tokens) for _ in range(tokens.number())]
    except (_InputError, ValueError) as exc:
        print(f"cfsolve: error: {exc}", file=sys.stderr)
        return 1

    for answer in answers:
        print(answer)
    return 0


if __name__ == "__main__":
    sys.exit(main())