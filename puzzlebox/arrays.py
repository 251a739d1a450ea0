"""Solvers for puzzles posed over integer arrays, plus a text driver."""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Iterator, Sequence
from itertools import islice


def array_operations(values: Sequence[int]) -> int:
    """Return the largest value reachable after the allowed operations."""
    if not values:
        raise ValueError("values must not be empty")
    if len(values) == 1:
        return values[0]
    if len(values) == 3:
        first, middle, last = values
        return max(first + 1, middle, last + 1)
    # Interior elements are compared against a floor of zero.
    return max(max(values), 0)


def balanced_lighting(colours: Sequence[int]) -> bool:
    """Tell whether unpainted lamps (not 1 or 2) can balance the two colours."""
    size = len(colours)
    red = sum(1 for colour in colours if colour == 1)
    blue = sum(1 for colour in colours if colour == 2)
    half = size // 2
    return size % 2 == 0 and red <= half and blue <= half


def tallest_brick(heights: Sequence[int]) -> int:
    """Return the 1-based position of the first tallest brick."""
    if not heights:
        raise ValueError("heights must not be empty")
    best = max(range(len(heights)), key=lambda index: (heights[index], -index))
    return best + 1


def fence_colouring(colours: Sequence[int]) -> int:
    """Return the fewest repaint operations needed for the fence."""
    others = [colour for colour in colours if colour != 1]
    if not others:
        return 0
    most_common = max(Counter(others).values())
    return min(1 + len(colours) - most_common, len(others))


def outside_pair(values: Sequence[int]) -> tuple[int, int] | None:
    """Return a pair whose sum lies outside the array's values, or None."""
    if any(value > 0 for value in values):
        top = max(values)
        return top, top
    if any(value < 0 for value in values):
        bottom = min(values)
        return bottom, bottom
    return None


def larger_smaller_count(values: Sequence[int]) -> int:
    """Count integers with some element below them and some element above."""
    if not values:
        raise ValueError("values must not be empty")
    return max(0, max(values) - min(values) - 1)


def minimize_sum(values: Sequence[int], modulus: int) -> int:
    """Return the least sum of (v + k) mod modulus over every shift k."""
    if modulus < 1:
        raise ValueError("modulus must be positive")
    if any(not 0 <= value < modulus for value in values):
        raise ValueError("every value must lie in [0, modulus)")
    counts = Counter(values)
    current = sum(values)
    best = current
    for shift in range(1, modulus):
        # Everything grows by one; values reaching the modulus wrap to zero.
        current += len(values) - counts[(modulus - shift) % modulus] * modulus
        best = min(best, current)
    return best


def _take(tokens: Iterator[int], count: int) -> list[int]:
    taken = list(islice(tokens, count))
    if len(taken) < count:
        raise ValueError("unexpected end of input")
    return taken


def _take_one(tokens: Iterator[int]) -> int:
    return _take(tokens, 1)[0]


def _read_list(tokens: Iterator[int]) -> list[int]:
    return _take(tokens, _take_one(tokens))


def _format_pair(pair: tuple[int, int] | None) -> str:
    return "-1" if pair is None else f"{pair[0]} {pair[1]}"


def _minimize_case(tokens: Iterator[int]) -> str:
    count, modulus = _take(tokens, 2)
    return str(minimize_sum(_take(tokens, count), modulus))


_CASES: dict[str, Callable[[Iterator[int]], str]] = {
    "array_operations": lambda tokens: str(array_operations(_read_list(tokens))),
    "balanced_lighting": lambda tokens: (
        "Yes" if balanced_lighting(_read_list(tokens)) else "No"
    ),
    "tallest_brick": lambda tokens: str(tallest_brick(_read_list(tokens))),
    "fence_colouring": lambda tokens: str(fence_colouring(_read_list(tokens))),
    "outside_pair": lambda tokens: _format_pair(outside_pair(_read_list(tokens))),
    "larger_smaller_count": lambda tokens: str(
        larger_smaller_count(_read_list(tokens))
    ),
    "minimize_sum": _minimize_case,
}


def run(name: str, text: str) -> str:
    """Solve every test case of the named puzzle in ``text``; return the output."""
    try:
        solve_case = _CASES[name]
    except KeyError:
        raise ValueError(f"unknown puzzle: {name!r}") from None
    tokens = map(int, text.split())
    case_count = _take_one(tokens)
    return "".join(f"{solve_case(tokens)}\n" for _ in range(case_count))