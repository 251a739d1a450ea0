"""Solvers for puzzles posed over strings and small grids, plus a text driver."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from itertools import islice

_LETTERS = "ABC"


def huh_easy(n: int, k: int) -> tuple[str, str] | None:
    """Return two strings of length ``n`` sharing exactly their first ``k`` letters.

    Returns None when ``k`` exceeds ``n``.
    """
    if k > n:
        return None
    first = "".join(_LETTERS[i % 3] for i in range(n))
    second = first[:k] + "".join(_LETTERS[(i + 1) % 3] for i in range(k, n))
    return first, second


def maximum_ones(p: int, q: int, s: str) -> int:
    """Return the most ones after spending up to ``q`` fills on the gaps before ones.

    Only the first ``p`` characters are scanned for gaps; every '1' in ``s``
    counts towards the total.
    """
    ones = s.count("1")
    if ones == 0:
        return 0
    total = ones
    budget = q
    previous = -1
    for position, char in enumerate(s[:p]):
        if char != "1":
            continue
        used = min(position - previous - 1, budget)
        total += used
        budget -= used
        previous = position
    return total


def _sweep(s: str, t: str, indices: range) -> tuple[list[int], str]:
    current = list(s)
    operations: list[int] = []
    for i in indices:
        if current[i] == "1" and current[i + 1] != t[i + 1]:
            operations.append(i + 1)
            current[i + 1] = "1" if current[i + 1] == "0" else "0"
    return operations, "".join(current)


def s_to_t(s: str, t: str) -> list[int] | None:
    """Return the positions to flip to turn ``s`` into ``t``, or None if impossible.

    Flipping position ``i`` (1-based from the second character, 0-based index
    ``i``) requires the character before it to be '1'.
    """
    if len(s) != len(t):
        raise ValueError("s and t must have the same length")
    if s == t:
        return []
    if s[0] != t[0]:
        return None
    last = len(s) - 1
    for indices in (range(last), range(last - 1, -1, -1)):
        operations, result = _sweep(s, t, indices)
        if result == t:
            return operations
    return None


def drawing_chances(n: int, x: int, s: str) -> bool:
    """Tell whether the remaining ``n - x`` draws can balance the ones and zeros in ``s``."""
    ones = s.count("1")
    zeros = len(s) - ones
    remaining = n - x
    needed = zeros - ones + remaining
    if needed % 2 != 0:
        return False
    return 0 <= needed // 2 <= remaining


def grid_mex(n: int) -> list[list[int]]:
    """Return an ``n`` by ``n`` grid with ones on the diagonal; a single cell is 0."""
    if n == 1:
        return [[0]]
    return [[int(row == column) for column in range(n)] for row in range(n)]


def _take(tokens: Iterator[str], count: int) -> list[str]:
    taken = list(islice(tokens, count))
    if len(taken) < count:
        raise ValueError("unexpected end of input")
    return taken


def _take_int(tokens: Iterator[str]) -> int:
    return int(_take(tokens, 1)[0])


def _huh_case(tokens: Iterator[str]) -> str:
    n = _take_int(tokens)
    k = _take_int(tokens)
    pair = huh_easy(n, k)
    return "-1" if pair is None else f"{pair[0]}\n{pair[1]}"


def _ones_case(tokens: Iterator[str]) -> str:
    p = _take_int(tokens)
    q = _take_int(tokens)
    (s,) = _take(tokens, 1)
    return str(maximum_ones(p, q, s))


def _s_to_t_case(tokens: Iterator[str]) -> str:
    _take_int(tokens)
    s, t = _take(tokens, 2)
    operations = s_to_t(s, t)
    if operations is None:
        return "-1"
    if not operations:
        return "0"
    return f"{len(operations)}\n" + "".join(f"{op} " for op in operations)


def _drawing_case(tokens: Iterator[str]) -> str:
    n = _take_int(tokens)
    x = _take_int(tokens)
    (s,) = _take(tokens, 1)
    return "Yes" if drawing_chances(n, x, s) else "No"


def _grid_case(tokens: Iterator[str]) -> str:
    grid = grid_mex(_take_int(tokens))
    return "\n".join("".join(f"{cell} " for cell in row) for row in grid)


_CASES: dict[str, Callable[[Iterator[str]], str]] = {
    "huh_easy": _huh_case,
    "maximum_ones": _ones_case,
    "s_to_t": _s_to_t_case,
    "drawing_chances": _drawing_case,
    "grid_mex": _grid_case,
}


def run(name: str, text: str) -> str:
    """Solve every test case of the named puzzle in ``text``; return the output."""
    try:
        solve_case = _CASES[name]
    except KeyError:
        raise ValueError(f"unknown puzzle: {name!r}") from None
    tokens = iter(text.split())
    case_count = _take_int(tokens)
    return "".join(f"{solve_case(tokens)}\n" for _ in range(case_count))