"""Solvers for puzzles that come down to a little arithmetic, plus a text driver."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from itertools import count as _count
from itertools import islice

GAME_MODULUS = 998244353
GAME_MAX_N = 1000
BALLS = 100


def cake_pieces(a: int, b: int) -> int:
    """Return the number of pieces left once one strip of the cake is removed."""
    return a * b - min(a, b)


def codemat(x: int, y: int) -> bool:
    """Tell whether ``y`` is strictly greater than ``x``."""
    return y > x


def _damage_within(health: int, attacks: Sequence[tuple[int, int]], time: int) -> bool:
    best = 0
    quick = 0
    slow = 0
    for cooldown, damage in attacks:
        best = max(best, (time // cooldown) * damage)
        if cooldown == 1:
            quick = max(quick, damage)
        else:
            slow = max(slow, damage)
    for slow_uses in range(time // 2 + 1):
        quick_uses = time - 2 * slow_uses
        best = max(best, slow_uses * slow + quick_uses * quick)
    return best >= health


def min_hunt_time(health: int, attacks: Sequence[tuple[int, int]]) -> int:
    """Return the least time needed to deal ``health`` damage.

    Each attack is a ``(cooldown, damage)`` pair.
    """
    if not attacks:
        raise ValueError("attacks must not be empty")
    if any(cooldown < 1 for cooldown, _ in attacks):
        raise ValueError("every cooldown must be positive")
    strongest = max(damage for _, damage in attacks)
    if strongest < 1:
        raise ValueError("at least one attack must deal damage")
    low = 1
    high = -(-health // strongest) * 2
    answer = high
    while low <= high:
        middle = (low + high) // 2
        if _damage_within(health, attacks, middle):
            answer = middle
            high = middle - 1
        else:
            low = middle + 1
    return answer


def max_sixes(runs: int) -> int:
    """Return the most sixes in a 100-ball innings scoring exactly ``runs``.

    Every other ball scores at most four. Returns 0 when no split works.
    """
    feasible = (
        sixes
        for sixes in range(BALLS + 1)
        if 0 <= runs - 6 * sixes <= 4 * (BALLS - sixes)
    )
    return max(feasible, default=0)


def max_triangle(n: int) -> int | None:
    """Return the answer for ``n`` points, or None when there is none."""
    if n <= 3:
        return None
    return 3 * n - 3


def pizzas_needed(n: int) -> int:
    """Return the fewest pizzas whose halves split evenly among ``n`` people."""
    return next(pizzas for pizzas in _count(1) if (pizzas * n) % 2 == 0)


def game_count(n: int) -> int:
    """Return the number of games for ``n``, modulo 998244353."""
    if not 1 <= n <= GAME_MAX_N:
        raise ValueError(f"n must lie in [1, {GAME_MAX_N}]")
    if n % 2 == 1:
        return pow(2, n - 1, GAME_MODULUS)
    return 3 * pow(2, n - 2, GAME_MODULUS) % GAME_MODULUS


def reachable_count(n: int) -> int:
    """Count the numbers reachable from ``n`` by subtracting 2 or halving."""
    seen = {n}
    pending = deque([n])
    while pending:
        current = pending.popleft()
        successors = []
        if current > 2:
            successors.append(current - 2)
        if current > 1 and current % 2 == 0:
            successors.append(current // 2)
        for successor in successors:
            if successor not in seen:
                seen.add(successor)
                pending.append(successor)
    return len(seen)


def episodes_duration(count: int, minutes: int) -> tuple[int, int]:
    """Return the total running time of the episodes as (hours, minutes)."""
    return divmod(count * minutes, 60)


def third_angle(a: int, b: int) -> int:
    """Return the third angle of a triangle with angles ``a`` and ``b``."""
    return 180 - (a + b)


def _take(tokens: Iterator[int], count: int) -> list[int]:
    taken = list(islice(tokens, count))
    if len(taken) < count:
        raise ValueError("unexpected end of input")
    return taken


def _hunt_case(tokens: Iterator[int]) -> str:
    count, health = _take(tokens, 2)
    flat = _take(tokens, 2 * count)
    attacks = list(zip(flat[::2], flat[1::2]))
    return str(min_hunt_time(health, attacks))


def _triangle_case(tokens: Iterator[int]) -> str:
    result = max_triangle(*_take(tokens, 1))
    return "-1" if result is None else str(result)


def _episodes_case(tokens: Iterator[int]) -> str:
    hours, minutes = episodes_duration(*_take(tokens, 2))
    return f"{hours} {minutes}"


@dataclass(frozen=True)
class _Puzzle:
    solve: Callable[[Iterator[int]], str]
    multiple_cases: bool


_PUZZLES: dict[str, _Puzzle] = {
    "cake_pieces": _Puzzle(lambda tokens: str(cake_pieces(*_take(tokens, 2))), False),
    "codemat": _Puzzle(
        lambda tokens: "Yes" if codemat(*_take(tokens, 2)) else "No", False
    ),
    "min_hunt_time": _Puzzle(_hunt_case, True),
    "max_sixes": _Puzzle(lambda tokens: str(max_sixes(*_take(tokens, 1))), False),
    "max_triangle": _Puzzle(_triangle_case, True),
    "pizzas_needed": _Puzzle(
        lambda tokens: str(pizzas_needed(*_take(tokens, 1))), False
    ),
    "game_count": _Puzzle(lambda tokens: str(game_count(*_take(tokens, 1))), True),
    "reachable_count": _Puzzle(
        lambda tokens: str(reachable_count(*_take(tokens, 1))), True
    ),
    "episodes_duration": _Puzzle(_episodes_case, True),
    "third_angle": _Puzzle(lambda tokens: str(third_angle(*_take(tokens, 2))), False),
}


def run(name: str, text: str) -> str:
    """Solve the named puzzle for the input in ``text``; return the output."""
    try:
        puzzle = _PUZZLES[name]
    except KeyError:
        raise ValueError(f"unknown puzzle: {name!r}") from None
    tokens = map(int, text.split())
    case_count = _take(tokens, 1)[0] if puzzle.multiple_cases else 1
    return "".join(f"{puzzle.solve(tokens)}\n" for _ in range(case_count))