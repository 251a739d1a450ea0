"""Command-line entry point that solves a named puzzle from text input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from pathlib import Path

from puzzlebox import arithmetic, arrays, strings

_RUNNERS: dict[str, Callable[[str, str], str]] = {
    **dict.fromkeys(
        (
            "array_operations",
            "balanced_lighting",
            "tallest_brick",
            "fence_colouring",
            "outside_pair",
            "larger_smaller_count",
            "minimize_sum",
        ),
        arrays.run,
    ),
    **dict.fromkeys(
        (
            "cake_pieces",
            "codemat",
            "min_hunt_time",
            "max_sixes",
            "max_triangle",
            "pizzas_needed",
            "game_count",
            "reachable_count",
            "episodes_duration",
            "third_angle",
        ),
        arithmetic.run,
    ),
    **dict.fromkeys(
        ("huh_easy", "maximum_ones", "s_to_t", "drawing_chances", "grid_mex"),
        strings.run,
    ),
}


def main(argv: list[str] | None = None) -> int:
    """Read puzzle input from a file or standard input and print the answers."""
    parser = argparse.ArgumentParser(
        prog="puzzlebox", description="Solve a named puzzle for the given input."
    )
    parser.add_argument("puzzle", choices=sorted(_RUNNERS))
    parser.add_argument("input", nargs="?", help="input file; standard input if absent")
    args = parser.parse_args(argv)

    text = Path(args.input).read_text() if args.input else sys.stdin.read()
    try:
        output = _RUNNERS[args.puzzle](args.puzzle, text)
    except ValueError as error:
        print(f"puzzlebox: {error}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())