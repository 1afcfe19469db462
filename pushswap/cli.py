"""Command that prints the moves sorting the numbers given as arguments."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.parsing import InputError, is_sorted, parse_arguments
from pushswap.sorting import plan_moves
from pushswap.stacks import Move


def solve(args: Sequence[str]) -> list[Move]:
    """Validate the arguments and return the moves that sort them.

    Raises InputError for invalid input.  No arguments, or numbers already
    in order, need no moves.
    """
    if not args:
        return []
    values = parse_arguments(args)
    if is_sorted(values):
        return []
    return plan_moves(values)


def main(argv: Sequence[str] | None = None) -> int:
    """Print one move per line; print ``Error`` to stderr on bad input."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        moves = solve(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("".join(f"{move}\n" for move in moves))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())