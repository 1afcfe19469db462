"""Command that checks whether a list of moves read from stdin sorts the numbers."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from typing import TextIO

from pushswap.parsing import InputError, parse_arguments
from pushswap.stacks import Move, Stacks


def read_lines(stream: TextIO) -> Iterator[str]:
    """Yield the lines of ``stream`` one at a time, each with its newline.

    A last line without a newline is yielded as it stands.
    """
    yield from iter(stream.readline, "")


def parse_instruction(line: str) -> Move:
    """Turn one input line such as ``"ra\\n"`` into a move.

    The line must be the name of a move followed by exactly one newline;
    anything else raises InputError.
    """
    if not line.endswith("\n"):
        raise InputError()
    try:
        return Move(line[:-1])
    except ValueError:
        raise InputError() from None


def run_checker(args: Sequence[str], lines: Iterable[str]) -> bool:
    """Apply the moves in ``lines`` to the numbers in ``args``.

    Returns True when ``a`` ends up in ascending order with ``b`` empty.
    The arguments are validated before any line is read; an invalid
    argument or instruction raises InputError.
    """
    stacks = Stacks(parse_arguments(args))
    for line in lines:
        stacks.apply(parse_instruction(line))
    return stacks.is_sorted()


def main(argv: Sequence[str] | None = None) -> int:
    """Print ``OK`` or ``KO``; print ``Error`` to stderr on bad input."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        sorted_ok = run_checker(args, read_lines(sys.stdin))
    except (InputError, OSError):
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("OK\n" if sorted_ok else "KO\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())