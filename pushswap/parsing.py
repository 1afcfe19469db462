"""Reading and validating the numbers given on the command line."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import pairwise

INT_MIN = -2147483648
INT_MAX = 2147483647
OVERFLOW = 2147483649

_SPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


class InputError(ValueError):
    """Raised for any argument that is not a usable list of integers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def parse_int(text: str) -> int:
    """Read a leading integer the lenient way: spaces, a sign, then digits.

    Reading stops at the first non-digit.  A positive number that grows
    past the 32-bit maximum yields ``OVERFLOW`` at once.
    """
    rest = text.lstrip(_SPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    number = 0
    for char in rest:
        if char not in _DIGITS:
            break
        number = number * 10 + int(char)
        if sign == 1 and number > INT_MAX:
            return OVERFLOW
    return number * sign


def split_arguments(args: Iterable[str]) -> list[str]:
    """Join all arguments with spaces and split them into tokens on spaces."""
    return [token for token in " ".join(args).split(" ") if token]


def check_empty(args: Iterable[str]) -> None:
    """Every argument must contain at least one digit."""
    for arg in args:
        if not any(char in _DIGITS for char in arg):
            raise InputError()


def check_duplication(tokens: Sequence[str]) -> None:
    """Reject out-of-range numbers and numbers given twice."""
    seen: set[int] = set()
    for token in tokens:
        value = parse_int(token)
        if not INT_MIN <= value <= INT_MAX or value in seen:
            raise InputError()
        seen.add(value)


def _is_number(token: str) -> bool:
    digits = token[1:] if token[0] in "+-" and len(token) > 1 else token
    return all(char in _DIGITS for char in digits)


def validate(args: Sequence[str]) -> None:
    """Raise InputError unless the arguments form a list of distinct ints."""
    tokens = split_arguments(args)
    check_empty(args)
    check_duplication(tokens)
    if not all(_is_number(token) for token in tokens):
        raise InputError()


def is_sorted(values: Iterable[int]) -> bool:
    """True when no number is followed by a smaller one."""
    return all(first <= second for first, second in pairwise(values))


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Validate the arguments and return their numbers in order."""
    validate(args)
    return [parse_int(token) for token in split_arguments(args)]


def index_values(values: Sequence[int]) -> list[int]:
    """Give each number its rank: 0 for the smallest, n-1 for the largest."""
    ranks = [0] * len(values)
    order = sorted(range(len(values)), key=values.__getitem__)
    for rank, position in enumerate(order):
        ranks[position] = rank
    return ranks