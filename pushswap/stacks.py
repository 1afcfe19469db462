"""The two stacks of the puzzle and the moves that rearrange them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum
from itertools import pairwise
from typing import Callable, Iterable, MutableSequence, TypeVar

T = TypeVar("T")


class Move(str, Enum):
    """The eleven instructions understood by the stacks."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


@dataclass
class Item:
    """One number on a stack, with its rank among all numbers."""

    value: int
    index: int = 0


def swap(stack: MutableSequence[T]) -> None:
    """Exchange the two topmost elements; do nothing with fewer than two."""
    if len(stack) >= 2:
        stack[0], stack[1] = stack[1], stack[0]


def push(dest: deque[T], src: deque[T]) -> None:
    """Move the top of ``src`` onto ``dest``; do nothing if ``src`` is empty."""
    if src:
        dest.appendleft(src.popleft())


def rotate(stack: deque[T]) -> None:
    """Move the top element to the bottom."""
    if len(stack) > 1:
        stack.rotate(-1)


def reverse_rotate(stack: deque[T]) -> None:
    """Move the bottom element to the top."""
    if len(stack) > 1:
        stack.rotate(1)


class Stacks:
    """Stack ``a`` holding the numbers, stack ``b`` starting empty.

    The top of each stack is its left end.  Every applied move is kept in
    ``history``.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self.a: deque[Item] = deque(Item(value) for value in values)
        self.b: deque[Item] = deque()
        self.history: list[Move] = []

    def apply(self, move: Move | str) -> None:
        """Perform one move; raise ValueError for an unknown instruction."""
        move = Move(move)
        _ACTIONS[move](self)
        self.history.append(move)

    def is_sorted(self) -> bool:
        """True when ``b`` is empty and ``a`` ascends from top to bottom."""
        return not self.b and all(
            upper.value <= lower.value for upper, lower in pairwise(self.a)
        )

    def values(self) -> list[int]:
        """The numbers on stack ``a``, top first."""
        return [item.value for item in self.a]


def _both(action: Callable[[deque[Item]], None]) -> Callable[[Stacks], None]:
    def run(stacks: Stacks) -> None:
        action(stacks.a)
        action(stacks.b)

    return run


_ACTIONS: dict[Move, Callable[[Stacks], None]] = {
    Move.SA: lambda s: swap(s.a),
    Move.SB: lambda s: swap(s.b),
    Move.SS: _both(swap),
    Move.PA: lambda s: push(s.a, s.b),
    Move.PB: lambda s: push(s.b, s.a),
    Move.RA: lambda s: rotate(s.a),
    Move.RB: lambda s: rotate(s.b),
    Move.RR: _both(rotate),
    Move.RRA: lambda s: reverse_rotate(s.a),
    Move.RRB: lambda s: reverse_rotate(s.b),
    Move.RRR: _both(reverse_rotate),
}