"""Choosing a sequence of moves that sorts stack ``a``."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from pushswap.parsing import index_values, is_sorted
from pushswap.stacks import Item, Move, Stacks

SMALL_CHUNK = 15
LARGE_CHUNK = 35


def higher_index(stack: Iterable[Item]) -> int:
    """The largest rank on a stack; raise ValueError if it is empty."""
    return max(item.index for item in stack)


def sort_three(stacks: Stacks) -> None:
    """Sort a stack ``a`` of exactly three numbers with at most two moves."""
    a = stacks.a
    higher = higher_index(a)
    if a[0].index == higher:
        stacks.apply(Move.RA)
    elif a[1].index == higher:
        stacks.apply(Move.RRA)
    if a[0].value > a[1].value:
        stacks.apply(Move.SA)


def _push_smallest(stacks: Stacks, below: int) -> None:
    """Move the numbers ranked under ``below`` to ``b`` until three are left."""
    size = len(stacks.a)
    pushed = 0
    for _ in range(size):
        if size - pushed <= 3:
            break
        if stacks.a[0].index < below:
            stacks.apply(Move.PB)
            pushed += 1
        else:
            stacks.apply(Move.RA)


def sort_four(stacks: Stacks) -> None:
    """Sort four numbers: park the smallest on ``b``, sort three, bring it back."""
    _push_smallest(stacks, 1)
    sort_three(stacks)
    stacks.apply(Move.PA)


def sort_five(stacks: Stacks) -> None:
    """Sort five numbers: park the two smallest on ``b``, sort three, return them."""
    _push_smallest(stacks, 2)
    sort_three(stacks)
    b = stacks.b
    if all(upper.value <= lower.value for upper, lower in zip(b, list(b)[1:])):
        stacks.apply(Move.RB)
    stacks.apply(Move.PA)
    stacks.apply(Move.PA)


def push_a_to_b(stacks: Stacks, delimiter: int) -> None:
    """Empty ``a`` onto ``b`` in chunks of ranks ``delimiter`` wide.

    Numbers of the lowest ranks seen so far stay on top of ``b``; those a
    little higher are rotated to its bottom.
    """
    pushed = 0
    while stacks.a:
        index = stacks.a[0].index
        if index <= pushed:
            stacks.apply(Move.PB)
            pushed += 1
        elif index <= pushed + delimiter:
            stacks.apply(Move.PB)
            stacks.apply(Move.RB)
            pushed += 1
        else:
            stacks.apply(Move.RA)


def _in_top_half(stack: Sequence[Item], index: int) -> bool:
    return any(item.index == index for item in list(stack)[: len(stack) // 2])


def turn_to_a(stacks: Stacks) -> None:
    """Bring every number back from ``b`` to ``a``, largest rank first."""
    b = stacks.b
    max_index = higher_index(b)
    while b:
        if b[0].index == max_index:
            stacks.apply(Move.PA)
            max_index -= 1
        elif b[1].index == max_index:
            stacks.apply(Move.SB)
            stacks.apply(Move.PA)
            max_index -= 1
        elif _in_top_half(b, max_index):
            stacks.apply(Move.RB)
        else:
            stacks.apply(Move.RRB)


def sort(stacks: Stacks) -> None:
    """Sort ``a`` using the strategy suited to its size."""
    a = stacks.a
    size = len(a)
    if size == 0:
        return
    if size == 2:
        if a[0].value > a[1].value:
            stacks.apply(Move.SA)
    elif size == 3:
        sort_three(stacks)
    elif size == 4:
        sort_four(stacks)
    elif size == 5:
        sort_five(stacks)
    else:
        push_a_to_b(stacks, SMALL_CHUNK if size <= 100 else LARGE_CHUNK)
        turn_to_a(stacks)


def plan_moves(values: Sequence[int]) -> list[Move]:
    """The moves that sort ``values``; none if they are already in order."""
    if is_sorted(values):
        return []
    stacks = Stacks(values)
    for item, rank in zip(stacks.a, index_values(values)):
        item.index = rank
    sort(stacks)
    return stacks.history