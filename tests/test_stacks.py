from collections import deque

import pytest

from pushswap.stacks import (
    Item,
    Move,
    Stacks,
    push,
    reverse_rotate,
    rotate,
    swap,
)


def test_swap_exchanges_top_two():
    stack = deque([1, 2, 3])
    swap(stack)
    assert list(stack) == [2, 1, 3]


def test_swap_single_element_unchanged():
    stack = deque([7])
    swap(stack)
    assert list(stack) == [7]


def test_push_moves_top():
    src = deque([1, 2])
    dest = deque([9])
    push(dest, src)
    assert list(src) == [2]
    assert list(dest) == [1, 9]


def test_push_from_empty_is_noop():
    src = deque()
    dest = deque([5])
    push(dest, src)
    assert list(dest) == [5]
    assert len(src) == 0


def test_rotate_moves_top_to_bottom():
    stack = deque([1, 2, 3])
    rotate(stack)
    assert list(stack) == [2, 3, 1]


def test_reverse_rotate_moves_bottom_to_top():
    stack = deque([1, 2, 3])
    reverse_rotate(stack)
    assert list(stack) == [3, 1, 2]


def test_rotate_and_reverse_rotate_are_inverse():
    original = [4, 8, 15, 16, 23, 42]
    stack = deque(original)
    rotate(stack)
    reverse_rotate(stack)
    assert list(stack) == original


def test_stacks_push_round_trip():
    stacks = Stacks([3, 1, 2])
    stacks.apply(Move.PB)
    stacks.apply("pb")
    assert stacks.values() == [2]
    assert [item.value for item in stacks.b] == [1, 3]
    stacks.apply("pa")
    stacks.apply("pa")
    assert stacks.values() == [3, 1, 2]
    assert not stacks.b


def test_rr_rotates_both():
    stacks = Stacks([1, 2, 3, 4])
    stacks.apply("pb")
    stacks.apply("pb")
    stacks.apply("rr")
    assert stacks.values() == [4, 3]
    assert [item.value for item in stacks.b] == [1, 2]


def test_ss_swaps_both():
    stacks = Stacks([1, 2, 3, 4])
    stacks.apply("pb")
    stacks.apply("pb")
    stacks.apply("ss")
    assert stacks.values() == [4, 3]
    assert [item.value for item in stacks.b] == [1, 2]


def test_rrr_reverse_rotates_both():
    stacks = Stacks([1, 2, 3, 4, 5])
    stacks.apply("pb")
    stacks.apply("pb")
    stacks.apply("rrr")
    assert stacks.values() == [5, 3, 4]
    assert [item.value for item in stacks.b] == [1, 2]


def test_history_records_moves():
    stacks = Stacks([2, 1])
    stacks.apply("sa")
    stacks.apply(Move.RA)
    assert stacks.history == [Move.SA, Move.RA]


def test_unknown_move_raises():
    stacks = Stacks([1])
    with pytest.raises(ValueError):
        stacks.apply("xx")


def test_is_sorted_requires_ascending_a():
    assert Stacks([1, 2, 3]).is_sorted()
    assert not Stacks([2, 1, 3]).is_sorted()


def test_is_sorted_requires_empty_b():
    stacks = Stacks([1, 2, 3])
    stacks.apply("pb")
    assert not stacks.is_sorted()
    stacks.apply("pa")
    assert stacks.is_sorted()


def test_sa_then_sa_restores():
    stacks = Stacks([5, 6, 7])
    stacks.apply("sa")
    assert stacks.values() == [6, 5, 7]
    stacks.apply("sa")
    assert stacks.values() == [5, 6, 7]


def test_item_default_index():
    item = Item(10)
    assert item.index == 0
    assert item.value == 10


def test_move_string_value():
    assert str(Move("rra")) == "rra"