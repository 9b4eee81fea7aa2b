from itertools import permutations

import pytest

from pushswap.small_sort import (
    assign_index,
    init_sort,
    sort_three,
    sort_two,
    start_sort,
)
from pushswap.stacks import Stacks


def replay(values, ops):
    stacks = Stacks(values)
    for op in ops:
        getattr(stacks, op)()
    return stacks


def test_assign_index_ranks_by_value():
    stacks = Stacks([42, -7, 0, 100, 3])
    assign_index(stacks)
    indexes = [item.index for item in stacks.a]
    assert sorted(indexes) == list(range(5))
    by_rank = sorted(stacks.a, key=lambda item: item.index)
    assert [item.value for item in by_rank] == sorted([42, -7, 0, 100, 3])


def test_assign_index_handles_int_limits():
    stacks = Stacks([-2147483648, 2147483647, 0])
    assign_index(stacks)
    assert stacks.a[0].index == 0
    assert stacks.a[1].index == len(stacks.a) - 1
    assert stacks.ops == []


def test_sort_two_swaps_when_out_of_order():
    stacks = Stacks([2, 1])
    sort_two(stacks)
    assert stacks.values("a") == [1, 2]
    assert stacks.ops == ["sa"]


def test_sort_two_leaves_ordered_pair():
    stacks = Stacks([1, 2])
    sort_two(stacks)
    assert stacks.values("a") == [1, 2]
    assert stacks.ops == []


@pytest.mark.parametrize("values", list(permutations([1, 2, 3])))
def test_sort_three_sorts_every_order(values):
    stacks = Stacks(values)
    sort_three(stacks)
    assert stacks.values("a") == [1, 2, 3]
    assert len(stacks.ops) <= 2
    assert replay(values, stacks.ops).values("a") == [1, 2, 3]


def test_sort_three_on_sorted_does_nothing():
    stacks = Stacks([-5, 0, 9])
    sort_three(stacks)
    assert stacks.ops == []


def test_sort_three_needs_three_items():
    with pytest.raises(ValueError):
        sort_three(Stacks([2, 1]))


def test_start_sort_ignores_larger_stacks():
    stacks = Stacks([4, 3, 2, 1])
    start_sort(stacks)
    assert stacks.values("a") == [4, 3, 2, 1]
    assert stacks.ops == []


@pytest.mark.parametrize(
    "values",
    [p for size in (1, 2, 3) for p in permutations(range(size))],
)
def test_init_sort_small_stacks_end_sorted(values):
    stacks = Stacks(values)
    init_sort(stacks)
    assert stacks.values("a") == sorted(values)
    assert stacks.b == type(stacks.b)()


@pytest.mark.parametrize("size", [4, 5, 6, 7, 8])
def test_init_sort_leaves_three_sorted_items(size):
    for values in list(permutations(range(size)))[:200]:
        stacks = Stacks(values)
        init_sort(stacks)
        top = stacks.values("a")
        assert len(top) == 3
        assert top == sorted(top)
        assert len(stacks.b) == size - 3
        assert sorted(top + stacks.values("b")) == list(range(size))
        assert replay(values, stacks.ops).values("b") == stacks.values("b")


@pytest.mark.parametrize("size", [5, 6, 7, 9])
def test_init_sort_pushes_lower_half_to_b(size):
    values = list(reversed(range(size)))
    stacks = Stacks(values)
    init_sort(stacks)
    in_b = {item.index for item in stacks.b}
    assert set(range(size // 2)) <= in_b