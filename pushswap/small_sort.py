"""Ranking the numbers and the short sorts used before the main pass."""

from __future__ import annotations

from .stacks import Stacks


def assign_index(stacks: Stacks) -> None:
    """Rank the items of ``a`` by value: 0 for the smallest, n - 1 for the largest."""
    ranked = sorted(stacks.a, key=lambda item: item.value, reverse=True)
    for rank, item in zip(range(len(ranked) - 1, -1, -1), ranked):
        item.index = rank


def sort_two(stacks: Stacks) -> None:
    """Swap the two top items of ``a`` if they are out of order."""
    a = stacks.a
    if len(a) >= 2 and a[0].value > a[1].value:
        stacks.sa()


def sort_three(stacks: Stacks) -> None:
    """Sort the three top items of ``a`` in at most two operations."""
    a = stacks.a
    if len(a) < 3:
        raise ValueError("sort_three needs at least three items on stack a")
    first, second, third = a[0].value, a[1].value, a[2].value
    if first > second and first > third:
        stacks.ra()
        sort_two(stacks)
    elif first < second and second > third:
        stacks.rra()
        sort_two(stacks)
    elif first < third and second < third:
        sort_two(stacks)


def start_sort(stacks: Stacks) -> None:
    """Sort ``a`` directly when it holds two or three items."""
    size = len(stacks.a)
    if size == 2:
        sort_two(stacks)
    elif size == 3:
        sort_three(stacks)


def init_sort(stacks: Stacks) -> None:
    """Rank the items, then leave three sorted items on ``a`` and the rest on ``b``.

    The lower half of the ranks is pushed to ``b`` first, so that the
    larger items tend to stay on ``a``.
    """
    size = len(stacks.a)
    assign_index(stacks)
    start_sort(stacks)
    if size <= 3:
        return
    half = size // 2
    pushed = 0
    while size - pushed > 3 and pushed < half:
        if stacks.a[0].index < half:
            pushed += 1
            stacks.pb()
        else:
            stacks.ra()
    for _ in range(size - 3 - pushed):
        stacks.pb()
    sort_three(stacks)