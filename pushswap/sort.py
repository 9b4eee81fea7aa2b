"""The main pass: move items back from ``b`` to ``a`` at the lowest cost."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .stacks import Item, Stacks


@dataclass
class Move:
    """A number of rotations in one direction.

    ``up`` means reverse rotations (bottom to top). ``biggest`` marks a push
    onto ``a`` of an item larger than everything on it.
    """

    up: bool = False
    move: int = 0
    biggest: bool = False


def rotate_list(stacks: Stacks, move: Move, is_stack_a: bool) -> None:
    """Perform the rotations described by ``move`` on ``a`` or ``b``."""
    if move.up:
        step = stacks.rra if is_stack_a else stacks.rrb
    else:
        step = stacks.ra if is_stack_a else stacks.rb
    for _ in range(move.move):
        step()


def ra_or_rra(stack: Sequence[Item], index: int) -> Move:
    """Return the shorter way to bring the item of rank ``index`` to the top."""
    size = len(stack)
    if not size:
        return Move()
    position = next(
        (pos for pos, item in enumerate(stack) if item.index == index), None
    )
    if position is None:
        return Move(move=size - 1)
    backward = size - position
    if position > backward:
        return Move(up=True, move=backward)
    return Move(move=position)


def find_position(stack: Sequence[Item], index: int) -> tuple[int, bool]:
    """Return the rank an item of rank ``index`` should be pushed onto.

    That is the smallest rank above ``index``, with ``False``; when there is
    none, the largest rank on the stack, with ``True``.
    """
    greater = [item.index for item in stack if item.index > index]
    if greater:
        return min(greater), False
    return max(item.index for item in stack), True


def cheaper_move(stacks: Stacks) -> tuple[Move, Move]:
    """Choose the item of ``b`` cheapest to place, and the moves for ``a`` and ``b``."""
    if not stacks.b:
        raise ValueError("stack b is empty")

    def cost(item: Item) -> int:
        target, _ = find_position(stacks.a, item.index)
        return (
            ra_or_rra(stacks.b, item.index).move
            + ra_or_rra(stacks.a, target).move
        )

    chosen = min(stacks.b, key=cost)
    target, biggest = find_position(stacks.a, chosen.index)
    dir_a = ra_or_rra(stacks.a, target)
    dir_a.biggest = biggest
    dir_b = ra_or_rra(stacks.b, chosen.index)
    return dir_a, dir_b


def calculate_and_sort(stacks: Stacks) -> None:
    """Move every item of ``b`` back to its place on ``a``."""
    while stacks.b:
        dir_a, dir_b = cheaper_move(stacks)
        rotate_list(stacks, dir_a, True)
        rotate_list(stacks, dir_b, False)
        stacks.pa()
        if dir_a.biggest:
            stacks.sa()