"""The two stacks of the puzzle and the eleven operations on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(slots=True)
class Item:
    """One number on a stack, with its rank once the ranks are assigned."""

    value: int
    index: int = 0


class Stacks:
    """Stacks ``a`` and ``b``, top first, recording every operation performed.

    Each operation that changes a stack appends its name to ``ops``. An
    operation with nothing to act on (an empty source, fewer than two items)
    leaves the stacks untouched and records nothing.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self.a: deque[Item] = deque(Item(value) for value in values)
        self.b: deque[Item] = deque()
        self.ops: list[str] = []

    def values(self, which: str) -> list[int]:
        """Return the values of stack ``"a"`` or ``"b"``, top first."""
        return [item.value for item in self._stack(which)]

    def _stack(self, which: str) -> deque[Item]:
        if which == "a":
            return self.a
        if which == "b":
            return self.b
        raise ValueError(f"unknown stack: {which!r}")

    def _record(self, name: str) -> None:
        self.ops.append(name)

    @staticmethod
    def _swap(stack: deque[Item]) -> bool:
        if len(stack) < 2:
            return False
        stack[0], stack[1] = stack[1], stack[0]
        return True

    @staticmethod
    def _push(source: deque[Item], target: deque[Item]) -> bool:
        if not source:
            return False
        target.appendleft(source.popleft())
        return True

    @staticmethod
    def _rotate(stack: deque[Item], steps: int) -> bool:
        if len(stack) < 2:
            return False
        stack.rotate(steps)
        return True

    def sa(self) -> None:
        """Swap the two top items of ``a``."""
        if self._swap(self.a):
            self._record("sa")

    def sb(self) -> None:
        """Swap the two top items of ``b``."""
        if self._swap(self.b):
            self._record("sb")

    def ss(self) -> None:
        """Perform ``sa`` and then ``sb``."""
        self.sa()
        self.sb()

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        if self._push(self.b, self.a):
            self._record("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        if self._push(self.a, self.b):
            self._record("pb")

    def ra(self) -> None:
        """Move the top of ``a`` to its bottom."""
        if self._rotate(self.a, -1):
            self._record("ra")

    def rb(self) -> None:
        """Move the top of ``b`` to its bottom."""
        if self._rotate(self.b, -1):
            self._record("rb")

    def rr(self) -> None:
        """Perform ``ra`` and ``rb``, then record ``rr``."""
        self.ra()
        self.rb()
        self._record("rr")

    def rra(self) -> None:
        """Move the bottom of ``a`` to its top."""
        if self._rotate(self.a, 1):
            self._record("rra")

    def rrb(self) -> None:
        """Move the bottom of ``b`` to its top."""
        if self._rotate(self.b, 1):
            self._record("rrb")

    def rrr(self) -> None:
        """Perform ``rra`` and ``rrb``, then record ``rrr``."""
        self.rra()
        self.rrb()
        self._record("rrr")