"""Command line entry point: print the operations that sort the numbers."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from itertools import pairwise

from .parsing import InputError, parse_arguments
from .small_sort import init_sort
from .sort import calculate_and_sort
from .stacks import Stacks


def sort_in_position(stacks: Stacks) -> None:
    """Rotate ``a`` the shorter way until its smallest item is on top."""
    size = len(stacks.a)
    position = max(
        (pos for pos, item in enumerate(stacks.a) if item.index == 0), default=0
    )
    if (size + 1) // 2 < position:
        for _ in range(size - position):
            stacks.rra()
    else:
        for _ in range(position):
            stacks.ra()


def has_duplicates(values: Sequence[int]) -> bool:
    """Return whether any value appears more than once."""
    return len(set(values)) != len(values)


def is_sorted(values: Iterable[int]) -> bool:
    """Return whether the values never decrease."""
    return all(left <= right for left, right in pairwise(values))


def push_swap(args: Iterable[str]) -> list[str]:
    """Return the operations that sort the numbers given in ``args``.

    Raises InputError for a malformed argument or a repeated number.
    """
    values = parse_arguments(args)
    if has_duplicates(values):
        raise InputError("duplicate numbers")
    if is_sorted(values):
        return []
    stacks = Stacks(values)
    init_sort(stacks)
    calculate_and_sort(stacks)
    if not is_sorted(stacks.values("a")):
        sort_in_position(stacks)
    return stacks.ops


def main(argv: Sequence[str] | None = None) -> int:
    """Print one operation per line; print ``Error`` to stderr on bad input."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        ops = push_swap(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("".join(f"{op}\n" for op in ops))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())