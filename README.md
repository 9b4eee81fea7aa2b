# pushswap

Sort a list of integers using two stacks, `a` and `b`, and a small set of
operations. The program prints the operations it performs, one per line.
If you apply them in order to stack `a`, it ends up sorted in ascending
order from top to bottom, and stack `b` ends up empty.

## Operations

| Name  | Effect                                              |
|-------|-----------------------------------------------------|
| `sa`  | swap the two top items of `a`                       |
| `sb`  | swap the two top items of `b`                       |
| `ss`  | `sa` and `sb`                                       |
| `pa`  | move the top of `b` onto `a`                        |
| `pb`  | move the top of `a` onto `b`                        |
| `ra`  | rotate `a` up: its top item goes to the bottom      |
| `rb`  | rotate `b` up                                       |
| `rr`  | `ra` and `rb`                                       |
| `rra` | rotate `a` down: its bottom item goes to the top    |
| `rrb` | rotate `b` down                                     |
| `rrr` | `rra` and `rrb`                                     |

## Installation

```
pip install .
```

## Command line

```
push-swap 3 2 1
push-swap "4 67 3 87 23"
```

An argument can hold one number or several numbers separated by spaces.
The first number given is placed on top of stack `a`.

- With no arguments, nothing is printed and the exit status is 0.
- If the numbers are already sorted, nothing is printed.
- If any of the following holds, `Error` is written to standard error and
  the exit status is 1:
  - an argument has no numbers in it;
  - a word is not written exactly as the integer prints (for example
    `+5`, `007` or `1.0`);
  - a number is outside the 32-bit signed range;
  - a number appears twice.

## Library use

```python
from pushswap.parsing import parse_argument, parse_arguments, InputError
from pushswap.stacks import Stacks
from pushswap.cli import push_swap, main

parse_argument("3 2 1")          # [3, 2, 1]
parse_arguments(["3 2", "1"])    # [3, 2, 1]

push_swap(["3", "2", "1"])       # ['ra', 'sa']: returns the operations
main(["3", "2", "1"])            # prints them, returns the exit status

stacks = Stacks([2, 1, 3])
stacks.sa()
stacks.values("a")               # [1, 2, 3]
stacks.ops                       # ['sa']
```

### Parsing and results

- `parse_argument`, `parse_arguments` and `push_swap` raise `InputError`
  (a subclass of `ValueError`) for bad input.
- `push_swap` also raises `InputError` when a number is repeated.

### The `Stacks` class

`Stacks` holds the two stacks as `a` and `b`. Each is a deque of `Item`
objects, top first. Every `Item` has a `value` and an `index`; the `index`
is the item's rank once ranks are assigned.

Each operation appends the name of what it did to `stacks.ops`:

- An operation with nothing to act on records nothing and changes nothing.
  This covers an empty source for a push, or fewer than two items for a
  swap or rotation.
- `ss` records `sa` and `sb` as performed.
- `rr` and `rrr` record their parts as performed, followed by their own name.

### Sorting steps

The sorting steps are available separately:

- `pushswap.small_sort`: `assign_index`, `sort_two`, `sort_three`,
  `start_sort` and `init_sort`.
- `pushswap.sort`: `Move`, `rotate_list`, `ra_or_rra`, `find_position`,
  `cheaper_move` and `calculate_and_sort`.
- `pushswap.cli`: `sort_in_position`, `has_duplicates` and `is_sorted`.

## What it does not do

The package only produces a list of operations. It does not read
operations back in to check that they sort a given input.

## Tests

```
pip install .[test]
pytest
```