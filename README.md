# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a
small fixed set of operations. The program prints the operations it used,
one per line.

## Operations

| Name  | Effect                                              |
|-------|-----------------------------------------------------|
| `sa`  | swap the top two items of `a`                       |
| `sb`  | swap the top two items of `b`                       |
| `ra`  | rotate `a`: the top item goes to the bottom         |
| `rb`  | rotate `b`: the top item goes to the bottom         |
| `rra` | reverse rotate `a`: the bottom item goes to the top |
| `rrb` | reverse rotate `b`: the bottom item goes to the top |
| `pa`  | move the top item of `b` onto `a`                   |
| `pb`  | move the top item of `a` onto `b`                   |

An operation that cannot apply (swapping or rotating a stack with fewer
than two items, pushing from an empty stack) changes nothing and is not
recorded.

## Installation

```
pip install .
```

## Command line

Give the numbers as separate arguments, as one quoted string, or both:

```
push_swap 3 1 2
push_swap "5 4 3 2 1"
```

Each argument is split on spaces. The first number is the top of stack
`a`. When the numbers are already in order, nothing is printed.

The program prints `Error` to standard error when:

- a token is not an integer (an optional `+` or `-` followed by digits),
- a value lies outside the 32-bit signed integer range,
- a value appears more than once.

With no arguments, or with arguments that hold only spaces, it prints
nothing. The exit status is always 0.

## Strategy

Every item is first given its rank, its 1-based position in sorted order.

- Two items are swapped if they are out of order.
- Three items are put in order with at most two operations.
- Four and five items are reduced to the three-item case. One or two items
  go to `b` for a while and are then put back in place.
- Six or more items: the ranks are split into chunks. Each chunk is pushed
  to `b`, reaching each of its items by the cheaper rotation direction.
  The items are then pulled back to `a`, from the highest rank down.

## Library use

```python
from pushswap.sorting import solve

for op in solve([3, 1, 2]):
    print(op)
```

- `pushswap.stacks.Stacks` holds the two stacks as deques of
  `pushswap.stacks.Item` (top first), has one method per operation, and
  records every operation applied in its `moves` list. `a_values` and
  `b_values` give the values of each stack, and `is_sorted()` tells whether
  `a` is in order.
- `pushswap.args.parse_arguments` turns command-line tokens into a list of
  integers. It raises `pushswap.args.InputError` (a `ValueError`) when the
  input is invalid.
- `pushswap.sorting` also exposes the individual strategies: `sort_two`,
  `sort_three`, `sort_four`, `sort_five` and `chunk_sort`, with
  `assign_ranks` to set the ranks they rely on.

## What it does not do

The package only produces a sequence of operations. It has no command that
reads operations from standard input to check them against a list of
numbers, and it does not use combined operations that act on both stacks at
once.

## Tests

```
pip install .[test]
pytest
```