# pushswap

Sorts a list of integers using two stacks, `a` and `b`, and a fixed set of
instructions. It prints the instructions that sort the numbers, one per line.

The instructions are:

| Instruction | Effect |
|-------------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of `a`, `b`, or both |
| `pa`, `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate `a`, `b`, or both up: the top becomes the bottom |
| `rra`, `rrb`, `rrr` | rotate `a`, `b`, or both down: the bottom becomes the top |

The first number given is the top of stack `a`. The goal is `a` in ascending
order from top to bottom, with `b` empty.

## Installation

```
pip install .
```

## Command line

```
push-swap 3 2 1
```

prints

```
ra
sa
```

The same command can be run as `python -m pushswap.cli`.

Numbers may be given as separate arguments or inside one quoted argument
(`push-swap "4 67 3 87 23"`); all arguments are joined with spaces and split
again. Nothing is printed if the input is already sorted. Invalid input
prints one of these messages on standard output and exits with status 1:

- `Error. Invalid number of arguments.` when no arguments are given
- `Error. One or more arguments are not valid numbers.` when something is not a number
- `Error. There are duplicate numbers.` when a number appears twice
- `Error. A number is out of the valid range for an int.` when a number is outside the 32-bit signed range
- `Error. An unknown error occurred.` when the arguments hold no numbers at all

## Library

```python
from pushswap.sorting import push_swap
from pushswap.stacks import PushSwap, is_sorted
from pushswap.parsing import parse_arguments, InputError

numbers = parse_arguments(["5", "1 4", "2", "3"])
instructions = push_swap(numbers)
```

- `pushswap.stacks.PushSwap(numbers)` holds the lists `a` and `b` (first item
  is the top) and `ops`, the names of the instructions performed so far. Its
  methods `sa`, `sb`, `ss`, `pa`, `pb`, `ra`, `rb`, `rr`, `rra`, `rrb` and
  `rrr` perform one instruction each. An instruction is recorded even when the
  stack is too short for it to change anything; `ss` records `sa`, `sb` and
  then `ss`.
- `pushswap.stacks.is_sorted(values)` checks that a sequence is in
  non-decreasing order.
- `pushswap.parsing.parse_arguments(args)` validates the arguments and returns
  the numbers, raising `InputError` (a `ValueError`) whose `kind` is an
  `ErrorKind` when they are rejected. The checks it uses are also available:
  `join_arguments`, `split_words`, `check_digits`, `has_duplicates`,
  `exceeds_int`, `atoi` and `long_atoi`.
- `pushswap.sorting.push_swap(numbers)` returns the list of instructions.
  Three, four and five numbers are sorted by `sort_three`, `sort_four` and
  `sort_five`; two numbers with a single `sa`. Larger inputs go through
  `sort_big`, which pushes two numbers to `b`, then repeatedly brings the
  cheapest number of `a` and its place in `b` to the top (`cheapest_to_top`,
  using `find_target` and `move_cost`) and pushes it, and finally rotates the
  largest number of `b` to the top (`max_to_top`) and pushes everything back.
- `pushswap.cli.main(argv=None)` is the command; it returns the exit status.

## What it does not do

The package only produces instructions. It has no command that reads a list
of instructions and checks whether they sort a given input; to verify a
result, apply the instructions to a `PushSwap` and test `is_sorted(ps.a)` and
that `ps.b` is empty.

## Tests

```
pip install .[test]
pytest
```