# pushswap

A solver for the *push_swap* puzzle. You start with a list of distinct integers
on stack **a** and an empty stack **b**. You may change the stacks only with
these operations:

| Op    | Effect                                              |
|-------|-----------------------------------------------------|
| `sa`  | swap the top two elements of a                      |
| `sb`  | swap the top two elements of b                      |
| `ss`  | `sa` and `sb` together                              |
| `pa`  | move the top of b onto a                            |
| `pb`  | move the top of a onto b                            |
| `ra`  | rotate a upwards (the top goes to the bottom)       |
| `rb`  | rotate b upwards                                    |
| `rr`  | `ra` and `rb` together                              |
| `rra` | rotate a downwards (the bottom comes to the top)    |
| `rrb` | rotate b downwards                                  |
| `rrr` | `rra` and `rrb` together                            |

The goal is to leave a sorted in ascending order, with the smallest element on
top, using few operations. The solver pushes elements to b until three remain
in a. Each time it picks the element that needs the fewest rotations to reach
its place. It then sorts the remaining three directly and brings every element
of b back into place in a. Finally it rotates a so that the smallest value is
on top.

## Installation

```
pip install .
```

## Command line

Pass the numbers as separate arguments or as one quoted string:

```
push_swap 3 2 1
push_swap "4 67 3 87 23"
```

The operations are printed one per line on standard output. If the input is
already sorted, nothing is printed. The program writes `error` to standard
error and exits with status 1 in these cases:

- no arguments are given, or the single argument holds no numbers,
- an argument is not an integer (one optional sign, then digits only),
- a value is outside the 32-bit signed range,
- a value appears more than once.

## Library use

```python
from pushswap.sorter import solve
from pushswap.stack import Stacks

ops = solve([3, 2, 1])
print([op.value for op in ops])   # ['ra', 'sa']

stacks = Stacks([3, 2, 1], [])
for op in ops:
    stacks.execute(op)
print(list(stacks.a))  # [1, 2, 3]
```

- `pushswap.stack` holds `Op`, the eleven operations, and `Stacks`, the two
  stacks as deques with top first. Each operation is also a method
  (`Stacks.sa()`, `Stacks.pb()`, ...). `Stacks.execute` accepts an `Op` or its
  name. Every method returns whether the operation took effect. Operations that
  change something are recorded in `Stacks.ops`.
- `pushswap.sorter.solve` returns the list of `Op` that sorts its input. It
  raises `PushSwapError` when a value is repeated.
- `pushswap.parsing.parse_arguments` turns command-line style arguments into a
  list of integers. It raises `PushSwapError` on bad input.
- `pushswap.costs` prices the four rotation strategies for moving one value
  between the stacks.

## What it does not do

There is no command that reads operations from standard input and checks
whether they sort a given list. To verify a sequence, apply it with
`Stacks.execute` and inspect the stacks.

## Running the tests

```
pip install ".[test]"
pytest
```