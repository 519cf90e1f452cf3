# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a small
set of operations. It then prints the operations it used, one per line.

## Operations

| Move  | Effect                                          |
|-------|-------------------------------------------------|
| `sa`  | swap the top two elements of `a`                |
| `sb`  | swap the top two elements of `b`                |
| `ss`  | `sa` and `sb` together                          |
| `pa`  | move the top of `b` onto `a`                    |
| `pb`  | move the top of `a` onto `b`                    |
| `ra`  | rotate `a` up: the top element goes to bottom   |
| `rb`  | rotate `b` up                                   |
| `rr`  | `ra` and `rb` together                          |
| `rra` | rotate `a` down: the bottom element goes to top |
| `rrb` | rotate `b` down                                 |
| `rrr` | `rra` and `rrb` together                        |

A swap on a stack with fewer than two elements does nothing. A push from an
empty stack also does nothing.

## Command line

Install the package and run `push_swap`. You can give the numbers as separate
arguments or as one space-separated string. The first number is the top of
stack `a`.

```
$ push_swap 2 1 3
sa
$ push_swap "3 2 1"
ra
sa
```

The same command is available as `python -m pushswap.cli`.

An input that is already sorted prints nothing and exits with status 0. With no
arguments, or with a single empty argument, the command prints nothing and
exits with status 1.

Any invalid input prints `Error` to standard error and exits with status 1.
Input is invalid if it contains any of these:

- a value that is not an optional `+` or `-` followed only by digits,
- a value outside the 32-bit signed integer range,
- a duplicated value.

Sorting strategy:

- Two values are sorted with `sa`.
- Three values are sorted with at most two moves.
- Larger inputs use a cost-driven strategy. It moves the cheapest element from
  `a` to `b` until three remain in `a`, sorts those three, and pushes everything
  back. Finally it rotates the smallest value to the top.

## Library

```python
from pushswap.sorter import solve

moves = solve([5, 1, 4, 2, 3])
```

- `pushswap.sorter.solve` returns the list of move names.
- `pushswap.stack.Machine` holds the two stacks (`a` and `b`) and exposes each
  move as a method of the same name. It records every move applied in
  `Machine.moves`.
- `pushswap.stack.Stack` is a single stack of `Node` objects, with its top first.
- `pushswap.parsing.parse_arguments` validates command-line style arguments. It
  returns the integers or raises `InputError`, a `ValueError`.

There is no checker: the package produces moves but does not read a list of
moves back to verify them.

## Tests

```
pip install .[test]
pytest
```