# pushswap

Sort a list of integers using two stacks, `a` and `b`, and a small set of
instructions. The package has two commands: `push-swap` prints a sequence of
instructions that sorts the numbers, and `push-swap-checker` checks whether a
given sequence really sorts them.

## Instructions

| Instruction | Effect |
|-------------|--------|
| `sa` / `sb` / `ss` | swap the top two items of `a` / `b` / both |
| `pa` / `pb` | move the top of `b` onto `a` / the top of `a` onto `b` |
| `ra` / `rb` / `rr` | rotate `a` / `b` / both up by one (top goes to bottom) |
| `rra` / `rrb` / `rrr` | rotate `a` / `b` / both down by one (bottom goes to top) |

An instruction that cannot act (swapping fewer than two items, pushing from an
empty stack, rotating fewer than two items) leaves the stack unchanged.

## Installation

```
pip install .
```

## Producing instructions

Pass the numbers as arguments. The first one is the top of stack `a`.
Several numbers may share one argument, separated by spaces:

```
push-swap 3 2 1
push-swap "4 67 3" 87 23
```

Each instruction is printed on its own line. Nothing is printed when the
input is already in ascending order or when no arguments are given.

Up to five numbers are sorted with dedicated short strategies. Larger inputs
are moved to `b` in chunks of ranks (15 wide for up to 100 numbers, 35 wide
above that) and then brought back to `a` largest first.

Input is rejected with `Error` on standard error and exit status 1 if an
argument holds no digit, a token is not a whole number (an optional `+` or
`-` followed by digits), a value falls outside the 32-bit signed range, or a
value appears twice.

## Checking instructions

`push-swap-checker` takes the same arguments and reads instructions from
standard input, one per line:

```
push-swap 5 1 4 2 3 | push-swap-checker 5 1 4 2 3
```

It prints `OK` if the instructions leave `a` in ascending order and `b`
empty, `KO` otherwise. Bad arguments, an unknown instruction, or a line not
ended by a newline make it print `Error` on standard error and exit with
status 1. With no arguments it prints nothing.

## Using it from Python

```python
from pushswap.sorting import plan_moves
from pushswap.checker import run_checker

moves = plan_moves([3, 2, 1])
print([move.value for move in moves])                   # ['ra', 'sa']

print(run_checker(["3", "2", "1"], ["sa\n", "rra\n"]))  # True
```

The modules:

- `pushswap.stacks`: `Move` (the eleven instructions), `Item`, and `Stacks`,
  which holds both stacks, applies moves with `apply` and records them in
  `history`.
- `pushswap.parsing`: `parse_arguments` validates arguments and returns the
  numbers; invalid input raises `InputError`. `index_values` ranks numbers.
- `pushswap.sorting`: `plan_moves` returns the moves that sort a list, and
  `sort` sorts a `Stacks` in place.
- `pushswap.cli`: `solve` and the `push-swap` command.
- `pushswap.checker`: `parse_instruction`, `run_checker` and the
  `push-swap-checker` command.

Running the tests:

```
pip install .[test]
pytest
```