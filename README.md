# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a fixed
set of moves. It prints each move it makes, one per line, so that replaying
them sorts the numbers in stack `a` in ascending order with the smallest on top.

## Installing

```
pip install .
```

## Running

```
push_swap 3 2 1
push_swap "4 67 3 87 23"
```

The numbers may be given as separate arguments, as one argument holding
numbers separated by spaces, or as a mix of both. The first number given is
the top of stack `a`.

Output for `push_swap 3 2 1`:

```
ra
sa
```

When moves are printed the command exits with status 0.

### Exit status and errors

- No arguments: nothing is printed, exit status 1.
- First argument empty: `Error` is written to standard error, exit status 0.
- A word that is not an optionally signed run of digits, a number that does
  not fit in a 32-bit signed integer, or a number given more than once:
  `Error` is written to standard error, exit status 1.
- Input that is already sorted, or a single number: nothing is printed,
  exit status 1.

## Moves

| Move  | Effect                                              |
|-------|-----------------------------------------------------|
| `sa`  | swap the top two elements of `a`                    |
| `sb`  | swap the top two elements of `b`                    |
| `ss`  | `sa` and `sb` together                              |
| `pa`  | move the top of `b` onto `a`                        |
| `pb`  | move the top of `a` onto `b`                        |
| `ra`  | rotate `a` up: the top element becomes the last     |
| `rb`  | rotate `b` up                                       |
| `rr`  | `ra` and `rb` together                              |
| `rra` | rotate `a` down: the last element becomes the top   |
| `rrb` | rotate `b` down                                     |
| `rrr` | `rra` and `rrb` together                            |

## Using it from Python

```python
from pushswap.solver import solve

moves = solve([3, 2, 1])   # [Move.RA, Move.SA]
print("\n".join(str(move) for move in moves))
```

`solve` returns a list of `pushswap.moves.Move` values, an empty list for
input that is already in order, and raises `pushswap.parsing.ParseError` if a
value appears twice. It does not check the 32-bit range; that is done by
`pushswap.parsing.parse_values`, which turns command-line style arguments
into integers and raises `ParseError` on bad words or out-of-range numbers.

`pushswap.moves.Stacks` holds the two stacks of `pushswap.stack.Element`
objects; its methods `sa`, `pb`, `rra` and the rest, or `apply(move)`,
perform a move and record it in `history`.

The steps of the algorithm are available on their own in `pushswap.solver`
(`order_three`, `first_push`, `execute_cheapest`, `final_order`) and
`pushswap.cost` (`find_target`, `compute_costs`, `update_costs`,
`total_cost`).

## Helpers

`pushswap.ft` holds small general helpers used by the package:

- `pushswap.ft.chars`: ASCII classification and case conversion
  (`is_digit`, `is_alpha`, `to_upper`, ...).
- `pushswap.ft.strings`: string searching, copying, splitting and
  number conversion (`split`, `atoi`, `itoa`, `strlcpy`, ...).
- `pushswap.ft.memory`: byte-buffer helpers on `bytearray`
  (`memset`, `memcpy`, `memmove`, `memcmp`, ...).
- `pushswap.ft.output`: writing characters, strings and integers to a
  text stream.
- `pushswap.ft.linked_list`: a singly linked list (`LinkedList`, `Node`).

## What it does not do

There is no checker: the package does not read a list of moves and verify
that it sorts a given input. It only produces moves.

## Tests

```
pip install ".[test]"
pytest
```