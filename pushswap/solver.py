"""Sorting stack a with the fewest moves the cost heuristic can find."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, Sequence

from pushswap.cost import update_costs
from pushswap.ft.output import putendl_fd, putstr_fd
from pushswap.moves import Move, Stacks
from pushswap.parsing import ParseError, has_duplicates, parse_values
from pushswap.stack import (
    Element,
    assign_indices,
    is_ordered,
    lowest_cost,
    make_elements,
)

_ERROR = "Error\n"


def order_three(stacks: Stacks) -> None:
    """Sort the three elements of stack a with at most two moves."""
    if len(stacks.a) != 3:
        raise ValueError("stack a must hold exactly three elements")
    first, second, third = stacks.a
    if first.index > second.index and first.index > third.index:
        stacks.ra()
    elif second.index > first.index and second.index > third.index:
        stacks.rra()
    if not is_ordered(stacks.a):
        stacks.sa()


def first_push(stacks: Stacks) -> None:
    """Push all but three elements of a onto b, the smaller half first."""
    size = len(stacks.a)
    half = (size + 1) // 2
    while size > 3 and half < size:
        if stacks.a[0].index <= half:
            stacks.pb()
            size -= 1
        else:
            stacks.ra()
    while size > 3:
        stacks.pb()
        size -= 1


def final_order(stacks: Stacks) -> None:
    """Rotate a the short way round until its smallest element is on top."""
    smallest = next(
        (element for element in stacks.a if element.index == 1), None
    )
    if smallest is None:
        raise ValueError("stack a holds no element of rank 1")
    rotate = stacks.ra if smallest.pos <= len(stacks.a) // 2 else stacks.rra
    while smallest.pos != 0:
        rotate()


def _bring_to_top(stacks: Stacks, target: Element, cheapest: Element) -> None:
    cost_a, cost_b = cheapest.cost_a, cheapest.cost_b
    if cost_b < 0 and cost_a < 0:
        while cheapest.pos != 0 and target.pos != 0:
            stacks.rrr()
        while cheapest.pos != 0:
            stacks.rrb()
        while target.pos != 0:
            stacks.rra()
    elif cost_b < 0 and cost_a > 0:
        while cheapest.pos != 0:
            stacks.rrb()
        while target.pos != 0:
            stacks.ra()
    elif cost_b > 0 and cost_a < 0:
        while target.pos != 0:
            stacks.rra()
        while cheapest.pos != 0:
            stacks.rb()
    elif cost_b > 0 and cost_a > 0:
        while cheapest.pos != 0 and target.pos != 0:
            stacks.rr()
        while target.pos != 0:
            stacks.ra()
        while cheapest.pos != 0:
            stacks.rb()
    else:
        rotate_a = stacks.rra if cost_a < 0 else stacks.ra
        while target.pos != 0:
            rotate_a()
        rotate_b = stacks.rrb if cost_b < 0 else stacks.rb
        while cheapest.pos != 0:
            rotate_b()


def execute_cheapest(stacks: Stacks) -> None:
    """Price every element of b, bring the cheapest and its target up, then pa."""
    if not stacks.b:
        raise ValueError("stack b is empty")
    update_costs(stacks.a, stacks.b)
    cheapest = lowest_cost(stacks.b)
    target = next(
        element for element in stacks.a if element.pos == cheapest.target_pos
    )
    _bring_to_top(stacks, target, cheapest)
    stacks.pa()


def _prepare(values: Sequence[int]) -> Stacks:
    elements = make_elements(values)
    assign_indices(elements)
    return Stacks(elements)


def _needs_sorting(stacks: Stacks) -> bool:
    return len(stacks.a) > 1 and not is_ordered(stacks.a)


def _sort(stacks: Stacks) -> None:
    if len(stacks.a) == 2:
        stacks.sa()
    elif len(stacks.a) == 3:
        order_three(stacks)
    else:
        first_push(stacks)
        order_three(stacks)
    while stacks.b:
        execute_cheapest(stacks)
    final_order(stacks)


def solve(values: Iterable[int]) -> list[Move]:
    """Return the moves that sort values in ascending order onto stack a.

    Already ordered input needs no moves. Duplicates raise ParseError.
    """
    values = list(values)
    if has_duplicates(values):
        raise ParseError("duplicate values")
    stacks = _prepare(values)
    if not _needs_sorting(stacks):
        return []
    _sort(stacks)
    return list(stacks.history)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read the numbers from the arguments and print the moves that sort them."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 1
    if args[0] == "":
        putstr_fd(_ERROR, sys.stderr)
        return 0
    try:
        values = parse_values(args)
    except ParseError:
        putstr_fd(_ERROR, sys.stderr)
        return 1
    if has_duplicates(values):
        putstr_fd(_ERROR, sys.stderr)
        return 1
    stacks = _prepare(values)
    if not _needs_sorting(stacks):
        return 1
    _sort(stacks)
    for move in stacks.history:
        putendl_fd(move.value, sys.stdout)
    return 0