"""Choosing a place in stack a for each element of b and pricing the moves."""

from __future__ import annotations

from typing import Sequence

from pushswap.stack import Element


def find_target(a: Sequence[Element], index: int, size: int) -> int:
    """Return the position in a where an element of rank index belongs.

    That is the element with the next larger rank up to size, or, when
    none is larger, the element with the smallest rank.
    """
    larger = [element for element in a if index < element.index <= size]
    if larger:
        return min(larger, key=lambda element: element.index).pos
    smaller = [element for element in a if 1 <= element.index < index]
    if smaller:
        return min(smaller, key=lambda element: element.index).pos
    raise ValueError(f"no target for rank {index} in stack a")


def total_cost(cost_a: int, cost_b: int) -> int:
    """Return the number of rotations both costs take together."""
    return abs(cost_a) + abs(cost_b)


def _rotation_cost(pos: int, length: int) -> int:
    if pos <= length // 2:
        return pos
    return -(length - pos)


def compute_costs(a: Sequence[Element], b: Sequence[Element]) -> None:
    """Set cost_a, cost_b and tc on every element of b.

    Positive costs are rotations, negative ones reverse rotations.
    """
    for element in b:
        element.cost_b = _rotation_cost(element.pos, len(b))
        for target in a:
            if target.pos == element.target_pos:
                element.cost_a = _rotation_cost(target.pos, len(a))
        element.tc = total_cost(element.cost_a, element.cost_b)


def update_costs(a: Sequence[Element], b: Sequence[Element]) -> None:
    """Find each element's target in a, then price its move."""
    size = len(a) + len(b)
    for element in b:
        element.target_pos = find_target(a, element.index, size)
    compute_costs(a, b)