"""Stack elements and the bookkeeping the sorting algorithm relies on."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence


@dataclass
class Element:
    """A number on a stack with its rank, position and move costs."""

    value: int
    index: int = 0
    pos: int = 0
    target_pos: int = 0
    cost_a: int = 0
    cost_b: int = 0
    tc: int = 0


def make_elements(values: Iterable[int]) -> list[Element]:
    """Wrap each value in a fresh element, keeping their order."""
    return [Element(value) for value in values]


def assign_indices(elements: Sequence[Element]) -> None:
    """Give each element its rank among the values, starting at 1."""
    ranked = sorted(elements, key=lambda element: element.value)
    for rank, element in enumerate(ranked, start=1):
        element.index = rank


def assign_positions(elements: Sequence[Element]) -> None:
    """Set each element's position to its place in the stack, from 0."""
    for position, element in enumerate(elements):
        element.pos = position


def is_ordered(elements: Sequence[Element]) -> bool:
    """Return True if the indices never decrease from top to bottom."""
    return all(
        upper.index <= lower.index for upper, lower in zip(elements, elements[1:])
    )


def lowest_cost(elements: Sequence[Element]) -> Element:
    """Return the first element with the smallest total cost."""
    if not elements:
        raise ValueError("cannot pick the cheapest element of an empty stack")
    return min(elements, key=lambda element: element.tc)