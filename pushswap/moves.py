"""The eleven stack operations and a pair of stacks that records them."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Iterable, Optional

from pushswap.stack import Element, assign_positions


class Move(str, Enum):
    """An operation on the two stacks, named as it is printed."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


def _swap(stack: list[Element]) -> None:
    if len(stack) > 1:
        stack[0], stack[1] = stack[1], stack[0]


def _push(src: list[Element], dest: list[Element]) -> None:
    if src:
        dest.insert(0, src.pop(0))


def _rotate(stack: list[Element]) -> None:
    if len(stack) > 1:
        stack.append(stack.pop(0))


def _reverse(stack: list[Element]) -> None:
    if len(stack) > 1:
        stack.insert(0, stack.pop())


def _both(
    action: Callable[[list[Element]], None], a: list[Element], b: list[Element]
) -> None:
    if a and b:
        action(a)
        action(b)


_ACTIONS: dict[Move, Callable[["Stacks"], None]] = {
    Move.SA: lambda s: _swap(s.a),
    Move.SB: lambda s: _swap(s.b),
    Move.SS: lambda s: _both(_swap, s.a, s.b),
    Move.PA: lambda s: _push(s.b, s.a),
    Move.PB: lambda s: _push(s.a, s.b),
    Move.RA: lambda s: _rotate(s.a),
    Move.RB: lambda s: _rotate(s.b),
    Move.RR: lambda s: _both(_rotate, s.a, s.b),
    Move.RRA: lambda s: _reverse(s.a),
    Move.RRB: lambda s: _reverse(s.b),
    Move.RRR: lambda s: _both(_reverse, s.a, s.b),
}


class Stacks:
    """Stacks a and b, top first, with the moves applied so far."""

    def __init__(
        self,
        a: Optional[Iterable[Element]] = None,
        b: Optional[Iterable[Element]] = None,
    ) -> None:
        self.a: list[Element] = list(a or [])
        self.b: list[Element] = list(b or [])
        self.history: list[Move] = []
        assign_positions(self.a)
        assign_positions(self.b)

    def apply(self, move: Move | str) -> None:
        """Perform move, refresh positions and record it.

        A move that has nothing to act on leaves the stacks unchanged
        but is still recorded.
        """
        move = Move(move)
        _ACTIONS[move](self)
        assign_positions(self.a)
        assign_positions(self.b)
        self.history.append(move)

    def sa(self) -> None:
        """Swap the top two elements of a."""
        self.apply(Move.SA)

    def sb(self) -> None:
        """Swap the top two elements of b."""
        self.apply(Move.SB)

    def ss(self) -> None:
        """Swap the top two of both stacks."""
        self.apply(Move.SS)

    def pa(self) -> None:
        """Move the top of b onto a."""
        self.apply(Move.PA)

    def pb(self) -> None:
        """Move the top of a onto b."""
        self.apply(Move.PB)

    def ra(self) -> None:
        """Rotate a so its top goes to the bottom."""
        self.apply(Move.RA)

    def rb(self) -> None:
        """Rotate b so its top goes to the bottom."""
        self.apply(Move.RB)

    def rr(self) -> None:
        """Rotate both stacks."""
        self.apply(Move.RR)

    def rra(self) -> None:
        """Rotate a so its bottom comes to the top."""
        self.apply(Move.RRA)

    def rrb(self) -> None:
        """Rotate b so its bottom comes to the top."""
        self.apply(Move.RRB)

    def rrr(self) -> None:
        """Reverse-rotate both stacks."""
        self.apply(Move.RRR)