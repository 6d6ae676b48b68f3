"""Turning program arguments into a checked list of integers."""

from __future__ import annotations

from typing import Iterable, Sequence

from pushswap.ft.strings import atoi, split

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_SIGNS = ("+", "-")


class ParseError(ValueError):
    """Raised when the arguments are not a valid list of integers."""


def to_long(text: str) -> int:
    """Read a decimal integer after optional whitespace and one optional sign."""
    return atoi(text)


def is_numeric_word(word: str) -> bool:
    """Return True if word is an optional sign followed only by digits.

    A sign on its own is not a number.
    """
    body = word[1:] if word[:1] in _SIGNS and len(word) > 1 else word
    return all("0" <= ch <= "9" for ch in body)


def has_duplicates(values: Iterable[int]) -> bool:
    """Return True if any value occurs more than once."""
    seen: set[int] = set()
    for value in values:
        if value in seen:
            return True
        seen.add(value)
    return False


def parse_values(args: Sequence[str]) -> list[int]:
    """Read the integers held in args, each argument split on spaces.

    Every word must be numeric and fit in a 32-bit signed integer;
    otherwise ParseError is raised. Duplicates are not checked here.
    """
    values: list[int] = []
    for arg in args:
        words = split(arg, " ")
        for word in words:
            if not is_numeric_word(word):
                raise ParseError(f"not an integer: {word!r}")
        for word in words:
            value = to_long(word)
            if not INT_MIN <= value <= INT_MAX:
                raise ParseError(f"integer out of range: {word!r}")
            values.append(value)
    return values