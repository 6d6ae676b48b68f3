"""Writing characters, strings and integers to a text stream."""

from __future__ import annotations

from typing import TextIO


def putchar_fd(c: str, stream: TextIO) -> None:
    """Write a single character to stream."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    stream.write(c)


def putstr_fd(s: str, stream: TextIO) -> None:
    """Write s to stream."""
    stream.write(s)


def putendl_fd(s: str, stream: TextIO) -> None:
    """Write s to stream followed by a newline."""
    stream.write(s)
    stream.write("\n")


def putnbr_fd(n: int, stream: TextIO) -> None:
    """Write the decimal form of n to stream."""
    stream.write(str(int(n)))