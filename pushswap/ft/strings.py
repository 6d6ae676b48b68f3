"""String helpers: searching, copying, joining, splitting and number conversion.

Positions are returned as indices, or None where nothing was found.
Functions that fill a bounded buffer return the text that would end up
in the buffer together with the length they report.
"""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, Tuple

_WHITESPACE = "\t\n\v\f\r "
_TERMINATOR = "\0"


def _single_char(c: str) -> str:
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strlen(s: str) -> int:
    """Return the number of characters in s."""
    return len(s)


def strchr(s: str, c: str) -> Optional[int]:
    """Return the index of the first c in s, or None.

    Searching for the terminator "\\0" finds the end of the string.
    """
    if _single_char(c) == _TERMINATOR:
        return len(s)
    index = s.find(c)
    return None if index < 0 else index


def strrchr(s: str, c: str) -> Optional[int]:
    """Return the index of the last c in s, or None.

    Searching for the terminator "\\0" finds the end of the string.
    """
    if _single_char(c) == _TERMINATOR:
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters; return the code difference of the first mismatch."""
    _check_non_negative("n", n)
    for position in range(n):
        left = ord(s1[position]) if position < len(s1) else 0
        right = ord(s2[position]) if position < len(s2) else 0
        if left != right or left == 0:
            return left - right
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Return the index of needle within the first length characters of haystack, or None."""
    _check_non_negative("length", length)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy src into a buffer of size characters, terminator included.

    Returns the copied text and the full length of src.
    """
    _check_non_negative("size", size)
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dest: str, src: str, destsize: int) -> Tuple[str, int]:
    """Append src to dest inside a buffer of destsize characters, terminator included.

    Returns the resulting text and the length the full concatenation
    would have had (bounded on the dest side by destsize).
    """
    _check_non_negative("destsize", destsize)
    dest_len = min(len(dest), destsize)
    if dest_len >= destsize:
        return dest, dest_len + len(src)
    room = destsize - dest_len - 1
    return dest + src[:room], dest_len + len(src)


def strdup(s: str) -> str:
    """Return a copy of s."""
    return "".join(s)


def substr(s: str, start: int, length: int) -> str:
    """Return at most length characters of s starting at start."""
    _check_non_negative("start", start)
    _check_non_negative("length", length)
    if start > len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return s1 followed by s2."""
    return s1 + s2


def strtrim(s1: str, charset: str) -> str:
    """Remove characters found in charset from both ends of s1."""
    return s1.strip(charset) if charset else s1


def split(s: str, sep: str) -> list[str]:
    """Split s on the character sep, dropping empty pieces."""
    return [word for word in s.split(_single_char(sep)) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Return the string built from f(index, char) for every character of s."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(s: MutableSequence[str], f: Callable[[int, str], Optional[str]]) -> None:
    """Call f(index, char) for every character of s in place.

    A value returned by f replaces the character; None leaves it as it is.
    """
    for index, ch in enumerate(s):
        replacement = f(index, ch)
        if replacement is not None:
            s[index] = replacement


def atoi(s: str) -> int:
    """Read a decimal integer after optional whitespace and one optional sign.

    Reading stops at the first non-digit; no digits give 0.
    """
    text = s.lstrip(_WHITESPACE)
    sign = 1
    if text[:1] in ("+", "-"):
        if text[0] == "-":
            sign = -1
        text = text[1:]
    result = 0
    for ch in text:
        if not "0" <= ch <= "9":
            break
        result = result * 10 + (ord(ch) - ord("0"))
    return sign * result


def itoa(n: int) -> str:
    """Return the decimal form of n."""
    return str(int(n))