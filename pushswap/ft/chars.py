"""ASCII character classification and case conversion.

Every function accepts either an integer character code or a
one-character string. The case converters return a value of the
same kind they were given.
"""

from __future__ import annotations

from typing import Union

Char = Union[int, str]

_UPPER_FIRST, _UPPER_LAST = ord("A"), ord("Z")
_LOWER_FIRST, _LOWER_LAST = ord("a"), ord("z")
_DIGIT_FIRST, _DIGIT_LAST = ord("0"), ord("9")
_CASE_OFFSET = _LOWER_FIRST - _UPPER_FIRST


def _code(ch: Char) -> int:
    if isinstance(ch, str):
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        return ord(ch)
    if isinstance(ch, bool) or not isinstance(ch, int):
        raise TypeError(f"expected a character code or a character, got {ch!r}")
    return ch


def _same_kind(original: Char, code: int) -> Char:
    return chr(code) if isinstance(original, str) else code


def is_digit(ch: Char) -> bool:
    """Return True for the ASCII digits 0 to 9."""
    return _DIGIT_FIRST <= _code(ch) <= _DIGIT_LAST


def is_alpha(ch: Char) -> bool:
    """Return True for ASCII letters."""
    code = _code(ch)
    return _UPPER_FIRST <= code <= _UPPER_LAST or _LOWER_FIRST <= code <= _LOWER_LAST


def is_alnum(ch: Char) -> bool:
    """Return True for ASCII letters and digits."""
    return is_alpha(ch) or is_digit(ch)


def is_ascii(ch: Char) -> bool:
    """Return True for codes 0 to 127."""
    return 0 <= _code(ch) <= 127


def is_print(ch: Char) -> bool:
    """Return True for printable ASCII characters, space included."""
    return 32 <= _code(ch) <= 126


def to_upper(ch: Char) -> Char:
    """Turn an ASCII lower-case letter into upper case; leave anything else."""
    code = _code(ch)
    if _LOWER_FIRST <= code <= _LOWER_LAST:
        code -= _CASE_OFFSET
    return _same_kind(ch, code)


def to_lower(ch: Char) -> Char:
    """Turn an ASCII upper-case letter into lower case; leave anything else."""
    code = _code(ch)
    if _UPPER_FIRST <= code <= _UPPER_LAST:
        code += _CASE_OFFSET
    return _same_kind(ch, code)