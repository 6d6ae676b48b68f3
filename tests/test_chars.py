import string

import pytest

from pushswap.ft.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("ch", list(string.digits))
def test_digits_are_digits(ch):
    assert is_digit(ch) is True
    assert is_digit(ord(ch)) is True


@pytest.mark.parametrize("ch", ["/", ":", "a", " ", "\x00"])
def test_non_digits(ch):
    assert is_digit(ch) is False


@pytest.mark.parametrize("ch", list(string.ascii_letters))
def test_letters_are_alpha(ch):
    assert is_alpha(ch) is True


@pytest.mark.parametrize("ch", ["@", "[", "`", "{", "5", "é"])
def test_letter_boundaries_are_not_alpha(ch):
    assert is_alpha(ch) is False


def test_alnum_is_union_of_alpha_and_digit():
    for code in range(256):
        assert is_alnum(code) == (is_alpha(code) or is_digit(code))


def test_ascii_range_boundaries():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_print_range_boundaries():
    assert is_print(31) is False
    assert is_print(" ") is True
    assert is_print("~") is True
    assert is_print(127) is False


def test_printable_characters_are_ascii():
    for code in range(-5, 300):
        if is_print(code):
            assert is_ascii(code)


def test_to_upper_maps_lowercase_alphabet():
    assert "".join(to_upper(c) for c in string.ascii_lowercase) == string.ascii_uppercase


def test_to_lower_maps_uppercase_alphabet():
    assert "".join(to_lower(c) for c in string.ascii_uppercase) == string.ascii_lowercase


def test_case_round_trip_on_codes():
    for c in string.ascii_lowercase:
        assert to_lower(to_upper(ord(c))) == ord(c)


@pytest.mark.parametrize("ch", list(string.digits + string.punctuation + " "))
def test_non_letters_unchanged(ch):
    assert to_upper(ch) == ch
    assert to_lower(ch) == ch


def test_case_conversion_keeps_kind():
    assert isinstance(to_upper(ord("q")), int)
    assert to_upper(ord("q")) == ord("Q")
    assert to_lower("Q") == "q"


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_non_character_rejected():
    with pytest.raises(TypeError):
        is_digit(1.5)