import string

import pytest

from booktracker.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)

ALL_CODES = range(0, 256)


@pytest.mark.parametrize("code", ALL_CODES)
def test_is_alpha_matches_ascii_letters(code):
    assert is_alpha(code) == (chr(code) in string.ascii_letters)


@pytest.mark.parametrize("code", ALL_CODES)
def test_is_digit_matches_ascii_digits(code):
    assert is_digit(code) == (chr(code) in string.digits)


@pytest.mark.parametrize("code", ALL_CODES)
def test_is_alnum_is_union_of_alpha_and_digit(code):
    assert is_alnum(code) == (is_alpha(code) or is_digit(code))


@pytest.mark.parametrize("code", ALL_CODES)
def test_is_print_matches_printable_range(code):
    expected = chr(code) in string.printable and chr(code) not in "\t\n\r\x0b\x0c"
    assert is_print(code) == expected


def test_is_ascii_bounds():
    assert is_ascii(0)
    assert is_ascii(127)
    assert not is_ascii(128)
    assert not is_ascii(-1)


def test_string_and_int_agree():
    for ch in "aZ5 ~\x1f":
        assert is_alpha(ch) == is_alpha(ord(ch))
        assert is_print(ch) == is_print(ord(ch))


def test_source_samples():
    assert not is_alpha(123)
    assert not is_digit(58)
    assert not is_alnum(47)
    assert not is_print(31)


@pytest.mark.parametrize("ch", string.ascii_lowercase)
def test_to_upper_letters(ch):
    assert to_upper(ch) == ch.upper()
    assert to_upper(ord(ch)) == ord(ch.upper())


@pytest.mark.parametrize("ch", string.ascii_uppercase)
def test_to_lower_letters(ch):
    assert to_lower(ch) == ch.lower()
    assert to_lower(ord(ch)) == ord(ch.lower())


@pytest.mark.parametrize("ch", list(string.digits + string.punctuation + " é"))
def test_case_conversion_leaves_others_alone(ch):
    assert to_upper(ch) == ch
    assert to_lower(ch) == ch


@pytest.mark.parametrize("ch", string.ascii_letters)
def test_case_round_trip(ch):
    assert to_lower(to_upper(ch)) == ch.lower()
    assert to_upper(to_lower(ch)) == ch.upper()


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_upper("")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        is_digit(1.5)