import string

import pytest

from pipeline_runner.chars import (
    atoi,
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    itoa,
    to_lower,
    to_upper,
)

ASCII_CHARS = [chr(code) for code in range(128)]


@pytest.mark.parametrize("number", [0, 7, -7, 123, -123, 2147483647, -2147483648])
def test_itoa_atoi_round_trip(number):
    assert atoi(itoa(number)) == number


def test_itoa_extremes_match_source_constant():
    assert itoa(-2147483648) == "-2147483648"


def test_atoi_skips_all_whitespace_kinds():
    assert atoi("\t\n\v\r\f 123") == 123


def test_atoi_stops_at_first_non_digit():
    assert atoi("  -42abc") == -42
    assert atoi("+99 100") == 99


@pytest.mark.parametrize("text", ["", "abc", "--5", "+-5", "- 5"])
def test_atoi_without_digits_is_zero(text):
    assert atoi(text) == 0


def test_itoa_rejects_non_integers():
    with pytest.raises(TypeError):
        itoa(1.5)


@pytest.mark.parametrize("char", ASCII_CHARS)
def test_classification_matches_ascii_sets(char):
    assert is_alpha(char) == (char in string.ascii_letters)
    assert is_digit(char) == (char in string.digits)
    assert is_alnum(char) == (char in string.ascii_letters + string.digits)
    assert is_print(char) == (char in string.printable and (char == " " or not char.isspace()))
    assert is_ascii(char)


def test_integer_codes_and_characters_agree():
    for char in ASCII_CHARS:
        assert is_alpha(ord(char)) == is_alpha(char)
        assert is_print(ord(char)) == is_print(char)


@pytest.mark.parametrize("code", [-1, 128, 255, 1000])
def test_is_ascii_rejects_out_of_range(code):
    assert is_ascii(code) is False


def test_case_conversion_of_letters():
    for lower, upper in zip(string.ascii_lowercase, string.ascii_uppercase):
        assert to_upper(lower) == upper
        assert to_lower(upper) == lower
        assert to_upper(ord(lower)) == ord(upper)
        assert to_lower(ord(upper)) == ord(lower)


@pytest.mark.parametrize("char", [c for c in ASCII_CHARS if c not in string.ascii_letters])
def test_case_conversion_leaves_non_letters(char):
    assert to_upper(char) == char
    assert to_lower(char) == char


def test_case_conversion_leaves_non_ascii_codes():
    assert to_upper(300) == 300
    assert to_lower(-5) == -5


@pytest.mark.parametrize("bad", ["ab", "", 1.0, None])
def test_bad_codes_raise(bad):
    with pytest.raises(TypeError):
        is_alpha(bad)