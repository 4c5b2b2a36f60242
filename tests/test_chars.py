import string

import pytest

from pushswap.libft.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)

CODES = range(-5, 300)


def test_is_alpha_matches_ascii_letters():
    for code in CODES:
        expected = 0 <= code < 128 and chr(code) in string.ascii_letters
        assert is_alpha(code) == expected


def test_is_digit_matches_ascii_digits():
    for code in CODES:
        expected = 0 <= code < 128 and chr(code) in string.digits
        assert is_digit(code) == expected


def test_is_alnum_is_union():
    for code in CODES:
        assert is_alnum(code) == (is_alpha(code) or is_digit(code))


def test_is_ascii_bounds():
    assert is_ascii(0)
    assert is_ascii(127)
    assert not is_ascii(128)
    assert not is_ascii(-1)


def test_is_print_matches_printable_without_controls():
    printable = set(string.printable) - set(string.whitespace) | {" "}
    for code in CODES:
        expected = 0 <= code < 128 and chr(code) in printable
        assert is_print(code) == expected


def test_case_mapping_round_trip():
    for upper, lower in zip(string.ascii_uppercase, string.ascii_lowercase):
        assert to_lower(ord(upper)) == ord(lower)
        assert to_upper(ord(lower)) == ord(upper)
        assert to_upper(to_lower(ord(upper))) == ord(upper)


@pytest.mark.parametrize("code", [ord("1"), ord("@"), ord("["), ord("`"), ord("{"), 200, -3])
def test_case_mapping_leaves_other_codes(code):
    assert to_lower(code) == code
    assert to_upper(code) == code


def test_accepts_single_character_strings():
    assert is_digit("7")
    assert not is_digit("x")
    assert is_alpha("Q")
    assert to_lower("Q") == ord("q")
    assert not is_ascii("é")