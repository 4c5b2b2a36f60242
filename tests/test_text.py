import pytest

from pushswap.libft.text import (
    atoi,
    duplicate,
    iter_indexed,
    itoa,
    join,
    map_indexed,
    split,
    substring,
    trim,
)


@pytest.mark.parametrize("number", [0, 7, -7, 42, -2147483648, 2147483647, 1000])
def test_itoa_atoi_round_trip(number):
    assert atoi(itoa(number)) == number


def test_itoa_int_min():
    assert itoa(-2147483648) == "-2147483648"


def test_atoi_skips_whitespace_and_stops_at_non_digit():
    assert atoi(" \t\n  -42abc") == -42
    assert atoi("+17 99") == 17


def test_atoi_no_digits_gives_zero():
    assert atoi("abc") == 0
    assert atoi("-") == 0
    assert atoi("") == 0


def test_atoi_double_sign_is_not_a_number():
    assert atoi("--5") == 0


def test_atoi_long_long_overflow():
    assert atoi("9223372036854775808") == -1
    assert atoi("-9223372036854775809") == 0


def test_atoi_wraps_to_32_bits():
    assert atoi("2147483648") == -2147483648


def test_split_drops_empty_parts():
    assert split("  hello  world ", " ") == ["hello", "world"]
    assert split("", " ") == []
    assert split("   ", " ") == []


def test_split_parts_contain_no_separator():
    parts = split("a,,b,c,,,d", ",")
    assert all("," not in part and part for part in parts)
    assert "".join(parts) == "abcd"


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("abc", "ab")


def test_join():
    assert join("push", "_swap") == "push_swap"
    assert join("", "") == ""


def test_trim():
    assert trim("xxhixx", "x") == "hi"
    assert trim("xyx", "xy") == ""
    assert trim(" keep ", "") == " keep "
    assert trim("", "x") == ""


def test_substring():
    assert substring("push_swap", 5, 4) == "swap"
    assert substring("push_swap", 5, 100) == "swap"
    assert substring("push_swap", 9, 3) == ""
    assert substring("push_swap", 0, 0) == ""


def test_substring_negative():
    with pytest.raises(ValueError):
        substring("abc", -1, 2)


def test_duplicate():
    assert duplicate("text") == "text"


def test_iter_indexed_replaces_in_place():
    chars = list("abc")
    seen = []

    def visit(index, char):
        seen.append((index, char))
        return char.upper() if index % 2 == 0 else None

    iter_indexed(chars, visit)
    assert seen == [(0, "a"), (1, "b"), (2, "c")]
    assert chars == ["A", "b", "C"]


def test_map_indexed():
    assert map_indexed("abcd", lambda i, c: c.upper() if i % 2 else c) == "aBcD"
    assert map_indexed("", lambda i, c: c) == ""


def test_map_indexed_preserves_length():
    text = "push_swap"
    assert len(map_indexed(text, lambda i, c: "*")) == len(text)