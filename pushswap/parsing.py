"""Reading the initial stack from command-line arguments."""

from __future__ import annotations

from typing import Iterable, List

from .libft.chars import is_digit

INT_MIN = -2147483648
INT_MAX = 2147483647

_WHITESPACE = " \t\n\v\f\r"
_SIGNS = ("-", "+")


class InputError(ValueError):
    """The arguments do not describe a valid stack."""


def parse_int(text: str) -> int:
    """Read a leading, optionally signed decimal integer, like ``atoi``.

    Leading whitespace is skipped and reading stops at the first non-digit.
    Raises InputError if the value leaves the 32-bit signed range.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in _SIGNS:
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for char in rest:
        if not is_digit(char):
            break
        result = result * 10 + sign * int(char)
        if not INT_MIN <= result <= INT_MAX:
            raise InputError(f"integer out of range: {text!r}")
    return result


def split_arguments(args: Iterable[str]) -> List[str]:
    """Join the arguments with spaces and split them on spaces.

    Raises InputError if any argument is an empty string.
    """
    args = list(args)
    if any(arg == "" for arg in args):
        raise InputError("empty argument")
    return [token for token in " ".join(args).split(" ") if token]


def _is_number_token(token: str) -> bool:
    body = token[1:] if token[:1] in _SIGNS else token
    return bool(body) and all(is_digit(char) for char in body)


def parse_stack(args: Iterable[str]) -> List[int]:
    """Turn the arguments into the list of values of stack ``a``, top first.

    Raises InputError for non-numeric tokens, out-of-range values,
    duplicates and empty arguments.
    """
    tokens = split_arguments(args)
    for token in tokens:
        if not _is_number_token(token):
            raise InputError(f"not an integer: {token!r}")
    values: List[int] = []
    seen = set()
    for token in tokens:
        number = parse_int(token)
        if number in seen:
            raise InputError(f"duplicate value: {number}")
        seen.add(number)
        values.append(number)
    return values