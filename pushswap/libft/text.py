"""String helpers: number conversion, splitting, joining, trimming, mapping."""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional

_WHITESPACE = " \t\n\v\f\r"
_LLONG_MIN = -(2**63)
_LLONG_MAX = 2**63 - 1


def _to_int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def atoi(text: str) -> int:
    """Read a leading, optionally signed decimal integer.

    Leading whitespace is skipped and reading stops at the first non-digit.
    If the value leaves the 64-bit signed range, 0 is returned for a negative
    number and -1 for a positive one. Otherwise the result is wrapped to a
    32-bit signed integer.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for char in rest:
        if not "0" <= char <= "9":
            break
        result = result * 10 + sign * (ord(char) - ord("0"))
        if not _LLONG_MIN <= result <= _LLONG_MAX:
            return 0 if sign < 0 else -1
    return _to_int32(result)


def itoa(number: int) -> str:
    """Return the decimal representation of ``number``."""
    return str(number)


def split(text: str, separator: str) -> List[str]:
    """Split ``text`` on the single character ``separator``, dropping empty parts."""
    if len(separator) > 1:
        raise ValueError("separator must be a single character")
    if not separator:
        return [text] if text else []
    return [part for part in text.split(separator) if part]


def join(first: str, second: str) -> str:
    """Return ``first`` followed by ``second``."""
    return first + second


def trim(text: str, chars: str) -> str:
    """Remove every character found in ``chars`` from both ends of ``text``."""
    return text.strip(chars) if chars else text


def substring(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A ``start`` at or past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def duplicate(text: str) -> str:
    """Return a copy of ``text``."""
    return str(text)


def iter_indexed(
    chars: MutableSequence[str],
    func: Callable[[int, str], Optional[str]],
) -> None:
    """Call ``func(index, char)`` for each element, in order.

    A value other than None returned by ``func`` replaces the element in place.
    """
    for index, char in enumerate(list(chars)):
        replacement = func(index, char)
        if replacement is not None:
            chars[index] = replacement


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` applied to every character."""
    return "".join(func(index, char) for index, char in enumerate(text))