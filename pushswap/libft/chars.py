"""ASCII character classification and case mapping on character codes."""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]


def _code(value: CharLike) -> int:
    return ord(value) if isinstance(value, str) else value


def is_alpha(code: CharLike) -> bool:
    """True for ASCII letters."""
    c = _code(code)
    return 65 <= c <= 90 or 97 <= c <= 122


def is_digit(code: CharLike) -> bool:
    """True for ASCII decimal digits."""
    return 48 <= _code(code) <= 57


def is_alnum(code: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(code) or is_digit(code)


def is_ascii(code: CharLike) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(code) <= 127


def is_print(code: CharLike) -> bool:
    """True for printable ASCII, space included."""
    return 32 <= _code(code) <= 126


def to_lower(code: CharLike) -> int:
    """Map an ASCII upper-case letter to lower case; return other codes as is."""
    c = _code(code)
    return c + 32 if 65 <= c <= 90 else c


def to_upper(code: CharLike) -> int:
    """Map an ASCII lower-case letter to upper case; return other codes as is."""
    c = _code(code)
    return c - 32 if 97 <= c <= 122 else c