"""A small printf supporting the c, s, p, d, i, u, x, X and % conversions."""

from __future__ import annotations

import sys
from typing import Any, Callable, Dict, Iterator, Tuple

_MISSING = object()


def _wrap_signed32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def _require_int(value: Any, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} expects an integer, got {type(value).__name__}")
    return value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c expects a single character")
        return value
    return chr(_require_int(value, "c") & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string, got {type(value).__name__}")
    return value


def _pointer(value: Any) -> str:
    if value is None:
        address = 0
    elif isinstance(value, int) and not isinstance(value, bool):
        address = value & (2**64 - 1)
    else:
        address = id(value)
    return f"0x{address:x}"


def _signed(value: Any) -> str:
    return str(_wrap_signed32(_require_int(value, "d")))


def _unsigned(value: Any) -> str:
    return str(_require_int(value, "u") & 0xFFFFFFFF)


def _hex_lower(value: Any) -> str:
    return format(_require_int(value, "x") & 0xFFFFFFFF, "x")


def _hex_upper(value: Any) -> str:
    return format(_require_int(value, "X") & 0xFFFFFFFF, "X")


_CONVERTERS: Dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": _signed,
    "i": _signed,
    "u": _unsigned,
    "x": _hex_lower,
    "X": _hex_upper,
}


def _next_arg(values: Iterator[Any], spec: str) -> Any:
    value = next(values, _MISSING)
    if value is _MISSING:
        raise TypeError(f"not enough arguments for %{spec}")
    return value


def _render(template: str, args: Tuple[Any, ...]) -> Tuple[str, bool]:
    """Return the formatted text and whether the template ended cleanly.

    A template ending in a lone ``%`` is not clean: the text before it is
    still produced.
    """
    values = iter(args)
    chars = iter(template)
    parts = []
    for char in chars:
        if char != "%":
            parts.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            return "".join(parts), False
        if spec == "%":
            parts.append("%")
        elif spec in _CONVERTERS:
            parts.append(_CONVERTERS[spec](_next_arg(values, spec)))
        # Any other conversion character is consumed and prints nothing.
    return "".join(parts), True


def format_printf(template: str, *args: Any) -> str:
    """Return ``template`` with its conversions replaced by ``args``.

    Unknown conversions print nothing and take no argument; a trailing
    lone ``%`` is dropped. Raises TypeError for missing or mistyped
    arguments.
    """
    text, _ = _render(template, args)
    return text


def printf(template: str, *args: Any) -> int:
    """Write the formatted text to standard output.

    Returns the number of characters written, 0 when the template ends in
    a lone ``%``, and -1 if writing fails.
    """
    text, complete = _render(template, args)
    try:
        sys.stdout.write(text)
    except OSError:
        return -1
    return len(text) if complete else 0